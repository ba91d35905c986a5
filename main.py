import sys
import time

# Configuration
from config import (
    GroupControlConfig,
    SimulationConfig,
    load_group_control_config,
    load_simulation_config
)

# Fleet components
from simulator.infrastructure.message_broker import MessageBroker
from simulator.core.elevator import spawn_fleet

# Dispatcher
from group_control.system import Dispatcher

SHUTDOWN_TIMEOUT = 10.0  # seconds per elevator


def build_dispatcher(sim_config: SimulationConfig, gc_config: GroupControlConfig,
                     broker: MessageBroker = None) -> Dispatcher:
    """Spawn the configured fleet and wire it to a dispatcher"""
    if broker is None:
        broker = MessageBroker(verbose=sim_config.verbose_broker)

    fleet = sim_config.fleet
    handles = spawn_fleet(
        fleet.num_elevators,
        timing=fleet.timing(),
        broker=broker,
        initial_floor=fleet.initial_floor
    )
    return Dispatcher(handles, strategy=gc_config.build_strategy(), broker=broker)


def run_simulation(sim_config: SimulationConfig = None, gc_config: GroupControlConfig = None,
                   dispatcher: Dispatcher = None) -> dict:
    """
    Run a scripted demo: submit the configured requests, poll status, shut down

    Args:
        sim_config: Fleet and request script (defaults when omitted)
        gc_config: Dispatcher settings (defaults when omitted)
        dispatcher: Already running dispatcher to drive instead of a new fleet

    Returns:
        Summary with the assignment of every request and the final snapshots
    """
    sim_config = sim_config if sim_config is not None else SimulationConfig()
    gc_config = gc_config if gc_config is not None else GroupControlConfig()

    print("\n--- Fleet Setup ---")
    if dispatcher is None:
        dispatcher = build_dispatcher(sim_config, gc_config)
    broker = dispatcher.broker
    start = time.monotonic()

    print("\n--- Submitting Requests ---")
    assignments = []
    for floor_request in sim_config.requests:
        if floor_request.delay > 0:
            time.sleep(floor_request.delay)
        assigned = dispatcher.request_elevator(floor_request.floor, floor_request.direction)
        assignments.append({
            'floor': floor_request.floor,
            'direction': floor_request.direction,
            'assigned_elevator': assigned
        })

    print("\n--- Running ---")
    while True:
        remaining = sim_config.run_duration - (time.monotonic() - start)
        if remaining <= 0:
            break
        if sim_config.status_interval > 0:
            time.sleep(min(sim_config.status_interval, remaining))
            dispatcher.request_status()
        else:
            time.sleep(remaining)

    final_states = [snapshot.to_dict() for snapshot in dispatcher.snapshot()]

    print("\n--- Shutting Down ---")
    stopped = dispatcher.shutdown(timeout=SHUTDOWN_TIMEOUT)
    if not stopped:
        print(f"{broker.get_current_time():.2f} [Main] WARNING: some elevators did not stop within {SHUTDOWN_TIMEOUT}s")

    return {
        'assignments': assignments,
        'final_states': final_states,
        'stopped': stopped
    }


if __name__ == '__main__':
    # Accept command line arguments for config files
    sim_config = load_simulation_config(sys.argv[1]) if len(sys.argv) > 1 else None
    gc_config = load_group_control_config(sys.argv[2]) if len(sys.argv) > 2 else None
    summary = run_simulation(sim_config=sim_config, gc_config=gc_config)

    print("\n--- Summary ---")
    for assignment in summary['assignments']:
        print(f"Floor {assignment['floor']} {assignment['direction']} -> elevator {assignment['assigned_elevator']}")
