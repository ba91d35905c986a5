#!/usr/bin/env python3
"""
Run the demo fleet with the HTTP control panel attached

The scripted requests from the simulation config run in the main thread
while the Flask server accepts extra requests on http://localhost:5000.
"""
import sys
import threading
import time

from config import GroupControlConfig, SimulationConfig, load_group_control_config, load_simulation_config
from main import build_dispatcher, run_simulation
from visualizer.http_server import run_server


def main():
    """Main entry point"""
    sim_config = load_simulation_config(sys.argv[1]) if len(sys.argv) > 1 else SimulationConfig()
    gc_config = load_group_control_config(sys.argv[2]) if len(sys.argv) > 2 else GroupControlConfig()

    print("=" * 60)
    print("Elevator Dispatch Control Panel")
    print("=" * 60)

    dispatcher = build_dispatcher(sim_config, gc_config)

    # Start HTTP server in separate thread
    http_thread = threading.Thread(target=run_server, args=(dispatcher,),
                                   kwargs={'port': 5000}, daemon=True)
    http_thread.start()

    # Wait for server to start
    time.sleep(1.0)

    print("\n" + "=" * 60)
    print("Starting simulation...")
    print("=" * 60 + "\n")

    try:
        run_simulation(sim_config, gc_config, dispatcher=dispatcher)
    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user (Ctrl+C).")
        dispatcher.shutdown(timeout=1.0)


if __name__ == '__main__':
    main()
