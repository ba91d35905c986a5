import sys
import time
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from simulator.core.elevator import ElevatorHandle, ElevatorTiming, ElevatorWorker
from simulator.core.elevator_state import Direction, ElevatorState
from simulator.infrastructure.command_channel import CommandChannel
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.state_lock import StateLock


@pytest.fixture
def broker():
    return MessageBroker(verbose=False)


@pytest.fixture
def make_worker(broker):
    """Build an unstarted worker with the given state; drive it with step()"""
    def _make(elevator_id=0, current_floor=0, direction=Direction.IDLE, stops=()):
        state = ElevatorState(elevator_id, current_floor=current_floor, direction=direction, stops=set(stops))
        return ElevatorWorker(elevator_id, CommandChannel(elevator_id), StateLock(state), broker,
                              timing=ElevatorTiming.instant())
    return _make


@pytest.fixture
def make_handle(make_worker):
    """Build a handle whose worker is not running, so its state stays put"""
    def _make(elevator_id=0, current_floor=0, direction=Direction.IDLE, stops=()):
        worker = make_worker(elevator_id, current_floor, direction, stops)
        return ElevatorHandle(elevator_id, worker.channel, worker.shared, worker=worker)
    return _make


def wait_for(predicate, timeout=5.0, interval=0.005):
    """Poll predicate until it holds or the timeout expires"""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def wait_until():
    return wait_for
