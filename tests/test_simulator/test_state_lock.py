import threading

import pytest

from simulator.core.elevator_state import ElevatorState
from simulator.errors import StateCorruptedError
from simulator.infrastructure.state_lock import StateLock


def test_yields_guarded_state():
    state = ElevatorState(1)
    shared = StateLock(state)
    with shared as guarded:
        guarded.stops.add(4)
    assert guarded is state
    assert shared.snapshot().stops == (4,)
    assert shared.elevator_id == 1


def test_exception_poisons_lock():
    shared = StateLock(ElevatorState(2))
    with pytest.raises(RuntimeError):
        with shared as state:
            state.current_floor = 9
            raise RuntimeError("holder died")

    assert shared.poisoned
    with pytest.raises(StateCorruptedError) as excinfo:
        with shared:
            pass
    assert excinfo.value.elevator_id == 2

    # Lock itself was released, a second attempt fails the same way
    with pytest.raises(StateCorruptedError):
        shared.snapshot()


def test_excludes_concurrent_writers():
    shared = StateLock(ElevatorState(0))

    def bump():
        for _ in range(1000):
            with shared as state:
                state.current_floor += 1

    threads = [threading.Thread(target=bump) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert shared.snapshot().current_floor == 4000
