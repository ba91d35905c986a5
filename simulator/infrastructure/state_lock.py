"""
State Lock

Mutual-exclusion guard around one elevator's state. The worker writes
through it and the dispatcher reads through it, one snapshot at a time.

A holder that raises while inside the lock poisons it: the state may have
been left half-updated, so every later acquisition fails with
StateCorruptedError instead of handing out untrustworthy data.
"""

import threading

from ..errors import StateCorruptedError


class StateLock:
    """
    Usage:
        shared = StateLock(ElevatorState(0))
        with shared as state:
            state.stops.add(5)
    """

    def __init__(self, state):
        self._state = state
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def elevator_id(self) -> int:
        return self._state.id

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def __enter__(self):
        self._lock.acquire()
        if self._poisoned:
            self._lock.release()
            raise StateCorruptedError(self.elevator_id)
        return self._state

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            self._poisoned = True
        self._lock.release()
        return False

    def snapshot(self):
        """Consistent copy of the guarded state"""
        with self as state:
            return state.snapshot()
