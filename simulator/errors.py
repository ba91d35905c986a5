"""
Exception hierarchy for the elevator fleet
"""


class ElevatorError(Exception):
    pass


class StateCorruptedError(ElevatorError):
    """Raised when an elevator state lock was poisoned by a failing holder"""

    def __init__(self, elevator_id) -> None:
        super().__init__(f'State of elevator {elevator_id} is corrupted, a previous holder of its lock failed')
        self.elevator_id = elevator_id


class ChannelClosedError(ElevatorError):
    """Raised when sending to a command channel that has been closed"""

    def __init__(self, elevator_id) -> None:
        super().__init__(f'Command channel of elevator {elevator_id} is closed')
        self.elevator_id = elevator_id


class SweepInvariantError(ElevatorError, AssertionError):
    """Raised when the sweep reaches a decision it can never legally reach"""

    pass


class ConfigError(ElevatorError, ValueError):
    """Raised when configuration values are missing or inconsistent"""

    pass
