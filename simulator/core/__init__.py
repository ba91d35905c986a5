"""Core fleet entities"""

from .elevator_state import Direction, ElevatorSnapshot, ElevatorState
from .elevator import (
    ElevatorHandle,
    ElevatorTiming,
    ElevatorWorker,
    TickResult,
    spawn_elevator,
    spawn_fleet,
)

__all__ = [
    'Direction',
    'ElevatorSnapshot',
    'ElevatorState',
    'ElevatorHandle',
    'ElevatorTiming',
    'ElevatorWorker',
    'TickResult',
    'spawn_elevator',
    'spawn_fleet',
]
