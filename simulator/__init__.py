"""
Elevator Fleet - per-elevator workers

This package provides the elevator state, the threaded control loop that
moves each elevator, and the channels the dispatcher uses to reach them.
"""

__version__ = "0.1.0"

from .core.elevator_state import Direction, ElevatorSnapshot, ElevatorState
from .core.elevator import ElevatorHandle, ElevatorTiming, ElevatorWorker, spawn_elevator, spawn_fleet

from .infrastructure.command_channel import Command, CommandChannel, CommandType
from .infrastructure.message_broker import MessageBroker
from .infrastructure.state_lock import StateLock

from .errors import (
    ElevatorError,
    StateCorruptedError,
    ChannelClosedError,
    SweepInvariantError,
    ConfigError,
)

__all__ = [
    'Direction',
    'ElevatorSnapshot',
    'ElevatorState',
    'ElevatorHandle',
    'ElevatorTiming',
    'ElevatorWorker',
    'spawn_elevator',
    'spawn_fleet',
    'Command',
    'CommandChannel',
    'CommandType',
    'MessageBroker',
    'StateLock',
    'ElevatorError',
    'StateCorruptedError',
    'ChannelClosedError',
    'SweepInvariantError',
    'ConfigError',
]
