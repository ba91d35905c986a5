"""
Elevator Group Control System

This package provides the dispatcher and the allocation strategies it uses
to spread floor requests over a fleet of elevators.
"""

__version__ = "0.1.0"

from .system import Dispatcher
from .algorithms.direction_penalty import DirectionPenaltyStrategy
from .interfaces.allocation_strategy import IAllocationStrategy

__all__ = ['Dispatcher', 'DirectionPenaltyStrategy', 'IAllocationStrategy']
