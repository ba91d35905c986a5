"""
Elevator state

Passive data owned by one elevator worker: position, sweep direction and
the set of pending stops. The worker is the only writer; the dispatcher
reads it through a snapshot taken under the state lock.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, Set, Tuple


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"

    @classmethod
    def parse(cls, value) -> 'Direction':
        """Accept a Direction or its (case-insensitive) name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Invalid direction '{value}'. Must be one of UP, DOWN, IDLE") from None


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Immutable copy of an elevator state at one instant"""
    id: int
    current_floor: int
    direction: Direction
    stops: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'current_floor': self.current_floor,
            'direction': self.direction.value,
            'stops': list(self.stops),
        }


@dataclass
class ElevatorState:
    """Mutable state of one elevator"""
    id: int
    current_floor: int = 0
    direction: Direction = Direction.IDLE
    stops: Set[int] = field(default_factory=set)

    def __setattr__(self, name, value):
        # id is fixed for the lifetime of the state
        if name == 'id' and 'id' in self.__dict__:
            raise AttributeError("ElevatorState.id is immutable")
        super().__setattr__(name, value)

    def add_stop(self, floor: int) -> bool:
        """Add a pending stop. Returns False if it was already pending."""
        if floor in self.stops:
            return False
        self.stops.add(floor)
        return True

    def stop_above(self) -> Optional[int]:
        """Nearest stop strictly above the current floor"""
        return min((s for s in self.stops if s > self.current_floor), default=None)

    def stop_at_or_above(self) -> Optional[int]:
        return min((s for s in self.stops if s >= self.current_floor), default=None)

    def stop_below(self) -> Optional[int]:
        """Nearest stop strictly below the current floor"""
        return max((s for s in self.stops if s < self.current_floor), default=None)

    def stop_at_or_below(self) -> Optional[int]:
        return max((s for s in self.stops if s <= self.current_floor), default=None)

    def snapshot(self) -> ElevatorSnapshot:
        return ElevatorSnapshot(
            id=self.id,
            current_floor=self.current_floor,
            direction=self.direction,
            stops=tuple(sorted(self.stops)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.snapshot().to_dict()
