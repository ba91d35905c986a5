"""
Allocation Strategy Interface

Defines how elevators are ranked for a floor request.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from simulator.core.elevator_state import Direction, ElevatorSnapshot


class IAllocationStrategy(ABC):
    """
    Interface for elevator allocation strategies

    A strategy scores every elevator for a request; the dispatcher assigns
    the request to the lowest score. Strategies only see snapshots, never
    live state, so scoring runs without holding any elevator's lock.

    Usage Examples:
    - DirectionPenalty: distance plus penalties for wrong-way elevators
    """

    @abstractmethod
    def score(self, elevator: ElevatorSnapshot, floor: int, direction: Direction) -> float:
        """
        Cost of sending this elevator to the request

        Args:
            elevator: Snapshot of the candidate elevator
            floor: Floor where the request was made
            direction: Direction the caller wants to travel

        Returns:
            Cost of the assignment; lower is better
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy

        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass

    def select_elevator(
        self,
        floor: int,
        direction: Direction,
        elevators: Sequence[ElevatorSnapshot]
    ) -> Optional[int]:
        """
        Select the best elevator for a request

        Ties go to the elevator that comes first in `elevators`, so the
        choice is deterministic for a fixed fleet order.

        Returns:
            Index into `elevators` of the selected elevator, or None if the
            sequence is empty
        """
        best_index = None
        best_score = None

        for index, elevator in enumerate(elevators):
            score = self.score(elevator, floor, direction)
            if best_score is None or score < best_score:
                best_score = score
                best_index = index

        return best_index
