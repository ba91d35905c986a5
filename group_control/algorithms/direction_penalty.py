"""
Direction Penalty Strategy

Distance-based elevator allocation that penalizes elevators travelling
away from the caller.
"""

from simulator.core.elevator_state import Direction, ElevatorSnapshot
from simulator.errors import ConfigError
from ..interfaces.allocation_strategy import IAllocationStrategy


class DirectionPenaltyStrategy(IAllocationStrategy):
    """
    Direction-aware distance scoring

    Selection Logic:
    - IDLE elevators: plain distance
    - Moving elevators heading the caller's way with the floor still ahead:
      plain distance, they will pass the floor anyway
    - Moving elevators heading the caller's way with the floor behind them:
      distance + passed_penalty, they need a full reversal
    - Moving elevators heading the other way:
      distance + opposite_penalty

    The penalties are policy values. Whatever they are tuned to, a reachable
    same-direction elevator must beat an opposite-direction one, which must
    beat one that already passed the floor: 0 < opposite_penalty < passed_penalty.

    Usage:
        strategy = DirectionPenaltyStrategy()
        index = strategy.select_elevator(5, Direction.UP, snapshots)
    """

    DEFAULT_PASSED_PENALTY = 1000
    DEFAULT_OPPOSITE_PENALTY = 500

    def __init__(self, passed_penalty: float = DEFAULT_PASSED_PENALTY,
                 opposite_penalty: float = DEFAULT_OPPOSITE_PENALTY):
        """
        Initialize strategy

        Args:
            passed_penalty: Added when the elevator already passed the floor
                in the requested direction
            opposite_penalty: Added when the elevator travels the other way

        Raises:
            ConfigError: If the penalties break the required ordering
        """
        if not 0 < opposite_penalty < passed_penalty:
            raise ConfigError(
                f"Penalties must satisfy 0 < opposite_penalty < passed_penalty "
                f"(got opposite_penalty={opposite_penalty}, passed_penalty={passed_penalty})")
        self.passed_penalty = passed_penalty
        self.opposite_penalty = opposite_penalty

    def score(self, elevator: ElevatorSnapshot, floor: int, direction: Direction) -> float:
        distance = abs(elevator.current_floor - floor)

        if elevator.direction == Direction.IDLE:
            return distance

        if direction != elevator.direction:
            return distance + self.opposite_penalty

        if elevator.direction == Direction.UP:
            ahead = floor >= elevator.current_floor
        else:
            ahead = floor <= elevator.current_floor

        return distance if ahead else distance + self.passed_penalty

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return f"Direction Penalty (passed={self.passed_penalty}, opposite={self.opposite_penalty})"
