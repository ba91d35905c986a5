"""
Group Control Configuration

Settings of the dispatcher: which allocation strategy it uses and how that
strategy is tuned.
"""

from dataclasses import dataclass, field
from typing import Dict, Any

from group_control.algorithms import STRATEGIES
from simulator.errors import ConfigError


@dataclass
class AllocationStrategyConfig:
    """Configuration for call allocation strategy"""
    name: str = "DirectionPenalty"
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise ConfigError("allocation_strategy.name cannot be empty")


@dataclass
class GroupControlConfig:
    """
    Group Control System configuration

    Contains only control logic settings, not elevator timing.
    """
    allocation_strategy: AllocationStrategyConfig = None

    def __post_init__(self):
        # Set defaults if not provided
        if self.allocation_strategy is None:
            self.allocation_strategy = AllocationStrategyConfig()

    @classmethod
    def from_dict(cls, data: dict) -> 'GroupControlConfig':
        """Create GroupControlConfig from dictionary"""
        data = data or {}
        gc_data = data.get('group_control') or data

        alloc_data = gc_data.get('allocation_strategy') or {}
        allocation_strategy = AllocationStrategyConfig(
            name=alloc_data.get('name', 'DirectionPenalty'),
            parameters=dict(alloc_data.get('parameters') or {})
        )

        return cls(allocation_strategy=allocation_strategy)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'group_control': {
                'allocation_strategy': {
                    'name': self.allocation_strategy.name,
                    'parameters': self.allocation_strategy.parameters
                }
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        if self.allocation_strategy.name not in STRATEGIES:
            raise ConfigError(
                f"Unknown allocation strategy '{self.allocation_strategy.name}'. "
                f"Available: {', '.join(sorted(STRATEGIES))}")
        # Building the strategy checks its parameters
        self.build_strategy()

    def build_strategy(self):
        """Instantiate the configured allocation strategy"""
        strategy_cls = STRATEGIES.get(self.allocation_strategy.name)
        if strategy_cls is None:
            raise ConfigError(f"Unknown allocation strategy '{self.allocation_strategy.name}'")
        try:
            return strategy_cls(**self.allocation_strategy.parameters)
        except TypeError as exc:
            raise ConfigError(f"Invalid parameters for {self.allocation_strategy.name}: {exc}") from exc
