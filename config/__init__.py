"""
Configuration management package

Provides configuration classes for both group control and simulation.
"""

from .group_control import (
    GroupControlConfig,
    AllocationStrategyConfig
)

from .simulation import (
    SimulationConfig,
    FleetConfig,
    FloorRequest
)

from .config_loader import (
    ConfigLoader,
    load_group_control_config,
    load_simulation_config,
    save_group_control_config,
    save_simulation_config
)

__all__ = [
    # Group control
    'GroupControlConfig',
    'AllocationStrategyConfig',

    # Simulation
    'SimulationConfig',
    'FleetConfig',
    'FloorRequest',

    # Loader
    'ConfigLoader',
    'load_group_control_config',
    'load_simulation_config',
    'save_group_control_config',
    'save_simulation_config',
]
