from pathlib import Path

import pytest
import yaml

from config import (
    FleetConfig,
    FloorRequest,
    GroupControlConfig,
    SimulationConfig,
    load_group_control_config,
    load_simulation_config,
    save_group_control_config,
    save_simulation_config
)
from group_control.algorithms.direction_penalty import DirectionPenaltyStrategy
from simulator.errors import ConfigError

SCENARIOS = Path(__file__).parent.parent.parent / 'scenarios'


class TestFleetConfig:
    def test_defaults(self):
        fleet = FleetConfig()
        assert fleet.num_elevators == 3
        assert fleet.initial_floor == 0
        timing = fleet.timing()
        assert (timing.dwell_time, timing.transit_time) == (2.0, 1.0)

    def test_empty_fleet_allowed(self):
        assert FleetConfig(num_elevators=0).num_elevators == 0

    @pytest.mark.parametrize("field", ["num_elevators", "dwell_time", "transit_time", "idle_poll_interval"])
    def test_negative_values_rejected(self, field):
        with pytest.raises(ConfigError):
            FleetConfig(**{field: -1})


class TestFloorRequest:
    def test_direction_normalized(self):
        assert FloorRequest(3, "down").direction == "DOWN"

    def test_idle_direction_rejected(self):
        with pytest.raises(ConfigError):
            FloorRequest(3, "IDLE")


class TestSimulationConfig:
    def test_from_dict(self):
        config = SimulationConfig.from_dict({
            'simulation': {
                'fleet': {'num_elevators': 2, 'initial_floor': -1, 'dwell_time': 0.5},
                'requests': [{'floor': 4, 'direction': 'UP'}, {'floor': -1, 'direction': 'down', 'delay': 1.5}],
                'run_duration': 10.0
            }
        })
        assert config.fleet.num_elevators == 2
        assert config.fleet.initial_floor == -1
        assert config.fleet.dwell_time == 0.5
        assert config.fleet.transit_time == 1.0
        assert config.requests == [FloorRequest(4, 'UP'), FloorRequest(-1, 'DOWN', 1.5)]
        assert config.run_duration == 10.0

    def test_from_empty_dict_uses_defaults(self):
        config = SimulationConfig.from_dict({})
        assert config.fleet == FleetConfig()
        assert config.requests == []

    def test_request_without_floor_rejected(self):
        with pytest.raises(ConfigError, match="floor"):
            SimulationConfig.from_dict({'simulation': {'requests': [{'direction': 'UP'}]}})

    def test_save_and_load(self, tmp_path):
        config = SimulationConfig(fleet=FleetConfig(num_elevators=4), requests=[FloorRequest(7, 'DOWN')])
        path = tmp_path / 'nested' / 'sim.yaml'
        save_simulation_config(config, path)

        assert load_simulation_config(path) == config


class TestGroupControlConfig:
    def test_defaults_build_direction_penalty(self):
        strategy = GroupControlConfig().build_strategy()
        assert isinstance(strategy, DirectionPenaltyStrategy)
        assert (strategy.passed_penalty, strategy.opposite_penalty) == (1000, 500)

    def test_parameters_reach_strategy(self):
        config = GroupControlConfig.from_dict({
            'group_control': {
                'allocation_strategy': {
                    'name': 'DirectionPenalty',
                    'parameters': {'passed_penalty': 300, 'opposite_penalty': 100}
                }
            }
        })
        strategy = config.build_strategy()
        assert (strategy.passed_penalty, strategy.opposite_penalty) == (300, 100)

    def test_null_section_uses_defaults(self, tmp_path):
        path = tmp_path / 'gc.yaml'
        path.write_text("group_control:\n")
        assert load_group_control_config(path) == GroupControlConfig()

    def test_unknown_strategy(self):
        config = GroupControlConfig.from_dict({'allocation_strategy': {'name': 'Random'}})
        with pytest.raises(ConfigError):
            config.validate()

    def test_bad_parameters(self):
        config = GroupControlConfig.from_dict({'allocation_strategy': {'parameters': {'speed': 3}}})
        with pytest.raises(ConfigError):
            config.validate()

    def test_penalty_ordering_checked_on_load(self, tmp_path):
        path = tmp_path / 'gc.yaml'
        path.write_text(yaml.safe_dump({
            'group_control': {
                'allocation_strategy': {'parameters': {'passed_penalty': 10, 'opposite_penalty': 50}}
            }
        }))
        with pytest.raises(ConfigError):
            load_group_control_config(path)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / 'gc.yaml'
        save_group_control_config(GroupControlConfig(), path)
        assert load_group_control_config(path) == GroupControlConfig()


class TestLoader:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_simulation_config(tmp_path / 'missing.yaml')

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_simulation_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("simulation: [unclosed\n")
        with pytest.raises(ConfigError):
            load_simulation_config(path)

    @pytest.mark.parametrize("name", ["three_car_demo.yaml", "basement_rush.yaml"])
    def test_bundled_simulation_scenarios(self, name):
        config = load_simulation_config(SCENARIOS / 'simulation' / name)
        assert config.fleet.num_elevators > 0
        assert config.requests

    def test_bundled_group_control_scenario(self):
        config = load_group_control_config(SCENARIOS / 'group_control' / 'direction_penalty.yaml')
        assert config.allocation_strategy.name == 'DirectionPenalty'
