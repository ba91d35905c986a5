"""
Simulation Configuration

Fleet timing and the demo run driven by main.py.
"""

from dataclasses import dataclass, field
from typing import List

from simulator.core.elevator import ElevatorTiming
from simulator.core.elevator_state import Direction
from simulator.errors import ConfigError


@dataclass
class FleetConfig:
    """Elevator fleet specifications"""
    num_elevators: int = 3
    initial_floor: int = 0
    dwell_time: float = 2.0  # seconds stopped at a floor
    transit_time: float = 1.0  # seconds per floor passed
    idle_poll_interval: float = 0.1  # seconds

    def __post_init__(self):
        if self.num_elevators < 0:
            raise ConfigError("num_elevators cannot be negative")
        if self.dwell_time < 0:
            raise ConfigError("dwell_time cannot be negative")
        if self.transit_time < 0:
            raise ConfigError("transit_time cannot be negative")
        if self.idle_poll_interval < 0:
            raise ConfigError("idle_poll_interval cannot be negative")

    def timing(self) -> ElevatorTiming:
        return ElevatorTiming(
            dwell_time=self.dwell_time,
            transit_time=self.transit_time,
            idle_poll_interval=self.idle_poll_interval
        )


@dataclass
class FloorRequest:
    """One scripted request of the demo run"""
    floor: int
    direction: str = "UP"
    delay: float = 0.0  # seconds to wait before submitting

    def __post_init__(self):
        direction = Direction.parse(self.direction)
        if direction == Direction.IDLE:
            raise ConfigError("request direction must be 'UP' or 'DOWN'")
        self.direction = direction.value
        if self.delay < 0:
            raise ConfigError("request delay cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'FloorRequest':
        if not isinstance(data, dict) or 'floor' not in data:
            raise ConfigError("request is missing 'floor'")
        return cls(
            floor=data['floor'],
            direction=data.get('direction', 'UP'),
            delay=data.get('delay', 0.0)
        )


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines the fleet settings with the scripted requests of a demo run.
    """
    fleet: FleetConfig = None
    requests: List[FloorRequest] = field(default_factory=list)

    # Run control
    run_duration: float = 30.0  # seconds before shutdown
    status_interval: float = 2.0  # seconds between Status rounds, 0 = never
    verbose_broker: bool = False

    def __post_init__(self):
        if self.fleet is None:
            self.fleet = FleetConfig()
        if self.run_duration < 0:
            raise ConfigError("run_duration cannot be negative")
        if self.status_interval < 0:
            raise ConfigError("status_interval cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = (data or {}).get('simulation', data or {})

        fleet_data = sim_data.get('fleet') or {}
        fleet = FleetConfig(
            num_elevators=fleet_data.get('num_elevators', 3),
            initial_floor=fleet_data.get('initial_floor', 0),
            dwell_time=fleet_data.get('dwell_time', 2.0),
            transit_time=fleet_data.get('transit_time', 1.0),
            idle_poll_interval=fleet_data.get('idle_poll_interval', 0.1)
        )

        requests = [
            FloorRequest.from_dict(request_data)
            for request_data in sim_data.get('requests') or []
        ]

        return cls(
            fleet=fleet,
            requests=requests,
            run_duration=sim_data.get('run_duration', 30.0),
            status_interval=sim_data.get('status_interval', 2.0),
            verbose_broker=sim_data.get('verbose_broker', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'simulation': {
                'fleet': {
                    'num_elevators': self.fleet.num_elevators,
                    'initial_floor': self.fleet.initial_floor,
                    'dwell_time': self.fleet.dwell_time,
                    'transit_time': self.fleet.transit_time,
                    'idle_poll_interval': self.fleet.idle_poll_interval
                },
                'requests': [
                    {'floor': r.floor, 'direction': r.direction, 'delay': r.delay}
                    for r in self.requests
                ],
                'run_duration': self.run_duration,
                'status_interval': self.status_interval,
                'verbose_broker': self.verbose_broker
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        if self.requests and self.fleet.num_elevators == 0:
            # An empty fleet is legal, but every scripted request would be dropped
            print("[Config] WARNING: requests configured for an empty fleet; they will be dropped")
