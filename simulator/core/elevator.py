import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..errors import ChannelClosedError, ConfigError, SweepInvariantError
from ..infrastructure.command_channel import Command, CommandChannel, CommandType
from ..infrastructure.message_broker import MessageBroker
from ..infrastructure.state_lock import StateLock
from .elevator_state import Direction, ElevatorSnapshot, ElevatorState


@dataclass(frozen=True)
class ElevatorTiming:
    """Per-tick delays of an elevator worker (seconds)"""
    dwell_time: float = 2.0  # pause at a floor where the car stops
    transit_time: float = 1.0  # time to pass one floor
    idle_poll_interval: float = 0.1  # longest wait for a command while idle, 0 waits until one arrives

    def __post_init__(self):
        if self.dwell_time < 0:
            raise ConfigError("dwell_time cannot be negative")
        if self.transit_time < 0:
            raise ConfigError("transit_time cannot be negative")
        if self.idle_poll_interval < 0:
            raise ConfigError("idle_poll_interval cannot be negative")

    @classmethod
    def instant(cls) -> 'ElevatorTiming':
        """Timing without any delay (tests, batch runs)"""
        return cls(dwell_time=0.0, transit_time=0.0, idle_poll_interval=0.0)


@dataclass(frozen=True)
class TickResult:
    """Outcome of one worker tick"""
    floor: int
    direction: Direction
    moved: bool
    serviced: bool


class ElevatorWorker:
    """
    Control loop of one elevator

    Each tick drains the command channel, decides the next floor with a
    direction-persistent sweep and moves exactly one floor. The worker is the
    only writer of its ElevatorState; all mutation happens under the state
    lock and every delay happens after releasing it.
    """

    def __init__(self, elevator_id: int, channel: CommandChannel, shared: StateLock,
                 broker: MessageBroker, timing: ElevatorTiming = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.id = elevator_id
        self.name = f"Elevator_{elevator_id}"
        self.channel = channel
        self.shared = shared
        self.broker = broker
        self.timing = timing if timing is not None else ElevatorTiming()
        self._sleep = sleep
        self.status_topic = f"elevator/{self.name}/status"
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> 'ElevatorWorker':
        self._thread = threading.Thread(target=self.run, name=self.name, daemon=True)
        self._thread.start()
        return self

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the loop to end. Returns True once it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def run(self):
        """
        Main loop. Runs until the channel is closed and drained and every
        pending stop has been serviced.
        """
        print(f"{self.broker.get_current_time():.2f} [{self.name}] Operational.")
        try:
            while True:
                result = self.step()
                if result.serviced:
                    self._sleep(self.timing.dwell_time)
                elif result.moved:
                    self._sleep(self.timing.transit_time)
                elif self.channel.exhausted:
                    break
                else:
                    self.channel.wait(self.timing.idle_poll_interval or None)
        except Exception as exc:
            self.error = exc
            print(f"{self.broker.get_current_time():.2f} [{self.name}] FATAL: {exc!r}. Elevator taken out of service.")
            raise
        finally:
            # No one may send to a worker that is no longer running
            self.channel.close()
        print(f"{self.broker.get_current_time():.2f} [{self.name}] Shut down at floor {result.floor}.")

    def step(self) -> TickResult:
        """Run one tick (drain, decide, apply) without any delay"""
        for command in self.channel.drain():
            self._handle_command(command)

        with self.shared as state:
            origin = state.current_floor
            result = self._advance(state)

        now = self.broker.get_current_time()
        if result.serviced:
            print(f"{now:.2f} [{self.name}] Stopped at floor {result.floor}")
        elif result.moved:
            print(f"{now:.2f} [{self.name}] Passing floor {result.floor} ({origin} -> {result.floor})")
        return result

    def _handle_command(self, command: Command):
        if command.command_type == CommandType.ADD_STOP:
            with self.shared as state:
                added = state.add_stop(command.floor)
            if added:
                print(f"{self.broker.get_current_time():.2f} [{self.name}] Received request for floor {command.floor}")
        elif command.command_type == CommandType.STATUS:
            self.report_status()
        elif command.command_type == CommandType.SHUTDOWN:
            print(f"{self.broker.get_current_time():.2f} [{self.name}] Shutdown requested, finishing pending stops.")
            self.channel.close()
        else:
            raise NotImplementedError(f"Unknown command type {command.command_type}")

    def report_status(self) -> ElevatorSnapshot:
        """Publish the current state on the status topic"""
        snapshot = self.shared.snapshot()
        print(f"{self.broker.get_current_time():.2f} [{self.name}] Floor {snapshot.current_floor}, "
              f"Direction {snapshot.direction.value}, Stops: {list(snapshot.stops)}")
        status_message = {'timestamp': self.broker.get_current_time()}
        status_message.update(snapshot.to_dict())
        self.broker.put(self.status_topic, status_message)
        return snapshot

    def _advance(self, state: ElevatorState) -> TickResult:
        if not state.stops:
            state.direction = Direction.IDLE
            return TickResult(state.current_floor, Direction.IDLE, moved=False, serviced=False)

        if state.current_floor in state.stops:
            # Requested at the floor the car is standing on
            state.stops.discard(state.current_floor)
            return TickResult(state.current_floor, state.direction, moved=False, serviced=True)

        origin = state.current_floor
        state.current_floor = self._next_floor(state)
        serviced = state.current_floor in state.stops
        if serviced:
            state.stops.discard(state.current_floor)
        return TickResult(state.current_floor, state.direction,
                          moved=state.current_floor != origin, serviced=serviced)

    @staticmethod
    def _next_floor(state: ElevatorState) -> int:
        """Pick the direction for this tick and return the floor one step along it"""
        floor = state.current_floor

        if state.direction == Direction.UP:
            if state.stop_above() is not None:
                return floor + 1
            state.direction = Direction.DOWN
            return floor - 1 if state.stop_at_or_below() is not None else floor

        if state.direction == Direction.DOWN:
            if state.stop_below() is not None:
                return floor - 1
            state.direction = Direction.UP
            return floor + 1 if state.stop_at_or_above() is not None else floor

        up_stop = state.stop_above()
        down_stop = state.stop_at_or_below()
        if up_stop is None and down_stop is None:
            raise SweepInvariantError(
                f"Elevator {state.id} is idle at floor {floor} with stops {sorted(state.stops)} "
                f"but none above or below")

        # Ties go up
        if down_stop is None or (up_stop is not None and up_stop - floor <= floor - down_stop):
            state.direction = Direction.UP
            return floor + 1
        state.direction = Direction.DOWN
        return floor - 1


class ElevatorHandle:
    """
    Dispatcher-side proxy of one worker: its command sender plus read
    access to the lock-protected state.
    """

    def __init__(self, elevator_id: int, channel: CommandChannel, shared: StateLock,
                 worker: Optional[ElevatorWorker] = None):
        self.id = elevator_id
        self.name = f"Elevator_{elevator_id}"
        self.channel = channel
        self.shared = shared
        self.worker = worker

    @property
    def is_connected(self) -> bool:
        return not self.channel.closed

    def read_state(self) -> ElevatorSnapshot:
        return self.shared.snapshot()

    def send(self, command: Command):
        self.channel.send(command)

    def add_stop(self, floor: int):
        self.send(Command.add_stop(floor))

    def request_status(self):
        self.send(Command.status())

    def shutdown(self):
        """Ask the worker to finish its pending stops and stop"""
        try:
            self.send(Command.shutdown())
        except ChannelClosedError:
            # Already shut down
            return

    def join(self, timeout: Optional[float] = None) -> bool:
        if self.worker is None:
            return True
        return self.worker.join(timeout)

    def __repr__(self) -> str:
        return f"<ElevatorHandle {self.id} connected={self.is_connected}>"


def spawn_elevator(elevator_id: int, timing: ElevatorTiming = None, broker: MessageBroker = None,
                   initial_floor: int = 0, sleep: Callable[[float], None] = time.sleep) -> ElevatorHandle:
    """
    Start one elevator worker thread and return its handle
    """
    if broker is None:
        broker = MessageBroker()
    shared = StateLock(ElevatorState(elevator_id, current_floor=initial_floor))
    channel = CommandChannel(elevator_id)
    worker = ElevatorWorker(elevator_id, channel, shared, broker, timing=timing, sleep=sleep)
    worker.start()
    return ElevatorHandle(elevator_id, channel, shared, worker=worker)


def spawn_fleet(num_elevators: int, timing: ElevatorTiming = None, broker: MessageBroker = None,
                initial_floor: int = 0) -> List[ElevatorHandle]:
    """Start num_elevators workers with ids 0..num_elevators-1"""
    if broker is None:
        broker = MessageBroker()
    return [
        spawn_elevator(elevator_id, timing=timing, broker=broker, initial_floor=initial_floor)
        for elevator_id in range(num_elevators)
    ]
