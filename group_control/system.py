import threading
from typing import Iterable, List, Optional

from simulator.core.elevator import ElevatorHandle
from simulator.core.elevator_state import Direction, ElevatorSnapshot
from simulator.errors import ChannelClosedError
from simulator.infrastructure.message_broker import MessageBroker
from .algorithms.direction_penalty import DirectionPenaltyStrategy
from .interfaces.allocation_strategy import IAllocationStrategy


class Dispatcher:
    """
    Assigns each floor request to exactly one elevator

    This is a controller, not a running worker: callers invoke
    request_elevator() synchronously. Assignment is greedy, one request at a
    time, using the pluggable allocation strategy. Elevator state is read one
    lock at a time and may be stale by the time the stop is queued; the
    assignment is best effort.

    Elevators whose command channel is closed are dropped from the fleet and
    never scored again.
    """
    def __init__(self, handles: Iterable[ElevatorHandle],
                 strategy: IAllocationStrategy = None,
                 broker: MessageBroker = None,
                 name: str = "GCS"):
        self.name = name
        self.broker = broker if broker is not None else MessageBroker()
        self.strategy = strategy if strategy is not None else DirectionPenaltyStrategy()
        self._handles: List[ElevatorHandle] = list(handles)
        self._handles_lock = threading.Lock()

        print(f"{self.broker.get_current_time():.2f} [{self.name}] Using strategy: {self.strategy.get_strategy_name()}")
        for handle in self._handles:
            print(f"{self.broker.get_current_time():.2f} [{self.name}] Elevator '{handle.name}' registered.")

    @property
    def elevators(self) -> List[ElevatorHandle]:
        """Handles still taking part in dispatching, in registration order"""
        with self._handles_lock:
            return list(self._handles)

    def request_elevator(self, floor: int, direction) -> Optional[int]:
        """
        Assign a floor request to the best-scoring elevator

        Args:
            floor: Floor where the request was made
            direction: Direction the caller wants to travel (Direction or name)

        Returns:
            Id of the elevator that received the stop, or None if no
            elevator could take it (empty or fully disconnected fleet)

        Raises:
            StateCorruptedError: If an elevator's state lock is poisoned
        """
        floor = int(floor)
        direction = Direction.parse(direction)

        while True:
            candidates = self._connected_handles()
            snapshots = [handle.read_state() for handle in candidates]
            index = self.strategy.select_elevator(floor, direction, snapshots)

            if index is None:
                print(f"{self.broker.get_current_time():.2f} [{self.name}] WARNING: No elevator available "
                      f"for floor {floor} {direction.value}. Request dropped.")
                return None

            selected = candidates[index]
            try:
                selected.add_stop(floor)
            except ChannelClosedError:
                self._remove(selected)
                continue

            score = self.strategy.score(snapshots[index], floor, direction)
            print(f"{self.broker.get_current_time():.2f} [{self.name}] Assigned floor {floor} {direction.value} "
                  f"to {selected.name} (score={score})")
            self.broker.put('gcs/hall_call_assignment', {
                'timestamp': self.broker.get_current_time(),
                'floor': floor,
                'direction': direction.value,
                'assigned_elevator': selected.id,
                'score': score,
            })
            return selected.id

    def request_status(self) -> List[int]:
        """Send a Status command to every connected elevator. Returns their ids."""
        notified = []
        for handle in self._connected_handles():
            try:
                handle.request_status()
            except ChannelClosedError:
                self._remove(handle)
                continue
            notified.append(handle.id)
        return notified

    def snapshot(self) -> List[ElevatorSnapshot]:
        """Current state of every connected elevator"""
        return [handle.read_state() for handle in self._connected_handles()]

    def shutdown(self, timeout: Optional[float] = None) -> bool:
        """
        Ask every elevator to finish its stops and stop, then wait for them

        Returns:
            True if every worker ended within the timeout (per worker)
        """
        handles = self.elevators
        for handle in handles:
            handle.shutdown()
        print(f"{self.broker.get_current_time():.2f} [{self.name}] Shutdown sent to {len(handles)} elevators.")
        return all([handle.join(timeout) for handle in handles])

    def _connected_handles(self) -> List[ElevatorHandle]:
        handles = self.elevators
        for handle in handles:
            if not handle.is_connected:
                self._remove(handle)
        return [handle for handle in handles if handle.is_connected]

    def _remove(self, handle: ElevatorHandle):
        with self._handles_lock:
            if handle not in self._handles:
                return
            self._handles = [h for h in self._handles if h is not handle]
        print(f"{self.broker.get_current_time():.2f} [{self.name}] {handle.name} disconnected, removed from dispatching.")
