"""
Command Channel

Ordered, unbounded queue carrying commands from the dispatcher to a single
elevator worker. Sending never blocks; the worker drains whatever is queued
at the start of each tick without waiting for more.
"""

import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..errors import ChannelClosedError


class CommandType(Enum):
    ADD_STOP = 1
    STATUS = 2
    SHUTDOWN = 3


@dataclass(frozen=True)
class Command:
    command_type: CommandType
    floor: Optional[int] = None

    @classmethod
    def add_stop(cls, floor: int) -> 'Command':
        return cls(CommandType.ADD_STOP, int(floor))

    @classmethod
    def status(cls) -> 'Command':
        return cls(CommandType.STATUS)

    @classmethod
    def shutdown(cls) -> 'Command':
        return cls(CommandType.SHUTDOWN)


class CommandChannel:
    """
    FIFO command pipe owned by one elevator

    Once closed, no further commands are accepted, but anything already
    queued is still handed out by drain(). The channel is exhausted when it
    is closed and nothing is left to drain.
    """

    def __init__(self, owner_id: int):
        self.owner_id = owner_id
        self._queue: 'queue.Queue[Command]' = queue.Queue()
        self._pending = threading.Event()
        self._closed = False
        # Serializes send() against close() so nothing slips in after closing
        self._send_lock = threading.Lock()

    def send(self, command: Command):
        """
        Queue a command for the worker

        Raises:
            ChannelClosedError: If the channel has been closed
        """
        with self._send_lock:
            if self._closed:
                raise ChannelClosedError(self.owner_id)
            self._queue.put(command)
        self._pending.set()

    def drain(self) -> List[Command]:
        """Return every command queued so far, in send order, without waiting"""
        self._pending.clear()
        commands = []
        while True:
            try:
                commands.append(self._queue.get_nowait())
            except queue.Empty:
                return commands

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until a command is sent, the channel is closed or the timeout
        expires. Returns True if woken by the channel.
        """
        return self._pending.wait(timeout)

    def close(self):
        with self._send_lock:
            self._closed = True
        # Wake an idle worker so it notices the close promptly
        self._pending.set()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def exhausted(self) -> bool:
        return self._closed and self._queue.empty()

    def __len__(self) -> int:
        return self._queue.qsize()
