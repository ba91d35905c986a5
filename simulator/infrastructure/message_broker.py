import queue
import threading
import time
from typing import Any, Optional


class MessageBroker:
    """
    Mediates communication between components of the fleet.
    Implements a topic-based publish-subscribe model that is safe to use
    from every elevator thread and from dispatcher callers at once.
    """
    def __init__(self, verbose: bool = True, pipe_limit: int = 1000):
        """
        Initialize the message broker

        Args:
            verbose (bool): Echo every publish to the console
            pipe_limit (int): Maximum messages kept per pipe; the oldest are
                dropped once a pipe is full
        """
        self.verbose = verbose
        self.pipe_limit = pipe_limit
        self.topics = {}  # Dictionary to hold a Queue for each topic
        self._topics_lock = threading.Lock()
        self.broadcast_pipe = queue.Queue(maxsize=pipe_limit)
        self._start_time = time.monotonic()

    def get_pipe(self, topic: str) -> queue.Queue:
        """
        Get or create a communication pipe (Queue) for the specified topic
        """
        with self._topics_lock:
            if topic not in self.topics:
                self.topics[topic] = queue.Queue(maxsize=self.pipe_limit)
            return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish (put) a message to the specified topic
        """
        if self.verbose:
            print(f"{self.get_current_time():.2f} [Broker] Publish on '{topic}': {message}")
        self._put_dropping_oldest(self.broadcast_pipe, {'topic': topic, 'message': message})
        self._put_dropping_oldest(self.get_pipe(topic), message)

    def get(self, topic: str, timeout: Optional[float] = None) -> Any:
        """
        Wait to receive (get) a message from the specified topic

        Raises:
            queue.Empty: If no message arrives within the timeout
        """
        return self.get_pipe(topic).get(timeout=timeout)

    def get_broadcast_pipe(self) -> queue.Queue:
        """
        Returns the global broadcast pipe carrying every published message
        """
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """
        Seconds elapsed since the broker was created
        """
        return time.monotonic() - self._start_time

    @staticmethod
    def _put_dropping_oldest(pipe: queue.Queue, item):
        while True:
            try:
                pipe.put_nowait(item)
                return
            except queue.Full:
                try:
                    pipe.get_nowait()
                except queue.Empty:
                    # a reader emptied it first
                    pass
