import threading
from collections import deque
from typing import Deque, Iterator

from seocrawl.exceptions import WorklistClosedError


class Worklist:
    """Bounded FIFO hand-off between discovery branches and scraping workers.

    `push` blocks while the queue is full, `pop` blocks while it is empty and
    open. After `close()` consumers drain the remaining items and then see
    `WorklistClosedError`; iterating the worklist stops at that point.
    """

    def __init__(self, capacity: int):
        if capacity is None or int(capacity) <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = int(capacity)
        self._items: Deque[str] = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._pushed = 0
        self._popped = 0

    def push(self, url: str) -> None:
        with self._not_full:
            while len(self._items) >= self.capacity and not self._closed:
                self._not_full.wait()
            if self._closed:
                raise WorklistClosedError(f"push to closed worklist: {url}")
            self._items.append(url)
            self._pushed += 1
            self._not_empty.notify()

    def pop(self) -> str:
        with self._not_empty:
            while not self._items and not self._closed:
                self._not_empty.wait()
            if not self._items:
                raise WorklistClosedError("worklist closed and drained")
            url = self._items.popleft()
            self._popped += 1
            self._not_full.notify()
            return url

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise WorklistClosedError("worklist already closed")
            self._closed = True
            self._not_empty.notify_all()
            self._not_full.notify_all()

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                yield self.pop()
            except WorklistClosedError:
                return

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    @property
    def pushed_count(self) -> int:
        with self._lock:
            return self._pushed

    @property
    def popped_count(self) -> int:
        with self._lock:
            return self._popped

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
