import threading
from typing import Tuple


class AtomicCounter:
    """Integer counter safe to increment from many threads.

    CPython offers no lock-free integer, so each counter owns its own lock
    and no lock is shared between counters.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self, amount: int = 1) -> int:
        with self._lock:
            self._value += amount
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class CrawlCounters:
    """Attempted / succeeded / failed page scrape counters for one crawl.

    The counters are independent, each guarded only by its own lock.
    """

    def __init__(self):
        self.attempted = AtomicCounter()
        self.succeeded = AtomicCounter()
        self.failed = AtomicCounter()

    def snapshot(self) -> Tuple[int, int, int]:
        return self.attempted.value, self.succeeded.value, self.failed.value
