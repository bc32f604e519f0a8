import threading
from typing import Optional


class CompletionTracker:
    """Counts discovery branches that are pending or running.

    Every branch is registered before its thread starts and reports `done()`
    when it returns. A parent registers its children before reporting its own
    completion, so the count only reaches zero once no branch can spawn
    another one.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending = 0

    def register(self) -> None:
        with self._cond:
            self._pending += 1

    def done(self) -> None:
        with self._cond:
            if self._pending <= 0:
                raise RuntimeError("done() called with no registered branch")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    @property
    def pending(self) -> int:
        with self._cond:
            return self._pending

    def is_quiescent(self) -> bool:
        return self.pending == 0

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no branch is pending; False if `timeout` expired first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)
