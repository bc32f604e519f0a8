import threading
from typing import Set


class Frontier:
    """
    Deduplication authority over the URLs admitted during one crawl run.

    The duplicate check, the cap check and the admission counter increment
    share one lock, so concurrent discovery branches can never admit the same
    URL twice or push the count past `max_admissions`. Admitted URLs are never
    removed.
    """

    def __init__(self, max_admissions: int):
        if max_admissions is None or int(max_admissions) <= 0:
            raise ValueError("max_admissions must be positive")
        self._max_admissions = int(max_admissions)
        self._lock = threading.Lock()
        self._admitted: Set[str] = set()
        self._count = 0

    @property
    def max_admissions(self) -> int:
        return self._max_admissions

    @property
    def admitted_count(self) -> int:
        with self._lock:
            return self._count

    def try_admit(self, url: str) -> bool:
        """Admit `url` if it is new and the cap is not reached."""
        with self._lock:
            if url in self._admitted or self._count >= self._max_admissions:
                return False
            self._admitted.add(url)
            self._count += 1
            return True

    def is_full(self) -> bool:
        with self._lock:
            return self._count >= self._max_admissions

    def is_admitted(self, url: str) -> bool:
        with self._lock:
            return url in self._admitted

    def __len__(self) -> int:
        return self.admitted_count
