from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from seocrawl.exceptions import CrawlConfigError


def _require_positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CrawlConfigError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise CrawlConfigError(f"{name} must be positive, got {value}")
    return value


def _require_positive_number(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CrawlConfigError(f"{name} must be a number, got {value!r}")
    if value <= 0:
        raise CrawlConfigError(f"{name} must be positive, got {value}")
    return float(value)


@dataclass(frozen=True)
class CrawlSettings:
    """Validated settings for a single crawl run."""

    seed_url: str
    max_admissions: int = 100
    worker_count: int = 5
    worklist_capacity: int = 100
    discovery_timeout: float = 10.0
    scrape_timeout: float = 30.0
    max_concurrent_branches: Optional[int] = None

    def __post_init__(self):
        parsed = urlparse(self.seed_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise CrawlConfigError(f"seed_url must be an absolute http(s) URL, got {self.seed_url!r}")
        _require_positive_int("max_admissions", self.max_admissions)
        _require_positive_int("worker_count", self.worker_count)
        _require_positive_int("worklist_capacity", self.worklist_capacity)
        _require_positive_number("discovery_timeout", self.discovery_timeout)
        _require_positive_number("scrape_timeout", self.scrape_timeout)
        if self.max_concurrent_branches is not None:
            _require_positive_int("max_concurrent_branches", self.max_concurrent_branches)
