"""Crawl statistics data model."""
from datetime import datetime
from typing import NamedTuple


class CrawlStatistics(NamedTuple):
    """Final counts for one crawl run, persisted once at shutdown."""

    total_pages: int
    """Work items popped by the worker pool"""

    success_pages: int
    """Pages fetched, parsed and stored"""

    failed_pages: int
    """Pages whose fetch, parse or store step failed"""

    duration_seconds: float
    start_url: str
    crawled_at: datetime
