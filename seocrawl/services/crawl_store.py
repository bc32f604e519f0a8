import logging
import threading
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from seocrawl.db.models import Base
from seocrawl.domain import CrawlStatistics, PageRecord
from seocrawl.exceptions import StoreInitError
from seocrawl.repository import CrawlStatsRepository, PagesRepository

logger = logging.getLogger(__name__)


class SqlCrawlStore:
    """Store that persists page records and crawl statistics through SQLAlchemy.

    Writes from concurrent workers are serialized through a single lock.
    """

    def __init__(self, engine, pages_repo: PagesRepository, stats_repo: CrawlStatsRepository):
        self.engine = engine
        self.pages_repo = pages_repo
        self.stats_repo = stats_repo
        self._write_lock = threading.Lock()

    def initialize(self) -> None:
        """Create the schema; any failure is fatal to the crawl."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StoreInitError(e) from e
        logger.info("Store ready at %s", self.engine.url.render_as_string(hide_password=True))

    def upsert_page(self, record: PageRecord) -> None:
        with self._write_lock:
            self.pages_repo.upsert_page(record)

    def record_crawl_stats(self, stats: CrawlStatistics) -> None:
        with self._write_lock:
            self.stats_repo.insert_stats(stats)


class InMemoryCrawlStore:
    """Thread-safe dict-backed store with the same contract as `SqlCrawlStore`."""

    def __init__(self):
        self._lock = threading.Lock()
        self._pages: Dict[str, PageRecord] = {}
        self._stats: List[CrawlStatistics] = []
        self.initialized = False

    def initialize(self) -> None:
        self.initialized = True

    def upsert_page(self, record: PageRecord) -> None:
        with self._lock:
            self._pages[record.url] = record

    def record_crawl_stats(self, stats: CrawlStatistics) -> None:
        with self._lock:
            self._stats.append(stats)

    def get_page(self, url: str) -> Optional[PageRecord]:
        with self._lock:
            return self._pages.get(url)

    @property
    def pages(self) -> Dict[str, PageRecord]:
        with self._lock:
            return dict(self._pages)

    @property
    def stats(self) -> List[CrawlStatistics]:
        with self._lock:
            return list(self._stats)
