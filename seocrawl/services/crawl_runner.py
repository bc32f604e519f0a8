import enum
import logging
import threading
import time
from typing import Optional

from seocrawl.domain import CrawlSettings, CrawlStatistics, Frontier
from seocrawl.exceptions import StoreInitError
from seocrawl.services.completion import CompletionTracker
from seocrawl.services.crawl_statistics import CrawlCounters
from seocrawl.services.discovery import DiscoveryEngine
from seocrawl.services.protocols import CrawlStore, LinkExtractorProtocol, PageParser, Transport
from seocrawl.services.worker_pool import WorkerPool
from seocrawl.services.worklist import Worklist
from seocrawl.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class CrawlState(enum.Enum):
    INIT = "init"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


class CrawlRunner:
    """Runs one crawl: discovery and scraping in parallel, then statistics.

    Owns the frontier, worklist, completion tracker and counters of its run.
    Collaborators are injected; see `seocrawl.container` for the wiring.
    A runner executes at most one crawl.
    """

    def __init__(
        self,
        *,
        transport: Transport,
        link_extractor: LinkExtractorProtocol,
        page_parser: PageParser,
        store: CrawlStore,
        discovery_timeout: float = 10.0,
        scrape_timeout: float = 30.0,
        max_concurrent_branches: Optional[int] = None,
    ):
        self.transport = transport
        self.link_extractor = link_extractor
        self.page_parser = page_parser
        self.store = store
        self.discovery_timeout = discovery_timeout
        self.scrape_timeout = scrape_timeout
        self.max_concurrent_branches = max_concurrent_branches
        self._state = CrawlState.INIT
        self._state_lock = threading.Lock()
        self.frontier: Optional[Frontier] = None
        self.worklist: Optional[Worklist] = None
        self.tracker: Optional[CompletionTracker] = None
        self.counters = CrawlCounters()

    @property
    def state(self) -> CrawlState:
        with self._state_lock:
            return self._state

    def _set_state(self, state: CrawlState) -> None:
        with self._state_lock:
            self._state = state
        logger.debug("Crawl state -> %s", state.value)

    def _claim(self) -> None:
        with self._state_lock:
            if self._state is not CrawlState.INIT:
                raise RuntimeError("CrawlRunner instances run a single crawl")
            self._state = CrawlState.RUNNING

    def run_crawl(self, seed_url: str, max_admissions: int = 100, worker_count: int = 5, worklist_capacity: int = 100) -> CrawlStatistics:
        """Crawl from `seed_url` and block until every page is scraped.

        Raises `CrawlConfigError` for invalid settings and `StoreInitError`
        when the store cannot be prepared; no thread is started in either case.
        Per-page failures are only counted.
        """
        settings = CrawlSettings(
            seed_url=seed_url,
            max_admissions=max_admissions,
            worker_count=worker_count,
            worklist_capacity=worklist_capacity,
            discovery_timeout=self.discovery_timeout,
            scrape_timeout=self.scrape_timeout,
            max_concurrent_branches=self.max_concurrent_branches,
        )
        return self.run(settings)

    def run(self, settings: CrawlSettings) -> CrawlStatistics:
        if self.state is not CrawlState.INIT:
            raise RuntimeError("CrawlRunner instances run a single crawl")
        started = time.monotonic()

        try:
            self.store.initialize()
        except StoreInitError:
            raise
        except Exception as e:
            raise StoreInitError(e) from e

        self._claim()
        self.frontier = Frontier(settings.max_admissions)
        self.worklist = Worklist(settings.worklist_capacity)
        pool = WorkerPool(
            self.worklist,
            self.transport,
            self.page_parser,
            self.store,
            self.counters,
            worker_count=settings.worker_count,
            fetch_timeout=settings.scrape_timeout,
        )
        discovery = DiscoveryEngine(
            self.transport,
            self.link_extractor,
            fetch_timeout=settings.discovery_timeout,
            max_concurrent_branches=settings.max_concurrent_branches,
        )

        pool.start()
        self.tracker = discovery.discover(settings.seed_url, self.frontier, self.worklist)

        self.tracker.wait()
        logger.info(
            "Discovery finished: %d admitted, %d queued for scraping",
            self.frontier.admitted_count,
            self.worklist.pushed_count,
        )
        self._set_state(CrawlState.DRAINING)
        self.worklist.close()
        pool.join()

        attempted, succeeded, failed = self.counters.snapshot()
        stats = CrawlStatistics(
            total_pages=attempted,
            success_pages=succeeded,
            failed_pages=failed,
            duration_seconds=time.monotonic() - started,
            start_url=settings.seed_url,
            crawled_at=utc_now(),
        )
        try:
            self.store.record_crawl_stats(stats)
        except Exception as e:
            logger.error("Failed to record crawl stats for %s: %s", settings.seed_url, e, exc_info=True)

        self._set_state(CrawlState.DONE)
        logger.info(
            "Scraping complete! Success: %d, Failed: %d, Duration: %.2fs",
            stats.success_pages,
            stats.failed_pages,
            stats.duration_seconds,
        )
        return stats
