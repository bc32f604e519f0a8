import logging
import threading
from typing import List

from seocrawl.exceptions import CrawlConfigError
from seocrawl.services.crawl_statistics import CrawlCounters
from seocrawl.services.protocols import CrawlStore, PageParser, Transport
from seocrawl.services.worklist import Worklist

logger = logging.getLogger(__name__)


class WorkerPool:
    """Fixed set of threads that scrape URLs from the worklist.

    Each worker fetches, parses and stores one URL at a time until the
    worklist is closed and drained. A failing page is counted and logged and
    never stops the pool.
    """

    def __init__(
        self,
        worklist: Worklist,
        transport: Transport,
        page_parser: PageParser,
        store: CrawlStore,
        counters: CrawlCounters,
        worker_count: int = 5,
        fetch_timeout: float = 30.0,
    ):
        if isinstance(worker_count, bool) or not isinstance(worker_count, int) or worker_count <= 0:
            raise CrawlConfigError(f"worker_count must be a positive integer, got {worker_count!r}")
        self.worklist = worklist
        self.transport = transport
        self.page_parser = page_parser
        self.store = store
        self.counters = counters
        self.worker_count = worker_count
        self.fetch_timeout = fetch_timeout
        self._threads: List[threading.Thread] = []

    def start(self) -> None:
        if self._threads:
            raise RuntimeError("worker pool already started")
        for i in range(self.worker_count):
            t = threading.Thread(target=self._work, name=f"scrape-worker-{i}", daemon=True)
            t.start()
            self._threads.append(t)
        logger.info("Started %d scrape workers", self.worker_count)

    def join(self) -> None:
        for t in self._threads:
            t.join()

    def _work(self) -> None:
        for url in self.worklist:
            self.counters.attempted.increment()
            try:
                self.scrape(url)
            except Exception as e:
                self.counters.failed.increment()
                logger.warning("failed to scrape %s: %s", url, e)
            else:
                self.counters.succeeded.increment()

    def scrape(self, url: str) -> None:
        """Fetch, parse and store one page; errors propagate to the caller."""
        response = self.transport.fetch(url, timeout=self.fetch_timeout)
        if not response.url:
            response = response._replace(url=url)
        record = self.page_parser.extract_fields(response)
        self.store.upsert_page(record)
        logger.debug("Scraped %s -> status %s", url, record.status_code)
