"""Protocol (interface) definitions for the crawl collaborators.

Kept small so alternate implementations (fake transports, in-memory stores)
can stand in for the real ones in tests.
"""

from typing import List, Optional, Protocol

from seocrawl.domain import CrawlStatistics, HttpResponse, PageRecord


class Transport(Protocol):
    def fetch(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        """Fetch `url`; raise `HttpFetchError` on network-level failure."""
        ...


class LinkExtractorProtocol(Protocol):
    def extract_links(self, body: Optional[str], base_url: str) -> List[str]: ...


class PageParser(Protocol):
    def extract_fields(self, response: HttpResponse) -> PageRecord: ...


class CrawlStore(Protocol):
    def initialize(self) -> None: ...

    def upsert_page(self, record: PageRecord) -> None: ...

    def record_crawl_stats(self, stats: CrawlStatistics) -> None: ...
