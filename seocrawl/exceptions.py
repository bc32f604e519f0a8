"""Custom exceptions for seocrawl services."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageParseError(Exception):
    """Raised when SEO fields cannot be extracted from a fetched page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Parse failed for {url}: {reason}")


class CrawlConfigError(ValueError):
    """Raised when crawl settings are invalid (e.g. non-positive worker count)."""


class StoreInitError(Exception):
    """Raised when the page store cannot be prepared; fatal to a crawl run."""

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(f"Store initialization failed: {original}")


class WorklistClosedError(Exception):
    """Raised on push to, pop from a drained, or re-close of a closed worklist."""
