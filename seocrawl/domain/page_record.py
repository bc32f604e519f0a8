from datetime import datetime
from typing import Optional


class PageRecord:
    """SEO fields extracted from one scraped page.

    Created fresh per scrape and handed to the store; the store keys it by `url`.
    """

    def __init__(self, url: str, title: Optional[str] = None, h1: Optional[str] = None, meta_description: Optional[str] = None, status_code: Optional[int] = None, crawled_at: Optional[datetime] = None):
        self.url = url
        self.title = title
        self.h1 = h1
        self.meta_description = meta_description
        self.status_code = status_code
        self.crawled_at = crawled_at

    def __eq__(self, other):
        if not isinstance(other, PageRecord):
            return NotImplemented
        return (
            self.url == other.url
            and self.title == other.title
            and self.h1 == other.h1
            and self.meta_description == other.meta_description
            and self.status_code == other.status_code
            and self.crawled_at == other.crawled_at
        )

    def __repr__(self):
        return f"<PageRecord url={self.url} status={self.status_code}>"
