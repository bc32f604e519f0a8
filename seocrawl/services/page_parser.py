import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from seocrawl.domain import HttpResponse, PageRecord
from seocrawl.exceptions import PageParseError
from seocrawl.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class SeoPageParser:
    """Extract title, first H1 and meta description from an HTML response."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
        clock: Callable = utc_now,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))
        self._clock = clock

    @staticmethod
    def _text(tag) -> Optional[str]:
        if tag is None:
            return None
        text = tag.get_text(strip=True)
        return text or None

    def _meta_description(self, soup: BeautifulSoup) -> Optional[str]:
        for meta in soup.find_all("meta"):
            name = (meta.get("name") or "").strip().lower()
            if name == "description":
                content = meta.get("content")
                return content.strip() if isinstance(content, str) else None
        return None

    def extract_fields(self, response: HttpResponse) -> PageRecord:
        url = response.url
        if not url:
            raise PageParseError("<unknown>", "response has no URL")
        if not response.text:
            raise PageParseError(url, "empty body")
        try:
            soup = self._soup_factory(response.text)
        except Exception as e:
            raise PageParseError(url, str(e)) from e

        return PageRecord(
            url=url,
            title=self._text(soup.find("title")),
            h1=self._text(soup.find("h1")),
            meta_description=self._meta_description(soup),
            status_code=response.status_code,
            crawled_at=self._clock(),
        )
