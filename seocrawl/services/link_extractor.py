import logging
from typing import Callable, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class LinkExtractor:
    """Resolve every `<a href>` in an HTML body against its base URL.

    Only http(s) targets are returned; mailto:, javascript: and other
    schemes cannot be fetched and are dropped.
    """

    def __init__(self, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract_links(self, body: Optional[str], base_url: str) -> List[str]:
        if not body:
            return []
        try:
            soup = self._soup_factory(body)
        except Exception:
            logger.exception("Error parsing HTML for links from %s", base_url)
            return []

        urls = []
        for a in soup.find_all("a", href=True):
            href = (a.get("href") or "").strip()
            if not href:
                continue
            try:
                abs_url, _ = urldefrag(urljoin(base_url, href))
            except ValueError:
                logger.debug("Skipping unparsable href %r on %s", href, base_url)
                continue
            if urlparse(abs_url).scheme not in ("http", "https"):
                continue
            urls.append(abs_url)
        return urls
