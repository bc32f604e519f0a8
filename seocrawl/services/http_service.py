import random
from typing import Callable, Optional, Sequence

import requests

from seocrawl.domain import HttpResponse
from seocrawl.exceptions import HttpFetchError

DEFAULT_USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)


def is_success(response: HttpResponse) -> bool:
    return response.status_code == 200


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection.
    When no `user_agent` is configured, each request picks one of
    `user_agents` at random.
    """

    def __init__(self, http_client: Callable, user_agent: Optional[str] = None, timeout: float = 10, user_agents: Sequence[str] = DEFAULT_USER_AGENTS, rng: Optional[random.Random] = None):
        self.http_client = http_client
        self.user_agent = user_agent
        self.timeout = timeout
        self.user_agents = tuple(user_agents)
        self._rng = rng or random.Random()

    def _pick_user_agent(self) -> str:
        if self.user_agent:
            return self.user_agent
        return self._rng.choice(self.user_agents)

    def fetch(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        """Fetch URL and return response with status code, body text, Content-Type and final URL."""
        headers = {"User-Agent": self._pick_user_agent()}
        try:
            resp = self.http_client(url, headers=headers, timeout=timeout if timeout is not None else self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')
        final_url = getattr(resp, 'url', None)
        if not isinstance(final_url, str) or not final_url:
            final_url = url

        return HttpResponse(resp.status_code, resp.text, ct, final_url)
