import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from seocrawl.domain import Frontier, HttpResponse
from seocrawl.exceptions import HttpFetchError
from seocrawl.services.completion import CompletionTracker
from seocrawl.services.http_service import is_success as default_is_success
from seocrawl.services.protocols import LinkExtractorProtocol, Transport
from seocrawl.services.worklist import Worklist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _DiscoveryRun:
    frontier: Frontier
    worklist: Worklist
    tracker: CompletionTracker
    branch_slots: Optional[threading.BoundedSemaphore]


class DiscoveryEngine:
    """Recursively discovers pages from a seed, one thread per branch.

    Each branch asks the frontier to admit its URL, fetches it, pushes it to
    the worklist on a 200 response and starts a child branch per extracted
    link while the admission cap is not reached. Failed fetches end the
    branch without retry. The returned `CompletionTracker` reaches zero once
    the seed branch and all of its descendants have returned.

    Links already admitted are not spawned again. Relative links resolve
    against the final URL of the response, after redirects.

    `max_concurrent_branches` bounds how many admitted branches fetch at the
    same time. It does not bound the number of threads started; `None`
    leaves the fan-out bounded only by the admission cap.
    """

    def __init__(
        self,
        transport: Transport,
        link_extractor: LinkExtractorProtocol,
        fetch_timeout: float = 10.0,
        max_concurrent_branches: Optional[int] = None,
        is_success: Callable[[HttpResponse], bool] = default_is_success,
    ):
        self.transport = transport
        self.link_extractor = link_extractor
        self.fetch_timeout = fetch_timeout
        self.max_concurrent_branches = max_concurrent_branches
        self.is_success = is_success

    def discover(self, seed_url: str, frontier: Frontier, worklist: Worklist, tracker: Optional[CompletionTracker] = None) -> CompletionTracker:
        """Start discovery from `seed_url` and return immediately."""
        tracker = tracker or CompletionTracker()
        slots = threading.BoundedSemaphore(self.max_concurrent_branches) if self.max_concurrent_branches else None
        run = _DiscoveryRun(frontier=frontier, worklist=worklist, tracker=tracker, branch_slots=slots)
        logger.info("Discovery started from %s (cap %d)", seed_url, frontier.max_admissions)
        self._spawn(seed_url, run)
        return tracker

    def _spawn(self, url: str, run: _DiscoveryRun) -> None:
        # Registered before start so the parent cannot finish first.
        run.tracker.register()
        thread = threading.Thread(target=self._visit, args=(url, run), name="discovery", daemon=True)
        try:
            thread.start()
        except RuntimeError as e:
            run.tracker.done()
            logger.error("Could not start discovery branch for %s: %s", url, e)

    def _visit(self, url: str, run: _DiscoveryRun) -> None:
        try:
            if not run.frontier.try_admit(url):
                logger.debug("Skipping (seen or cap reached) %s", url)
                return
            if run.branch_slots is None:
                self._explore(url, run)
            else:
                with run.branch_slots:
                    self._explore(url, run)
        except Exception as e:
            logger.error("Discovery branch failed for %s: %s", url, e, exc_info=True)
        finally:
            run.tracker.done()

    def _explore(self, url: str, run: _DiscoveryRun) -> None:
        try:
            response = self.transport.fetch(url, timeout=self.fetch_timeout)
        except HttpFetchError as e:
            logger.debug("Discovery fetch failed for %s: %s", url, e)
            return

        if not self.is_success(response):
            logger.debug("Discovery dropped %s -> status %s", url, response.status_code)
            return

        run.worklist.push(url)

        for link in self.link_extractor.extract_links(response.text, response.url or url):
            if run.frontier.is_full():
                break
            if run.frontier.is_admitted(link):
                continue
            self._spawn(link, run)
