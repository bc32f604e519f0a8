import threading
from collections import Counter

import pytest

from seocrawl.domain import HttpResponse
from seocrawl.exceptions import HttpFetchError


class GraphTransport:
    """Serves an in-memory link graph as HTML pages.

    `graph` maps URL -> list of linked URLs, or is a callable returning that
    list (None for a missing page, served as 404). `redirects` maps a
    requested URL to the final URL whose page is served in its place.
    """

    def __init__(self, graph, failing=(), statuses=None, gates=None, redirects=None):
        self.graph = graph
        self.failing = set(failing)
        self.statuses = dict(statuses or {})
        self.gates = dict(gates or {})
        self.redirects = dict(redirects or {})
        self.calls = Counter()
        self.timeouts = []
        self._lock = threading.Lock()

    def _links(self, url):
        if callable(self.graph):
            return self.graph(url)
        return self.graph.get(url)

    def fetch(self, url, timeout=None):
        with self._lock:
            self.calls[url] += 1
            self.timeouts.append(timeout)
        gate = self.gates.get(url)
        if gate is not None:
            gate.wait()
        if url in self.failing:
            raise HttpFetchError(url, ConnectionError("connection refused"))
        final_url = self.redirects.get(url, url)
        links = self._links(final_url)
        if links is None:
            return HttpResponse(404, "not found", "text/html", final_url)
        anchors = "".join(f'<a href="{link}">{link}</a>' for link in links)
        body = (
            f"<html><head><title>Title {url}</title>"
            f'<meta name="description" content="About {url}"></head>'
            f"<body><h1>Heading {url}</h1>{anchors}</body></html>"
        )
        return HttpResponse(self.statuses.get(url, 200), body, "text/html", final_url)

    @property
    def fetched_urls(self):
        with self._lock:
            return set(self.calls)


@pytest.fixture
def graph_transport():
    return GraphTransport


@pytest.fixture
def abc_graph():
    return {
        "http://site.test/a": ["http://site.test/b", "http://site.test/c"],
        "http://site.test/b": ["http://site.test/c"],
        "http://site.test/c": [],
    }


@pytest.fixture
def binary_tree_graph():
    """Lazily generated graph of 1,000,000 nodes; node i links to 2i+1 and 2i+2."""
    size = 1_000_000

    def links(url):
        i = int(url.rsplit("/", 1)[1])
        if i >= size:
            return None
        return [f"http://big.test/{j}" for j in (2 * i + 1, 2 * i + 2) if j < size]

    return links
