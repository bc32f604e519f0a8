from unittest.mock import MagicMock

import pytest

from seocrawl.exceptions import CrawlConfigError, PageParseError
from seocrawl.services.crawl_statistics import CrawlCounters
from seocrawl.services.crawl_store import InMemoryCrawlStore
from seocrawl.services.page_parser import SeoPageParser
from seocrawl.services.worker_pool import WorkerPool
from seocrawl.services.worklist import Worklist


def _filled_worklist(urls):
    wl = Worklist(capacity=max(1, len(urls)))
    for u in urls:
        wl.push(u)
    wl.close()
    return wl


@pytest.mark.parametrize("count", [0, -1, 2.5, True])
def test_rejects_invalid_worker_count(count):
    with pytest.raises(CrawlConfigError):
        WorkerPool(Worklist(1), MagicMock(), MagicMock(), MagicMock(), CrawlCounters(), worker_count=count)


def test_scrapes_and_stores_every_item(graph_transport, abc_graph):
    transport = graph_transport(abc_graph)
    store = InMemoryCrawlStore()
    counters = CrawlCounters()
    wl = _filled_worklist(list(abc_graph))

    pool = WorkerPool(wl, transport, SeoPageParser(), store, counters, worker_count=3, fetch_timeout=7)
    pool.start()
    pool.join()

    assert counters.snapshot() == (3, 3, 0)
    assert set(store.pages) == set(abc_graph)
    record = store.get_page("http://site.test/b")
    assert record.title == "Title http://site.test/b"
    assert record.h1 == "Heading http://site.test/b"
    assert record.meta_description == "About http://site.test/b"
    assert record.status_code == 200
    assert set(transport.timeouts) == {7}


def test_failures_are_counted_and_do_not_stop_the_pool(graph_transport, abc_graph):
    transport = graph_transport(abc_graph, failing={"http://site.test/a"})
    parser = MagicMock(wraps=SeoPageParser())

    def extract(response):
        if response.url == "http://site.test/b":
            raise PageParseError(response.url, "bad html")
        return SeoPageParser().extract_fields(response)

    parser.extract_fields.side_effect = extract
    store = InMemoryCrawlStore()
    counters = CrawlCounters()
    wl = _filled_worklist(list(abc_graph))

    pool = WorkerPool(wl, transport, parser, store, counters, worker_count=1)
    pool.start()
    pool.join()

    attempted, succeeded, failed = counters.snapshot()
    assert (attempted, succeeded, failed) == (3, 1, 2)
    assert succeeded + failed == wl.popped_count
    assert set(store.pages) == {"http://site.test/c"}


def test_store_errors_count_as_failures(graph_transport, abc_graph):
    transport = graph_transport(abc_graph)
    store = MagicMock()
    store.upsert_page.side_effect = RuntimeError("disk full")
    counters = CrawlCounters()
    wl = _filled_worklist(list(abc_graph))

    pool = WorkerPool(wl, transport, SeoPageParser(), store, counters, worker_count=2)
    pool.start()
    pool.join()

    assert counters.snapshot() == (3, 0, 3)


def test_workers_exit_on_empty_closed_worklist():
    counters = CrawlCounters()
    wl = Worklist(1)
    wl.close()
    pool = WorkerPool(wl, MagicMock(), MagicMock(), MagicMock(), counters, worker_count=4)
    pool.start()
    pool.join()
    assert counters.snapshot() == (0, 0, 0)


def test_start_twice_raises():
    wl = Worklist(1)
    wl.close()
    pool = WorkerPool(wl, MagicMock(), MagicMock(), MagicMock(), CrawlCounters(), worker_count=1)
    pool.start()
    with pytest.raises(RuntimeError):
        pool.start()
    pool.join()
