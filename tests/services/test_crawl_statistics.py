import threading

from seocrawl.services.crawl_statistics import AtomicCounter, CrawlCounters


def test_counter_increment_returns_new_value():
    c = AtomicCounter()
    assert c.increment() == 1
    assert c.increment(2) == 3
    assert c.value == 3


def test_concurrent_increments_are_not_lost():
    counters = CrawlCounters()

    def worker():
        for _ in range(1000):
            counters.attempted.increment()
            counters.succeeded.increment()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counters.snapshot() == (8000, 8000, 0)


def test_counters_are_independent():
    counters = CrawlCounters()
    counters.failed.increment()
    assert counters.snapshot() == (0, 0, 1)
