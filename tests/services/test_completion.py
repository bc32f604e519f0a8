import threading
import time

import pytest

from seocrawl.services.completion import CompletionTracker


def test_quiescent_when_nothing_registered():
    tracker = CompletionTracker()
    assert tracker.is_quiescent()
    assert tracker.wait(timeout=0)


def test_wait_times_out_while_branch_pending():
    tracker = CompletionTracker()
    tracker.register()
    assert tracker.pending == 1
    assert not tracker.wait(timeout=0.1)
    tracker.done()
    assert tracker.wait(timeout=0)


def test_done_without_register_raises():
    tracker = CompletionTracker()
    with pytest.raises(RuntimeError):
        tracker.done()


def test_child_registered_before_parent_done_keeps_count_positive():
    tracker = CompletionTracker()
    tracker.register()  # parent
    tracker.register()  # child, registered by parent
    tracker.done()      # parent returns
    assert not tracker.is_quiescent()
    tracker.done()      # child returns
    assert tracker.is_quiescent()


def test_waiter_released_promptly_when_last_branch_finishes():
    tracker = CompletionTracker()
    tracker.register()
    released_at = []

    def waiter():
        tracker.wait()
        released_at.append(time.monotonic())

    t = threading.Thread(target=waiter)
    t.start()
    time.sleep(0.2)
    assert released_at == []
    finished_at = time.monotonic()
    tracker.done()
    t.join(2)
    assert released_at
    assert released_at[0] - finished_at < 0.5
