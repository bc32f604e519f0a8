from datetime import datetime, timezone, timedelta

from seocrawl.utils.datetime_utils import to_utc_naive, utc_now


def test_none_returns_none():
    assert to_utc_naive(None) is None


def test_naive_datetime_returns_same():
    dt = datetime(2020, 1, 1, 12, 0, 0)
    assert to_utc_naive(dt) == dt


def test_aware_datetime_converted_to_utc_naive():
    dt = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    # 12:00+02:00 -> 10:00 UTC
    assert to_utc_naive(dt) == datetime(2020, 1, 1, 10, 0, 0)


def test_utc_now_is_aware():
    assert utc_now().tzinfo is timezone.utc
