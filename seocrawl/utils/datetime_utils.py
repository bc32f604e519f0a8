from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Return `value` as a UTC-naive datetime for storage in timezone-less columns.

    Naive input is assumed to already be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
