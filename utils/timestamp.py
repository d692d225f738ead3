"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_datetime(epoch_ms):
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=epoch_ms)


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds."""
    if epoch_ms is None:
        epoch_ms = now_millis()

    dt = to_datetime(epoch_ms)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
