"""Time utilities."""

import time
from datetime import datetime, timezone


def epoch_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def millis_to_datetime(millis: int) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
