"""Wall clock used for timers and audit timestamps."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Naive UTC now, matching DuckDB ``TIMESTAMP`` columns."""
    return datetime.now(UTC).replace(tzinfo=None)
