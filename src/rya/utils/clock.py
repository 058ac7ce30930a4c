"""Date/time formatting."""

from __future__ import annotations

from datetime import datetime

__all__ = ["DEFAULT_FORMAT", "date_and_time"]

# Date, time and milliseconds: 2024-03-01 14:05:09.123
DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def date_and_time(fmt: str = DEFAULT_FORMAT, now: datetime | None = None) -> str:
    """Format ``now`` (default: the current local time).

    With the default format the microseconds are cut to milliseconds.
    """
    now = now or datetime.now()
    text = now.strftime(fmt)
    if fmt == DEFAULT_FORMAT:
        text = text[:-3]
    return text
