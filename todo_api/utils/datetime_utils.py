"""
DateTime helpers
================

All timestamps are stored and returned as timezone-aware UTC datetimes.
MongoDB keeps millisecond precision, so utc_now() truncates to milliseconds
to make a freshly created record equal to the one read back.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime, truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)
