"""Utility constants and helpers for timeinterval.

Time unit constants are ``timedelta`` values. The RFC 3339 helpers are the
only place timestamps are read from or written to text.
"""

import re
from datetime import datetime, timedelta, timezone

from dateutil.parser import isoparse

# Time unit constants
SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)

# Separator between the two endpoints of a textual interval
SEPARATOR = "/"

EXPECTED_FORMAT = (
    "a string in ISO time-interval format "
    "(such as 2000-01-01T00:00:00+01:00/2001-02-02T01:01:01+01:00)"
)

# date, time with seconds, optional fraction, mandatory offset
_RFC3339_REGEX = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp and normalize it to UTC.

    Fractional seconds beyond microsecond precision are truncated. Leap
    seconds (``23:59:60``) are rejected since ``datetime`` cannot hold them.

    Raises:
        ValueError: If ``text`` is not a complete RFC 3339 timestamp
            (date, time and UTC offset are all required), or if it falls
            outside the range a UTC ``datetime`` can represent
    """
    if not _RFC3339_REGEX.fullmatch(text):
        raise ValueError(f"Not an RFC 3339 timestamp: {text!r}")
    try:
        return isoparse(text.upper()).astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"Timestamp out of range: {text!r}") from exc


def format_rfc3339(dt: datetime) -> str:
    """Render a timezone-aware datetime as RFC 3339 in UTC.

    Instants within an offset of ``datetime.min``/``datetime.max`` cannot be
    shifted to UTC; those keep their own offset.
    """
    try:
        return dt.astimezone(timezone.utc).isoformat()
    except OverflowError:
        return dt.isoformat()
