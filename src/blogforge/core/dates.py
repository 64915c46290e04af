"""Date and time utilities."""

from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo
from typing import Any

from dateutil import parser as dateutil_parser


def parse_datetime_flexible(value: datetime | date | str | Any, *, default_timezone: tzinfo = UTC) -> datetime:
    """Parse a frontmatter date value into a timezone-aware ``datetime``.

    YAML frontmatter yields ``date``/``datetime`` objects for well-formed
    values and plain strings for everything else, so both are accepted.

    Raises:
        ValueError: if the value is empty or cannot be parsed.

    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, datetime.min.time())
    else:
        raw = str(value).strip()
        if not raw:
            msg = "Date value cannot be an empty string"
            raise ValueError(msg)
        try:
            dt = dateutil_parser.parse(raw)
        except (TypeError, ValueError, OverflowError) as e:
            msg = f"Unparseable date {raw!r}: {e}"
            raise ValueError(msg) from e
    return normalize_timezone(dt, default_timezone=default_timezone)


def normalize_timezone(dt: datetime, *, default_timezone: tzinfo = UTC) -> datetime:
    """Make naive datetimes aware and convert aware ones to ``default_timezone``."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=default_timezone)
    return dt.astimezone(default_timezone)


__all__ = ["normalize_timezone", "parse_datetime_flexible"]
