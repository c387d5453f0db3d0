"""Timestamp normalization utilities for HelpGlobe.

Every feed reports time differently (USGS epoch milliseconds, GDELT compact
``YYYYMMDDTHHMMSSZ``, ReliefWeb ISO-8601 with offsets). Route every source
timestamp through normalize_timestamp() so that event dates compare correctly
as plain strings.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from dateutil import parser as dateutil_parser

# Compact timestamp variants seen in feed payloads
_COMPACT_PATTERNS = [
    # YYYYMMDDTHHMMSSZ (GDELT seendate)
    (re.compile(r"^\d{8}T\d{6}Z?$"), "%Y%m%dT%H%M%S"),
    # YYYYMMDDHHMMSS
    (re.compile(r"^\d{14}$"), "%Y%m%d%H%M%S"),
    # YYYYMMDD
    (re.compile(r"^\d{8}$"), "%Y%m%d"),
]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_iso(dt: datetime) -> str:
    """Format a datetime as canonical ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC.

    Args:
        dt: Datetime to format.

    Returns:
        String such as ``2024-01-15T12:00:00.000Z``.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond // 1000:03d}Z"


def epoch_ms_to_iso(epoch_ms: Any) -> Optional[str]:
    """Convert epoch milliseconds (USGS ``properties.time``) to canonical ISO-8601.

    Args:
        epoch_ms: Milliseconds since the Unix epoch (int, float or numeric string).

    Returns:
        Canonical ISO string, or None if the value is missing, not numeric or
        not finite.
    """
    if epoch_ms is None or isinstance(epoch_ms, bool):
        return None
    try:
        ms = float(epoch_ms)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(ms):
        return None
    try:
        dt = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=ms)
    except OverflowError:
        return None
    return format_iso(dt)


def parse_timestamp(raw: Any) -> Optional[datetime]:
    """Parse any supported feed timestamp into an aware UTC datetime.

    Args:
        raw: Timestamp string from a feed payload.

    Returns:
        Aware datetime, or None on parse failure.
    """
    if not raw or not isinstance(raw, str):
        return None
    raw = raw.strip()

    for pattern, fmt in _COMPACT_PATTERNS:
        if pattern.match(raw):
            try:
                return datetime.strptime(raw.rstrip("Z"), fmt).replace(tzinfo=timezone.utc)
            except ValueError:
                return None

    try:
        dt = dateutil_parser.isoparse(raw)
    except (ValueError, OverflowError):
        try:
            dt = dateutil_parser.parse(raw)
        except (ValueError, OverflowError, TypeError):
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def normalize_timestamp(raw: Any, fallback: str) -> str:
    """Normalize a feed timestamp to canonical ISO-8601, or return ``fallback``.

    Args:
        raw: Raw timestamp value (any supported format, or empty).
        fallback: Canonical ISO string used when ``raw`` is missing or unparseable
            (the aggregation fetch time).

    Returns:
        Canonical ISO-8601 UTC string.
    """
    parsed = parse_timestamp(raw)
    if parsed is None:
        return fallback
    return format_iso(parsed)
