"""Validation utilities for data integrity.

Pure predicates — no I/O, no external calls.
"""

from __future__ import annotations

import math
from typing import Any
from urllib.parse import urlparse

from config.defaults import MAX_MAGNITUDE, MIN_MAGNITUDE
from helpglobe.utils.date_utils import parse_timestamp


def _is_real_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and not math.isnan(value)
        and not math.isinf(value)
    )


def validate_coordinates(lat: Any, lon: Any) -> bool:
    """Check that lat/lon are finite numbers within WGS84 degree ranges."""
    return (
        _is_real_number(lat)
        and _is_real_number(lon)
        and -90 <= lat <= 90
        and -180 <= lon <= 180
    )


def validate_magnitude(magnitude: Any) -> bool:
    """Check that a magnitude is a finite number within [0, 10]."""
    return _is_real_number(magnitude) and MIN_MAGNITUDE <= magnitude <= MAX_MAGNITUDE


def validate_date(value: Any) -> bool:
    """Check that a timestamp string is parseable."""
    return parse_timestamp(value) is not None


def validate_url(url: Any) -> bool:
    """Check that a string is an absolute http(s) URL."""
    if not isinstance(url, str) or not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
