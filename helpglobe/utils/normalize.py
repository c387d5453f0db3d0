"""Coordinate, identity and text normalization for HelpGlobe.

Rounding to 0.01° is the deliberate precision-loss step that lets reports of
the same incident from different feeds collide on one identity key.

Rounding mode: half up, toward +inf (``floor(x * 100 + 0.5) / 100``), the
same behaviour as JavaScript ``Math.round``. Python's built-in ``round`` is
half-to-even and would move some dedup boundaries, so it is not used here.
"""

from __future__ import annotations

import math
import re

from config.defaults import ELLIPSIS, ID_SLUG_LENGTH, SUMMARY_MAX_LENGTH, TEXT_MAX_LENGTH

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def round_coordinate(value: float) -> float:
    """Round a degree value to 2 decimal places, half up.

    Idempotent: ``round_coordinate(round_coordinate(x)) == round_coordinate(x)``.
    """
    return math.floor(value * 100 + 0.5) / 100


def identity_key(lat: float, lon: float, event_type: str) -> str:
    """Build the dedup key ``"{lat}_{lon}_{type}"`` with lat/lon fixed to 2 decimals."""
    return f"{lat:.2f}_{lon:.2f}_{event_type}"


def title_slug(title: str, length: int = ID_SLUG_LENGTH) -> str:
    """Strip a title to ASCII alphanumerics and keep the first ``length`` characters."""
    return _NON_ALNUM_RE.sub("", title or "")[:length]


def make_event_id(event_type: str, lat: float, lon: float, title: str) -> str:
    """Deterministic external identifier for a normalized event.

    Args:
        event_type: Event type from the fixed vocabulary.
        lat: Rounded latitude.
        lon: Rounded longitude.
        title: Event title (only its alphanumeric prefix is used).

    Returns:
        Identifier such as ``earthquake_35.68_139.65_EarthquakeT``.
    """
    return f"{event_type}_{lat:.2f}_{lon:.2f}_{title_slug(title)}"


def sanitize_text(text: object, max_length: int = TEXT_MAX_LENGTH) -> str:
    """Remove angle brackets, trim whitespace and cap length.

    Args:
        text: Free text from a feed (non-strings are coerced; None becomes "").
        max_length: Maximum characters kept.

    Returns:
        Sanitized string.
    """
    if text is None:
        return ""
    cleaned = _ANGLE_BRACKETS_RE.sub("", str(text)).strip()
    return cleaned[:max_length]


def truncate_summary(text: object, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """Sanitize a summary and cap it, appending an ellipsis when text was cut."""
    cleaned = sanitize_text(text)
    if len(cleaned) <= max_length:
        return cleaned
    return cleaned[:max_length].rstrip() + ELLIPSIS
