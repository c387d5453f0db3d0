"""RawEvent → Event normalization.

build_event() is the single place where adapter output becomes a served
Event: coordinates are validated and rounded, text is sanitized, the date is
canonicalized, severity and category are derived, and the id is assigned.
"""

from __future__ import annotations

import logging
from typing import Optional

from config.defaults import SUMMARY_MAX_LENGTH, TEXT_MAX_LENGTH
from helpglobe.analysis.classifier import classify_category, classify_severity
from helpglobe.models.events import Category, Event, EventType, RawEvent, Severity
from helpglobe.utils.date_utils import normalize_timestamp
from helpglobe.utils.normalize import (
    make_event_id,
    round_coordinate,
    sanitize_text,
    truncate_summary,
)
from helpglobe.utils.validation import validate_coordinates, validate_magnitude

logger = logging.getLogger(__name__)

# Link used when a feed gives no way to construct one
_FALLBACK_URL = "#"


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = sanitize_text(value, TEXT_MAX_LENGTH)
    return cleaned or None


def build_event(raw: RawEvent, fetched_at: str) -> Optional[Event]:
    """Normalize one adapter record into an Event.

    Args:
        raw: Record emitted by a source adapter.
        fetched_at: Canonical ISO time of the aggregation, used when the
            record has no usable date.

    Returns:
        The normalized Event, or None when the record has out-of-range
        coordinates, a type outside the vocabulary, or an invalid magnitude.
    """
    if raw.type not in EventType.ALL:
        logger.debug("Dropping %s record with unknown type %r", raw.source, raw.type)
        return None

    if not validate_coordinates(raw.lat, raw.lon):
        logger.debug("Dropping %s record with invalid coordinates (%r, %r)",
                     raw.source, raw.lat, raw.lon)
        return None

    magnitude: Optional[float] = None
    if raw.magnitude is not None:
        if not validate_magnitude(raw.magnitude):
            logger.debug("Dropping %s record with magnitude %r", raw.source, raw.magnitude)
            return None
        magnitude = float(raw.magnitude)

    lat = round_coordinate(raw.lat)
    lon = round_coordinate(raw.lon)
    title = sanitize_text(raw.title, TEXT_MAX_LENGTH)

    severity = raw.severity if raw.severity in Severity.ALL else classify_severity(
        raw.type, magnitude, title
    )
    category = raw.category if raw.category in Category.ALL else classify_category(raw.type)

    return Event(
        id=make_event_id(raw.type, lat, lon, title),
        title=title,
        lat=lat,
        lon=lon,
        summary=truncate_summary(raw.summary, SUMMARY_MAX_LENGTH),
        url=sanitize_text(raw.url, TEXT_MAX_LENGTH) or _FALLBACK_URL,
        type=raw.type,
        date=normalize_timestamp(raw.date, fetched_at),
        source=sanitize_text(raw.source, TEXT_MAX_LENGTH),
        severity=severity,
        category=category,
        magnitude=magnitude,
        country=_optional_text(raw.country),
        region=_optional_text(raw.region),
    )
