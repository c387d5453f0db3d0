"""Severity and category classification for HelpGlobe events.

Both functions are total and side-effect free: every input maps to one of
the enumerated values and nothing is ever raised. The merge policy relies on
severities being deterministic for identical inputs.
"""

from __future__ import annotations

from typing import Optional, Tuple

from helpglobe.models.events import Category, EventType, Severity

# Title keywords that escalate a type's default severity
_CONFLICT_CRITICAL_TERMS: Tuple[str, ...] = ("war", "invasion")
_DISASTER_HIGH_TERMS: Tuple[str, ...] = ("major", "severe")
_HEALTH_CRITICAL_TERMS: Tuple[str, ...] = ("pandemic", "outbreak")

_CATEGORY_BY_TYPE = {
    EventType.EARTHQUAKE: Category.NATURAL,
    EventType.DISASTER: Category.NATURAL,
    EventType.CONFLICT: Category.CONFLICT,
    EventType.HEALTH: Category.HEALTH,
    EventType.PROTEST: Category.SOCIAL,
}


def _title_has(title: Optional[str], terms: Tuple[str, ...]) -> bool:
    # Substring match, so "war" also hits "warning"
    lowered = (title or "").lower()
    return any(term in lowered for term in terms)


def classify_severity(
    event_type: str,
    magnitude: Optional[float] = None,
    title: Optional[str] = None,
) -> str:
    """Derive the severity of an event.

    Args:
        event_type: Event type from the fixed vocabulary.
        magnitude: Earthquake magnitude, if any.
        title: Event title used for keyword escalation.

    Returns:
        One of Severity.ALL.
    """
    if event_type == EventType.EARTHQUAKE:
        if not magnitude:
            return Severity.LOW
        if magnitude >= 7.0:
            return Severity.CRITICAL
        if magnitude >= 6.0:
            return Severity.HIGH
        if magnitude >= 4.0:
            return Severity.MEDIUM
        return Severity.LOW

    if event_type == EventType.CONFLICT:
        return Severity.CRITICAL if _title_has(title, _CONFLICT_CRITICAL_TERMS) else Severity.HIGH

    if event_type == EventType.DISASTER:
        return Severity.HIGH if _title_has(title, _DISASTER_HIGH_TERMS) else Severity.MEDIUM

    if event_type == EventType.HEALTH:
        return Severity.CRITICAL if _title_has(title, _HEALTH_CRITICAL_TERMS) else Severity.MEDIUM

    return Severity.LOW


def classify_category(event_type: str) -> str:
    """Map an event type to its coarse category, defaulting to natural."""
    return _CATEGORY_BY_TYPE.get(event_type, Category.NATURAL)
