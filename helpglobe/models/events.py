"""Event data models for HelpGlobe.

Defines the unified Event produced by the aggregator and the RawEvent shape
that source adapters emit before normalization. All fields are typed; no raw
dicts leave the adapter layer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


class EventType:
    """Fixed event type vocabulary."""

    EARTHQUAKE = "earthquake"
    DISASTER = "disaster"
    CONFLICT = "conflict"
    PROTEST = "protest"
    HEALTH = "health"
    ECONOMIC = "economic"
    NEWS = "news"

    ALL = (EARTHQUAKE, DISASTER, CONFLICT, PROTEST, HEALTH, ECONOMIC, NEWS)


class Severity:
    """Derived urgency ordinal. Order here is for display only; merging does not rank."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    ALL = (LOW, MEDIUM, HIGH, CRITICAL)


class Category:
    """Coarse grouping derived from the event type."""

    NATURAL = "natural"
    CONFLICT = "conflict"
    HEALTH = "health"
    ECONOMIC = "economic"
    SOCIAL = "social"
    ENVIRONMENTAL = "environmental"

    ALL = (NATURAL, CONFLICT, HEALTH, ECONOMIC, SOCIAL, ENVIRONMENTAL)


@dataclass
class RawEvent:
    """A single record as extracted by a source adapter, before normalization.

    Coordinates are unrounded, text is unsanitized and ``date`` is whatever the
    adapter could derive (ISO-8601 or empty). ``severity`` and ``category`` are
    only set by curated seed adapters; everything else is classified later.
    """

    title: str
    lat: float
    lon: float
    type: str
    source: str
    summary: str = ""
    url: str = ""
    date: str = ""
    magnitude: Optional[float] = None
    country: Optional[str] = None
    region: Optional[str] = None
    severity: Optional[str] = None
    category: Optional[str] = None


@dataclass
class Event:
    """The unified, normalized crisis event served to the rendering layer."""

    id: str
    title: str
    lat: float          # Rounded to 0.01°
    lon: float          # Rounded to 0.01°
    summary: str
    url: str
    type: str           # One of EventType.ALL
    date: str           # Canonical ISO-8601 UTC, e.g. 2024-01-15T12:00:00.000Z
    source: str
    severity: str       # One of Severity.ALL
    category: str       # One of Category.ALL
    magnitude: Optional[float] = None
    country: Optional[str] = None
    region: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON object shape, omitting unset optional fields."""
        data = asdict(self)
        for key in ("magnitude", "country", "region"):
            if data[key] is None:
                del data[key]
        return data
