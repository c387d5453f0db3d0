"""HelpGlobe data models package.

All adapter and aggregator input/output schemas are defined here as typed dataclasses.
"""

from helpglobe.models.events import Category, Event, EventType, RawEvent, Severity
from helpglobe.models.pipeline import AggregationResult, SourceReport, SourceStatus

__all__ = [
    "Event",
    "RawEvent",
    "EventType",
    "Severity",
    "Category",
    "AggregationResult",
    "SourceReport",
    "SourceStatus",
]
