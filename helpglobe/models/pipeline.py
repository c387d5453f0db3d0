"""Aggregation result models for HelpGlobe.

Defines SourceReport (per-adapter outcome) and AggregationResult (the merged
snapshot plus bookkeeping returned by the aggregator).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from helpglobe.models.events import Event


class SourceStatus:
    """Outcome codes recorded in SourceReport.status.

    OK: at least one event survived normalization.
    EMPTY: the feed was fetched but contributed no events.
    FAILED: the feed could not be fetched, or the adapter raised.
    """

    OK = "OK"
    EMPTY = "EMPTY"
    FAILED = "FAILED"


@dataclass
class SourceReport:
    """What one adapter contributed to an aggregation cycle."""

    adapter_name: str
    status: str = SourceStatus.OK
    raw_count: int = 0          # Records yielded by the adapter
    event_count: int = 0        # Records that survived normalization
    elapsed_seconds: float = 0.0


@dataclass
class AggregationResult:
    """Complete output of one aggregation cycle.

    ``events`` is the deduplicated list, newest first. Everything else is
    diagnostic and never sent to the rendering layer.
    """

    events: List[Event] = field(default_factory=list)
    sources: List[SourceReport] = field(default_factory=list)
    duplicates_merged: int = 0
    warnings: List[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def source_counts(self) -> Dict[str, int]:
        """Number of final events per provenance label."""
        counts: Dict[str, int] = {}
        for event in self.events:
            counts[event.source] = counts.get(event.source, 0) + 1
        return counts
