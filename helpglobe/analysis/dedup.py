"""Deduplication and ordering of normalized events.

Events sharing an identity key (rounded lat, rounded lon, type) are merged
into one. Which one survives is decided by should_replace(), a deliberately
asymmetric rule rather than a severity ranking:

  replace the stored event with the incoming one if
    (a) the incoming date is later, or
    (b) the incoming event is critical and the stored one is not, or
    (c) the incoming event is high and the stored one is low.

Anything else keeps the stored event (e.g. high vs high at the same date,
medium vs low at an earlier date).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from helpglobe.models.events import Event, Severity
from helpglobe.utils.normalize import identity_key

logger = logging.getLogger(__name__)

MergePolicy = Callable[[Event, Event], bool]


def event_key(event: Event) -> str:
    """Identity key of an already-normalized event."""
    return identity_key(event.lat, event.lon, event.type)


def should_replace(existing: Event, incoming: Event) -> bool:
    """Decide whether ``incoming`` displaces ``existing`` under the same key.

    Dates are canonical ISO-8601 UTC strings, so string comparison is
    chronological comparison.
    """
    if incoming.date > existing.date:
        return True
    if incoming.severity == Severity.CRITICAL and existing.severity != Severity.CRITICAL:
        return True
    if incoming.severity == Severity.HIGH and existing.severity == Severity.LOW:
        return True
    return False


def deduplicate(
    events: Iterable[Event],
    policy: Optional[MergePolicy] = None,
) -> Tuple[List[Event], int]:
    """Collapse events that share an identity key.

    The surviving event keeps the position its key was first seen at, so the
    output order (before sorting) is the insertion order of keys.

    Args:
        events: Normalized events in arrival order.
        policy: Merge policy; defaults to should_replace.

    Returns:
        (deduplicated events, number of collisions encountered).
    """
    policy = policy or should_replace
    by_key: Dict[str, Event] = {}
    collisions = 0

    for event in events:
        key = event_key(event)
        existing = by_key.get(key)
        if existing is None:
            by_key[key] = event
            continue
        collisions += 1
        if policy(existing, event):
            logger.debug(
                "Dedup: %s replaces %s (%s/%s over %s/%s)",
                event.source, existing.source,
                event.date, event.severity, existing.date, existing.severity,
            )
            by_key[key] = event

    return list(by_key.values()), collisions


def sort_newest_first(events: Iterable[Event]) -> List[Event]:
    """Stable sort by date, most recent first; ties keep their input order."""
    return sorted(events, key=lambda e: e.date, reverse=True)
