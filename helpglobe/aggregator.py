"""HelpGlobe aggregator — fetch every feed, normalize, deduplicate, sort.

One call to aggregate_events() is one independent, stateless cycle:

  1. All adapters run concurrently; the join waits for every one to settle
     and ignores individual failures (partial data beats no data).
  2. Each adapter's records are normalized into Events on the single
     control flow, after the fetch phase.
  3. Events sharing an identity key are merged (analysis.dedup).
  4. The result is stable-sorted newest first.

Usage:
    from config.settings import AggregatorConfig
    from helpglobe.aggregator import aggregate_events

    result = asyncio.run(aggregate_events(AggregatorConfig()))
    payload = [event.to_dict() for event in result.events]
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from config.settings import AggregatorConfig
from helpglobe.adapters import BaseAdapter, default_adapters
from helpglobe.analysis.dedup import MergePolicy, deduplicate, sort_newest_first
from helpglobe.analysis.event_builder import build_event
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import Event, RawEvent, Severity
from helpglobe.models.pipeline import AggregationResult, SourceReport, SourceStatus
from helpglobe.utils.date_utils import format_iso, utc_now
from helpglobe.utils.logging_utils import LoggerLike

logger = logging.getLogger(__name__)


async def _collect(
    adapter: BaseAdapter,
    client: FeedClient,
    log: LoggerLike,
) -> Tuple[Optional[Iterator[RawEvent]], float]:
    """Run one adapter's fetch and time it."""
    start = time.monotonic()
    stream = await adapter.fetch_source(client, log)
    return stream, time.monotonic() - start


async def aggregate_events(
    config: Optional[AggregatorConfig] = None,
    adapters: Optional[Sequence[BaseAdapter]] = None,
    client: Optional[FeedClient] = None,
    log: Optional[LoggerLike] = None,
    policy: Optional[MergePolicy] = None,
) -> AggregationResult:
    """Run one aggregation cycle.

    Args:
        config: Aggregator configuration (defaults from the environment).
        adapters: Adapters to run; defaults to default_adapters(config).
        client: Feed client to share across adapters. When omitted one is
            opened for this call and closed before returning.
        log: Logger to report through (typically a RequestContextAdapter).
        policy: Merge policy for identity-key collisions; defaults to
            analysis.dedup.should_replace.

    Returns:
        AggregationResult with deduplicated events sorted newest first.
    """
    config = config or AggregatorConfig()
    adapters = list(default_adapters(config) if adapters is None else adapters)
    log = log or logger
    start = time.monotonic()
    fetched_at = format_iso(utc_now())
    result = AggregationResult()

    log.info("Aggregator: fetching %d sources", len(adapters))

    owns_client = client is None
    if client is None:
        client = FeedClient(request_timeout=config.request_timeout, user_agent=config.user_agent)
    try:
        settled = await asyncio.gather(
            *(_collect(adapter, client, log) for adapter in adapters),
            return_exceptions=True,
        )
    finally:
        if owns_client:
            await client.close()

    # ── Normalize each adapter's contribution ─────────────────────────────────
    candidates: List[Event] = []
    for adapter, outcome in zip(adapters, settled):
        report = SourceReport(adapter_name=adapter.name)
        result.sources.append(report)

        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            report.status = SourceStatus.FAILED
            log.warning("Aggregator: %s raised past its boundary: %s", adapter.name, outcome)
            result.warnings.append(f"{adapter.name} failed: {outcome}")
            continue

        stream, report.elapsed_seconds = outcome
        if stream is None:
            report.status = SourceStatus.FAILED
            result.warnings.append(f"{adapter.name} fetch failed")
            continue

        for raw in stream:
            report.raw_count += 1
            event = build_event(raw, fetched_at)
            if event is not None:
                candidates.append(event)
                report.event_count += 1

        if report.event_count == 0:
            report.status = SourceStatus.EMPTY
            result.warnings.append(f"{adapter.name} contributed no events")
        log.info(
            "Aggregator: %s → %d events (%d records, %.2fs)",
            adapter.name, report.event_count, report.raw_count, report.elapsed_seconds,
        )

    # ── Deduplicate and order ─────────────────────────────────────────────────
    merged, result.duplicates_merged = deduplicate(candidates, policy)
    result.events = sort_newest_first(merged)
    result.elapsed_seconds = time.monotonic() - start

    _log_summary(result, log)
    return result


def filter_events(
    events: Iterable[Event],
    types: Optional[Iterable[str]] = None,
    severities: Optional[Iterable[str]] = None,
    categories: Optional[Iterable[str]] = None,
    sources: Optional[Iterable[str]] = None,
) -> List[Event]:
    """Keep only events matching every non-empty filter; order is preserved."""
    type_set = set(types or ())
    severity_set = set(severities or ())
    category_set = set(categories or ())
    source_set = set(sources or ())
    return [
        e for e in events
        if (not type_set or e.type in type_set)
        and (not severity_set or e.severity in severity_set)
        and (not category_set or e.category in category_set)
        and (not source_set or e.source in source_set)
    ]


def _log_summary(result: AggregationResult, log: LoggerLike) -> None:
    events = result.events
    critical = sum(1 for e in events if e.severity == Severity.CRITICAL)
    high = sum(1 for e in events if e.severity == Severity.HIGH)
    log.info(
        "Aggregator: %d events in %.2fs | merged=%d | sources=%s | categories=%s | "
        "critical=%d high=%d",
        len(events),
        result.elapsed_seconds,
        result.duplicates_merged,
        ", ".join(sorted(result.source_counts)),
        ", ".join(sorted({e.category for e in events})),
        critical,
        high,
    )
