"""BaseAdapter ABC for HelpGlobe source adapters.

Every upstream feed is wrapped in one adapter. The base class owns the
failure boundary: fetch_source() never raises. A feed that cannot be fetched
is logged and reported as None (no stream at all), and a malformed record is
skipped without affecting its neighbours.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional

from config.settings import AggregatorConfig
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import RawEvent
from helpglobe.utils.logging_utils import LoggerLike

logger = logging.getLogger(__name__)


class BaseAdapter(ABC):
    """Abstract base class for all feed adapters.

    Subclasses implement three steps:
      - fetch_payload(): one network call (or none, for static adapters)
      - extract_records(): pull the record list out of the payload
      - transform(): map one record to a RawEvent, or None to drop it

    Args:
        config: Aggregator configuration (endpoints, thresholds, timeouts).
    """

    name: str = "BaseAdapter"
    source: str = ""

    def __init__(self, config: Optional[AggregatorConfig] = None) -> None:
        self.config = config or AggregatorConfig()

    @abstractmethod
    async def fetch_payload(self, client: FeedClient) -> Optional[Any]:
        """Fetch the raw feed payload.

        Args:
            client: Feed client for this aggregation cycle.

        Returns:
            Parsed payload, or None when the feed is unavailable.
        """

    @abstractmethod
    def extract_records(self, payload: Any) -> Iterable[Any]:
        """Return the per-record items contained in a payload."""

    @abstractmethod
    def transform(self, record: Any) -> Optional[RawEvent]:
        """Map one feed record to a RawEvent, or None to filter it out."""

    async def fetch_source(
        self,
        client: FeedClient,
        log: Optional[LoggerLike] = None,
    ) -> Optional[Iterator[RawEvent]]:
        """Fetch this adapter's feed and return a lazy, single-pass record stream.

        Args:
            client: Feed client for this aggregation cycle.
            log: Logger to report through (defaults to the module logger).

        Returns:
            Iterator of RawEvent, or None when the feed could not be fetched.
            A payload that arrives but cannot be read yields an empty stream.
        """
        log = log or logger
        start = time.monotonic()
        try:
            payload = await self.fetch_payload(client)
        except Exception as exc:
            log.warning(
                "Adapter %s failed after %.2fs: %s",
                self.name, time.monotonic() - start, exc,
                exc_info=True,
            )
            return None

        elapsed = time.monotonic() - start
        if payload is None:
            log.warning("Adapter %s: no payload after %.2fs — contributing 0 events",
                        self.name, elapsed)
            return None

        log.info("Adapter %s fetched in %.2fs", self.name, elapsed)
        return self._iter_records(payload, log)

    def _iter_records(self, payload: Any, log: LoggerLike) -> Iterator[RawEvent]:
        """Yield transformed records, skipping the ones that fail to map."""
        try:
            records = self.extract_records(payload)
        except Exception as exc:
            log.warning("Adapter %s: malformed payload (%s) — contributing 0 events",
                        self.name, exc)
            return

        skipped = 0
        for record in records:
            try:
                raw = self.transform(record)
            except Exception as exc:
                skipped += 1
                log.debug("Adapter %s: skipping malformed record: %s", self.name, exc)
                continue
            if raw is not None:
                yield raw

        if skipped:
            log.info("Adapter %s: skipped %d malformed records", self.name, skipped)
