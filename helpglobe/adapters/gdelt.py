"""GDELTAdapter — global news articles from the GDELT DOC 2.0 ArtList mode.

Articles carry no structured geodata. Location, type and country are inferred
by case-insensitive keyword matching over title and snippet against an
ordered rule table; the first matching rule wins and unmatched articles are
dropped. This is a coarse heuristic for a visualization tool, not geocoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from helpglobe.adapters.base import BaseAdapter
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import EventType, RawEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordRule:
    """Keyword → fixed location/type assignment for news articles."""

    keyword: str
    lat: float
    lon: float
    event_type: str
    country: str


# Checked in order; first match wins
KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule("ukraine", 50.4501, 30.5234, EventType.CONFLICT, "Ukraine"),
    KeywordRule("gaza", 31.3547, 34.3088, EventType.CONFLICT, "Gaza"),
    KeywordRule("syria", 33.5138, 36.2765, EventType.CONFLICT, "Syria"),
    KeywordRule("afghanistan", 33.9391, 67.7100, EventType.CONFLICT, "Afghanistan"),
    KeywordRule("protest", 40.7128, -74.0060, EventType.PROTEST, "USA"),
    KeywordRule("health", -1.2921, 36.8219, EventType.HEALTH, "Kenya"),
    KeywordRule("flood", 23.6850, 90.3563, EventType.DISASTER, "Bangladesh"),
)


def match_keyword_rule(
    title: str,
    snippet: str,
    rules: Tuple[KeywordRule, ...] = KEYWORD_RULES,
) -> Optional[KeywordRule]:
    """Return the first rule whose keyword appears in the title or snippet."""
    title = (title or "").lower()
    snippet = (snippet or "").lower()
    for rule in rules:
        if rule.keyword in title or rule.keyword in snippet:
            return rule
    return None


class GDELTAdapter(BaseAdapter):
    """Global-news adapter over GDELT ``mode=artlist``."""

    name = "GDELTAdapter"
    source = "GDELT"

    def build_params(self) -> Dict[str, Any]:
        return {
            "query": self.config.gdelt_query,
            "mode": "artlist",
            "maxrecords": self.config.gdelt_max_records,
            "format": "json",
            "sort": "date",
        }

    async def fetch_payload(self, client: FeedClient) -> Optional[Any]:
        return await client.get_json(self.config.gdelt_api_url, params=self.build_params())

    def extract_records(self, payload: Any) -> Iterable[Dict[str, Any]]:
        # GDELT omits the key entirely when a query has no hits
        articles: List[Dict[str, Any]] = payload.get("articles") or []
        if not isinstance(articles, list):
            raise TypeError(f"articles is {type(articles).__name__}, expected list")
        return articles

    def transform(self, record: Dict[str, Any]) -> Optional[RawEvent]:
        title = record.get("title") or ""
        snippet = record.get("snippet") or ""

        rule = match_keyword_rule(title, snippet)
        if rule is None:
            return None

        return RawEvent(
            title=title or "Global News Event",
            lat=rule.lat,
            lon=rule.lon,
            type=rule.event_type,
            source=self.source,
            summary=snippet or "News event reported",
            url=record.get("url") or "",
            date=record.get("seendate") or "",
            country=rule.country,
        )
