"""SeedAdapter — curated reference events for known ongoing crises.

These keep the globe populated when every network feed fails. Dates are
relative to the aggregation time; severity and category are curated and
bypass the classifier.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Optional

from config.settings import AggregatorConfig
from helpglobe.adapters.base import BaseAdapter
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import Category, EventType, RawEvent, Severity
from helpglobe.utils.date_utils import format_iso, utc_now

logger = logging.getLogger(__name__)


SEED_EVENTS: List[Dict[str, Any]] = [
    # ── WHO health emergencies ───────────────────────────────────────────────
    {
        "title": "COVID-19 Global Health Emergency",
        "lat": 0.0, "lon": 0.0,
        "summary": "Ongoing global health emergency requiring international coordination and medical assistance.",
        "url": "https://www.who.int/emergencies/diseases/novel-coronavirus-2019",
        "type": EventType.HEALTH, "source": "WHO", "hours_ago": 0,
        "severity": Severity.CRITICAL, "category": Category.HEALTH, "country": "Global",
    },
    {
        "title": "Ebola Outbreak in DRC",
        "lat": -4.0383, "lon": 21.7587,
        "summary": "Health emergency requiring immediate medical assistance and containment measures.",
        "url": "https://www.who.int/emergencies/outbreaks/ebola",
        "type": EventType.HEALTH, "source": "WHO", "hours_ago": 24,
        "severity": Severity.HIGH, "category": Category.HEALTH, "country": "DRC",
    },
    # ── UN OCHA humanitarian crises ──────────────────────────────────────────
    {
        "title": "Humanitarian Crisis in Gaza",
        "lat": 31.3547, "lon": 34.3088,
        "summary": "Severe humanitarian crisis requiring immediate aid, medical assistance, and food security support.",
        "url": "https://reliefweb.int/country/pse",
        "type": EventType.CONFLICT, "source": "UN OCHA", "hours_ago": 1,
        "severity": Severity.CRITICAL, "category": Category.CONFLICT, "country": "Gaza",
    },
    {
        "title": "Humanitarian Crisis in Ukraine",
        "lat": 50.4501, "lon": 30.5234,
        "summary": "Ongoing humanitarian crisis requiring international aid and refugee assistance.",
        "url": "https://reliefweb.int/country/ukr",
        "type": EventType.CONFLICT, "source": "UN OCHA", "hours_ago": 2,
        "severity": Severity.CRITICAL, "category": Category.CONFLICT, "country": "Ukraine",
    },
    {
        "title": "Drought Crisis in Somalia",
        "lat": 5.1521, "lon": 46.1996,
        "summary": "Severe drought affecting food security and requiring emergency humanitarian assistance.",
        "url": "https://reliefweb.int/country/som",
        "type": EventType.DISASTER, "source": "UN OCHA", "hours_ago": 4,
        "severity": Severity.HIGH, "category": Category.NATURAL, "country": "Somalia",
    },
    # ── Wire services ─────────────────────────────────────────────────────────
    {
        "title": "Global Climate Crisis Update",
        "lat": 0.0, "lon": 0.0,
        "summary": "BBC reports on global climate emergencies and environmental disasters affecting multiple regions.",
        "url": "https://www.bbc.com/news",
        "type": EventType.DISASTER, "source": "BBC", "hours_ago": 0.5,
        "severity": Severity.HIGH, "category": Category.ENVIRONMENTAL, "country": "Global",
    },
    {
        "title": "Economic Crisis in New York",
        "lat": 40.7128, "lon": -74.0060,
        "summary": "Reuters reports on economic instability affecting financial markets and requiring assistance.",
        "url": "https://www.reuters.com",
        "type": EventType.ECONOMIC, "source": "Reuters", "hours_ago": 1,
        "severity": Severity.MEDIUM, "category": Category.ECONOMIC, "country": "USA",
    },
    {
        "title": "Social Unrest in Paris",
        "lat": 48.8566, "lon": 2.3522,
        "summary": "AP News reports on social protests and civil unrest requiring monitoring and potential assistance.",
        "url": "https://apnews.com",
        "type": EventType.PROTEST, "source": "AP News", "hours_ago": 1.5,
        "severity": Severity.MEDIUM, "category": Category.SOCIAL, "country": "France",
    },
    {
        "title": "Health Alert in Tokyo",
        "lat": 35.6762, "lon": 139.6503,
        "summary": "CNN reports on health emergency requiring medical assistance and public health measures.",
        "url": "https://www.cnn.com",
        "type": EventType.HEALTH, "source": "CNN", "hours_ago": 2,
        "severity": Severity.HIGH, "category": Category.HEALTH, "country": "Japan",
    },
    {
        "title": "Regional Tensions in Middle East",
        "lat": 25.2048, "lon": 55.2708,
        "summary": "Al Jazeera reports on regional tensions requiring diplomatic intervention and humanitarian aid.",
        "url": "https://www.aljazeera.com",
        "type": EventType.CONFLICT, "source": "Al Jazeera", "hours_ago": 2.5,
        "severity": Severity.HIGH, "category": Category.CONFLICT, "country": "UAE",
    },
    # ── Regional bodies ───────────────────────────────────────────────────────
    {
        "title": "Regional Crisis in East Africa",
        "lat": -1.2921, "lon": 36.8219,
        "summary": "African Union reports on regional crisis requiring continental coordination and humanitarian assistance.",
        "url": "https://au.int",
        "type": EventType.CONFLICT, "source": "African Union", "hours_ago": 3,
        "severity": Severity.HIGH, "category": Category.CONFLICT, "country": "Kenya",
    },
    {
        "title": "Natural Disaster in Southeast Asia",
        "lat": 1.3521, "lon": 103.8198,
        "summary": "ASEAN reports on natural disaster affecting multiple countries requiring regional coordination.",
        "url": "https://asean.org",
        "type": EventType.DISASTER, "source": "ASEAN", "hours_ago": 3.5,
        "severity": Severity.HIGH, "category": Category.NATURAL, "country": "Singapore",
    },
    {
        "title": "Migration Crisis in Europe",
        "lat": 50.0755, "lon": 14.4378,
        "summary": "EU reports on migration crisis requiring humanitarian assistance and refugee support.",
        "url": "https://europa.eu",
        "type": EventType.NEWS, "source": "European Union", "hours_ago": 4,
        "severity": Severity.HIGH, "category": Category.SOCIAL, "country": "Czech Republic",
    },
]


class SeedAdapter(BaseAdapter):
    """Static adapter contributing SEED_EVENTS; no network access."""

    name = "SeedAdapter"
    source = "seed"

    def __init__(
        self,
        config: Optional[AggregatorConfig] = None,
        events: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(config)
        self.events = SEED_EVENTS if events is None else events

    async def fetch_payload(self, client: FeedClient) -> Optional[Any]:
        return self.events

    def extract_records(self, payload: Any) -> Iterable[Dict[str, Any]]:
        return list(payload)

    def transform(self, record: Dict[str, Any]) -> Optional[RawEvent]:
        date = utc_now() - timedelta(hours=float(record.get("hours_ago", 0)))
        return RawEvent(
            title=record["title"],
            lat=record["lat"],
            lon=record["lon"],
            type=record["type"],
            source=record["source"],
            summary=record.get("summary", ""),
            url=record.get("url", ""),
            date=format_iso(date),
            country=record.get("country"),
            region=record.get("region"),
            severity=record.get("severity"),
            category=record.get("category"),
        )
