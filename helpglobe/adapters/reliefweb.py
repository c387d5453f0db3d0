"""ReliefWebAdapter — humanitarian disasters from the ReliefWeb v1 API.

Location is the first listed country's first coordinate pair. Records without
one fall back to (0, 0), which means "no location data" and is filtered out
here rather than plotted on the equator.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from config.defaults import RELIEFWEB_DISASTER_URL
from helpglobe.adapters.base import BaseAdapter
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import EventType, RawEvent
from helpglobe.utils.normalize import round_coordinate

logger = logging.getLogger(__name__)

_DEFAULT_SUMMARY = "Disaster event reported"


def _first(items: Any) -> Optional[Dict[str, Any]]:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def _type_text(value: Any) -> str:
    """Lower-cased disaster type text; the full profile lists types as [{"name": ...}]."""
    if isinstance(value, list):
        value = " ".join(
            str(item.get("name", "")) if isinstance(item, dict) else str(item) for item in value
        )
    return str(value or "").lower()


class ReliefWebAdapter(BaseAdapter):
    """Humanitarian-disaster adapter over ReliefWeb ``/v1/disasters``."""

    name = "ReliefWebAdapter"
    source = "ReliefWeb"

    def build_params(self) -> Dict[str, Any]:
        """Query parameters: newest first, created on or after the configured date."""
        return {
            "appname": self.config.user_agent,
            "limit": self.config.reliefweb_limit,
            "sort[]": "date:desc",
            "filter[field]": "date",
            "filter[value][from]": self.config.reliefweb_from_date,
            "profile": "full",
        }

    async def fetch_payload(self, client: FeedClient) -> Optional[Any]:
        return await client.get_json(self.config.reliefweb_api_url, params=self.build_params())

    def extract_records(self, payload: Any) -> Iterable[Dict[str, Any]]:
        items: List[Dict[str, Any]] = payload["data"]
        if not isinstance(items, list):
            raise TypeError(f"data is {type(items).__name__}, expected list")
        return items

    def transform(self, record: Dict[str, Any]) -> Optional[RawEvent]:
        fields = record["fields"]

        lat, lon, country = 0.0, 0.0, "Unknown"
        first_country = _first(fields.get("country"))
        if first_country is not None:
            country = first_country.get("name") or "Unknown"
            location = first_country.get("location")
            point = _first(location) if isinstance(location, list) else location
            if isinstance(point, dict):
                lat = float(point.get("lat", 0))
                lon = float(point.get("lon", 0))

        # Anything that rounds onto (0, 0) would be plotted there
        if round_coordinate(lat) == 0 and round_coordinate(lon) == 0:
            return None

        event_type = EventType.CONFLICT if "conflict" in _type_text(fields.get("type")) else EventType.DISASTER

        description = fields.get("description")
        if isinstance(description, list):
            description = description[0] if description else None
        # Capped to the summary length by the normalizer
        summary = str(description) if description else _DEFAULT_SUMMARY

        date_info = fields.get("date") or {}
        return RawEvent(
            title=fields.get("name") or "Disaster Event",
            lat=lat,
            lon=lon,
            type=event_type,
            source=self.source,
            summary=summary,
            url=RELIEFWEB_DISASTER_URL.format(id=fields.get("id", record.get("id", ""))),
            date=date_info.get("created", "") if isinstance(date_info, dict) else "",
            country=country,
        )
