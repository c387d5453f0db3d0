"""USGSAdapter — seismic events from the USGS GeoJSON summary feed.

- Coordinates arrive as [lon, lat, depth] and are swapped here
- Epoch-millisecond times are converted to ISO-8601
- Features without a magnitude, or below the configured cutoff, are dropped
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from config.defaults import USGS_EVENT_PAGE_URL, USGS_MAJOR_MAGNITUDE, USGS_MODERATE_MAGNITUDE
from helpglobe.adapters.base import BaseAdapter
from helpglobe.clients.feed_client import FeedClient
from helpglobe.models.events import EventType, RawEvent
from helpglobe.utils.date_utils import epoch_ms_to_iso

logger = logging.getLogger(__name__)


def describe_magnitude(magnitude: float, place: Optional[str]) -> str:
    """Human-readable summary for an earthquake, tiered by magnitude.

    Args:
        magnitude: Reported magnitude.
        place: USGS place description, if any.

    Returns:
        e.g. "Magnitude 7.2 earthquake - major earthquake that may cause
        significant damage near Tokyo".
    """
    summary = f"Magnitude {magnitude} earthquake"
    if magnitude >= USGS_MAJOR_MAGNITUDE:
        summary += " - major earthquake that may cause significant damage"
    elif magnitude >= USGS_MODERATE_MAGNITUDE:
        summary += " - moderate earthquake"
    else:
        summary += " - minor earthquake"
    if place:
        summary += f" near {place}"
    return summary


def country_from_place(place: Optional[str]) -> str:
    """USGS places end in the country or state: "10 km SSW of Tokyo, Japan" → "Japan"."""
    if not place:
        return "Unknown"
    return place.split(", ")[-1] or "Unknown"


class USGSAdapter(BaseAdapter):
    """Seismic adapter over the USGS ``all_day.geojson`` feature collection."""

    name = "USGSAdapter"
    source = "USGS"

    async def fetch_payload(self, client: FeedClient) -> Optional[Any]:
        return await client.get_json(self.config.usgs_feed_url)

    def extract_records(self, payload: Any) -> Iterable[Dict[str, Any]]:
        features: List[Dict[str, Any]] = payload["features"]
        if not isinstance(features, list):
            raise TypeError(f"features is {type(features).__name__}, expected list")
        return features

    def transform(self, record: Dict[str, Any]) -> Optional[RawEvent]:
        props = record.get("properties") or {}
        coords = record["geometry"]["coordinates"]

        magnitude = props.get("mag")
        if magnitude is None or isinstance(magnitude, bool):
            return None
        magnitude = float(magnitude)
        if magnitude < self.config.usgs_min_magnitude:
            return None

        place = props.get("place")
        return RawEvent(
            title=f"Earthquake - {place or 'Unknown Location'}",
            lat=float(coords[1]),
            lon=float(coords[0]),
            type=EventType.EARTHQUAKE,
            source=self.source,
            summary=describe_magnitude(magnitude, place),
            url=props.get("url") or USGS_EVENT_PAGE_URL.format(ids=props.get("ids", "")),
            date=epoch_ms_to_iso(props.get("time")) or "",
            magnitude=magnitude,
            country=country_from_place(place),
        )
