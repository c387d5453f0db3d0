"""Unit tests for helpglobe.analysis.event_builder.build_event."""

from __future__ import annotations

import math

import pytest

from helpglobe.analysis.event_builder import build_event
from helpglobe.models.events import Category, Severity

FETCHED_AT = "2024-01-16T00:00:00.000Z"


class TestBuildEvent:
    def test_happy_path(self, make_raw_event):
        raw = make_raw_event(
            title="Earthquake - 10 km SSW of Tokyo, Japan",
            lat=35.6762,
            lon=139.6503,
            type="earthquake",
            source="USGS",
            magnitude=7.2,
            country="Japan",
            date="2024-01-15T12:00:00.000Z",
        )
        event = build_event(raw, FETCHED_AT)

        assert event is not None
        assert event.lat == pytest.approx(35.68)
        assert event.lon == pytest.approx(139.65)
        assert event.severity == Severity.CRITICAL
        assert event.category == Category.NATURAL
        assert event.id == "earthquake_35.68_139.65_Earthquake"
        assert event.date == "2024-01-15T12:00:00.000Z"
        assert event.magnitude == 7.2
        assert event.country == "Japan"
        assert event.region is None

    def test_unknown_type_dropped(self, make_raw_event):
        assert build_event(make_raw_event(type="volcano"), FETCHED_AT) is None

    @pytest.mark.parametrize(
        "lat, lon",
        [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0), (0.0, -180.5), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_out_of_range_coordinates_dropped(self, make_raw_event, lat, lon):
        assert build_event(make_raw_event(lat=lat, lon=lon), FETCHED_AT) is None

    def test_boundary_coordinates_kept(self, make_raw_event):
        event = build_event(make_raw_event(lat=-90.0, lon=180.0), FETCHED_AT)
        assert event is not None

    @pytest.mark.parametrize("magnitude", [-1.0, 10.5, math.nan])
    def test_invalid_magnitude_dropped(self, make_raw_event, magnitude):
        raw = make_raw_event(type="earthquake", magnitude=magnitude)
        assert build_event(raw, FETCHED_AT) is None

    def test_curated_severity_and_category_kept(self, make_raw_event):
        raw = make_raw_event(type="news", severity="high", category="social")
        event = build_event(raw, FETCHED_AT)
        assert event.severity == Severity.HIGH
        assert event.category == Category.SOCIAL

    def test_invalid_curated_severity_reclassified(self, make_raw_event):
        raw = make_raw_event(type="disaster", title="Severe storm", severity="extreme")
        event = build_event(raw, FETCHED_AT)
        assert event.severity == Severity.HIGH

    def test_text_sanitized(self, make_raw_event):
        raw = make_raw_event(title="  <b>Flood</b> ", summary="<i>" + "x" * 300 + "</i>")
        event = build_event(raw, FETCHED_AT)
        assert event.title == "bFlood/b"
        assert "<" not in event.summary and ">" not in event.summary
        assert event.summary.endswith("...")
        assert len(event.summary) == 203

    def test_missing_url_falls_back(self, make_raw_event):
        event = build_event(make_raw_event(url=""), FETCHED_AT)
        assert event.url == "#"

    def test_unparseable_date_uses_fetch_time(self, make_raw_event):
        event = build_event(make_raw_event(date="not a date"), FETCHED_AT)
        assert event.date == FETCHED_AT

    def test_empty_date_uses_fetch_time(self, make_raw_event):
        event = build_event(make_raw_event(date=""), FETCHED_AT)
        assert event.date == FETCHED_AT

    def test_offset_date_normalized_to_utc(self, make_raw_event):
        event = build_event(make_raw_event(date="2024-01-14T08:30:00+02:00"), FETCHED_AT)
        assert event.date == "2024-01-14T06:30:00.000Z"

    def test_blank_country_becomes_none(self, make_raw_event):
        event = build_event(make_raw_event(country="   "), FETCHED_AT)
        assert event.country is None

    def test_to_dict_omits_unset_optionals(self, make_raw_event):
        event = build_event(make_raw_event(), FETCHED_AT)
        data = event.to_dict()
        assert "magnitude" not in data
        assert "country" not in data
        assert set(data) >= {
            "id", "title", "lat", "lon", "summary", "url",
            "type", "date", "source", "severity", "category",
        }
