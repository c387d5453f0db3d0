"""Unit tests for helpglobe.utils.date_utils."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from helpglobe.utils.date_utils import (
    epoch_ms_to_iso,
    format_iso,
    normalize_timestamp,
    parse_timestamp,
)


class TestFormatIso:
    def test_aware_datetime(self):
        dt = datetime(2024, 1, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_iso(dt) == "2024-01-15T12:00:00.123Z"

    def test_naive_treated_as_utc(self):
        assert format_iso(datetime(2024, 1, 15, 12)) == "2024-01-15T12:00:00.000Z"

    def test_offset_converted_to_utc(self):
        dt = datetime(2024, 1, 15, 14, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso(dt) == "2024-01-15T12:00:00.000Z"


class TestEpochMsToIso:
    def test_usgs_epoch(self):
        assert epoch_ms_to_iso(1705320000000) == "2024-01-15T12:00:00.000Z"

    def test_numeric_string(self):
        assert epoch_ms_to_iso("1705320000000") == "2024-01-15T12:00:00.000Z"

    @pytest.mark.parametrize("value", [None, True, "abc", [], {}])
    def test_invalid_returns_none(self, value):
        assert epoch_ms_to_iso(value) is None

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "NaN", 1e300])
    def test_non_finite_or_out_of_range_returns_none(self, value):
        assert epoch_ms_to_iso(value) is None


class TestParseTimestamp:
    def test_gdelt_compact(self):
        dt = parse_timestamp("20240115T093000Z")
        assert dt == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def test_fourteen_digit(self):
        assert parse_timestamp("20240115093000") == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def test_date_only(self):
        assert parse_timestamp("20240115") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_iso_with_offset(self):
        dt = parse_timestamp("2024-01-14T08:30:00+00:00")
        assert dt == datetime(2024, 1, 14, 8, 30, tzinfo=timezone.utc)

    def test_free_text_date(self):
        dt = parse_timestamp("January 15, 2024")
        assert dt is not None
        assert dt.date().isoformat() == "2024-01-15"

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", 12345, "20241345"])
    def test_unparseable_returns_none(self, value):
        assert parse_timestamp(value) is None

    def test_result_is_aware(self):
        assert parse_timestamp("2024-01-15T12:00:00").tzinfo is not None


class TestNormalizeTimestamp:
    def test_normalizes(self):
        assert normalize_timestamp("20240115T093000Z", "fallback") == "2024-01-15T09:30:00.000Z"

    def test_fallback(self):
        assert normalize_timestamp("garbage", "2024-01-16T00:00:00.000Z") == "2024-01-16T00:00:00.000Z"

    def test_normalized_strings_sort_chronologically(self):
        values = ["2024-01-15T09:30:00+05:00", "20240115T050000Z", "2024-01-14T23:59:59Z"]
        normalized = sorted(normalize_timestamp(v, "") for v in values)
        assert normalized == [
            "2024-01-14T23:59:59.000Z",
            "2024-01-15T04:30:00.000Z",
            "2024-01-15T05:00:00.000Z",
        ]
