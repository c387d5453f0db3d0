"""Unit tests for helpglobe.utils.validation."""

from __future__ import annotations

import math

import pytest

from helpglobe.utils.validation import (
    validate_coordinates,
    validate_date,
    validate_magnitude,
    validate_url,
)


class TestValidateCoordinates:
    @pytest.mark.parametrize("lat, lon", [(0, 0), (90, 180), (-90, -180), (35.68, 139.65)])
    def test_valid(self, lat, lon):
        assert validate_coordinates(lat, lon) is True

    @pytest.mark.parametrize(
        "lat, lon",
        [
            (90.01, 0),
            (0, -180.01),
            (math.nan, 0),
            (0, math.inf),
            ("35.6", 139.6),
            (None, 0),
            (True, 0),
        ],
    )
    def test_invalid(self, lat, lon):
        assert validate_coordinates(lat, lon) is False


class TestValidateMagnitude:
    @pytest.mark.parametrize("value", [0, 2.5, 10.0])
    def test_valid(self, value):
        assert validate_magnitude(value) is True

    @pytest.mark.parametrize("value", [-0.1, 10.1, math.nan, None, "5", False])
    def test_invalid(self, value):
        assert validate_magnitude(value) is False


class TestValidateDate:
    def test_valid(self):
        assert validate_date("2024-01-15T12:00:00Z") is True

    def test_invalid(self):
        assert validate_date("yesterday-ish") is False


class TestValidateUrl:
    @pytest.mark.parametrize("url", ["https://reliefweb.int/disaster/51234", "http://example.com"])
    def test_valid(self, url):
        assert validate_url(url) is True

    @pytest.mark.parametrize("url", ["", "#", "ftp://example.com", "https://", None, "javascript:alert(1)"])
    def test_invalid(self, url):
        assert validate_url(url) is False
