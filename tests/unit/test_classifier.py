"""Unit tests for helpglobe.analysis.classifier."""

from __future__ import annotations

import pytest

from helpglobe.analysis.classifier import classify_category, classify_severity
from helpglobe.models.events import Category, EventType, Severity


class TestClassifySeverity:
    @pytest.mark.parametrize(
        "magnitude, expected",
        [
            (7.2, Severity.CRITICAL),
            (7.0, Severity.CRITICAL),
            (6.9, Severity.HIGH),
            (6.0, Severity.HIGH),
            (5.9, Severity.MEDIUM),
            (4.0, Severity.MEDIUM),
            (3.9, Severity.LOW),
            (2.5, Severity.LOW),
        ],
    )
    def test_earthquake_thresholds(self, magnitude, expected):
        assert classify_severity(EventType.EARTHQUAKE, magnitude) == expected

    def test_earthquake_without_magnitude_is_low(self):
        assert classify_severity(EventType.EARTHQUAKE, None) == Severity.LOW

    def test_earthquake_zero_magnitude_is_low(self):
        assert classify_severity(EventType.EARTHQUAKE, 0.0) == Severity.LOW

    def test_conflict_default_high(self):
        assert classify_severity(EventType.CONFLICT, title="Border clashes") == Severity.HIGH

    def test_conflict_war_is_critical(self):
        assert classify_severity(EventType.CONFLICT, title="War in the region") == Severity.CRITICAL

    def test_conflict_invasion_case_insensitive(self):
        assert classify_severity(EventType.CONFLICT, title="INVASION feared") == Severity.CRITICAL

    def test_conflict_substring_match(self):
        """"warning" contains "war" and escalates."""
        assert classify_severity(EventType.CONFLICT, title="Ceasefire warning") == Severity.CRITICAL

    def test_disaster_default_medium(self):
        assert classify_severity(EventType.DISASTER, title="Floods") == Severity.MEDIUM

    @pytest.mark.parametrize("title", ["Major flooding", "Severe drought"])
    def test_disaster_escalates(self, title):
        assert classify_severity(EventType.DISASTER, title=title) == Severity.HIGH

    def test_health_default_medium(self):
        assert classify_severity(EventType.HEALTH, title="Cholera cases") == Severity.MEDIUM

    @pytest.mark.parametrize("title", ["Pandemic response", "Ebola outbreak"])
    def test_health_escalates(self, title):
        assert classify_severity(EventType.HEALTH, title=title) == Severity.CRITICAL

    @pytest.mark.parametrize("event_type", [EventType.PROTEST, EventType.ECONOMIC, EventType.NEWS])
    def test_other_types_low(self, event_type):
        assert classify_severity(event_type, title="War and outbreak") == Severity.LOW

    def test_missing_title_does_not_raise(self):
        assert classify_severity(EventType.CONFLICT, title=None) == Severity.HIGH

    def test_deterministic(self):
        results = {classify_severity(EventType.HEALTH, title="Outbreak") for _ in range(5)}
        assert results == {Severity.CRITICAL}


class TestClassifyCategory:
    @pytest.mark.parametrize(
        "event_type, expected",
        [
            (EventType.EARTHQUAKE, Category.NATURAL),
            (EventType.DISASTER, Category.NATURAL),
            (EventType.CONFLICT, Category.CONFLICT),
            (EventType.HEALTH, Category.HEALTH),
            (EventType.PROTEST, Category.SOCIAL),
            (EventType.ECONOMIC, Category.NATURAL),
            (EventType.NEWS, Category.NATURAL),
        ],
    )
    def test_mapping(self, event_type, expected):
        assert classify_category(event_type) == expected

    def test_unknown_type_defaults_to_natural(self):
        assert classify_category("volcano") == Category.NATURAL
