"""Shared pytest fixtures for HelpGlobe tests.

- Fixture data lives in tests/fixtures/ as static JSON files
- Feed HTTP is served by httpx.MockTransport; no real external calls are made
- Async tests run under pytest-asyncio (asyncio_mode = "auto")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import httpx
import pytest

_FIXTURES_DIR = Path(__file__).parent / "fixtures"

USGS_HOST = "earthquake.usgs.gov"
RELIEFWEB_HOST = "api.reliefweb.int"
GDELT_HOST = "api.gdeltproject.org"


def _load(name: str) -> Dict[str, Any]:
    with open(_FIXTURES_DIR / name, encoding="utf-8") as f:
        return json.load(f)


# ── Raw fixture data loaders ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def usgs_raw() -> Dict[str, Any]:
    """USGS all_day GeoJSON: 6 features, 3 of which survive the adapter.

    Tokyo M7.2 at [139.6503, 35.6762], 2024-01-15T12:00Z
    Hawaii M4.5, 2024-01-15T11:00Z
    Unnamed M3.0 without url, 2024-01-15T10:00Z
    Dropped: M1.2 (below cutoff), null magnitude, missing geometry
    """
    return _load("usgs_feed.json")


@pytest.fixture(scope="session")
def reliefweb_raw() -> Dict[str, Any]:
    """ReliefWeb disasters: 4 items, 2 with a usable location (one flood, one conflict)."""
    return _load("reliefweb_disasters.json")


@pytest.fixture(scope="session")
def gdelt_raw() -> Dict[str, Any]:
    """GDELT ArtList: 4 articles, 3 matching a keyword rule (ukraine, protest, health)."""
    return _load("gdelt_artlist.json")


# ── Config fixture ───────────────────────────────────────────────────────────────

@pytest.fixture
def test_config():
    """AggregatorConfig with short timeouts and no seed events."""
    from config.settings import AggregatorConfig

    return AggregatorConfig(
        request_timeout=2.0,
        include_seed_events=False,
        log_level="WARNING",
    )


# ── Mock feed transport ──────────────────────────────────────────────────────────

@pytest.fixture
def feed_transport(usgs_raw, reliefweb_raw, gdelt_raw):
    """Factory for an httpx.MockTransport serving the fixture feeds by host.

    Usage:
        transport = feed_transport()                                  # all feeds healthy
        transport = feed_transport(overrides={USGS_HOST: httpx.Response(503)})

    An override may be an httpx.Response, or an exception instance to raise.
    Every request seen is appended to ``transport.requests``.
    """

    def _factory(overrides: Optional[Dict[str, Any]] = None) -> httpx.MockTransport:
        payloads = {
            USGS_HOST: usgs_raw,
            RELIEFWEB_HOST: reliefweb_raw,
            GDELT_HOST: gdelt_raw,
        }
        overrides = overrides or {}
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            host = request.url.host
            if host in overrides:
                override = overrides[host]
                if isinstance(override, Exception):
                    raise override
                return override
            if host in payloads:
                return httpx.Response(200, json=payloads[host])
            return httpx.Response(404)

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport

    return _factory


@pytest.fixture
def make_feed_client(feed_transport) -> Callable[..., Any]:
    """Factory for a FeedClient wired to the mock feed transport."""
    from helpglobe.clients.feed_client import FeedClient

    def _factory(overrides: Optional[Dict[str, Any]] = None, request_timeout: float = 2.0):
        return FeedClient(request_timeout=request_timeout, transport=feed_transport(overrides))

    return _factory


# ── Event factories ──────────────────────────────────────────────────────────────

@pytest.fixture
def make_event():
    """Factory for normalized Events with sensible defaults."""
    from helpglobe.models.events import Event

    def _factory(**overrides):
        fields = dict(
            id="conflict_31.35_34.31_Test",
            title="Test",
            lat=31.35,
            lon=34.31,
            summary="",
            url="https://example.com",
            type="conflict",
            date="2024-01-15T12:00:00.000Z",
            source="test",
            severity="high",
            category="conflict",
        )
        fields.update(overrides)
        return Event(**fields)

    return _factory


@pytest.fixture
def make_raw_event():
    """Factory for adapter-level RawEvents with sensible defaults."""
    from helpglobe.models.events import RawEvent

    def _factory(**overrides):
        fields = dict(
            title="Test event",
            lat=10.0,
            lon=20.0,
            type="disaster",
            source="test",
            summary="Something happened",
            url="https://example.com/event",
            date="2024-01-15T12:00:00Z",
        )
        fields.update(overrides)
        return RawEvent(**fields)

    return _factory
