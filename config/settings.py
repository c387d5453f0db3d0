"""HelpGlobe — AggregatorConfig and environment-based configuration loading.

All runtime configuration flows through AggregatorConfig. Feed endpoints and
thresholds default to config.defaults and can be overridden per environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from config.defaults import (
    API_HOST,
    API_PORT,
    CORS_ORIGINS,
    DEFAULT_LOG_LEVEL,
    GDELT_API_URL,
    GDELT_MAX_RECORDS,
    GDELT_QUERY,
    INCLUDE_SEED_EVENTS,
    MAX_MAGNITUDE,
    MAX_REQUEST_TIMEOUT,
    MIN_MAGNITUDE,
    OUTPUT_ROOT,
    RELIEFWEB_API_URL,
    RELIEFWEB_FROM_DATE,
    RELIEFWEB_LIMIT,
    REQUEST_TIMEOUT,
    USER_AGENT,
    USGS_FEED_URL,
    USGS_MIN_MAGNITUDE,
)

# Load .env file if present; silently skip if missing
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class AggregatorConfig:
    """Single configuration object threaded through adapters, aggregator and API.

    Every field can be overridden by an environment variable of the same name
    in upper case (e.g. REQUEST_TIMEOUT=5).
    """

    # ── HTTP ──────────────────────────────────────────────────────────────────
    request_timeout: float = field(
        default_factory=lambda: _env_float("REQUEST_TIMEOUT", REQUEST_TIMEOUT)
    )
    user_agent: str = field(default_factory=lambda: os.getenv("USER_AGENT", USER_AGENT))

    # ── USGS ──────────────────────────────────────────────────────────────────
    usgs_feed_url: str = field(default_factory=lambda: os.getenv("USGS_FEED_URL", USGS_FEED_URL))
    usgs_min_magnitude: float = field(
        default_factory=lambda: _env_float("USGS_MIN_MAGNITUDE", USGS_MIN_MAGNITUDE)
    )

    # ── ReliefWeb ─────────────────────────────────────────────────────────────
    reliefweb_api_url: str = field(
        default_factory=lambda: os.getenv("RELIEFWEB_API_URL", RELIEFWEB_API_URL)
    )
    reliefweb_limit: int = field(
        default_factory=lambda: _env_int("RELIEFWEB_LIMIT", RELIEFWEB_LIMIT)
    )
    reliefweb_from_date: str = field(
        default_factory=lambda: os.getenv("RELIEFWEB_FROM_DATE", RELIEFWEB_FROM_DATE)
    )

    # ── GDELT ─────────────────────────────────────────────────────────────────
    gdelt_api_url: str = field(default_factory=lambda: os.getenv("GDELT_API_URL", GDELT_API_URL))
    gdelt_query: str = field(default_factory=lambda: os.getenv("GDELT_QUERY", GDELT_QUERY))
    gdelt_max_records: int = field(
        default_factory=lambda: _env_int("GDELT_MAX_RECORDS", GDELT_MAX_RECORDS)
    )

    # ── Seed events ───────────────────────────────────────────────────────────
    include_seed_events: bool = field(
        default_factory=lambda: _env_bool("INCLUDE_SEED_EVENTS", INCLUDE_SEED_EVENTS)
    )

    # ── API server ────────────────────────────────────────────────────────────
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", API_HOST))
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", API_PORT))
    cors_origins: List[str] = field(
        default_factory=lambda: [
            o.strip() for o in os.getenv("CORS_ORIGINS", CORS_ORIGINS).split(",") if o.strip()
        ]
    )

    # ── Output and logging ────────────────────────────────────────────────────
    output_root: str = field(default_factory=lambda: os.getenv("OUTPUT_ROOT", OUTPUT_ROOT))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def __post_init__(self) -> None:
        # A non-positive timeout would disable the per-fetch bound entirely
        if self.request_timeout <= 0:
            self.request_timeout = REQUEST_TIMEOUT
        self.request_timeout = min(self.request_timeout, MAX_REQUEST_TIMEOUT)
        self.usgs_min_magnitude = max(MIN_MAGNITUDE, min(self.usgs_min_magnitude, MAX_MAGNITUDE))
        self.gdelt_max_records = max(1, min(self.gdelt_max_records, 250))
