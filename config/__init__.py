"""HelpGlobe configuration package."""

from config.defaults import (
    GDELT_MAX_RECORDS,
    INCLUDE_SEED_EVENTS,
    REQUEST_TIMEOUT,
    SUMMARY_MAX_LENGTH,
    TEXT_MAX_LENGTH,
    USER_AGENT,
    USGS_MIN_MAGNITUDE,
)
from config.settings import AggregatorConfig

__all__ = [
    "AggregatorConfig",
    "REQUEST_TIMEOUT",
    "USGS_MIN_MAGNITUDE",
    "GDELT_MAX_RECORDS",
    "INCLUDE_SEED_EVENTS",
    "TEXT_MAX_LENGTH",
    "SUMMARY_MAX_LENGTH",
    "USER_AGENT",
]
