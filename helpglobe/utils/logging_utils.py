"""Logging utilities for HelpGlobe.

Provides YAML-based logging configuration and a request-context adapter that
is injected into the aggregator, so one aggregation cycle's log lines can be
told apart from another's. All loggers are namespaced under 'helpglobe'.
"""

from __future__ import annotations

import logging
import logging.config
import os
import uuid
from pathlib import Path
from typing import Any, MutableMapping, Optional, Union

import yaml

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure logging from the YAML configuration file.

    Falls back to basicConfig if the YAML file is not found.

    Args:
        config_path: Path to logging.yaml (defaults to the one shipped in config/).
        log_level: Override log level (e.g., "DEBUG", "INFO", "WARNING").
    """
    if config_path is None:
        import config

        config_path = str(Path(config.__file__).parent / "logging.yaml")

    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)

        if log_level and "loggers" in cfg:
            if "helpglobe" in cfg["loggers"]:
                cfg["loggers"]["helpglobe"]["level"] = log_level.upper()

        logging.config.dictConfig(cfg)
    else:
        logging.basicConfig(
            level=getattr(logging, (log_level or "INFO").upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger under 'helpglobe'.

    Args:
        name: Module or component name (e.g., "adapters.usgs").

    Returns:
        Logger instance with full 'helpglobe.<name>' namespace.
    """
    if name.startswith("helpglobe"):
        return logging.getLogger(name)
    return logging.getLogger(f"helpglobe.{name}")


class RequestContextAdapter(logging.LoggerAdapter):
    """Logger adapter that prefixes every message with a request id.

    Usage:
        logger = get_request_logger("aggregator", request_id="3f2a9c1e")
        logger.info("Fetching feeds")
        # Output: [INFO] helpglobe.aggregator: [3f2a9c1e] Fetching feeds
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        request_id = self.extra.get("request_id", "unknown")
        return f"[{request_id}] {msg}", kwargs


def new_request_id() -> str:
    """Short random identifier for one aggregation cycle."""
    return uuid.uuid4().hex[:8]


def get_request_logger(name: str, request_id: Optional[str] = None) -> RequestContextAdapter:
    """Get a request-context-aware logger adapter.

    Args:
        name: Module or component name.
        request_id: Identifier for the current request; generated when omitted.

    Returns:
        LoggerAdapter that prefixes all messages with [request_id].
    """
    return RequestContextAdapter(get_logger(name), {"request_id": request_id or new_request_id()})
