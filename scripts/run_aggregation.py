#!/usr/bin/env python3
"""HelpGlobe CLI — run one aggregation cycle outside the API server.

Usage:
    python scripts/run_aggregation.py
    python scripts/run_aggregation.py --save --output-root outputs/snapshots
    python scripts/run_aggregation.py --no-seed --min-magnitude 4.5 --type earthquake
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.defaults import (  # noqa: E402
    DEFAULT_LOG_LEVEL,
    GDELT_MAX_RECORDS,
    OUTPUT_ROOT,
    RELIEFWEB_LIMIT,
    REQUEST_TIMEOUT,
    USGS_MIN_MAGNITUDE,
)
from config.settings import AggregatorConfig  # noqa: E402
from helpglobe.aggregator import aggregate_events, filter_events  # noqa: E402
from helpglobe.io.persistence import save_json, snapshot_path  # noqa: E402
from helpglobe.utils.logging_utils import configure_logging  # noqa: E402


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argparse argument parser for a one-shot aggregation run."""
    parser = argparse.ArgumentParser(
        prog="run_aggregation",
        description="HelpGlobe — aggregate crisis events from public feeds",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # ── Fetching ────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        default=USGS_MIN_MAGNITUDE,
        help="Drop USGS earthquakes below this magnitude",
    )
    parser.add_argument(
        "--reliefweb-limit",
        type=int,
        default=RELIEFWEB_LIMIT,
        help="Number of ReliefWeb disasters requested",
    )
    parser.add_argument(
        "--gdelt-max-records",
        type=int,
        default=GDELT_MAX_RECORDS,
        help="Maximum GDELT articles requested (GDELT hard limit: 250)",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        default=False,
        help="Leave the curated seed events out of the result",
    )

    # ── Filters ─────────────────────────────────────────────────────────────────
    parser.add_argument("--type", action="append", dest="types", help="Keep only this event type")
    parser.add_argument(
        "--severity", action="append", dest="severities", help="Keep only this severity"
    )
    parser.add_argument(
        "--category", action="append", dest="categories", help="Keep only this category"
    )
    parser.add_argument("--source", action="append", dest="sources", help="Keep only this source")

    # ── Output and logging ──────────────────────────────────────────────────────
    parser.add_argument(
        "--save",
        action="store_true",
        default=False,
        help="Write a timestamped JSON snapshot instead of printing to stdout",
    )
    parser.add_argument(
        "--output-root",
        type=str,
        default=OUTPUT_ROOT,
        help="Directory for saved snapshots",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity level",
    )

    return parser


def args_to_config(args: argparse.Namespace) -> AggregatorConfig:
    """Convert parsed CLI arguments to an AggregatorConfig instance."""
    return AggregatorConfig(
        request_timeout=args.timeout,
        usgs_min_magnitude=args.min_magnitude,
        reliefweb_limit=args.reliefweb_limit,
        gdelt_max_records=args.gdelt_max_records,
        include_seed_events=not args.no_seed,
        output_root=args.output_root,
        log_level=args.log_level,
    )


def main() -> None:
    """CLI entrypoint — parse arguments, aggregate, print or save."""
    parser = build_arg_parser()
    args = parser.parse_args()

    configure_logging(log_level=args.log_level)
    logger = logging.getLogger("helpglobe.run_aggregation")

    config = args_to_config(args)
    logger.info(
        "HelpGlobe aggregation starting | timeout: %.1fs | seed events: %s",
        config.request_timeout,
        config.include_seed_events,
    )

    try:
        result = asyncio.run(aggregate_events(config))
        events = filter_events(
            result.events,
            types=args.types,
            severities=args.severities,
            categories=args.categories,
            sources=args.sources,
        )
        payload = [event.to_dict() for event in events]

        for warning in result.warnings:
            logger.warning("%s", warning)

        if args.save:
            path = snapshot_path(config.output_root)
            save_json(payload, path)
            logger.info("Saved %d events to %s", len(payload), path)
        else:
            json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
            sys.stdout.write("\n")

    except KeyboardInterrupt:
        logger.info("Aggregation interrupted by user")
        sys.exit(0)
    except Exception as exc:
        logger.exception("Aggregation failed with unhandled exception: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
