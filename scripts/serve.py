#!/usr/bin/env python3
"""HelpGlobe CLI — serve the event API with uvicorn.

Usage:
    python scripts/serve.py
    python scripts/serve.py --host 127.0.0.1 --port 9000 --reload
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import uvicorn  # noqa: E402

from config.settings import AggregatorConfig  # noqa: E402


def build_arg_parser(config: AggregatorConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serve",
        description="HelpGlobe — serve aggregated crisis events over HTTP",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--host", type=str, default=config.api_host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.api_port, help="Bind port")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=False,
        help="Restart the server on code changes (development only)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="uvicorn logging verbosity level",
    )
    return parser


def main() -> None:
    config = AggregatorConfig()
    args = build_arg_parser(config).parse_args()
    uvicorn.run(
        "helpglobe.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
