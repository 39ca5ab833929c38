"""Run the API server.

Usage:
    games-api [--port 8080] [--games-file [PATH]]

Or with uvicorn directly:
    uvicorn --factory games_api:create_app
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

import uvicorn

from . import configure_logging, create_app
from .config import DEFAULT_GAMES_FILE, Settings

logger = logging.getLogger("app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="games-api",
        description="Serve the game catalog and contact form API",
    )
    parser.add_argument("--host", help="Bind address (env HOST)")
    parser.add_argument("--port", type=int, help="TCP port (env PORT)")
    parser.add_argument(
        "--allow-origin", help="Access-Control-Allow-Origin value (env ALLOW_ORIGIN)"
    )
    parser.add_argument(
        "--games-file",
        nargs="?",
        const=DEFAULT_GAMES_FILE,
        help=f"Load the catalog from a JSON file (default {DEFAULT_GAMES_FILE}; env GAMES_FILE)",
    )
    parser.add_argument("--log-level", help="Logging level (env LOG_LEVEL)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay command line flags that were given on top of `base`."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "allow_origin": args.allow_origin,
        "games_file": args.games_file,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    return dataclasses.replace(
        base, **{k: v for k, v in overrides.items() if v is not None}
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args, Settings.from_env())
    except ValueError as e:
        sys.exit(f"games-api: {e}")

    configure_logging(settings.log_level)
    logger.info("Serving API on %s:%d", settings.host, settings.port)

    # A catalog failure aborts lifespan startup; uvicorn then exits
    # non-zero without binding the socket.
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
