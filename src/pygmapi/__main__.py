"""Command line entry point: ``python -m pygmapi``."""

from __future__ import annotations

import argparse
import logging
import sys

from aiohttp import web

from pygmapi.config import GmConfig
from pygmapi.exceptions import GmConfigError
from pygmapi.server import create_app

_logger = logging.getLogger("pygmapi")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pygmapi",
        description="Serve the simplified vehicle API in front of the GM API.",
    )
    parser.add_argument("--host", help="Interface to bind (env GM_HOST, default 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (env PORT, default 3000)")
    parser.add_argument("--base-url", help="Upstream GM API base URL (env GM_API_BASE_URL)")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds allowed for one upstream call (env GM_API_REQUEST_TIMEOUT, default: aiohttp's)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (env GM_LOG_LEVEL, default INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides = {
        "host": args.host,
        "port": args.port,
        "base_url": args.base_url,
        "request_timeout": args.timeout,
        "log_level": args.log_level,
    }
    try:
        config = GmConfig.from_env(**{k: v for k, v in overrides.items() if v is not None})
    except GmConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    _logger.info("Server listening on %s:%s", config.host, config.port)
    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
