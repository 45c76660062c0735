"""Command-line entry point: ``python -m users_api``."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from users_api.core.config import ConfigurationError, get_settings
from users_api.core.logging import configure_logging

logger = logging.getLogger("users_api.main")

APP_FACTORY = "users_api.main:create_application"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Users API server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind address for the API (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port for the HTTP API (default: PORT or 5000, currently {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development mode)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    try:
        args = _parse_args(argv)
        settings = get_settings()
        settings.require_mongo_uri()
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc

    import uvicorn

    configure_logging(settings.log_level)
    logger.info(
        "Starting users API on http://%s:%s%s",
        args.host,
        args.port,
        " (reload)" if args.reload else "",
    )
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
