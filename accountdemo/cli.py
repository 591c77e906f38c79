# =============================================================================
# File: accountdemo/cli.py
# Purpose: Command-line entry points: parse the connection, start the server.
# =============================================================================
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from flask import Flask

from . import create_app
from .config import Settings, load_settings
from .connection import EXPECTED_ARGS, positional_args, resolve_connection

log = logging.getLogger(__name__)

USAGE = (
    "Expected arguments: <username> <password> <database>\n"
    "   where <database> is either the name of a database on localhost\n"
    "                           or of the form <host>/<db-name>"
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s - %(message)s",
    )


def serve(app: Flask) -> None:
    settings = app.extensions["settings"]
    # in-memory databases live on a single shared connection
    app.run(host=settings.host, port=settings.port, threaded=not settings.in_memory)


def _start(argv: Sequence[str], base: Settings) -> None:
    descriptor = resolve_connection(argv)
    serve(create_app(base, descriptor))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Strict entry point: exactly three connection arguments are required."""
    argv = sys.argv[1:] if argv is None else list(argv)

    if len(positional_args(argv)) != EXPECTED_ARGS:
        print(USAGE)
        sys.exit(0)

    base = load_settings()
    configure_logging(base.log_level)
    _start(argv, base)


def main_lenient(argv: Optional[Sequence[str]] = None) -> None:
    """Like main(), but missing arguments fall back to the configured database."""
    argv = sys.argv[1:] if argv is None else list(argv)

    base = load_settings()
    configure_logging(base.log_level)

    if not positional_args(argv):
        log.warning(
            "No connection arguments given, using the configured database (%s)",
            "in-memory" if base.in_memory else base.url,
        )

    _start(argv, base)
