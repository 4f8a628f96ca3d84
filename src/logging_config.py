"""JSON structured logging for the scrape service."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "scrape-service"

# Server loggers that ship their own handlers and must be re-pointed at ours.
_ROUTED_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _json_formatter(service: str) -> JsonFormatter:
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        static_fields={"service": service},
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def setup_logging(log_level: str = "INFO", service: str = SERVICE_NAME) -> logging.Handler:
    """Send every log record to stdout as one JSON object per line.

    Each record carries a ``service`` field so batch logs from several
    instances can be told apart. Returns the installed handler.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_json_formatter(service))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers.clear()
        routed.addHandler(handler)
        routed.propagate = False

    return handler
