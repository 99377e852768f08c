"""Logging setup shared by the CLI and any embedding service."""

from __future__ import annotations

import logging
import sys

import structlog

from rules_engine.config import LOG_LEVELS, settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Logs go to stderr so JSON written to stdout stays clean.
    """
    level_name = (level or settings.log_level).upper()
    if level_name not in LOG_LEVELS:
        msg = f"Invalid log level: {level}. Must be one of {LOG_LEVELS}"
        raise ValueError(msg)
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
