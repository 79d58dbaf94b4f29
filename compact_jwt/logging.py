"""Logging utilities for compact_jwt.

Events go through the standard library logger ``compact_jwt``, which carries
only a ``NullHandler`` until ``setup_logging`` attaches a JSON handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

DEFAULT_LOG_LEVEL = "INFO"
LOGGER_NAME = "compact_jwt"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Render ``compact_jwt`` events as JSON lines on stdout at ``level``."""
    global _handler

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(_coerce_log_level(level))
    _handler = handler


def _coerce_log_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
