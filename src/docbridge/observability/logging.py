"""Structured logging for the ``docbridge`` logger namespace using structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from docbridge.config.settings import ObservabilitySettings

LOGGER_NAME = "docbridge"
_HANDLER_NAME = "docbridge.structlog"


def setup_logging(settings: ObservabilitySettings | None = None, stream: IO[str] | None = None) -> logging.Logger:
    """Attach a structlog-rendered handler to the ``docbridge`` logger.

    Only the library's own namespace is touched: the root logger, its
    handlers and the global structlog configuration stay as the host
    application left them. Calling this again replaces the handler.

    Args:
        settings: Observability settings. Uses defaults if None.
        stream: Where records are written. Defaults to stdout.

    Returns:
        The configured ``docbridge`` logger.
    """
    log_level = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"

    renderer: structlog.typing.Processor
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    # Records are rendered here; the host's root handlers would print them twice.
    logger.propagate = False
    return logger
