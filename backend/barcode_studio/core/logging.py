"""
Structured logging configuration using structlog.

Development gets coloured console output; staging and production emit one JSON
object per line. Barcode and ZPL events are logged as snake_case event names
with keyword context, e.g. ``logger.info("ean13_checksum_repaired", ...)``.
"""

import logging
import sys
from typing import cast

import structlog
from structlog.types import Processor

from barcode_studio.core.config import Settings, get_settings

# Third-party loggers that are chatty at DEBUG level while rendering images
_NOISY_LOGGERS = ("PIL", "treepoem", "multipart")


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and route standard library logging through it."""
    settings = settings or get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if settings.environment == "development":
        renderer = structlog.dev.ConsoleRenderer(colors=True)
        processors = [*shared_processors, renderer]
    else:
        renderer = structlog.processors.JSONRenderer()
        processors = [*shared_processors, structlog.processors.format_exc_info, renderer]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.log_level)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance with the given name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
