"""structlog setup for the catalog admin.

Every log line is an event name plus key/value pairs ("Product created",
product_id=3). Deployed environments emit one JSON object per line; local
development gets the coloured console renderer instead. Values bound with
``bind_request_context`` are attached to every line logged while the
current request is being handled.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from catalog_admin.config import settings

# Libraries whose own loggers drown out the catalog's events
_NOISY_LOGGERS = ("uvicorn.access", "aiosqlite")


def _renderer_chain(as_json: bool) -> list[Processor]:
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if as_json:
        chain.append(structlog.processors.format_exc_info)
        chain.append(structlog.processors.JSONRenderer())
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=True))
    return chain


def _quiet_libraries(level: int) -> None:
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    # SQL echo only when debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger from settings.

    Called once at import of the app and of the seeding script.
    """
    level = logging.getLevelName(settings.log_level)

    structlog.configure(
        processors=_renderer_chain(settings.log_json and settings.environment != "dev"),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    _quiet_libraries(level)


def bind_request_context(**values: Any) -> None:
    """Start a fresh per-request context (method, path, ...)."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Logger for ``name`` with ``initial_context`` already bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_context) if initial_context else logger
