"""structlog configuration for applications that embed the engine.

The pricing modules only emit events through ``structlog.get_logger()``.
A host process configures rendering once at startup:

    from ratecard.observability.logs import configure_logging_from_settings

    configure_logging_from_settings()
"""

from __future__ import annotations

import logging

import structlog

from ratecard.config import Settings, get_settings

SERVICE_NAME = "ratecard-engine"


def configure_logging(production: bool = False, log_level: str | None = None) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode: JSON rendering at INFO level.
    Development mode: console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
        log_level: Level name overriding the mode's default, e.g. ``"WARNING"``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        level = logging.DEBUG

    if log_level:
        level = logging.getLevelNamesMapping()[log_level.upper()]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from ``Settings`` (the cached settings by default)."""
    settings = settings or get_settings()
    configure_logging(production=settings.production, log_level=settings.log_level)
