"""Structured logging setup."""

import logging
from typing import Optional

import structlog


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog to render JSON lines through the stdlib logging module.

    Args:
        log_level: Logging level name. Defaults to the configured settings value.
    """
    if log_level is None:
        from capcache.config import settings
        log_level = settings.log_level

    logging.basicConfig(format="%(message)s", level=log_level.upper())
    logging.getLogger().setLevel(log_level.upper())

    # Configure structured logging
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
