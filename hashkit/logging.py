"""
hashkit Logging
===============
structlog setup for applications embedding hashkit.

hashkit modules log through ``structlog.get_logger(__name__)`` and never log
passwords, salts or keys. Errors are raised to the caller rather than logged.

Usage:
    from hashkit.logging import configure_logging

    configure_logging(level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from .config import HashConfig


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines (production) instead of console output
    """
    level_no = getattr(logging, level.upper(), logging.INFO)

    # basicConfig is a no-op once handlers exist, so set the level explicitly
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(level_no)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging_from_env(config: Optional[HashConfig] = None) -> None:
    """Configure logging from ``HASHKIT_LOG_LEVEL`` and ``HASHKIT_LOG_JSON``."""
    config = config or HashConfig.from_env()
    configure_logging(level=config.log_level, json_output=config.log_json)
