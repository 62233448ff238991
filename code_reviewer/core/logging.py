"""
Logging configuration for the Code Reviewer API.

Every record carries a ``logger_name`` (``reviewer.normalizer``,
``gemini.client``, ...) bound by ``get_logger``; records from the bare
logger fall back to ``DEFAULT_LOGGER_NAME``.
"""

import sys
from typing import Optional

from loguru import logger

from code_reviewer.config import settings

DEFAULT_LOGGER_NAME = "code-reviewer"

DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]: <20}</cyan> | "
    "<blue>{function}</blue>:<blue>{line}</blue> - "
    "<level>{message}</level>"
)

PLAIN_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[logger_name]} | {function}:{line} - {message}"
)


def configure_logging() -> None:
    """Configure colorful logging for the application."""

    logger.remove()
    logger.configure(extra={"logger_name": DEFAULT_LOGGER_NAME})

    log_level = settings.log_level or ("DEBUG" if settings.debug else "INFO")

    if settings.environment == "development":
        logger.add(
            sys.stderr,
            format=DEV_FORMAT,
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=settings.debug,
        )
    else:
        logger.add(
            sys.stderr,
            format=PLAIN_FORMAT,
            level=log_level,
            serialize=True,
        )


configure_logging()


def get_logger(name: Optional[str] = None):
    """Get a logger instance with optional name binding."""
    if name:
        return logger.bind(logger_name=name)
    return logger
