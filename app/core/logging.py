"""
Logging configuration
"""

import sys

from loguru import logger

from app.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)


def setup_logging():
    """
    Single stderr sink at the configured level.
    Records outside a request carry "-" as their request id.
    """
    logger.remove()
    logger.configure(extra={"request_id": "-"})
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        colorize=settings.ENVIRONMENT == "development",
        backtrace=settings.DEBUG,
        diagnose=settings.DEBUG,
    )


log = logger
