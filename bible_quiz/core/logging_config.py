"""Logging configuration helpers for the quiz service."""

import logging
from logging import Logger

from bible_quiz.core.config import settings


def configure_logging() -> Logger:
    """Configure basic logging for the service and return the package logger."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("bible_quiz")
