"""Logging configuration for the Resume Tailor application."""

import logging
import sys
from typing import Optional

from resume_tailor.config import LOG_LEVEL

# Libraries that log every request or PDF object at INFO/DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "pdfminer")


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger writing to stdout at LOG_LEVEL (or the given level)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger


def quiet_noisy_loggers(level: int = logging.WARNING) -> None:
    """Raise third-party loggers to `level` so session logs stay readable."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)
