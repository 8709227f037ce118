"""Utility exports."""

from .helpers import company_slug, parse_llm_json, truncate_text
from .logger import get_logger, quiet_noisy_loggers

__all__ = [
    "get_logger",
    "quiet_noisy_loggers",
    "company_slug",
    "parse_llm_json",
    "truncate_text",
]
