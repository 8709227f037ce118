"""Agent exports."""

from .extractor_agent import parse_job_description, parse_user_profile
from .writer_agent import generate_cover_letter, generate_tailored_resume

__all__ = [
    "parse_user_profile",
    "parse_job_description",
    "generate_tailored_resume",
    "generate_cover_letter",
]
