"""Schema exports."""

from typing import Union

from .job import JobDescription, JobPosting
from .outputs import MatchSummary, TailoredCoverLetter, TailoredResume
from .profile import (
    Certification,
    ContactInfo,
    Education,
    Experience,
    Project,
    Skill,
    UserProfile,
)
from .settings import DEFAULT_SETTINGS, GenerationSettings, TargetLength, Tone

# Records produced by extraction; dispatch on type, not on which fields are set
ExtractedRecord = Union[UserProfile, JobDescription]

__all__ = [
    "Certification",
    "ContactInfo",
    "DEFAULT_SETTINGS",
    "Education",
    "Experience",
    "ExtractedRecord",
    "GenerationSettings",
    "JobDescription",
    "JobPosting",
    "MatchSummary",
    "Project",
    "Skill",
    "TailoredCoverLetter",
    "TailoredResume",
    "TargetLength",
    "Tone",
    "UserProfile",
]
