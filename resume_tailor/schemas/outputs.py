"""Generated documents: tailored resume, cover letter, match summary."""

import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MatchSummary(BaseModel):
    """
    How well a generated resume lines up with the job.
    While is_placeholder is True the numbers are fixed values, not computed from input.
    """

    overall_score: int = Field(..., ge=0, le=100, description="Overall match, 0-100")
    hard_skill_coverage: float = Field(default=0.0, ge=0.0, le=1.0, description="Fraction of hard skills covered")
    soft_skill_coverage: float = Field(default=0.0, ge=0.0, le=1.0, description="Fraction of soft skills covered")
    top_matched_keywords: List[str] = Field(default_factory=list, description="Keywords the resume leans on")
    missing_important_keywords: List[str] = Field(default_factory=list, description="Important keywords not covered")
    is_placeholder: bool = Field(default=True, description="True when values are not computed from the inputs")


class TailoredResume(BaseModel):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_utc_now)
    markdown: str = Field(..., description="Resume as returned by the model, verbatim")
    match_summary: MatchSummary


class TailoredCoverLetter(BaseModel):
    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_utc_now)
    content: str = Field(..., description="Cover letter as returned by the model, verbatim")
