"""Job description schemas: what the model extracts, and the stored record."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class JobPosting(BaseModel):
    """Job data requested from the model during extraction."""

    title: str = Field(..., min_length=1, description="Job title")
    company: str = Field(..., min_length=1, description="Company or employer name")
    location: Optional[str] = Field(default=None, description="Job location or 'Remote'")
    seniority: Optional[str] = Field(default=None, description="Seniority level (e.g. Junior, Senior, Staff)")
    employment_type: Optional[str] = Field(default=None, description="Full-time, Part-time, Contract, etc.")
    requirements: List[str] = Field(default_factory=list, description="Must-have requirements")
    responsibilities: List[str] = Field(default_factory=list, description="Day-to-day responsibilities")
    preferred_skills: List[str] = Field(default_factory=list, description="Nice-to-have skills")
    keywords: List[str] = Field(default_factory=list, description="Important keywords, most important first")

    @field_validator("title", "company")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class JobDescription(JobPosting):
    """Extracted job plus the verbatim text it came from."""

    pasted_text: str = Field(..., description="Original job posting text, kept verbatim")
    source: Optional[str] = Field(default=None, description="Where the text came from (e.g. the posting URL)")
