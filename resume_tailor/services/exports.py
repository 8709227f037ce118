"""Downloadable artifacts for generated documents."""

from typing import Optional

from pydantic import BaseModel

from resume_tailor.schemas.job import JobDescription
from resume_tailor.schemas.outputs import TailoredCoverLetter, TailoredResume
from resume_tailor.utils.helpers import company_slug

MARKDOWN_MIME = "text/markdown"


class Artifact(BaseModel):
    """File offered to the user: bytes, file name, content type."""

    data: bytes
    file_name: str
    mime: str = MARKDOWN_MIME


def artifact_file_name(prefix: str, job: Optional[JobDescription]) -> str:
    """e.g. ('resume', job at 'Acme Corp') -> 'resume-acme-corp.md'; no job -> 'resume-tailored.md'."""
    return f"{prefix}-{company_slug(job.company if job else None)}.md"


def build_resume_artifact(resume: TailoredResume, job: Optional[JobDescription]) -> Artifact:
    return Artifact(data=resume.markdown.encode("utf-8"), file_name=artifact_file_name("resume", job))


def build_cover_letter_artifact(letter: TailoredCoverLetter, job: Optional[JobDescription]) -> Artifact:
    return Artifact(data=letter.content.encode("utf-8"), file_name=artifact_file_name("cover-letter", job))
