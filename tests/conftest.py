"""Shared fixtures: a scripted model client and sample profile / job records."""

import json
from typing import Callable, List, Optional, Union

import pytest

from resume_tailor.config import COVER_LETTER_TEMPERATURE, RESUME_TEMPERATURE
from resume_tailor.schemas import GenerationSettings, JobDescription, UserProfile
from resume_tailor.services.model_client import ModelClient, ModelRequest

Outcome = Union[str, None, BaseException]

PROFILE_TEXT = "Jane Doe, Software Engineer at Acme"

PROFILE_PAYLOAD = {
    "full_name": "Jane Doe",
    "headline": "Software Engineer",
    "skills": [{"name": "Python", "category": "Languages"}, {"name": "PostgreSQL"}],
    "experience": [
        {
            "title": "Software Engineer",
            "company": "Acme",
            "is_current": True,
            "bullets": ["Built billing APIs in Python"],
            "technologies": ["Python", "PostgreSQL"],
        }
    ],
}

JOB_TEXT = """Backend Engineer - Initech
Austin, TX (Hybrid)

We need a backend engineer with Python, PostgreSQL and AWS.
  Nice to have: Kubernetes.
"""

JOB_PAYLOAD = {
    "title": "Backend Engineer",
    "company": "Initech",
    "location": "Austin, TX",
    "requirements": ["3+ years Python", "PostgreSQL"],
    "responsibilities": ["Build and run backend services"],
    "preferred_skills": ["Kubernetes"],
    "keywords": ["Python", "PostgreSQL", "AWS", "REST", "Docker", "Kubernetes", "CI/CD"],
}

RESUME_MARKDOWN = "# Jane Doe\n\n## Experience\n\n- Built billing APIs in Python <!-- matched: Python -->\n"
COVER_LETTER_TEXT = "Dear Hiring Manager at Initech,\n\nI am excited to apply...\n"


class FakeModelClient(ModelClient):
    """
    Records every request and answers from a script.

    Pass outcomes positionally (consumed in order) or a handler(request) -> outcome.
    An exception outcome is raised instead of returned.
    """

    def __init__(self, *outcomes: Outcome, handler: Optional[Callable[[ModelRequest], Outcome]] = None):
        self.requests: List[ModelRequest] = []
        self._outcomes = list(outcomes)
        self._handler = handler

    async def complete(self, request: ModelRequest) -> Optional[str]:
        self.requests.append(request)
        outcome = self._handler(request) if self._handler else self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def temperatures(self) -> List[Optional[float]]:
        return [r.temperature for r in self.requests]


def by_document(resume: Outcome = RESUME_MARKDOWN, cover_letter: Outcome = COVER_LETTER_TEXT):
    """Handler answering resume and cover letter requests by their temperature."""

    def handler(request: ModelRequest) -> Outcome:
        if request.temperature == RESUME_TEMPERATURE:
            return resume
        if request.temperature == COVER_LETTER_TEMPERATURE:
            return cover_letter
        raise AssertionError(f"Unexpected request: {request.prompt[:80]}")

    return handler


@pytest.fixture
def profile_json() -> str:
    return json.dumps(PROFILE_PAYLOAD)


@pytest.fixture
def job_json() -> str:
    return json.dumps(JOB_PAYLOAD)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile.model_validate(PROFILE_PAYLOAD)


@pytest.fixture
def job() -> JobDescription:
    return JobDescription(**JOB_PAYLOAD, pasted_text=JOB_TEXT)


@pytest.fixture
def settings() -> GenerationSettings:
    return GenerationSettings()
