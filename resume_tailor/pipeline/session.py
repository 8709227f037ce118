"""
Tailoring session: sequences parse profile -> parse job -> generate, and holds the latest result of each.
No UI logic; the Streamlit app keeps one session per browser session.
"""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from pydantic import BaseModel

from resume_tailor.agents.extractor_agent import parse_job_description, parse_user_profile
from resume_tailor.agents.writer_agent import generate_cover_letter, generate_tailored_resume
from resume_tailor.exceptions import ExtractionFailure, GenerationNotReady, ResumeTailorError
from resume_tailor.schemas.job import JobDescription
from resume_tailor.schemas.outputs import TailoredCoverLetter, TailoredResume
from resume_tailor.schemas.profile import UserProfile
from resume_tailor.schemas.settings import DEFAULT_SETTINGS, GenerationSettings
from resume_tailor.services.model_client import ModelClient
from resume_tailor.services.page_fetcher import fetch_page
from resume_tailor.services.text_cleaner import extract_main_content
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)

GenerationResult = Tuple[TailoredResume, Optional[TailoredCoverLetter]]


class Action(str, Enum):
    PARSE_PROFILE = "parse_profile"
    PARSE_JOB = "parse_job"
    GENERATE = "generate"


class ActionState(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ActionStatus(BaseModel):
    state: ActionState = ActionState.IDLE
    error: Optional[str] = None


# User-facing failure notices; transport and malformed-output failures read the same
FAILURE_MESSAGES: Dict[Action, str] = {
    Action.PARSE_PROFILE: "Failed to parse user profile. Please check your API key and try again.",
    Action.PARSE_JOB: "Failed to parse job description. Please check your API key and try again.",
    Action.GENERATE: "Failed to generate application materials.",
}


class TailoringSession:
    """
    Holds the profile, job, settings and generated documents for one user.

    Each action replaces only its own record, and only on success. An action that is
    already in progress is not started again.
    """

    def __init__(self, client: ModelClient, settings: Optional[GenerationSettings] = None) -> None:
        self._client = client
        self.settings: GenerationSettings = settings or DEFAULT_SETTINGS
        self.profile: Optional[UserProfile] = None
        self.job: Optional[JobDescription] = None
        self.resume: Optional[TailoredResume] = None
        self.cover_letter: Optional[TailoredCoverLetter] = None
        self._status: Dict[Action, ActionStatus] = {action: ActionStatus() for action in Action}

    # ----- State -----

    def status(self, action: Action) -> ActionStatus:
        return self._status[action]

    def is_busy(self, action: Action) -> bool:
        return self._status[action].state is ActionState.IN_PROGRESS

    @property
    def can_generate(self) -> bool:
        """Generation needs both a parsed profile and a parsed job."""
        return self.profile is not None and self.job is not None

    def failures(self) -> Dict[Action, str]:
        """Failure notices of actions whose last run failed."""
        return {
            action: status.error
            for action, status in self._status.items()
            if status.state is ActionState.FAILED and status.error
        }

    def update_settings(self, **changes: Any) -> GenerationSettings:
        """Validate and apply setting changes. Raises pydantic.ValidationError on bad values."""
        self.settings = GenerationSettings.model_validate({**self.settings.model_dump(), **changes})
        return self.settings

    # ----- Action runner -----

    async def _run(self, action: Action, operation: Callable[[], Awaitable[Any]]) -> Optional[Any]:
        """Run one action with its in-progress guard; failures are logged and recorded, not raised."""
        if self.is_busy(action):
            logger.warning("%s already in progress; ignoring new request", action.value)
            return None
        self._status[action] = ActionStatus(state=ActionState.IN_PROGRESS)
        logger.info("%s started", action.value)
        try:
            result = await operation()
        except ResumeTailorError as e:
            logger.error("%s failed: %s", action.value, e)
            self._status[action] = ActionStatus(state=ActionState.FAILED, error=FAILURE_MESSAGES[action])
            return None
        except Exception as e:
            logger.exception("%s failed unexpectedly: %s", action.value, e)
            self._status[action] = ActionStatus(state=ActionState.FAILED, error=FAILURE_MESSAGES[action])
            return None
        except BaseException:
            self._status[action] = ActionStatus(state=ActionState.FAILED, error=FAILURE_MESSAGES[action])
            raise
        self._status[action] = ActionStatus(state=ActionState.SUCCEEDED)
        logger.info("%s finished", action.value)
        return result

    # ----- Actions -----

    async def parse_profile(self, raw_text: str) -> Optional[UserProfile]:
        """Extract the profile from resume text. Returns None (profile unchanged) on blank input or failure."""
        if not raw_text or not raw_text.strip():
            logger.warning("Empty profile text; nothing to parse")
            return None
        logger.info("Parsing profile text (%s chars)", len(raw_text))
        profile = await self._run(Action.PARSE_PROFILE, lambda: parse_user_profile(self._client, raw_text))
        if profile is not None:
            self.profile = profile
        return profile

    async def parse_job(self, raw_text: str, source: Optional[str] = None) -> Optional[JobDescription]:
        """Extract the job from posting text. Returns None (job unchanged) on blank input or failure."""
        if not raw_text or not raw_text.strip():
            logger.warning("Empty job text; nothing to parse")
            return None
        logger.info("Parsing job text (%s chars)", len(raw_text))
        job = await self._run(
            Action.PARSE_JOB,
            lambda: parse_job_description(self._client, raw_text, source=source),
        )
        if job is not None:
            self.job = job
        return job

    async def import_job_from_url(self, url: str) -> Optional[JobDescription]:
        """Fetch a public job posting page, clean it, and parse it as the job (source = url)."""
        url = (url or "").strip()
        if not url:
            logger.warning("Empty job URL; nothing to import")
            return None

        async def fetch_and_parse() -> JobDescription:
            page = await fetch_page(url)
            if page is None:
                raise ExtractionFailure("job", f"could not fetch {url}")
            text = extract_main_content(page)
            if not text:
                raise ExtractionFailure("job", f"no readable text at {url}")
            return await parse_job_description(self._client, text, source=url)

        job = await self._run(Action.PARSE_JOB, fetch_and_parse)
        if job is not None:
            self.job = job
        return job

    async def generate(self) -> Optional[GenerationResult]:
        """
        Generate the resume and, when enabled, the cover letter concurrently.
        Both are published together or not at all; on failure the previous documents stay.
        Raises GenerationNotReady (no model call) when the profile or job is missing.
        """
        if not self.can_generate:
            raise GenerationNotReady("Parse both a profile and a job description before generating.")
        profile, job, settings = self.profile, self.job, self.settings

        async def write_documents() -> GenerationResult:
            resume_call = generate_tailored_resume(self._client, profile, job, settings)
            if not settings.generate_cover_letter:
                return await resume_call, None
            # If one leg fails the other is not cancelled; its result is dropped
            resume, letter = await asyncio.gather(
                resume_call,
                generate_cover_letter(self._client, profile, job, settings),
            )
            return resume, letter

        result = await self._run(Action.GENERATE, write_documents)
        if result is not None:
            self.resume, self.cover_letter = result
        return result
