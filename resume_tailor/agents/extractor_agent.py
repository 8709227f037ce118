"""Extractor Agent: raw resume / job posting text -> validated UserProfile / JobDescription."""

from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from resume_tailor.config import MAX_INPUT_CHARS
from resume_tailor.exceptions import ExtractionFailure
from resume_tailor.schemas.job import JobDescription, JobPosting
from resume_tailor.schemas.profile import UserProfile
from resume_tailor.services.model_client import ModelClient, ModelRequest
from resume_tailor.utils.helpers import parse_llm_json, truncate_text
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

PROFILE_EXTRACTION_PROMPT = """You are an AI resume parsing system.
Extract a structured user profile from the resume / career text below.
Return only JSON matching the provided schema.
- full_name is required.
- Keep experience, projects and education in the order they appear.
- Keep all dates as strings exactly as written (e.g. "Jan 2021", "2019", "Present").
- Set is_current to true only for positions with no end date or marked as current.
- Do not invent anything that is not in the text.

Input Text:
{text}"""

JOB_EXTRACTION_PROMPT = """You are an AI job information extraction system.
Extract a structured job description from the job posting text below.
Return only JSON matching the provided schema.
- title and company are required.
- Focus on requirements and keywords: list the technologies, skills and qualifications an applicant
  tracking system would look for, most important first.
- Do not invent anything that is not in the text.

Input Text:
{text}"""


async def _extract(
    client: ModelClient,
    kind: str,
    prompt_template: str,
    raw_text: str,
    record_type: Type[RecordT],
) -> RecordT:
    """Call the model with the record's schema and validate the response into record_type."""
    if not raw_text or not raw_text.strip():
        raise ValueError(f"Cannot extract {kind} from empty text")

    request = ModelRequest(
        prompt=prompt_template.format(text=truncate_text(raw_text.strip(), MAX_INPUT_CHARS)),
        response_schema=record_type.model_json_schema(),
        schema_name=record_type.__name__,
    )
    try:
        text: Optional[str] = await client.complete(request)
    except Exception as e:
        logger.exception("Model call for %s extraction failed: %s", kind, e)
        raise ExtractionFailure(kind, "model call failed", original_error=e) from e

    if not text or not text.strip():
        logger.error("Model returned no text for %s extraction", kind)
        raise ExtractionFailure(kind, "no response text generated")

    parsed = parse_llm_json(text)
    if not isinstance(parsed, dict):
        logger.error("Model output for %s extraction is not a JSON object (%s chars)", kind, len(text))
        raise ExtractionFailure(kind, "response is not a JSON object")

    try:
        return record_type.model_validate(parsed)
    except ValidationError as e:
        logger.warning("LLM output validation failed for %s: %s", kind, e)
        raise ExtractionFailure(kind, "response does not match the expected schema", original_error=e) from e


async def parse_user_profile(client: ModelClient, raw_text: str) -> UserProfile:
    """
    Extract a UserProfile from resume / CV text.
    Raises ValueError for blank input and ExtractionFailure when the model output is unusable.
    """
    profile = await _extract(client, "profile", PROFILE_EXTRACTION_PROMPT, raw_text, UserProfile)
    logger.info(
        "Profile extracted: experience=%s projects=%s skills=%s",
        len(profile.experience),
        len(profile.projects),
        len(profile.skills),
    )
    return profile


async def parse_job_description(
    client: ModelClient,
    raw_text: str,
    source: Optional[str] = None,
) -> JobDescription:
    """
    Extract a JobDescription from job posting text.
    The original text is attached verbatim as pasted_text; the model is never asked for it.
    """
    posting = await _extract(client, "job", JOB_EXTRACTION_PROMPT, raw_text, JobPosting)
    job = JobDescription(**posting.model_dump(), pasted_text=raw_text, source=source)
    logger.info(
        "Job extracted: title=%s company=%s requirements=%s keywords=%s",
        job.title,
        job.company,
        len(job.requirements),
        len(job.keywords),
    )
    return job
