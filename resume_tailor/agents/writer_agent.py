"""Writer Agent: tailored resume and cover letter generation from a parsed profile and job."""

from datetime import date
from typing import Optional

from resume_tailor.config import (
    COVER_LETTER_TEMPERATURE,
    PLACEHOLDER_MATCH_SCORE,
    RESUME_TEMPERATURE,
    TOP_MATCHED_KEYWORDS,
)
from resume_tailor.exceptions import GenerationFailure
from resume_tailor.schemas.job import JobDescription
from resume_tailor.schemas.outputs import MatchSummary, TailoredCoverLetter, TailoredResume
from resume_tailor.schemas.profile import UserProfile
from resume_tailor.schemas.settings import GenerationSettings
from resume_tailor.services.model_client import ModelClient, ModelRequest
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)

RESUME_PROMPT = """You are a senior technical recruiter and professional resume writer.
Your task is to generate a tailored resume in GitHub-flavored Markdown based on the provided User Profile and Job Description.

Configuration:
- Tone: {tone}
- Max Skills: {skills_max_count}
- Max Experience Entries: {experience_max_items}
- Max Project Entries: {projects_max_items}
- Target Length: {target_length}
- Included Sections: {include_sections}
- Show Keyword Match Comments: {show_keyword_match_comments}

Instructions:
1. Analyze the Job Description to identify key requirements, technologies, and "soft skills".
2. Select the most relevant experiences and projects from the User Profile.
3. Rewrite bullet points to emphasize impact and alignment with the Job Description keywords. Use action verbs.
4. Do NOT invent experiences or skills. Only use what is provided in the User Profile.
5. If "Show Keyword Match Comments" is true, add HTML comments (<!-- matched: keyword -->) next to tailored lines.
6. Output clean, professional Markdown. Use h1 for Name, h2 for Sections.

User Profile:
{profile_json}

Job Description:
{job_json}"""

COVER_LETTER_PROMPT = """You are a professional career coach and expert writer.
Write a highly persuasive, tailored cover letter for the following job application.

Job: {job_title} at {company}
Candidate: {full_name}

Guidelines:
1. Use a {tone} tone.
2. Address the hiring manager (use "Hiring Manager at {company}" if name is unknown).
3. Focus on how the candidate's specific experiences in the profile solve the problems or meet the needs mentioned in the job description.
4. Include specific keywords from the job description naturally.
5. Keep it to approximately 3-4 paragraphs.
6. Start with a strong hook and end with a clear call to action.
7. Do not include placeholder text like "[Date]" - if you need a date, use today's date: {today}.
8. Use professional letter formatting in Markdown.

User Profile: {profile_json}
Job Description: {job_json}"""


def _job_json(job: JobDescription) -> str:
    # pasted_text repeats everything already extracted
    return job.model_dump_json(exclude={"pasted_text", "source"}, exclude_none=True)


def build_resume_prompt(profile: UserProfile, job: JobDescription, settings: GenerationSettings) -> str:
    """Render the resume instruction prompt with every relevant setting."""
    return RESUME_PROMPT.format(
        tone=settings.tone.value,
        skills_max_count=settings.skills_max_count,
        experience_max_items=settings.experience_max_items,
        projects_max_items=settings.projects_max_items,
        target_length=settings.target_length.value,
        include_sections=", ".join(settings.include_sections),
        show_keyword_match_comments=str(settings.show_keyword_match_comments).lower(),
        profile_json=profile.model_dump_json(exclude_none=True),
        job_json=_job_json(job),
    )


def build_cover_letter_prompt(
    profile: UserProfile,
    job: JobDescription,
    settings: GenerationSettings,
    today: date,
) -> str:
    return COVER_LETTER_PROMPT.format(
        job_title=job.title,
        company=job.company,
        full_name=profile.full_name,
        tone=settings.tone.value,
        today=today.strftime("%B %d, %Y"),
        profile_json=profile.model_dump_json(exclude_none=True),
        job_json=_job_json(job),
    )


def placeholder_match_summary(job: JobDescription) -> MatchSummary:
    """
    Match summary with fixed values: score 85, zero coverage, the job's first keywords, nothing missing.
    Nothing here is computed from the resume; is_placeholder stays True.
    """
    return MatchSummary(
        overall_score=PLACEHOLDER_MATCH_SCORE,
        hard_skill_coverage=0.0,
        soft_skill_coverage=0.0,
        top_matched_keywords=list(job.keywords[:TOP_MATCHED_KEYWORDS]),
        missing_important_keywords=[],
        is_placeholder=True,
    )


async def _write(client: ModelClient, kind: str, prompt: str, temperature: float) -> str:
    """Run one free-text generation call; raise GenerationFailure on error or empty output."""
    try:
        text = await client.complete(ModelRequest(prompt=prompt, temperature=temperature))
    except Exception as e:
        logger.exception("Model call for %s generation failed: %s", kind, e)
        raise GenerationFailure(kind, "model call failed", original_error=e) from e
    if not text or not text.strip():
        logger.error("Model returned no text for %s generation", kind)
        raise GenerationFailure(kind, "no response text generated")
    return text


async def generate_tailored_resume(
    client: ModelClient,
    profile: UserProfile,
    job: JobDescription,
    settings: GenerationSettings,
) -> TailoredResume:
    """Generate a Markdown resume tailored to the job. The model text is kept verbatim."""
    prompt = build_resume_prompt(profile, job, settings)
    markdown = await _write(client, "resume", prompt, RESUME_TEMPERATURE)
    resume = TailoredResume(markdown=markdown, match_summary=placeholder_match_summary(job))
    logger.info("Resume generated: id=%s chars=%s", resume.id, len(markdown))
    return resume


async def generate_cover_letter(
    client: ModelClient,
    profile: UserProfile,
    job: JobDescription,
    settings: GenerationSettings,
    today: Optional[date] = None,
) -> TailoredCoverLetter:
    """Generate a 3-4 paragraph cover letter for the job. The model text is kept verbatim."""
    prompt = build_cover_letter_prompt(profile, job, settings, today or date.today())
    content = await _write(client, "cover letter", prompt, COVER_LETTER_TEMPERATURE)
    letter = TailoredCoverLetter(content=content)
    logger.info("Cover letter generated: id=%s chars=%s", letter.id, len(content))
    return letter
