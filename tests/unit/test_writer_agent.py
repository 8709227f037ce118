"""Unit tests for resume and cover letter generation."""

import asyncio
from datetime import date

import pytest

from resume_tailor.agents.writer_agent import (
    build_resume_prompt,
    generate_cover_letter,
    generate_tailored_resume,
    placeholder_match_summary,
)
from resume_tailor.exceptions import GenerationFailure
from resume_tailor.schemas import GenerationSettings
from tests.conftest import COVER_LETTER_TEXT, RESUME_MARKDOWN, FakeModelClient


@pytest.mark.unit
def test_resume_markdown_is_model_text_verbatim(profile, job, settings):
    raw = "\n  # Jane Doe  \n\n## Skills\n- Python\n\n"
    client = FakeModelClient(raw)

    resume = asyncio.run(generate_tailored_resume(client, profile, job, settings))

    assert resume.markdown == raw


@pytest.mark.unit
def test_resume_request_is_free_text_at_resume_temperature(profile, job, settings):
    client = FakeModelClient(RESUME_MARKDOWN)

    asyncio.run(generate_tailored_resume(client, profile, job, settings))

    (request,) = client.requests
    assert request.temperature == 0.4
    assert not request.is_structured


@pytest.mark.unit
def test_resume_prompt_carries_every_setting(profile, job):
    settings = GenerationSettings(
        target_length="2-page",
        tone="storytelling",
        skills_max_count=9,
        experience_max_items=3,
        projects_max_items=1,
        include_sections=["summary", "projects"],
        show_keyword_match_comments=False,
    )

    prompt = build_resume_prompt(profile, job, settings)

    assert "Tone: storytelling" in prompt
    assert "Target Length: 2-page" in prompt
    assert "Max Skills: 9" in prompt
    assert "Max Experience Entries: 3" in prompt
    assert "Max Project Entries: 1" in prompt
    assert "Included Sections: summary, projects" in prompt
    assert "Show Keyword Match Comments: false" in prompt
    assert "Do NOT invent" in prompt
    assert "<!-- matched: keyword -->" in prompt
    assert '"full_name":"Jane Doe"' in prompt
    assert '"company":"Initech"' in prompt


@pytest.mark.unit
def test_resume_prompt_leaves_out_pasted_text(profile, job, settings):
    prompt = build_resume_prompt(profile, job, settings)
    assert "Nice to have: Kubernetes." not in prompt


@pytest.mark.unit
def test_match_summary_is_explicit_placeholder(profile, job, settings):
    client = FakeModelClient(RESUME_MARKDOWN)

    resume = asyncio.run(generate_tailored_resume(client, profile, job, settings))

    summary = resume.match_summary
    assert summary.is_placeholder is True
    assert summary.overall_score == 85
    assert summary.hard_skill_coverage == 0.0
    assert summary.soft_skill_coverage == 0.0
    assert summary.top_matched_keywords == ["Python", "PostgreSQL", "AWS", "REST", "Docker"]
    assert summary.missing_important_keywords == []


@pytest.mark.unit
def test_placeholder_summary_without_keywords(job):
    summary = placeholder_match_summary(job.model_copy(update={"keywords": []}))
    assert summary.top_matched_keywords == []


@pytest.mark.unit
def test_cover_letter_content_and_request(profile, job, settings):
    client = FakeModelClient(COVER_LETTER_TEXT)

    letter = asyncio.run(generate_cover_letter(client, profile, job, settings, today=date(2026, 3, 2)))

    assert letter.content == COVER_LETTER_TEXT
    (request,) = client.requests
    assert request.temperature == 0.7
    assert "Job: Backend Engineer at Initech" in request.prompt
    assert "Candidate: Jane Doe" in request.prompt
    assert 'Hiring Manager at Initech' in request.prompt
    assert "Use a neutral tone." in request.prompt
    assert "March 02, 2026" in request.prompt
    assert "3-4 paragraphs" in request.prompt


@pytest.mark.unit
def test_transport_error_becomes_generation_failure(profile, job, settings):
    error = TimeoutError("read timed out")
    client = FakeModelClient(error)

    with pytest.raises(GenerationFailure) as exc_info:
        asyncio.run(generate_tailored_resume(client, profile, job, settings))

    assert exc_info.value.kind == "resume"
    assert exc_info.value.original_error is error


@pytest.mark.unit
@pytest.mark.parametrize("response", [None, "", "\n"])
def test_empty_output_is_a_failure(profile, job, settings, response):
    client = FakeModelClient(response)

    with pytest.raises(GenerationFailure) as exc_info:
        asyncio.run(generate_cover_letter(client, profile, job, settings))

    assert exc_info.value.kind == "cover letter"
