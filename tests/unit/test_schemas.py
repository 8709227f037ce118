"""Unit tests for profile, job, settings and output schemas."""

import pytest
from pydantic import ValidationError

from resume_tailor.schemas import (
    DEFAULT_SETTINGS,
    GenerationSettings,
    JobDescription,
    JobPosting,
    MatchSummary,
    TailoredResume,
    TargetLength,
    Tone,
    UserProfile,
)


@pytest.mark.unit
def test_profile_requires_full_name():
    with pytest.raises(ValidationError):
        UserProfile.model_validate({"headline": "Engineer"})


@pytest.mark.unit
def test_profile_rejects_blank_full_name():
    with pytest.raises(ValidationError):
        UserProfile(full_name="   ")


@pytest.mark.unit
def test_profile_lists_default_empty_and_keep_order():
    profile = UserProfile.model_validate(
        {"full_name": " Jane Doe ", "experience": [{"company": "B"}, {"company": "A"}]}
    )
    assert profile.full_name == "Jane Doe"
    assert [e.company for e in profile.experience] == ["B", "A"]
    assert profile.skills == []
    assert profile.interests == []
    assert profile.experience[0].is_current is False


@pytest.mark.unit
def test_job_posting_requires_title_and_company():
    with pytest.raises(ValidationError):
        JobPosting.model_validate({"title": "Backend Engineer"})
    with pytest.raises(ValidationError):
        JobPosting.model_validate({"company": "Initech", "title": ""})


@pytest.mark.unit
def test_job_posting_schema_does_not_ask_for_pasted_text():
    schema = JobPosting.model_json_schema()
    assert "pasted_text" not in schema["properties"]
    assert set(schema["required"]) == {"title", "company"}


@pytest.mark.unit
def test_profile_schema_requires_only_full_name():
    assert UserProfile.model_json_schema()["required"] == ["full_name"]


@pytest.mark.unit
def test_job_description_keeps_pasted_text_verbatim():
    text = "  Backend Engineer\n\tInitech  \n"
    job = JobDescription(title="Backend Engineer", company="Initech", pasted_text=text)
    assert job.pasted_text == text


@pytest.mark.unit
def test_default_settings():
    settings = DEFAULT_SETTINGS
    assert settings.target_length is TargetLength.ONE_PAGE
    assert settings.include_sections == ("contact", "summary", "skills", "experience", "education")
    assert settings.skills_max_count == 15
    assert settings.experience_max_items == 4
    assert settings.projects_max_items == 2
    assert settings.tone is Tone.NEUTRAL
    assert settings.show_keyword_match_comments is True
    assert settings.generate_cover_letter is True


@pytest.mark.unit
def test_settings_accept_enum_values_as_strings():
    settings = GenerationSettings(target_length="2-page", tone="technical")
    assert settings.target_length is TargetLength.TWO_PAGE
    assert settings.tone is Tone.TECHNICAL


@pytest.mark.unit
@pytest.mark.parametrize("field,value", [
    ("target_length", "3-page"),
    ("tone", "sarcastic"),
    ("skills_max_count", -1),
    ("include_sections", ["summary", "hobbies"]),
])
def test_settings_reject_invalid_values(field, value):
    with pytest.raises(ValidationError):
        GenerationSettings(**{field: value})


@pytest.mark.unit
def test_settings_sections_are_normalized_and_deduplicated():
    settings = GenerationSettings(include_sections=["Skills", "summary", "skills"])
    assert settings.include_sections == ("skills", "summary")


@pytest.mark.unit
def test_settings_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.tone = Tone.CONCISE


@pytest.mark.unit
def test_match_summary_score_bounds():
    with pytest.raises(ValidationError):
        MatchSummary(overall_score=101)


@pytest.mark.unit
def test_tailored_resume_gets_id_and_timestamp():
    summary = MatchSummary(overall_score=85)
    first = TailoredResume(markdown="# A", match_summary=summary)
    second = TailoredResume(markdown="# A", match_summary=summary)
    assert first.id != second.id
    assert first.created_at.tzinfo is not None


@pytest.mark.unit
def test_default_sections_cannot_be_mutated_in_place():
    assert isinstance(DEFAULT_SETTINGS.include_sections, tuple)
    assert not hasattr(DEFAULT_SETTINGS.include_sections, "append")
    assert GenerationSettings().include_sections == DEFAULT_SETTINGS.include_sections
