"""User-controlled generation settings."""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resume_tailor.config import AVAILABLE_SECTIONS, DEFAULT_SECTIONS


class TargetLength(str, Enum):
    ONE_PAGE = "1-page"
    TWO_PAGE = "2-page"
    UNRESTRICTED = "unrestricted"


class Tone(str, Enum):
    CONCISE = "concise"
    NEUTRAL = "neutral"
    STORYTELLING = "storytelling"
    TECHNICAL = "technical"


class GenerationSettings(BaseModel):
    """
    Knobs for resume and cover letter generation.
    Frozen: use TailoringSession.update_settings (or model_copy + validation) to change.
    """

    model_config = ConfigDict(frozen=True)

    target_length: TargetLength = Field(default=TargetLength.ONE_PAGE, description="Resume length target")
    include_sections: Tuple[str, ...] = Field(
        default_factory=lambda: tuple(DEFAULT_SECTIONS),
        description="Sections to include, in the order given",
    )
    skills_max_count: int = Field(default=15, ge=0, description="Max skills listed")
    experience_max_items: int = Field(default=4, ge=0, description="Max experience entries")
    projects_max_items: int = Field(default=2, ge=0, description="Max project entries")
    tone: Tone = Field(default=Tone.NEUTRAL, description="Writing tone")
    show_keyword_match_comments: bool = Field(
        default=True, description="Emit <!-- matched: keyword --> comments next to tailored lines"
    )
    generate_cover_letter: bool = Field(default=True, description="Also write a cover letter")

    @field_validator("include_sections")
    @classmethod
    def _known_sections(cls, sections: Tuple[str, ...]) -> Tuple[str, ...]:
        """Normalize, reject unknown names, drop duplicates keeping first occurrence."""
        normalized = [(s or "").strip().lower() for s in sections]
        unknown = [s for s in normalized if s not in AVAILABLE_SECTIONS]
        if unknown:
            raise ValueError(f"Unknown sections: {', '.join(unknown)}")
        return tuple(dict.fromkeys(normalized))


DEFAULT_SETTINGS = GenerationSettings()
