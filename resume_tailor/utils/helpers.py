"""Helper utilities for the Resume Tailor application."""

import json
import re
from typing import Any, Optional

# Suffix appended when a document is cut to fit the prompt
TRUNCATION_NOTE = "\n\n[Content truncated.]"


def parse_llm_json(text: Optional[str]) -> Optional[Any]:
    """Parse JSON from LLM response, stripping markdown code blocks if present."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def truncate_text(text: str, max_chars: int) -> str:
    """Cut text to max_chars, marking the cut. Text within the limit is returned unchanged."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_NOTE


def company_slug(company: Optional[str], fallback: str = "tailored") -> str:
    """
    Filename stem for a company: lowercased, whitespace runs replaced by hyphens.
    Returns fallback when no company is known.
    """
    name = (company or "").strip()
    if not name:
        return fallback
    return re.sub(r"\s+", "-", name).lower()
