"""Configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    return float(value) if value else None


# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# Model calls are single-shot by default; raise to let the SDK retry
OPENAI_MAX_RETRIES: int = int(os.getenv("OPENAI_MAX_RETRIES", "0"))
# None keeps the SDK's own transport timeout
OPENAI_TIMEOUT_SECONDS: Optional[float] = _optional_float("OPENAI_TIMEOUT_SECONDS")

# Sampling temperatures for free-text generation (higher = more variation)
RESUME_TEMPERATURE: float = 0.4
COVER_LETTER_TEMPERATURE: float = 0.7

# Match summary placeholder (not computed from input)
PLACEHOLDER_MATCH_SCORE: int = 85
TOP_MATCHED_KEYWORDS: int = 5

# Prompt size guard for pasted documents
MAX_INPUT_CHARS: int = 30000

# HTTP / fetch settings (job posting import only)
HTTP_TIMEOUT_SECONDS: float = 30.0
HTTP_MAX_RETRIES: int = 3

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Resume sections the user can toggle, in rendering order
AVAILABLE_SECTIONS: list = [
    "contact",
    "summary",
    "skills",
    "experience",
    "projects",
    "education",
    "certifications",
    "interests",
]
DEFAULT_SECTIONS: list = ["contact", "summary", "skills", "experience", "education"]
