"""Exceptions raised by extraction, generation and session orchestration."""

from typing import Optional


class ResumeTailorError(Exception):
    """Base class for all Resume Tailor errors."""


class ConfigurationError(ResumeTailorError):
    """Raised when a required setting (e.g. the provider API key) is missing."""


class _ModelCallFailure(ResumeTailorError):
    """
    Failure of a single model-backed step.

    Attributes:
        kind: Which record or document the step was producing (e.g. 'profile')
        message: Error description
        original_error: Underlying exception (transport, JSON, validation), if any
    """

    def __init__(
        self,
        kind: str,
        message: str,
        original_error: Optional[Exception] = None,
    ):
        self.kind = kind
        self.message = message
        self.original_error = original_error

        parts = [f"{kind}: {message}"]
        if original_error:
            parts.append(f"Original error: {original_error}")
        super().__init__("\n".join(parts))


class ExtractionFailure(_ModelCallFailure):
    """Raised when profile or job extraction errors, returns nothing, or returns an unusable shape."""


class GenerationFailure(_ModelCallFailure):
    """Raised when resume or cover letter generation errors or returns empty text."""


class GenerationNotReady(ResumeTailorError):
    """Raised when generation is requested before both a profile and a job are parsed."""
