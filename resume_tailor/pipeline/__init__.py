"""Session orchestration for the profile -> job -> generate flow."""

from .session import Action, ActionState, ActionStatus, GenerationResult, TailoringSession

__all__ = ["Action", "ActionState", "ActionStatus", "GenerationResult", "TailoringSession"]
