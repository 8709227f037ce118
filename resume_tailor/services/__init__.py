"""Service exports."""

from .exports import Artifact, build_cover_letter_artifact, build_resume_artifact
from .model_client import ModelClient, ModelRequest, OpenAIModelClient, get_model_client
from .page_fetcher import fetch_page
from .text_cleaner import clean_page_text, extract_main_content

__all__ = [
    "Artifact",
    "ModelClient",
    "ModelRequest",
    "OpenAIModelClient",
    "build_cover_letter_artifact",
    "build_resume_artifact",
    "clean_page_text",
    "extract_main_content",
    "fetch_page",
    "get_model_client",
]
