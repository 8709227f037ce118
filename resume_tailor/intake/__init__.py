"""Resume intake: text extraction from uploaded files."""

from .text_extractor import SUPPORTED_EXTENSIONS, extract_text_from_file

__all__ = ["extract_text_from_file", "SUPPORTED_EXTENSIONS"]
