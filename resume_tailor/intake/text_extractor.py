"""Extract raw resume text from uploaded files (PDF, DOCX, TXT/MD). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

import pdfplumber
from docx import Document

from resume_tailor.config import MAX_INPUT_CHARS
from resume_tailor.utils.helpers import truncate_text
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt", ".md")


def _clean_resume_text(text: str, max_chars: int = MAX_INPUT_CHARS) -> str:
    """Remove excessive whitespace and normalize unicode (NFC) for resume content."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return truncate_text(t.strip(), max_chars)


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    """Extract text from PDF using pdfplumber."""
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = [ptext for ptext in (page.extract_text() for page in pdf.pages) if ptext]
            return "\n\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("PDF extraction failed: %s", e)
        return None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    """Extract text from DOCX using python-docx (paragraphs, then table cells)."""
    try:
        doc = Document(bytes_io)
    except Exception as e:
        logger.exception("DOCX extraction failed: %s", e)
        return None
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(dict.fromkeys(cells)))
    return "\n\n".join(parts) if parts else None


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean text from an uploaded resume file.
    File is read from bytes in memory; no disk write.
    Returns cleaned text or None if unsupported type or extraction fails.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_EXTENSIONS):
        logger.warning("Unsupported file type: %s", filename)
        return None

    raw: Optional[str]
    if name_lower.endswith(".pdf"):
        raw = _extract_pdf(BytesIO(file_bytes))
    elif name_lower.endswith(".docx"):
        raw = _extract_docx(BytesIO(file_bytes))
    else:
        raw = file_bytes.decode("utf-8", errors="replace")

    if not raw or not raw.strip():
        logger.warning("No text extracted from %s", filename)
        return None
    return _clean_resume_text(raw)
