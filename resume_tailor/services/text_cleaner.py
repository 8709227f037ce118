"""Turn a fetched job posting page into plain text for extraction."""

import html
import re

from resume_tailor.config import MAX_INPUT_CHARS
from resume_tailor.utils.helpers import truncate_text

# Blocks whose content is never posting text
_DROP_BLOCKS = ("script", "style", "noscript", "svg", "nav", "footer")
# Elements that end a line of text
_LINE_TAGS = ("br", "p", "div", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6", "section")


def clean_page_text(html_text: str, max_chars: int = MAX_INPUT_CHARS) -> str:
    """
    Clean raw HTML into readable plain text for LLM consumption.
    Drops scripts, styles and page chrome, keeps line structure, decodes entities.
    """
    if not html_text or not html_text.strip():
        return ""

    text = html_text
    for tag in _DROP_BLOCKS:
        text = re.sub(rf"<{tag}[^>]*>[\s\S]*?</{tag}\s*>", " ", text, flags=re.IGNORECASE)

    for tag in _LINE_TAGS:
        text = re.sub(rf"</?{tag}(\s[^>]*)?/?>", "\n", text, flags=re.IGNORECASE)

    text = re.sub(r"<[^>]+>", " ", text)
    text = html.unescape(text).replace("\xa0", " ")

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = text.strip()

    return truncate_text(text, max_chars)


def extract_main_content(html_text: str) -> str:
    """
    Prefer the <main> or <article> element when the page has one.
    Falls back to cleaning the whole page.
    """
    for pattern in (r"<main[^>]*>([\s\S]*?)</main>", r"<article[^>]*>([\s\S]*?)</article>"):
        match = re.search(pattern, html_text or "", re.IGNORECASE)
        if match:
            content = clean_page_text(match.group(1))
            if content:
                return content
    return clean_page_text(html_text)
