"""Unit tests for resume file intake and job page fetching / cleaning."""

import asyncio
from io import BytesIO

import httpx
import pytest
from docx import Document

from resume_tailor.config import HTTP_MAX_RETRIES
from resume_tailor.intake.text_extractor import extract_text_from_file
from resume_tailor.services.page_fetcher import fetch_page
from resume_tailor.services.text_cleaner import clean_page_text, extract_main_content


def _docx_bytes(*paragraphs):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.mark.unit
def test_extract_text_from_docx():
    text = extract_text_from_file(_docx_bytes("Jane Doe", "Software Engineer at Acme"), "Resume.DOCX")
    assert text == "Jane Doe\n\nSoftware Engineer at Acme"


@pytest.mark.unit
def test_extract_text_from_plain_text():
    text = extract_text_from_file("Jane   Doe\n\n\n\nAcme".encode("utf-8"), "resume.md")
    assert text == "Jane Doe\n\nAcme"


@pytest.mark.unit
@pytest.mark.parametrize("filename", ["resume.exe", "", "resume.pdf.zip"])
def test_unsupported_file_type(filename):
    assert extract_text_from_file(b"anything", filename) is None


@pytest.mark.unit
def test_corrupt_docx_returns_none():
    assert extract_text_from_file(b"not a zip file", "resume.docx") is None


@pytest.mark.unit
def test_clean_page_text_drops_scripts_and_decodes_entities():
    html = (
        "<html><head><style>p{color:red}</style><script>var x = 1;</script></head>"
        "<body><nav>Home | Jobs</nav><h1>Backend&nbsp;Engineer</h1>"
        "<ul><li>Python &amp; SQL</li><li>AWS</li></ul></body></html>"
    )

    text = clean_page_text(html)

    assert "var x" not in text
    assert "color:red" not in text
    assert "Home | Jobs" not in text
    assert "Backend Engineer" in text
    assert "Python & SQL\n" in text
    assert text.endswith("AWS")


@pytest.mark.unit
def test_extract_main_content_prefers_main_element():
    html = "<body><div>Sign in</div><main><p>Initech is hiring</p></main></body>"
    assert extract_main_content(html) == "Initech is hiring"


@pytest.mark.unit
def test_clean_page_text_empty():
    assert clean_page_text("") == ""
    assert extract_main_content("   ") == ""


@pytest.mark.unit
def test_fetch_page_returns_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<p>Job</p>"))
    assert asyncio.run(fetch_page("https://jobs.example.com/1", transport=transport)) == "<p>Job</p>"


@pytest.mark.unit
def test_fetch_page_does_not_retry_client_errors():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(404)

    result = asyncio.run(fetch_page("https://jobs.example.com/404", transport=httpx.MockTransport(handler), retry_delay=0))

    assert result is None
    assert len(calls) == 1


@pytest.mark.unit
def test_fetch_page_retries_connection_errors():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    result = asyncio.run(fetch_page("https://jobs.example.com/down", transport=httpx.MockTransport(handler), retry_delay=0))

    assert result is None
    assert len(calls) == HTTP_MAX_RETRIES
