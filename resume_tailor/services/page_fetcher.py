"""Async HTTP fetcher for public job posting URLs."""

import asyncio
from typing import Optional

import httpx

from resume_tailor.config import HTTP_MAX_RETRIES, HTTP_TIMEOUT_SECONDS
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; ResumeTailor/1.0)",
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "en-US,en;q=0.9",
}


async def fetch_page(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    retry_delay: float = 1.0,
) -> Optional[str]:
    """
    Fetch public page content as text. No authentication; public content only.
    Retries timeouts and connection errors; client errors (4xx) are not retried.
    Returns None when the page could not be fetched.
    """
    last_error: Optional[Exception] = None
    for attempt in range(HTTP_MAX_RETRIES):
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=HTTP_TIMEOUT_SECONDS,
                headers=REQUEST_HEADERS,
                transport=transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            last_error = e
            logger.warning("HTTP error %s for %s", e.response.status_code, url)
            if 400 <= e.response.status_code < 500:
                break
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            last_error = e
            logger.warning("Request failed for %s (attempt %s): %s", url, attempt + 1, str(e))
        except Exception as e:
            last_error = e
            logger.exception("Unexpected error fetching %s", url)
            break
        await asyncio.sleep(retry_delay * (attempt + 1))

    if last_error:
        logger.error("Failed to fetch %s: %s", url, last_error)
    return None
