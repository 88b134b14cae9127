# backend/scraper/http_utils.py
"""HTTP utilities with timeout and retry logic."""

import httpx
import time
import logging

from backend.scraper.config import (
    REQUEST_TIMEOUT, MAX_RETRIES, RETRY_BACKOFF_BASE, USER_AGENT
)

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page could not be fetched."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{reason}: {url}")
        self.url = url
        self.reason = reason


def fetch_html(
    url: str,
    max_retries: int = MAX_RETRIES,
    timeout: float = REQUEST_TIMEOUT
) -> str:
    """
    Fetch URL and return its body as text.

    Timeouts are retried with exponential backoff; any other failure
    is raised immediately.

    Args:
        url: URL to fetch
        max_retries: Maximum number of attempts
        timeout: Request timeout in seconds

    Returns:
        Response body

    Raises:
        FetchError: On timeout after all attempts, HTTP error status,
            transport failure or an unusable URL
    """
    attempts = max(1, max_retries)
    headers = {"User-Agent": USER_AGENT}

    for attempt in range(attempts):
        try:
            response = httpx.get(
                url, headers=headers, timeout=timeout, follow_redirects=True
            )
            response.raise_for_status()
            return response.text

        except (httpx.ReadTimeout, httpx.ConnectTimeout) as e:
            if attempt < attempts - 1:
                wait_time = RETRY_BACKOFF_BASE ** attempt
                logger.warning(
                    f"Timeout on attempt {attempt + 1}/{attempts}, "
                    f"retrying in {wait_time}s..."
                )
                time.sleep(wait_time)
            else:
                logger.error(f"Failed after {attempts} attempts: timeout")
                raise FetchError(url, "timeout") from e

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error {e.response.status_code}: {url}")
            raise FetchError(url, f"HTTP {e.response.status_code}") from e

        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching {url}: {e}")
            raise FetchError(url, str(e) or type(e).__name__) from e

        except Exception as e:
            logger.error(f"Unexpected error fetching {url}: {e}")
            raise FetchError(url, str(e) or type(e).__name__) from e

    raise FetchError(url, "no attempt made")
