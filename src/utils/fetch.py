"""
Remote Document Fetcher

Async HTTP client for pulling a document from a remote source before
it is handed to the scoring engine:
- Per-request timeout
- Automatic retry with exponential backoff
- No retry on client errors (4xx except 429)

Usage:
    async with DocumentFetcher() as fetcher:
        content = await fetcher.fetch("https://example.com/post")

    result = score(content, metadata)
"""

import asyncio
import httpx
import logging
from typing import Optional
from dataclasses import dataclass

from .config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""
    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 10.0
    exponential_base: float = 2.0
    retryable_status_codes: tuple = (429, 500, 502, 503, 504)


class DocumentFetchError(Exception):
    """Raised when a document cannot be fetched."""
    def __init__(self, message: str, status_code: int = None, url: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DocumentFetcher:
    """
    Async fetcher for remote documents.

    Usage:
        fetcher = DocumentFetcher(timeout=10.0)
        content = await fetcher.fetch("https://example.com/article")
        await fetcher.close()
    """

    def __init__(
        self,
        retry_config: Optional[RetryConfig] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize document fetcher.

        Args:
            retry_config: Retry configuration (defaults from settings)
            timeout: Request timeout in seconds (defaults from settings)
            transport: Optional httpx transport (used for testing)
        """
        settings = get_settings()
        self.retry_config = retry_config or RetryConfig(max_retries=settings.FETCH_MAX_RETRIES)
        self.timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=transport,
        )
        self._closed = False

    async def fetch(self, url: str, retry: bool = True) -> str:
        """
        Fetch a document's text.

        Args:
            url: Absolute document URL
            retry: Whether to retry on failure

        Returns:
            Response body as text

        Raises:
            DocumentFetchError: When the request fails (after retries)
        """
        if self._closed:
            raise DocumentFetchError("Fetcher is closed", url=url)

        if retry:
            return await self._request_with_retry(url)
        return await self._make_request(url)

    async def _make_request(self, url: str) -> str:
        """Make a single HTTP request."""
        logger.debug(f"GET {url}")

        response = await self._client.get(url)

        if response.status_code != 200:
            raise DocumentFetchError(
                f"Document request failed: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        return response.text

    def _should_retry(self, error: DocumentFetchError) -> bool:
        if error.status_code is None:
            return True
        return error.status_code in self.retry_config.retryable_status_codes

    async def _request_with_retry(self, url: str) -> str:
        """Make request with automatic retry on failure."""
        last_exception = None
        delay = self.retry_config.initial_delay

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                return await self._make_request(url)

            except DocumentFetchError as e:
                last_exception = e

                if not self._should_retry(e):
                    raise

            except httpx.TimeoutException as e:
                last_exception = DocumentFetchError(f"Request timed out: {e}", url=url)

            except httpx.HTTPError as e:
                last_exception = DocumentFetchError(f"HTTP error: {e}", url=url)

            if attempt < self.retry_config.max_retries:
                logger.warning(
                    f"Fetch failed (attempt {attempt + 1}/{self.retry_config.max_retries + 1}): "
                    f"{last_exception}. Retrying in {delay}s..."
                )
                await asyncio.sleep(delay)
                delay = min(
                    delay * self.retry_config.exponential_base,
                    self.retry_config.max_delay
                )

        logger.error(f"Giving up on {url} after {self.retry_config.max_retries + 1} attempts")
        raise last_exception

    async def close(self):
        """Close the HTTP client."""
        if not self._closed:
            await self._client.aclose()
            self._closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
