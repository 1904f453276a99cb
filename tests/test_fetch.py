"""
Test Suite for Remote Document Fetching

Uses httpx.MockTransport so no network is touched.
"""

import httpx
import pytest

from src.scoring import score
from src.utils import DocumentFetcher, DocumentFetchError, RetryConfig


NO_DELAY = RetryConfig(max_retries=3, initial_delay=0.0, max_delay=0.0)


def _fetcher(handler, retry_config=NO_DELAY):
    return DocumentFetcher(
        retry_config=retry_config,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
class TestDocumentFetcher:
    """Test fetch, retry and error mapping."""

    async def test_fetch_returns_text(self):
        def handler(request):
            return httpx.Response(200, text="<h1>Guide</h1>")

        async with _fetcher(handler) as fetcher:
            content = await fetcher.fetch("https://example.com/post")

        assert content == "<h1>Guide</h1>"

    async def test_retries_server_errors(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(503)
            return httpx.Response(200, text="ok")

        async with _fetcher(handler) as fetcher:
            content = await fetcher.fetch("https://example.com/post")

        assert content == "ok"
        assert len(calls) == 3

    async def test_gives_up_after_max_retries(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(DocumentFetchError) as exc_info:
                await fetcher.fetch("https://example.com/post")

        assert exc_info.value.status_code == 500
        assert len(calls) == NO_DELAY.max_retries + 1

    async def test_no_retry_on_client_error(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(DocumentFetchError) as exc_info:
                await fetcher.fetch("https://example.com/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://example.com/missing"
        assert len(calls) == 1

    async def test_retries_rate_limit(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(429)
            return httpx.Response(200, text="ok")

        async with _fetcher(handler) as fetcher:
            assert await fetcher.fetch("https://example.com/post") == "ok"

        assert len(calls) == 2

    async def test_timeout_is_retried_then_raised(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ReadTimeout("slow", request=request)

        async with _fetcher(handler, RetryConfig(max_retries=1, initial_delay=0.0)) as fetcher:
            with pytest.raises(DocumentFetchError, match="timed out"):
                await fetcher.fetch("https://example.com/post")

        assert len(calls) == 2

    async def test_retry_disabled(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        async with _fetcher(handler) as fetcher:
            with pytest.raises(DocumentFetchError):
                await fetcher.fetch("https://example.com/post", retry=False)

        assert len(calls) == 1

    async def test_closed_fetcher_raises(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, text="ok"))
        await fetcher.close()

        with pytest.raises(DocumentFetchError, match="closed"):
            await fetcher.fetch("https://example.com/post")

    async def test_fetched_document_can_be_scored(self, full_credit_document, full_credit_metadata):
        def handler(request):
            return httpx.Response(200, text=full_credit_document)

        async with _fetcher(handler) as fetcher:
            content = await fetcher.fetch("https://example.com/post")

        assert score(content, full_credit_metadata).composite_score == 100
