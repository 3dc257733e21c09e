"""HTTP access to the Wikipedia search API and article pages."""

import asyncio
import json
import logging
from typing import Any, Dict, Optional, Tuple

import aiohttp
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .cache_manager import PageCacheManager
from .dataclasses import SearchResponse, WikigenreConfig
from .errors import DecodeError, FetchError, SearchError
from .search import decode_search_response

RETRYABLE_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


def is_response_ok(status: int) -> bool:
    """Return False for 4xx and 5xx statuses."""
    return not (400 <= status < 600)


class WikipediaClient:
    """Issues search and page requests over a shared aiohttp session.

    Use as an async context manager; the session is created on entry and
    closed on exit unless one was passed in.
    """

    def __init__(self, config: WikigenreConfig,
                 cache_manager: Optional[PageCacheManager] = None,
                 session: Optional[aiohttp.ClientSession] = None) -> None:
        self.config = config
        self.cache_manager = cache_manager
        self.logger = logging.getLogger(__name__)

        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        if self._session is None:
            timeout = aiohttp.ClientTimeout(
                total=self.config.request_timeout,
                connect=self.config.connect_timeout
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={'User-Agent': self.config.user_agent}
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        del exc_type, exc_val, exc_tb
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _get(self, url: str, params: Optional[Dict[str, str]] = None) -> Tuple[int, str, str]:
        """GET a URL and return (status, reason, body text).

        Connection errors and timeouts are retried up to ``max_attempts``
        times in total; HTTP error statuses are returned, not retried.
        """
        if self._session is None:
            raise RuntimeError("WikipediaClient must be used as an async context manager")

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(1, self.config.max_attempts)),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            reraise=True,
        ):
            with attempt:
                async with self._session.get(url, params=params) as response:
                    body = await response.text(errors='replace')
                    return response.status, response.reason or '', body

    async def search(self, query: str) -> SearchResponse:
        """Run an opensearch query and decode the result."""
        params = {'action': 'opensearch', 'search': query}
        self.logger.debug(f"Searching Wikipedia for: {query}")

        try:
            status, reason, body = await self._get(self.config.api_url, params)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SearchError(f"search on Wikipedia failed: {str(e) or type(e).__name__}") from e

        if not is_response_ok(status):
            raise SearchError(f"search on Wikipedia failed, HTTP status {status} {reason}".rstrip(), status)

        try:
            payload: Any = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"invalid search response: {e}") from e
        return decode_search_response(payload)

    async def fetch_page(self, uri: str) -> str:
        """Fetch an article page, consulting the page cache first."""
        if self.cache_manager:
            cached = self.cache_manager.get_cached_html(uri)
            if cached is not None:
                return cached

        if self.config.verbose:
            self.logger.info(uri)

        try:
            status, reason, body = await self._get(uri)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"failed to open Wikipedia page {uri}: {str(e) or type(e).__name__}") from e

        if not is_response_ok(status):
            raise FetchError(f"failed to open Wikipedia page {uri}, HTTP status {status} {reason}".rstrip(), status)

        if self.cache_manager:
            self.cache_manager.cache_html(uri, body)
        return body
