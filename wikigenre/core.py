"""Album genre lookup against Wikipedia.

This module ties the search client, the genre scraper and the batch
scheduler together into a single entry point usable from the CLI or from
other tools.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .cache_manager import PageCacheManager
from .client import WikipediaClient
from .dataclasses import BatchResult, Query, WikigenreConfig
from .errors import NoGenresFound
from .resolution import resolve_batch
from .scraper import parse_document, scrape_genres
from .search import search_variants


class WikigenreResolver:
    """Resolves album queries into genre lists."""

    def __init__(self, config: Optional[WikigenreConfig] = None,
                 client: Optional[WikipediaClient] = None) -> None:
        self.config = config or WikigenreConfig()
        self.logger = logging.getLogger(__name__)

        self._init_cache_manager()
        self.client = client or WikipediaClient(self.config, self.cache_manager)

    def _init_cache_manager(self) -> None:
        """Initialize page cache manager."""
        self.cache_manager = None
        if self.config.cache_enabled:
            cache_dir = Path(self.config.cache_dir)
            if not cache_dir.is_absolute():
                cache_dir = cache_dir.resolve()
            self.cache_manager = PageCacheManager(str(cache_dir), self.config.cache_expiry_days)

    async def __aenter__(self):
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def variant_genres(self, query: str) -> List[str]:
        """Search for one query string and scrape genres from the top hit.

        Returns an empty list when the search has no results. Only the first
        result is fetched.
        """
        search_response = await self.client.search(query)
        if not search_response.uris:
            self.logger.debug(f"No search results for: {query}")
            return []

        # TODO: check the remaining result URIs when the first page has no genres
        uri = search_response.uris[0]
        html = await self.client.fetch_page(uri)
        return scrape_genres(parse_document(html))

    async def album_genres(self, artist: str, album: str) -> List[str]:
        """Search Wikipedia for the album page and scrape genres from it.

        At least one of artist or album must be given. Variants are tried
        from most to least specific and the first non-empty result wins.
        Transport and parse errors abort immediately.

        Raises:
            NoGenresFound: if no variant yields genres
        """
        if not artist and not album:
            raise ValueError("At least one of artist or album is required")

        for variant in search_variants(artist, album):
            self.logger.debug(f"Trying search variant: {variant}")
            genres = await self.variant_genres(variant)
            if genres:
                return genres
        raise NoGenresFound()

    async def resolve(self, queries: Sequence[Query]) -> BatchResult:
        """Resolve a batch of queries, returning genres in input order."""
        return await resolve_batch(queries, self.album_genres)

    def clear_cache(self) -> int:
        """Clear page cache and return number of files cleared."""
        if self.cache_manager:
            return self.cache_manager.clear_cache()
        return 0

    def get_cache_info(self) -> Dict[str, Any]:
        if self.cache_manager:
            return self.cache_manager.get_cache_info()
        return {'cache_enabled': False}
