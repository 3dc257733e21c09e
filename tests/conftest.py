"""Pytest configuration and fixtures for wikigenre tests."""

import asyncio

import pytest

from wikigenre.dataclasses import SearchResponse, WikigenreConfig


class FakeWikipediaClient:
    """Stand-in for WikipediaClient that records every request.

    ``search_results`` maps query -> list of URIs (or an exception to raise);
    ``pages`` maps URI -> HTML (or an exception to raise). Unknown queries
    return no results.
    """

    def __init__(self, search_results=None, pages=None):
        self.search_results = search_results or {}
        self.pages = pages or {}
        self.search_calls = []
        self.fetch_calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def search(self, query):
        self.search_calls.append(query)
        await asyncio.sleep(0)
        result = self.search_results.get(query, [])
        if isinstance(result, Exception):
            raise result
        return SearchResponse(query=query, suggestions=[], snippets=[], uris=list(result))

    async def fetch_page(self, uri):
        self.fetch_calls.append(uri)
        await asyncio.sleep(0)
        page = self.pages[uri]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def config(tmp_path):
    """Create configuration for testing."""
    return WikigenreConfig(
        api_url="https://wiki.example.com/w/api.php",
        cache_enabled=False,
        cache_dir=str(tmp_path / "cache"),
    )


@pytest.fixture
def temp_cache_dir(tmp_path):
    """Create temporary cache directory for tests."""
    return tmp_path / "test_cache"


@pytest.fixture
def fake_client_factory():
    return FakeWikipediaClient


@pytest.fixture
def haudio_html():
    """Album page with the compact audio table."""
    return '''
    <html>
    <body>
        <table class="haudio">
            <tr>
                <td class="category">
                    <a href="/wiki/Rock_music">rock</a>,
                    <a href="/wiki/Blues_rock">blues rock</a>
                </td>
            </tr>
        </table>
        <table class="infobox">
            <tr>
                <th><a href="/wiki/Music_genre">Genre</a></th>
                <td><a href="/wiki/Pop_music">pop</a></td>
            </tr>
        </table>
    </body>
    </html>
    '''


@pytest.fixture
def infobox_html():
    """Album page with genres only in the infobox."""
    return '''
    <html>
    <body>
        <table class="infobox vevent">
            <tr>
                <th><a href="/wiki/Record_label">Label</a></th>
                <td><a href="/wiki/Parlophone">Parlophone</a></td>
            </tr>
            <tr>
                <th><a href="/wiki/Music_genre">Genre</a></th>
                <td>
                    <a href="/wiki/Heavy_metal_music">heavy metal</a>
                    <a href="/wiki/Post-punk">post-punk</a>
                    <a href="/wiki/Heavy_metal_music">heavy metal</a>
                </td>
            </tr>
        </table>
    </body>
    </html>
    '''
