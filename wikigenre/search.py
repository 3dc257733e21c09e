"""Search variant generation and opensearch response decoding."""

from typing import Any, List

from .dataclasses import SearchResponse
from .errors import DecodeError


def search_variants(artist: str, album: str) -> List[str]:
    """Build search queries to try for an album, most specific first.

    The album article is preferred over the artist page: Wikipedia titles
    ambiguous album articles as "Album (Artist album)" or "Album (album)".
    At least one of artist or album must be given.
    """
    variants = []
    if artist and album:
        variants.append(f"{album} ({artist} album)")
    if album:
        variants.append(f"{album} (album)")
        variants.append(album)
    if artist:
        variants.append(artist)
    return variants


def _string_list(value: Any, name: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DecodeError(f"unable to decode {name}: {value!r}")
    return value


def decode_search_response(payload: Any) -> SearchResponse:
    """Decode an opensearch reply ``[query, suggestions, snippets, uris]``."""
    if not isinstance(payload, list) or len(payload) != 4:
        raise DecodeError(f"unexpected search response: {payload!r}")

    query, suggestions, snippets, uris = payload
    if not isinstance(query, str):
        raise DecodeError(f"unable to decode query: {query!r}")

    return SearchResponse(
        query=query,
        suggestions=_string_list(suggestions, 'suggestions'),
        snippets=_string_list(snippets, 'snippets'),
        uris=_string_list(uris, 'uris'),
    )
