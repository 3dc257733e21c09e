"""Wikipedia album genre lookup."""

__version__ = "1.0.0"

from .dataclasses import (
    WikigenreConfig,
    QueryRecord,
    InvalidQuery,
    SearchResponse,
    ResolutionError,
    BatchResult,
)
from .errors import (
    WikigenreError,
    SearchError,
    DecodeError,
    FetchError,
    ParseError,
    NoGenresFound,
)
from .core import WikigenreResolver
from .normalizer import parse_direct, parse_structured_line
from .search import search_variants
from .scraper import scrape_genres

# Internal components (for advanced usage)
from .client import WikipediaClient
from .cache_manager import PageCacheManager
from .resolution import ResolutionTable, resolve_batch

__all__ = [
    # Version
    '__version__',

    # Core API
    'WikigenreResolver',
    'WikigenreConfig',
    'QueryRecord',
    'InvalidQuery',
    'SearchResponse',
    'ResolutionError',
    'BatchResult',
    'parse_direct',
    'parse_structured_line',
    'search_variants',
    'scrape_genres',

    # Errors
    'WikigenreError',
    'SearchError',
    'DecodeError',
    'FetchError',
    'ParseError',
    'NoGenresFound',

    # Internal components (for advanced usage)
    'WikipediaClient',
    'PageCacheManager',
    'ResolutionTable',
    'resolve_batch',
]
