import os
from dataclasses import dataclass, field
from typing import List, Tuple, Union

DEFAULT_API_URL = "https://en.wikipedia.org/w/api.php"


@dataclass(repr=True)
class WikigenreConfig:
    """Configuration for genre resolution."""
    # Search service
    api_url: str = DEFAULT_API_URL  # MediaWiki API endpoint (configurable for mirrors/testing)
    user_agent: str = "Wikigenre"

    # Transport settings
    connect_timeout: float = 10.0
    request_timeout: float = 60.0
    max_attempts: int = 1  # Attempts per request on connection errors (1 = no retry)

    # Log URIs of fetched pages
    verbose: bool = False

    # Cache settings
    cache_enabled: bool = False
    cache_dir: str = '.wikigenre_cache'
    cache_expiry_days: int = 7

    @classmethod
    def from_env(cls, **overrides) -> 'WikigenreConfig':
        """Create WikigenreConfig from WIKIGENRE_* environment variables."""
        values = {}
        if os.environ.get('WIKIGENRE_API_URL'):
            values['api_url'] = os.environ['WIKIGENRE_API_URL']
        if os.environ.get('WIKIGENRE_USER_AGENT'):
            values['user_agent'] = os.environ['WIKIGENRE_USER_AGENT']
        if os.environ.get('WIKIGENRE_TIMEOUT'):
            values['request_timeout'] = float(os.environ['WIKIGENRE_TIMEOUT'])

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass(frozen=True)
class QueryRecord:
    """Normalized (artist, album) pair.

    Records compare and hash by the pair only, so the same album reached
    through differently written inputs resolves once. ``raw_key`` is kept
    for diagnostics.
    """
    artist: str
    album: str
    raw_key: str = field(default='', compare=False)

    def __post_init__(self):
        if not self.artist and not self.album:
            raise ValueError("At least one of artist or album is required")

    @property
    def key(self) -> Tuple[str, str]:
        return (self.artist, self.album)

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidQuery:
    """Input that could not be turned into a query; skipped without lookup."""
    raw: str = ''

    @property
    def is_valid(self) -> bool:
        return False


Query = Union[QueryRecord, InvalidQuery]


@dataclass(repr=True)
class SearchResponse:
    """Decoded opensearch reply."""
    query: str
    suggestions: List[str]
    snippets: List[str]
    uris: List[str]


@dataclass(repr=True)
class ResolutionError:
    """Failure of one unique query, tagged with its raw input."""
    raw_key: str
    error: Exception

    def __str__(self) -> str:
        return f"error finding genres for {self.raw_key}: {self.error}"


@dataclass(repr=True)
class BatchResult:
    """Genres in input order plus the failures collected along the way."""
    genres: List[List[str]]
    errors: List[ResolutionError] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and not self.not_found

    def lines(self, separator: str = '; ') -> List[str]:
        return [separator.join(genres or []) for genres in self.genres]

