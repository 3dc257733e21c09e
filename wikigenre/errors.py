"""Exceptions raised while resolving genres for a query."""

from typing import Optional


class WikigenreError(Exception):
    """Base class for per-record resolution failures."""


class SearchError(WikigenreError):
    """Search request failed in transport or returned a 4xx/5xx status."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(WikigenreError):
    """Search response did not have the expected opensearch shape."""


class FetchError(WikigenreError):
    """Page request failed in transport or returned a 4xx/5xx status."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(WikigenreError):
    """Fetched page body could not be parsed as markup."""


class NoGenresFound(WikigenreError):
    """Every search variant was tried and none produced genres."""
    def __init__(self, message: str = "couldn't find any genres"):
        super().__init__(message)
