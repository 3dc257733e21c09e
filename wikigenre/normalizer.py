"""Parsing of raw query input into normalized query records."""

import logging
import re
from typing import IO, Iterable, List

from .dataclasses import InvalidQuery, Query, QueryRecord

logger = logging.getLogger(__name__)

SEPARATOR = ' - '

# foobar2000 "copy name" items: "Artist - [Album CD1 #03]"
STRUCTURED_LINE_RE = re.compile(r'(?:(.+) - )?\[(.+?)?(?: CD\d+)?(?: #\d+)?\]')


def parse_direct(token: str) -> Query:
    """Parse an "ARTIST - ALBUM" or "ALBUM" token.

    Only the first separator splits, so "A - B - C" is artist "A" and
    album "B - C".
    """
    if SEPARATOR in token:
        artist, album = token.split(SEPARATOR, 1)
    else:
        artist, album = '', token

    if not artist and not album:
        return InvalidQuery(token)
    return QueryRecord(artist, album, token)


def parse_structured_line(line: str) -> Query:
    """Parse a line of the form ``[ARTIST - ][ALBUM[ CDn][ #n]]``."""
    match = STRUCTURED_LINE_RE.search(line)
    if not match:
        logger.debug(f"Skipping unrecognized line: {line!r}")
        return InvalidQuery(line)

    artist, album = match.group(1) or '', match.group(2) or ''
    if not artist and not album:
        return InvalidQuery(line)

    if not artist:
        raw_key = album
    elif not album:
        raw_key = artist
    else:
        raw_key = f"{artist}{SEPARATOR}{album}"
    return QueryRecord(artist, album, raw_key)


def parse_tokens(tokens: Iterable[str]) -> List[Query]:
    return [parse_direct(token) for token in tokens]


def parse_lines(lines: Iterable[str]) -> List[Query]:
    return [parse_structured_line(line) for line in lines]


def read_lines(stream: IO[str]) -> List[str]:
    """Read lines until the first empty line or end of stream."""
    lines = []
    for line in stream:
        line = line.rstrip('\r\n')
        if not line:
            break
        lines.append(line)
    return lines
