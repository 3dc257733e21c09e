"""Genre extraction from Wikipedia album pages."""

import logging
from typing import List, Union

from bs4 import BeautifulSoup

from .errors import ParseError
from .text_utils import title_case

logger = logging.getLogger(__name__)

# Older album articles carry a compact audio table with category cells
HAUDIO_GENRE_LINKS = 'table.haudio td.category a'
INFOBOX_HEADER_LINKS = 'table.infobox th > a'
GENRE_HEADER = 'Genre'


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    """Parse a fetched page into a queryable document."""
    try:
        soup = BeautifulSoup(html, 'lxml')
    except Exception as e:
        raise ParseError(f"unable to parse page: {e}") from e

    if soup.find() is None:
        raise ParseError("page contains no markup")
    return soup


def scrape_genres(soup: BeautifulSoup) -> List[str]:
    """Extract title-cased genre names from an album page.

    The audio table is checked first; the infobox "Genre" row is used only
    when it yields nothing. Document order and duplicates are kept.
    """
    genres = [title_case(link.get_text()) for link in soup.select(HAUDIO_GENRE_LINKS)]
    if genres:
        return genres

    rows = []
    for header_link in soup.select(INFOBOX_HEADER_LINKS):
        if header_link.get_text() != GENRE_HEADER:
            continue
        row = header_link.parent.parent
        if row is None or any(row is seen for seen in rows):
            continue
        rows.append(row)
        genres.extend(title_case(link.get_text()) for link in row.select('td a'))

    logger.debug(f"Scraped {len(genres)} genres from infobox")
    return genres
