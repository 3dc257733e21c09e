"""Tests for genre extraction from album pages."""

import pytest

from wikigenre.errors import ParseError
from wikigenre.scraper import parse_document, scrape_genres
from wikigenre.text_utils import title_case


class TestTitleCase:
    """Test suite for first-letter capitalization."""

    def test_each_word_capitalized(self):
        assert title_case("heavy metal") == "Heavy Metal"

    def test_only_first_character_changes(self):
        assert title_case("post-punk") == "Post-punk"

    def test_internal_capitals_preserved(self):
        assert title_case("UK garage") == "UK Garage"
        assert title_case("hip hop soul") == "Hip Hop Soul"

    def test_repeated_spaces_preserved(self):
        assert title_case("art  rock") == "Art  Rock"

    def test_empty_string(self):
        assert title_case("") == ""


class TestScrapeGenres:
    """Test suite for two-tier genre extraction."""

    def test_audio_table_takes_priority(self, haudio_html):
        genres = scrape_genres(parse_document(haudio_html))
        assert genres == ["Rock", "Blues Rock"]

    def test_infobox_fallback(self, infobox_html):
        genres = scrape_genres(parse_document(infobox_html))
        assert genres == ["Heavy Metal", "Post-punk", "Heavy Metal"]

    def test_infobox_ignores_other_rows(self, infobox_html):
        genres = scrape_genres(parse_document(infobox_html))
        assert "Parlophone" not in genres

    def test_header_must_match_exactly(self):
        html = '''
        <table class="infobox">
            <tr><th><a href="/wiki/Music_genre">Genres</a></th><td><a>jazz</a></td></tr>
        </table>
        '''
        assert scrape_genres(parse_document(html)) == []

    def test_genre_outside_infobox_ignored(self):
        html = '''
        <table class="wikitable">
            <tr><th><a href="/wiki/Music_genre">Genre</a></th><td><a>jazz</a></td></tr>
        </table>
        '''
        assert scrape_genres(parse_document(html)) == []

    def test_no_genres(self):
        html = "<html><body><p>Abbey Road is a street.</p></body></html>"
        assert scrape_genres(parse_document(html)) == []


class TestParseDocument:
    """Test suite for page parsing."""

    def test_empty_body_raises(self):
        with pytest.raises(ParseError):
            parse_document("")

