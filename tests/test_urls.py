"""
Tests for the UrlProvider.
"""

import pytest

from anylaunch.search.entry import EntryKind
from anylaunch.search.providers.urls import UrlProvider, is_url


class TestUrlRecognition:

    @pytest.mark.parametrize("text", [
        "http://example.com",
        "https://example.com/path?q=1&x=2",
        "ftp://files.example.org",
        "git+ssh://git@example.com/repo.git",
    ])
    def test_recognized(self, text):
        assert is_url(text) is True

    @pytest.mark.parametrize("text", [
        "example.com",
        "http://",
        "http:// example.com",
        "2+2",
        "/usr/bin",
        "1http://example.com",
    ])
    def test_rejected(self, text):
        assert is_url(text) is False


class TestUrlResults:

    def test_url_entry(self):
        results = UrlProvider().search("http://example.com")
        assert len(results) == 1
        entry = results[0]
        assert entry.kind is EntryKind.URL
        assert entry.name == "http://example.com"
        assert entry.execution_command == "xdg-open http://example.com"
        assert entry.tab_completion_text == "http://example.com"

    def test_surrounding_space_trimmed(self):
        results = UrlProvider().search("  https://example.com  ")
        assert results[0].name == "https://example.com"

    def test_query_string_is_quoted(self):
        results = UrlProvider().search("https://example.com/?a=1&b=2")
        assert results[0].execution_command == "xdg-open 'https://example.com/?a=1&b=2'"

    def test_markup_escaped(self):
        results = UrlProvider().search("https://example.com/?a=1&b=2")
        assert "&amp;" in results[0].display_markup

    def test_not_a_url(self):
        assert UrlProvider().search("firefox") == []
