"""
Web Search Provider - Catch-all search in the default browser.

Every non-empty query gets one entry that opens the configured search
engine with the query percent-encoded into its URL template. The
template uses a {query} placeholder and is set in settings.toml:

    [web_search]
    name = "DuckDuckGo"
    url = "https://duckduckgo.com/?q={query}"
    icon = "web-browser"
"""

import shlex
import urllib.parse

from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList
from anylaunch.search.matcher import escape_markup

DEFAULT_ENGINE = {
    "name": "DuckDuckGo",
    "url": "https://duckduckgo.com/?q={query}",
    "icon": "web-browser",
}


class WebSearchProvider(SearchProvider):
    """Fallback web search for any query."""

    name = "web_search"
    kind = EntryKind.WEB_SEARCH
    match_names = False

    def __init__(self, engine: dict = None, open_command: str = "xdg-open"):
        self.engine = {**DEFAULT_ENGINE, **(engine or {})}
        self.open_command = open_command

    def search_url(self, search_term: str) -> str:
        return self.engine["url"].format(query=urllib.parse.quote_plus(search_term))

    def search(self, query: str) -> EntryList:
        search_term = query.strip()
        if not search_term:
            return EntryList()

        url = self.search_url(search_term)
        entry = Entry(
            kind=EntryKind.WEB_SEARCH,
            name=search_term,
            execution_command=f"{self.open_command} {shlex.quote(url)}",
            tab_completion_text=search_term,
            icon=self.engine["icon"],
            markup_prefix=f"Search {escape_markup(self.engine['name'])}: ",
        )
        entry.highlight(0, len(search_term))
        return EntryList([entry])
