"""
URL Provider - Open typed URLs in the default handler.

Recognition is purely syntactic: "scheme://something" with no spaces.
Nothing is fetched.
"""

import re
import shlex

from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList

URL_ICON = "web-browser"

# RFC 3986 scheme followed by "://" and a non-empty remainder
_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://\S+$")


def is_url(text: str) -> bool:
    return bool(_URL_RE.match(text))


class UrlProvider(SearchProvider):
    """Offer the query as a URL to open."""

    name = "urls"
    kind = EntryKind.URL
    match_names = False

    def __init__(self, open_command: str = "xdg-open", icon: str = URL_ICON):
        self.open_command = open_command
        self.icon = icon

    def search(self, query: str) -> EntryList:
        url = query.strip()
        if not is_url(url):
            return EntryList()

        return EntryList([Entry(
            kind=EntryKind.URL,
            name=url,
            execution_command=f"{self.open_command} {shlex.quote(url)}",
            tab_completion_text=url,
            icon=self.icon,
        )])
