"""
History Provider - Replay previously executed command lines.
"""

from typing import Protocol

from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList

HISTORY_ICON = "document-open-recent"


class History(Protocol):
    """Read side of the command history store."""

    def is_in_history(self, query: str) -> bool:
        ...

    def search(self, query: str, limit: int = 30) -> list[str]:
        ...


class HistoryProvider(SearchProvider):
    """Offer history items containing the query."""

    name = "history"
    kind = EntryKind.HISTORY
    match_names = True

    def __init__(self, history: History, max_results: int = 30):
        self.history = history
        self.max_results = max_results

    def search(self, query: str) -> EntryList:
        return EntryList(
            Entry(
                kind=EntryKind.HISTORY,
                name=command,
                execution_command=command,
                tab_completion_text=command,
                icon=HISTORY_ICON,
            )
            for command in self.history.search(query, limit=self.max_results)
        )
