"""
Search providers - Independent sources of candidate entries.

Each provider turns a query into an EntryList and never raises for
"no match"; an empty list is the only failure signal.
"""

from .applications import ApplicationProvider
from .calculator import CalculatorProvider
from .commands import CommandProvider
from .files import FileProvider
from .history import History, HistoryProvider
from .urls import UrlProvider
from .web_search import WebSearchProvider

__all__ = [
    "ApplicationProvider",
    "CalculatorProvider",
    "CommandProvider",
    "FileProvider",
    "History",
    "HistoryProvider",
    "UrlProvider",
    "WebSearchProvider",
]
