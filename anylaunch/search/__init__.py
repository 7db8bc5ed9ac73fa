"""
Search package - Entry model, matching, ranking and provider dispatch.

Queries are fanned out to independent providers (commands, applications,
files, URLs, calculator, history, web search); the dispatcher merges,
ranks and deduplicates their entries.
"""

from .entry import Entry, EntryKind, EntryList, Rank
from .matcher import Match, match, normalize
from .ranking import RankPolicy
from .dispatcher import Dispatcher, SearchProvider, SearchSession

__all__ = [
    "Entry",
    "EntryKind",
    "EntryList",
    "Rank",
    "Match",
    "match",
    "normalize",
    "RankPolicy",
    "Dispatcher",
    "SearchProvider",
    "SearchSession",
]
