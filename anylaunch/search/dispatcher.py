"""
Dispatcher - Runs a query against every provider and merges the results.

All providers run concurrently on a worker pool. Once every provider has
finished, entries from name-matched providers are filtered and
highlighted against the query, every entry gets a rank, command entries
already shown as history items are dropped, and the merged list is sorted.

A query that produces no entries from a provider (or whose provider
fails) simply contributes nothing. search() never raises.
"""

import threading
from abc import ABC, abstractmethod
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Optional, Sequence

from loguru import logger

from anylaunch.search.entry import EntryKind, EntryList
from anylaunch.search.matcher import match, normalize
from anylaunch.search.ranking import RankPolicy


class SearchProvider(ABC):
    """Base class for all providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier."""
        ...

    @property
    @abstractmethod
    def kind(self) -> EntryKind:
        """Kind of entries this provider produces."""
        ...

    @property
    @abstractmethod
    def match_names(self) -> bool:
        """True if the dispatcher should filter results by name match."""
        ...

    @abstractmethod
    def search(self, query: str) -> EntryList:
        """Return candidate entries for the trimmed query."""
        ...


class Dispatcher:
    """Fans a query out to providers and merges ranked results."""

    def __init__(
        self,
        providers: Sequence[SearchProvider],
        rank_policy: Optional[RankPolicy] = None,
        max_results: int = 30,
        max_workers: int = 4,
    ):
        self.providers = list(providers)
        self.rank_policy = rank_policy or RankPolicy()
        self.max_results = max_results
        self._pool = ThreadPoolExecutor(
            max_workers=max(1, max_workers),
            thread_name_prefix="anylaunch-provider",
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self._pool.shutdown(wait=False, cancel_futures=True)

    def search(self, query: str, cancel: Optional[threading.Event] = None) -> EntryList:
        """
        Ranked, deduplicated entries for a query.

        Args:
            query: Raw text from the search box
            cancel: Set when a newer query supersedes this one

        Returns:
            EntryList sorted by rank. Empty for blank or cancelled queries.
        """
        text = query.strip()
        needle = normalize(text)
        if not needle:
            return EntryList()

        try:
            futures = [
                (provider, self._pool.submit(provider.search, text))
                for provider in self.providers
            ]
        except RuntimeError:
            logger.warning("Dispatcher is closed, returning no results")
            return EntryList()

        merged = EntryList()
        for provider, future in futures:
            if cancel is not None and cancel.is_set():
                self._cancel_pending(futures)
                logger.debug(f"Query {text!r} superseded")
                return EntryList()
            merged.extend(self._collect(provider, future, needle))

        if cancel is not None and cancel.is_set():
            return EntryList()

        merged = self._dedup(merged)
        merged.sort_by_rank()
        return merged

    def _collect(self, provider, future: Future, needle: str) -> EntryList:
        """Wait for one provider and rank its entries."""
        try:
            entries = future.result()
        except CancelledError:
            return EntryList()
        except Exception:
            logger.exception(f"Provider '{provider.name}' failed")
            return EntryList()

        ranked = EntryList()
        for entry in entries or ():
            if provider.match_names:
                found = match(entry.normalized_name, needle)
                if found is None:
                    continue
                entry.highlight(found.offset, found.length)
                entry.rank = self.rank_policy.rank_for(entry, found)
            else:
                entry.rank = self.rank_policy.rank_for(entry)
            ranked.append(entry)

        if provider.match_names and len(ranked) > self.max_results:
            ranked.sort_by_rank()
            del ranked[self.max_results:]
        return ranked

    @staticmethod
    def _cancel_pending(futures) -> None:
        for _provider, future in futures:
            future.cancel()

    @staticmethod
    def _dedup(entries: EntryList) -> EntryList:
        """Drop command entries that duplicate a history entry."""
        history_commands = {
            e.execution_command for e in entries if e.kind is EntryKind.HISTORY
        }
        return EntryList(
            e for e in entries
            if not (e.kind is EntryKind.COMMAND_LINE and e.execution_command in history_commands)
        )


class SearchSession:
    """
    Interactive wrapper around a Dispatcher.

    Each update() supersedes the previous one: the older query's token is
    set, and its results are discarded instead of being published.
    """

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher
        self.results = EntryList()
        self._lock = threading.Lock()
        self._generation = 0
        self._cancel: Optional[threading.Event] = None

    def update(self, query: str) -> Optional[EntryList]:
        """
        Run a query for the latest search text.

        Returns:
            The new results, or None if a newer update() started meanwhile
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._cancel is not None:
                self._cancel.set()
            cancel = threading.Event()
            self._cancel = cancel

        results = self.dispatcher.search(query, cancel=cancel)

        with self._lock:
            if generation != self._generation:
                return None
            self.results = results
            return results

    @staticmethod
    def complete(entry) -> str:
        """Text to put in the search box when the user hits Tab."""
        return entry.tab_completion_text
