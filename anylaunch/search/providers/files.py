"""
File Provider - Open files and complete paths.

Triggers on queries that look like paths ("/etc/hosts", "~/Docu").
Offers the typed path itself when it exists, plus the entries of its
parent directory that start with the typed name, so Tab walks down the
tree. Names keep the user's spelling ("~/Documents", not the expanded
home path) so highlights line up with the query.
"""

import os
import shlex

from loguru import logger

from anylaunch.errors import MetadataFailure
from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList
from anylaunch.services.file_info import FileInfoResolver


def looks_like_path(query: str) -> bool:
    return query.startswith("/") or query.startswith("~")


class FileProvider(SearchProvider):
    """Offer files and directories matching a typed path."""

    name = "files"
    kind = EntryKind.FILE
    match_names = True

    def __init__(self, resolver: FileInfoResolver, open_command: str = "xdg-open", max_results: int = 30):
        self.resolver = resolver
        self.open_command = open_command
        self.max_results = max_results

    def search(self, query: str) -> EntryList:
        typed = query.strip()
        if not looks_like_path(typed) or "\x00" in typed:
            return EntryList()

        results = EntryList()
        own = self._make_entry(typed)
        if own is not None:
            results.append(own)

        typed_dir, typed_base = os.path.split(typed)
        parent = os.path.expanduser(typed_dir or "/")
        try:
            children = sorted(os.listdir(parent))
        except (OSError, ValueError) as e:
            logger.debug(f"Cannot list {parent!r}: {e}")
            return results

        prefix = typed_base.lower()
        for child in children:
            if len(results) >= self.max_results:
                break
            if child.startswith(".") and not prefix.startswith("."):
                continue
            if not child.lower().startswith(prefix) or child == typed_base:
                continue
            entry = self._make_entry(os.path.join(typed_dir, child))
            if entry is not None:
                results.append(entry)

        return results

    def _make_entry(self, typed_path: str) -> Entry | None:
        """Build an entry for a path as typed; None when it can't be stat'ed."""
        path = os.path.expanduser(typed_path)
        try:
            info = self.resolver.query_info(path)
        except MetadataFailure as e:
            logger.debug(str(e))
            return None

        tab_text = typed_path
        if info.is_dir and not tab_text.endswith("/"):
            tab_text += "/"

        return Entry(
            kind=EntryKind.FILE,
            name=typed_path,
            execution_command=f"{self.open_command} {shlex.quote(path)}",
            tab_completion_text=tab_text,
            icon=info.icon,
        )
