"""
Application Provider - Installed applications from .desktop files.

Returns every visible application; the dispatcher decides which ones
match the query and highlights them. Entries marked Hidden or NoDisplay
are never offered.
"""

import re
from pathlib import Path
from typing import Iterable

from loguru import logger

from anylaunch.errors import ParseFailure
from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList
from anylaunch.services.desktop_entries import DesktopEntryReader, DesktopRecord, iter_desktop_files

DEFAULT_APP_ICON = "application-x-executable"

# Exec field codes that expand to files, urls, icons or names at launch time
_FIELD_CODE_RE = re.compile(r"\s*(?<!%)%[fFuUdDnNickvm]")


def strip_field_codes(exec_command: str) -> str:
    """
    Remove desktop entry field codes from an Exec value.

    Example:
        "firefox %u" -> "firefox"
        "printf 100%%" -> "printf 100%"
    """
    return _FIELD_CODE_RE.sub("", exec_command).replace("%%", "%").strip()


class ApplicationProvider(SearchProvider):
    """List installed, visible desktop applications."""

    name = "applications"
    kind = EntryKind.APPLICATION
    match_names = True

    def __init__(self, reader: DesktopEntryReader, dirs: Iterable[Path]):
        self.reader = reader
        self.dirs = list(dirs)

    def search(self, query: str) -> EntryList:
        entries = EntryList()
        for path in iter_desktop_files(self.dirs):
            try:
                record = self.reader.read(path)
            except ParseFailure as e:
                logger.debug(f"Skipping desktop file: {e}")
                continue

            if record.hidden or record.no_display:
                continue

            entry = self._record_to_entry(record)
            if entry is not None:
                entries.append(entry)
        return entries

    def _record_to_entry(self, record: DesktopRecord) -> Entry | None:
        command = strip_field_codes(record.exec_command)
        if not command:
            logger.debug(f"Skipping {record.desktop_id}: Exec is only field codes")
            return None
        return Entry(
            kind=EntryKind.APPLICATION,
            name=record.name,
            execution_command=command,
            tab_completion_text=command,
            icon=record.icon or DEFAULT_APP_ICON,
        )
