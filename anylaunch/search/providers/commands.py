"""
Command Provider - Run the typed text as a shell command line.

Offers the query itself as a command when its first word is an
executable, either as a path ("./build.sh", "/usr/bin/env") or by name
in one of the search path directories ("ls -la").

No entry is offered when the exact command is already in history; the
history provider shows it instead.
"""

import os
import shlex
from typing import Sequence

from loguru import logger

from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList
from anylaunch.services.file_info import is_executable

COMMAND_ICON = "application-default-icon"


def split_command_line(command: str) -> list[str]:
    """Shell-style split; unbalanced quotes fall back to whitespace split."""
    try:
        return shlex.split(command)
    except ValueError:
        return command.split()


def is_path_executable(path: str) -> bool:
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return is_executable(path, st)


class CommandProvider(SearchProvider):
    """Offer the query as a command line when it starts with an executable."""

    name = "commands"
    kind = EntryKind.COMMAND_LINE
    match_names = True

    def __init__(self, path_entries: Sequence[str], history):
        self.path_entries = tuple(path_entries)
        self.history = history

    def is_command(self, word: str) -> bool:
        """Executable by path, or found in the search path (first hit wins)."""
        if is_path_executable(word):
            return True
        if os.sep in word:
            return False
        for directory in self.path_entries:
            if is_path_executable(os.path.join(directory, word)):
                return True
        return False

    def search(self, query: str) -> EntryList:
        command = query.strip()
        if not command:
            return EntryList()

        words = split_command_line(command)
        if not words:
            return EntryList()

        if self.history.is_in_history(command):
            logger.debug(f"Command {command!r} already in history")
            return EntryList()

        if not self.is_command(words[0]):
            return EntryList()

        entry = Entry(
            kind=EntryKind.COMMAND_LINE,
            name=command,
            execution_command=command,
            tab_completion_text=command,
            icon=COMMAND_ICON,
        )
        entry.highlight(0, len(command))
        return EntryList([entry])
