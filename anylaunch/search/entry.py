"""
Entry model - One candidate action and the ordered lists that hold them.

Every provider produces Entry objects. The dispatcher ranks them and the
shell renders display_markup, shows icon, inserts tab_completion_text on
Tab and hands execution_command to its process launcher on activation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from anylaunch.search.matcher import bold_span, escape_markup, normalize


class EntryKind(Enum):
    """Source kind of an entry."""
    APPLICATION = "application"
    COMMAND_LINE = "command_line"
    FILE = "file"
    URL = "url"
    HISTORY = "history"
    CALCULATION = "calculation"
    WEB_SEARCH = "web_search"


# Default glyph shown in front of highlighted names
MARKUP_PREFIXES = {
    EntryKind.APPLICATION: "",
    EntryKind.COMMAND_LINE: "→ ",
    EntryKind.FILE: "",
    EntryKind.URL: "",
    EntryKind.HISTORY: "⌚ ",
    EntryKind.CALCULATION: "= ",
    EntryKind.WEB_SEARCH: "",
}

_missing = set(EntryKind) - set(MARKUP_PREFIXES)
if _missing:
    raise RuntimeError(f"No markup prefix for entry kinds: {sorted(k.name for k in _missing)}")


class Rank(NamedTuple):
    """Sort key assigned by the dispatcher. Lower sorts first."""
    tier: int
    order: tuple = (0, 0)


_READ_ONLY = ("kind", "name", "normalized_name")


@dataclass(eq=False)
class Entry:
    """A single launchable candidate."""
    kind: EntryKind
    name: str
    execution_command: str = ""
    tab_completion_text: str = ""
    icon: str = "image-missing"
    display_markup: str = ""
    rank: Rank = Rank(0)
    markup_prefix: str = None
    normalized_name: str = field(init=False)

    def __post_init__(self):
        if not isinstance(self.kind, EntryKind):
            raise TypeError(f"kind must be an EntryKind, got {self.kind!r}")
        if self.kind is not EntryKind.CALCULATION and not self.execution_command:
            raise ValueError(f"{self.kind.name} entry '{self.name}' needs an execution command")
        self.normalized_name = normalize(self.name)
        if self.markup_prefix is None:
            self.markup_prefix = MARKUP_PREFIXES[self.kind]
        if not self.display_markup:
            self.display_markup = self.markup_prefix + escape_markup(self.name)

    def __setattr__(self, key, value):
        if key in _READ_ONLY and key in self.__dict__:
            raise AttributeError(f"Entry.{key} cannot change after construction")
        super().__setattr__(key, value)

    def highlight(self, offset: int, length: int) -> None:
        """
        Rebuild display_markup with name[offset:offset+length] in bold.

        The markup is always derived from name and markup_prefix, so
        repeated calls never stack tags.

        Raises:
            ValueError: If the span does not lie within name
        """
        if offset < 0 or length < 0 or offset + length > len(self.name):
            raise ValueError(
                f"Highlight span ({offset}, {length}) outside of '{self.name}'"
            )
        self.display_markup = self.markup_prefix + bold_span(self.name, offset, length)


class EntryList(list):
    """Ordered entries. Duplicates are allowed; dedup is the dispatcher's job."""

    def sort_by_name(self) -> None:
        self.sort(key=lambda e: e.normalized_name)

    def sort_by_rank(self) -> None:
        self.sort(key=lambda e: (e.rank, e.normalized_name))
