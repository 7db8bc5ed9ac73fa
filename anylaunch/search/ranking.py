"""
Rank Policy - Tier table and intra-tier ordering for merged results.

Tier is a fixed priority per entry kind (lower = shown first). Within a
tier, name-matched entries prefer prefix matches over interior matches,
then shorter names. Web search is the fallback and always sorts last.
"""

from typing import Mapping, Optional

from loguru import logger

from anylaunch.search.entry import Entry, EntryKind, Rank
from anylaunch.search.matcher import Match

DEFAULT_TIERS = {
    EntryKind.CALCULATION: 0,
    EntryKind.URL: 0,
    EntryKind.HISTORY: 1,
    EntryKind.COMMAND_LINE: 2,
    EntryKind.APPLICATION: 3,
    EntryKind.FILE: 4,
    EntryKind.WEB_SEARCH: 100,
}


class RankPolicy:
    """Assigns Rank values to entries."""

    def __init__(self, overrides: Optional[Mapping[str, int]] = None):
        tiers = dict(DEFAULT_TIERS)
        for key, value in (overrides or {}).items():
            try:
                kind = EntryKind(key)
            except ValueError:
                logger.warning(f"Ignoring tier for unknown entry kind '{key}'")
                continue
            tiers[kind] = int(value)

        highest_other = max(t for k, t in tiers.items() if k is not EntryKind.WEB_SEARCH)
        if tiers[EntryKind.WEB_SEARCH] <= highest_other:
            logger.warning(
                f"Web search tier {tiers[EntryKind.WEB_SEARCH]} would not sort last, "
                f"using {highest_other + 1}"
            )
            tiers[EntryKind.WEB_SEARCH] = highest_other + 1

        self.tiers = tiers

    def tier(self, kind: EntryKind) -> int:
        return self.tiers[kind]

    def rank_for(self, entry: Entry, found: Optional[Match] = None) -> Rank:
        """Build the rank for an entry, using its name match if any."""
        if found is None:
            return Rank(self.tiers[entry.kind])
        prefix_miss = 0 if found.offset == 0 else 1
        return Rank(self.tiers[entry.kind], (prefix_miss, len(entry.name)))
