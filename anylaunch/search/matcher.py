"""
Matcher - Locate a query inside a candidate name and build highlight markup.

Both sides are normalized with normalize() before matching, so matching is
case-insensitive by construction. Offsets are character positions, which
lets the highlight span be re-applied to the original (un-normalized) name.
"""

import html
import re
from typing import NamedTuple, Optional


class Match(NamedTuple):
    """Position of a query inside a normalized name."""
    offset: int
    length: int


_TAG_RE = re.compile(r"</?b>")


def normalize(text: str) -> str:
    """
    Lowercase text one code point at a time.

    Code points whose lowercase form has a different length (e.g. "İ")
    are kept unchanged so the result always has the same length as the
    input and offsets stay valid against the original text.
    """
    chars = []
    for ch in text:
        lowered = ch.lower()
        chars.append(lowered if len(lowered) == 1 else ch)
    return "".join(chars)


def match(haystack: str, needle: str) -> Optional[Match]:
    """
    Find the first occurrence of needle in haystack.

    Args:
        haystack: Normalized candidate name
        needle: Normalized query

    Returns:
        Match(offset, length), or None if needle is empty or absent
    """
    if not needle:
        return None
    offset = haystack.find(needle)
    if offset < 0:
        return None
    return Match(offset, len(needle))


def escape_markup(text: str) -> str:
    """Escape text for Pango-style markup."""
    return html.escape(text, quote=False)


def bold_span(text: str, offset: int, length: int) -> str:
    """Return escaped text with text[offset:offset+length] wrapped in <b>."""
    end = offset + length
    return "{}<b>{}</b>{}".format(
        escape_markup(text[:offset]),
        escape_markup(text[offset:end]),
        escape_markup(text[end:]),
    )


def strip_markup(markup: str) -> str:
    """Remove bold tags and unescape entities."""
    return html.unescape(_TAG_RE.sub("", markup))
