from __future__ import annotations

"""
Character Classification Tables.

Static lookup tables and predicates used by the minifier to classify the
characters around a piece of whitespace or a slash. Every codepoint at or
above 128 belongs to one opaque "non-ASCII" class that is treated like an
identifier character.
"""

import string
from typing import Final, FrozenSet, Optional

# -----------------------------------------------------------------------------
# CLASS TABLES
# -----------------------------------------------------------------------------

NON_ASCII_START: Final[int] = 128
DEL: Final[str] = "\x7f"
LF: Final[str] = "\n"
CR: Final[str] = "\r"
TAB: Final[str] = "\t"
SPACE: Final[str] = " "

# Punctuation after which a '/' can only open a regular expression literal
REGEX_PREV_CHARS: Final[FrozenSet[str]] = frozenset("(,=:[!&|?{};\n")

_ALNUM: Final[FrozenSet[str]] = frozenset(string.ascii_letters + string.digits)

WORD_CHARS: Final[FrozenSet[str]] = _ALNUM | frozenset("_$\\")

LF_PREV_CHARS: Final[FrozenSet[str]] = WORD_CHARS | frozenset("}])+-\"'")
LF_NEXT_CHARS: Final[FrozenSet[str]] = WORD_CHARS | frozenset("{[(+-")

# Whitespace swallowed when it directly follows a line feed
LF_ABSORBED_CHARS: Final[FrozenSet[str]] = frozenset((SPACE, TAB, CR))

# -----------------------------------------------------------------------------
# PREDICATES
# -----------------------------------------------------------------------------

def is_non_ascii(ch: str) -> bool:
    return ord(ch) >= NON_ASCII_START


def is_control(ch: str) -> bool:
    """Control characters other than LF, including TAB, CR and DEL."""
    return ch == DEL or (ch < SPACE and ch != LF)


def is_word_char(ch: str) -> bool:
    """True for characters that would fuse into one token with a neighbour."""
    return ch in WORD_CHARS or is_non_ascii(ch)


def opens_regex_after(prev: Optional[str]) -> bool:
    """
    Decide whether a '/' following ``prev`` starts a regular expression.

    Only punctuation is inspected: a slash after a keyword such as ``return``
    is read as division.
    """
    return prev is not None and prev in REGEX_PREV_CHARS


def keeps_space(prev: str, nxt: str) -> bool:
    """A single space survives only between two word characters."""
    return is_word_char(prev) and is_word_char(nxt)


def keeps_line_feed(prev: str, nxt: str) -> bool:
    """
    A line feed survives when dropping it could join two statements.

    Args:
        prev: Last character already emitted.
        nxt: Character that follows the line feed in the input.

    Returns:
        bool: True if the line feed must be emitted.
    """
    prev_ok = prev in LF_PREV_CHARS or is_non_ascii(prev)
    return prev_ok and (nxt in LF_NEXT_CHARS or is_non_ascii(nxt))
