from __future__ import annotations

"""
JavaScript Minification Engine.

Single-pass scanner that removes comments and non-essential whitespace from
JavaScript source without building a syntax tree. String and regular
expression literals are copied verbatim; every other space or line feed is
kept only when deleting it would merge two tokens.

The scanner walks a private copy of the input with a forward cursor. Rules
that rewrite a character (a comment becoming a line feed or a space, CR
becoming LF, control characters becoming spaces) overwrite the character
under the cursor, so the replacement is examined again by the next step.
Positions ahead of the cursor are never rewritten.
"""

import logging
from typing import List, Optional

from jscompiler.core.processing.charclass import (
    CR,
    LF,
    LF_ABSORBED_CHARS,
    SPACE,
    is_control,
    keeps_line_feed,
    keeps_space,
    opens_regex_after,
)
from jscompiler.domain.errors import UnterminatedComment, UnterminatedLiteral

logger = logging.getLogger(__name__)

_SLASH = "/"
_STAR = "*"
_BACKSLASH = "\\"
_QUOTES = ('"', "'")
_BLOCK_COMMENT_END = "*/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def minify(source: str) -> str:
    """
    Minify JavaScript source text.

    Args:
        source: Raw JavaScript code.

    Returns:
        str: The code without comments and without removable whitespace.

    Raises:
        UnterminatedComment: A block comment is still open at end-of-input.
        UnterminatedLiteral: A string or regex literal is still open at end-of-input.
    """
    if not source:
        return ""

    result = _Scanner(source).run()

    original_len = len(source)
    reduction = 100 - (len(result) * 100 / original_len)
    logger.debug(f"Minified JS: {original_len} -> {len(result)} chars ({reduction:.1f}% reduction)")

    return result


# -----------------------------------------------------------------------------
# SCANNER
# -----------------------------------------------------------------------------

class _Scanner:
    """Cursor over one input and the output produced so far."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._buf: List[str] = list(source)
        self._size = len(self._buf)
        self._pos = 0
        self._out: List[str] = []

    def run(self) -> str:
        while self._pos < self._size:
            self._step()
        return "".join(self._out)

    # --- Cursor helpers ---

    def _prev(self) -> Optional[str]:
        return self._out[-1] if self._out else None

    def _peek(self, offset: int = 1) -> Optional[str]:
        idx = self._pos + offset
        return self._buf[idx] if idx < self._size else None

    def _emit(self, ch: str) -> None:
        self._out.append(ch)
        self._pos += 1

    def _drop(self) -> None:
        self._pos += 1

    def _replace_head(self, ch: str) -> None:
        self._buf[self._pos] = ch

    # --- Dispatch ---

    def _step(self) -> None:
        ch = self._buf[self._pos]
        nxt = self._peek()
        prev = self._prev()

        if ch == _SLASH:
            if nxt == _SLASH:
                self._skip_line_comment()
            elif nxt == _STAR:
                self._skip_block_comment()
            elif opens_regex_after(prev):
                self._read_literal(_SLASH)
            else:
                self._emit(ch)
        elif ch in _QUOTES:
            self._read_literal(ch)
        elif ch == CR:
            self._replace_head(LF)
        elif is_control(ch):
            self._replace_head(SPACE)
        elif ch == SPACE:
            self._collapse_space(prev, nxt)
        elif ch == LF:
            self._collapse_line_feed(prev, nxt)
        else:
            self._emit(ch)

    # --- Comments ---

    def _skip_line_comment(self) -> None:
        """Replace '//...' up to and including its line feed with one LF."""
        end = self._source.find(LF, self._pos + 2)
        if end < 0:
            # Comment runs to end-of-input
            end = self._size - 1
        self._pos = end
        self._replace_head(LF)

    def _skip_block_comment(self) -> None:
        """Replace '/* ... */' with one space."""
        end = self._source.find(_BLOCK_COMMENT_END, self._pos + 2)
        if end < 0:
            raise UnterminatedComment(self._pos)
        self._pos = end + 1
        self._replace_head(SPACE)

    # --- Literals ---

    def _read_literal(self, delimiter: str) -> None:
        """
        Copy a literal opened at the cursor through its closing delimiter.

        A backslash and the character after it are copied as one unit.
        """
        start = self._pos
        buf = self._buf
        out = self._out
        out.append(delimiter)

        i = start + 1
        while i < self._size:
            ch = buf[i]
            if ch == _BACKSLASH and i + 1 < self._size:
                out.append(ch)
                out.append(buf[i + 1])
                i += 2
                continue
            out.append(ch)
            i += 1
            if ch == delimiter:
                self._pos = i
                return

        raise UnterminatedLiteral(delimiter, start)

    # --- Whitespace ---

    def _collapse_space(self, prev: Optional[str], nxt: Optional[str]) -> None:
        if prev is None or prev == SPACE:
            self._drop()
        elif nxt is None:
            self._emit(SPACE)
        elif keeps_space(prev, nxt):
            self._emit(SPACE)
        else:
            self._drop()

    def _collapse_line_feed(self, prev: Optional[str], nxt: Optional[str]) -> None:
        if prev == LF:
            self._drop()
        elif nxt in LF_ABSORBED_CHARS:
            # Swallow the following blank and re-examine the line feed
            self._drop()
            self._replace_head(LF)
        elif nxt is None:
            # Trailing line feed
            self._drop()
        elif prev is None:
            self._emit(LF)
        elif keeps_line_feed(prev, nxt):
            self._emit(LF)
        else:
            self._drop()
