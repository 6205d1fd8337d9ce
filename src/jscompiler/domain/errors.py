from __future__ import annotations

"""
Domain Error Taxonomy.

Minification is all-or-nothing: the scanner raises one of the
``MinifyError`` subclasses as soon as a comment or literal is found open at
end-of-input. Cache failures are reported separately through ``CacheError``.
"""

from typing import Final

UNTERMINATED_COMMENT: Final[str] = "unterminated_comment"
UNTERMINATED_LITERAL: Final[str] = "unterminated_literal"
CACHE_FAILURE: Final[str] = "cache_error"
INVALID_ENCODING: Final[str] = "invalid_encoding"


class MinifyError(ValueError):
    """
    Base class for malformed input detected while minifying.

    Attributes:
        kind: Stable identifier of the error family.
        position: Offset in the input where the unterminated span opened.
    """

    kind: str = "minify_error"

    def __init__(self, message: str, position: int = -1) -> None:
        super().__init__(message)
        self.position = position


class UnterminatedComment(MinifyError):
    """A '/*' comment has no matching '*/'."""

    kind = UNTERMINATED_COMMENT

    def __init__(self, position: int = -1) -> None:
        super().__init__(f"Unterminated comment starting at offset {position}", position)


class UnterminatedLiteral(MinifyError):
    """A string or regular expression literal has no closing delimiter."""

    kind = UNTERMINATED_LITERAL

    def __init__(self, delimiter: str, position: int = -1) -> None:
        super().__init__(
            f"Unterminated literal ({delimiter}) starting at offset {position}", position
        )
        self.delimiter = delimiter


class CacheError(RuntimeError):
    """The file cache cannot be used (no directory, unwritable storage)."""

    kind = CACHE_FAILURE
