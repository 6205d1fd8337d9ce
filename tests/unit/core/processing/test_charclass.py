from __future__ import annotations

"""
Unit tests for the character classification tables used by the minifier.
"""

import pytest

from jscompiler.core.processing.charclass import (
    is_control,
    is_word_char,
    keeps_line_feed,
    keeps_space,
    opens_regex_after,
)


@pytest.mark.parametrize("prev", list("(,=:[!&|?{};\n"))
def test_regex_opens_after_punctuation(prev: str) -> None:
    assert opens_regex_after(prev) is True


@pytest.mark.parametrize("prev", [None, "a", "0", ")", "]", " ", "+", "n"])
def test_regex_does_not_open_elsewhere(prev: str) -> None:
    assert opens_regex_after(prev) is False


def test_word_characters() -> None:
    for ch in "azAZ09_$\\é中":
        assert is_word_char(ch), ch
    for ch in " +-(){}[];\"'/":
        assert not is_word_char(ch), ch


def test_control_characters() -> None:
    assert is_control("\t")
    assert is_control("\r")
    assert is_control("\x00")
    assert is_control("\x7f")
    assert not is_control("\n")
    assert not is_control(" ")
    assert not is_control("\x80")


def test_space_omission_decision() -> None:
    assert keeps_space("a", "b")
    assert keeps_space("$", "\\")
    assert not keeps_space("a", "(")
    assert not keeps_space(";", "b")


def test_line_feed_omission_decision() -> None:
    # Closing tokens followed by opening tokens keep the line feed
    for prev in "a9\\$_}])+-\"'é":
        assert keeps_line_feed(prev, "x"), prev
    for nxt in "a9\\$_{[(+-é":
        assert keeps_line_feed("x", nxt), nxt

    assert not keeps_line_feed(";", "x")
    assert not keeps_line_feed("{", "x")
    assert not keeps_line_feed("x", "}")
    assert not keeps_line_feed("x", "'")
