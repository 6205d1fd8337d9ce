from __future__ import annotations

"""
Unit tests for compile options and result factories.
"""

import dataclasses

import pytest

from jscompiler.domain.compile_models import (
    CompileOptions,
    create_error_result,
    create_success_result,
)


def test_options_defaults() -> None:
    opts = CompileOptions()
    assert opts.dry_run is False
    assert opts.no_result is False
    assert opts.file_cache is False
    assert opts.file_cache_dir is None
    assert opts.encoding == "utf-8"


def test_options_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        CompileOptions().dry_run = True  # type: ignore[misc]


def test_options_from_config() -> None:
    opts = CompileOptions.from_config({
        "dry_run": True,
        "file_cache": True,
        "file_cache_dir": "/tmp/jsc",
        "encoding": "",
        "log_level": "DEBUG",
    })
    assert opts.dry_run is True
    assert opts.file_cache is True
    assert opts.file_cache_dir == "/tmp/jsc"
    assert opts.encoding == "utf-8"


def test_with_overrides_ignores_none() -> None:
    base = CompileOptions(file_cache=True)

    assert base.with_overrides() is base
    assert base.with_overrides(dry_run=None) is base

    changed = base.with_overrides(dry_run=True)
    assert changed.dry_run is True
    assert changed.file_cache is True
    assert base.dry_run is False


def test_success_result() -> None:
    res = create_success_result("ABC", CompileOptions(dry_run=True), "a=1;", 7, cache_path="/c/ABC.jsc.js")

    assert res.ok is True
    assert res.error == ""
    assert res.error_kind == ""
    assert res.content == "a=1;"
    assert res.minified_size == 4
    assert res.original_size == 7
    assert res.dry_run is True
    assert res.cache_hit is False


def test_success_result_without_payload() -> None:
    res = create_success_result("ABC", CompileOptions(), None, 7, cache_hit=True)
    assert res.content is None
    assert res.minified_size == 0


def test_error_result() -> None:
    res = create_error_result("boom", "unterminated_comment", "ABC", CompileOptions(), 12)

    assert res.ok is False
    assert res.error == "boom"
    assert res.error_kind == "unterminated_comment"
    assert res.content is None
    assert res.original_size == 12
