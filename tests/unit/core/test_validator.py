from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies:
1. Defaults are applied for missing or invalid fields.
2. Lenient boolean coercion and strict-mode failures.
3. Domain normalization of encodings, log levels and paths.
"""

import os

import pytest

from jscompiler.core.validator import validate_config


def test_empty_config_yields_defaults() -> None:
    cfg, warnings = validate_config({})

    assert warnings == []
    assert cfg["file_cache"] is False
    assert cfg["dry_run"] is False
    assert cfg["no_result"] is False
    assert cfg["encoding"] == "utf-8"
    assert cfg["log_level"] == "INFO"
    assert cfg["log_file"] == ""
    assert os.path.isabs(cfg["file_cache_dir"])


def test_non_dict_config() -> None:
    cfg, warnings = validate_config(["not", "a", "dict"])
    assert cfg["file_cache"] is False
    assert any("expected dict" in w for w in warnings)

    with pytest.raises(TypeError):
        validate_config("bad", strict=True)


@pytest.mark.parametrize(
    "raw, expected",
    [("yes", True), ("ON", True), ("0", False), (1, True), ("off", False)],
)
def test_bool_coercion(raw, expected: bool) -> None:
    cfg, warnings = validate_config({"file_cache": raw})
    assert cfg["file_cache"] is expected
    assert warnings


def test_invalid_bool_falls_back() -> None:
    cfg, warnings = validate_config({"dry_run": "maybe"})
    assert cfg["dry_run"] is False
    assert any("dry_run" in w for w in warnings)


def test_strict_mode_rejects_bad_types() -> None:
    with pytest.raises(TypeError):
        validate_config({"dry_run": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"encoding": 8}, strict=True)


def test_encoding_is_canonicalized() -> None:
    cfg, warnings = validate_config({"encoding": "UTF8"})
    assert cfg["encoding"] == "utf-8"
    assert warnings == []

    cfg, warnings = validate_config({"encoding": "latin-1"})
    assert cfg["encoding"] == "iso8859-1"


def test_unknown_encoding() -> None:
    cfg, warnings = validate_config({"encoding": "klingon-8"})
    assert cfg["encoding"] == "utf-8"
    assert any("Unknown encoding" in w for w in warnings)

    with pytest.raises(ValueError):
        validate_config({"encoding": "klingon-8"}, strict=True)


def test_log_level_normalization() -> None:
    cfg, _ = validate_config({"log_level": " debug "})
    assert cfg["log_level"] == "DEBUG"

    cfg, warnings = validate_config({"log_level": "LOUD"})
    assert cfg["log_level"] == "INFO"
    assert warnings


def test_cache_dir_is_made_absolute(tmp_path) -> None:
    cfg, _ = validate_config({"file_cache_dir": str(tmp_path / "a" / ".." / "b")})
    assert cfg["file_cache_dir"] == str(tmp_path / "b")


def test_no_result_without_cache_warns() -> None:
    cfg, warnings = validate_config({"no_result": True})
    assert cfg["no_result"] is True
    assert any("no_result" in w for w in warnings)

    _, warnings = validate_config({"no_result": True, "file_cache": True})
    assert warnings == []
