from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from pathlib import Path

from jscompiler.domain.config import (
    CURRENT_CONFIG_VERSION,
    get_config_file,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)


def test_default_config_keys(user_data_dir: Path) -> None:
    cfg = get_default_config()

    assert cfg["file_cache"] is False
    assert cfg["dry_run"] is False
    assert cfg["no_result"] is False
    assert cfg["encoding"] == "utf-8"
    assert cfg["file_cache_dir"] == str(user_data_dir / "cache")


def test_load_fresh_state_returns_defaults(user_data_dir: Path) -> None:
    assert not Path(get_config_file()).exists()

    state = load_app_state()
    assert state == get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_load_corrupted_file_returns_defaults(user_data_dir: Path) -> None:
    (user_data_dir / "config.json").write_text("{ not json", encoding="utf-8")
    assert load_app_state() == get_default_app_state()


def test_load_non_object_file_returns_defaults(user_data_dir: Path) -> None:
    (user_data_dir / "config.json").write_text("[1, 2, 3]", encoding="utf-8")
    assert load_app_state() == get_default_app_state()


def test_save_and_load_round_trip(user_data_dir: Path) -> None:
    cfg = get_default_config()
    cfg["file_cache"] = True
    cfg["log_level"] = "DEBUG"

    save_config(cfg)

    on_disk = json.loads((user_data_dir / "config.json").read_text(encoding="utf-8"))
    assert on_disk["version"] == CURRENT_CONFIG_VERSION
    assert on_disk["compiler"]["file_cache"] is True

    loaded = load_config()
    assert loaded["file_cache"] is True
    assert loaded["log_level"] == "DEBUG"


def test_partial_file_is_merged_over_defaults(user_data_dir: Path) -> None:
    (user_data_dir / "config.json").write_text(
        json.dumps({"version": "0.9", "compiler": {"dry_run": True}}),
        encoding="utf-8",
    )

    loaded = load_config()
    assert loaded["dry_run"] is True
    assert loaded["encoding"] == "utf-8"
    assert load_app_state()["version"] == CURRENT_CONFIG_VERSION
