from __future__ import annotations

"""
Unit tests for the CLI controller: configuration merging and in-process runs.
"""

import json
from pathlib import Path
from typing import Generator

import pytest

from jscompiler.infra.logging import shutdown_logging
from jscompiler.interface.cli.app import EXIT_MISSING_INPUT, EXIT_OK, _merge_config, main


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    yield
    shutdown_logging()


def test_merge_config_skips_none_and_unknown_keys() -> None:
    base = {"file_cache": False, "encoding": "utf-8"}
    merged = _merge_config(base, {"file_cache": True, "encoding": None, "output_path": "x"})

    assert merged == {"file_cache": True, "encoding": "utf-8"}
    assert base["file_cache"] is False


def test_dump_config_reflects_overrides(
        user_data_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(["--dump-config", "--file-cache", "--cache-dir", str(tmp_path / "c")])

    assert rc == EXIT_OK
    cfg = json.loads(capsys.readouterr().out)
    assert cfg["file_cache"] is True
    assert cfg["file_cache_dir"] == str(tmp_path / "c")


def test_save_config_persists_choices(user_data_dir: Path) -> None:
    assert main(["--dump-config", "--dry-run", "--save-config"]) == EXIT_OK

    state = json.loads((user_data_dir / "config.json").read_text(encoding="utf-8"))
    assert state["compiler"]["dry_run"] is True


def test_missing_input_exit_code(user_data_dir: Path, tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.js")]) == EXIT_MISSING_INPUT


def test_compile_to_output_file(user_data_dir: Path, tmp_path: Path) -> None:
    src = tmp_path / "in.js"
    src.write_text("var a = [ 1 , 2 ] ;", encoding="utf-8")
    out = tmp_path / "out.js"

    assert main([str(src), "-o", str(out)]) == EXIT_OK
    assert out.read_text(encoding="utf-8") == "var a=[1,2];"
