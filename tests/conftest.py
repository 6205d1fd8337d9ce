from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory so tests never touch the real one.
3. Shared JavaScript samples.
"""

import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def user_data_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Redirect the application data directory to a temporary folder.

    Yields:
        Path: The temporary user data directory.
    """
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    with patch("jscompiler.infra.fs.get_user_data_dir", return_value=str(data_dir)), \
            patch("jscompiler.domain.config.get_user_data_dir", return_value=str(data_dir)):
        yield data_dir


@pytest.fixture
def sample_js() -> str:
    """A small script mixing comments, strings, regexes and indentation."""
    return (
        "/* Header\n"
        " * comment */\n"
        "function add(a, b) {\n"
        "    // sum\n"
        "    return a + b;\n"
        "}\n"
        "var re = /a b/g;\n"
        "var s = 'x  y';\n"
    )


@pytest.fixture
def sample_js_minified() -> str:
    """Expected minification of ``sample_js`` (a line feed with no output before it is kept)."""
    return "\nfunction add(a,b){return a+b;}\nvar re=/a b/g;var s='x  y';"
