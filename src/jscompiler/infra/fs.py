from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory, path
normalization, and text I/O helpers for JavaScript sources. Undecodable bytes
survive a read/write round trip through the 'surrogateescape' error handler.
"""

import os
from typing import Optional, Union

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "JSCompiler"
UNIX_APP_DIR_NAME = ".jscompiler"
DEFAULT_CACHE_SUBDIR = "cache"
DEFAULT_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/JSCompiler
    - Linux/Mac: ~/.jscompiler

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_default_cache_dir() -> str:
    """Directory used by the file cache when none is configured."""
    return os.path.join(get_user_data_dir(), DEFAULT_CACHE_SUBDIR)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def decode_source(code: Union[str, bytes], encoding: str = DEFAULT_ENCODING) -> str:
    """Return ``code`` as text, decoding raw bytes with the given encoding."""
    if isinstance(code, bytes):
        return code.decode(encoding or DEFAULT_ENCODING, errors=SOURCE_ERRORS)
    return code


def encode_source(text: str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Inverse of :func:`decode_source`."""
    return text.encode(encoding or DEFAULT_ENCODING, errors=SOURCE_ERRORS)


def read_source(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a JavaScript file as text.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    with open(path, "rb") as f:
        return decode_source(f.read(), encoding)


def write_text(path: str, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write text to ``path``, creating parent directories as needed."""
    data = encode_source(text, encoding)
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
