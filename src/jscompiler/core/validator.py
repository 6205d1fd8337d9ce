from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (persisted JSON, CLI overrides) into a
strictly typed dictionary, filling gaps with domain defaults.
"""

import codecs
import logging
from typing import Any, Dict, List, Tuple

from jscompiler.domain.config import get_default_config
from jscompiler.infra.fs import DEFAULT_ENCODING, normalize_path
from jscompiler.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["file_cache_dir", "encoding", "log_level", "log_file"]
_BOOL_FIELDS = ["file_cache", "dry_run", "no_result"]

# Fields allowed to stay empty
_OPTIONAL_STRING_FIELDS = {"log_file"}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        fallback = "" if field in _OPTIONAL_STRING_FIELDS else defaults.get(field, "")
        merged[field] = _as_str(merged.get(field), fallback, field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults.get(field, False), field, warnings, strict)

    merged["file_cache_dir"] = normalize_path(merged["file_cache_dir"], defaults["file_cache_dir"])
    merged["encoding"] = _normalize_encoding(merged["encoding"], warnings, strict)
    merged["log_level"] = _normalize_level(merged["log_level"], warnings, strict)

    if merged["no_result"] and not merged["file_cache"]:
        warnings.append("'no_result' has no effect without 'file_cache'.")

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_encoding(encoding: str, warnings: List[str], strict: bool) -> str:
    """Reject encodings unknown to the codec registry."""
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        msg = f"Unknown encoding '{encoding}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_ENCODING}'.")
        return DEFAULT_ENCODING


def _normalize_level(level: str, warnings: List[str], strict: bool) -> str:
    name = level.strip().upper()
    if name in _LEVEL_MAP:
        return name
    msg = f"Unknown log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using 'INFO'.")
    return "INFO"
