from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of compiler preferences as JSON in the user data
directory. Unknown or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from jscompiler.infra.fs import DEFAULT_ENCODING, get_default_cache_dir, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default compile configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Cache
        "file_cache": False,
        "file_cache_dir": get_default_cache_dir(),

        # Orchestration
        "dry_run": False,
        "no_result": False,
        "encoding": DEFAULT_ENCODING,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full structure stored in config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "compiler": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state merged over defaults, or defaults on failure.
    """
    state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    compiler = data.get("compiler")
    if isinstance(compiler, dict):
        state["compiler"].update(compiler)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the persisted compiler configuration merged over defaults."""
    defaults = get_default_config()
    defaults.update(load_app_state().get("compiler", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided compiler configuration."""
    state = load_app_state()
    state["compiler"] = config
    save_app_state(state)
