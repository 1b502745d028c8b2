"""Locations of the files dtdrafts keeps in the user's home directory."""

from __future__ import annotations

import os
from pathlib import Path

HOME_ENV_VAR = "DTDRAFTS_HOME"
CONFIG_FILENAME = "config.json"
CACHE_FILENAME = "articles_cache.json"


def get_config_dir() -> Path:
    """Return ``$DTDRAFTS_HOME`` if set, otherwise ``~/.dtdrafts``."""

    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".dtdrafts"


def get_config_file() -> Path:
    return get_config_dir() / CONFIG_FILENAME


def get_cache_file() -> Path:
    return get_config_dir() / CACHE_FILENAME


__all__ = [
    "HOME_ENV_VAR",
    "get_cache_file",
    "get_config_dir",
    "get_config_file",
]
