"""Configuration namespace for dtdrafts."""

from __future__ import annotations

from .base import BaseConfig, load_config, save_config
from .fetch import FetchConfig
from .paths import get_cache_file, get_config_dir, get_config_file
from .store import ApiKeyConfig
from .utils import resolve_secret

__all__ = [
    "ApiKeyConfig",
    "BaseConfig",
    "FetchConfig",
    "get_cache_file",
    "get_config_dir",
    "get_config_file",
    "load_config",
    "resolve_secret",
    "save_config",
]
