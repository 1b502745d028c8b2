"""Persistence of the dev.to API key in ``~/.dtdrafts/config.json``."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from pydantic import Field, ValidationError, field_validator

from .base import BaseConfig, load_config, save_config
from .paths import get_config_file
from .utils import resolve_secret


class ApiKeyConfig(BaseConfig):
    """Contents of the config file: just the API key."""

    api_key: str = Field(..., description="dev.to API key, or env:VAR_NAME to read it from the environment")

    @field_validator("api_key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("api_key must not be empty")
        return value

    def resolved_api_key(self) -> str:
        return resolve_secret(self.api_key)


def load(path: Path | None = None) -> ApiKeyConfig | None:
    """Read the stored config, or ``None`` if it is missing or unusable."""

    config_path = path or get_config_file()
    try:
        return load_config(ApiKeyConfig, config_path)
    except FileNotFoundError:
        logger.debug("No config file at {}", config_path)
        return None
    except (ValueError, ValidationError, OSError) as exc:
        logger.warning("Ignoring unreadable config file {}: {}", config_path, exc)
        return None


def save(api_key: str, path: Path | None = None) -> ApiKeyConfig:
    """Overwrite the config file with ``api_key``, creating its directory."""

    config = ApiKeyConfig(api_key=api_key)
    config_path = save_config(config, path or get_config_file())
    logger.info("API key saved to {}", config_path)
    return config


__all__ = ["ApiKeyConfig", "load", "save"]
