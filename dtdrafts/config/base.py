"""Base model and JSON (de)serialisation helpers for configuration files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

ConfigT = TypeVar("ConfigT", bound="BaseConfig")


class BaseConfig(BaseModel):
    """Common settings shared by every configuration model."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


def load_config(config_cls: type[ConfigT], path: Path) -> ConfigT:
    """Load ``path`` as JSON and validate it against ``config_cls``.

    Raises :class:`FileNotFoundError` when the file is absent,
    :class:`ValueError` when it is not valid JSON and
    :class:`pydantic.ValidationError` when the payload does not match the model.
    """

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return config_cls.model_validate(payload)


def save_config(config: BaseConfig, path: Path) -> Path:
    """Write ``config`` to ``path`` as pretty-printed JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


__all__ = ["BaseConfig", "load_config", "save_config"]
