"""Environment indirection for secrets stored in the config file."""

from __future__ import annotations

import os

ENV_PREFIX = "env:"


def is_env_reference(value: str) -> bool:
    return value.startswith(ENV_PREFIX)


def resolve_secret(value: str) -> str:
    """Return ``value`` or, for ``"env:NAME"``, the content of ``$NAME``.

    Lets users keep the API key out of ``config.json`` with
    ``dtdrafts --set-api-key env:DEVTO_API_KEY``. An unset or empty variable
    raises :class:`EnvironmentError`.
    """

    if not is_env_reference(value):
        return value

    var_name = value[len(ENV_PREFIX):].strip()
    resolved = os.getenv(var_name, "").strip()
    if not resolved:
        raise EnvironmentError(f"Environment variable '{var_name}' is not set or empty")
    return resolved


__all__ = ["ENV_PREFIX", "is_env_reference", "resolve_secret"]
