"""Suite configuration read from ``config.properties`` with env var overrides."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import dotenv_values

from .errors import ConfigError

DEFAULT_CONFIG_FILE = Path(__file__).resolve().parent.parent / "resources" / "config.properties"

ENV_PREFIX = "DEMOQA_"

_TRUTHY = {"true", "1", "yes", "on"}


def get_config_path() -> Path:
    """Return the properties file in use (``DEMOQA_CONFIG`` wins over the bundled one)."""
    return Path(os.environ.get("DEMOQA_CONFIG", str(DEFAULT_CONFIG_FILE)))


def load_properties(path: str | Path) -> dict[str, str]:
    """Parse a ``key=value`` properties file into a plain dict."""
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"{path.name} not found at {path}")
    try:
        values = dotenv_values(path, interpolate=False)
    except OSError as exc:
        raise ConfigError(f"Failed to load {path}") from exc
    return {key: (value or "").strip() for key, value in values.items()}


@lru_cache(maxsize=None)
def _properties(path: str) -> dict[str, str]:
    return load_properties(path)


def reload() -> None:
    """Drop cached file contents so the next read hits the disk again."""
    _properties.cache_clear()


def env_name(key: str) -> str:
    """``base.url`` -> ``DEMOQA_BASE_URL``."""
    return ENV_PREFIX + key.upper().replace(".", "_").replace("-", "_")


def get(key: str, default: str | None = None) -> str | None:
    """Look up *key* in the environment, then the properties file, then *default*."""
    override = os.environ.get(env_name(key))
    if override is not None:
        return override
    value = _properties(str(get_config_path())).get(key)
    if value is None or value == "":
        return default
    return value


def get_bool(key: str, default: bool = False) -> bool:
    value = get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def get_int(key: str, default: int = 0) -> int:
    value = get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Config key {key!r} is not an integer: {value!r}") from exc


def get_base_url() -> str:
    return get("base.url", "https://demoqa.com/")


def get_default_wait_ms() -> int:
    """Element wait budget in milliseconds (``default.wait.seconds``)."""
    return get_int("default.wait.seconds", 10) * 1000
