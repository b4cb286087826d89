from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean (got {raw!r})")


@dataclass(frozen=True, slots=True)
class Settings:
    split_dots: bool
    default_schema: str | None

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            split_dots=_parse_bool("PGIDENT_SPLIT_DOTS", False),
            default_schema=os.getenv("PGIDENT_DEFAULT_SCHEMA") or None,
        )


_SETTINGS: Settings | None = None


def get_settings(force_reload: bool = False) -> Settings:
    global _SETTINGS
    if force_reload or _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


__all__ = ["Settings", "get_settings"]
