from __future__ import annotations

from typing import Any


class PgIdentError(Exception):
    """Base class for pgident specific errors."""


class IdentError(PgIdentError, ValueError):
    """Base class for identifier construction errors."""


class NullByteError(IdentError):
    """Raised when an identifier contains a NUL byte and cannot be quoted."""

    def __init__(self, value: Any = None) -> None:
        super().__init__("Null byte in identifier")
        self.value = value


class ZeroLengthError(IdentError):
    """Raised when a namespaced name is built from zero components."""

    def __init__(self) -> None:
        super().__init__("Zero length identifier")


class ConfigurationError(PgIdentError):
    """Raised when runtime configuration is invalid."""


__all__ = [
    "ConfigurationError",
    "IdentError",
    "NullByteError",
    "PgIdentError",
    "ZeroLengthError",
]
