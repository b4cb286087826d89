from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    IdentError,
    NullByteError,
    PgIdentError,
    ZeroLengthError,
)
from .ident import Id, PgIdent, Quoted
from .name import Namespaced, Pair, PgName, Single
from .naming import qualify, qualify_path, quote_ident

__all__ = [
    "ConfigurationError",
    "Id",
    "IdentError",
    "Namespaced",
    "NullByteError",
    "Pair",
    "PgIdent",
    "PgIdentError",
    "PgName",
    "Quoted",
    "Single",
    "ZeroLengthError",
    "qualify",
    "qualify_path",
    "quote_ident",
]
