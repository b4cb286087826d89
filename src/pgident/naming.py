from __future__ import annotations

from .ident import PgIdent
from .name import PgName


def quote_ident(name: str) -> str:
    return str(PgIdent.new(name))


def qualify(schema: str, table: str) -> str:
    return str(PgName.pair(schema, table))


def qualify_path(*parts: str) -> str:
    return str(PgName.new_ns(parts))


__all__ = ["quote_ident", "qualify", "qualify_path"]
