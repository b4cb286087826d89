from __future__ import annotations

from typing import Any

from psycopg import sql

from .ident import PgIdent
from .name import PgName


def as_sql(value: Any) -> sql.SQL:
    """
    Wrap an identifier or name as a trusted `psycopg.sql.SQL` fragment.

    Plain literals go through `PgName.from_value` first. The rendering is
    already quoted, so it must not be passed through `sql.Identifier` again.
    """
    if not isinstance(value, (PgIdent, PgName)):
        value = PgName.from_value(value)
    return sql.SQL(str(value))


def format_query(template: str, **names: Any) -> sql.Composed:
    return sql.SQL(template).format(
        **{key: as_sql(value) for key, value in names.items()}
    )


__all__ = ["as_sql", "format_query"]
