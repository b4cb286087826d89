from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import NullByteError
from .utils import QUOTE, escape_quotes, is_ident_compatible

T = TypeVar("T", bound=str)


class PgIdent(Generic[T]):
    """
    A single validated PostgreSQL identifier.

    The only variants are `Id`, which keeps the caller's value untouched, and
    `Quoted`, which holds the escaped text. Use `PgIdent.new` to build one.
    """

    __slots__ = ()

    @staticmethod
    def new(raw: T) -> Id[T] | Quoted[T]:
        if is_ident_compatible(raw):
            return Id(raw)
        if "\x00" in raw:
            raise NullByteError(raw)
        return Quoted(escape_quotes(raw))

    @property
    def is_quoted(self) -> bool:
        return isinstance(self, Quoted)


@dataclass(frozen=True, slots=True)
class Id(PgIdent[T]):
    value: T

    def __str__(self) -> str:
        # the text itself, not a subclass __str__ (e.g. "Table.ORDERS")
        return str.__str__(self.value)


@dataclass(frozen=True, slots=True)
class Quoted(PgIdent[T]):
    # already escaped; rendering only adds the delimiters
    escaped: str

    def __str__(self) -> str:
        return f"{QUOTE}{self.escaped}{QUOTE}"


__all__ = ["Id", "PgIdent", "Quoted"]
