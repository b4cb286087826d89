from __future__ import annotations

import abc
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .exceptions import ZeroLengthError
from .ident import PgIdent

T = TypeVar("T", bound=str)


class PgName(abc.ABC, Generic[T]):
    """
    A dotted reference made of one or more identifiers.

    Built through `new` (one part), `pair` (namespace and name) or `new_ns`
    (any number of parts). The shape always follows the part count: one part
    is a `Single`, two a `Pair`, three or more `Namespaced`.
    """

    __slots__ = ()

    @staticmethod
    def new(raw: T) -> Single[T]:
        return Single(PgIdent.new(raw))

    @staticmethod
    def pair(namespace: T, name: T) -> Pair[T]:
        return Pair(PgIdent.new(namespace), PgIdent.new(name))

    @staticmethod
    def new_ns(parts: Iterable[T]) -> PgName[T]:
        """
        Build a name from an ordered collection of raw parts.

        Dots inside a part are quoted like any other character, they never
        introduce extra components. Raises ZeroLengthError when `parts` is
        empty and NullByteError on the first part that cannot be quoted.
        """
        raw_parts = tuple(parts)
        if not raw_parts:
            raise ZeroLengthError()
        idents = tuple(PgIdent.new(raw) for raw in raw_parts)
        if len(idents) == 1:
            return Single(idents[0])
        if len(idents) == 2:
            return Pair(idents[0], idents[1])
        return Namespaced(idents)

    @staticmethod
    def from_value(value: Any) -> PgName[Any]:
        if isinstance(value, str):
            return PgName.new(value)
        if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
            parts = tuple(value)
            if all(isinstance(part, str) for part in parts):
                if isinstance(value, tuple) and len(parts) == 2:
                    return PgName.pair(parts[0], parts[1])
                return PgName.new_ns(parts)
        raise TypeError(
            f"Cannot build a name from {type(value).__name__}; "
            "expected a string, a pair of strings or an iterable of strings"
        )

    @property
    @abc.abstractmethod
    def parts(self) -> tuple[PgIdent[T], ...]: ...

    @property
    def leaf(self) -> PgIdent[T]:
        return self.parts[-1]

    @abc.abstractmethod
    def with_leaf(self, raw: T) -> PgName[T]: ...

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)


@dataclass(frozen=True, slots=True)
class Single(PgName[T]):
    ident: PgIdent[T]

    @property
    def parts(self) -> tuple[PgIdent[T], ...]:
        return (self.ident,)

    def with_leaf(self, raw: T) -> Single[T]:
        return Single(PgIdent.new(raw))


@dataclass(frozen=True, slots=True)
class Pair(PgName[T]):
    namespace: PgIdent[T]
    ident: PgIdent[T]

    @property
    def parts(self) -> tuple[PgIdent[T], ...]:
        return (self.namespace, self.ident)

    def with_leaf(self, raw: T) -> Pair[T]:
        return Pair(self.namespace, PgIdent.new(raw))


@dataclass(frozen=True, slots=True)
class Namespaced(PgName[T]):
    idents: tuple[PgIdent[T], ...]

    def __post_init__(self) -> None:
        idents = tuple(self.idents)
        if len(idents) < 3:
            raise ValueError(
                f"Namespaced names need at least 3 parts (got {len(idents)})"
            )
        object.__setattr__(self, "idents", idents)

    @property
    def parts(self) -> tuple[PgIdent[T], ...]:
        return self.idents

    def with_leaf(self, raw: T) -> Namespaced[T]:
        leaf = PgIdent.new(raw)
        return Namespaced((*self.idents[:-1], leaf))


__all__ = ["Namespaced", "Pair", "PgName", "Single"]
