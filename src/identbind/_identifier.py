from __future__ import annotations

from typing import Generic, TypeVar


T = TypeVar("T")


class Identifier(Generic[T]):
    """Opaque registry key.

    `T` only exists for type checkers: `Identifier[Database]("db")` lets
    `Container.resolve` return a `Database`. Equality is object identity, so two
    identifiers sharing a name are still distinct keys.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
