"""Facade: the canonical-name dispatcher and the alias table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Iterator

from . import predicates
from .kinds import KIND_ARRAY, KIND_NULL, TypeisError, native_kind, to_string


def classify(value: object) -> str:
    """Return one of "null", "array", or the value's native kind name."""
    if predicates.is_null(value):
        return KIND_NULL.name
    if predicates.is_array(value):
        return KIND_ARRAY.name
    return native_kind(value).name


class AliasTable(Mapping):
    """Read-only mapping from short names to predicates.

    Entries are reachable both as items (`table["num"]`) and as attributes
    (`table.num`). The table refuses every kind of mutation.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Callable[[object], object]]) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries)))

    def __getitem__(self, key: str) -> Callable[[object], object]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> Callable[[object], object]:
        if name == "_entries":
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: object) -> None:
        raise TypeisError("alias table is read-only", name)

    def __delattr__(self, name: str) -> None:
        raise TypeisError("alias table is read-only", name)

    def __repr__(self) -> str:
        return "AliasTable(" + ", ".join(self._entries) + ")"


aliases = AliasTable(
    {
        "arr": predicates.is_array,
        "array": predicates.is_array,
        "arrayLike": predicates.is_array_like,
        "bigint": predicates.is_bigint,
        "boolean": predicates.is_boolean,
        "defined": predicates.is_defined,
        "empty": predicates.is_empty,
        "func": predicates.is_function,
        "iterable": predicates.is_iterable,
        "null": predicates.is_null,
        "num": predicates.is_number,
        "obj": predicates.is_object,
        "str": predicates.is_string,
        "symbol": predicates.is_symbol,
        "undefined": predicates.is_undefined,
        "toString": to_string,
    }
)
