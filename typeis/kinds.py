"""Native kinds: the closed set of tags every value is classified under.

Python has a single null (`None`) and no absent-marker, symbol, or arguments
object, so those are provided here as small concrete types. Everything the
predicates need to know about a raw value goes through `native_kind`,
`object_tag` and `constructor_name`.
"""

from __future__ import annotations

from collections.abc import ItemsView, KeysView, Mapping, Set as AbstractSet
from dataclasses import dataclass
import inspect
import re


MAX_SAFE_INTEGER: int = 2**53 - 1


# ============================================================
# Diagnostics
# ============================================================


class TypeisError(Exception):
    """Misuse of a typeis helper."""

    def __init__(self, msg: str, name: str | None = None):
        if name is None:
            super().__init__(msg)
        else:
            super().__init__(f"{msg} (got {name})")
        self.msg = msg
        self.name = name


# ============================================================
# Markers
# ============================================================


class Undefined:
    """The absent-marker. There is exactly one instance, `UNDEFINED`."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> Undefined:
        return self


UNDEFINED = Undefined()


class Symbol:
    """A unique identity token. Two symbols are never equal, even with
    the same description."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description})"


class Arguments(tuple):
    """Positional arguments captured from a call; array-like, not an array."""

    __to_string_tag__ = "Arguments"


def capture_arguments(*args: object) -> Arguments:
    """Capture the positional arguments of a call as an `Arguments` value."""
    return Arguments(args)


# ============================================================
# Kinds
# ============================================================


@dataclass(frozen=True)
class Kind:
    name: str

    def __str__(self) -> str:
        return self.name


KIND_NUMBER = Kind("number")
KIND_STRING = Kind("string")
KIND_BOOLEAN = Kind("boolean")
KIND_FUNCTION = Kind("function")
KIND_OBJECT = Kind("object")
KIND_BIGINT = Kind("bigint")
KIND_SYMBOL = Kind("symbol")
KIND_UNDEFINED = Kind("undefined")
# dispatcher-only tags; native_kind never returns these
KIND_NULL = Kind("null")
KIND_ARRAY = Kind("array")

NATIVE_KINDS: dict[str, Kind] = {
    k.name: k
    for k in (
        KIND_NUMBER,
        KIND_STRING,
        KIND_BOOLEAN,
        KIND_FUNCTION,
        KIND_OBJECT,
        KIND_BIGINT,
        KIND_SYMBOL,
        KIND_UNDEFINED,
    )
}


def native_kind(value: object) -> Kind:
    """Return the coarse native kind of a value.

    `None` reports as object, matching the native quirk the predicates
    correct for. Integers too large to round-trip through a double are
    bigints.
    """
    if value is UNDEFINED:
        return KIND_UNDEFINED
    if value is None:
        return KIND_OBJECT
    if isinstance(value, bool):
        return KIND_BOOLEAN
    if isinstance(value, float):
        return KIND_NUMBER
    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return KIND_NUMBER
        return KIND_BIGINT
    if isinstance(value, str):
        return KIND_STRING
    if isinstance(value, Symbol):
        return KIND_SYMBOL
    if callable(value):
        return KIND_FUNCTION
    return KIND_OBJECT


# ============================================================
# Names and tags
# ============================================================


def _function_family(value: object) -> str:
    if inspect.isasyncgenfunction(value):
        return "AsyncGeneratorFunction"
    if inspect.iscoroutinefunction(value):
        return "AsyncFunction"
    if inspect.isgeneratorfunction(value):
        return "GeneratorFunction"
    return "Function"


def constructor_name(value: object) -> str | None:
    """Name of whatever constructed the value, or None for None/UNDEFINED."""
    if value is None or value is UNDEFINED:
        return None
    if native_kind(value) is KIND_FUNCTION:
        return _function_family(value)
    return type(value).__name__


_KIND_TAGS: dict[Kind, str] = {
    KIND_BOOLEAN: "Boolean",
    KIND_NUMBER: "Number",
    KIND_BIGINT: "BigInt",
    KIND_STRING: "String",
    KIND_SYMBOL: "Symbol",
}


def object_tag(value: object) -> str:
    """Return the bare tag name `to_string` brackets, e.g. "Array"."""
    if value is None:
        return "Null"
    if value is UNDEFINED:
        return "Undefined"
    tag = getattr(type(value), "__to_string_tag__", None)
    if isinstance(tag, str):
        return tag
    if isinstance(value, list):
        return "Array"
    kind = native_kind(value)
    if kind in _KIND_TAGS:
        return _KIND_TAGS[kind]
    if kind is KIND_FUNCTION:
        return _function_family(value)
    if isinstance(value, BaseException):
        return "Error"
    if isinstance(value, re.Pattern):
        return "RegExp"
    if isinstance(value, Mapping):
        return "Map"
    if isinstance(value, AbstractSet) and not isinstance(value, (KeysView, ItemsView)):
        return "Set"
    if inspect.isawaitable(value):
        return "Promise"
    return type(value).__name__


def to_string(value: object) -> str:
    """Universal stringification: "[object <tag>]"."""
    return "[object " + object_tag(value) + "]"
