"""Tests for the dispatcher and the alias table."""

from collections.abc import Mapping
import math

import pytest

import typeis
from typeis import UNDEFINED, AliasTable, Symbol, TypeisError, aliases, classify


def test_classify_examples() -> None:
    assert classify(None) == "null"
    assert classify([1, 2]) == "array"
    assert classify(42) == "number"
    assert classify("x") == "string"
    assert classify(UNDEFINED) == "undefined"
    assert classify(lambda: 0) == "function"
    assert classify(True) == "boolean"
    assert classify(2**60) == "bigint"
    assert classify(Symbol()) == "symbol"
    assert classify({}) == "object"
    assert classify(math.nan) == "number"


def test_classify_is_total() -> None:
    tags = {
        "null",
        "array",
        "number",
        "string",
        "boolean",
        "function",
        "object",
        "bigint",
        "symbol",
        "undefined",
    }
    for value in (None, UNDEFINED, 0, "", [], (), {}, object(), len, Symbol(), 2**64):
        assert classify(value) in tags


ALIAS_TARGETS = {
    "arr": typeis.is_array,
    "array": typeis.is_array,
    "arrayLike": typeis.is_array_like,
    "bigint": typeis.is_bigint,
    "boolean": typeis.is_boolean,
    "defined": typeis.is_defined,
    "empty": typeis.is_empty,
    "func": typeis.is_function,
    "iterable": typeis.is_iterable,
    "null": typeis.is_null,
    "num": typeis.is_number,
    "obj": typeis.is_object,
    "str": typeis.is_string,
    "symbol": typeis.is_symbol,
    "undefined": typeis.is_undefined,
}

SAMPLES: list[object] = [
    None,
    UNDEFINED,
    False,
    5,
    -0.0,
    math.nan,
    2**60,
    "s",
    Symbol(),
    [1],
    {"k": 1},
    len,
    object(),
]


def test_alias_keys() -> None:
    assert set(aliases) == set(ALIAS_TARGETS) | {"toString"}
    assert len(aliases) == len(ALIAS_TARGETS) + 1


@pytest.mark.parametrize("key", sorted(ALIAS_TARGETS))
def test_alias_matches_predicate(key: str) -> None:
    predicate = ALIAS_TARGETS[key]
    for value in SAMPLES:
        assert getattr(aliases, key)(value) == predicate(value)
        assert aliases[key](value) == predicate(value)


def test_alias_to_string() -> None:
    assert aliases.toString([]) == "[object Array]"
    assert aliases["toString"](None) == "[object Null]"


def test_aliases_are_read_only() -> None:
    with pytest.raises(TypeisError, match="read-only"):
        aliases.num = len
    with pytest.raises(TypeisError, match="read-only"):
        del aliases.num
    with pytest.raises(TypeError):
        aliases["num"] = len
    assert aliases.num is typeis.is_number


def test_unknown_alias() -> None:
    with pytest.raises(AttributeError):
        aliases.missing
    with pytest.raises(KeyError):
        aliases["missing"]
    assert aliases.get("missing") is None


def test_alias_table_is_a_mapping() -> None:
    table = AliasTable({"num": typeis.is_number})
    assert isinstance(table, Mapping)
    assert "num" in table
    assert dict(table) == {"num": typeis.is_number}
    assert repr(table) == "AliasTable(num)"
