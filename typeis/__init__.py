"""typeis: runtime type predicates and a canonical type-name dispatcher.

Public API.
"""

from __future__ import annotations

from .facade import AliasTable, aliases, classify
from .kinds import (
    KIND_ARRAY,
    KIND_BIGINT,
    KIND_BOOLEAN,
    KIND_FUNCTION,
    KIND_NULL,
    KIND_NUMBER,
    KIND_OBJECT,
    KIND_STRING,
    KIND_SYMBOL,
    KIND_UNDEFINED,
    MAX_SAFE_INTEGER,
    NATIVE_KINDS,
    UNDEFINED,
    Arguments,
    Kind,
    Symbol,
    TypeisError,
    Undefined,
    capture_arguments,
    constructor_name,
    native_kind,
    object_tag,
    to_string,
)
from .predicates import (
    is_array,
    is_array_like,
    is_arguments,
    is_async_func,
    is_bigint,
    is_boolean,
    is_buffer,
    is_class,
    is_defined,
    is_empty,
    is_equals,
    is_error,
    is_extend_of,
    is_extensible,
    is_finite_number,
    is_float,
    is_function,
    is_gen_func,
    is_infinity,
    is_instance_of,
    is_int,
    is_iterable,
    is_map,
    is_negative,
    is_non_zero_value,
    is_not_a_number,
    is_null,
    is_number,
    is_object,
    is_positive,
    is_promise,
    is_regexp,
    is_safe_int,
    is_set,
    is_string,
    is_symbol,
    is_uint,
    is_undefined,
    is_unsigned,
    is_zero_value,
    make_typeof_callback,
)

__all__ = [
    "AliasTable",
    "Arguments",
    "KIND_ARRAY",
    "KIND_BIGINT",
    "KIND_BOOLEAN",
    "KIND_FUNCTION",
    "KIND_NULL",
    "KIND_NUMBER",
    "KIND_OBJECT",
    "KIND_STRING",
    "KIND_SYMBOL",
    "KIND_UNDEFINED",
    "Kind",
    "MAX_SAFE_INTEGER",
    "NATIVE_KINDS",
    "Symbol",
    "TypeisError",
    "UNDEFINED",
    "Undefined",
    "aliases",
    "capture_arguments",
    "classify",
    "constructor_name",
    "is_arguments",
    "is_array",
    "is_array_like",
    "is_async_func",
    "is_bigint",
    "is_boolean",
    "is_buffer",
    "is_class",
    "is_defined",
    "is_empty",
    "is_equals",
    "is_error",
    "is_extend_of",
    "is_extensible",
    "is_finite_number",
    "is_float",
    "is_function",
    "is_gen_func",
    "is_infinity",
    "is_instance_of",
    "is_int",
    "is_iterable",
    "is_map",
    "is_negative",
    "is_non_zero_value",
    "is_not_a_number",
    "is_null",
    "is_number",
    "is_object",
    "is_positive",
    "is_promise",
    "is_regexp",
    "is_safe_int",
    "is_set",
    "is_string",
    "is_symbol",
    "is_uint",
    "is_undefined",
    "is_unsigned",
    "is_zero_value",
    "make_typeof_callback",
    "native_kind",
    "object_tag",
    "to_string",
]
