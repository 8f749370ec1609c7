"""Predicate library.

Each predicate takes one arbitrary value and answers a single question about
it. Predicates never raise for values they are meant to inspect; exceptions
raised by the value itself (a `__len__` that fails, say) propagate.
"""

from __future__ import annotations

import array
from collections.abc import ItemsView, KeysView, Mapping, Set as AbstractSet, Sized
import dataclasses
import inspect
import math
import re
from typing import Callable, Iterable, TypeGuard, TypeVar

from .kinds import (
    KIND_BIGINT,
    KIND_BOOLEAN,
    KIND_FUNCTION,
    KIND_NUMBER,
    KIND_OBJECT,
    KIND_STRING,
    KIND_SYMBOL,
    MAX_SAFE_INTEGER,
    NATIVE_KINDS,
    UNDEFINED,
    Symbol,
    TypeisError,
    Undefined,
    constructor_name,
    native_kind,
    object_tag,
)

T = TypeVar("T")


def make_typeof_callback(kind: str | None = None) -> Callable[[object], bool]:
    """Build a predicate matching one native kind name ("object" by default)."""
    name = kind or "object"
    if name not in NATIVE_KINDS:
        raise TypeisError("unknown native kind", repr(name))
    target = NATIVE_KINDS[name]

    def check(value: object) -> bool:
        return native_kind(value) == target

    check.__name__ = "is_" + name
    check.__qualname__ = "is_" + name
    return check


# ============================================================
# Defined and undefined
# ============================================================


def is_defined(value: object) -> bool:
    return value is not None and value is not UNDEFINED


def is_empty(value: object) -> TypeGuard[None | Undefined]:
    return value is UNDEFINED or value is None


def is_null(value: object) -> TypeGuard[None]:
    return value is None


def is_undefined(value: object) -> TypeGuard[Undefined]:
    return value is UNDEFINED


# ============================================================
# Primitives
# ============================================================


def is_number(value: object) -> TypeGuard[int | float]:
    """True for finite numbers. NaN and the infinities are not numbers."""
    return native_kind(value) == KIND_NUMBER and math.isfinite(value)


def is_string(value: object) -> TypeGuard[str]:
    return native_kind(value) == KIND_STRING


def is_boolean(value: object) -> TypeGuard[bool]:
    # identity, so 1 and 0 do not pass for True and False
    return value is True or value is False


def is_function(value: object) -> TypeGuard[Callable[..., object]]:
    """True for anything callable: functions, methods, builtins, classes."""
    return native_kind(value) == KIND_FUNCTION


def is_object(value: object) -> bool:
    return value is not None and native_kind(value) == KIND_OBJECT


def is_symbol(value: object) -> TypeGuard[Symbol]:
    return native_kind(value) == KIND_SYMBOL


def is_bigint(value: object) -> TypeGuard[int]:
    return native_kind(value) == KIND_BIGINT


# ============================================================
# Function subkinds
# ============================================================


def is_gen_func(value: object) -> bool:
    return is_function(value) and constructor_name(value) == "GeneratorFunction"


def is_async_func(value: object) -> bool:
    return is_function(value) and constructor_name(value) == "AsyncFunction"


def is_arguments(value: object) -> bool:
    return is_array_like(value) and object_tag(value) == "Arguments"


# ============================================================
# Object definitions
# ============================================================


# Py_TPFLAGS_IMMUTABLETYPE, set on builtin and other static types
_IMMUTABLETYPE = 1 << 8


def is_class(value: object) -> TypeGuard[type]:
    """Classes defined in Python. Builtin and other static types such as
    `int` are native constructors, not classes."""
    return (
        is_function(value)
        and inspect.isclass(value)
        and not (value.__flags__ & _IMMUTABLETYPE)
    )


def is_extensible(value: object) -> bool:
    """Report whether new attributes can be set on the value.

    Classes are extensible unless their type is immutable. Instances are
    extensible when they carry an instance dict and are not frozen
    dataclasses. Primitives, None and slots-only instances are not.
    """
    if isinstance(value, type):
        return not (value.__flags__ & _IMMUTABLETYPE)
    if dataclasses.is_dataclass(value) and value.__dataclass_params__.frozen:
        return False
    return isinstance(getattr(value, "__dict__", None), dict)


def is_instance_of(target: object, cls: type[T]) -> TypeGuard[T]:
    """`isinstance` under a predicate name. A non-class `cls` raises TypeError."""
    return isinstance(target, cls)


def is_extend_of(sub: type, sup: type) -> bool:
    """Check whether `sub` reaches `sup` through its base-class links.

    A class extends itself. The walk keeps a visited set so diamond
    hierarchies are only expanded once.
    """
    if not isinstance(sub, type):
        raise TypeisError("is_extend_of() needs a class to walk", type(sub).__name__)
    if not isinstance(sup, type):
        raise TypeisError("is_extend_of() needs a class to look for", type(sup).__name__)
    visited: set[type] = set()
    pending: list[type] = [sub]
    while pending:
        current = pending.pop()
        if current is sup:
            return True
        if current in visited:
            continue
        visited.add(current)
        pending.extend(current.__bases__)
    return False


# ============================================================
# Iterables
# ============================================================


def is_array(value: object) -> TypeGuard[list]:
    return isinstance(value, list)


def is_array_like(value: object) -> TypeGuard[Sized]:
    """Defined and reporting a non-negative integer length."""
    if not is_defined(value) or not hasattr(type(value), "__len__"):
        return False
    return is_uint(len(value))


def is_iterable(value: object) -> TypeGuard[Iterable[object]]:
    return is_defined(value) and callable(getattr(type(value), "__iter__", None))


# ============================================================
# Numbers
# ============================================================


def is_int(value: object) -> bool:
    return is_number(value) and value % 1 == 0


def is_float(value: object) -> bool:
    """Finite number with a fractional part; 3.0 is not a float here."""
    return is_number(value) and value % 1 != 0


def is_uint(value: object) -> bool:
    return is_int(value) and value >= 0


def is_unsigned(value: object) -> bool:
    return is_number(value) and value >= 0


def is_positive(value: object) -> bool:
    return is_number(value) and value > 0


def is_negative(value: object) -> bool:
    return is_number(value) and value < 0


def is_safe_int(value: object) -> bool:
    """Integral and exactly representable as a double (|value| <= 2**53 - 1)."""
    return is_int(value) and abs(value) <= MAX_SAFE_INTEGER


def is_finite_number(value: object) -> TypeGuard[int | float]:
    return native_kind(value) == KIND_NUMBER and math.isfinite(value)


def is_infinity(value: object) -> bool:
    return isinstance(value, float) and math.isinf(value)


def is_not_a_number(value: object) -> bool:
    return value != value


def _own_attribute_count(value: object) -> int:
    """Count instance dict entries plus the slots that currently hold a value."""
    count = 0
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        count += len(attrs)
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if slot.startswith("__") and not slot.endswith("__"):
                slot = "_" + klass.__name__.lstrip("_") + slot
            if hasattr(value, slot):
                count += 1
    return count


def is_zero_value(value: object) -> bool:
    """True for None, UNDEFINED, numeric zero, empty sized values, and
    objects without any instance attributes."""
    if is_empty(value):
        return True
    if is_number(value):
        return value == 0
    if hasattr(type(value), "__len__"):
        return len(value) == 0
    if is_object(value):
        return _own_attribute_count(value) == 0
    return False


def is_non_zero_value(value: object) -> bool:
    return not is_zero_value(value)


# ============================================================
# Equality
# ============================================================


# kinds compared by value rather than identity
_VALUE_KINDS = (KIND_STRING, KIND_BOOLEAN, KIND_BIGINT)


def is_equals(a: object, b: object) -> bool:
    """Strict equality with a numeric policy.

    Numbers must both be numbers; NaN equals NaN and 0.0 differs from
    -0.0. Strings, booleans and bigints compare by value. Everything else
    compares by identity.
    """
    kind = native_kind(a)
    if kind == KIND_NUMBER:
        if native_kind(b) != KIND_NUMBER:
            return False
        if a == b:
            return a != 0 or math.copysign(1.0, a) == math.copysign(1.0, b)
        return a != a and b != b
    if kind in _VALUE_KINDS:
        return native_kind(b) == kind and a == b
    return a is b


# ============================================================
# Standard containers
# ============================================================


def is_promise(value: object) -> bool:
    """Awaitable objects: coroutines, futures, tasks, anything with `__await__`."""
    return is_object(value) and inspect.isawaitable(value)


def is_map(value: object) -> TypeGuard[Mapping]:
    return is_object(value) and isinstance(value, Mapping)


def is_set(value: object) -> TypeGuard[AbstractSet]:
    """Set values. Dict key and item views are set-like but are not sets."""
    if not is_object(value) or isinstance(value, (KeysView, ItemsView)):
        return False
    return isinstance(value, AbstractSet)


def is_error(value: object) -> TypeGuard[BaseException]:
    return isinstance(value, BaseException)


def is_regexp(value: object) -> TypeGuard[re.Pattern]:
    return isinstance(value, re.Pattern)


# ============================================================
# Buffers
# ============================================================


_BUFFER_TYPES = (bytes, bytearray, memoryview, array.array)


def is_buffer(value: object) -> bool:
    """Native byte buffers, or values whose class vouches for them through a
    callable `is_buffer` hook."""
    if not is_defined(value):
        return False
    if isinstance(value, _BUFFER_TYPES):
        return True
    check = getattr(type(value), "is_buffer", None)
    return callable(check) and bool(check(value))
