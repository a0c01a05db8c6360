"""Builtin primitive predicates.

These back the default registry. Each takes one value and returns a bool.
None never reaches a predicate: absence is decided by the descriptor's
required flag before the predicate is looked up.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict


def is_any(value: Any) -> bool:
    return True


def is_number(value: Any) -> bool:
    """Real or complex number. ``bool`` is not a number here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, complex, Decimal, Fraction))


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_bytes(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray))


def is_list(value: Any) -> bool:
    return isinstance(value, list)


def is_tuple(value: Any) -> bool:
    return isinstance(value, tuple)


def is_dict(value: Any) -> bool:
    return isinstance(value, dict)


def is_callable(value: Any) -> bool:
    return callable(value)


BUILTIN_PREDICATES: Dict[str, Callable[[Any], bool]] = {
    'any': is_any,
    'number': is_number,
    'integer': is_integer,
    'string': is_string,
    'boolean': is_boolean,
    'bytes': is_bytes,
    'list': is_list,
    'tuple': is_tuple,
    'dict': is_dict,
    'callable': is_callable,
}
