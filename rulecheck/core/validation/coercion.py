"""Explicit Comparison Coercion

Loose comparison is defined by an explicit table here, NEVER by Python's own
``==`` between unrelated types. Rules that offer a non-strict mode (IsTrue)
and rules that accept numeric strings (Number) share these helpers.

Loose equality table, first matching row wins:

    1. composite on either side   equal only if both are composite and ``==``
    2. bool on either side        compare with the other side's truthiness
    3. None on either side        equal iff the other side is falsy
    4. NaN on either side         never equal
    5. both numeric               numeric comparison ("01" == "1" == 1 == 1.0)
    6. number vs other string     number's text form compared with the string
    7. anything else              ``==`` (two non-numeric strings: exact)

Falsy values: None, "", "0", 0, 0.0, Decimal(0) and empty composites.
Numeric strings: optional surrounding whitespace, optional sign, digits with
an optional fraction and exponent ("1", " 1", "01", "-2.5", "1e3"). NaN is
not a number here, neither as a float nor as a Decimal.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from .formatter import is_composite, stringify

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_INTEGER_STRING = re.compile(r"^\s*[+-]?\d+\s*$")


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def is_integer_string(value: Any) -> bool:
    return isinstance(value, str) and _INTEGER_STRING.match(value) is not None


def _is_nan(value: Any) -> bool:
    if isinstance(value, float): return math.isnan(value)
    if isinstance(value, Decimal): return value.is_nan()
    return False


def is_number(value: Any) -> bool:
    """int, float or Decimal, but not bool or NaN."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool) and not _is_nan(value)


def is_numeric(value: Any) -> bool:
    return is_number(value) or is_numeric_string(value)


def to_number(value: Any) -> int | float | Decimal:
    """Numeric form of a value accepted by ``is_numeric``."""
    if is_number(value): return value
    if not is_numeric_string(value):
        raise ValueError(f"Not a numeric value: {value!r}")
    text = value.strip()
    if not _INTEGER_STRING.match(text): return float(text)
    try:
        return int(text)
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits()
        return Decimal(text)


def is_falsy(value: Any) -> bool:
    if value is None: return True
    if isinstance(value, str): return value in ("", "0")
    if isinstance(value, (bool, int, float, Decimal)): return not value
    if isinstance(value, (list, tuple, dict, set, frozenset)): return len(value) == 0
    return False


def _number_text(value: int | float | Decimal) -> str:
    if isinstance(value, float) and value.is_integer():
        return stringify(int(value))
    return stringify(value)


def loose_equals(value: Any, expected: Any) -> bool:
    """Compare two values using the loose equality table above."""
    if is_composite(value) or is_composite(expected):
        return is_composite(value) and is_composite(expected) and value == expected

    if isinstance(value, bool) or isinstance(expected, bool):
        return is_falsy(value) == is_falsy(expected)

    if value is None or expected is None:
        return is_falsy(value) and is_falsy(expected)

    if _is_nan(value) or _is_nan(expected):
        return False

    if is_numeric(value) and is_numeric(expected):
        return to_number(value) == to_number(expected)

    if is_number(value) and isinstance(expected, str):
        return _number_text(value) == expected
    if is_number(expected) and isinstance(value, str):
        return _number_text(expected) == value

    return value == expected
