"""
Type inspection and deep equality utilities for ahUtils.

Kind names returned by get_type():
- "null": None
- "boolean": bool
- "number": int, float, Decimal (bool excluded)
- "string": str
- "array": list, tuple
- "object": dict and other Mappings
- "date": date, datetime
- "regexp": compiled re.Pattern
- "set": set, frozenset
- "function": callables that are not classes
- anything else: the lower-cased class name
"""
import math
import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any


def get_type(value: Any) -> str:
    """
    Get the kind name of a value.

    Examples:
        >>> get_type([])
        'array'
        >>> get_type({})
        'object'
        >>> get_type(None)
        'null'
        >>> get_type(re.compile("regex"))
        'regexp'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, date):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, (set, frozenset)):
        return "set"
    if callable(value) and not isinstance(value, type):
        return "function"
    return type(value).__name__.lower()


def is_type(value: Any, type_name: str) -> bool:
    """Check the kind of a value (case-insensitive)."""
    return get_type(value) == type_name.lower()


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return get_type(value) == "object"


def is_function(value: Any) -> bool:
    return callable(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Check for a real number: bool and NaN do not count."""
    if get_type(value) != "number":
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    return not (isinstance(value, float) and math.isnan(value))


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_null(value: Any) -> bool:
    return value is None


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_empty(value: Any) -> bool:
    """
    Check for an empty value.

    None, "", [], (), {} and empty sets are empty; 0 and False are not.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, Mapping, set, frozenset)):
        return len(value) == 0
    return False


def is_equals(a: Any, b: Any) -> bool:
    """
    Deep structural equality.

    - identical objects are always equal
    - None only equals None
    - values of different kinds are never equal (1 vs True, list vs dict)
    - arrays: same length and pairwise equal
    - objects: same keys (order ignored) and equal values
    - dates: same instant
    - regexps: same pattern and flags

    Cyclic structures are supported: a pair of containers already being
    compared higher up is treated as equal.

    Examples:
        >>> is_equals({"a": {"b": 1}}, {"a": {"b": 1}})
        True
        >>> is_equals([1, 2], [1, 2, 3])
        False
    """
    return _equals(a, b, set())


def _equals(a: Any, b: Any, in_progress: set) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False

    kind = get_type(a)
    if kind != get_type(b):
        return False

    if kind in ("array", "object"):
        pair = (id(a), id(b))
        if pair in in_progress:
            return True
        in_progress.add(pair)
        try:
            if kind == "array":
                return len(a) == len(b) and all(_equals(x, y, in_progress) for x, y in zip(a, b))
            if a.keys() != b.keys():
                return False
            return all(_equals(a[key], b[key], in_progress) for key in a)
        finally:
            in_progress.discard(pair)

    if kind == "regexp":
        return a.pattern == b.pattern and a.flags == b.flags

    return a == b
