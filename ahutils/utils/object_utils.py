"""
Object (dict) utilities for ahUtils.

Paths are either dotted strings ("a.b.0.c") or lists of keys
(["a", "b", 0, "c"]). Inside lists, integer-like keys are used as indexes.
"""
import copy
import re
from collections.abc import Mapping, MutableMapping
from typing import Any, Hashable, Iterable, TypeVar, Union

from ahutils.exceptions import InvalidArgumentError

T = TypeVar("T")

Path = Union[str, list, tuple]

_INDEX_RE = re.compile(r"-?[0-9]+")

# Marks a missing key (None is a legitimate stored value)
_MISSING = object()


def _split_path(path: Path) -> list:
    keys = path.split(".") if isinstance(path, str) else list(path)
    if not keys or keys == [""]:
        raise InvalidArgumentError(f"path must not be empty, got {path!r}", "path", path)
    return keys


def _list_index(container: list, key: Any):
    """Integer index for a list key, or None when the key cannot address the list."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        index = key
    elif isinstance(key, str) and _INDEX_RE.fullmatch(key):
        index = int(key)
    else:
        return None
    return index if -len(container) <= index < len(container) else None


def _child(container: Any, key: Any) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if isinstance(container, list):
        index = _list_index(container, key)
        return _MISSING if index is None else container[index]
    return _MISSING


def deep_clone(value: T) -> T:
    """
    Deep copy of a value (dicts, lists, dates, nested objects).

    Shared and cyclic references are preserved in the copy.
    """
    return copy.deepcopy(value)


def merge(*objects: Mapping) -> dict:
    """
    Deep merge dicts into a new dict.

    Later objects win. Nested dicts are merged recursively; any other value
    (lists included) replaces the previous one. Inputs are not modified.

    Example:
        >>> merge({"a": {"x": 1}, "b": 1}, {"a": {"y": 2}, "b": [2]})
        {'a': {'x': 1, 'y': 2}, 'b': [2]}
    """
    result: dict = {}
    for obj in objects:
        for key, value in obj.items():
            if isinstance(value, Mapping):
                previous = result.get(key)
                result[key] = merge(previous if isinstance(previous, Mapping) else {}, value)
            else:
                result[key] = value
    return result


def get(obj: Any, path: Path, default: Any = None) -> Any:
    """
    Read a nested value.

    Returns `default` when any step of the path is missing. A value
    explicitly stored as None is returned as None.

    Examples:
        >>> get({"a": {"b": [10, 20]}}, "a.b.1")
        20
        >>> get({"a": {}}, ["a", "x"], "fallback")
        'fallback'
    """
    current = obj
    for key in _split_path(path):
        if current is None:
            return default
        current = _child(current, key)
        if current is _MISSING:
            return default
    return current


def set(obj: MutableMapping, path: Path, value: Any) -> MutableMapping:
    """
    Write a nested value, creating intermediate dicts as needed.

    An intermediate step holding anything other than a dict or list is
    replaced with a new dict.

    Returns:
        The same (mutated) obj

    Example:
        >>> set({}, "a.b.c", 1)
        {'a': {'b': {'c': 1}}}
    """
    keys = _split_path(path)
    current = obj
    for key in keys[:-1]:
        child = _child(current, key)
        if not isinstance(child, (MutableMapping, list)):
            child = {}
            _assign(current, key, child)
        current = child
    _assign(current, keys[-1], value)
    return obj


def _assign(container: Any, key: Any, value: Any) -> None:
    if isinstance(container, list):
        index = _list_index(container, key)
        if index is not None:
            container[index] = value
            return
        if str(key) == str(len(container)):
            container.append(value)
            return
        raise InvalidArgumentError(f"Cannot address list of length {len(container)} with key {key!r}", "path", key)
    container[key] = value


def remove(obj: MutableMapping, path: Path) -> bool:
    """
    Delete a nested key.

    Returns:
        True if something was deleted, False if the path did not exist
    """
    keys = _split_path(path)
    parent = get(obj, keys[:-1], _MISSING) if len(keys) > 1 else obj
    last = keys[-1]

    if isinstance(parent, MutableMapping):
        if last in parent:
            del parent[last]
            return True
        return False
    if isinstance(parent, list):
        index = _list_index(parent, last)
        if index is not None:
            del parent[index]
            return True
    return False


def has(obj: Any, path: Path) -> bool:
    """
    Check whether a nested key exists (even if its value is None).

    Example:
        >>> has({"a": {"b": None}}, "a.b")
        True
    """
    current = obj
    for key in _split_path(path):
        current = _child(current, key)
        if current is _MISSING:
            return False
    return True


def pick(obj: Mapping, keys: Iterable[Hashable]) -> dict:
    """New dict with only the given keys (missing keys are skipped)."""
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping, keys: Iterable[Hashable]) -> dict:
    """Shallow copy of obj without the given keys."""
    excluded = frozenset(keys)
    return {key: value for key, value in obj.items() if key not in excluded}
