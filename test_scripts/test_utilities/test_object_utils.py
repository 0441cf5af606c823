"""
Test object utilities (clone, merge, dotted-path access).
All test is independent of the others, so help use pytest features.
"""
import re
from datetime import datetime

import pytest

from ahutils.exceptions import InvalidArgumentError
from ahutils.utils.object_utils import deep_clone, get, has, merge, omit, pick, remove, set


# ============================================================================
# TESTS: deep_clone
# ============================================================================

def test_deep_clone_is_independent():
    original = {"a": [1, {"b": 2}], "when": datetime(2024, 1, 1), "re": re.compile("x", re.I)}
    cloned = deep_clone(original)

    assert cloned == original
    assert cloned is not original
    assert cloned["a"] is not original["a"]

    cloned["a"][1]["b"] = 99
    assert original["a"][1]["b"] == 2


def test_deep_clone_cyclic():
    original = {"name": "loop"}
    original["self"] = original
    cloned = deep_clone(original)

    assert cloned["self"] is cloned


# ============================================================================
# TESTS: merge
# ============================================================================

def test_merge_deep():
    first = {"a": {"x": 1, "y": 1}, "b": 1, "keep": True}
    second = {"a": {"y": 2, "z": 2}, "b": [2]}

    assert merge(first, second) == {"a": {"x": 1, "y": 2, "z": 2}, "b": [2], "keep": True}


def test_merge_does_not_mutate_inputs():
    first = {"a": {"x": 1}}
    second = {"a": {"y": 2}}
    result = merge(first, second)

    assert first == {"a": {"x": 1}}
    assert second == {"a": {"y": 2}}
    assert result["a"] is not first["a"]


def test_merge_dict_replaces_scalar():
    assert merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}
    assert merge() == {}


# ============================================================================
# TESTS: get / has
# ============================================================================

def test_get():
    data = {"a": {"b": {"c": 3}, "list": [10, {"x": "deep"}]}, "none": None}

    assert get(data, "a.b.c") == 3
    assert get(data, ["a", "b", "c"]) == 3
    assert get(data, "a.list.1.x") == "deep"
    assert get(data, ["a", "list", 0]) == 10


def test_get_default():
    data = {"a": {"b": 1}, "none": None}

    assert get(data, "a.missing") is None
    assert get(data, "a.missing", "fallback") == "fallback"
    assert get(data, "none.deeper", "fallback") == "fallback"
    assert get(data, "a.list.5", 0) == 0


def test_get_returns_stored_none():
    assert get({"none": None}, "none", "fallback") is None


def test_get_empty_path():
    with pytest.raises(InvalidArgumentError):
        get({}, "")
    with pytest.raises(InvalidArgumentError):
        get({}, [])


@pytest.mark.parametrize("path", ["a.--1", "a.²", "a.1_0", "a. 0", "a.٣"])
def test_non_ascii_integer_keys_do_not_address_lists(path):
    """Test that only plain ASCII integers are used as list indexes."""
    data = {"a": [1, 2]}

    assert get(data, path, "fallback") == "fallback"
    assert not has(data, path)
    assert remove(data, path) is False
    assert data == {"a": [1, 2]}
    with pytest.raises(InvalidArgumentError):
        set(data, path, 3)


def test_has():
    data = {"a": {"b": None, "list": [1]}}

    assert has(data, "a")
    assert has(data, "a.b")
    assert has(data, "a.list.0")
    assert not has(data, "a.c")
    assert not has(data, "a.b.c")
    assert not has(data, "a.list.1")


# ============================================================================
# TESTS: set / remove
# ============================================================================

def test_set_creates_intermediate_dicts():
    data = {}
    result = set(data, "a.b.c", 1)

    assert result is data
    assert data == {"a": {"b": {"c": 1}}}


def test_set_replaces_scalar_intermediate():
    data = {"a": 5}
    set(data, ["a", "b"], "x")

    assert data == {"a": {"b": "x"}}


def test_set_into_list():
    data = {"items": [{"v": 1}, {"v": 2}]}
    set(data, "items.1.v", 20)
    set(data, "items.2", {"v": 3})

    assert data == {"items": [{"v": 1}, {"v": 20}, {"v": 3}]}


def test_set_list_index_out_of_range():
    with pytest.raises(InvalidArgumentError):
        set({"items": []}, "items.5", 1)


def test_remove():
    data = {"a": {"b": 1, "c": 2}, "list": [1, 2, 3]}

    assert remove(data, "a.b") is True
    assert data == {"a": {"c": 2}, "list": [1, 2, 3]}
    assert remove(data, "a.b") is False
    assert remove(data, "x.y") is False
    assert remove(data, "list.0") is True
    assert data["list"] == [2, 3]


# ============================================================================
# TESTS: pick / omit
# ============================================================================

def test_pick():
    data = {"a": 1, "b": 2, "c": 3}

    assert pick(data, ["a", "c", "missing"]) == {"a": 1, "c": 3}
    assert pick(data, []) == {}


def test_omit():
    data = {"a": 1, "b": 2, "c": 3}

    assert omit(data, ["b", "missing"]) == {"a": 1, "c": 3}
    assert data == {"a": 1, "b": 2, "c": 3}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
