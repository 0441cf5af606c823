"""
Test array utilities and array/tree conversion.
All test is independent of the others, so help use pytest features.
"""
import copy

import pytest

from ahutils.exceptions import InvalidArgumentError
from ahutils.schemas.tree import ArrayToTreeOptions
from ahutils.utils.array_utils import (
    array_sum,
    array_to_tree,
    difference,
    flatten,
    group,
    intersection,
    mean,
    range,
    sample,
    tree_to_array,
    union,
    unique,
    )


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def flat_rows():
    """Two trees: 1 -> (2 -> 4, 3) and 5; listed with a child before its parent."""
    return [
        {"id": 1, "parentId": None, "name": "root-a"},
        {"id": 4, "parentId": 2, "name": "grandchild"},
        {"id": 2, "parentId": 1, "name": "child-1"},
        {"id": 3, "parentId": 1, "name": "child-2"},
        {"id": 5, "parentId": None, "name": "root-b"},
        ]


# ============================================================================
# TESTS: unique / flatten / group
# ============================================================================

def test_unique_keeps_first_occurrence_order():
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert unique(["b", "a", "b"]) == ["b", "a"]
    assert unique([]) == []


def test_unique_unhashable_items_by_identity():
    """Test that lists/dicts are deduplicated by identity only."""
    shared = {"a": 1}
    result = unique([shared, shared, {"a": 1}])

    assert len(result) == 2
    assert result[0] is shared


def test_unique_keeps_booleans_apart_from_numbers():
    """Test that True/False are not merged with 1/0."""
    assert unique([1, True, 0, False, 1.0, True]) == [1, True, 0, False]


def test_flatten_depth():
    nested = [1, [2, [3, [4]]], (5,)]

    assert flatten(nested) == [1, 2, [3, [4]], 5]
    assert flatten(nested, 2) == [1, 2, 3, [4], 5]
    assert flatten(nested, 10) == [1, 2, 3, 4, 5]


def test_group():
    rows = [{"t": "a", "n": 1}, {"t": "b", "n": 2}, {"t": "a", "n": 3}, {"n": 4}]
    grouped = group(rows, "t")

    assert list(grouped) == ["a", "b", None]
    assert [row["n"] for row in grouped["a"]] == [1, 3]
    assert grouped[None] == [{"n": 4}]


# ============================================================================
# TESTS: set-like operations
# ============================================================================

def test_intersection():
    assert intersection([1, 2, 3, 2], [2, 3, 4]) == [2, 3, 2]
    assert intersection([1, 2], []) == []


def test_union():
    assert union([1, 2], [2, 3], [3, 4, 1]) == [1, 2, 3, 4]
    assert union() == []


def test_difference():
    assert difference([1, 2, 3, 4], [2, 4]) == [1, 3]
    assert difference([1, 2], [1, 2]) == []


def test_set_operations_keep_booleans_apart():
    assert intersection([1, True, 0], [True]) == [True]
    assert difference([1, True, 0, False], [1, 0]) == [True, False]
    assert union([1, 0], [True, False]) == [1, 0, True, False]


# ============================================================================
# TESTS: statistics and generators
# ============================================================================

def test_array_sum_and_mean():
    assert array_sum([1, 2, 3]) == 6
    assert array_sum([]) == 0
    assert mean([1, 2, 3, 4]) == 2.5
    assert mean([]) == 0


def test_sample():
    values = ["a", "b", "c"]
    for _ in [0] * 20:
        assert sample(values) in values
    assert sample([]) is None


def test_range():
    assert range(4) == [0, 1, 2, 3]
    assert range(2, 5) == [2, 3, 4]
    assert range(0, 10, 3) == [0, 3, 6, 9]
    assert range(1, 2, 0.25) == [1, 1.25, 1.5, 1.75]
    assert range(5, 2) == []


def test_range_rejects_non_positive_step():
    with pytest.raises(InvalidArgumentError):
        range(0, 5, 0)
    with pytest.raises(InvalidArgumentError):
        range(5, 0, -1)


# ============================================================================
# TESTS: array_to_tree
# ============================================================================

def test_array_to_tree_structure(flat_rows):
    """Test parent/child linking and ordering."""
    forest = array_to_tree(flat_rows)

    assert [node["id"] for node in forest] == [1, 5]
    root_a = forest[0]
    assert [child["id"] for child in root_a["children"]] == [2, 3]
    assert [child["id"] for child in root_a["children"][0]["children"]] == [4]
    assert root_a["children"][1]["children"] == []
    assert forest[1]["children"] == []


def test_array_to_tree_does_not_mutate_input(flat_rows):
    original = copy.deepcopy(flat_rows)
    array_to_tree(flat_rows)

    assert flat_rows == original


def test_array_to_tree_orphans_become_roots():
    """Test that a reference to a missing parent is not an error."""
    rows = [
        {"id": 1, "parentId": None},
        {"id": 2, "parentId": 99},
        {"id": 3, "parentId": 2},
        ]
    forest = array_to_tree(rows)

    assert [node["id"] for node in forest] == [1, 2]
    assert forest[1]["children"][0]["id"] == 3


def test_array_to_tree_self_parent_is_root():
    forest = array_to_tree([{"id": 7, "parentId": 7}])

    assert forest == [{"id": 7, "parentId": 7, "children": []}]


def test_array_to_tree_custom_options_dict():
    """Test camelCase option names and a custom root sentinel."""
    rows = [
        {"key": "a", "pid": 0},
        {"key": "b", "pid": "a"},
        ]
    forest = array_to_tree(rows, {"id": "key", "parentId": "pid", "children": "items", "rootParentId": 0})

    assert forest == [{"key": "a", "pid": 0, "items": [{"key": "b", "pid": "a", "items": []}]}]


def test_array_to_tree_options_model():
    options = ArrayToTreeOptions(id="key", parent_id="pid", children="nodes")
    forest = array_to_tree([{"key": 1, "pid": None}, {"key": 2, "pid": 1}], options)

    assert forest[0]["nodes"][0]["key"] == 2


def test_array_to_tree_invalid_options():
    with pytest.raises(InvalidArgumentError):
        array_to_tree([], {"unknown": "x"})


def test_array_to_tree_empty():
    assert array_to_tree([]) == []


# ============================================================================
# TESTS: tree_to_array
# ============================================================================

def test_tree_to_array_pre_order(flat_rows):
    """Test pre-order output and removal of the children field."""
    result = tree_to_array(array_to_tree(flat_rows))

    assert [row["id"] for row in result] == [1, 2, 4, 3, 5]
    assert all("children" not in row for row in result)


def test_round_trip_keeps_every_record(flat_rows):
    """Test that no record is lost or duplicated."""
    result = tree_to_array(array_to_tree(flat_rows))

    assert len(result) == len(flat_rows)
    assert sorted(result, key=lambda row: row["id"]) == sorted(flat_rows, key=lambda row: row["id"])


def test_tree_to_array_custom_children_key():
    tree = [{"id": 1, "items": [{"id": 2}, {"id": 3, "items": []}]}]

    assert tree_to_array(tree, "items") == [{"id": 1}, {"id": 2}, {"id": 3}]


def test_tree_to_array_does_not_mutate_tree():
    tree = [{"id": 1, "children": [{"id": 2, "children": []}]}]
    tree_to_array(tree)

    assert tree[0]["children"][0] == {"id": 2, "children": []}


def test_tree_to_array_rejects_cycles():
    node = {"id": 1, "children": []}
    node["children"].append(node)

    with pytest.raises(ValueError, match="reached twice"):
        tree_to_array([node])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
