"""
Array utilities for ahUtils.

Provides de-duplication, flattening, grouping, set-like operations on
ordered lists, simple statistics and the conversion between a flat list of
records and a tree (forest) of nested records.

Usage:
    from ahutils.utils.array_utils import array_to_tree, tree_to_array

    rows = [
        {"id": 1, "parentId": None, "name": "root"},
        {"id": 2, "parentId": 1, "name": "child"},
        ]
    tree = array_to_tree(rows)
    # [{"id": 1, "parentId": None, "name": "root", "children": [
    #     {"id": 2, "parentId": 1, "name": "child", "children": []}]}]
    tree_to_array(tree)
    # rows again, in pre-order, without "children"

All functions return new lists/dicts and never mutate their inputs.
"""
import random
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Optional, Sequence, Union

import structlog
from pydantic import ValidationError

from ahutils.exceptions import InvalidArgumentError
from ahutils.schemas.tree import ArrayToTreeOptions

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class _Identity:
    """Membership key for unhashable items (compared by object identity)."""
    ref: int


def _membership_key(item: Any) -> Hashable:
    try:
        hash(item)
    except TypeError:
        return _Identity(id(item))
    # True == 1 and hash(True) == hash(1), keep booleans apart from numbers
    return type(item) is bool, item


# ============================================================================
# DE-DUPLICATION AND SET-LIKE OPERATIONS
# ============================================================================

def unique(values: Iterable[Any]) -> list:
    """
    Remove duplicates, keeping the first occurrence order.

    Hashable items are compared by value (booleans never match 1 or 0),
    unhashable ones (lists, dicts) by identity.

    Examples:
        >>> unique([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    seen = set()
    result = []
    for item in values:
        key = _membership_key(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def flatten(values: Sequence[Any], depth: int = 1) -> list:
    """
    Flatten nested lists/tuples up to `depth` levels.

    Examples:
        >>> flatten([1, [2, [3, [4]]]])
        [1, 2, [3, [4]]]
        >>> flatten([1, [2, [3, [4]]]], depth=2)
        [1, 2, 3, [4]]
    """
    result = []
    for item in values:
        if isinstance(item, (list, tuple)):
            if depth > 1:
                result.extend(flatten(item, depth - 1))
            else:
                result.extend(item)
        else:
            result.append(item)
    return result


def group(values: Iterable[dict], key: Hashable) -> dict[Any, list]:
    """
    Group records by the value of one field.

    Groups appear in first-seen order; records missing the field are
    grouped under None.

    Examples:
        >>> group([{"t": "a", "n": 1}, {"t": "b", "n": 2}, {"t": "a", "n": 3}], "t")
        {'a': [{'t': 'a', 'n': 1}, {'t': 'a', 'n': 3}], 'b': [{'t': 'b', 'n': 2}]}
    """
    groups: dict[Any, list] = {}
    for item in values:
        groups.setdefault(item.get(key), []).append(item)
    return groups


def intersection(first: Iterable[Any], second: Iterable[Any]) -> list:
    """Items of `first` that also appear in `second` (order of `first`, duplicates kept)."""
    members = {_membership_key(item) for item in second}
    return [item for item in first if _membership_key(item) in members]


def union(*arrays: Iterable[Any]) -> list:
    """Unique items of all the given lists, in first-seen order."""
    return unique(item for array in arrays for item in array)


def difference(first: Iterable[Any], second: Iterable[Any]) -> list:
    """Items of `first` that do not appear in `second` (order of `first`, duplicates kept)."""
    members = {_membership_key(item) for item in second}
    return [item for item in first if _membership_key(item) not in members]


# ============================================================================
# STATISTICS AND GENERATORS
# ============================================================================

def array_sum(values: Iterable[float]) -> float:
    """
    Plain float sum (no decimal precision handling).

    Use ahutils.utils.math_utils.sum() when exact decimal results matter.
    """
    total = 0
    for value in values:
        total += value
    return total


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty list."""
    return array_sum(values) / len(values) if len(values) > 0 else 0


def sample(values: Sequence[Any]) -> Optional[Any]:
    """Random element, or None for an empty list."""
    if len(values) == 0:
        return None
    return random.choice(values)


def range(start: float, end: Optional[float] = None, step: float = 1) -> list:
    """
    List of numbers from start (inclusive) to end (exclusive).

    With a single argument the range goes from 0 to `start`.
    Float bounds and steps are allowed.

    Raises:
        InvalidArgumentError: If step is not positive

    Examples:
        >>> range(4)
        [0, 1, 2, 3]
        >>> range(1, 2, 0.25)
        [1, 1.25, 1.5, 1.75]
    """
    if end is None:
        start, end = 0, start
    if step <= 0:
        raise InvalidArgumentError(f"step must be positive, got {step!r}", "step", step)

    result = []
    current = start
    while current < end:
        result.append(current)
        current += step
    return result


# ============================================================================
# TREE CONVERSION
# ============================================================================

def _parse_options(options: Union[ArrayToTreeOptions, dict, None]) -> ArrayToTreeOptions:
    if options is None:
        return ArrayToTreeOptions()
    if isinstance(options, ArrayToTreeOptions):
        return options
    try:
        return ArrayToTreeOptions.model_validate(options)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid array_to_tree options: {e}", "options", options) from e


def array_to_tree(items: Sequence[dict], options: Union[ArrayToTreeOptions, dict, None] = None) -> list[dict]:
    """
    Build a forest from a flat list of records.

    Each record is copied (shallow) and given an empty children list, then
    linked under the record whose id matches its parent id.

    A record becomes a root when:
    - its parent id equals options.root_parent_id
    - no record has that id (orphan)
    - it names itself as parent

    Args:
        items: Flat list of dict records with unique ids
        options: ArrayToTreeOptions or a dict with the same fields
                 (snake_case or camelCase keys)

    Returns:
        List of root nodes; roots and siblings keep the input order

    Raises:
        InvalidArgumentError: If options are malformed

    Example:
        >>> array_to_tree([{"id": 1, "parentId": None}, {"id": 2, "parentId": 1}])
        [{'id': 1, 'parentId': None, 'children': [{'id': 2, 'parentId': 1, 'children': []}]}]
    """
    opts = _parse_options(options)

    nodes: dict[Any, dict] = {}
    for item in items:
        nodes[item.get(opts.id)] = {**item, opts.children: []}

    forest = []
    for item in items:
        node_id = item.get(opts.id)
        node = nodes[node_id]
        parent_value = item.get(opts.parent_id)

        if parent_value == opts.root_parent_id:
            forest.append(node)
            continue

        parent = nodes.get(parent_value)
        if parent is None or parent_value == node_id:
            logger.debug("Orphan node promoted to root", node_id=node_id, parent_id=parent_value)
            forest.append(node)
        else:
            parent[opts.children].append(node)

    return forest


def tree_to_array(tree: Sequence[dict], children_key: Hashable = "children") -> list[dict]:
    """
    Flatten a forest in pre-order (node before its descendants).

    Emitted records are shallow copies without the children field.

    Raises:
        ValueError: If the same node object is reached twice (cycle or shared node)

    Example:
        >>> tree_to_array([{"id": 1, "children": [{"id": 2, "children": []}]}])
        [{'id': 1}, {'id': 2}]
    """
    result = []
    visited = set()
    stack = list(reversed(tree))

    while stack:
        node = stack.pop()
        if id(node) in visited:
            raise ValueError("Node reached twice while flattening tree (cycle or shared node)")
        visited.add(id(node))

        children = node.get(children_key)
        result.append({key: value for key, value in node.items() if key != children_key})

        if isinstance(children, (list, tuple)):
            stack.extend(reversed(children))

    return result
