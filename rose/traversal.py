"""
Queries and conversions over rose trees.

Functions:
    fold(tree, f)          - Bottom-up reduction, f(value, child_results)
    leaves(tree)           - Values of the leaves, left to right
    count(tree)            - Number of nodes
    height(tree)           - Number of levels (a leaf has height 1)
    find(tree, predicate)  - First matching value in depth-first preorder
    breadth_first(tree)    - Values level by level
    depth_first(tree)      - Values in depth-first preorder
    to_dict / from_dict    - Nested {"value", "children"} mappings
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator

from rose.nodes import RoseTree, children
from rose.types import T, U
from utils.tree_functionals import (
    breadth_first_preorder,
    depth_first_preorder,
    rebuild,
)


def fold(rose_tree: RoseTree[T], f: Callable[[T, tuple[U, ...]], U]) -> U:
    """
    Fold over the tree, applying f to each node's value and its folded children.
    The function f takes a value and the tuple of child results and returns a result.
    """
    return rebuild(rose_tree, children, lambda node: node.value, f)


def leaves(rose_tree: RoseTree[T]) -> list[T]:
    """Return a list of all leaf values (nodes without children)."""
    return [
        node.value
        for node in depth_first_preorder(children, rose_tree)
        if node.is_leaf
    ]


def count(rose_tree: RoseTree) -> int:
    return len(rose_tree)


def height(rose_tree: RoseTree) -> int:
    current_height = 0
    layer: tuple[RoseTree, ...] = (rose_tree,)
    while layer:
        current_height += 1
        layer = tuple(child for node in layer for child in node.children)
    return current_height


def find(rose_tree: RoseTree[T], predicate: Callable[[T], bool]) -> T | None:
    """
    Find first value in the tree that matches the predicate (depth-first search).
    Returns None if no match is found.
    """
    for node in depth_first_preorder(children, rose_tree):
        if predicate(node.value):
            return node.value
    return None


def breadth_first(rose_tree: RoseTree[T]) -> Iterator[T]:
    """Iterate over all values in a breadth-first manner."""
    return (node.value for node in breadth_first_preorder(children, rose_tree))


def depth_first(rose_tree: RoseTree[T]) -> Iterator[T]:
    """Iterate over all values in a depth-first manner."""
    return iter(rose_tree)


def to_dict(rose_tree: RoseTree[T]) -> dict:
    """Convert a rose tree to a dictionary representation."""
    return fold(
        rose_tree,
        lambda value, kids: {"value": value, "children": list(kids)},
    )


def _dict_children(data: Mapping[str, Any]) -> tuple[Mapping[str, Any], ...]:
    return tuple(data.get("children", ()))


def _dict_value(data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping for a tree node, got {type(data).__name__}")
    if "value" not in data:
        raise ValueError(f"Tree node mapping has no 'value' key: {list(data)}")
    return data["value"]


def from_dict(data: Mapping[str, Any]) -> RoseTree:
    """Create a rose tree from a dictionary representation."""
    return rebuild(
        data,
        _dict_children,
        _dict_value,
        lambda value, kids: RoseTree(value, kids),
    )


__all__ = [
    "fold",
    "leaves",
    "count",
    "height",
    "find",
    "breadth_first",
    "depth_first",
    "to_dict",
    "from_dict",
]
