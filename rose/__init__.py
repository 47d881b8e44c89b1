"""
Rose: an immutable rose tree with functor, applicative and monad operations.

A rose tree is a node holding one value and an ordered sequence of child trees.
The algebra provides:
- `map` to transform every value while keeping the shape
- `pure` / `ap` to lift values and combine a tree of values with a tree of functions
- `bind` to continue every value into a new tree, grafted in place

Every operation is iterative, so trees of any depth are supported.

Example Usage:
    >>> from rose import RoseTree, Rose
    >>> tree = RoseTree(1, (RoseTree(2),))
    >>> Rose.bind(tree, lambda x: RoseTree(x * 10, (RoseTree(x * 100),)))
    RoseTree(10, (RoseTree(100), RoseTree(20, (RoseTree(200),))))
"""

from __future__ import annotations

# Capabilities
from rose.types import Combinable, Mappable, Sequenceable

# Node
from rose.nodes import RoseTree

# Algebra
from rose.algebra import (
    Rose,
    ap,
    bind,
    fmap,
    join,
    lift2,
    point,
    pure,
    then,
)

# Queries and conversions
from rose.traversal import (
    breadth_first,
    count,
    depth_first,
    find,
    fold,
    from_dict,
    height,
    leaves,
    to_dict,
)

__all__ = [
    # Capabilities
    "Combinable",
    "Mappable",
    "Sequenceable",
    # Node
    "RoseTree",
    # Algebra
    "Rose",
    "ap",
    "bind",
    "fmap",
    "join",
    "lift2",
    "point",
    "pure",
    "then",
    # Queries and conversions
    "breadth_first",
    "count",
    "depth_first",
    "find",
    "fold",
    "from_dict",
    "height",
    "leaves",
    "to_dict",
]
