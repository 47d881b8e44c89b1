"""
The rose tree node.

A RoseTree holds exactly one value and an ordered, possibly empty, tuple of
child trees. Nodes are frozen: every operation builds a new tree, so subtrees
may be shared between trees without any of them being able to change it.

Equality, hashing, repr and length are computed with explicit stacks so that
very deep trees behave like shallow ones.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator

from rose.types import T, U
from utils.tree_functionals import depth_first_preorder, pairwise_preorder, rebuild


def children(node: RoseTree[T]) -> tuple[RoseTree[T], ...]:
    """Direct children of a node."""
    return node.children


@dataclass(frozen=True, eq=False, repr=False)
class RoseTree(Generic[T]):
    value: T
    children: tuple[RoseTree[T], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def with_children(self, children: Iterable[RoseTree[T]]) -> RoseTree[T]:
        return RoseTree(self.value, tuple(children))

    def __bool__(self) -> bool:
        # A tree always has a root
        return True

    def __len__(self) -> int:
        """Number of nodes in the tree."""
        return sum(1 for _ in depth_first_preorder(children, self))

    def __iter__(self) -> Iterator[T]:
        """Iterate over all values in a depth-first manner."""
        return (node.value for node in depth_first_preorder(children, self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoseTree):
            return False
        for pair in pairwise_preorder(children, self, other):
            if pair is None:
                return False
            left, right = pair
            if left.value != right.value:
                return False
        return True

    def __hash__(self) -> int:
        return rebuild(
            self,
            children,
            lambda node: node.value,
            lambda value, child_hashes: hash((value, child_hashes)),
        )

    def __repr__(self) -> str:
        def leave(value: object, reprs: tuple[str, ...]) -> str:
            if not reprs:
                return f"RoseTree({value!r})"
            trailing = "," if len(reprs) == 1 else ""
            return f"RoseTree({value!r}, ({', '.join(reprs)}{trailing}))"

        return rebuild(self, children, lambda node: node.value, leave)

    # Capabilities, see rose.types

    def map(self, f: Callable[[T], U]) -> RoseTree[U]:
        from rose.algebra import Rose

        return Rose.map(self, f)

    def ap(self, funcs: RoseTree[Callable[[T], U]]) -> RoseTree[U]:
        from rose.algebra import Rose

        return Rose.ap(self, funcs)

    def bind(self, f: Callable[[T], RoseTree[U]]) -> RoseTree[U]:
        from rose.algebra import Rose

        return Rose.bind(self, f)

    def __rshift__(self, f: Callable[[T], RoseTree[U]]) -> RoseTree[U]:
        """`tree >> f` binds `f` over the tree."""
        if not callable(f):
            raise TypeError("Right operand of >> must be callable")
        return self.bind(f)


__all__ = [
    "RoseTree",
    "children",
]
