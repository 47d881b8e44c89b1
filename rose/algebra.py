"""
Functor, applicative and monad operations on rose trees.

All operations are static methods of `Rose` and are also exported as plain
functions. They never mutate their inputs and never recurse on the Python
call stack: each one is a single `rebuild` pass driven by an explicit stack.

A caller-supplied function that raises aborts the operation; the exception
reaches the caller as raised and no partially built tree escapes.
"""

from __future__ import annotations

import logging
from typing import Callable

from rose.nodes import RoseTree, children
from rose.types import T, U
from utils.tree_functionals import rebuild

logger = logging.getLogger(__name__)


def _identity(x):
    return x


class Rose:
    # Functor

    @staticmethod
    def map(rose_tree: RoseTree[T], f: Callable[[T], U]) -> RoseTree[U]:
        """Map a function over every value in a rose tree, root first, keeping the shape."""

        return rebuild(
            rose_tree,
            children,
            lambda node: f(node.value),
            lambda value, kids: RoseTree(value, kids),
        )

    # Applicative

    @staticmethod
    def pure(value: T) -> RoseTree[T]:
        """Lift a bare value into a single leaf."""
        return RoseTree(value)

    point = pure

    @staticmethod
    def ap(
        values: RoseTree[T], funcs: RoseTree[Callable[[T], U]]
    ) -> RoseTree[U]:
        """
        Combine a tree of values with a tree of functions.

        The root is `funcs.value(values.value)`. Its children are, in order:
        every child of `values` mapped with the root function of `funcs`, then
        `ap(values, g)` for every child `g` of `funcs`.

        This is not the cartesian-product applicative: the top-level branching
        factor is `len(values.children) + len(funcs.children)`.
        """

        def enter(node: RoseTree[Callable[[T], U]]) -> tuple[U, tuple[RoseTree[U], ...]]:
            f = node.value
            head = f(values.value)
            broadcast = tuple(Rose.map(child, f) for child in values.children)
            return head, broadcast

        def leave(
            state: tuple[U, tuple[RoseTree[U], ...]], kids: tuple[RoseTree[U], ...]
        ) -> RoseTree[U]:
            head, broadcast = state
            return RoseTree(head, broadcast + kids)

        result = rebuild(funcs, children, enter, leave)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"ap: {len(values)} values x {len(funcs)} functions -> {len(result)} nodes"
            )
        return result

    @staticmethod
    def lift2(
        f: Callable[[T, U], object], first: RoseTree[T], second: RoseTree[U]
    ) -> RoseTree[object]:
        """Combine two trees with a binary function, through `ap`."""
        curried = Rose.map(first, lambda x: lambda y: f(x, y))
        return Rose.ap(second, curried)

    # Monad

    @staticmethod
    def bind(
        rose_tree: RoseTree[T], f: Callable[[T], RoseTree[U]]
    ) -> RoseTree[U]:
        """
        Feed every value to `f` and graft the resulting trees.

        For each node, `f(node.value)` gives the new root value; its children
        come first, followed by the bound original children in their order.
        """

        def enter(node: RoseTree[T]) -> RoseTree[U]:
            grafted = f(node.value)
            if not isinstance(grafted, RoseTree):
                raise TypeError(
                    f"bind expects a function returning a RoseTree, got {type(grafted).__name__}"
                )
            return grafted

        result = rebuild(
            rose_tree,
            children,
            enter,
            lambda grafted, kids: RoseTree(grafted.value, grafted.children + kids),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"bind: {len(rose_tree)} nodes -> {len(result)} nodes")
        return result

    @staticmethod
    def join(nested: RoseTree[RoseTree[T]]) -> RoseTree[T]:
        """Flatten a tree of trees."""
        return Rose.bind(nested, _identity)

    @staticmethod
    def then(first: RoseTree[T], second: RoseTree[U]) -> RoseTree[U]:
        """Sequence two trees, discarding the values of the first."""
        return Rose.bind(first, lambda _: second)


fmap = Rose.map
pure = Rose.pure
point = Rose.point
ap = Rose.ap
lift2 = Rose.lift2
bind = Rose.bind
join = Rose.join
then = Rose.then


__all__ = [
    "Rose",
    "fmap",
    "pure",
    "point",
    "ap",
    "lift2",
    "bind",
    "join",
    "then",
]
