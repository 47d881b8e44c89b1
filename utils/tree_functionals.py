"""
Functionals for tree structures. Every function here walks the tree with an explicit
stack or queue, so depth is bounded by memory rather than by the interpreter's recursion limit.
"""

from collections import deque
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")
S = TypeVar("S")
U = TypeVar("U")


# Traversals
def breadth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Performs a breadth-first preorder traversal of an object, yielding all instances level by level.

    Args:
        after: The function which returns the children of the current object
        root: The root object to traverse.

    Yields:
        T: Each instance in breadth-first preorder.
    """
    if root is None:
        return
    queue = deque([root])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(after(current))


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Performs a depth-first preorder traversal of an object, yielding the
    current object before its children.

    Args:
        after: The function which returns the children of the current object
        root: The root object to traverse.

    Yields:
        T: Each instance in depth-first preorder.
    """
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        # Push children in reverse to process left-to-right
        stack.extend(reversed(tuple(after(current))))


def depth_first_postorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Performs a depth-first postorder traversal of an object, yielding
    children before the current object.

    Args:
        after: The function which returns the children of the current object
        root: The root object to traverse.

    Yields:
        T: Each instance in depth-first postorder.
    """
    if root is None:
        return
    stack = [(root, False)]
    while stack:
        current, visited = stack.pop()
        if visited:
            yield current
        else:
            stack.append((current, True))
            for child in reversed(tuple(after(current))):
                stack.append((child, False))


# Rebuilding


def rebuild(
    root: T,
    after: Callable[[T], Iterable[T]],
    enter: Callable[[T], S],
    leave: Callable[[S, tuple[U, ...]], U],
) -> U:
    """
    Rebuilds a tree bottom-up without recursion.

    `enter` is called once per node in depth-first preorder, before any of its
    children are visited. `leave` is called once per node in postorder with the
    state `enter` returned for it and the results already built for its children,
    in their original order.

    Args:
        root: The root node of the tree.
        after: Returns the children of a node.
        enter: Computes the per-node state on the way down.
        leave: Combines a node's state with its children's results on the way up.

    Returns:
        The result of `leave` for the root.
    """
    results: list[U] = []
    # Frames are (node, children, state); children is None until the node is entered
    stack: list[tuple[T, tuple[T, ...] | None, S | None]] = [(root, None, None)]
    while stack:
        node, children, state = stack.pop()
        if children is None:
            state = enter(node)
            children = tuple(after(node))
            stack.append((node, children, state))
            for child in reversed(children):
                stack.append((child, None, None))
        else:
            start = len(results) - len(children)
            built = tuple(results[start:])
            del results[start:]
            results.append(leave(state, built))  # type: ignore[arg-type]
    return results[0]


def pairwise_preorder(
    after: Callable[[T], Iterable[T]], left: T, right: T
) -> Iterator[tuple[T, T] | None]:
    """
    Walks two trees side by side in depth-first preorder.

    Yields each pair of corresponding nodes. Yields a single `None` and stops as soon
    as two corresponding nodes have a different number of children.
    """
    stack = [(left, right)]
    while stack:
        a, b = stack.pop()
        yield a, b
        a_children, b_children = tuple(after(a)), tuple(after(b))
        if len(a_children) != len(b_children):
            yield None
            return
        stack.extend(reversed(tuple(zip(a_children, b_children))))
