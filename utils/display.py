import logging
from typing import Callable

from rich.console import Console
from rich.tree import Tree

from constants import DISPLAY_ELLIPSIS, DISPLAY_GUIDE_STYLE, DISPLAY_MAX_DEPTH
from rose.nodes import RoseTree

logger = logging.getLogger(__name__)


def render_tree(
    rose_tree: RoseTree,
    label: Callable[[object], str] = str,
    max_depth: int = DISPLAY_MAX_DEPTH,
) -> Tree:
    """
    Builds a rich Tree mirroring a rose tree.

    Nodes deeper than `max_depth` (root at depth 0) are not rendered: their parent
    gets a single ellipsis child instead.
    """
    rendered = Tree(label(rose_tree.value), guide_style=DISPLAY_GUIDE_STYLE)
    stack: list[tuple[RoseTree, Tree, int]] = [(rose_tree, rendered, 0)]
    truncated = 0
    while stack:
        node, branch, depth = stack.pop()
        if not node.children:
            continue
        if depth >= max_depth:
            branch.add(DISPLAY_ELLIPSIS, style="dim")
            truncated += 1
            continue
        for child in node.children:
            stack.append((child, branch.add(label(child.value)), depth + 1))

    if truncated:
        logger.debug(f"render_tree: {truncated} subtrees collapsed below depth {max_depth}")
    return rendered


def display_tree(
    rose_tree: RoseTree,
    console: Console | None = None,
    label: Callable[[object], str] = str,
    max_depth: int = DISPLAY_MAX_DEPTH,
) -> None:
    (console or Console()).print(render_tree(rose_tree, label, max_depth))
