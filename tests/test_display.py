"""Tests for utils/display.py"""

from rich.console import Console

from constants import DISPLAY_ELLIPSIS
from rose import RoseTree
from utils.display import display_tree, render_tree


def labels(branch) -> list:
    return [str(child.label) for child in branch.children]


class TestRender:
    def test_mirrors_tree(self):
        tree = RoseTree(1, (RoseTree(2, (RoseTree(4),)), RoseTree(3)))
        rendered = render_tree(tree)
        assert str(rendered.label) == "1"
        assert labels(rendered) == ["2", "3"]
        assert labels(rendered.children[0]) == ["4"]
        assert labels(rendered.children[1]) == []

    def test_custom_label(self):
        rendered = render_tree(RoseTree(1, (RoseTree(2),)), label=lambda v: f"<{v}>")
        assert str(rendered.label) == "<1>"
        assert labels(rendered) == ["<2>"]

    def test_collapses_below_max_depth(self):
        tree = RoseTree(0, (RoseTree(1, (RoseTree(2, (RoseTree(3),)),)),))
        rendered = render_tree(tree, max_depth=1)
        assert labels(rendered) == ["1"]
        assert labels(rendered.children[0]) == [DISPLAY_ELLIPSIS]

    def test_deep_tree(self):
        tree = RoseTree(0)
        for i in range(1, 5_000):
            tree = RoseTree(i, (tree,))
        rendered = render_tree(tree, max_depth=3)
        branch = rendered
        for _ in range(3):
            branch = branch.children[0]
        assert labels(branch) == [DISPLAY_ELLIPSIS]


class TestDisplay:
    def test_prints_values(self):
        console = Console(record=True, width=80, color_system=None)
        display_tree(RoseTree("root", (RoseTree("left"), RoseTree("right"))), console)
        text = console.export_text()
        assert "root" in text
        assert "left" in text
        assert "right" in text
