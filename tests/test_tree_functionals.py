"""Tests for utils/tree_functionals.py"""

from rose.nodes import RoseTree, children
from utils.tree_functionals import (
    breadth_first_preorder,
    depth_first_postorder,
    depth_first_preorder,
    pairwise_preorder,
    rebuild,
)


def sample_tree() -> RoseTree[str]:
    """
    Tree structure:
          A
         / \\
        B   C
       / \\   \\
      D   E   F
    """
    F = RoseTree("F")
    E = RoseTree("E")
    D = RoseTree("D")
    C = RoseTree("C", (F,))
    B = RoseTree("B", (D, E))
    return RoseTree("A", (B, C))


class TestTraversals:
    def test_none_root(self):
        assert list(breadth_first_preorder(children, None)) == []
        assert list(depth_first_preorder(children, None)) == []
        assert list(depth_first_postorder(children, None)) == []

    def test_single_node(self):
        single = RoseTree("A")
        assert [n.value for n in breadth_first_preorder(children, single)] == ["A"]
        assert [n.value for n in depth_first_preorder(children, single)] == ["A"]
        assert [n.value for n in depth_first_postorder(children, single)] == ["A"]

    def test_multi_level_tree(self):
        A = sample_tree()

        # BFS preorder: level by level from root
        assert [n.value for n in breadth_first_preorder(children, A)] == [
            "A",
            "B",
            "C",
            "D",
            "E",
            "F",
        ]

        # DFS preorder: parent before children
        assert [n.value for n in depth_first_preorder(children, A)] == [
            "A",
            "B",
            "D",
            "E",
            "C",
            "F",
        ]

        # DFS postorder: children before parent
        assert [n.value for n in depth_first_postorder(children, A)] == [
            "D",
            "E",
            "B",
            "F",
            "C",
            "A",
        ]


class TestRebuild:
    def test_identity(self):
        A = sample_tree()
        rebuilt = rebuild(
            A, children, lambda n: n.value, lambda v, kids: RoseTree(v, kids)
        )
        assert rebuilt == A
        assert rebuilt is not A

    def test_enter_is_preorder_and_leave_is_postorder(self):
        entered: list[str] = []
        left: list[str] = []

        def enter(node: RoseTree[str]) -> str:
            entered.append(node.value)
            return node.value

        def leave(value: str, kids: tuple[str, ...]) -> str:
            left.append(value)
            return value + "(" + ",".join(kids) + ")"

        result = rebuild(sample_tree(), children, enter, leave)

        assert result == "A(B(D(),E()),C(F()))"
        assert entered == ["A", "B", "D", "E", "C", "F"]
        assert left == ["D", "E", "B", "F", "C", "A"]

    def test_deep_chain(self):
        depth = 50_000
        chain = RoseTree(0)
        for i in range(1, depth):
            chain = RoseTree(i, (chain,))

        total = rebuild(
            chain, children, lambda n: n.value, lambda v, kids: v + sum(kids)
        )
        assert total == depth * (depth - 1) // 2


class TestPairwise:
    def test_same_shape(self):
        pairs = list(pairwise_preorder(children, sample_tree(), sample_tree()))
        assert None not in pairs
        assert [(a.value, b.value) for a, b in pairs] == [
            (v, v) for v in "ABDECF"
        ]

    def test_shape_mismatch_stops(self):
        left = RoseTree("A", (RoseTree("B"),))
        right = RoseTree("A", (RoseTree("B"), RoseTree("C")))
        pairs = list(pairwise_preorder(children, left, right))
        assert pairs[-1] is None
        assert len(pairs) == 2
