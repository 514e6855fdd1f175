"""
Property-based tests for BinarySearchTree over arbitrary insertion sequences.
"""

from hypothesis import assume, given, strategies as st

from bstree import BinarySearchTree
from tree_checks import assert_ordered, walk

keys = st.lists(st.integers(min_value=-50, max_value=50), max_size=60)


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


class TestTreeProperties:
    """Invariants that must hold for every insertion order."""

    @given(keys)
    def test_order_invariant(self, values):
        """Test every left subtree is strictly less and every right subtree is >=."""
        assert_ordered(build(values))

    @given(keys)
    def test_find_every_inserted_value(self, values):
        """Test every inserted value can be found."""
        tree = build(values)

        for value in values:
            node = tree.find(value)
            assert node is not None
            assert node.value == value

    @given(keys, st.integers(min_value=-50, max_value=50))
    def test_absent_value_not_found(self, values, missing):
        """Test a value never inserted is reported as not found."""
        assume(missing not in values)
        tree = build(values)

        assert tree.find(missing) is None
        assert missing not in tree

    @given(keys, keys, st.integers(min_value=-50, max_value=50))
    def test_duplicate_routed_right(self, before, between, value):
        """Test a second equal key lands in the first one's right subtree."""
        before = [v for v in before if v != value]
        between = [v for v in between if v != value]

        tree = build(before)
        first = tree.insert(value)
        for v in between:
            tree.insert(v)
        second = tree.insert(value)

        assert any(node is second for node in walk(first.right))
        assert tree.find(value) is first

    @given(keys)
    def test_size_and_node_count_agree(self, values):
        """Test size matches the number of reachable nodes."""
        tree = build(values)

        assert tree.size() == len(values)
        assert sum(1 for _ in walk(tree.root)) == len(values)

    @given(keys)
    def test_height_bounds(self, values):
        """Test height is between 1 and N for a non-empty tree."""
        tree = build(values)

        if values:
            assert 1 <= tree.height() <= len(values)
        else:
            assert tree.height() == 0

    @given(st.lists(st.integers(), min_size=1, max_size=40, unique=True))
    def test_sorted_input_is_a_chain(self, values):
        """Test sorted distinct input is never rebalanced."""
        tree = build(sorted(values))

        assert tree.height() == len(values)
        assert all(node.left is None for node in walk(tree.root))

    @given(st.integers())
    def test_empty_tree_finds_nothing(self, value):
        """Test find on an empty tree always reports not found."""
        assert BinarySearchTree().find(value) is None
