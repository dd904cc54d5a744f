"""Test fixtures for TernaryTreeLib consumers.

These fixtures provide a shared sample tree and controlled access to the
node structure for testing purposes, without making node internals part of
the public map API.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..core.adapter import NodeAdapter
from ..core.node import InvariantViolation, Node
from ..tree import Tst


# Sixteen keys over the alphabet "abc", in the insertion order used by the
# test suite. The tree shape (and therefore stats) depends on this order.
SAMPLE_KEYS = [
    "aba", "ab", "bc", "ac", "abc", "a", "b", "aca",
    "caa", "cbc", "bac", "c", "cca", "aab", "abb", "aa",
]

# Same keys, another insertion order, used to check removal
SAMPLE_KEYS_BIS = [
    "cca", "aa", "bac", "aba", "b", "bc", "c", "ac",
    "aab", "ab", "abc", "abb", "a", "caa", "aca", "cbc",
]

SORTED_SAMPLE_KEYS = sorted(SAMPLE_KEYS)


def sample_tree() -> Tst:
    """Tree holding every sample key, each mapped to itself."""
    return Tst.from_pairs((key, key) for key in SAMPLE_KEYS)


def counted_sample_tree() -> Tst:
    """Tree holding every sample key mapped to its insertion rank, from 1."""
    return Tst.from_pairs((key, rank) for rank, key in enumerate(SAMPLE_KEYS, 1))


class TreeTestHelper:
    """Public test fixture for structural verification.

    Checks every node of a tree against the rules the map relies on, so test
    suites can assert the tree is still well formed after a sequence of
    mutations.

    Example:
        tree = sample_tree()
        tree.remove("ab")
        helper = TreeTestHelper(tree)
        helper.verify()
        assert helper.get_summary()['values'] == 15
    """

    def __init__(self, tree: Tst):
        """Initialize with the tree to inspect.

        Args:
            tree: Tree to verify
        """
        self._tree = tree
        self._adapter = NodeAdapter(tree)

    def verify(self) -> None:
        """Check every node and every horizontal chain of the tree.

        Raises:
            InvariantViolation: On the first rule found broken
        """
        for node in self._adapter.iter_nodes():
            node.verify_count()
            node.verify_shape()

        self._verify_chains()

    def _verify_chains(self) -> None:
        # (node, exclusive lower bound, exclusive upper bound)
        stack: List[Tuple[Optional[Node], Optional[str], Optional[str]]] = [
            (self._adapter.root(), None, None)
        ]

        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue

            if (low is not None and node.label <= low) or (high is not None and node.label >= high):
                raise InvariantViolation(
                    f"Node {node!r} out of order between {low!r} and {high!r}"
                )

            stack.append((node.left, low, node.label))
            stack.append((node.right, node.label, high))
            # Middle child starts a fresh chain at the next key position
            stack.append((node.middle, None, None))

    def is_valid(self) -> bool:
        """Same as ``verify`` but returns a flag instead of raising."""
        try:
            self.verify()
        except InvariantViolation:
            return False
        return True

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - nodes: Total number of nodes
            - values: Number of nodes holding a value
            - leaves: Nodes without any child
            - root_count: Cached count at the root (0 for an empty tree)
        """
        nodes = values = leaves = 0

        for node in self._adapter.iter_nodes():
            nodes += 1
            if node.has_value:
                values += 1
            if self._adapter.is_leaf(node):
                leaves += 1

        root = self._adapter.root()
        return {
            'nodes': nodes,
            'values': values,
            'leaves': leaves,
            'root_count': root.count if root is not None else 0,
        }

    def keys(self) -> List[str]:
        """All keys of the tree in ascending order."""
        return [key for key, _ in self._tree.items()]
