"""Node model for TernaryTreeLib.

A ternary search tree is built from a single node type. Each node holds one
character of one or more keys, an optional value, and three children:

- ``left`` / ``right`` form the horizontal chain of nodes sharing the same key
  position, ordered by label like a binary search tree
- ``middle`` advances to the next character of the key

The ``count`` field caches the number of values stored in the subtree rooted
at the node, which keeps ``len()`` constant-time and drives statistics.
"""

from typing import Any, Optional


class _Empty:
    """Marker type for a node that stores no value.

    ``None`` is a perfectly valid value to store in a tree, so absence needs
    its own marker.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty()


class InvariantViolation(AssertionError):
    """Raised when a structural invariant of the tree does not hold.

    This signals a defect in the implementation, never a condition that
    callers are expected to handle.
    """
    pass


class Node:
    """One character position along one or more keys.

    Nodes are plain data containers. All navigation and repair logic lives in
    ``core.operations``, the traversers and the iterators.
    """

    __slots__ = ("label", "value", "left", "middle", "right", "count")

    def __init__(self, label: str):
        self.label = label
        self.value: Any = EMPTY
        self.left: Optional["Node"] = None
        self.middle: Optional["Node"] = None
        self.right: Optional["Node"] = None
        self.count = 0

    @property
    def has_value(self) -> bool:
        """True if some key ends at this node."""
        return self.value is not EMPTY

    def take_value(self) -> Any:
        """Clear the stored value and return it (``EMPTY`` if there was none)."""
        old_value = self.value
        self.value = EMPTY
        return old_value

    def verify_count(self) -> None:
        """Check the cached count against children and own value.

        Raises:
            InvariantViolation: If the count is inconsistent
        """
        expected = (
            link_count(self.left)
            + link_count(self.middle)
            + link_count(self.right)
            + (1 if self.has_value else 0)
        )
        if self.count != expected:
            raise InvariantViolation(
                f"Node {self!r} has count {self.count}, expected {expected}"
            )

    def verify_shape(self) -> None:
        """Check that the node lies on at least one key.

        Raises:
            InvariantViolation: If the node has neither value nor middle child
        """
        if not self.has_value and self.middle is None:
            raise InvariantViolation(
                f"Node {self!r} has neither a value nor a middle child"
            )

    def __repr__(self) -> str:
        value_box = "[x]" if self.has_value else "[ ]"
        return f"{value_box}-{self.label}"


def link_count(node: Optional[Node]) -> int:
    """Number of values stored under an optional child link."""
    return node.count if node is not None else 0


class ValueRef:
    """Writable handle on the value stored in a node.

    Handed out by ``Tst.get_mut`` and by the ``*_mut`` visitors so callers
    can replace a value in place, including immutable ones::

        ref = tree.get_mut("foo")
        if ref is not None:
            ref.value += 1

    Writing through the handle never changes the shape of the tree. A handle
    is only valid until the next ``insert`` or ``remove`` on the tree: removal
    may transplant another key into the node it points at.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node):
        self._node = node

    @property
    def value(self) -> Any:
        return self._node.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._node.value = new_value

    def __repr__(self) -> str:
        return f"ValueRef({self._node.value!r})"
