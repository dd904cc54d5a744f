"""NodeAdapter: read-only structural view of a tree for external tools.

Renderers (Graphviz dumps, debuggers, visualizers) need to see the nodes
themselves, which the map interface of ``Tst`` deliberately hides. The
adapter exposes exactly what such a tool needs: a stable identity per node,
its label, whether it stores a value, and its three tagged children.
"""

from typing import Any, Dict, Iterator, Optional, Tuple, TYPE_CHECKING

from .node import Node

if TYPE_CHECKING:
    from ..tree import Tst


CHILD_TAGS = ('left', 'middle', 'right')


class NodeAdapter:
    """Navigates the nodes of a ``Tst`` without mutating it.

    Identifiers are assigned on first sight as ``"N0"``, ``"N1"``, ... and
    stay the same for the lifetime of the adapter, so edges can reference
    nodes that were described earlier. They are keyed by object identity, so
    an adapter should not outlive mutations of its tree.

    Example:
        >>> adapter = NodeAdapter(tree)
        >>> for node in adapter.iter_nodes():
        ...     for tag, child in adapter.get_children(node):
        ...         print(adapter.identifier(node), tag, adapter.identifier(child))
    """

    def __init__(self, tree: "Tst"):
        self._tree = tree
        self._ids: Dict[int, str] = {}

    def root(self) -> Optional[Node]:
        """Root node of the tree, ``None`` if the tree is empty."""
        return self._tree._root

    def identifier(self, node: Node) -> str:
        """Stable identifier for ``node`` within this adapter."""
        key = id(node)
        node_id = self._ids.get(key)
        if node_id is None:
            node_id = f"N{len(self._ids)}"
            self._ids[key] = node_id
        return node_id

    def get_children(self, node: Node) -> Iterator[Tuple[str, Node]]:
        """Yield ``(tag, child)`` for each existing child, tags in left, middle, right order."""
        for tag in CHILD_TAGS:
            child = getattr(node, tag)
            if child is not None:
                yield tag, child

    def is_leaf(self, node: Node) -> bool:
        return node.left is None and node.middle is None and node.right is None

    def metadata(self, node: Node) -> Dict[str, Any]:
        """Label, value flag and subtree value count of ``node``."""
        return {
            'id': self.identifier(node),
            'label': node.label,
            'has_value': node.has_value,
            'count': node.count,
        }

    def iter_nodes(self) -> Iterator[Node]:
        """Pre-order walk over every node: node, then left, middle, right."""
        root = self.root()
        if root is None:
            return

        stack = [root]
        while stack:
            node = stack.pop()
            yield node
            for tag in reversed(CHILD_TAGS):
                child = getattr(node, tag)
                if child is not None:
                    stack.append(child)
