"""Point operations on ternary search tree links.

Every function here works on an optional node (a "link") and a key cursor
``(key, index)`` where ``key[index]`` is the character being placed. Functions
that may restructure the tree return the node that must take the link's slot,
so callers write ``root, old = insert_node(root, key, 0, value)``.

All walks are loops: horizontal chains can grow as long as the alphabet when
keys arrive in sorted order, so nothing here recurses. Nodes passed on the
way down are remembered in a path list for the count fix-up.
"""

from typing import Any, List, Optional, Tuple

from .node import EMPTY, InvariantViolation, Node, link_count

# (node, name of the child link followed from it)
PathEntry = Tuple[Node, str]


def insert_node(node: Optional[Node], key: str, index: int, value: Any) -> Tuple[Node, Any]:
    """Insert ``value`` under ``key[index:]`` starting at ``node``.

    Args:
        node: Current link (``None`` creates a node labeled ``key[index]``)
        key: Full key, must be non-empty
        index: Position of the character to place at this level
        value: Value to store

    Returns:
        Tuple of (node for this slot, previous value or ``EMPTY``)
    """
    if node is None:
        node = Node(key[index])

    top = node
    last = len(key) - 1
    path: List[Node] = []

    while True:
        path.append(node)
        label = key[index]

        if label < node.label:
            if node.left is None:
                node.left = Node(label)
            node = node.left
        elif label > node.label:
            if node.right is None:
                node.right = Node(label)
            node = node.right
        elif index == last:
            old_value = node.value
            node.value = value
            break
        else:
            index += 1
            if node.middle is None:
                node.middle = Node(key[index])
            node = node.middle

    if old_value is EMPTY:
        for passed in path:
            passed.count += 1

    for passed in reversed(path):
        passed.verify_count()

    return top, old_value


def find_node(node: Optional[Node], key: str, index: int = 0) -> Optional[Node]:
    """Return the node where ``key[index:]`` ends, or ``None``.

    The returned node may not hold a value; callers check ``has_value``.
    """
    last = len(key) - 1

    while node is not None:
        label = key[index]

        if label < node.label:
            node = node.left
        elif label > node.label:
            node = node.right
        elif index == last:
            return node
        else:
            node = node.middle
            index += 1

    return None


def remove_leftmost(node: Node) -> Tuple[Optional[Node], Node]:
    """Detach the leftmost node of the horizontal chain rooted at ``node``.

    The detached node's ``right`` subtree is promoted into its former slot,
    so the detached node keeps only its label, value and middle subtree.

    Returns:
        Tuple of (node for this slot, detached node)
    """
    top = node
    ancestors: List[Node] = []

    while node.left is not None:
        ancestors.append(node)
        node = node.left

    greater = node.right
    node.right = None
    node.count -= link_count(greater)
    node.verify_count()

    if not ancestors:
        return greater, node

    ancestors[-1].left = greater
    for ancestor in reversed(ancestors):
        ancestor.count -= node.count
        ancestor.verify_count()

    return top, node


def _repair(node: Node) -> Optional[Node]:
    """Account for one value gone at or below ``node``, return its slot's new node.

    A node left with neither value nor middle child is unlinked from its
    horizontal chain. With two side children, the chain successor (leftmost
    node of ``right``) is detached and its label, value and middle subtree are
    moved into ``node``, which keeps its own ``left``/``right``.
    """
    # Node is only needed for as long as it is part of some key
    if node.has_value or node.middle is not None:
        node.count -= 1
        node.verify_count()
        return node

    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    node.right, successor = remove_leftmost(node.right)
    if successor.count != link_count(successor.middle) + (1 if successor.has_value else 0):
        raise InvariantViolation(f"Successor {successor!r} kept side children")

    node.label = successor.label
    node.value = successor.value
    node.middle = successor.middle
    node.count = successor.count + link_count(node.left) + link_count(node.right)
    node.verify_count()
    return node


def remove_node(node: Optional[Node], key: str, index: int) -> Tuple[Optional[Node], Any]:
    """Remove the value stored under ``key[index:]`` starting at ``node``.

    Returns:
        Tuple of (node for this slot, removed value or ``EMPTY``)
    """
    top = node
    last = len(key) - 1
    path: List[PathEntry] = []

    while node is not None:
        node.verify_shape()
        label = key[index]

        if label < node.label:
            path.append((node, 'left'))
            node = node.left
        elif label > node.label:
            path.append((node, 'right'))
            node = node.right
        elif index == last:
            break
        else:
            path.append((node, 'middle'))
            node = node.middle
            index += 1

    if node is None:
        return top, EMPTY

    removed = node.take_value()
    if removed is EMPTY:
        return top, EMPTY

    replacement = _repair(node)

    for parent, link in reversed(path):
        setattr(parent, link, replacement)

        if link == 'middle':
            replacement = _repair(parent)
        else:
            parent.count -= 1
            parent.verify_count()
            replacement = parent

    return replacement, removed


def find_complete_root(root: Optional[Node], prefix: str) -> Optional[Node]:
    """Return the subtree holding every key that strictly extends ``prefix``.

    That is the middle child of the node where ``prefix`` ends. A key equal to
    ``prefix`` lives on that node itself and is therefore excluded.

    Args:
        root: Root of the tree
        prefix: Prefix to consume; empty means the whole tree

    Returns:
        Subtree root, or ``None`` if the prefix is not in the tree
    """
    if not prefix:
        return root

    node = find_node(root, prefix)
    return node.middle if node is not None else None
