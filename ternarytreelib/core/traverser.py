"""Search traversers for TernaryTreeLib.

Traversers implement the eager, callback-driven walks over a ternary search
tree. Each one visits matching nodes strictly in ascending key order and
hands them to an ``emit`` callable; the tree decides whether callers see the
value itself or a writable ``ValueRef``. Pending work lives on explicit
stacks, so long horizontal chains never deepen the Python call stack.

The double-ended iterators in ``core.iterator`` replay exactly the same
orderings and pruning rules one value at a time.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from .node import Node
from .operations import find_complete_root, find_node

Emit = Callable[[Node], None]


def check_range(range) -> None:
    """Validate a neighbor mismatch budget.

    Raises:
        TypeError: If ``range`` is not an int (bools are rejected too)
        ValueError: If ``range`` is negative
    """
    if not isinstance(range, int) or isinstance(range, bool):
        raise TypeError(f"Neighbor range must be an int, got {range!r}")
    if range < 0:
        raise ValueError(f"Neighbor range must be >= 0, got {range}")


class ValueTraverser(ABC):
    """Abstract base class for search traversals.

    A traverser is configured once with its search parameters and can then
    walk any number of trees.
    """

    @abstractmethod
    def traverse(self, root: Optional[Node], emit: Emit) -> None:
        """Walk the tree rooted at ``root`` and emit every matching node.

        Args:
            root: Root of the tree (``None`` for an empty tree)
            emit: Called once per matching node, in ascending key order
        """
        pass

    def _walk_all(self, root: Optional[Node], emit: Emit) -> None:
        """Plain in-order walk: left, own value, middle, right.

        Pending work is kept on an explicit stack, pushed in reverse order,
        with ``(node, True)`` standing for "emit this node".
        """
        stack: List[Tuple[Optional[Node], bool]] = [(root, False)]

        while stack:
            node, ready = stack.pop()

            if ready:
                emit(node)
                continue
            if node is None:
                continue

            stack.append((node.right, False))
            stack.append((node.middle, False))
            if node.has_value:
                stack.append((node, True))
            stack.append((node.left, False))


class FullTraverser(ValueTraverser):
    """Visits every value of the tree."""

    def traverse(self, root: Optional[Node], emit: Emit) -> None:
        self._walk_all(root, emit)


class CompleteTraverser(ValueTraverser):
    """Visits every value whose key strictly extends a prefix.

    An empty prefix visits the whole tree.
    """

    def __init__(self, prefix: str):
        self.prefix = prefix

    def traverse(self, root: Optional[Node], emit: Emit) -> None:
        self._walk_all(find_complete_root(root, self.prefix), emit)


class NeighborTraverser(ValueTraverser):
    """Visits every value whose key is within a Hamming distance of a query.

    Keys of a different length are charged one mismatch per missing or extra
    trailing character. The walk carries the remaining mismatch budget and
    the remaining query length: side links keep both, the middle link uses up
    one query character and one unit of budget unless the label matches. A
    value is reported when the remaining query length fits in the remaining
    budget. Once the budget is spent, the rest of the query must match
    exactly, which is a plain lookup.
    """

    def __init__(self, key: str, range: int):
        check_range(range)
        self.key = key
        self.range = range

    def traverse(self, root: Optional[Node], emit: Emit) -> None:
        key = self.key
        tail_len = len(key) - 1 if key else 0

        # (node, index, tail_len, budget, ready); ready frames emit their node
        stack: List[Tuple[Optional[Node], int, int, int, bool]] = [
            (root, 0, tail_len, self.range, False)
        ]

        while stack:
            node, index, tail_len, budget, ready = stack.pop()

            if ready:
                emit(node)
                continue

            if budget == 0:
                if index < len(key):
                    found = find_node(node, key, index)
                    if found is not None and found.has_value:
                        emit(found)
                continue

            if node is None:
                continue

            label = key[index] if index < len(key) else None
            new_budget = budget if label == node.label else budget - 1
            new_len = tail_len - 1 if tail_len > 0 else tail_len

            stack.append((node.right, index, tail_len, budget, False))
            stack.append((node.middle, index + 1, new_len, new_budget, False))
            if node.has_value and tail_len <= new_budget:
                stack.append((node, index, tail_len, budget, True))
            stack.append((node.left, index, tail_len, budget, False))


class CrosswordTraverser(ValueTraverser):
    """Visits every value whose key matches a fixed-length wildcard pattern.

    Each ``joker`` character in the pattern stands for any single character;
    other characters must match exactly. Keys of another length never match
    and an empty pattern matches nothing.
    """

    def __init__(self, pattern: str, joker: str):
        if len(joker) != 1:
            raise ValueError(f"Joker must be a single character, got {joker!r}")
        self.pattern = pattern
        self.joker = joker

    def traverse(self, root: Optional[Node], emit: Emit) -> None:
        pattern = self.pattern
        if not pattern:
            return

        last = len(pattern) - 1
        stack: List[Tuple[Optional[Node], int, bool]] = [(root, 0, False)]

        while stack:
            node, index, ready = stack.pop()

            if ready:
                emit(node)
                continue
            if node is None:
                continue

            label = pattern[index]
            wild = label == self.joker

            if wild or label > node.label:
                stack.append((node.right, index, False))

            if wild or label == node.label:
                if index < last:
                    stack.append((node.middle, index + 1, False))
                elif node.has_value:
                    stack.append((node, index, True))

            if wild or label < node.label:
                stack.append((node.left, index, False))


# Factory function for creating traversers by mode name
def create_traverser(mode: str, key: str = "", range: int = 0,
                     joker: str = "?") -> ValueTraverser:
    """Create a traverser instance by mode name.

    Args:
        mode: Name of the search mode (full, complete, neighbor, crossword)
        key: Prefix, query key or pattern depending on the mode
        range: Mismatch budget for neighbor searches
        joker: Wildcard character for crossword searches

    Returns:
        ValueTraverser instance

    Raises:
        ValueError: If mode name is not recognized
    """
    mode_lower = mode.lower()

    if mode_lower == 'full':
        return FullTraverser()
    if mode_lower == 'complete':
        return CompleteTraverser(key)
    if mode_lower == 'neighbor':
        return NeighborTraverser(key, range)
    if mode_lower == 'crossword':
        return CrosswordTraverser(key, joker)

    raise ValueError(
        f"Unknown search mode: {mode}. "
        f"Choose from: full, complete, neighbor, crossword"
    )
