"""Double-ended iterators for TernaryTreeLib.

The iterators replay the orderings of ``core.traverser`` without recursion
and without generators. Each direction keeps an explicit stack of frames
``(node, action, state)`` mirroring the call frames a recursive in-order walk
would hold at the point it was interrupted:

- ``action`` is what remains to be done at ``node`` (descend left, visit,
  descend middle, descend right)
- ``state`` is the search cursor carried by the frame (``None`` for a plain
  walk, a tuple for neighbor and crossword searches)

The forward stack drives ``__next__`` in ascending key order, the backward
stack drives ``next_back`` in descending order. Both can be interleaved
freely; when they meet on the same node (by identity, since values may
repeat) both stacks are dropped so no value is produced twice.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

from .node import Node
from .operations import find_complete_root
from .traverser import check_range


class IteratorAction(Enum):
    """What remains to be done at a node of an interrupted walk."""
    GO_LEFT = "go_left"
    VISIT = "visit"
    GO_MIDDLE = "go_middle"
    GO_RIGHT = "go_right"


GO_LEFT = IteratorAction.GO_LEFT
VISIT = IteratorAction.VISIT
GO_MIDDLE = IteratorAction.GO_MIDDLE
GO_RIGHT = IteratorAction.GO_RIGHT

Frame = Tuple[Node, IteratorAction, Any]

# Returned by _advance when the middle child must not be entered
_PRUNED = object()


class TstIterator:
    """Double-ended iterator over every value of a tree.

    Values come in ascending key order from ``next()`` and in descending
    order from ``next_back()``. After either call, ``current_key()`` or
    ``current_key_back()`` rebuild the key of the value just returned from
    the frames left on the corresponding stack.

    Example:
        >>> it = tree.iter()
        >>> first = next(it)
        >>> last = it.next_back()
        >>> it.current_key(), it.current_key_back()
        ('bar', 'foo')

    Subclasses adapt the walk through four hooks: ``_descend_left``,
    ``_descend_right``, ``_accepts`` and ``_advance``.
    """

    def __init__(self, root: Optional[Node], state: Any = None):
        """Seed both stacks at ``root``.

        Args:
            root: Root of the (sub)tree to walk
            state: Initial search cursor for the root frame
        """
        self._todo_i: List[Frame] = []
        self._last_i: Optional[Node] = None

        self._todo_j: List[Frame] = []
        self._last_j: Optional[Node] = None

        if root is not None:
            self._todo_i.append((root, GO_LEFT, state))
            self._todo_j.append((root, GO_RIGHT, state))

    # Search hooks, the plain walk accepts everything

    def _descend_left(self, node: Node, state: Any) -> bool:
        return True

    def _descend_right(self, node: Node, state: Any) -> bool:
        return True

    def _accepts(self, node: Node, state: Any) -> bool:
        return True

    def _advance(self, node: Node, state: Any) -> Any:
        """Cursor for the middle child of ``node``, or ``_PRUNED``."""
        return state

    # Iteration

    def __iter__(self) -> "TstIterator":
        return self

    def __next__(self) -> Any:
        todo = self._todo_i

        while todo:
            node, action, state = todo.pop()

            if action is GO_LEFT:
                todo.append((node, VISIT, state))

                if node.left is not None and self._descend_left(node, state):
                    todo.append((node.left, GO_LEFT, state))

            elif action is VISIT:
                if node is self._last_j:
                    self._close()
                    break

                todo.append((node, GO_MIDDLE, state))

                if node.has_value and self._accepts(node, state):
                    self._last_i = node
                    return node.value

            elif action is GO_MIDDLE:
                todo.append((node, GO_RIGHT, state))

                if node.middle is not None:
                    child_state = self._advance(node, state)
                    if child_state is not _PRUNED:
                        todo.append((node.middle, GO_LEFT, child_state))

            else:
                if node.right is not None and self._descend_right(node, state):
                    todo.append((node.right, GO_LEFT, state))

        raise StopIteration

    def next_back(self) -> Any:
        """Return the next value from the end, in descending key order.

        Raises:
            StopIteration: When the values are exhausted or both ends met
        """
        todo = self._todo_j

        while todo:
            node, action, state = todo.pop()

            if action is GO_RIGHT:
                todo.append((node, GO_MIDDLE, state))

                if node.right is not None and self._descend_right(node, state):
                    todo.append((node.right, GO_RIGHT, state))

            elif action is VISIT:
                if node is self._last_i:
                    self._close()
                    break

                todo.append((node, GO_LEFT, state))

                if node.has_value and self._accepts(node, state):
                    self._last_j = node
                    return node.value

            elif action is GO_MIDDLE:
                todo.append((node, VISIT, state))

                if node.middle is not None:
                    child_state = self._advance(node, state)
                    if child_state is not _PRUNED:
                        todo.append((node.middle, GO_RIGHT, child_state))

            else:
                if node.left is not None and self._descend_left(node, state):
                    todo.append((node.left, GO_RIGHT, state))

        raise StopIteration

    def __reversed__(self) -> Iterator[Any]:
        """Backward view sharing this iterator's state."""
        return BackwardView(self)

    def _close(self) -> None:
        self._todo_i.clear()
        self._todo_j.clear()

    # Key reconstruction

    def current_key(self) -> str:
        """Key of the value last returned by ``next()``."""
        return "".join(
            node.label for node, action, _ in self._todo_i
            if action is GO_MIDDLE or action is GO_RIGHT
        )

    def current_key_back(self) -> str:
        """Key of the value last returned by ``next_back()``."""
        return "".join(
            node.label for node, action, _ in self._todo_j
            if action is VISIT or action is GO_LEFT
        )


class BackwardView:
    """Python iterator protocol over ``next_back`` of a double-ended iterator.

    Returned by ``reversed(it)``; consuming it advances the backward end of
    the underlying iterator.
    """

    def __init__(self, it: TstIterator):
        self._it = it

    def __iter__(self) -> "BackwardView":
        return self

    def __next__(self) -> Any:
        return self._it.next_back()

    def current_key(self) -> str:
        return self._it.current_key_back()


class CompleteIterator(TstIterator):
    """Double-ended iterator over every value whose key extends a prefix."""

    def __init__(self, root: Optional[Node], prefix: str):
        super().__init__(find_complete_root(root, prefix))
        self.prefix = prefix

    def current_key(self) -> str:
        return self.prefix + super().current_key()

    def current_key_back(self) -> str:
        return self.prefix + super().current_key_back()


class NeighborIterator(TstIterator):
    """Double-ended iterator over values close to a key (Hamming distance).

    Frame state is ``(index, tail_len, budget)``: position of the query
    character compared at this level, query characters left after it, and
    mismatches still allowed. Side links are skipped only once the budget is
    spent and the label ordering rules that side out.
    """

    def __init__(self, root: Optional[Node], key: str, range: int):
        check_range(range)
        self.key = key
        tail_len = len(key) - 1 if key else 0
        super().__init__(root, (0, tail_len, range))

    def _label(self, index: int) -> Optional[str]:
        return self.key[index] if index < len(self.key) else None

    def _delta(self, node: Node, index: int) -> int:
        return 0 if self._label(index) == node.label else 1

    def _descend_left(self, node: Node, state: Tuple[int, int, int]) -> bool:
        index, _, budget = state
        label = self._label(index)
        return not (label is not None and budget == 0 and label >= node.label)

    def _descend_right(self, node: Node, state: Tuple[int, int, int]) -> bool:
        index, _, budget = state
        label = self._label(index)
        return not (label is not None and budget == 0 and label <= node.label)

    def _accepts(self, node: Node, state: Tuple[int, int, int]) -> bool:
        index, tail_len, budget = state
        delta = self._delta(node, index)
        return budget >= delta and tail_len <= budget - delta

    def _advance(self, node: Node, state: Tuple[int, int, int]) -> Any:
        index, tail_len, budget = state
        delta = self._delta(node, index)

        if budget < delta:
            return _PRUNED

        new_len = tail_len - 1 if tail_len > 0 else tail_len
        return (index + 1, new_len, budget - delta)


class CrosswordIterator(TstIterator):
    """Double-ended iterator over values matching a wildcard pattern.

    Frame state is ``(index, tail_len)``: position of the pattern character
    compared at this level and pattern characters left after it.
    """

    def __init__(self, root: Optional[Node], pattern: str, joker: str):
        if len(joker) != 1:
            raise ValueError(f"Joker must be a single character, got {joker!r}")
        self.pattern = pattern
        self.joker = joker
        # An empty pattern matches nothing: leave both stacks empty
        super().__init__(root if pattern else None, (0, len(pattern) - 1))

    def _pattern_char(self, index: int) -> Tuple[bool, str]:
        label = self.pattern[index]
        return label == self.joker, label

    def _descend_left(self, node: Node, state: Tuple[int, int]) -> bool:
        wild, label = self._pattern_char(state[0])
        return wild or label < node.label

    def _descend_right(self, node: Node, state: Tuple[int, int]) -> bool:
        wild, label = self._pattern_char(state[0])
        return wild or label > node.label

    def _accepts(self, node: Node, state: Tuple[int, int]) -> bool:
        index, tail_len = state
        wild, label = self._pattern_char(index)
        return tail_len == 0 and (wild or label == node.label)

    def _advance(self, node: Node, state: Tuple[int, int]) -> Any:
        index, tail_len = state
        wild, label = self._pattern_char(index)

        if (wild or label == node.label) and tail_len > 0:
            return (index + 1, tail_len - 1)
        return _PRUNED
