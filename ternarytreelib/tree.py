"""The Tst map type.

A ``Tst`` stores key/value pairs in a ternary search tree. It behaves like a
string-keyed map, and adds lookups that a hash map cannot answer:

- all values whose key begins with some prefix (``complete``)
- all values whose key is close to some string (``neighbor``, Hamming
  distance)
- all values whose key matches a pattern with a wildcard (``crossword``)

Each lookup comes as an eager visitor (``visit_*``) that calls back with
values, a ``*_mut`` visitor that calls back with writable ``ValueRef``
handles, and a double-ended iterator (``iter*``) that can also rebuild the
key of every value it returns.

Example:
    >>> tree = Tst.from_pairs([("foo", 1), ("bar", 2), ("baz", 3)])
    >>> tree.get("bar")
    2
    >>> list(tree.iter_complete("ba"))
    [2, 3]
    >>> found = []
    >>> tree.visit_crossword_values("?a?", "?", found.append)
    >>> found
    [2, 3]
"""

import logging
import sys
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .core.node import EMPTY, Node, ValueRef
from .core.operations import find_node, insert_node, remove_node
from .core.traverser import (
    ValueTraverser,
    FullTraverser,
    CompleteTraverser,
    NeighborTraverser,
    CrosswordTraverser,
)
from .core.iterator import (
    TstIterator,
    CompleteIterator,
    NeighborIterator,
    CrosswordIterator,
)
from .core.collector import Stats, StatsCollector

logger = logging.getLogger(__name__)


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Tst keys must be str, not {type(key).__name__}")


class Tst:
    """String-keyed map backed by a ternary search tree.

    Values are returned in ascending lexicographic order of their keys by
    every traversal. Any object, including ``None``, can be stored as a
    value. Empty keys cannot be stored: they do not correspond to any node
    path.

    Not thread-safe; concurrent access must be serialized by the caller.
    """

    __slots__ = ("_root",)

    def __init__(self):
        self._root: Optional[Node] = None

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Any]]) -> "Tst":
        """Build a tree by inserting each ``(key, value)`` pair in order.

        Later pairs overwrite earlier ones with the same key.
        """
        tree = cls()
        for key, value in pairs:
            tree.insert(key, value)
        logger.debug("Built tree with %d values", len(tree))
        return tree

    # Point operations

    def insert(self, key: str, value: Any) -> Any:
        """Associate ``value`` with ``key``, returning the previous value.

        Args:
            key: Key to store; an empty key stores nothing
            value: Value to store

        Returns:
            The value previously associated with ``key`` or ``None``. For an
            empty key, ``value`` itself is handed back.
        """
        _check_key(key)

        if not key:
            return value

        self._root, old_value = insert_node(self._root, key, 0, value)
        return None if old_value is EMPTY else old_value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value associated with ``key``, or ``default``."""
        node = self._find(key)
        if node is None or not node.has_value:
            return default
        return node.value

    def get_mut(self, key: str) -> Optional[ValueRef]:
        """Return a writable handle on the value of ``key``, or ``None``.

        Example:
            >>> ref = tree.get_mut("foo")
            >>> if ref is not None:
            ...     ref.value += 1
        """
        node = self._find(key)
        if node is None or not node.has_value:
            return None
        return ValueRef(node)

    def remove(self, key: str, default: Any = None) -> Any:
        """Remove ``key`` and return its value, or ``default`` if absent."""
        _check_key(key)

        if not key:
            return default

        self._root, removed = remove_node(self._root, key, 0)
        return default if removed is EMPTY else removed

    def clear(self) -> None:
        """Delete every node and value stored in the tree."""
        logger.debug("Clearing tree with %d values", len(self))
        self._root = None

    def _find(self, key: str) -> Optional[Node]:
        _check_key(key)
        if not key:
            return None
        return find_node(self._root, key)

    def __len__(self) -> int:
        return self._root.count if self._root is not None else 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._find(key)
        return node is not None and node.has_value

    def __iter__(self) -> TstIterator:
        return self.iter()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)})"

    # Statistics

    def stat(self) -> Stats:
        """Walk the tree and return metrics about its nodes, keys and values.

        See ``core.collector.Stats`` for the available fields.
        """
        stats = StatsCollector().collect(self._root)

        stats.bytes.node = sys.getsizeof(Node(""))
        stats.bytes.total = sys.getsizeof(self) + stats.count.nodes * stats.bytes.node

        logger.debug(
            "Collected stats: %d nodes, %d values",
            stats.count.nodes, stats.count.values
        )
        return stats

    # Eager visitors

    def _visit(self, traverser: ValueTraverser, callback: Callable[[Any], Any]) -> None:
        traverser.traverse(self._root, lambda node: callback(node.value))

    def _visit_mut(self, traverser: ValueTraverser,
                   callback: Callable[[ValueRef], Any]) -> None:
        traverser.traverse(self._root, lambda node: callback(ValueRef(node)))

    def visit_values(self, callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` on every value, in ascending key order.

        ``iter()`` produces the same sequence lazily.
        """
        self._visit(FullTraverser(), callback)

    def visit_values_mut(self, callback: Callable[[ValueRef], Any]) -> None:
        """Call ``callback`` with a ``ValueRef`` on every value."""
        self._visit_mut(FullTraverser(), callback)

    def visit_complete_values(self, prefix: str, callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` on every value whose key strictly extends ``prefix``.

        A key is not a prefix of itself: with ``prefix="foo"`` the value of
        ``"foo"`` is not visited. An empty prefix visits every value.
        """
        _check_key(prefix)
        self._visit(CompleteTraverser(prefix), callback)

    def visit_complete_values_mut(self, prefix: str,
                                  callback: Callable[[ValueRef], Any]) -> None:
        _check_key(prefix)
        self._visit_mut(CompleteTraverser(prefix), callback)

    def visit_neighbor_values(self, key: str, range: int,
                              callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` on every value whose key is close to ``key``.

        Close means within a Hamming distance of ``range``, each missing or
        extra character counting as one mismatch. An empty ``key`` with a
        range of ``n`` visits every value whose key length is at most ``n``.

        Raises:
            TypeError: If ``range`` is not an int
            ValueError: If ``range`` is negative
        """
        _check_key(key)
        self._visit(NeighborTraverser(key, range), callback)

    def visit_neighbor_values_mut(self, key: str, range: int,
                                  callback: Callable[[ValueRef], Any]) -> None:
        _check_key(key)
        self._visit_mut(NeighborTraverser(key, range), callback)

    def visit_crossword_values(self, pattern: str, joker: str,
                               callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` on every value whose key matches ``pattern``.

        Each ``joker`` character in ``pattern`` stands for any character, so a
        pattern of ``n`` jokers visits every key of length ``n``. An empty
        pattern visits nothing.
        """
        _check_key(pattern)
        self._visit(CrosswordTraverser(pattern, joker), callback)

    def visit_crossword_values_mut(self, pattern: str, joker: str,
                                   callback: Callable[[ValueRef], Any]) -> None:
        _check_key(pattern)
        self._visit_mut(CrosswordTraverser(pattern, joker), callback)

    # Double-ended iterators

    def iter(self) -> TstIterator:
        """Double-ended iterator over every value.

        Example:
            >>> it = Tst.from_pairs([("foo", 1), ("bar", 2), ("baz", 3)]).iter()
            >>> next(it), it.next_back()
            (2, 1)
            >>> it.current_key(), it.current_key_back()
            ('bar', 'foo')
        """
        return TstIterator(self._root)

    def iter_complete(self, prefix: str) -> CompleteIterator:
        """Double-ended iterator over values whose key strictly extends ``prefix``."""
        _check_key(prefix)
        return CompleteIterator(self._root, prefix)

    def iter_neighbor(self, key: str, range: int) -> NeighborIterator:
        """Double-ended iterator over values whose key is within ``range`` of ``key``."""
        _check_key(key)
        return NeighborIterator(self._root, key, range)

    def iter_crossword(self, pattern: str, joker: str) -> CrosswordIterator:
        """Double-ended iterator over values whose key matches ``pattern``."""
        _check_key(pattern)
        return CrosswordIterator(self._root, pattern, joker)

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        it = self.iter()
        for value in it:
            yield it.current_key(), value
