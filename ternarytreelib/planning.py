"""Search planning for TernaryTreeLib.

The SearchPlan validates a SearchConfig once, up front, and assembles the
traverser and iterator that implement it. Invalid configurations fail before
any node of the tree is touched.
"""

import logging
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .config import Direction, SearchConfig, SearchMode
from .core.iterator import (
    TstIterator,
    CompleteIterator,
    NeighborIterator,
    CrosswordIterator,
)
from .core.traverser import ValueTraverser, create_traverser

if TYPE_CHECKING:
    from .tree import Tst

logger = logging.getLogger(__name__)


class InvalidSearchError(Exception):
    """Raised when a search configuration cannot be executed."""
    pass


class SearchPlan:
    """Validated execution plan for a search over a ``Tst``.

    The plan is the bridge between what the user asked for (SearchConfig)
    and the components that do the work: an eager traverser for
    ``visit()`` and a double-ended iterator for ``execute()``.
    """

    def __init__(self, config: SearchConfig, tree: "Tst"):
        """Create and validate a search plan.

        Args:
            config: Search configuration
            tree: Tree to search

        Raises:
            InvalidSearchError: If the configuration is invalid
        """
        self.config = config
        self.tree = tree

        config_errors = config.validate()
        if config_errors:
            raise InvalidSearchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()

        # Track execution state
        self.values_delivered = 0

        logger.debug("Created search plan: %s", self.describe())

    def _select_traverser(self) -> ValueTraverser:
        config = self.config
        return create_traverser(
            config.mode.value,
            key=config.key,
            range=config.range,
            joker=config.joker,
        )

    def create_iterator(self) -> TstIterator:
        """Create a fresh double-ended iterator for this search."""
        config = self.config
        root = self.tree._root

        if config.mode == SearchMode.COMPLETE:
            return CompleteIterator(root, config.key)
        if config.mode == SearchMode.NEIGHBOR:
            return NeighborIterator(root, config.key, config.range)
        if config.mode == SearchMode.CROSSWORD:
            return CrosswordIterator(root, config.key, config.joker)
        return TstIterator(root)

    def visit(self, callback: Callable[[Any], Any]) -> None:
        """Eagerly call ``callback`` on every matching value, in key order.

        ``direction`` and ``with_keys`` do not apply to eager delivery.
        """
        def emit(node):
            self.values_delivered += 1
            callback(node.value)

        self.traverser.traverse(self.tree._root, emit)

    def execute(self) -> Iterator[Any]:
        """Lazily deliver matching values in the configured direction.

        Yields:
            Values, or ``(key, value)`` tuples when ``with_keys`` is set
        """
        it = self.create_iterator()

        if self.config.direction == Direction.BACKWARD:
            step, current_key = it.next_back, it.current_key_back
        else:
            step, current_key = it.__next__, it.current_key

        while True:
            try:
                value = step()
            except StopIteration:
                return

            self.values_delivered += 1

            if self.config.with_keys:
                yield current_key(), value
            else:
                yield value

    def describe(self) -> str:
        """Get human-readable description of the plan.

        Useful for debugging and logging.
        """
        config = self.config
        parts = [f"mode={config.mode.value}"]

        if config.mode != SearchMode.FULL:
            parts.append(f"key={config.key!r}")
        if config.mode == SearchMode.NEIGHBOR:
            parts.append(f"range={config.range}")
        if config.mode == SearchMode.CROSSWORD:
            parts.append(f"joker={config.joker!r}")

        parts.append(f"direction={config.direction.value}")
        if config.with_keys:
            parts.append("with_keys")

        return ", ".join(parts)
