"""High-level API for TernaryTreeLib.

This module provides simple, functional interfaces for common searches.
These functions wrap the SearchConfig / SearchPlan layer for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from .config import Direction, SearchConfig, SearchMode
from .planning import SearchPlan
from .tree import Tst


def build_tree(pairs: Iterable[Tuple[str, Any]]) -> Tst:
    """Build a tree from ``(key, value)`` pairs, inserted in order.

    Example:
        >>> tree = build_tree([("fo", 1), ("bar", 2), ("baz", 3), ("fooo", 4)])
        >>> len(tree)
        4
    """
    return Tst.from_pairs(pairs)


def search(
    tree: Tst,
    mode: Union[SearchMode, str] = SearchMode.FULL,
    key: str = "",
    range: int = 0,
    joker: str = "?",
    reverse: bool = False,
) -> Iterator[Any]:
    """Simple interface for searching a tree.

    This is the primary high-level function: it yields matching values
    lazily without dealing with configs and plans.

    Args:
        tree: Tree to search
        mode: Search mode (full, complete/prefix, neighbor/hamming,
            crossword/pattern/wildcard)
        key: Prefix, query key or pattern depending on the mode
        range: Maximum number of mismatches for neighbor searches
        joker: Wildcard character for crossword searches
        reverse: Deliver values in descending key order

    Yields:
        Matching values

    Example:
        >>> list(search(tree, "crossword", key="a?a"))
        ['aba', 'aca']
    """
    plan = SearchPlan(_build_config(mode, key, range, joker, reverse, False), tree)
    yield from plan.execute()


def search_items(
    tree: Tst,
    mode: Union[SearchMode, str] = SearchMode.FULL,
    key: str = "",
    range: int = 0,
    joker: str = "?",
    reverse: bool = False,
) -> Iterator[Tuple[str, Any]]:
    """Like ``search`` but yields ``(key, value)`` pairs.

    Example:
        >>> for found_key, value in search_items(tree, "prefix", key="ab"):
        ...     print(found_key, value)
    """
    plan = SearchPlan(_build_config(mode, key, range, joker, reverse, True), tree)
    yield from plan.execute()


def find_keys(tree: Tst, mode: Union[SearchMode, str] = SearchMode.FULL,
              **kwargs) -> List[str]:
    """Return the keys of every matching value, in ascending order."""
    return [found_key for found_key, _ in search_items(tree, mode, **kwargs)]


def count_matches(tree: Tst, mode: Union[SearchMode, str] = SearchMode.FULL,
                  **kwargs) -> int:
    """Count matching values, using the eager traverser.

    Args:
        tree: Tree to search
        mode: Search mode
        **kwargs: Search options (see ``search``)

    Returns:
        Number of matching values
    """
    reverse = kwargs.pop('reverse', False)
    config = _build_config(mode, with_keys=False, reverse=reverse, **kwargs)
    plan = SearchPlan(config, tree)

    count = 0

    def tally(_value):
        nonlocal count
        count += 1

    plan.visit(tally)
    return count


def get_tree_stats(tree: Tst) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with the fields of ``Tst.stat()`` flattened, plus
        ``total_values``, ``total_nodes`` and ``nodes_per_value``

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = tree.stat().as_dict()

    stats['total_nodes'] = stats['count']['nodes']
    stats['total_values'] = stats['count']['values']
    stats['nodes_per_value'] = (
        stats['total_nodes'] / stats['total_values']
        if stats['total_values'] > 0 else 0
    )

    return stats


# Helper functions

def _parse_mode(mode: Union[SearchMode, str]) -> SearchMode:
    """Parse search mode from string or enum.

    Args:
        mode: Mode as enum or string

    Returns:
        SearchMode enum value
    """
    if isinstance(mode, SearchMode):
        return mode

    # Map string names to enum values
    mode_map = {
        'full': SearchMode.FULL,
        'all': SearchMode.FULL,
        'complete': SearchMode.COMPLETE,
        'prefix': SearchMode.COMPLETE,
        'neighbor': SearchMode.NEIGHBOR,
        'hamming': SearchMode.NEIGHBOR,
        'crossword': SearchMode.CROSSWORD,
        'pattern': SearchMode.CROSSWORD,
        'wildcard': SearchMode.CROSSWORD,
    }

    mode_lower = mode.lower() if isinstance(mode, str) else str(mode)
    if mode_lower in mode_map:
        return mode_map[mode_lower]

    raise ValueError(f"Unknown search mode: {mode}")


def _build_config(mode: Union[SearchMode, str], key: str = "", range: int = 0,
                  joker: str = "?", reverse: bool = False,
                  with_keys: bool = False) -> SearchConfig:
    return SearchConfig(
        mode=_parse_mode(mode),
        key=key,
        range=range,
        joker=joker,
        direction=Direction.BACKWARD if reverse else Direction.FORWARD,
        with_keys=with_keys,
    )
