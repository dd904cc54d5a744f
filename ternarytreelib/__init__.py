"""TernaryTreeLib - String-keyed maps with prefix, Hamming and pattern lookups.

TernaryTreeLib stores key/value pairs in a ternary search tree and answers
the questions a hash map cannot: which keys start with a prefix, which keys
are close to a string, which keys match a crossword pattern.

Choose your interface:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Map type:
    from ternarytreelib import Tst

Functional API:
    from ternarytreelib import build_tree, search
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import EMPTY, InvariantViolation, Node, ValueRef
from .core.iterator import (
    TstIterator,
    BackwardView,
    CompleteIterator,
    NeighborIterator,
    CrosswordIterator,
)
from .core.collector import Stats
from .core.adapter import NodeAdapter
from .tree import Tst

# Configuration and planning
from .config import SearchConfig, SearchMode, Direction
from .planning import SearchPlan, InvalidSearchError

# High-level API
from .api import (
    build_tree,
    search,
    search_items,
    count_matches,
    find_keys,
    get_tree_stats,
)

# Library code logs only; applications configure handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Map type
    "Tst",
    "ValueRef",
    "EMPTY",
    "Node",
    "InvariantViolation",
    # Iterators
    "TstIterator",
    "BackwardView",
    "CompleteIterator",
    "NeighborIterator",
    "CrosswordIterator",
    # Statistics and introspection
    "Stats",
    "NodeAdapter",
    # Configuration
    "SearchConfig",
    "SearchMode",
    "Direction",
    "SearchPlan",
    "InvalidSearchError",
    # High-level API
    "build_tree",
    "search",
    "search_items",
    "count_matches",
    "find_keys",
    "get_tree_stats",
]
