"""Core components of TernaryTreeLib."""

from .node import EMPTY, InvariantViolation, Node, ValueRef, link_count
from .traverser import (
    ValueTraverser,
    FullTraverser,
    CompleteTraverser,
    NeighborTraverser,
    CrosswordTraverser,
    create_traverser,
)
from .iterator import (
    IteratorAction,
    TstIterator,
    BackwardView,
    CompleteIterator,
    NeighborIterator,
    CrosswordIterator,
)
from .collector import (
    Stats,
    DistStat,
    KeyLenStat,
    CountStat,
    BytesStat,
    StatsCollector,
)
from .adapter import NodeAdapter

__all__ = [
    'EMPTY',
    'InvariantViolation',
    'Node',
    'ValueRef',
    'link_count',
    'ValueTraverser',
    'FullTraverser',
    'CompleteTraverser',
    'NeighborTraverser',
    'CrosswordTraverser',
    'create_traverser',
    'IteratorAction',
    'TstIterator',
    'BackwardView',
    'CompleteIterator',
    'NeighborIterator',
    'CrosswordIterator',
    'Stats',
    'DistStat',
    'KeyLenStat',
    'CountStat',
    'BytesStat',
    'StatsCollector',
    'NodeAdapter',
]
