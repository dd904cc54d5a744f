"""Statistics collection for TernaryTreeLib.

The StatsCollector walks every node once, read-only, and sums up how values
are distributed in the tree. The figures are mostly useful for tuning and
debugging: a tree built from sorted keys, for instance, shows long side
chains in ``dist[n].sides``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .node import Node


@dataclass
class DistStat:
    """How many values sit at a given distance from the root.

    - ``matches``: values reached through that many middle links + 1
      (number of keys of that length)
    - ``sides``: values reached through that many left/right links
    - ``depth``: values whose total depth (any link) + 1 is that number
    """
    matches: int = 0
    sides: int = 0
    depth: int = 0


@dataclass
class KeyLenStat:
    """Length of the shortest and longest keys (0 when the tree is empty)."""
    min: int = 0
    max: int = 0


@dataclass
class CountStat:
    """Total number of nodes, and number of nodes holding a value."""
    nodes: int = 0
    values: int = 0


@dataclass
class BytesStat:
    """Size of one node and of the whole structure, in bytes.

    Values themselves are not accounted for, only the node containers.
    """
    node: int = 0
    total: int = 0


@dataclass
class Stats:
    """Structural metrics of a tree, see ``Tst.stat()``."""
    dist: List[DistStat] = field(default_factory=list)
    key_len: KeyLenStat = field(default_factory=KeyLenStat)
    count: CountStat = field(default_factory=CountStat)
    bytes: BytesStat = field(default_factory=BytesStat)

    def as_dict(self) -> Dict[str, Any]:
        """Flatten into plain dictionaries and lists for reporting."""
        return {
            'dist': [
                {'matches': d.matches, 'sides': d.sides, 'depth': d.depth}
                for d in self.dist
            ],
            'key_len': {'min': self.key_len.min, 'max': self.key_len.max},
            'count': {'nodes': self.count.nodes, 'values': self.count.values},
            'bytes': {'node': self.bytes.node, 'total': self.bytes.total},
        }


class StatsCollector:
    """Collects ``Stats`` from a tree in one pass over every node.

    Byte sizes depend on the node type rather than on the walk, so they are
    left for the caller to fill in.
    """

    def collect(self, root: Optional[Node]) -> Stats:
        """Walk the tree rooted at ``root`` and return its metrics.

        Args:
            root: Root node, or ``None`` for an empty tree

        Returns:
            Stats with ``dist``, ``key_len`` and ``count`` filled in
        """
        stats = Stats()

        # (node, matches, sides, depth) as reached from the root
        stack: List[Tuple[Node, int, int, int]] = []
        if root is not None:
            stack.append((root, 0, 0, 0))

        while stack:
            node, matches, sides, depth = stack.pop()
            self._record(stats, node, matches, sides, depth)

            if node.left is not None:
                stack.append((node.left, matches, sides + 1, depth + 1))
            if node.middle is not None:
                stack.append((node.middle, matches + 1, sides, depth + 1))
            if node.right is not None:
                stack.append((node.right, matches, sides + 1, depth + 1))

        return stats

    def _record(self, stats: Stats, node: Node,
                matches: int, sides: int, depth: int) -> None:
        stats.count.nodes += 1

        if not node.has_value:
            return

        key_len = matches + 1
        value_depth = depth + 1

        while len(stats.dist) <= value_depth:
            stats.dist.append(DistStat())

        stats.dist[key_len].matches += 1
        stats.dist[sides].sides += 1
        stats.dist[value_depth].depth += 1

        if stats.key_len.min == 0 or key_len < stats.key_len.min:
            stats.key_len.min = key_len
        if key_len > stats.key_len.max:
            stats.key_len.max = key_len

        stats.count.values += 1
