"""
Test suite for Tst statistics.
Tests the stats collector on empty and sample trees, and the way stats
follow insertions and removals.
"""

import unittest

from ternarytreelib import Tst
from ternarytreelib.core import DistStat, Stats, StatsCollector
from ternarytreelib.testing import SAMPLE_KEYS, SAMPLE_KEYS_BIS, sample_tree


class TestStatsOnEmptyTree(unittest.TestCase):

    def test_empty_tree(self):
        stats = Tst().stat()

        self.assertEqual(stats.dist, [])
        self.assertEqual(stats.key_len.min, 0)
        self.assertEqual(stats.key_len.max, 0)
        self.assertEqual(stats.count.nodes, 0)
        self.assertEqual(stats.count.values, 0)

        self.assertGreater(stats.bytes.node, 0)
        self.assertGreater(stats.bytes.total, 0)

    def test_collector_on_missing_root(self):
        stats = StatsCollector().collect(None)
        self.assertEqual(stats, Stats())


class TestStatsOnSampleTree(unittest.TestCase):

    def setUp(self):
        self.tree = sample_tree()
        self.stats = self.tree.stat()

    def test_counts(self):
        self.assertEqual(self.stats.key_len.min, 1)
        self.assertEqual(self.stats.key_len.max, 3)
        self.assertEqual(self.stats.count.nodes, 20)
        self.assertEqual(self.stats.count.values, 16)
        self.assertEqual(self.stats.count.values, len(self.tree))

    def test_distribution(self):
        """Exact distribution for the sample insertion order."""
        expected = [
            DistStat(matches=0, sides=3, depth=0),
            DistStat(matches=3, sides=7, depth=1),
            DistStat(matches=4, sides=4, depth=2),
            DistStat(matches=9, sides=1, depth=5),
            DistStat(matches=0, sides=1, depth=3),
            DistStat(matches=0, sides=0, depth=3),
            DistStat(matches=0, sides=0, depth=1),
            DistStat(matches=0, sides=0, depth=1),
        ]

        self.assertEqual(len(self.stats.dist), 8)
        self.assertEqual(self.stats.dist, expected)

        # Each column accounts for every value once
        self.assertEqual(sum(d.matches for d in self.stats.dist), 16)
        self.assertEqual(sum(d.sides for d in self.stats.dist), 16)
        self.assertEqual(sum(d.depth for d in self.stats.dist), 16)

    def test_bytes(self):
        empty = Tst().stat()

        self.assertEqual(self.stats.bytes.node, empty.bytes.node)
        self.assertEqual(
            self.stats.bytes.total,
            empty.bytes.total + 20 * self.stats.bytes.node
        )

    def test_as_dict(self):
        data = self.stats.as_dict()

        self.assertEqual(data['count'], {'nodes': 20, 'values': 16})
        self.assertEqual(data['key_len'], {'min': 1, 'max': 3})
        self.assertEqual(data['dist'][3], {'matches': 9, 'sides': 1, 'depth': 5})
        self.assertEqual(set(data['bytes']), {'node', 'total'})


class TestStatsOnInsertAndRemove(unittest.TestCase):

    def test_stats_follow_mutations(self):
        tree = Tst()

        for key in SAMPLE_KEYS:
            before = tree.stat()
            tree.insert(key, key)
            after = tree.stat()

            self.assertLessEqual(before.count.nodes, after.count.nodes)
            self.assertLessEqual(before.count.values, after.count.values)
            self.assertEqual(after.count.values, len(tree))

        for key in SAMPLE_KEYS_BIS:
            before = tree.stat()
            tree.remove(key)
            after = tree.stat()

            self.assertLessEqual(after.count.nodes, before.count.nodes)
            self.assertLessEqual(after.count.values, before.count.values)
            self.assertEqual(after.count.values, len(tree))

        stats = tree.stat()
        self.assertEqual(stats.count.nodes, 0)
        self.assertEqual(stats.count.values, 0)

    def test_sorted_insertion_builds_long_chains(self):
        """Keys inserted in order degrade the top chain into a list."""
        tree = Tst.from_pairs((key, key) for key in ["a", "b", "c", "d", "e"])
        stats = tree.stat()

        self.assertEqual(stats.count.nodes, 5)
        self.assertEqual([d.sides for d in stats.dist], [1, 1, 1, 1, 1, 0])
        self.assertEqual([d.matches for d in stats.dist], [0, 5, 0, 0, 0, 0])


if __name__ == "__main__":
    unittest.main()
