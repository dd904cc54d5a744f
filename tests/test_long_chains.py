"""Tests for trees with very long horizontal chains.

Keys inserted in sorted order give every node a single right child, so the
tree degenerates into one chain as long as the number of distinct
characters. Every operation must cope with chains far longer than the
interpreter's recursion limit.
"""

import sys
import unittest

from ternarytreelib import Tst
from ternarytreelib.testing import TreeTestHelper

CHAIN_LENGTH = 2500

# Consecutive CJK ideographs, one character each, already in sorted order
CHAIN_KEYS = [chr(0x4e00 + i) for i in range(CHAIN_LENGTH)]


def chain_tree(keys=CHAIN_KEYS):
    tree = Tst()
    for rank, key in enumerate(keys):
        tree.insert(key, rank)
    return tree


class TestSortedChain(unittest.TestCase):
    """Single-character keys inserted in ascending order."""

    def setUp(self):
        self.tree = chain_tree()

    def test_chain_is_longer_than_recursion_limit(self):
        self.assertGreater(CHAIN_LENGTH, sys.getrecursionlimit())

    def test_insert_and_get(self):
        self.assertEqual(len(self.tree), CHAIN_LENGTH)

        for rank, key in enumerate(CHAIN_KEYS):
            self.assertEqual(self.tree.get(key), rank)
            self.assertIn(key, self.tree)

        self.assertIsNone(self.tree.get(chr(0x4e00 + CHAIN_LENGTH)))

        # Overwrite at the far end of the chain
        self.assertEqual(self.tree.insert(CHAIN_KEYS[-1], "last"), CHAIN_LENGTH - 1)
        self.assertEqual(self.tree.get(CHAIN_KEYS[-1]), "last")
        self.assertEqual(len(self.tree), CHAIN_LENGTH)

    def test_get_mut_at_chain_end(self):
        ref = self.tree.get_mut(CHAIN_KEYS[-1])
        ref.value = -1

        self.assertEqual(self.tree.get(CHAIN_KEYS[-1]), -1)

    def test_structure_is_valid(self):
        TreeTestHelper(self.tree).verify()

    def test_visitors(self):
        ranks = list(range(CHAIN_LENGTH))

        found = []
        self.tree.visit_values(found.append)
        self.assertEqual(found, ranks)

        found = []
        self.tree.visit_complete_values("", found.append)
        self.assertEqual(found, ranks)

        # Every single-character key is one mismatch away
        found = []
        self.tree.visit_neighbor_values(CHAIN_KEYS[0], 1, found.append)
        self.assertEqual(found, ranks)

        found = []
        self.tree.visit_neighbor_values(CHAIN_KEYS[-1], 0, found.append)
        self.assertEqual(found, [CHAIN_LENGTH - 1])

        found = []
        self.tree.visit_crossword_values("?", "?", found.append)
        self.assertEqual(found, ranks)

        found = []
        self.tree.visit_crossword_values(CHAIN_KEYS[-2], "?", found.append)
        self.assertEqual(found, [CHAIN_LENGTH - 2])

    def test_mutable_visitor(self):
        def double(ref):
            ref.value *= 2

        self.tree.visit_values_mut(double)

        self.assertEqual(self.tree.get(CHAIN_KEYS[-1]), 2 * (CHAIN_LENGTH - 1))

    def test_forward_iteration(self):
        self.assertEqual(list(self.tree), list(range(CHAIN_LENGTH)))
        self.assertEqual([key for key, _ in self.tree.items()], CHAIN_KEYS)
        self.assertEqual(list(self.tree.iter_neighbor(CHAIN_KEYS[0], 1)),
                         list(range(CHAIN_LENGTH)))
        self.assertEqual(list(self.tree.iter_crossword("?", "?")),
                         list(range(CHAIN_LENGTH)))

    def test_backward_iteration(self):
        it = self.tree.iter()

        self.assertEqual(it.next_back(), CHAIN_LENGTH - 1)
        self.assertEqual(it.current_key_back(), CHAIN_KEYS[-1])

        rest = list(reversed(it))
        self.assertEqual(rest, list(range(CHAIN_LENGTH - 2, -1, -1)))

    def test_both_ends_meet(self):
        it = self.tree.iter_complete("")
        front, back = [], []

        while True:
            try:
                front.append(next(it))
                self.assertEqual(it.current_key(), CHAIN_KEYS[front[-1]])
                back.append(it.next_back())
                self.assertEqual(it.current_key_back(), CHAIN_KEYS[back[-1]])
            except StopIteration:
                break

        self.assertEqual(sorted(front + back), list(range(CHAIN_LENGTH)))

    def test_stats(self):
        stats = self.tree.stat()

        self.assertEqual(stats.count.nodes, CHAIN_LENGTH)
        self.assertEqual(stats.count.values, CHAIN_LENGTH)
        self.assertEqual(stats.key_len.min, 1)
        self.assertEqual(stats.key_len.max, 1)
        self.assertEqual(len(stats.dist), CHAIN_LENGTH + 1)
        self.assertEqual(stats.dist[1].matches, CHAIN_LENGTH)
        self.assertEqual(stats.dist[CHAIN_LENGTH - 1].sides, 1)
        self.assertEqual(stats.dist[CHAIN_LENGTH].depth, 1)

    def test_remove_in_insertion_order(self):
        for rank, key in enumerate(CHAIN_KEYS):
            self.assertEqual(self.tree.remove(key), rank)

        self.assertEqual(len(self.tree), 0)
        self.assertEqual(TreeTestHelper(self.tree).get_summary()['nodes'], 0)

    def test_remove_in_reverse_order(self):
        for rank in range(CHAIN_LENGTH - 1, -1, -1):
            self.assertEqual(self.tree.remove(CHAIN_KEYS[rank]), rank)
            if rank % 500 == 0:
                TreeTestHelper(self.tree).verify()

        self.assertEqual(len(self.tree), 0)

    def test_remove_missing_key_past_chain_end(self):
        self.assertIsNone(self.tree.remove(chr(0x4e00 + CHAIN_LENGTH)))
        self.assertEqual(len(self.tree), CHAIN_LENGTH)


class TestLongSuccessorChain(unittest.TestCase):
    """Removing a node whose successor sits at the end of a long left chain."""

    def setUp(self):
        middle = CHAIN_LENGTH // 2
        # Root first, then the upper half descending: the root's right child
        # starts a left chain holding every greater key
        keys = ([CHAIN_KEYS[middle]] + CHAIN_KEYS[:middle]
                + CHAIN_KEYS[middle + 1:][::-1])
        self.middle = middle
        self.tree = chain_tree(keys)

    def test_remove_root_promotes_far_successor(self):
        root = CHAIN_KEYS[self.middle]

        self.assertEqual(self.tree.remove(root), 0)
        self.assertNotIn(root, self.tree)
        self.assertEqual(len(self.tree), CHAIN_LENGTH - 1)

        helper = TreeTestHelper(self.tree)
        helper.verify()
        self.assertEqual(helper.keys(), CHAIN_KEYS[:self.middle] + CHAIN_KEYS[self.middle + 1:])

    def test_remove_everything(self):
        for key in CHAIN_KEYS:
            self.assertIsNotNone(self.tree.remove(key))

        self.assertEqual(len(self.tree), 0)


class TestChainBelowPrefix(unittest.TestCase):
    """Two-character keys sharing a first character: the chain hangs off a middle link."""

    def setUp(self):
        self.keys = ["x" + key for key in CHAIN_KEYS]
        self.tree = Tst.from_pairs((key, key) for key in self.keys)

    def test_searches(self):
        self.assertEqual(list(self.tree.iter_complete("x")), self.keys)
        self.assertEqual(list(self.tree.iter_crossword("x?", "?")), self.keys)

        found = []
        self.tree.visit_neighbor_values("x" + CHAIN_KEYS[7], 1, found.append)
        self.assertEqual(found, self.keys)

        found = []
        self.tree.visit_complete_values("x", found.append)
        self.assertEqual(found, self.keys)

    def test_remove_all(self):
        for key in reversed(self.keys):
            self.assertEqual(self.tree.remove(key), key)

        self.assertEqual(len(self.tree), 0)
        TreeTestHelper(self.tree).verify()


if __name__ == '__main__':
    unittest.main()
