#!/usr/bin/env python3
"""
Benchmark TernaryTreeLib lookups against native Python approaches.

This benchmark compares, for each kind of lookup:
1. A list comprehension over sorted keys - Brute force baseline
2. The eager visitor (visit_*) - Eager delivery
3. The double-ended iterator (iter_*) - Lazy delivery
"""

import random
import sys
import time
from pathlib import Path
from typing import Callable, List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ternarytreelib import Tst


def random_words(count: int, seed: int = 42) -> List[str]:
    rng = random.Random(seed)
    alphabet = "abcdefghijklmnop"
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(3, 10)))
        for _ in range(count)
    ]


def hamming(a: str, b: str) -> int:
    return sum(1 for x, y in zip(a, b) if x != y) + abs(len(a) - len(b))


class LookupBenchmark:
    """Benchmark suite for comparing lookup approaches."""

    def __init__(self, words: List[str]):
        self.keys = sorted(set(words))
        start = time.perf_counter()
        self.tree = Tst.from_pairs((word, word) for word in words)
        self.build_time = time.perf_counter() - start
        self.results = {}

    def _time(self, name: str, func: Callable[[], list]) -> Tuple[float, int]:
        start = time.perf_counter()
        found = func()
        elapsed = time.perf_counter() - start
        self.results[name] = (elapsed, len(found))
        return elapsed, len(found)

    def _visit(self, visit, *args) -> list:
        found = []
        visit(*args, found.append)
        return found

    def run(self, prefix: str, query: str, distance: int, pattern: str):
        tree = self.tree

        self._time("complete/brute", lambda: [
            k for k in self.keys if k.startswith(prefix) and k != prefix
        ])
        self._time("complete/visit", lambda: self._visit(tree.visit_complete_values, prefix))
        self._time("complete/iter", lambda: list(tree.iter_complete(prefix)))

        self._time("neighbor/brute", lambda: [
            k for k in self.keys if hamming(k, query) <= distance
        ])
        self._time("neighbor/visit", lambda: self._visit(
            tree.visit_neighbor_values, query, distance
        ))
        self._time("neighbor/iter", lambda: list(tree.iter_neighbor(query, distance)))

        self._time("crossword/brute", lambda: [
            k for k in self.keys
            if len(k) == len(pattern) and all(p in ("?", c) for c, p in zip(k, pattern))
        ])
        self._time("crossword/visit", lambda: self._visit(
            tree.visit_crossword_values, pattern, "?"
        ))
        self._time("crossword/iter", lambda: list(tree.iter_crossword(pattern, "?")))

    def report(self):
        print(f"\nTree of {len(self.tree)} keys built in {self.build_time:.3f}s")
        print("=" * 60)
        print(f"{'Lookup':<20} {'Time (ms)':>12} {'Found':>10}")
        print("-" * 60)
        for name, (elapsed, found) in self.results.items():
            print(f"{name:<20} {elapsed * 1000:>12.2f} {found:>10}")


def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 100000

    benchmark = LookupBenchmark(random_words(count))
    benchmark.run(prefix="abc", query="abcdef", distance=2, pattern="a?c?e")
    benchmark.report()


if __name__ == "__main__":
    main()
