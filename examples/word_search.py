#!/usr/bin/env python3
"""Demo script for word lookups with TernaryTreeLib.

This script loads a word list into a Tst and shows the lookups a hash map
cannot answer: autocompletion, spelling suggestions (Hamming distance) and
crossword solving.

Usage:
    python examples/word_search.py [WORDLIST] [-v]

Without a word list, a small built-in vocabulary is used.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ternarytreelib import Tst, SearchConfig, SearchPlan, get_tree_stats


BUILTIN_WORDS = [
    "tree", "trees", "treat", "tread", "trend", "triad", "trie", "tries",
    "tray", "trap", "trip", "tram", "term", "team", "tear", "teal",
    "ternary", "search", "sears", "seat", "sent", "send",
]


def load_words(path: Path) -> Tst:
    """Load one word per line, mapping each word to its line number."""
    tree = Tst()
    with open(path, encoding="utf-8") as f:
        for number, line in enumerate(f, 1):
            word = line.strip()
            if word:
                tree.insert(word, number)
    return tree


def demo_autocomplete(tree: Tst, prefix: str):
    """Show completions of a prefix, with their keys."""
    print(f"\n=== Autocomplete '{prefix}' ===")

    it = tree.iter_complete(prefix)
    for _ in it:
        print(f"  {it.current_key()}")


def demo_suggestions(tree: Tst, word: str, distance: int = 1):
    """Show words within a Hamming distance of a (possibly misspelled) word."""
    print(f"\n=== Suggestions for '{word}' (distance <= {distance}) ===")

    plan = SearchPlan(SearchConfig.for_neighbors(word, distance, with_keys=True), tree)
    for key, _ in plan.execute():
        print(f"  {key}")


def demo_crossword(tree: Tst, pattern: str):
    """Show words matching a crossword pattern, in descending order."""
    print(f"\n=== Crossword '{pattern}' ===")

    it = tree.iter_crossword(pattern, "?")
    view = reversed(it)
    for _ in view:
        print(f"  {view.current_key()}")


def demo_stats(tree: Tst):
    stats = get_tree_stats(tree)

    print("\n=== Tree statistics ===")
    print(f"  Words: {stats['total_values']}")
    print(f"  Nodes: {stats['total_nodes']} ({stats['nodes_per_value']:.2f} per word)")
    print(f"  Key length: {stats['key_len']['min']}..{stats['key_len']['max']}")
    print(f"  Approximate size: {stats['bytes']['total']} bytes")


def main():
    parser = argparse.ArgumentParser(description="Word lookups with TernaryTreeLib")
    parser.add_argument("wordlist", nargs="?", type=Path, help="File with one word per line")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show library debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.wordlist is not None:
        tree = load_words(args.wordlist)
    else:
        tree = Tst.from_pairs((word, n) for n, word in enumerate(BUILTIN_WORDS, 1))

    demo_autocomplete(tree, "tr")
    demo_suggestions(tree, "tres")
    demo_crossword(tree, "t?e?")
    demo_stats(tree)


if __name__ == "__main__":
    main()
