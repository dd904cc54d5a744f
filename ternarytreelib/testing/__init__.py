"""Testing utilities for TernaryTreeLib consumers."""

from .fixtures import (
    SAMPLE_KEYS,
    SAMPLE_KEYS_BIS,
    SORTED_SAMPLE_KEYS,
    sample_tree,
    counted_sample_tree,
    TreeTestHelper,
)

__all__ = [
    'SAMPLE_KEYS',
    'SAMPLE_KEYS_BIS',
    'SORTED_SAMPLE_KEYS',
    'sample_tree',
    'counted_sample_tree',
    'TreeTestHelper',
]
