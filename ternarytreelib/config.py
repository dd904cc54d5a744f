"""Configuration system for TernaryTreeLib searches.

This module defines how users describe a search declaratively: which lookup
mode to use, its parameters, the direction of delivery, and whether keys
should be rebuilt alongside values. A ``SearchPlan`` turns a configuration
into an actual traversal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class SearchMode(Enum):
    """Which values a search selects.

    - FULL: every value
    - COMPLETE: values whose key strictly extends a prefix
    - NEIGHBOR: values whose key is within a Hamming distance of a query
    - CROSSWORD: values whose key matches a wildcard pattern
    """
    FULL = "full"
    COMPLETE = "complete"
    NEIGHBOR = "neighbor"
    CROSSWORD = "crossword"


class Direction(Enum):
    """Order in which a lazy search delivers values."""
    FORWARD = "forward"      # Ascending key order
    BACKWARD = "backward"    # Descending key order


@dataclass
class SearchConfig:
    """Complete search configuration.

    Attributes:
        mode: Lookup mode
        key: Prefix (COMPLETE), query (NEIGHBOR) or pattern (CROSSWORD);
            ignored for FULL
        range: Maximum number of mismatches for NEIGHBOR
        joker: Wildcard character for CROSSWORD
        direction: Delivery order for lazy execution
        with_keys: Deliver ``(key, value)`` pairs instead of bare values
    """
    mode: SearchMode = SearchMode.FULL
    key: str = ""
    range: int = 0
    joker: str = "?"
    direction: Direction = Direction.FORWARD
    with_keys: bool = False

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, SearchMode):
            errors.append(f"mode must be a SearchMode, got {self.mode!r}")

        if not isinstance(self.key, str):
            errors.append(f"key must be a string, got {type(self.key).__name__}")

        if self.mode == SearchMode.NEIGHBOR:
            if not isinstance(self.range, int) or isinstance(self.range, bool):
                errors.append(f"range must be an integer, got {self.range!r}")
            elif self.range < 0:
                errors.append(f"range ({self.range}) must be >= 0")

        if self.mode == SearchMode.CROSSWORD:
            if not isinstance(self.joker, str) or len(self.joker) != 1:
                errors.append(f"joker must be a single character, got {self.joker!r}")

        if not isinstance(self.direction, Direction):
            errors.append(f"direction must be a Direction, got {self.direction!r}")

        return errors

    @classmethod
    def for_prefix(cls, prefix: str, **kwargs) -> 'SearchConfig':
        """Create configuration for a prefix (completion) search."""
        return cls(mode=SearchMode.COMPLETE, key=prefix, **kwargs)

    @classmethod
    def for_neighbors(cls, key: str, range: int, **kwargs) -> 'SearchConfig':
        """Create configuration for a Hamming-distance search."""
        return cls(mode=SearchMode.NEIGHBOR, key=key, range=range, **kwargs)

    @classmethod
    def for_pattern(cls, pattern: str, joker: str = "?", **kwargs) -> 'SearchConfig':
        """Create configuration for a wildcard pattern search."""
        return cls(mode=SearchMode.CROSSWORD, key=pattern, joker=joker, **kwargs)
