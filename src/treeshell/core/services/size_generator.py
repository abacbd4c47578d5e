from __future__ import annotations

"""
Synthetic File Size Generation.

Sizes for in-memory files are drawn from an injectable callable so the
session can be driven deterministically in tests.
"""

import random
from typing import Callable, Optional

DEFAULT_MIN_SIZE = 1
DEFAULT_MAX_SIZE = 1024

# Any zero-argument callable returning a byte size
SizeGenerator = Callable[[], int]


class RandomSizeGenerator:
    """
    Uniform integer sizes in [min_size, max_size], both inclusive.

    Attributes:
        min_size: Lower bound.
        max_size: Upper bound.
    """

    def __init__(
            self,
            min_size: int = DEFAULT_MIN_SIZE,
            max_size: int = DEFAULT_MAX_SIZE,
            seed: Optional[int] = None,
    ):
        if min_size > max_size:
            raise ValueError(f"min_size ({min_size}) must not exceed max_size ({max_size}).")
        self.min_size = min_size
        self.max_size = max_size
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randint(self.min_size, self.max_size)


def fixed_size(value: int) -> SizeGenerator:
    """Build a generator that always yields the same size."""
    return lambda: value
