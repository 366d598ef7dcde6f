"""
bars.py — Bar Array Model
==========================
The sorting algorithms work on a plain list of bar heights.  A fresh
list is generated for every run and thrown away when the run ends.
"""

import random
from typing import List, Optional


BAR_COUNT = 48
BAR_MIN   = 20
BAR_MAX   = 379     # inclusive


def make_bars(count: int = BAR_COUNT, seed: Optional[int] = None) -> List[int]:
    """`count` random heights in [BAR_MIN, BAR_MAX]."""
    rng = random.Random(seed)
    return [rng.randint(BAR_MIN, BAR_MAX) for _ in range(count)]


def is_sorted(values: List[int]) -> bool:
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))
