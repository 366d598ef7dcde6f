"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a BarStep:
  1. Once up front  →  intro preview of the unsorted bars
  2. After EVERY comparison (swap or not)  →  the pair j, j+1 highlighted
  3. Once at the end  →  the sorted bars, nothing highlighted

There is no early exit on a swap-free pass: the run always shows all
n·(n-1)/2 comparisons.  The list is sorted in place.
"""

from typing import Callable, Generator, List

from algorithms.step import BarStep, bar_step, PAUSE_INTRO, PAUSE_NONE


def bubble_sort(
    values: List[int],
    log: Callable[[str], None],
) -> Generator[BarStep, None, None]:
    log("Bubble: start")
    yield bar_step(values, pause=PAUSE_INTRO)

    n = len(values)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
            yield bar_step(values, j, j + 1)

    yield bar_step(values, pause=PAUSE_NONE)
    log("Bubble: done")
