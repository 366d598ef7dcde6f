"""
merge.py — Merge Sort
======================
Generator-based top-down merge sort.

    sort(l, r):   split at m = (l + r) // 2, sort both halves, merge
    merge(l, m, r):
        L ← a[l..m],  R ← a[m+1..r]
        write the smaller head back into a[k]; ties take from L (stable)
        then copy whatever is left in L, then in R

Every single write into the output range yields a BarStep with the
written index highlighted, the leftover copies included.  Ranges of
zero or one element return without yielding anything.

Recursion is expressed with `yield from`, so the generator stack mirrors
the call stack and every write is a separate resumption point.
"""

from typing import Callable, Generator, List

from algorithms.step import BarStep, bar_step, PAUSE_INTRO, PAUSE_NONE


def merge_sort(
    values: List[int],
    log: Callable[[str], None],
) -> Generator[BarStep, None, None]:
    log("Merge: start")
    yield bar_step(values, pause=PAUSE_INTRO)

    yield from _sort(values, 0, len(values) - 1)

    yield bar_step(values, pause=PAUSE_NONE)
    log("Merge: done")


def _sort(a: List[int], l: int, r: int) -> Generator[BarStep, None, None]:
    if l >= r:
        return
    m = (l + r) // 2
    yield from _sort(a, l, m)
    yield from _sort(a, m + 1, r)
    yield from _merge(a, l, m, r)


def _merge(a: List[int], l: int, m: int, r: int) -> Generator[BarStep, None, None]:
    left  = a[l:m + 1]
    right = a[m + 1:r + 1]
    i = j = 0
    k = l

    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        yield bar_step(a, k)
        k += 1

    while i < len(left):
        a[k] = left[i]
        i += 1
        yield bar_step(a, k)
        k += 1

    while j < len(right):
        a[k] = right[j]
        j += 1
        yield bar_step(a, k)
        k += 1
