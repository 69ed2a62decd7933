"""
selection_sort.py - Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum and swaps it into
place.  One `compare` per scan comparison; one `swap` per pass, and only
when the minimum is not already in position.
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import Compare, SortComplete, SortStart, Swap


PSEUDOCODE: List[str] = [
    "def SelectionSort(a):",                         # 0
    "    for i in 0 … n-1:",                         # 1
    "        min ← i",                               # 2
    "        for j in i+1 … n-1:",                   # 3
    "            if a[j] < a[min]: min ← j",         # 4
    "        if min ≠ i: swap(a[i], a[min])",        # 5
]


def selection_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)
    n   = len(ctx)

    yield ctx.emit(SortStart, description="Starting Selection Sort")

    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            yield ctx.emit(
                Compare,
                indices=(min_idx, j),
                description=f"Comparing current minimum {ctx[min_idx]} with {ctx[j]}",
            )
            if ctx[j] < ctx[min_idx]:
                min_idx = j

        if min_idx != i:
            ctx.swap(i, min_idx)
            yield ctx.emit(
                Swap,
                indices=(i, min_idx),
                description=f"Moving minimum {ctx[i]} to position {i}",
            )

    yield ctx.emit(SortComplete, description=f"Selection Sort complete: {n} element(s) sorted")
