"""
bubble_sort.py - Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at:
  1. Start  →  the untouched array
  2. Every adjacent comparison
  3. Every swap that actually happens
  4. Final step  →  the sorted array
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import Compare, SortComplete, SortStart, Swap


PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",                            # 0
    "    for i in 0 … n-2:",                         # 1
    "        for j in 0 … n-i-2:",                   # 2
    "            if a[j] > a[j+1]:",                 # 3
    "                swap(a[j], a[j+1])",            # 4
]


def bubble_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)
    n   = len(ctx)

    yield ctx.emit(SortStart, description="Starting Bubble Sort")

    for i in range(n - 1):
        for j in range(n - i - 1):
            yield ctx.emit(
                Compare,
                indices=(j, j + 1),
                description=f"Comparing {ctx[j]} and {ctx[j + 1]}",
            )
            if ctx[j] > ctx[j + 1]:
                ctx.swap(j, j + 1)
                yield ctx.emit(
                    Swap,
                    indices=(j, j + 1),
                    description=f"Swapping {ctx[j + 1]} and {ctx[j]}",
                )

    yield ctx.emit(SortComplete, description=f"Bubble Sort complete: {n} element(s) sorted")
