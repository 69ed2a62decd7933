"""
insertion_sort.py - Insertion Sort
===================================
Grows a sorted prefix one element at a time.  The new element sinks
left through adjacent swaps, so every move is a real `swap` step and the
array snapshot never holds a duplicated "hole" value.
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import Compare, SortComplete, SortStart, Swap


PSEUDOCODE: List[str] = [
    "def InsertionSort(a):",                         # 0
    "    for i in 1 … n-1:",                         # 1
    "        j ← i",                                 # 2
    "        while j > 0 and a[j-1] > a[j]:",        # 3
    "            swap(a[j-1], a[j])",                # 4
    "            j ← j - 1",                         # 5
]


def insertion_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)
    n   = len(ctx)

    yield ctx.emit(SortStart, description="Starting Insertion Sort")

    for i in range(1, n):
        j = i
        while j > 0:
            yield ctx.emit(
                Compare,
                indices=(j - 1, j),
                description=f"Comparing {ctx[j - 1]} and {ctx[j]}",
            )
            if ctx[j - 1] <= ctx[j]:
                break
            ctx.swap(j - 1, j)
            yield ctx.emit(
                Swap,
                indices=(j - 1, j),
                description=f"Shifting {ctx[j - 1]} left past {ctx[j]}",
            )
            j -= 1

    yield ctx.emit(SortComplete, description=f"Insertion Sort complete: {n} element(s) sorted")
