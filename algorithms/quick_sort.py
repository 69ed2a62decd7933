"""
quick_sort.py - Quick Sort (Lomuto partition)
==============================================
The pivot is always the LAST element of the current sub-range, so the
trace is fully determined by the input.

Yields:
  • pivot       – pivot chosen for [low..high]
  • compare     – a[j] compared against the pivot
  • swap        – a[i] ↔ a[j] (only when i ≠ j)
  • pivotPlace  – pivot moved into its final index
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import (
    Compare, Pivot, PivotPlace, SortComplete, SortStart, Swap,
)


PSEUDOCODE: List[str] = [
    "def QuickSort(a, low, high):",                  # 0
    "    if low < high:",                            # 1
    "        p ← Partition(a, low, high)",           # 2
    "        QuickSort(a, low, p-1)",                # 3
    "        QuickSort(a, p+1, high)",               # 4
    "def Partition(a, low, high):",                  # 5
    "    pivot ← a[high]; i ← low - 1",              # 6
    "    for j in low … high-1:",                    # 7
    "        if a[j] < pivot: i ← i+1; swap(a[i], a[j])",  # 8
    "    swap(a[i+1], a[high]); return i+1",         # 9
]


def quick_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)

    yield ctx.emit(SortStart, description="Starting Quick Sort")
    yield from _sort_range(ctx, 0, len(ctx) - 1)
    yield ctx.emit(SortComplete, description=f"Quick Sort complete: {len(ctx)} element(s) sorted")


def _sort_range(ctx: ArrayTrace, low: int, high: int) -> Generator[Step, None, None]:
    # an explicit stack keeps deep (already-sorted) inputs off the recursion limit
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        placed = yield from _partition(ctx, lo, hi)
        # right half pushed first so the left half is processed first
        pending.append((placed + 1, hi))
        pending.append((lo, placed - 1))


def _partition(ctx: ArrayTrace, low: int, high: int) -> Generator[Step, None, int]:
    pivot = ctx[high]
    i = low - 1

    yield ctx.emit(
        Pivot,
        index=high,
        value=pivot,
        low=low,
        high=high,
        description=f"Choosing {pivot} as pivot for [{low}-{high}]",
    )

    for j in range(low, high):
        yield ctx.emit(
            Compare,
            indices=(j, high),
            description=f"Comparing {ctx[j]} with pivot {pivot}",
        )
        if ctx[j] < pivot:
            i += 1
            if i != j:
                ctx.swap(i, j)
                yield ctx.emit(
                    Swap,
                    indices=(i, j),
                    description=f"Swapping {ctx[j]} and {ctx[i]}",
                )

    ctx.swap(i + 1, high)
    yield ctx.emit(
        PivotPlace,
        indices=(i + 1, high),
        description=f"Placing pivot {pivot} at position {i + 1}",
    )
    return i + 1
