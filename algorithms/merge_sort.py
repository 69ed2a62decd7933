"""
merge_sort.py - Merge Sort
===========================
Recursive top-down merge sort.  The recursion is a chain of generators
(`yield from`) that all share one ArrayTrace, so steps come out in
exactly the order the operations happen.

Yields:
  • divide      – a range [low..high] is split at mid
  • mergeStart  – [low..mid] and [mid+1..high] are about to be merged
  • compare     – heads of the two runs compared
  • mergeMove   – one element written to its merged position
  • sorted      – [low..high] is now sorted
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import (
    Compare, Divide, MergeMove, MergeStart, SortComplete, SortStart, Sorted,
)


PSEUDOCODE: List[str] = [
    "def MergeSort(a, low, high):",                  # 0
    "    if low ≥ high: return",                     # 1
    "    mid ← (low + high) // 2",                   # 2
    "    MergeSort(a, low, mid)",                    # 3
    "    MergeSort(a, mid+1, high)",                 # 4
    "    Merge(a, low, mid, high)",                  # 5
]


def merge_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)

    yield ctx.emit(SortStart, description="Starting Merge Sort - Divide and Conquer")
    yield from _sort_range(ctx, 0, len(ctx) - 1)
    yield ctx.emit(SortComplete, description=f"Merge Sort complete: {len(ctx)} element(s) sorted")


def _sort_range(ctx: ArrayTrace, low: int, high: int) -> Generator[Step, None, None]:
    if low >= high:
        return

    mid = (low + high) // 2
    yield ctx.emit(
        Divide,
        indices=(low, mid, high),
        description=f"Dividing [{low}-{high}] at index {mid}",
    )

    yield from _sort_range(ctx, low, mid)
    yield from _sort_range(ctx, mid + 1, high)
    yield from _merge(ctx, low, mid, high)


def _merge(ctx: ArrayTrace, low: int, mid: int, high: int) -> Generator[Step, None, None]:
    yield ctx.emit(
        MergeStart,
        indices=(low, high),
        mid=mid,
        description=f"Merging [{low}-{mid}] and [{mid + 1}-{high}]",
    )

    merged = []
    i, j = low, mid + 1
    while i <= mid and j <= high:
        yield ctx.emit(
            Compare,
            indices=(i, j),
            description=f"Comparing {ctx[i]} and {ctx[j]} for merge",
        )
        # <= keeps the sort stable
        if ctx[i] <= ctx[j]:
            merged.append(ctx[i])
            i += 1
        else:
            merged.append(ctx[j])
            j += 1
    merged.extend(ctx.array[i:mid + 1])
    merged.extend(ctx.array[j:high + 1])

    for offset, value in enumerate(merged):
        ctx.place(low + offset, value)
        yield ctx.emit(
            MergeMove,
            index=low + offset,
            value=value,
            description=f"Placing {value} at position {low + offset}",
        )

    yield ctx.emit(
        Sorted,
        sorted_range=(low, high),
        description=f"Range [{low}-{high}] is now sorted",
    )
