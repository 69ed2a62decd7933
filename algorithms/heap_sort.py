"""
heap_sort.py - Heap Sort
=========================
Phase 1 builds a max-heap bottom-up; phase 2 repeatedly swaps the root
with the last unsorted slot and sifts the new root down.

Yields:
  • compare  – heap node vs one of its children
  • swap     – sift-down exchange, or root ↔ last unsorted element
  • sorted   – one position finalised (every index, 0 included)
"""

from typing import Generator, List

from algorithms.step import ArrayTrace, Step
from algorithms.steps.sorting import Compare, SortComplete, SortStart, Sorted, Swap


PSEUDOCODE: List[str] = [
    "def HeapSort(a):",                              # 0
    "    for i in n//2-1 … 0: Heapify(a, n, i)",     # 1
    "    for i in n-1 … 1:",                         # 2
    "        swap(a[0], a[i])",                      # 3
    "        Heapify(a, i, 0)",                      # 4
    "def Heapify(a, size, root):",                   # 5
    "    largest ← max(root, left, right)",          # 6
    "    if largest ≠ root:",                        # 7
    "        swap(a[root], a[largest])",             # 8
    "        Heapify(a, size, largest)",             # 9
]


def heap_sort(values) -> Generator[Step, None, None]:
    ctx = ArrayTrace(values)
    n   = len(ctx)

    yield ctx.emit(SortStart, description="Starting Heap Sort")

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(ctx, n, i)

    for i in range(n - 1, 0, -1):
        ctx.swap(0, i)
        yield ctx.emit(
            Swap,
            indices=(0, i),
            description=f"Moving max element {ctx[i]} to position {i}",
        )
        yield ctx.emit(
            Sorted,
            sorted_range=(i, i),
            description=f"Position {i} is now sorted",
        )
        yield from _heapify(ctx, i, 0)

    if n:
        yield ctx.emit(Sorted, sorted_range=(0, 0), description="Position 0 is now sorted")

    yield ctx.emit(SortComplete, description=f"Heap Sort complete: {n} element(s) sorted")


def _heapify(ctx: ArrayTrace, size: int, root: int) -> Generator[Step, None, None]:
    """Sift a[root] down within a[0:size]."""
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child >= size:
                continue
            yield ctx.emit(
                Compare,
                indices=(largest, child),
                description=f"Comparing {ctx[largest]} and {ctx[child]} in heap",
            )
            if ctx[child] > ctx[largest]:
                largest = child

        if largest == root:
            return

        ctx.swap(root, largest)
        yield ctx.emit(
            Swap,
            indices=(root, largest),
            description=f"Heapifying: swapping {ctx[largest]} and {ctx[root]}",
        )
        root = largest
