"""
Sorting-family steps.  Every variant carries the complete `array`
snapshot as it stands AFTER the operation the step describes.
"""

from dataclasses import dataclass
from typing import Tuple

from algorithms.step import Step


@dataclass(frozen=True)
class SortStart(Step):
    TYPE = "start"
    array: Tuple


@dataclass(frozen=True)
class Compare(Step):
    TYPE = "compare"
    indices: Tuple[int, int]
    array:   Tuple


@dataclass(frozen=True)
class Swap(Step):
    TYPE = "swap"
    indices: Tuple[int, int]
    array:   Tuple


@dataclass(frozen=True)
class Divide(Step):
    """indices = (low, mid, high) of the range being split."""
    TYPE = "divide"
    indices: Tuple[int, int, int]
    array:   Tuple


@dataclass(frozen=True)
class MergeStart(Step):
    """Merging [low..mid] with [mid+1..high]; indices = (low, high)."""
    TYPE = "mergeStart"
    indices: Tuple[int, int]
    mid:     int
    array:   Tuple


@dataclass(frozen=True)
class MergeMove(Step):
    TYPE = "mergeMove"
    index: int
    value: float
    array: Tuple


@dataclass(frozen=True)
class Pivot(Step):
    TYPE = "pivot"
    index: int
    value: float
    low:   int
    high:  int
    array: Tuple


@dataclass(frozen=True)
class PivotPlace(Step):
    """indices = (final pivot index, index the pivot came from)."""
    TYPE = "pivotPlace"
    indices: Tuple[int, int]
    array:   Tuple


@dataclass(frozen=True)
class Sorted(Step):
    """sorted_range is inclusive on both ends."""
    TYPE = "sorted"
    sorted_range: Tuple[int, int]
    array:        Tuple


@dataclass(frozen=True)
class SortComplete(Step):
    TYPE = "complete"
    array: Tuple


SORTING_STEP_TYPES = (
    SortStart, Compare, Swap, Divide, MergeStart, MergeMove,
    Pivot, PivotPlace, Sorted, SortComplete,
)
