import random

import pytest

from algorithms.bubble_sort import bubble_sort
from algorithms.heap_sort import heap_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort
from algorithms.selection_sort import selection_sort

ENGINES = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}

INPUTS = [
    [5, 3, 8, 1, 9, 2],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [3, 1, 3, 1, 2, 2],
    [7, -2, 0.5, 7, -10],
    [42, 42, 42],
    [2, 1],
]


def _run(fn, values):
    return list(fn(values))


@pytest.mark.parametrize("name", ENGINES)
@pytest.mark.parametrize("values", INPUTS)
def test_final_array_is_sorted_permutation(name: str, values: list) -> None:
    steps = _run(ENGINES[name], values)
    final = list(steps[-1].array)
    assert final == sorted(values)
    assert sorted(final) == sorted(values)


@pytest.mark.parametrize("name", ENGINES)
def test_random_inputs_sort_correctly(name: str) -> None:
    rng = random.Random(7)
    for _ in range(20):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 25))]
        assert list(_run(ENGINES[name], values)[-1].array) == sorted(values)


@pytest.mark.parametrize("name", ENGINES)
@pytest.mark.parametrize("values", INPUTS)
def test_swap_changes_only_the_two_indices(name: str, values: list) -> None:
    steps = _run(ENGINES[name], values)
    for prev, step in zip(steps, steps[1:]):
        if step.type != "swap":
            continue
        i, j = step.indices
        before, after = list(prev.array), list(step.array)
        assert after[i] == before[j]
        assert after[j] == before[i]
        for k in range(len(before)):
            if k not in (i, j):
                assert after[k] == before[k]


@pytest.mark.parametrize("name", ENGINES)
@pytest.mark.parametrize("values", INPUTS)
def test_compare_indices_in_bounds(name: str, values: list) -> None:
    for step in _run(ENGINES[name], values):
        if step.type == "compare":
            assert all(0 <= idx < len(values) for idx in step.indices)


@pytest.mark.parametrize("name", ENGINES)
@pytest.mark.parametrize("values", [[], [4]])
def test_trivial_arrays_give_start_and_complete(name: str, values: list) -> None:
    steps = _run(ENGINES[name], values)
    types = [s.type for s in steps]
    assert types[0] == "start"
    assert types[-1] == "complete"
    assert "swap" not in types
    assert list(steps[-1].array) == values


@pytest.mark.parametrize("name", ENGINES)
def test_input_is_not_mutated(name: str) -> None:
    values = [9, 4, 7, 1]
    _run(ENGINES[name], values)
    assert values == [9, 4, 7, 1]


@pytest.mark.parametrize("name", ENGINES)
def test_step_numbers_are_consecutive(name: str) -> None:
    steps = _run(ENGINES[name], [3, 1, 2])
    assert [s.step_number for s in steps] == list(range(len(steps)))


def test_bubble_sort_swaps_only_when_needed() -> None:
    steps = _run(bubble_sort, [1, 2, 3])
    assert [s.type for s in steps].count("swap") == 0
    assert [s.type for s in steps].count("compare") == 3


def test_merge_sort_emits_divide_merge_and_sorted() -> None:
    steps = _run(merge_sort, [4, 3, 2, 1])
    types = [s.type for s in steps]
    assert types.count("divide") == 3
    assert types.count("mergeStart") == 3
    assert types.count("mergeMove") == 8
    assert steps[-2].type == "sorted"
    assert steps[-2].sorted_range == (0, 3)
    assert steps[1].indices == (0, 1, 3)


def test_quick_sort_pivot_is_last_element() -> None:
    steps = _run(quick_sort, [3, 9, 1, 5])
    pivots = [s for s in steps if s.type == "pivot"]
    assert pivots[0].index == 3
    assert pivots[0].value == 5
    place = next(s for s in steps if s.type == "pivotPlace")
    assert place.array[place.indices[0]] == 5


def test_heap_sort_marks_every_position_sorted() -> None:
    values = [6, 2, 9, 4, 1]
    steps = _run(heap_sort, values)
    marked = [s.sorted_range[0] for s in steps if s.type == "sorted"]
    assert sorted(marked) == list(range(len(values)))


def test_insertion_sort_shifts_by_adjacent_swaps() -> None:
    steps = _run(insertion_sort, [3, 2, 1])
    for step in steps:
        if step.type == "swap":
            i, j = step.indices
            assert j == i + 1
