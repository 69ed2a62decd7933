import dataclasses

import pytest

from algorithms.step import ArrayTrace, Trace, to_plain
from algorithms.steps.ordering import TspConsider
from algorithms.steps.paths import Relax
from algorithms.steps.sorting import Compare, SortStart
from graph import Edge


def test_trace_numbers_steps() -> None:
    trace = Trace()
    a = trace.emit(SortStart, array=(1,))
    b = trace.emit(SortStart, array=(1,))
    assert (a.step_number, b.step_number) == (0, 1)


def test_array_trace_injects_snapshot() -> None:
    ctx = ArrayTrace([3, 1])
    step = ctx.emit(Compare, indices=(0, 1))
    ctx.swap(0, 1)
    assert step.array == (3, 1)
    assert ctx.snapshot() == (1, 3)


def test_steps_are_frozen() -> None:
    step = SortStart(array=(1, 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.array = (2, 1)


def test_to_dict_uses_camel_case_and_wire_names() -> None:
    step = Relax(
        source=0, target=1, weight=2, current_distance=float("inf"), new_distance=2,
        relaxed=True, iteration=1, distances={0: 0, 1: float("inf")},
        step_number=4, description="d",
    )
    wire = step.to_dict()
    assert wire["type"] == "relax"
    assert wire["from"] == 0 and wire["to"] == 1
    assert wire["currentDistance"] == "Infinity"
    assert wire["distances"] == {0: 0, 1: "Infinity"}
    assert wire["stepNumber"] == 4
    assert "source" not in wire


def test_next_node_is_exported_as_next() -> None:
    step = TspConsider(
        mask=1, new_mask=3, last=0, next_node=1, current_cost=0,
        edge_cost=5, new_cost=5, path=(0, 1),
    )
    wire = step.to_dict()
    assert wire["next"] == 1
    assert wire["newMask"] == 3
    assert wire["path"] == [0, 1]


def test_to_plain_handles_nested_values() -> None:
    value = {"edges": (Edge(0, 1, 2),), "neg": float("-inf"), "set": {3, 1}}
    assert to_plain(value) == {
        "edges": [{"from": 0, "to": 1, "weight": 2}],
        "neg": "-Infinity",
        "set": [1, 3],
    }
