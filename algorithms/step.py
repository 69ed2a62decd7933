"""
step.py - Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame, plus a `type` tag naming the operation
that produced it (compare, swap, relax, enqueue, …).

Design decisions:
  - Step is a frozen dataclass.  Each algorithm family declares one
    subclass per tag (see algorithms/steps/), and each subclass spells
    out exactly the fields its tag carries.  No bag of optional members.
  - Payload fields are FULL snapshots (the whole array, the whole
    distance map, …), never deltas.  Any single step can be rendered
    without looking at the ones before it.
  - The algorithm generator is the only writer; the recorder and the
    UI are pure readers.  Snapshot containers are copied at emit time
    so later mutation of the working state cannot leak into a step
    that was already yielded.
  - `to_dict()` produces the wire form consumed by the UI: camelCase
    keys, edge endpoints as "from"/"to", tuples as lists and
    infinities as the strings "Infinity" / "-Infinity".
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Tuple


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        description : Human-readable sentence for the step panel.
                      Display only, never used for logic.
    """

    TYPE:       ClassVar[str]             = ""
    WIRE_NAMES: ClassVar[Dict[str, str]]  = {"source": "from", "target": "to", "next_node": "next"}

    step_number: int = field(default=0, kw_only=True)
    description: str = field(default="", kw_only=True)

    @property
    def type(self) -> str:
        return self.TYPE

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.TYPE}
        for f in fields(self):
            key = self.WIRE_NAMES.get(f.name) or _camel(f.name)
            out[key] = to_plain(getattr(self, f.name))
        return out


StepList = Tuple[Step, ...]


# ---------------------------------------------------------------------------
# Trace: numbers steps as a generator produces them
# ---------------------------------------------------------------------------
class Trace:
    """
    Scratch-pad shared by an algorithm generator.

    Usage inside an algorithm generator:
        trace = Trace()
        yield trace.emit(Visit, current=3, visited=(0, 3), description="…")
    """

    def __init__(self):
        self.count: int = 0

    def emit(self, step_cls, **payload) -> Step:
        step = step_cls(step_number=self.count, **payload)
        self.count += 1
        return step


class ArrayTrace(Trace):
    """
    Working context for the sorting engines.

    Owns the working copy of the input array; every step it emits gets
    the current array snapshot unless the caller passes one explicitly.
    Recursive helpers (merge / quick / heap) receive this object as an
    argument instead of closing over shared state.
    """

    def __init__(self, values):
        super().__init__()
        self.array: List = list(values)

    def __len__(self) -> int:
        return len(self.array)

    def __getitem__(self, idx):
        return self.array[idx]

    def snapshot(self) -> Tuple:
        return tuple(self.array)

    def swap(self, i: int, j: int) -> None:
        self.array[i], self.array[j] = self.array[j], self.array[i]

    def place(self, idx: int, value) -> None:
        self.array[idx] = value

    def emit(self, step_cls, **payload) -> Step:
        payload.setdefault("array", self.snapshot())
        return super().emit(step_cls, **payload)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------
def to_plain(value: Any) -> Any:
    """Convert a snapshot value into JSON-ready builtins."""
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return [to_plain(v) for v in sorted(value)]
    return value


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
