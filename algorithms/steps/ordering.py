"""
Ordering / combinatorial-family steps (Topological Sort, TSP).

TSP masks are bitmasks over node *positions* in ascending node-id
order (bit i = i-th smallest id); for the usual dense 0..N-1 graphs
position and id coincide.  `path` on a TSP transition step is the
partial tour stored in the DP cell the step is about.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from algorithms.step import Step


# ---------------------------------------------------------------------------
# Topological sort
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TopoInit(Step):
    TYPE = "init"
    in_degree: Dict[int, int]
    queue:     Tuple[int, ...]
    result:    Tuple[int, ...]


@dataclass(frozen=True)
class Enqueue(Step):
    TYPE = "enqueue"
    node:      int
    in_degree: Dict[int, int]
    queue:     Tuple[int, ...]
    result:    Tuple[int, ...]


@dataclass(frozen=True)
class Process(Step):
    TYPE = "process"
    current:   int
    in_degree: Dict[int, int]
    queue:     Tuple[int, ...]
    result:    Tuple[int, ...]


@dataclass(frozen=True)
class Reduce(Step):
    TYPE = "reduce"
    current:    int
    neighbor:   int
    new_degree: int
    in_degree:  Dict[int, int]
    queue:      Tuple[int, ...]
    result:     Tuple[int, ...]


@dataclass(frozen=True)
class TopoComplete(Step):
    TYPE = "complete"
    order:     Tuple[int, ...]
    in_degree: Dict[int, int]


@dataclass(frozen=True)
class Cycle(Step):
    """
    The graph is not a DAG.  `processed` is the partial result and is
    NOT a topological order; `remaining` are the nodes stuck on or
    behind a cycle.
    """
    TYPE = "cycle"
    processed: Tuple[int, ...]
    remaining: Tuple[int, ...]
    in_degree: Dict[int, int]


# ---------------------------------------------------------------------------
# TSP (bitmask DP)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TspInit(Step):
    TYPE = "init"
    nodes: Tuple[int, ...]
    start: int


@dataclass(frozen=True)
class DpInit(Step):
    TYPE = "dpInit"
    mask: int
    node: int
    cost: float
    path: Tuple[int, ...]


@dataclass(frozen=True)
class TspConsider(Step):
    TYPE = "consider"
    mask:         int
    new_mask:     int
    last:         int
    next_node:    int
    current_cost: float
    edge_cost:    float
    new_cost:     float
    path:         Tuple[int, ...]


@dataclass(frozen=True)
class UpdateDP(Step):
    TYPE = "updateDP"
    mask:     int
    node:     int
    new_cost: float
    parent:   int
    path:     Tuple[int, ...]


@dataclass(frozen=True)
class FinalConsider(Step):
    TYPE = "finalConsider"
    last_node:   int
    cost_to_end: float
    return_cost: float
    total_cost:  float
    best_cost:   float
    path:        Tuple[int, ...]


@dataclass(frozen=True)
class TspComplete(Step):
    """min_cost is float("inf") and path is empty when no tour exists."""
    TYPE = "complete"
    min_cost: float
    path:     Tuple[int, ...]
    visited:  Tuple[int, ...]
