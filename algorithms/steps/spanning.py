"""
Minimum-spanning-tree-family steps (Prim, Kruskal).

`mst_edges` is the tree (or forest) built so far, as Edge objects in the
order they were added.  `total_weight` is their summed weight.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from algorithms.step import Step
from graph import Edge


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PrimInit(Step):
    TYPE = "init"
    start:     int
    key:       Dict[int, float]
    visited:   Tuple[int, ...]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class Select(Step):
    TYPE = "select"
    current:   int
    key_value: float
    key:       Dict[int, float]
    visited:   Tuple[int, ...]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class PrimAddEdge(Step):
    TYPE = "addEdge"
    source:       int
    target:       int
    weight:       float
    total_weight: float
    key:          Dict[int, float]
    visited:      Tuple[int, ...]
    mst_edges:    Tuple[Edge, ...]


@dataclass(frozen=True)
class UpdateKey(Step):
    TYPE = "updateKey"
    current:   int
    neighbor:  int
    new_key:   float
    key:       Dict[int, float]
    parent:    Dict[int, Optional[int]]
    visited:   Tuple[int, ...]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class PrimComplete(Step):
    TYPE = "complete"
    total_weight: float
    visited:      Tuple[int, ...]
    mst_edges:    Tuple[Edge, ...]


# ---------------------------------------------------------------------------
# Kruskal
#   `parent` is a snapshot of the union-find parent mapping.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class KruskalInit(Step):
    TYPE = "init"
    edges:     Tuple[Edge, ...]
    parent:    Dict[int, int]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class Consider(Step):
    TYPE = "consider"
    source:    int
    target:    int
    weight:    float
    parent:    Dict[int, int]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class KruskalAddEdge(Step):
    TYPE = "addEdge"
    source:       int
    target:       int
    weight:       float
    total_weight: float
    parent:       Dict[int, int]
    mst_edges:    Tuple[Edge, ...]


@dataclass(frozen=True)
class Skip(Step):
    TYPE = "skip"
    source:    int
    target:    int
    weight:    float
    parent:    Dict[int, int]
    mst_edges: Tuple[Edge, ...]


@dataclass(frozen=True)
class KruskalComplete(Step):
    TYPE = "complete"
    total_weight: float
    components:   int
    parent:       Dict[int, int]
    mst_edges:    Tuple[Edge, ...]
