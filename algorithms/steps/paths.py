"""
Shortest-path-family steps (Dijkstra, Bellman-Ford, A*, Floyd-Warshall).

Distance maps are {node_id: float} with float("inf") for unreached
nodes.  `previous` maps each reached node to its predecessor on the
best path known so far (the start node is absent).
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from algorithms.step import Step


Distances = Dict[int, float]
Matrix    = Tuple[Tuple[float, ...], ...]


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DijkstraStart(Step):
    TYPE = "start"
    current:   int
    distances: Distances
    visited:   Tuple[int, ...]
    previous:  Dict[int, int]


@dataclass(frozen=True)
class DijkstraExplore(Step):
    TYPE = "explore"
    current:   int
    distances: Distances
    visited:   Tuple[int, ...]
    previous:  Dict[int, int]


@dataclass(frozen=True)
class DijkstraCompare(Step):
    TYPE = "compare"
    current:          int
    neighbor:         int
    weight:           float
    current_distance: float
    new_distance:     float
    distances:        Distances
    visited:          Tuple[int, ...]
    previous:         Dict[int, int]


@dataclass(frozen=True)
class DijkstraUpdate(Step):
    TYPE = "updateDistance"
    current:      int
    neighbor:     int
    new_distance: float
    distances:    Distances
    visited:      Tuple[int, ...]
    previous:     Dict[int, int]


@dataclass(frozen=True)
class DijkstraComplete(Step):
    TYPE = "complete"
    start:     int
    distances: Distances
    visited:   Tuple[int, ...]
    previous:  Dict[int, int]


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BellmanFordInit(Step):
    TYPE = "init"
    start:      int
    edge_count: int
    distances:  Distances


@dataclass(frozen=True)
class IterationStart(Step):
    TYPE = "iterationStart"
    iteration:  int
    total:      int
    distances:  Distances


@dataclass(frozen=True)
class Relax(Step):
    """One edge examined; `relaxed` is False for failed relaxations."""
    TYPE = "relax"
    source:           int
    target:           int
    weight:           float
    current_distance: float
    new_distance:     float
    relaxed:          bool
    iteration:        int
    distances:        Distances


@dataclass(frozen=True)
class DistanceUpdate(Step):
    TYPE = "update"
    source:       int
    target:       int
    new_distance: float
    iteration:    int
    distances:    Distances


@dataclass(frozen=True)
class EarlyStop(Step):
    TYPE = "earlyStop"
    iteration: int
    distances: Distances


@dataclass(frozen=True)
class EdgeNegativeCycle(Step):
    TYPE = "negativeCycle"
    source:    int
    target:    int
    weight:    float
    distances: Distances


@dataclass(frozen=True)
class BellmanFordComplete(Step):
    """Distances are unreliable when has_negative_cycle is True."""
    TYPE = "complete"
    has_negative_cycle: bool
    distances:          Distances
    previous:           Dict[int, int]


# ---------------------------------------------------------------------------
# A*
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AStarInit(Step):
    TYPE = "init"
    start:      int
    end:        int
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


@dataclass(frozen=True)
class AStarExplore(Step):
    TYPE = "explore"
    current:    int
    g:          float
    f:          float
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


@dataclass(frozen=True)
class CheckNeighbor(Step):
    TYPE = "checkNeighbor"
    current:          int
    neighbor:         int
    edge_weight:      float
    tentative_g:      float
    current_g:        float
    open_set:         Tuple[int, ...]
    closed_set:       Tuple[int, ...]
    g_score:          Distances
    f_score:          Distances


@dataclass(frozen=True)
class ScoreUpdate(Step):
    TYPE = "update"
    current:    int
    neighbor:   int
    new_g:      float
    new_f:      float
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


@dataclass(frozen=True)
class AStarFound(Step):
    TYPE = "found"
    current:    int
    path:       Tuple[int, ...]
    cost:       float
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


@dataclass(frozen=True)
class AStarComplete(Step):
    TYPE = "complete"
    path:       Tuple[int, ...]
    cost:       float
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


@dataclass(frozen=True)
class NoPath(Step):
    TYPE = "noPath"
    start:      int
    end:        int
    open_set:   Tuple[int, ...]
    closed_set: Tuple[int, ...]
    g_score:    Distances
    f_score:    Distances


# ---------------------------------------------------------------------------
# Floyd-Warshall
#   i, j, k are node ids; matrix rows/columns follow `nodes`.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MatrixInit(Step):
    TYPE = "init"
    nodes:  Tuple[int, ...]
    matrix: Matrix


@dataclass(frozen=True)
class Intermediate(Step):
    TYPE = "iteration"
    k:      int
    nodes:  Tuple[int, ...]
    matrix: Matrix


@dataclass(frozen=True)
class CellUpdate(Step):
    TYPE = "update"
    i:             int
    j:             int
    k:             int
    old_distance:  float
    new_distance:  float
    nodes:         Tuple[int, ...]
    matrix:        Matrix


@dataclass(frozen=True)
class NodeNegativeCycle(Step):
    TYPE = "negativeCycle"
    node:   int
    nodes:  Tuple[int, ...]
    matrix: Matrix


@dataclass(frozen=True)
class MatrixComplete(Step):
    TYPE = "complete"
    has_negative_cycle: bool
    nodes:              Tuple[int, ...]
    matrix:             Matrix
    next_hop:           Tuple[Tuple[Optional[int], ...], ...]
