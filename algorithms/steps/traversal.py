"""
Traversal-family steps (BFS, DFS).

`visited` is kept in visitation order.  BFS steps carry the queue as
`frontier`; DFS steps carry the full `stack` (top of stack last).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from algorithms.step import Step


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BfsStart(Step):
    TYPE = "start"
    current:  int
    visited:  Tuple[int, ...]
    frontier: Tuple[int, ...]


@dataclass(frozen=True)
class BfsExplore(Step):
    TYPE = "explore"
    current:  int
    level:    int
    visited:  Tuple[int, ...]
    frontier: Tuple[int, ...]


@dataclass(frozen=True)
class BfsDiscover(Step):
    TYPE = "discover"
    current:    int
    discovered: int
    visited:    Tuple[int, ...]
    frontier:   Tuple[int, ...]


@dataclass(frozen=True)
class BfsComplete(Step):
    TYPE = "complete"
    levels:   int
    visited:  Tuple[int, ...]
    frontier: Tuple[int, ...]


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DfsStart(Step):
    TYPE = "start"
    current: int
    end:     Optional[int]
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]


@dataclass(frozen=True)
class DfsVisit(Step):
    TYPE = "visit"
    current: int
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]


@dataclass(frozen=True)
class DfsPush(Step):
    TYPE = "push"
    current: int
    pushed:  int
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]


@dataclass(frozen=True)
class DfsFound(Step):
    TYPE = "found"
    end:     int
    path:    Tuple[int, ...]
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]


@dataclass(frozen=True)
class DfsNotFound(Step):
    TYPE = "notFound"
    end:     int
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]


@dataclass(frozen=True)
class DfsComplete(Step):
    TYPE = "complete"
    path:    Tuple[int, ...]
    visited: Tuple[int, ...]
    stack:   Tuple[int, ...]
