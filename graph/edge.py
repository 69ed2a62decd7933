"""
edge.py - Graph Edge & Adjacency Entry
=======================================
Two small value types shared by the graph container and the algorithms:

  • Neighbour  – one adjacency-list entry: (node, weight)
  • Edge       – a standalone (source, target, weight) triple, used when an
                 algorithm needs the edge *collection* rather than the
                 adjacency view (Bellman-Ford, Kruskal, MST snapshots).

Design decisions:
  - Both are immutable.  Steps embed Edges directly in their snapshots,
    so an Edge must never change after it has been recorded.
  - Endpoints are plain integer node ids, NOT node objects.  This keeps
    edges serialisable and avoids circular references.
  - `key()` gives the ordered pair used to treat (u, v) and (v, u) as the
    same undirected edge.
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple


# ---------------------------------------------------------------------------
# Adjacency entry
# ---------------------------------------------------------------------------
class Neighbour(NamedTuple):
    node:   int
    weight: float = 1

    def to_dict(self) -> dict:
        return {"node": self.node, "weight": self.weight}


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Numeric cost.  Can be negative for Bellman-Ford demos.
    """

    source: int
    target: int
    weight: float = 1

    def key(self) -> Tuple[int, int]:
        """Ordered endpoint pair, identical for (u, v) and (v, u)."""
        if self.source <= self.target:
            return (self.source, self.target)
        return (self.target, self.source)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"
