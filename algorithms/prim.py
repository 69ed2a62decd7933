"""
prim.py - Prim's Minimum Spanning Tree
=======================================
Grows one tree from the start node.  Each round selects the unvisited
node with the smallest key (cheapest known edge into the tree) by a
linear scan, attaches it through its parent edge, and lowers the keys of
its unvisited neighbours.

Nodes whose key is still ∞ when the scan runs are unreachable from the
start; they are simply left out.  A disconnected graph yields the MST
of the start node's component, not an error.

Ties on key go to the smallest node id.
"""

from typing import Dict, Generator, List, Optional

from graph import Edge, Graph
from algorithms.step import Step, Trace
from algorithms.steps.spanning import PrimAddEdge, PrimComplete, PrimInit, Select, UpdateKey


PSEUDOCODE: List[str] = [
    "def Prim(graph, source):",                      # 0
    "    key ← {v: ∞};  key[source] ← 0",            # 1
    "    while some unvisited v has key[v] < ∞:",    # 2
    "        u ← argmin(key, unvisited)",            # 3
    "        visited.add(u)",                        # 4
    "        if parent[u]: mst.add(parent[u], u)",   # 5
    "        for (v, w) in adj(u):",                 # 6
    "            if v unvisited and w < key[v]:",    # 7
    "                key[v] ← w;  parent[v] ← u",    # 8
]


def prim(graph: Graph, start: int) -> Generator[Step, None, None]:

    INF   = float("inf")
    trace = Trace()
    nodes = graph.node_ids()

    key:     Dict[int, float]         = {nid: INF for nid in nodes}
    parent:  Dict[int, Optional[int]] = {nid: None for nid in nodes}
    visited: Dict[int, None]          = {}
    mst:     List[Edge]               = []
    key[start] = 0

    yield trace.emit(
        PrimInit,
        start=start,
        key=dict(key),
        visited=(),
        mst_edges=(),
        description=f"Starting Prim's algorithm from node {start}",
    )

    while True:
        candidates = [nid for nid in nodes if nid not in visited]
        if not candidates:
            break
        current = min(candidates, key=lambda nid: (key[nid], nid))
        if key[current] == INF:
            break

        visited[current] = None
        yield trace.emit(
            Select,
            current=current,
            key_value=key[current],
            key=dict(key),
            visited=tuple(visited),
            mst_edges=tuple(mst),
            description=f"Selected node {current} with key {key[current]}",
        )

        if parent[current] is not None:
            edge = Edge(parent[current], current, key[current])
            mst.append(edge)
            yield trace.emit(
                PrimAddEdge,
                source=edge.source,
                target=edge.target,
                weight=edge.weight,
                total_weight=_total(mst),
                key=dict(key),
                visited=tuple(visited),
                mst_edges=tuple(mst),
                description=f"Added edge {edge.source}→{edge.target} (weight: {edge.weight}) to MST",
            )

        for nbr in graph.neighbours(current):
            if nbr.node in visited or nbr.weight >= key[nbr.node]:
                continue
            key[nbr.node]    = nbr.weight
            parent[nbr.node] = current
            yield trace.emit(
                UpdateKey,
                current=current,
                neighbor=nbr.node,
                new_key=nbr.weight,
                key=dict(key),
                parent=dict(parent),
                visited=tuple(visited),
                mst_edges=tuple(mst),
                description=f"Updated key of node {nbr.node} to {nbr.weight} (via {current})",
            )

    total = _total(mst)
    yield trace.emit(
        PrimComplete,
        total_weight=total,
        visited=tuple(visited),
        mst_edges=tuple(mst),
        description=(
            f"Prim's algorithm completed! MST weight: {total}, "
            f"Edges: {', '.join(f'{e.source}-{e.target}' for e in mst)}"
        ),
    )


def _total(edges: List[Edge]) -> float:
    return sum(e.weight for e in edges)
