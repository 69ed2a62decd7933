"""
bellman_ford.py - Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that handles NEGATIVE edge
weights and reports negative cycles instead of looping on them.

Structure:
  • Up to V-1 passes relaxing every adjacency entry.
  • An early stop as soon as a full pass changes nothing.
  • One more full scan: every edge that can STILL be relaxed sits on or
    behind a negative cycle.

Every adjacency entry is one directed edge here.  An undirected graph
stores each edge twice, so a single negative undirected edge is already
a negative cycle (u → v → u).

Yields a Step for:
  1. Initialisation
  2. The start of each pass                   ("iterationStart")
  3. Every edge examined, relaxed or not      ("relax", relaxed=True/False)
  4. Every successful relaxation              ("update")
  5. Convergence before V-1 passes            ("earlyStop")
  6. Each edge still relaxable afterwards     ("negativeCycle")
  7. Final summary                            ("complete", hasNegativeCycle)
"""

from typing import Dict, Generator, List

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.paths import (
    BellmanFordComplete, BellmanFordInit, DistanceUpdate, EarlyStop,
    EdgeNegativeCycle, IterationStart, Relax,
)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, source):",             # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    for i in 1 … |V|-1:",                     # 3
    "        for each edge (u, v, w):",            # 4
    "            if dist[u] + w < dist[v]:",       # 5
    "                dist[v] ← dist[u] + w",       # 6
    "        if nothing changed: break",           # 7
    "    // negative-cycle check:",                # 8
    "    for each edge (u, v, w):",                # 9
    "        if dist[u] + w < dist[v]:",           # 10
    "            report NEGATIVE CYCLE",           # 11
    "    return dist",                             # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bellman_ford(graph: Graph, start: int) -> Generator[Step, None, None]:

    INF   = float("inf")
    trace = Trace()
    V     = graph.node_count()
    edges = graph.edge_list()

    dist:     Dict[int, float] = {nid: INF for nid in graph.node_ids()}
    previous: Dict[int, int]   = {}
    dist[start] = 0

    yield trace.emit(
        BellmanFordInit,
        start=start,
        edge_count=len(edges),
        distances=dict(dist),
        description=(
            f"Initializing Bellman-Ford from node {start}. "
            f"Up to {max(V - 1, 0)} passes over {len(edges)} edges."
        ),
    )

    # ==============================================================
    # MAIN PASSES
    # ==============================================================
    for iteration in range(1, V):

        yield trace.emit(
            IterationStart,
            iteration=iteration,
            total=V - 1,
            distances=dict(dist),
            description=f"Iteration {iteration}/{V - 1}: Relaxing all edges",
        )

        updated = False
        for edge in edges:
            u, v, w  = edge.source, edge.target, edge.weight
            new_dist = dist[u] + w
            relaxed  = new_dist < dist[v]

            yield trace.emit(
                Relax,
                source=u,
                target=v,
                weight=w,
                current_distance=dist[v],
                new_distance=new_dist,
                relaxed=relaxed,
                iteration=iteration,
                distances=dict(dist),
                description=(
                    f"Checking edge {u}→{v} (weight: {w}): "
                    f"{dist[u]} + {w} = {new_dist} "
                    + ("improves" if relaxed else "does not improve")
                    + f" on {dist[v]}"
                ),
            )

            if relaxed:
                dist[v]     = new_dist
                previous[v] = u
                updated     = True
                yield trace.emit(
                    DistanceUpdate,
                    source=u,
                    target=v,
                    new_distance=new_dist,
                    iteration=iteration,
                    distances=dict(dist),
                    description=f"Updated distance to node {v}: {new_dist} (via {u})",
                )

        if not updated:
            yield trace.emit(
                EarlyStop,
                iteration=iteration,
                distances=dict(dist),
                description=(
                    f"Iteration {iteration}: no distance changed, distances converged. "
                    f"Remaining iterations skipped."
                ),
            )
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    has_negative_cycle = False
    for edge in edges:
        u, v, w = edge.source, edge.target, edge.weight
        if dist[u] + w < dist[v]:
            has_negative_cycle = True
            yield trace.emit(
                EdgeNegativeCycle,
                source=u,
                target=v,
                weight=w,
                distances=dict(dist),
                description=f"Negative cycle detected! {dist[u]} + {w} < {dist[v]} on edge {u}→{v}",
            )

    if has_negative_cycle:
        description = "Bellman-Ford completed. Graph contains a negative weight cycle!"
    else:
        description = f"Bellman-Ford completed. Shortest distances from node {start} calculated."

    yield trace.emit(
        BellmanFordComplete,
        has_negative_cycle=has_negative_cycle,
        distances=dict(dist),
        previous=dict(previous),
        description=description,
    )
