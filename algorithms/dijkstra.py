"""
dijkstra.py - Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra.  The next node is picked by a linear scan over
the unvisited set (no heap, no decrease-key); at visualizer scale the
scan is cheap and every candidate is visible in the distance panel.

Yields a Step at:
  1. Initialise distances (all ∞ except the start node, 0)
  2. Pick the unvisited node with the smallest tentative distance  →  "explore"
  3. Every relaxation attempt on an unvisited neighbour  →  "compare"
  4. Each successful relaxation  →  "updateDistance"
  5. Nothing reachable is left  →  "complete"

Ties on distance go to the smallest node id.

Correctness note: Dijkstra requires non-negative weights.  With negative
weights the trace still completes but the distances are not guaranteed.
"""

from typing import Dict, Generator, List

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.paths import (
    DijkstraCompare, DijkstraComplete, DijkstraExplore, DijkstraStart, DijkstraUpdate,
)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    unvisited ← V",                           # 3
    "    while unvisited is not empty:",           # 4
    "        node ← argmin(dist, unvisited)",      # 5
    "        if dist[node] = ∞: break",            # 6
    "        unvisited.remove(node)",              # 7
    "        for (neighbour, w) in adj(node):",    # 8
    "            new_dist ← dist[node] + w",       # 9
    "            if new_dist < dist[neighbour]:",  # 10
    "                dist[neighbour] ← new_dist",  # 11
    "                prev[neighbour] ← node",      # 12
    "    return dist",                             # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, start: int) -> Generator[Step, None, None]:

    INF   = float("inf")
    trace = Trace()

    dist:     Dict[int, float] = {nid: INF for nid in graph.node_ids()}
    previous: Dict[int, int]   = {}
    visited:  Dict[int, None]  = {}
    unvisited = list(graph.node_ids())
    dist[start] = 0

    yield trace.emit(
        DijkstraStart,
        current=start,
        distances=dict(dist),
        visited=(),
        previous={},
        description=(
            f"Starting Dijkstra from node {start}. "
            f"All distances set to infinity except start node (0)."
        ),
    )

    while unvisited:
        current = min(unvisited, key=lambda nid: (dist[nid], nid))
        if dist[current] == INF:
            break

        unvisited.remove(current)
        visited[current] = None

        yield trace.emit(
            DijkstraExplore,
            current=current,
            distances=dict(dist),
            visited=tuple(visited),
            previous=dict(previous),
            description=f"Exploring node {current} (distance: {dist[current]})",
        )

        for nbr in graph.neighbours(current):
            if nbr.node in visited:
                continue

            new_dist = dist[current] + nbr.weight
            yield trace.emit(
                DijkstraCompare,
                current=current,
                neighbor=nbr.node,
                weight=nbr.weight,
                current_distance=dist[nbr.node],
                new_distance=new_dist,
                distances=dict(dist),
                visited=tuple(visited),
                previous=dict(previous),
                description=f"Checking edge {current}→{nbr.node} (weight: {nbr.weight})",
            )

            if new_dist < dist[nbr.node]:
                dist[nbr.node]     = new_dist
                previous[nbr.node] = current
                yield trace.emit(
                    DijkstraUpdate,
                    current=current,
                    neighbor=nbr.node,
                    new_distance=new_dist,
                    distances=dict(dist),
                    visited=tuple(visited),
                    previous=dict(previous),
                    description=f"Updated distance to node {nbr.node}: {new_dist} (via {current})",
                )

    yield trace.emit(
        DijkstraComplete,
        start=start,
        distances=dict(dist),
        visited=tuple(visited),
        previous=dict(previous),
        description=f"Dijkstra complete! Shortest distances from node {start} calculated.",
    )


# ---------------------------------------------------------------------------
def reconstruct_path(previous: Dict[int, int], start: int, target: int) -> List[int]:
    """Walk `previous` back from target; [] if target was never reached."""
    if target != start and target not in previous:
        return []
    path, cur = [target], target
    while cur != start:
        cur = previous[cur]
        path.append(cur)
    path.reverse()
    return path
