"""
astar.py - A* Search
=====================
Generator-based A*: Dijkstra's skeleton, but candidates are ranked by
f = g + h, where g is the cost so far and h a heuristic estimate of the
cost still to go.

Heuristics are looked up by name in HEURISTICS.  The default,
"id_difference", is |node - end|.  Node ids carry no geometry, so it is a
placeholder: it is NOT admissible on arbitrary weighted graphs and the
path found is not guaranteed to be the cheapest.  It is kept as-is so
traces stay comparable with earlier runs; "zero" turns A* back into
Dijkstra for comparison.

Open set: insertion-ordered; ties on f go to the node added first.
Closed set: nodes already expanded, never reopened.

Yields:
  • init           – start / end chosen, start in the open set
  • explore        – lowest-f node moved from open to closed
  • checkNeighbor  – tentative g computed for a neighbour
  • update         – neighbour's g / f improved (and opened)
  • found          – end node selected; path reconstructed  → then complete
  • noPath         – open set exhausted without reaching the end
"""

from typing import Callable, Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.paths import (
    AStarComplete, AStarExplore, AStarFound, AStarInit, CheckNeighbor, NoPath, ScoreUpdate,
)


# ---------------------------------------------------------------------------
# Built-in heuristics  (node id, goal id) → float
# ---------------------------------------------------------------------------
def id_difference(node: int, goal: int) -> float:
    return abs(node - goal)


def zero(node: int, goal: int) -> float:
    """h=0 → A* degrades to Dijkstra.  Useful for teaching."""
    return 0


HEURISTICS: Dict[str, Callable[[int, int], float]] = {
    "id_difference": id_difference,
    "zero":          zero,
}

DEFAULT_HEURISTIC = "id_difference"


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(graph, source, target, h):",        # 0
    "    g[source] ← 0",                           # 1
    "    f[source] ← h(source, target)",           # 2
    "    open_set ← {source}",                     # 3
    "    while open_set:",                         # 4
    "        node ← argmin(f, open_set)",          # 5
    "        if node == target: return path",      # 6
    "        open_set.remove(node); closed.add(node)",  # 7
    "        for (nbr, w) in adj(node):",          # 8
    "            if nbr in closed: continue",      # 9
    "            tentative_g ← g[node] + w",       # 10
    "            if tentative_g < g[nbr]:",        # 11
    "                parent[nbr] ← node",          # 12
    "                g[nbr] ← tentative_g",        # 13
    "                f[nbr] ← g[nbr] + h(nbr)",    # 14
    "                open_set.add(nbr)",           # 15
    "    return NOT FOUND",                        # 16
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    graph: Graph,
    start: int,
    end: Optional[int] = None,
    heuristic: str = DEFAULT_HEURISTIC,
) -> Generator[Step, None, None]:
    """
    Args:
        graph     : The graph to search.
        start     : Starting node id.
        end       : Goal node id; defaults to the largest node id.
        heuristic : Key into HEURISTICS.
    """

    INF   = float("inf")
    trace = Trace()
    h     = HEURISTICS[heuristic]
    nodes = graph.node_ids()
    if end is None:
        end = nodes[-1]

    g_score:   Dict[int, float] = {nid: INF for nid in nodes}
    f_score:   Dict[int, float] = {nid: INF for nid in nodes}
    came_from: Dict[int, int]   = {}
    open_set:  Dict[int, None]  = {start: None}
    closed:    Dict[int, None]  = {}

    g_score[start] = 0
    f_score[start] = h(start, end)

    def snapshot() -> dict:
        return {
            "open_set":   tuple(open_set),
            "closed_set": tuple(closed),
            "g_score":    dict(g_score),
            "f_score":    dict(f_score),
        }

    yield trace.emit(
        AStarInit,
        start=start,
        end=end,
        description=f"Starting A* search from {start} to {end}",
        **snapshot(),
    )

    while open_set:
        current = min(open_set, key=lambda nid: f_score[nid])

        if current == end:
            path = _reconstruct(came_from, current)
            yield trace.emit(
                AStarFound,
                current=current,
                path=tuple(path),
                cost=g_score[current],
                description=(
                    f"Found path to {current}! Cost: {g_score[current]}, "
                    f"Path: {' → '.join(map(str, path))}"
                ),
                **snapshot(),
            )
            yield trace.emit(
                AStarComplete,
                path=tuple(path),
                cost=g_score[current],
                description=f"A* complete: reached {end} with cost {g_score[current]}",
                **snapshot(),
            )
            return

        del open_set[current]
        closed[current] = None

        yield trace.emit(
            AStarExplore,
            current=current,
            g=g_score[current],
            f=f_score[current],
            description=f"Exploring node {current} (g={g_score[current]}, f={f_score[current]})",
            **snapshot(),
        )

        for nbr in graph.neighbours(current):
            if nbr.node in closed:
                continue

            tentative = g_score[current] + nbr.weight
            yield trace.emit(
                CheckNeighbor,
                current=current,
                neighbor=nbr.node,
                edge_weight=nbr.weight,
                tentative_g=tentative,
                current_g=g_score[nbr.node],
                description=(
                    f"Checking neighbor {nbr.node}: "
                    f"{g_score[current]} + {nbr.weight} = {tentative}"
                ),
                **snapshot(),
            )

            if tentative < g_score[nbr.node]:
                came_from[nbr.node] = current
                g_score[nbr.node]   = tentative
                f_score[nbr.node]   = tentative + h(nbr.node, end)
                open_set.setdefault(nbr.node, None)
                yield trace.emit(
                    ScoreUpdate,
                    current=current,
                    neighbor=nbr.node,
                    new_g=g_score[nbr.node],
                    new_f=f_score[nbr.node],
                    description=(
                        f"Updated scores for {nbr.node}: "
                        f"g={g_score[nbr.node]}, f={f_score[nbr.node]}"
                    ),
                    **snapshot(),
                )

    yield trace.emit(
        NoPath,
        start=start,
        end=end,
        description=f"No path found from {start} to {end}!",
        **snapshot(),
    )


# ---------------------------------------------------------------------------
def _reconstruct(came_from: Dict[int, int], target: int) -> List[int]:
    path, cur = [target], target
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path
