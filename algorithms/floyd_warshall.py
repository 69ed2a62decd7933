"""
floyd_warshall.py - Floyd–Warshall Algorithm
=============================================
All-pairs shortest paths via dynamic programming.

The distance matrix is dense N×N over the nodes in ascending id order:
0 on the diagonal, the cheapest direct edge where one exists, ∞
elsewhere.  A parallel `next_hop` matrix records the first hop of the
best known i → j path, so any path can be rebuilt afterwards with
`reconstruct_path`.

Yields:
  • init           – matrix built from the direct edges
  • iteration      – node k becomes the allowed intermediate vertex
  • update         – dist[i][j] improved via k (old and new value)
  • negativeCycle  – dist[i][i] < 0 after the main loop
  • complete       – final matrices, hasNegativeCycle flag

Cost is cubic in the node count (and every step carries the whole
matrix).  The registry refuses graphs above the configured size limit.
"""

from typing import Generator, List, Optional, Sequence

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.paths import (
    CellUpdate, Intermediate, MatrixComplete, MatrixInit, NodeNegativeCycle,
)


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                              # 0
    "    dist ← matrix of ∞;  dist[i][i] ← 0",                # 1
    "    for each edge (u, v, w): dist[u][v] ← w",            # 2
    "    for k in V:",                                        # 3
    "        for i in V:",                                    # 4
    "            for j in V:",                                # 5
    "                if dist[i][k] + dist[k][j] < dist[i][j]:",   # 6
    "                    dist[i][j] ← dist[i][k] + dist[k][j]",   # 7
    "                    next[i][j] ← next[i][k]",            # 8
    "    for i in V: if dist[i][i] < 0: NEGATIVE CYCLE",      # 9
]


def floyd_warshall(graph: Graph) -> Generator[Step, None, None]:

    INF   = float("inf")
    trace = Trace()
    nodes = tuple(graph.node_ids())
    index = {nid: pos for pos, nid in enumerate(nodes)}
    n     = len(nodes)

    dist: List[List[float]]         = [[INF] * n for _ in range(n)]
    nxt:  List[List[Optional[int]]] = [[None] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0
        nxt[i][i]  = nodes[i]

    for edge in graph.edge_list():
        i, j = index[edge.source], index[edge.target]
        if edge.weight < dist[i][j]:
            dist[i][j] = edge.weight
            nxt[i][j]  = edge.target

    def matrix():
        return tuple(tuple(row) for row in dist)

    yield trace.emit(
        MatrixInit,
        nodes=nodes,
        matrix=matrix(),
        description="Initialized distance matrix",
    )

    for k in range(n):
        yield trace.emit(
            Intermediate,
            k=nodes[k],
            nodes=nodes,
            matrix=matrix(),
            description=f"Using node {nodes[k]} as intermediate vertex",
        )
        for i in range(n):
            for j in range(n):
                via = dist[i][k] + dist[k][j]
                if via < dist[i][j]:
                    old = dist[i][j]
                    dist[i][j] = via
                    nxt[i][j]  = nxt[i][k]
                    yield trace.emit(
                        CellUpdate,
                        i=nodes[i],
                        j=nodes[j],
                        k=nodes[k],
                        old_distance=old,
                        new_distance=via,
                        nodes=nodes,
                        matrix=matrix(),
                        description=(
                            f"Updated dist[{nodes[i]}][{nodes[j]}] = "
                            f"dist[{nodes[i]}][{nodes[k]}] + dist[{nodes[k]}][{nodes[j]}] = {via}"
                        ),
                    )

    has_negative_cycle = False
    for i in range(n):
        if dist[i][i] < 0:
            has_negative_cycle = True
            yield trace.emit(
                NodeNegativeCycle,
                node=nodes[i],
                nodes=nodes,
                matrix=matrix(),
                description=f"Negative cycle detected at node {nodes[i]}! dist[{nodes[i]}][{nodes[i]}] = {dist[i][i]}",
            )

    yield trace.emit(
        MatrixComplete,
        has_negative_cycle=has_negative_cycle,
        nodes=nodes,
        matrix=matrix(),
        next_hop=tuple(tuple(row) for row in nxt),
        description=(
            "Floyd-Warshall completed. Graph contains negative cycles!"
            if has_negative_cycle
            else "Floyd-Warshall completed. All-pairs shortest paths calculated."
        ),
    )


# ---------------------------------------------------------------------------
def reconstruct_path(
    next_hop: Sequence[Sequence[Optional[int]]],
    nodes: Sequence[int],
    source: int,
    target: int,
) -> List[int]:
    """
    Rebuild source → target from a `next_hop` matrix.  Returns [] when no
    path exists.  Only meaningful when no negative cycle was reported.
    """
    index = {nid: pos for pos, nid in enumerate(nodes)}
    if next_hop[index[source]][index[target]] is None:
        return []
    path = [source]
    cur  = source
    while cur != target:
        cur = next_hop[index[cur]][index[target]]
        path.append(cur)
        if len(path) > len(nodes):
            return []
    return path
