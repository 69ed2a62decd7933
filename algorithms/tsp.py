"""
tsp.py - Travelling Salesman (Held-Karp bitmask DP)
====================================================
dp[mask][last] = cheapest path that starts at the start node, visits
exactly the nodes in `mask`, and ends at `last`.

Masks are over node POSITIONS in ascending id order (bit i = i-th
smallest id).  The graph is read as undirected: each adjacency entry
sets both matrix cells, and parallel edges keep the cheaper weight.

Transitions are tried in a fixed order (mask ascending, then last, then
next by position) so the trace is reproducible.  Every `consider` and
`updateDP` step carries the partial tour of the DP cell it touches,
rebuilt from the parent table, so a single step can be drawn on its own.

No Hamiltonian cycle → `complete` with min_cost ∞ and an empty path.
A single-node graph is the trivial tour (start, start) with cost 0.

Time O(2^N · N²) and every transition emits a step, so the registry
caps N from configuration.
"""

from typing import Generator, List, Optional, Sequence, Tuple

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.ordering import DpInit, FinalConsider, TspComplete, TspConsider, TspInit, UpdateDP


PSEUDOCODE: List[str] = [
    "def TSP(graph, start):",                                  # 0
    "    dp[{start}][start] ← 0",                              # 1
    "    for mask in 1 .. 2^N - 1:",                           # 2
    "        for last in mask with dp[mask][last] < ∞:",       # 3
    "            for next not in mask:",                       # 4
    "                cost ← dp[mask][last] + w(last, next)",   # 5
    "                if cost < dp[mask | next][next]:",        # 6
    "                    dp[mask | next][next] ← cost",        # 7
    "    return min(dp[ALL][i] + w(i, start))",                # 8
]


def tsp(graph: Graph, start: int) -> Generator[Step, None, None]:

    INF   = float("inf")
    trace = Trace()
    nodes = tuple(graph.node_ids())
    index = {nid: pos for pos, nid in enumerate(nodes)}
    n     = len(nodes)
    s     = index[start]

    weight: List[List[float]] = [[INF] * n for _ in range(n)]
    for edge in graph.edge_list():
        i, j = index[edge.source], index[edge.target]
        if edge.weight < weight[i][j]:
            weight[i][j] = edge.weight
            weight[j][i] = edge.weight

    yield trace.emit(
        TspInit,
        nodes=nodes,
        start=start,
        description=f"Starting TSP with {n} cities, starting at {start}",
    )

    full   = (1 << n) - 1
    dp:     List[List[float]]         = [[INF] * n for _ in range(1 << n)]
    parent: List[List[Optional[int]]] = [[None] * n for _ in range(1 << n)]
    dp[1 << s][s] = 0

    yield trace.emit(
        DpInit,
        mask=1 << s,
        node=start,
        cost=0,
        path=(start,),
        description=f"DP initialized: dp[{1 << s:b}][{start}] = 0",
    )

    if n == 1:
        yield trace.emit(
            TspComplete,
            min_cost=0,
            path=(start, start),
            visited=(start,),
            description=f"TSP completed! Single city {start}, cost 0",
        )
        return

    for mask in range(1, full + 1):
        for last in range(n):
            if not mask & (1 << last) or dp[mask][last] == INF:
                continue
            for nxt in range(n):
                if mask & (1 << nxt) or weight[last][nxt] == INF:
                    continue

                new_mask = mask | (1 << nxt)
                cost     = dp[mask][last] + weight[last][nxt]
                yield trace.emit(
                    TspConsider,
                    mask=mask,
                    new_mask=new_mask,
                    last=nodes[last],
                    next_node=nodes[nxt],
                    current_cost=dp[mask][last],
                    edge_cost=weight[last][nxt],
                    new_cost=cost,
                    path=_walk(parent, nodes, mask, last) + (nodes[nxt],),
                    description=(
                        f"Considering path: mask={mask:b} → {nodes[nxt]}, "
                        f"cost={dp[mask][last]} + {weight[last][nxt]} = {cost}"
                    ),
                )

                if cost < dp[new_mask][nxt]:
                    dp[new_mask][nxt]     = cost
                    parent[new_mask][nxt] = last
                    yield trace.emit(
                        UpdateDP,
                        mask=new_mask,
                        node=nodes[nxt],
                        new_cost=cost,
                        parent=nodes[last],
                        path=_walk(parent, nodes, new_mask, nxt),
                        description=f"Updated dp[{new_mask:b}][{nodes[nxt]}] = {cost}",
                    )

    best_cost = INF
    best_tour: Tuple[int, ...] = ()
    for last in range(n):
        if last == s:
            continue
        total = dp[full][last] + weight[last][s]
        tour  = _walk(parent, nodes, full, last) + (start,) if total < INF else ()
        if total < best_cost:
            best_cost = total
            best_tour = tour
        yield trace.emit(
            FinalConsider,
            last_node=nodes[last],
            cost_to_end=dp[full][last],
            return_cost=weight[last][s],
            total_cost=total,
            best_cost=best_cost,
            path=tour,
            description=(
                f"Complete path ending at {nodes[last]}: "
                f"{dp[full][last]} + {weight[last][s]} = {total}"
            ),
        )

    if best_cost == INF:
        yield trace.emit(
            TspComplete,
            min_cost=INF,
            path=(),
            visited=(),
            description="No Hamiltonian cycle found!",
        )
        return

    yield trace.emit(
        TspComplete,
        min_cost=best_cost,
        path=best_tour,
        visited=tuple(dict.fromkeys(best_tour)),
        description=(
            f"TSP completed! Minimum cost: {best_cost}, "
            f"Path: {' → '.join(map(str, best_tour))}"
        ),
    )


def _walk(
    parent: Sequence[Sequence[Optional[int]]],
    nodes: Sequence[int],
    mask: int,
    last: int,
) -> Tuple[int, ...]:
    """Node ids of the partial tour stored in dp[mask][last], start first."""
    path: List[int] = []
    cur: Optional[int] = last
    while cur is not None:
        path.append(nodes[cur])
        prev = parent[mask][cur]
        mask ^= 1 << cur
        cur = prev
    path.reverse()
    return tuple(path)


def tour_cost(graph: Graph, tour: Sequence[int]) -> float:
    """Sum of the cheapest edge weights along `tour`; ∞ if a hop is missing."""
    total = 0
    for a, b in zip(tour, tour[1:]):
        hops = [n.weight for n in graph.neighbours(a) if n.node == b]
        hops += [n.weight for n in graph.neighbours(b) if n.node == a]
        if not hops:
            return float("inf")
        total += min(hops)
    return total
