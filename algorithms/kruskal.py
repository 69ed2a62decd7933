"""
kruskal.py - Kruskal's Minimum Spanning Tree
=============================================
1. Collect every edge once: (u, v) and (v, u) share the ordered-pair
   key, and the first occurrence (node order, then adjacency order) wins.
2. Sort ascending by weight.  The sort is stable, so equal weights keep
   collection order.
3. Walk the sorted edges with a union-find: an edge joins the forest iff
   its endpoints are in different components.
4. Stop as soon as |V|-1 edges are in.

A disconnected graph yields a spanning FOREST.  That is the expected
result, not an error; `components` on the final step says how many trees.
"""

from typing import Dict, Generator, List, Tuple

from graph import Edge, Graph
from algorithms.step import Step, Trace
from algorithms.steps.spanning import Consider, KruskalAddEdge, KruskalComplete, KruskalInit, Skip
from algorithms.union_find import UnionFind


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                           # 0
    "    edges ← unique edges sorted by weight",     # 1
    "    dsu ← DisjointSet(V)",                      # 2
    "    for (u, v, w) in edges:",                   # 3
    "        if |mst| = |V| - 1: break",             # 4
    "        if dsu.find(u) ≠ dsu.find(v):",         # 5
    "            mst.add((u, v, w))",                # 6
    "            dsu.union(u, v)",                   # 7
    "    return mst",                                # 8
]


def kruskal(graph: Graph) -> Generator[Step, None, None]:

    trace  = Trace()
    nodes  = graph.node_ids()
    dsu    = UnionFind(nodes)
    edges  = sorted(unique_edges(graph), key=lambda e: e.weight)
    target = max(len(nodes) - 1, 0)
    mst: List[Edge] = []

    yield trace.emit(
        KruskalInit,
        edges=tuple(edges),
        parent=dsu.snapshot(),
        mst_edges=(),
        description=f"Collected {len(edges)} edges, sorted by weight",
    )

    for edge in edges:
        if len(mst) >= target:
            break

        u, v, w = edge.source, edge.target, edge.weight
        yield trace.emit(
            Consider,
            source=u,
            target=v,
            weight=w,
            parent=dsu.snapshot(),
            mst_edges=tuple(mst),
            description=f"Considering edge {u}→{v} (weight: {w})",
        )

        if dsu.union(u, v):
            mst.append(edge)
            yield trace.emit(
                KruskalAddEdge,
                source=u,
                target=v,
                weight=w,
                total_weight=_total(mst),
                parent=dsu.snapshot(),
                mst_edges=tuple(mst),
                description=f"Added edge {u}→{v} to MST (no cycle formed)",
            )
        else:
            yield trace.emit(
                Skip,
                source=u,
                target=v,
                weight=w,
                parent=dsu.snapshot(),
                mst_edges=tuple(mst),
                description=f"Skipped edge {u}→{v} (would create cycle)",
            )

    total      = _total(mst)
    components = dsu.component_count()
    shape      = "spanning tree" if components <= 1 else f"spanning forest of {components} trees"
    yield trace.emit(
        KruskalComplete,
        total_weight=total,
        components=components,
        parent=dsu.snapshot(),
        mst_edges=tuple(mst),
        description=f"Kruskal's algorithm completed! {shape}, weight: {total}, {len(mst)} edges",
    )


def unique_edges(graph: Graph) -> List[Edge]:
    """Each undirected edge once, keyed by its ordered endpoint pair."""
    seen: Dict[Tuple[int, int], Edge] = {}
    for edge in graph.edge_list():
        seen.setdefault(edge.key(), edge)
    return list(seen.values())


def _total(edges: List[Edge]) -> float:
    return sum(e.weight for e in edges)
