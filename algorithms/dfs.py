"""
dfs.py - Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit
issues, and the trace shows the real iterative order).

Yields a Step at:
  1. Push source onto the stack
  2. Pop an unvisited node  →  "visit"
  3. Push each unvisited neighbour  →  "push"
  4. Optional target popped  →  "found" (path via parent map), then "complete"
  5. Stack empty  →  "complete", or "notFound" if a target was given

Tie-break: unvisited neighbours are pushed in REVERSE adjacency order so
they are popped, and therefore visited, in adjacency order.

A node can sit on the stack more than once; it is visited on its first
pop and skipped afterwards.  Its parent is whoever pushed it FIRST and
is never overwritten.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.traversal import (
    DfsComplete, DfsFound, DfsNotFound, DfsPush, DfsStart, DfsVisit,
)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, source, target):",          # 0
    "    stack ← [source]",                     # 1
    "    visited ← {}",                         # 2
    "    parent ← {}",                          # 3
    "    while stack is not empty:",            # 4
    "        node ← stack.pop()",               # 5
    "        if node in visited: continue",     # 6
    "        visited.add(node)",                # 7
    "        if node == target: return path",   # 8
    "        for neighbour in reversed(adj(node)):",  # 9
    "            if neighbour not visited:",    # 10
    "                parent.setdefault(neighbour, node)",  # 11
    "                stack.push(neighbour)",    # 12
    "    return NOT FOUND",                     # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, start: int, end: Optional[int] = None) -> Generator[Step, None, None]:

    trace   = Trace()
    stack   = [start]
    visited: Dict[int, None] = {}
    parent:  Dict[int, int]  = {}
    path:    tuple           = ()

    yield trace.emit(
        DfsStart,
        current=start,
        end=end,
        visited=(),
        stack=tuple(stack),
        description=f"Starting DFS from node {start}",
    )

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited[current] = None

        yield trace.emit(
            DfsVisit,
            current=current,
            visited=tuple(visited),
            stack=tuple(stack),
            description=f"Visiting node {current}",
        )

        if end is not None and current == end:
            path = tuple(_reconstruct(parent, start, end))
            yield trace.emit(
                DfsFound,
                end=end,
                path=path,
                visited=tuple(visited),
                stack=tuple(stack),
                description=f"Found target node {end}! Path: {' → '.join(map(str, path))}",
            )
            break

        unvisited = [nbr.node for nbr in graph.neighbours(current) if nbr.node not in visited]
        for node in reversed(unvisited):
            stack.append(node)
            parent.setdefault(node, current)
            yield trace.emit(
                DfsPush,
                current=current,
                pushed=node,
                visited=tuple(visited),
                stack=tuple(stack),
                description=f"Pushing neighbor {node} to stack",
            )

    if end is not None and end not in visited:
        yield trace.emit(
            DfsNotFound,
            end=end,
            visited=tuple(visited),
            stack=tuple(stack),
            description=f"Target node {end} not reachable from {start}",
        )
        return

    yield trace.emit(
        DfsComplete,
        path=path,
        visited=tuple(visited),
        stack=tuple(stack),
        description=f"DFS completed. Visited {len(visited)} nodes.",
    )


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[int, int], start: int, end: int) -> List[int]:
    path = [end]
    cur = end
    while cur != start:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
