"""
bfs.py - Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Start     →  source placed in the queue and marked visited
  2. Dequeue   →  node becomes CURRENT ("explore")
  3. Discover  →  unseen neighbour marked visited and enqueued
  4. Final step  →  everything reachable has been explored

Visited is marked on ENQUEUE, not on dequeue, so a node is enqueued at
most once.  Levels are tracked only for the explanations.
"""

from collections import deque
from typing import Generator, List

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.traversal import BfsComplete, BfsDiscover, BfsExplore, BfsStart


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                  # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        for neighbour in adj(node):",      # 5
    "            if neighbour not visited:",    # 6
    "                visited.add(neighbour)",   # 7
    "                queue.enqueue(neighbour)", # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, start: int) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS execution.

    Args:
        graph : The graph to traverse.
        start : Starting node id.
    """

    trace   = Trace()
    queue   = deque([start])
    visited = {start: None}            # dict as an insertion-ordered set

    yield trace.emit(
        BfsStart,
        current=start,
        visited=tuple(visited),
        frontier=tuple(queue),
        description=f"Starting BFS from node {start}",
    )

    level            = 0
    left_this_level  = 1
    found_next_level = 0

    while queue:
        current = queue.popleft()

        yield trace.emit(
            BfsExplore,
            current=current,
            level=level,
            visited=tuple(visited),
            frontier=tuple(queue),
            description=f"Exploring node {current} (Level {level})",
        )

        for nbr in graph.neighbours(current):
            if nbr.node in visited:
                continue
            visited[nbr.node] = None
            queue.append(nbr.node)
            found_next_level += 1

            yield trace.emit(
                BfsDiscover,
                current=current,
                discovered=nbr.node,
                visited=tuple(visited),
                frontier=tuple(queue),
                description=f"Discovered neighbor {nbr.node} from {current}",
            )

        left_this_level -= 1
        if left_this_level == 0:
            level += 1
            left_this_level  = found_next_level
            found_next_level = 0

    yield trace.emit(
        BfsComplete,
        levels=level,
        visited=tuple(visited),
        frontier=(),
        description=f"BFS complete! Visited {len(visited)} nodes across {level} levels",
    )
