"""
topological_sort.py - Kahn's Algorithm
=======================================
Every adjacency entry is read as a directed edge u → v.

In-degrees are counted first; all zero-in-degree nodes are queued in
ascending id order.  Then: dequeue, append to the order, decrement every
successor, queue any successor that has just dropped to zero.  A node is
never queued twice.

If fewer than |V| nodes come out, the rest sit on or behind a cycle.  The
run then ends with a `cycle` step whose `processed` list is NOT a valid
order.

Yields:
  • init      – in-degrees computed
  • enqueue   – node with in-degree 0 joins the queue
  • process   – node dequeued and appended to the order
  • reduce    – successor's in-degree decremented
  • complete  – full topological order
  • cycle     – not a DAG
"""

from collections import deque
from typing import Deque, Dict, Generator, List

from graph import Graph
from algorithms.step import Step, Trace
from algorithms.steps.ordering import Cycle, Enqueue, Process, Reduce, TopoComplete, TopoInit


PSEUDOCODE: List[str] = [
    "def TopologicalSort(graph):",                 # 0
    "    in_deg ← count incoming edges",           # 1
    "    queue ← [v with in_deg[v] = 0]",          # 2
    "    while queue:",                            # 3
    "        u ← queue.popleft()",                 # 4
    "        order.append(u)",                     # 5
    "        for v in adj(u):",                    # 6
    "            in_deg[v] ← in_deg[v] - 1",       # 7
    "            if in_deg[v] = 0: queue.append(v)",   # 8
    "    if |order| < |V|: CYCLE",                 # 9
]


def topological_sort(graph: Graph) -> Generator[Step, None, None]:

    trace = Trace()
    nodes = graph.node_ids()

    in_degree: Dict[int, int] = {nid: 0 for nid in nodes}
    for edge in graph.edge_list():
        in_degree[edge.target] += 1

    queue:  Deque[int]      = deque()
    queued: Dict[int, None] = {}
    order:  List[int]       = []

    yield trace.emit(
        TopoInit,
        in_degree=dict(in_degree),
        queue=(),
        result=(),
        description="Calculated in-degree for all nodes",
    )

    for nid in nodes:
        if in_degree[nid] == 0:
            queue.append(nid)
            queued[nid] = None
            yield trace.emit(
                Enqueue,
                node=nid,
                in_degree=dict(in_degree),
                queue=tuple(queue),
                result=(),
                description=f"Node {nid} has in-degree 0, added to queue",
            )

    while queue:
        current = queue.popleft()
        order.append(current)
        yield trace.emit(
            Process,
            current=current,
            in_degree=dict(in_degree),
            queue=tuple(queue),
            result=tuple(order),
            description=f"Processing node {current}, added to topological order",
        )

        for nbr in graph.neighbours(current):
            in_degree[nbr.node] -= 1
            yield trace.emit(
                Reduce,
                current=current,
                neighbor=nbr.node,
                new_degree=in_degree[nbr.node],
                in_degree=dict(in_degree),
                queue=tuple(queue),
                result=tuple(order),
                description=f"Reduced in-degree of node {nbr.node} to {in_degree[nbr.node]}",
            )

            if in_degree[nbr.node] == 0 and nbr.node not in queued:
                queue.append(nbr.node)
                queued[nbr.node] = None
                yield trace.emit(
                    Enqueue,
                    node=nbr.node,
                    in_degree=dict(in_degree),
                    queue=tuple(queue),
                    result=tuple(order),
                    description=f"Node {nbr.node} now has in-degree 0, added to queue",
                )

    if len(order) < len(nodes):
        done      = set(order)
        remaining = tuple(nid for nid in nodes if nid not in done)
        yield trace.emit(
            Cycle,
            processed=tuple(order),
            remaining=remaining,
            in_degree=dict(in_degree),
            description=(
                f"Graph contains a cycle! {len(remaining)} node(s) could not be ordered: "
                f"{', '.join(map(str, remaining))}"
            ),
        )
        return

    yield trace.emit(
        TopoComplete,
        order=tuple(order),
        in_degree=dict(in_degree),
        description=f"Topological sort completed: [{' → '.join(map(str, order))}]",
    )
