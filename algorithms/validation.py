"""
validation.py - Input checks run before any step exists
========================================================
Every function here either returns a clean value the engines can trust
or raises InvalidInput.  Nothing is half-accepted.
"""

import math
from numbers import Real
from typing import Any, List, Optional

from graph import Graph
from algorithms.errors import InvalidInput


def check_array(data: Any, max_length: Optional[int] = None) -> List:
    """A sequence of finite real numbers, copied."""
    if isinstance(data, (str, bytes, dict)) or not hasattr(data, "__iter__"):
        raise InvalidInput(f"expected a sequence of numbers, got {type(data).__name__}")

    values = list(data)
    for pos, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidInput(f"array[{pos}] is not a number: {value!r}")
        if math.isnan(value) or math.isinf(value):
            raise InvalidInput(f"array[{pos}] is not finite: {value!r}")

    if max_length is not None and len(values) > max_length:
        raise InvalidInput(f"array has {len(values)} elements; the limit is {max_length}")
    return values


def check_graph(data: Any) -> Graph:
    """
    A Graph (or its wire-form mapping) with no dangling neighbours.
    Graph objects are re-parsed from their raw adjacency; add_node and
    add_edge do not check ids or weights.
    """
    if not isinstance(data, (Graph, dict)):
        raise InvalidInput(f"expected a graph mapping, got {type(data).__name__}")
    try:
        graph = Graph(data.adjacency()) if isinstance(data, Graph) else Graph.from_dict(data)
    except ValueError as exc:
        raise InvalidInput(f"malformed graph: {exc}") from exc

    dangling = graph.dangling_edges()
    if dangling:
        edge = dangling[0]
        raise InvalidInput(
            f"edge {edge.source}→{edge.target} references node {edge.target}, "
            f"which is not in the graph ({len(dangling)} dangling edge(s))"
        )
    return graph


def check_node(graph: Graph, node: Any, role: str) -> int:
    """`node` must be an id present in `graph`."""
    if isinstance(node, bool):
        raise InvalidInput(f"{role} node must be an integer id, got {node!r}")
    if isinstance(node, str):
        try:
            node = int(node.strip())
        except ValueError:
            raise InvalidInput(f"{role} node must be an integer id, got {node!r}") from None
    if isinstance(node, float) and node.is_integer():
        node = int(node)
    if not isinstance(node, int):
        raise InvalidInput(f"{role} node must be an integer id, got {node!r}")
    if node not in graph:
        raise InvalidInput(f"{role} node {node} is not in the graph")
    return node


def check_size(graph: Graph, limit: int, label: str) -> None:
    if graph.node_count() > limit:
        raise InvalidInput(
            f"{label} is limited to {limit} nodes; this graph has {graph.node_count()}"
        )
