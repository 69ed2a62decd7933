"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Edge, Neighbour
"""

from graph.edge  import Edge, Neighbour
from graph.graph import Graph

__all__ = [
    "Edge",
    "Neighbour",
    "Graph",
]
