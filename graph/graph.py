"""
graph.py - Graph Container & Generator
=======================================
Single source of truth for the graph.  Every graph algorithm reads from
this object and none of them writes to it.

Responsibilities:
  1. Build the adjacency mapping              (add_node / add_edge)
  2. Adjacency queries                        (neighbours, edge_list, …)
  3. Graph-generation factory methods         (random, grid, star, tree, dag)
  4. Serialisation round-trip                 (to_dict / from_dict)

Design decisions:
  - The graph IS its adjacency mapping: {node_id: [Neighbour, …]}.
    Undirected edges are stored twice, once per endpoint, with the same
    weight.  Directed edges are stored once.
  - Node ids are ints.  Generators produce dense ids 0..N-1 but nothing
    here relies on that.
  - `node_ids()` is always ascending.  That order is the "key iteration
    order" the algorithms use, so traces are reproducible regardless of
    the order nodes were inserted.
  - Adjacency lists keep insertion order; DFS and BFS tie-breaks depend on it.
"""

import random
from typing import Dict, Iterable, List, Optional, Tuple

from graph.edge import Edge, Neighbour


class Graph:
    """
    Attributes:
        _adj : {node_id: [Neighbour, …]}
    """

    def __init__(self, adjacency: Optional[Dict[int, Iterable]] = None):
        self._adj: Dict[int, List[Neighbour]] = {}
        if adjacency:
            for raw_id, entries in adjacency.items():
                node_id = self.add_node(_parse_id(raw_id))
                for entry in entries:
                    nbr, weight = _parse_entry(entry)
                    self._adj[node_id].append(Neighbour(nbr, weight))

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node_id: int) -> int:
        self._adj.setdefault(node_id, [])
        return node_id

    def add_edge(self, source: int, target: int, weight: float = 1, directed: bool = False) -> Edge:
        """Add source→target (and target→source unless directed)."""
        self.add_node(source)
        self.add_node(target)
        self._adj[source].append(Neighbour(target, weight))
        if not directed:
            self._adj[target].append(Neighbour(source, weight))
        return Edge(source, target, weight)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Neighbour]:
        """Adjacency entries of node_id in insertion order ([] if unknown)."""
        return list(self._adj.get(node_id, []))

    def node_ids(self) -> List[int]:
        return sorted(self._adj)

    def edge_list(self) -> List[Edge]:
        """Every adjacency entry as an Edge in node order, then adjacency order."""
        return [
            Edge(node_id, nbr.node, nbr.weight)
            for node_id in self.node_ids()
            for nbr in self._adj[node_id]
        ]

    def dangling_edges(self) -> List[Edge]:
        """Entries whose neighbour is not a key of the mapping."""
        return [e for e in self.edge_list() if e.target not in self._adj]

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, []))

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        """Number of adjacency entries (undirected edges count twice)."""
        return sum(len(entries) for entries in self._adj.values())

    def has_negative_edges(self) -> bool:
        return any(nbr.weight < 0 for entries in self._adj.values() for nbr in entries)

    def adjacency(self) -> Dict[int, List[Neighbour]]:
        """Shallow copy of the mapping in insertion order, unchecked."""
        return {node_id: list(entries) for node_id, entries in self._adj.items()}

    def copy(self) -> "Graph":
        return Graph(self.adjacency())

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, List[dict]]:
        """Wire form: {"0": [{"node": 1, "weight": 4}, …], …}."""
        return {
            str(node_id): [nbr.to_dict() for nbr in self._adj[node_id]]
            for node_id in self.node_ids()
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Parse the wire form.  Keys may be ints or numeric strings; entries
        may be {"node": n, "weight": w}, {"neighbor": n, "weight": w}, or
        (n, w) pairs.  Raises ValueError on anything else.
        """
        if not isinstance(data, dict):
            raise ValueError(f"graph must be a mapping, got {type(data).__name__}")
        g = cls()
        for raw_id, entries in data.items():
            node_id = _parse_id(raw_id)
            g.add_node(node_id)
            if not isinstance(entries, (list, tuple)):
                raise ValueError(f"adjacency of node {raw_id!r} must be a list")
            for entry in entries:
                nbr, weight = _parse_entry(entry)
                g._adj[node_id].append(Neighbour(nbr, weight))
        return g

    # ==================================================================
    # GENERATORS: Factory class-methods
    # ==================================================================

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.4,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
    ) -> "Graph":
        """
        Erdős–Rényi style undirected graph.
        Each possible edge is included with probability `edge_probability`;
        a spanning backbone over a shuffled node order guarantees connectivity.
        """
        rng = random.Random(seed)
        g = cls()
        for i in range(num_nodes):
            g.add_node(i)

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.add_edge(i, j, weight=rng.randint(*weight_range))

        # guarantee connectivity: add a spanning-tree backbone
        order = list(range(num_nodes))
        rng.shuffle(order)
        for k in range(1, len(order)):
            a, b = order[k - 1], order[k]
            if not any(nbr.node == b for nbr in g._adj[a]):
                g.add_edge(a, b, weight=rng.randint(*weight_range))

        return g

    # ---------- Grid Graph ----------
    @classmethod
    def generate_grid(cls, rows: int = 4, cols: int = 4) -> "Graph":
        """
        2-D grid, unit weights.  Node r*cols + c links to its right, down,
        left and up neighbours, in that order.
        """
        g = cls()
        for i in range(rows * cols):
            g.add_node(i)
            r, c = divmod(i, cols)
            if c < cols - 1:
                g._adj[i].append(Neighbour(i + 1, 1))
            if r < rows - 1:
                g._adj[i].append(Neighbour(i + cols, 1))
            if c > 0:
                g._adj[i].append(Neighbour(i - 1, 1))
            if r > 0:
                g._adj[i].append(Neighbour(i - cols, 1))
        return g

    # ---------- Star Graph ----------
    @classmethod
    def generate_star(
        cls,
        num_nodes: int = 7,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
    ) -> "Graph":
        """Every node connects to the hub, node 0."""
        rng = random.Random(seed)
        g = cls()
        if num_nodes > 0:
            g.add_node(0)
        for i in range(1, num_nodes):
            g.add_edge(0, i, weight=rng.randint(*weight_range))
        return g

    # ---------- Random Tree ----------
    @classmethod
    def generate_tree(
        cls,
        levels: int = 3,
        max_children: int = 3,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
    ) -> "Graph":
        """Rooted at 0; each node gets 1..max_children children per level (depth-first ids)."""
        rng = random.Random(seed)
        g = cls()
        g.add_node(0)
        next_id = 1

        stack = [(0, 0)]                 # (node_id, depth)
        while stack:
            parent, depth = stack.pop()
            if depth >= levels:
                continue
            children = []
            for _ in range(rng.randint(1, max_children)):
                child = next_id
                next_id += 1
                g.add_edge(parent, child, weight=rng.randint(*weight_range))
                children.append((child, depth + 1))
            # reversed so the first child is expanded first
            stack.extend(reversed(children))
        return g

    # ---------- Random DAG ----------
    @classmethod
    def generate_dag(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
    ) -> "Graph":
        """Directed edges only from lower to higher id, so the result is acyclic."""
        rng = random.Random(seed)
        g = cls()
        for i in range(num_nodes):
            g.add_node(i)
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.add_edge(i, j, weight=rng.randint(*weight_range), directed=True)
        return g

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __contains__(self, node_id) -> bool:
        return node_id in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other) -> bool:
        return isinstance(other, Graph) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, entries={self.edge_count()})"


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------
def _parse_id(raw) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"invalid node id {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise ValueError(f"invalid node id {raw!r}")


def _parse_weight(raw) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"invalid edge weight {raw!r}")
    if raw != raw:
        raise ValueError("edge weight is NaN")
    return raw


def _parse_entry(entry) -> Tuple[int, float]:
    if isinstance(entry, Neighbour):
        return _parse_id(entry.node), _parse_weight(entry.weight)
    if isinstance(entry, dict):
        if "node" in entry:
            raw_node = entry["node"]
        elif "neighbor" in entry:
            raw_node = entry["neighbor"]
        else:
            raise ValueError(f"adjacency entry {entry!r} has no 'node'")
        return _parse_id(raw_node), _parse_weight(entry.get("weight", 1))
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return _parse_id(entry[0]), _parse_weight(entry[1])
    raise ValueError(f"invalid adjacency entry {entry!r}")
