"""
registry.py - Algorithm Registry
=================================
Single source of truth for every algorithm the visualizer knows about.

    registry = build_registry(EngineConfig())
    steps    = registry.run("Dijkstra", graph_dict, start=0)

The registry is built once at start-up and handed to whatever dispatches
runs (the Flask app, the recorder, tests).  It is immutable after
construction: the card table is a read-only mapping and the size limits
are fixed from the config it was built with.

`run()` is the only way in:
  1. look the name up                   (UnknownAlgorithm if absent)
  2. validate and normalise the input   (InvalidInput on anything bad)
  3. drain the engine generator into a tuple

So a caller either gets a complete trace or an exception, never a
partial one.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from graph import Graph
from engine.config import EngineConfig
from algorithms.errors import InvalidInput, UnknownAlgorithm
from algorithms.step import StepList
from algorithms.validation import check_array, check_graph, check_node, check_size

from algorithms.bubble_sort      import bubble_sort      as _bubble,     PSEUDOCODE as _bubble_pc
from algorithms.selection_sort   import selection_sort   as _selection,  PSEUDOCODE as _selection_pc
from algorithms.insertion_sort   import insertion_sort   as _insertion,  PSEUDOCODE as _insertion_pc
from algorithms.merge_sort       import merge_sort       as _merge,      PSEUDOCODE as _merge_pc
from algorithms.quick_sort       import quick_sort       as _quick,      PSEUDOCODE as _quick_pc
from algorithms.heap_sort        import heap_sort        as _heap,       PSEUDOCODE as _heap_pc
from algorithms.bfs              import bfs              as _bfs,        PSEUDOCODE as _bfs_pc
from algorithms.dfs              import dfs              as _dfs,        PSEUDOCODE as _dfs_pc
from algorithms.dijkstra         import dijkstra         as _dijkstra,   PSEUDOCODE as _dij_pc
from algorithms.bellman_ford     import bellman_ford     as _bf,         PSEUDOCODE as _bf_pc
from algorithms.astar            import astar            as _astar,      PSEUDOCODE as _ast_pc
from algorithms.floyd_warshall   import floyd_warshall   as _fw,         PSEUDOCODE as _fw_pc
from algorithms.prim             import prim             as _prim,       PSEUDOCODE as _prim_pc
from algorithms.kruskal          import kruskal          as _kruskal,    PSEUDOCODE as _kruskal_pc
from algorithms.topological_sort import topological_sort as _topo,       PSEUDOCODE as _topo_pc
from algorithms.tsp              import tsp              as _tsp,        PSEUDOCODE as _tsp_pc


logger = logging.getLogger(__name__)

FAMILIES = ("sorting", "traversal", "shortest-path", "spanning-tree", "ordering")


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:               str                    # registry key, e.g. "Dijkstra"
    label:             str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:                Callable               # the generator function
    family:            str                    # one of FAMILIES
    input_kind:        str                    # "array" or "graph"
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["weighted", "shortest-path"]
    uses_start:        bool     = False       # takes a start node?
    uses_end:          bool     = False       # takes an (optional) end node?
    supports_negative: bool     = False       # handles negative edges?
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> Dict[str, Any]:
        """Card for the UI.  Everything but the callable."""
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "inputKind":        self.input_kind,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "usesStart":        self.uses_start,
            "usesEnd":          self.uses_end,
            "supportsNegative": self.supports_negative,
            "complexity":       {"time": self.complexity_time, "space": self.complexity_space},
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# The cards
# ---------------------------------------------------------------------------
def default_algorithms() -> List[AlgoInfo]:
    return [
        # ---------- Sorting ----------
        AlgoInfo(
            key="Bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
            family="sorting", input_kind="array", tags=["comparison", "in-place", "stable"],
            complexity_time="O(n²)", complexity_space="O(1)",
            description="Repeatedly compares and swaps adjacent elements",
        ),
        AlgoInfo(
            key="Selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
            family="sorting", input_kind="array", tags=["comparison", "in-place"],
            complexity_time="O(n²)", complexity_space="O(1)",
            description="Finds minimum element and places it at the beginning",
        ),
        AlgoInfo(
            key="Insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
            family="sorting", input_kind="array", tags=["comparison", "in-place", "stable"],
            complexity_time="O(n²)", complexity_space="O(1)",
            description="Builds sorted array one element at a time",
        ),
        AlgoInfo(
            key="Merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
            family="sorting", input_kind="array", tags=["comparison", "divide-and-conquer", "stable"],
            complexity_time="O(n log n)", complexity_space="O(n)",
            description="Divide and conquer algorithm using merging",
        ),
        AlgoInfo(
            key="Quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
            family="sorting", input_kind="array", tags=["comparison", "divide-and-conquer", "in-place"],
            complexity_time="O(n log n)", complexity_space="O(log n)",
            description="Partition-based divide and conquer",
        ),
        AlgoInfo(
            key="Heap", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
            family="sorting", input_kind="array", tags=["comparison", "in-place"],
            complexity_time="O(n log n)", complexity_space="O(1)",
            description="Binary heap data structure",
        ),

        # ---------- Traversal ----------
        AlgoInfo(
            key="BFS", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
            family="traversal", input_kind="graph", tags=["unweighted", "traversal"],
            uses_start=True,
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Explores layer-by-layer. Finds shortest path by hop count.",
        ),
        AlgoInfo(
            key="DFS", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
            family="traversal", input_kind="graph", tags=["unweighted", "traversal"],
            uses_start=True, uses_end=True,
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Dives deep before backtracking. Does NOT guarantee shortest path.",
        ),

        # ---------- Shortest path ----------
        AlgoInfo(
            key="Dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
            family="shortest-path", input_kind="graph", tags=["weighted", "shortest-path"],
            uses_start=True,
            complexity_time="O(V² + E)", complexity_space="O(V)",
            description="Greedily expands the closest node. Optimal for non-negative weights.",
        ),
        AlgoInfo(
            key="BellmanFord", label="Bellman-Ford", fn=_bf, pseudocode=_bf_pc,
            family="shortest-path", input_kind="graph", tags=["weighted", "shortest-path", "negative-edges"],
            uses_start=True, supports_negative=True,
            complexity_time="O(V · E)", complexity_space="O(V)",
            description="Handles negative edges. Detects negative cycles. Slower than Dijkstra.",
        ),
        AlgoInfo(
            key="AStar", label="A* Search", fn=_astar, pseudocode=_ast_pc,
            family="shortest-path", input_kind="graph", tags=["weighted", "shortest-path", "heuristic"],
            uses_start=True, uses_end=True,
            complexity_time="O(V² + E)", complexity_space="O(V)",
            description="Dijkstra + heuristic guidance. The id-difference heuristic is not admissible in general.",
        ),
        AlgoInfo(
            key="FloydWarshall", label="Floyd-Warshall", fn=_fw, pseudocode=_fw_pc,
            family="shortest-path", input_kind="graph", tags=["weighted", "all-pairs", "negative-edges"],
            supports_negative=True,
            complexity_time="O(V³)", complexity_space="O(V²)",
            description="All-pairs shortest paths via dynamic programming. Watch the matrix evolve!",
        ),

        # ---------- Spanning tree ----------
        AlgoInfo(
            key="Prim", label="Prim's MST", fn=_prim, pseudocode=_prim_pc,
            family="spanning-tree", input_kind="graph", tags=["weighted", "mst", "greedy"],
            uses_start=True,
            complexity_time="O(V² + E)", complexity_space="O(V)",
            description="Grows one tree from the start node, always adding the cheapest crossing edge.",
        ),
        AlgoInfo(
            key="Kruskal", label="Kruskal's MST", fn=_kruskal, pseudocode=_kruskal_pc,
            family="spanning-tree", input_kind="graph", tags=["weighted", "mst", "greedy", "union-find"],
            supports_negative=True,
            complexity_time="O(E log E)", complexity_space="O(V + E)",
            description="Adds edges cheapest-first, skipping any that would close a cycle.",
        ),

        # ---------- Ordering ----------
        AlgoInfo(
            key="Topological", label="Topological Sort", fn=_topo, pseudocode=_topo_pc,
            family="ordering", input_kind="graph", tags=["directed", "dag"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Kahn's algorithm: repeatedly removes nodes with no incoming edges.",
        ),
        AlgoInfo(
            key="TSP", label="Travelling Salesman (DP)", fn=_tsp, pseudocode=_tsp_pc,
            family="ordering", input_kind="graph", tags=["weighted", "dynamic-programming", "exponential"],
            uses_start=True, supports_negative=True,
            complexity_time="O(2^V · V²)", complexity_space="O(2^V · V)",
            description="Held-Karp bitmask DP over subsets of cities. Exact, but exponential.",
        ),
    ]


# ---------------------------------------------------------------------------
# AlgorithmRegistry
# ---------------------------------------------------------------------------
class AlgorithmRegistry:
    """
    Attributes:
        algorithms : read-only {key: AlgoInfo}, in registration order.
        config     : the EngineConfig the size limits come from.
    """

    def __init__(self, infos: List[AlgoInfo], config: Optional[EngineConfig] = None):
        table: Dict[str, AlgoInfo] = {}
        for info in infos:
            if info.key in table:
                raise ValueError(f"duplicate algorithm key: {info.key}")
            if info.family not in FAMILIES:
                raise ValueError(f"{info.key}: unknown family {info.family!r}")
            table[info.key] = info
        self._algorithms = MappingProxyType(table)
        self._config     = config or EngineConfig()

    @property
    def algorithms(self) -> Mapping[str, AlgoInfo]:
        return self._algorithms

    @property
    def config(self) -> EngineConfig:
        return self._config

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get(self, name: str) -> AlgoInfo:
        info = self._algorithms.get(name) if isinstance(name, str) else None
        if info is None:
            logger.warning("Rejected unknown algorithm %r", name)
            raise UnknownAlgorithm(name)
        return info

    def list(self) -> List[AlgoInfo]:
        """All algorithms in registration order."""
        return list(self._algorithms.values())

    def names(self) -> List[str]:
        return list(self._algorithms)

    def by_family(self, family: str) -> List[AlgoInfo]:
        return [a for a in self._algorithms.values() if a.family == family]

    def by_tag(self, tag: str) -> List[AlgoInfo]:
        return [a for a in self._algorithms.values() if tag in a.tags]

    def __contains__(self, name) -> bool:
        return name in self._algorithms

    def __len__(self) -> int:
        return len(self._algorithms)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def run(self, name: str, data: Any, start: Any = None, end: Any = None) -> StepList:
        """Validate, run to completion, return the full trace as a tuple."""
        info   = self.get(name)
        kwargs = self.prepare(info, data, start, end)
        steps  = tuple(info.fn(**kwargs))
        logger.debug("%s produced %d steps", info.key, len(steps))
        return steps

    def prepare(self, info: AlgoInfo, data: Any, start: Any = None, end: Any = None) -> Dict[str, Any]:
        """Build the engine's keyword arguments, or raise InvalidInput."""
        try:
            if info.input_kind == "array":
                return {"values": check_array(data, self._config.max_array_length)}
            return self._graph_kwargs(info, data, start, end)
        except InvalidInput as exc:
            logger.warning("Rejected input for %s: %s", info.key, exc)
            raise

    def _graph_kwargs(self, info: AlgoInfo, data: Any, start: Any, end: Any) -> Dict[str, Any]:
        graph = check_graph(data)

        if info.key == "TSP":
            check_size(graph, self._config.tsp_max_nodes, "TSP")
        elif info.key == "FloydWarshall":
            check_size(graph, self._config.floyd_warshall_max_nodes, "Floyd-Warshall")

        if not info.supports_negative and graph.has_negative_edges():
            logger.warning("%s received negative edge weights; results are not guaranteed", info.key)

        kwargs: Dict[str, Any] = {"graph": graph.copy()}
        if info.uses_start:
            if graph.node_count() == 0:
                raise InvalidInput(f"{info.label} needs a start node, but the graph is empty")
            kwargs["start"] = graph.node_ids()[0] if start is None else check_node(graph, start, "start")
        if info.uses_end and end is not None:
            kwargs["end"] = check_node(graph, end, "end")
        return kwargs


def build_registry(config: Optional[EngineConfig] = None) -> AlgorithmRegistry:
    """The standard registry: every built-in algorithm, limits from `config`."""
    return AlgorithmRegistry(default_algorithms(), config)
