import math

from algorithms.astar import astar
from algorithms.bellman_ford import bellman_ford
from algorithms.dijkstra import dijkstra, reconstruct_path
from algorithms.floyd_warshall import floyd_warshall, reconstruct_path as fw_path
from graph import Graph

INF = float("inf")


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def test_dijkstra_distances(weighted_graph: dict) -> None:
    steps = list(dijkstra(Graph.from_dict(weighted_graph), 0))
    assert steps[-1].type == "complete"
    assert steps[-1].distances == {0: 0, 1: 3, 2: 1, 3: 8}


def test_dijkstra_path_reconstruction(weighted_graph: dict) -> None:
    final = list(dijkstra(Graph.from_dict(weighted_graph), 0))[-1]
    assert reconstruct_path(final.previous, 0, 3) == [0, 2, 1, 3]
    assert reconstruct_path(final.previous, 0, 0) == [0]


def test_dijkstra_update_only_on_improvement(weighted_graph: dict) -> None:
    steps = list(dijkstra(Graph.from_dict(weighted_graph), 0))
    for prev, step in zip(steps, steps[1:]):
        if step.type == "updateDistance":
            assert prev.type == "compare"
            assert prev.new_distance < prev.current_distance


def test_dijkstra_unreachable_stays_infinite(disconnected_graph: Graph) -> None:
    final = list(dijkstra(disconnected_graph, 0))[-1]
    assert final.distances[2] == INF
    assert final.visited == (0, 1)
    assert reconstruct_path(final.previous, 0, 3) == []


def test_dijkstra_infinity_on_the_wire(disconnected_graph: Graph) -> None:
    wire = list(dijkstra(disconnected_graph, 0))[-1].to_dict()
    assert wire["distances"][3] == "Infinity"
    assert wire["type"] == "complete"


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
def test_bellman_ford_matches_dijkstra(weighted_graph: dict) -> None:
    final = list(bellman_ford(Graph.from_dict(weighted_graph), 0))[-1]
    assert final.has_negative_cycle is False
    assert final.distances == {0: 0, 1: 3, 2: 1, 3: 8}


def test_bellman_ford_flags_negative_cycle(negative_cycle_graph: dict) -> None:
    steps = list(bellman_ford(Graph.from_dict(negative_cycle_graph), 0))
    assert steps[-1].type == "complete"
    assert steps[-1].has_negative_cycle is True
    assert "negativeCycle" in [s.type for s in steps]


def test_bellman_ford_negative_edge_without_cycle() -> None:
    g = Graph()
    g.add_edge(0, 1, weight=4, directed=True)
    g.add_edge(0, 2, weight=5, directed=True)
    g.add_edge(2, 1, weight=-3, directed=True)
    final = list(bellman_ford(g, 0))[-1]
    assert final.has_negative_cycle is False
    assert final.distances == {0: 0, 1: 2, 2: 5}


def test_bellman_ford_emits_relax_for_every_edge(weighted_graph: dict) -> None:
    g = Graph.from_dict(weighted_graph)
    steps = list(bellman_ford(g, 0))
    first_pass = [s for s in steps if s.type == "relax" and s.iteration == 1]
    assert len(first_pass) == g.edge_count()


def test_bellman_ford_early_stop(path_graph: dict) -> None:
    steps = list(bellman_ford(Graph.from_dict(path_graph), 0))
    assert "earlyStop" in [s.type for s in steps]


# ---------------------------------------------------------------------------
# A*
# ---------------------------------------------------------------------------
def test_astar_found_then_complete(weighted_graph: dict) -> None:
    steps = list(astar(Graph.from_dict(weighted_graph), 0, 3))
    types = [s.type for s in steps]
    assert types[-2:] == ["found", "complete"]
    assert "noPath" not in types
    found = steps[-2]
    assert found.path[0] == 0 and found.path[-1] == 3


def test_astar_zero_heuristic_is_optimal(weighted_graph: dict) -> None:
    steps = list(astar(Graph.from_dict(weighted_graph), 0, 3, heuristic="zero"))
    assert steps[-1].cost == 8
    assert steps[-1].path == (0, 2, 1, 3)


def test_astar_no_path(disconnected_graph: Graph) -> None:
    steps = list(astar(disconnected_graph, 0, 3))
    assert steps[-1].type == "noPath"
    assert "found" not in [s.type for s in steps]


def test_astar_end_defaults_to_largest_id(path_graph: dict) -> None:
    steps = list(astar(Graph.from_dict(path_graph), 0))
    assert steps[0].end == 2
    assert steps[-1].path == (0, 1, 2)


# ---------------------------------------------------------------------------
# Floyd-Warshall
# ---------------------------------------------------------------------------
def test_floyd_warshall_all_pairs(weighted_graph: dict) -> None:
    final = list(floyd_warshall(Graph.from_dict(weighted_graph)))[-1]
    assert final.type == "complete"
    assert final.has_negative_cycle is False
    assert final.nodes == (0, 1, 2, 3)
    assert list(final.matrix[0]) == [0, 3, 1, 8]
    assert list(final.matrix[3]) == [8, 5, 7, 0]


def test_floyd_warshall_path_reconstruction(weighted_graph: dict) -> None:
    final = list(floyd_warshall(Graph.from_dict(weighted_graph)))[-1]
    assert fw_path(final.next_hop, final.nodes, 0, 3) == [0, 2, 1, 3]
    assert fw_path(final.next_hop, final.nodes, 2, 2) == [2]


def test_floyd_warshall_unreachable(disconnected_graph: Graph) -> None:
    final = list(floyd_warshall(disconnected_graph))[-1]
    assert math.isinf(final.matrix[0][3])
    assert fw_path(final.next_hop, final.nodes, 0, 3) == []


def test_floyd_warshall_negative_cycle(negative_cycle_graph: dict) -> None:
    steps = list(floyd_warshall(Graph.from_dict(negative_cycle_graph)))
    assert steps[-1].has_negative_cycle is True
    assert {s.node for s in steps if s.type == "negativeCycle"} == {0, 1}


def test_floyd_warshall_parallel_edges_keep_cheapest() -> None:
    g = Graph({0: [(1, 9), (1, 2)], 1: []})
    first = list(floyd_warshall(g))[0]
    assert first.matrix[0][1] == 2
