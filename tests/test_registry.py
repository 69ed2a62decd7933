import logging

import pytest

from algorithms import (
    AlgorithmRegistry,
    InvalidInput,
    UnknownAlgorithm,
    build_registry,
    default_algorithms,
)
from engine import EngineConfig
from graph import Graph

ALL_NAMES = [
    "Bubble", "Selection", "Insertion", "Merge", "Quick", "Heap",
    "BFS", "DFS", "Dijkstra", "BellmanFord", "AStar", "FloydWarshall",
    "Prim", "Kruskal", "Topological", "TSP",
]


def test_every_algorithm_is_registered(registry) -> None:
    assert registry.names() == ALL_NAMES
    for info in registry.list():
        assert info.complexity_time and info.complexity_space
        assert info.description
        assert info.pseudocode


def test_sorting_metadata(registry) -> None:
    assert registry.get("Merge").complexity_time == "O(n log n)"
    assert registry.get("Merge").complexity_space == "O(n)"
    assert registry.get("Quick").complexity_space == "O(log n)"
    assert [a.key for a in registry.by_family("sorting")] == ALL_NAMES[:6]


def test_unknown_algorithm(registry) -> None:
    with pytest.raises(UnknownAlgorithm) as exc:
        registry.run("BogoSort", [3, 2, 1])
    assert exc.value.name == "BogoSort"


def test_unknown_algorithm_with_unhashable_name(registry) -> None:
    with pytest.raises(UnknownAlgorithm):
        registry.get(["BFS"])


def test_registry_is_immutable(registry) -> None:
    with pytest.raises(TypeError):
        registry.algorithms["Fake"] = registry.get("BFS")


def test_duplicate_keys_rejected() -> None:
    infos = default_algorithms()
    with pytest.raises(ValueError):
        AlgorithmRegistry(infos + infos[:1])


@pytest.mark.parametrize("name", ALL_NAMES)
def test_every_algorithm_ends_in_a_terminal_step(registry, name: str, weighted_graph: dict) -> None:
    data = [5, 2, 9, 1] if registry.get(name).input_kind == "array" else weighted_graph
    steps = registry.run(name, data)
    assert isinstance(steps, tuple)
    assert steps[-1].type in {"complete", "noPath", "notFound", "cycle"}
    assert [s.step_number for s in steps] == list(range(len(steps)))


@pytest.mark.parametrize("name", ALL_NAMES)
def test_runs_are_deterministic(registry, name: str, weighted_graph: dict) -> None:
    data = [5, 2, 9, 1, 5] if registry.get(name).input_kind == "array" else weighted_graph
    first = [s.to_dict() for s in registry.run(name, data, start=1)]
    second = [s.to_dict() for s in registry.run(name, data, start=1)]
    assert first == second


def test_run_does_not_mutate_caller_input(registry, square_graph: Graph) -> None:
    values = [4, 1, 3]
    registry.run("Heap", values)
    assert values == [4, 1, 3]

    before = square_graph.to_dict()
    registry.run("Kruskal", square_graph)
    assert square_graph.to_dict() == before


def test_start_defaults_to_smallest_id(registry) -> None:
    steps = registry.run("BFS", {3: [{"node": 7, "weight": 1}], 7: [{"node": 3, "weight": 1}]})
    assert steps[0].current == 3


def test_end_is_passed_to_dfs(registry, disconnected_graph: Graph) -> None:
    steps = registry.run("DFS", disconnected_graph, start=0, end=3)
    assert steps[-1].type == "notFound"


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "data",
    ["3,2,1", [1, "two"], [True, False], [1.0, float("nan")], [float("inf"), 1], [2, float("-inf")], 42, {"a": 1}],
)
def test_bad_arrays_rejected(registry, data) -> None:
    with pytest.raises(InvalidInput):
        registry.run("Bubble", data)


def test_dangling_edge_rejected(registry) -> None:
    with pytest.raises(InvalidInput, match="not in the graph"):
        registry.run("BFS", {0: [{"node": 1, "weight": 1}]})


def test_malformed_graph_rejected(registry) -> None:
    with pytest.raises(InvalidInput):
        registry.run("Dijkstra", {0: [{"node": 1, "weight": "x"}], 1: []})


def test_graph_object_with_bad_weight_rejected(registry) -> None:
    g = Graph()
    g.add_edge(0, 1, weight="x")
    with pytest.raises(InvalidInput, match="weight"):
        registry.run("Dijkstra", g, start=0)


@pytest.mark.parametrize("bad_id", ["a", 2.5, None])
def test_graph_object_with_bad_node_id_rejected(registry, bad_id) -> None:
    g = Graph()
    g.add_edge(0, bad_id, weight=1)
    with pytest.raises(InvalidInput, match="node id"):
        registry.run("BFS", g, start=0)


def test_graph_object_is_not_mutated_by_validation(registry, square_graph: Graph) -> None:
    before = square_graph.to_dict()
    registry.run("Prim", square_graph)
    assert square_graph.to_dict() == before


def test_graph_algorithm_rejects_array(registry) -> None:
    with pytest.raises(InvalidInput):
        registry.run("Dijkstra", [1, 2, 3])


@pytest.mark.parametrize("start", [9, "zero", True, 1.5])
def test_bad_start_rejected(registry, path_graph: dict, start) -> None:
    with pytest.raises(InvalidInput):
        registry.run("Dijkstra", path_graph, start=start)


def test_numeric_string_start_accepted(registry, path_graph: dict) -> None:
    steps = registry.run("BFS", path_graph, start="1")
    assert steps[0].current == 1


def test_bad_end_rejected(registry, path_graph: dict) -> None:
    with pytest.raises(InvalidInput):
        registry.run("AStar", path_graph, start=0, end=42)


def test_empty_graph_needs_start(registry) -> None:
    with pytest.raises(InvalidInput, match="empty"):
        registry.run("BFS", {})


def test_empty_graph_without_start_runs(registry) -> None:
    assert registry.run("Kruskal", {})[-1].type == "complete"
    assert registry.run("Topological", {})[-1].type == "complete"


def test_tsp_size_limit(registry) -> None:
    g = Graph.generate_random(num_nodes=11, seed=1)
    with pytest.raises(InvalidInput, match="TSP"):
        registry.run("TSP", g)


def test_floyd_warshall_size_limit() -> None:
    registry = build_registry(EngineConfig(floyd_warshall_max_nodes=3))
    with pytest.raises(InvalidInput, match="Floyd-Warshall"):
        registry.run("FloydWarshall", Graph.generate_random(num_nodes=4, seed=1))


def test_array_length_limit() -> None:
    registry = build_registry(EngineConfig(max_array_length=3))
    with pytest.raises(InvalidInput):
        registry.run("Quick", [4, 3, 2, 1])


def test_negative_weights_are_warned_not_rejected(registry, negative_cycle_graph: dict, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="algorithms.registry"):
        steps = registry.run("Dijkstra", negative_cycle_graph)
    assert steps[-1].type == "complete"
    assert "negative edge weights" in caplog.text


def test_negative_cycle_is_a_step_not_an_error(registry, negative_cycle_graph: dict) -> None:
    steps = registry.run("BellmanFord", negative_cycle_graph, start=0)
    assert steps[-1].has_negative_cycle is True


def test_default_array_limit_bounds_the_trace(registry) -> None:
    limit = registry.config.max_array_length
    assert registry.run("Bubble", list(range(limit, 0, -1)))[-1].type == "complete"
    with pytest.raises(InvalidInput, match="limit"):
        registry.run("Bubble", list(range(500, 0, -1)))
