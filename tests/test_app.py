import pytest

from algorithms import build_registry
from engine import EngineConfig
from main import create_app


@pytest.fixture
def client():
    app = create_app(build_registry(EngineConfig(tsp_max_nodes=5)))
    app.config["TESTING"] = True
    return app.test_client()


def test_list_algorithms(client) -> None:
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    keys = [a["key"] for a in resp.get_json()["algorithms"]]
    assert "Dijkstra" in keys and "Bubble" in keys
    assert len(keys) == 16


def test_list_algorithms_by_family(client) -> None:
    resp = client.get("/api/algorithms?family=spanning-tree")
    assert [a["key"] for a in resp.get_json()["algorithms"]] == ["Prim", "Kruskal"]


def test_list_algorithms_by_tag(client) -> None:
    resp = client.get("/api/algorithms?tag=negative-edges")
    assert [a["key"] for a in resp.get_json()["algorithms"]] == ["BellmanFord", "FloydWarshall"]

    resp = client.get("/api/algorithms?family=shortest-path&tag=heuristic")
    assert [a["key"] for a in resp.get_json()["algorithms"]] == ["AStar"]


def test_algorithm_card(client) -> None:
    card = client.get("/api/algorithms/Heap").get_json()
    assert card["complexity"] == {"time": "O(n log n)", "space": "O(1)"}
    assert card["inputKind"] == "array"
    assert "fn" not in card


def test_unknown_algorithm_card_is_404(client) -> None:
    resp = client.get("/api/algorithms/Nope")
    assert resp.status_code == 404
    assert "Nope" in resp.get_json()["error"]


def test_run_sorting(client) -> None:
    resp = client.post("/api/run", json={"algorithm": "Insertion", "input": [3, 1, 2]})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["algorithm"] == "Insertion"
    assert body["steps"][0]["type"] == "start"
    assert body["steps"][-1]["array"] == [1, 2, 3]
    assert body["metrics"]["total_steps"] == len(body["steps"])


def test_run_dijkstra_over_http(client, weighted_graph: dict) -> None:
    graph = {str(k): v for k, v in weighted_graph.items()}
    resp = client.post("/api/run", json={"algorithm": "Dijkstra", "input": graph, "start": 0})
    final = resp.get_json()["steps"][-1]
    assert final["type"] == "complete"
    assert final["distances"] == {"0": 0, "1": 3, "2": 1, "3": 8}


def test_run_unknown_algorithm_is_404(client) -> None:
    resp = client.post("/api/run", json={"algorithm": "Bogo", "input": [1]})
    assert resp.status_code == 404


def test_run_dangling_edge_is_400(client) -> None:
    resp = client.post("/api/run", json={"algorithm": "BFS", "input": {"0": [{"node": 5, "weight": 1}]}})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_run_missing_fields_is_400(client) -> None:
    assert client.post("/api/run", json={"algorithm": "BFS"}).status_code == 400
    assert client.post("/api/run", data="not json", content_type="text/plain").status_code == 400


def test_run_respects_configured_tsp_limit(client) -> None:
    gen = client.post("/api/graph/generate", json={"mode": "random", "nodes": 6, "seed": 1}).get_json()
    resp = client.post("/api/run", json={"algorithm": "TSP", "input": gen["graph"]})
    assert resp.status_code == 400
    assert "TSP" in resp.get_json()["error"]


def test_stats_endpoint(client) -> None:
    resp = client.post("/api/stats", json={"algorithm": "Bubble", "input": [2, 1, 3], "index": 2})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["stats"]["comparisons"] == 1
    assert body["stats"]["swaps"] == 1
    assert body["step"]["type"] == "swap"


def test_stats_negative_index_counts_from_end(client) -> None:
    body = client.post("/api/stats", json={"algorithm": "Bubble", "input": [2, 1], "index": -1}).get_json()
    assert body["step"]["type"] == "complete"
    assert body["stats"]["progress"] == 100.0


def test_stats_index_out_of_range_is_400(client) -> None:
    resp = client.post("/api/stats", json={"algorithm": "Bubble", "input": [2, 1], "index": 99})
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        {"mode": "random", "nodes": 6, "seed": 3},
        {"mode": "grid", "rows": 2, "cols": 3},
        {"mode": "star", "nodes": 5, "seed": 3},
        {"mode": "tree", "levels": 2, "seed": 3},
        {"mode": "dag", "nodes": 6, "seed": 3},
    ],
)
def test_generate_graph_modes(client, payload: dict) -> None:
    resp = client.post("/api/graph/generate", json=payload)
    assert resp.status_code == 200
    body = resp.get_json()
    assert sorted(int(k) for k in body["graph"]) == body["nodeIds"]


def test_generate_graph_is_seeded(client) -> None:
    payload = {"mode": "random", "nodes": 7, "seed": 11}
    a = client.post("/api/graph/generate", json=payload).get_json()
    b = client.post("/api/graph/generate", json=payload).get_json()
    assert a == b


@pytest.mark.parametrize(
    "payload",
    [
        {"mode": "hexagon"},
        {"mode": "random", "nodes": 10_000},
        {"mode": "random", "prob": 2},
        {"mode": "random", "seed": "abc"},
        {"mode": "grid", "rows": 0},
    ],
)
def test_generate_graph_rejects_bad_params(client, payload: dict) -> None:
    assert client.post("/api/graph/generate", json=payload).status_code == 400
