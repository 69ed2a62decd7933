import json

import pytest

from engine import EngineConfig, TSP_HARD_LIMIT


def test_defaults() -> None:
    cfg = EngineConfig()
    assert cfg.tsp_max_nodes == 10
    assert cfg.floyd_warshall_max_nodes == 40
    assert cfg.max_array_length == 100
    assert cfg.log_level == "INFO"
    assert cfg.debug is False


def test_tsp_limit_has_hard_ceiling() -> None:
    with pytest.raises(ValueError):
        EngineConfig(tsp_max_nodes=TSP_HARD_LIMIT + 1)
    assert EngineConfig(tsp_max_nodes=TSP_HARD_LIMIT).tsp_max_nodes == TSP_HARD_LIMIT


@pytest.mark.parametrize(
    "overrides",
    [
        {"tsp_max_nodes": 0},
        {"floyd_warshall_max_nodes": 0},
        {"max_array_length": -1},
        {"log_level": "LOUD"},
        {"port": 70000},
    ],
)
def test_out_of_range_values_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        EngineConfig(**overrides)


def test_from_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tsp_max_nodes": 12, "debug": True, "log_level": "debug"}))
    cfg = EngineConfig.from_file(str(path))
    assert cfg.tsp_max_nodes == 12
    assert cfg.debug is True
    assert cfg.log_level == "DEBUG"
    assert cfg.floyd_warshall_max_nodes == 40


def test_from_file_rejects_unknown_keys(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tsp_nodes": 12}))
    with pytest.raises(ValueError, match="tsp_nodes"):
        EngineConfig.from_file(str(path))


def test_from_file_rejects_wrong_types(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": "eighty"}))
    with pytest.raises(ValueError):
        EngineConfig.from_file(str(path))


def test_from_env() -> None:
    env = {
        "ALGOTRACE_TSP_MAX_NODES": "8",
        "ALGOTRACE_DEBUG": "yes",
        "ALGOTRACE_HOST": "0.0.0.0",
        "HOME": "/root",
    }
    cfg = EngineConfig.from_env(env)
    assert cfg.tsp_max_nodes == 8
    assert cfg.debug is True
    assert cfg.host == "0.0.0.0"


def test_from_env_rejects_unknown_variable() -> None:
    with pytest.raises(ValueError, match="ALGOTRACE_COLOUR"):
        EngineConfig.from_env({"ALGOTRACE_COLOUR": "blue"})


def test_load_layers_file_then_env(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tsp_max_nodes": 12, "port": 8080}))
    env = {"ALGOTRACE_CONFIG": str(path), "ALGOTRACE_PORT": "9090"}
    cfg = EngineConfig.load(environ=env)
    assert cfg.tsp_max_nodes == 12
    assert cfg.port == 9090
