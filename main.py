"""
main.py - Algorithm Trace Engine Flask App
============================================
The web server that hands finished traces to the visualizer UI.

Routes:
  GET  /api/algorithms          – metadata cards, ?family= and ?tag= filters
  GET  /api/algorithms/<name>   – one card
  POST /api/run                 – run an algorithm, return the full trace
  POST /api/stats               – live statistics (and the step) at one index
  POST /api/graph/generate      – generate a graph in wire form

State management:
  None.  Every request carries its own input and gets a complete trace
  back; playback, scrubbing and speed live entirely in the client.  The
  registry is built once in create_app() and shared read-only by every
  request.

Errors:
  InvalidInput      → 400 {"error": "..."}
  UnknownAlgorithm  → 404 {"error": "..."}
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request

from graph import Graph
from algorithms import AlgorithmRegistry, InvalidInput, UnknownAlgorithm, build_registry, to_plain
from engine import EngineConfig, Recorder


logger = logging.getLogger(__name__)

LOG_FORMAT          = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_GENERATED_NODES = 200


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(registry: Optional[AlgorithmRegistry] = None, config: Optional[EngineConfig] = None) -> Flask:
    config   = config or (registry.config if registry else EngineConfig())
    registry = registry or build_registry(config)

    app = Flask(__name__)
    app.config["ENGINE_CONFIG"] = config
    app.extensions["algorithm_registry"] = registry

    app.register_error_handler(InvalidInput, _invalid_input)
    app.register_error_handler(UnknownAlgorithm, _unknown_algorithm)

    # ------------------------------------------------------------------
    # API: Algorithm metadata
    # ------------------------------------------------------------------
    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        family = request.args.get("family")
        tag    = request.args.get("tag")
        infos  = _registry().by_family(family) if family else _registry().list()
        if tag:
            tagged = {info.key for info in _registry().by_tag(tag)}
            infos  = [info for info in infos if info.key in tagged]
        return jsonify({"algorithms": [info.to_dict() for info in infos]})

    @app.route("/api/algorithms/<name>", methods=["GET"])
    def api_algorithm(name: str):
        return jsonify(_registry().get(name).to_dict())

    # ------------------------------------------------------------------
    # API: Run Algorithm
    # ------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data      = _json_body()
        recording = Recorder(_registry()).record(
            _required(data, "algorithm"),
            _required(data, "input"),
            start=data.get("start"),
            end=data.get("end"),
        )
        return jsonify(recording.export())

    @app.route("/api/stats", methods=["POST"])
    def api_stats():
        data      = _json_body()
        index     = _int_param(data, "index", 0, low=None)
        recording = Recorder(_registry()).record(
            _required(data, "algorithm"),
            _required(data, "input"),
            start=data.get("start"),
            end=data.get("end"),
        )
        if index < 0:
            index += len(recording.steps)
        if not 0 <= index < len(recording.steps):
            raise InvalidInput(f"index {data.get('index')} out of range (0..{len(recording.steps) - 1})")

        return jsonify({
            "algorithm": recording.algo_key,
            "stats":     recording.stats_at(index).to_dict(),
            "step":      recording.steps[index].to_dict(),
        })

    # ------------------------------------------------------------------
    # API: Graph Generation
    # ------------------------------------------------------------------
    @app.route("/api/graph/generate", methods=["POST"])
    def api_graph_generate():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidInput("request body must be a JSON object")
        mode = data.get("mode", "random")
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidInput(f"seed must be an integer, got {seed!r}")

        if mode == "random":
            g = Graph.generate_random(
                num_nodes=_int_param(data, "nodes", 8, high=MAX_GENERATED_NODES),
                edge_probability=_prob_param(data, "prob", 0.4),
                seed=seed,
            )
        elif mode == "grid":
            rows = _int_param(data, "rows", 4, low=1)
            cols = _int_param(data, "cols", 4, low=1)
            if rows * cols > MAX_GENERATED_NODES:
                raise InvalidInput(f"grid of {rows}x{cols} exceeds {MAX_GENERATED_NODES} nodes")
            g = Graph.generate_grid(rows=rows, cols=cols)
        elif mode == "star":
            g = Graph.generate_star(
                num_nodes=_int_param(data, "nodes", 7, high=MAX_GENERATED_NODES),
                seed=seed,
            )
        elif mode == "tree":
            g = Graph.generate_tree(
                levels=_int_param(data, "levels", 3, high=4),
                max_children=_int_param(data, "children", 3, low=1, high=3),
                seed=seed,
            )
        elif mode == "dag":
            g = Graph.generate_dag(
                num_nodes=_int_param(data, "nodes", 8, high=MAX_GENERATED_NODES),
                edge_probability=_prob_param(data, "prob", 0.3),
                seed=seed,
            )
        else:
            raise InvalidInput(f"Unknown mode: {mode!r}")

        logger.debug("Generated %s graph: %r", mode, g)
        return jsonify({"graph": g.to_dict(), "nodeIds": g.node_ids()})

    return app


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _registry() -> AlgorithmRegistry:
    return current_app.extensions["algorithm_registry"]


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("request body must be a JSON object")
    return data


def _required(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise InvalidInput(f"missing field {key!r}")
    return data[key]


def _int_param(
    data: Dict[str, Any],
    key: str,
    default: int,
    low: Optional[int] = 0,
    high: Optional[int] = None,
) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{key} must be an integer, got {value!r}")
    if (low is not None and value < low) or (high is not None and value > high):
        bounds = f">= {low}" if high is None else f"between {low} and {high}"
        raise InvalidInput(f"{key} must be {bounds}, got {value}")
    return value


def _prob_param(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 1:
        raise InvalidInput(f"{key} must be a number between 0 and 1, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
def _invalid_input(exc: InvalidInput):
    return jsonify({"error": str(exc)}), 400


def _unknown_algorithm(exc: UnknownAlgorithm):
    return jsonify({"error": str(exc), "algorithm": to_plain(exc.name)}), 404


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(config_path: Optional[str] = None) -> None:
    config = EngineConfig.load(config_path)
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    app = create_app(config=config)
    logger.info("Algorithm Trace Engine on http://%s:%d", config.host, config.port)
    app.run(debug=config.debug, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
