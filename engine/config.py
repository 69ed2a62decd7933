"""
config.py - Engine & Server Configuration
==========================================
One flat dataclass.  Defaults work out of the box; a JSON file or
ALGOTRACE_* environment variables override individual fields.

    cfg = EngineConfig()                          # defaults
    cfg = EngineConfig.from_file("config.json")   # {"tsp_max_nodes": 12, ...}
    cfg = EngineConfig.from_env()                 # ALGOTRACE_TSP_MAX_NODES=12

Size limits:
  tsp_max_nodes            – Held-Karp is O(2^N · N²) and emits a step per
                             transition.  Never above TSP_HARD_LIMIT.
  floyd_warshall_max_nodes – every Floyd-Warshall step carries an N×N matrix.
  max_array_length         – sorting input length.  Every step carries the
                             whole array, so Bubble on n elements holds
                             O(n³) values.
"""

import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional


TSP_HARD_LIMIT = 20
ENV_PREFIX     = "ALGOTRACE_"
LOG_LEVELS     = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineConfig:
    tsp_max_nodes:            int  = 10
    floyd_warshall_max_nodes: int  = 40
    max_array_length:         int  = 100
    log_level:                str  = "INFO"
    host:                     str  = "127.0.0.1"
    port:                     int  = 5000
    debug:                    bool = False

    def __post_init__(self):
        if not 1 <= self.tsp_max_nodes <= TSP_HARD_LIMIT:
            raise ValueError(f"tsp_max_nodes must be between 1 and {TSP_HARD_LIMIT}, got {self.tsp_max_nodes}")
        if self.floyd_warshall_max_nodes < 1:
            raise ValueError(f"floyd_warshall_max_nodes must be positive, got {self.floyd_warshall_max_nodes}")
        if self.max_array_length < 1:
            raise ValueError(f"max_array_length must be positive, got {self.max_array_length}")
        object.__setattr__(self, "log_level", self.log_level.upper())
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")

    # ------------------------------------------------------------------
    # Loaders
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: Optional["EngineConfig"] = None) -> "EngineConfig":
        """Override `base` (defaults if None) with the keys in `data`."""
        known   = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ValueError(f"unknown config key(s): {', '.join(unknown)}")

        overrides: Dict[str, Any] = {}
        for key, raw in data.items():
            overrides[key] = _coerce(key, raw, known[key].type)
        return replace(base or cls(), **overrides)

    @classmethod
    def from_file(cls, path: str, base: Optional["EngineConfig"] = None) -> "EngineConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object at top level")
        return cls.from_mapping(data, base)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["EngineConfig"] = None,
    ) -> "EngineConfig":
        """ALGOTRACE_<FIELD_NAME>=value for any field.  Variables without the prefix are ignored."""
        environ = os.environ if environ is None else environ
        names   = {f.name for f in fields(cls)}
        data = {}
        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            name = key[len(ENV_PREFIX):].lower()
            if name == "config":
                continue
            data[name] = value
        unknown = sorted(set(data) - names)
        if unknown:
            raise ValueError(f"unknown config variable(s): {', '.join(ENV_PREFIX + n.upper() for n in unknown)}")
        return cls.from_mapping(data, base)

    @classmethod
    def load(cls, path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """
        Defaults, then the JSON file (explicit `path` or ALGOTRACE_CONFIG),
        then the environment.  Later sources win.
        """
        environ = os.environ if environ is None else environ
        path    = path or environ.get(ENV_PREFIX + "CONFIG")
        cfg     = cls.from_file(path) if path else cls()
        return cls.from_env(environ, base=cfg)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# ---------------------------------------------------------------------------
def _coerce(key: str, raw: Any, kind: Any) -> Any:
    """Accept native JSON values or environment strings."""
    kind = kind if isinstance(kind, str) else kind.__name__
    if kind == "bool":
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in ("1", "true", "yes", "on"):
            return True
        if isinstance(raw, str) and raw.strip().lower() in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key}: expected a boolean, got {raw!r}")
    if kind == "int":
        if isinstance(raw, bool):
            raise ValueError(f"{key}: expected an integer, got {raw!r}")
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError:
                pass
        raise ValueError(f"{key}: expected an integer, got {raw!r}")
    if not isinstance(raw, str):
        raise ValueError(f"{key}: expected a string, got {raw!r}")
    return raw
