"""
engine/
-------
Configuration & recording layer.

    from engine import EngineConfig, Recorder, stats_at
"""

from engine.config   import EngineConfig, TSP_HARD_LIMIT
from engine.recorder import LiveStats, Recorder, Recording, RunMetrics, stats_at

__all__ = [
    "EngineConfig",
    "TSP_HARD_LIMIT",
    "LiveStats",
    "Recorder",
    "Recording",
    "RunMetrics",
    "stats_at",
]
