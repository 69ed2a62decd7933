"""
recorder.py - Run Recorder & Live Statistics
==============================================
Records a complete algorithm run (all Steps), then computes the
statistics the UI shows next to the animation.

Usage:
    rec       = Recorder(registry)
    recording = rec.record("Quick", [5, 3, 8, 1])
    recording.metrics             # totals for the whole run
    stats_at(recording.steps, 7)  # what the stats panel shows at frame 7
    recording.export()            # JSON-ready snapshot for save/replay

Live statistics are derived from the step tags alone, so they work the
same for every algorithm:
    comparisons – compare / consider / relax / checkNeighbor steps so far
    swaps       – swap steps so far
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

from algorithms.step import Step, StepList

if TYPE_CHECKING:
    from algorithms.registry import AlgorithmRegistry


logger = logging.getLogger(__name__)

COMPARISON_TAGS = frozenset({"compare", "consider", "relax", "checkNeighbor"})
SWAP_TAGS       = frozenset({"swap"})


# ---------------------------------------------------------------------------
# LiveStats: what the stats panel renders for one frame
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LiveStats:
    step_index:  int   = 0
    total_steps: int   = 0
    comparisons: int   = 0
    swaps:       int   = 0
    progress:    float = 0.0        # percent of the trace shown, 0-100
    current:     str   = ""         # tag of the step at step_index
    outcome:     str   = ""         # tag of the final step of the trace

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stepIndex":   self.step_index,
            "totalSteps":  self.total_steps,
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "progress":    self.progress,
            "current":     self.current,
            "outcome":     self.outcome,
        }


def stats_at(steps: Sequence[Step], index: int) -> LiveStats:
    """Counters as they stand once steps[0..index] have been shown."""
    if not steps:
        return LiveStats()
    if not 0 <= index < len(steps):
        raise IndexError(f"step index {index} out of range (0..{len(steps) - 1})")

    shown = steps[: index + 1]
    return LiveStats(
        step_index=index,
        total_steps=len(steps),
        comparisons=sum(1 for s in shown if s.type in COMPARISON_TAGS),
        swaps=sum(1 for s in shown if s.type in SWAP_TAGS),
        progress=round((index + 1) * 100 / len(steps), 2),
        current=steps[index].type,
        outcome=steps[-1].type,
    )


# ---------------------------------------------------------------------------
# Metrics dataclass: totals for a finished run
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str   = ""
    algo_label:     str   = ""
    family:         str   = ""
    total_steps:    int   = 0          # number of Steps yielded
    comparisons:    int   = 0
    swaps:          int   = 0
    outcome:        str   = ""         # tag of the final step
    negative_cycle: bool  = False
    wall_time_ms:   float = 0.0        # wall-clock time to run to completion
    memory_bytes:   int   = 0          # approx size of the step buffer (sys.getsizeof)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recording: one finished run
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Recording:
    algo_key: str
    params:   Dict[str, Any]
    steps:    StepList
    metrics:  RunMetrics

    def stats_at(self, index: int) -> LiveStats:
        return stats_at(self.steps, index)

    def export(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algo_key,
            "params":    dict(self.params),
            "metrics":   self.metrics.to_dict(),
            "steps":     [s.to_dict() for s in self.steps],
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        registry : The AlgorithmRegistry runs are dispatched through.
        last     : The most recent Recording (None before the first run).
    """

    def __init__(self, registry: "AlgorithmRegistry"):
        self.registry = registry
        self.last: Optional[Recording] = None

    def record(self, algo_key: str, data: Any, start: Any = None, end: Any = None) -> Recording:
        """Run to completion through the registry and measure it."""
        info = self.registry.get(algo_key)

        t0    = time.monotonic()
        steps = self.registry.run(algo_key, data, start=start, end=end)
        wall  = (time.monotonic() - t0) * 1000

        metrics = self._compute_metrics(info.key, info.label, info.family, steps, wall)
        params  = {k: v for k, v in (("start", start), ("end", end)) if v is not None}

        self.last = Recording(algo_key=info.key, params=params, steps=steps, metrics=metrics)
        logger.info(
            "Recorded %s: %d steps, outcome %s, %.2f ms",
            info.key, metrics.total_steps, metrics.outcome, metrics.wall_time_ms,
        )
        return self.last

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _compute_metrics(key: str, label: str, family: str, steps: StepList, wall_ms: float) -> RunMetrics:
        final = stats_at(steps, len(steps) - 1) if steps else LiveStats()
        last  = steps[-1] if steps else None

        mem = sys.getsizeof(steps)
        for s in steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=key,
            algo_label=label,
            family=family,
            total_steps=len(steps),
            comparisons=final.comparisons,
            swaps=final.swaps,
            outcome=final.outcome,
            negative_cycle=bool(getattr(last, "has_negative_cycle", False)),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )
