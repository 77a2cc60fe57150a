"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete visualizer run (all Steps), then computes the
metrics the Analytics card and Comparison Mode need.

Usage:
    rec = Recorder()
    rec.start("merge-sort", Action("sort", data=[5, 3, 8]), registry)
    metrics = rec.run_to_completion()
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    Two Recorders (one per visualizer) run the SAME input to completion,
    then compare(rec1, rec2) → ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from algorithms.step import Step, step_to_dict, to_jsonable
from engine.stepper import StepEngine
from visualizers.base import Action, Visualizer
from visualizers.registry import VisualizerRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    visualizer_id:      str   = ""
    visualizer_name:    str   = ""
    action:             str   = ""
    total_steps:        int   = 0
    comparisons:        int   = 0
    swaps:              int   = 0
    reads:              int   = 0
    writes:             int   = 0
    wall_time_ms:       float = 0.0     # time to generate every step
    memory_bytes:       int   = 0       # approx size of the step buffer (sys.getsizeof)
    final_description:  str   = ""


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:   RunMetrics = field(default_factory=RunMetrics)
    right:  RunMetrics = field(default_factory=RunMetrics)
    # derived: visualizer name of the lower count, or "tie"
    winner_comparisons:  str = ""
    winner_swaps:        str = ""
    winner_steps:        str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        engine  : The StepEngine the steps were loaded into.
    """

    def __init__(self):
        self.steps:    List[Step]            = []
        self.metrics:  Optional[RunMetrics]  = None
        self.engine:   Optional[StepEngine]  = None

        self._visualizer:     Optional[Visualizer] = None
        self._visualizer_id:  str                  = ""
        self._action:         Optional[Action]     = None
        self._wall_ms:        float                = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        visualizer_id: str,
        action: Union[Action, str, None],
        registry: VisualizerRegistry,
    ) -> None:
        """Resolve the visualizer, generate the steps and load them into an engine."""
        visualizer = registry.get(visualizer_id)
        if visualizer is None:
            raise ValueError(f"Unknown visualizer: {visualizer_id}")
        if action is None:
            action = Action(visualizer.DEFAULT_ACTION)
        elif isinstance(action, str):
            action = Action(action)

        self._visualizer     = visualizer
        self._visualizer_id  = visualizer_id
        self._action         = action
        self.metrics         = None

        t0 = time.monotonic()
        self.steps = visualizer.get_steps(action)
        self._wall_ms = (time.monotonic() - t0) * 1000

        self.engine = StepEngine()
        self.engine.load_steps(self.steps)
        logger.debug("Recorded %d steps for %s/%s", len(self.steps), visualizer_id, action.type)

    def run_to_completion(self) -> RunMetrics:
        """Drive the engine to the last step and compute metrics."""
        if self.engine is None:
            raise RuntimeError("Call start() first.")
        self.engine.go_to_end()
        self.metrics = self._compute_metrics()
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        action = self._action
        return {
            "visualizer_id":  self._visualizer_id,
            "action": {
                "type":   action.type if action else "",
                "data":   to_jsonable(action.data) if action else None,
                "params": to_jsonable(action.params) if action else {},
            },
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [step_to_dict(s) for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self) -> RunMetrics:
        viz  = self._visualizer
        last = self.steps[-1] if self.steps else None

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.snapshot.data)

        return RunMetrics(
            visualizer_id=self._visualizer_id,
            visualizer_name=viz.config.name if viz else "",
            action=self._action.type if self._action else "",
            total_steps=len(self.steps),
            comparisons=last.meta.comparisons if last else 0,
            swaps=last.meta.swaps if last else 0,
            reads=last.meta.reads if last else 0,
            writes=last.meta.writes if last else 0,
            wall_time_ms=round(self._wall_ms, 2),
            memory_bytes=mem,
            final_description=last.description if last else "",
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.visualizer_name if l_val < r_val else r.visualizer_name

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
        winner_steps=winner(l.total_steps, r.total_steps),
    )
