"""
engine/
-------
Playback & recording layer.

    from engine import StepEngine, Recorder, compare
"""

from engine.stepper  import (
    StepEngine,
    EngineEvent,
    EngineEventType,
    EngineState,
    SPEED_PRESETS,
    DEFAULT_SPEED_MS,
    MIN_SPEED_MS,
    MAX_SPEED_MS,
)
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "StepEngine",
    "EngineEvent",
    "EngineEventType",
    "EngineState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED_MS",
    "MIN_SPEED_MS",
    "MAX_SPEED_MS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
