"""
step.py — Step & Snapshot Model
================================
Every generator returns a list of Step objects.
A Step is a frozen-in-time picture of everything a renderer needs to
paint one frame of an operation:

    • A deep copy of the structure itself (the Snapshot)
    • A plain-English description of what just happened
    • Running operation counters (comparisons, swaps, reads, writes)
    • Which pseudocode line is executing right now
    • Optional index hints the renderer should emphasise

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT.  The generator is the
    only writer; the playback engine / renderer are pure readers.
  - The snapshot owns an independent deep copy of the working structure,
    so mutating the working copy later can never rewrite history.
  - Counters live on the StepBuilder, never on the Step, so they can only
    ever grow across one run.
"""

import copy
import math
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Meta / Snapshot / Step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepMeta:
    """
    Attributes:
        comparisons      : Comparisons made so far in this run.
        swaps            : Swaps / shifts / rotations so far.
        reads            : Pointer follows / element reads so far.
        writes           : Structural writes so far.
        highlighted_line : 0-based pseudocode line executing now.
        highlight_color  : Optional accent colour hint for the renderer.
        complexity       : Optional complexity note for this step.
    """

    comparisons:       int            = 0
    swaps:             int            = 0
    reads:             int            = 0
    writes:            int            = 0
    highlighted_line:  Optional[int]  = None
    highlight_color:   Optional[str]  = None
    complexity:        Optional[str]  = None


@dataclass(frozen=True)
class Snapshot:
    data:      Any
    metadata:  Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        id               : 0-based position of this step in the run.
        description      : Human-readable sentence of what just happened.
        snapshot         : Deep-copied structure at this instant.
        meta             : Cumulative counters + rendering hints.
        active_indices   : Positions to emphasise (structure specific).
        modified_indices : Positions changed by this step.
    """

    id:                int
    description:       str
    snapshot:          Snapshot
    meta:              StepMeta                = field(default_factory=StepMeta)
    active_indices:    Optional[List[int]]     = None
    modified_indices:  Optional[List[int]]     = None


# ---------------------------------------------------------------------------
# Builder — the only way generators create Steps
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that generators use to record Steps cleanly.

    Usage inside a generator:
        sb = StepBuilder()
        sb.comparisons += 1
        sb.push(f"Comparing {a} and {b}", working, line=3, active=[i, j])
        return sb.steps
    """

    def __init__(self):
        self.steps:        List[Step] = []
        self.comparisons:  int        = 0
        self.swaps:        int        = 0
        self.reads:        int        = 0
        self.writes:       int        = 0

    def push(
        self,
        description: str,
        data: Any,
        line: Optional[int] = None,
        color: Optional[str] = None,
        active: Optional[List[int]] = None,
        modified: Optional[List[int]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Step:
        """Freeze `data` into a new Step and append it."""
        if not description:
            raise ValueError("every step needs a description")
        step = Step(
            id=len(self.steps),
            description=description,
            snapshot=Snapshot(
                data=copy.deepcopy(data),
                metadata=dict(metadata) if metadata else {},
            ),
            meta=StepMeta(
                comparisons=self.comparisons,
                swaps=self.swaps,
                reads=self.reads,
                writes=self.writes,
                highlighted_line=line,
                highlight_color=color,
            ),
            active_indices=list(active) if active is not None else None,
            modified_indices=list(modified) if modified is not None else None,
        )
        self.steps.append(step)
        return step

    @property
    def last(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------
def to_jsonable(obj: Any) -> Any:
    """Recursively turn dataclasses / enums / infinities into JSON types."""
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, float) and math.isinf(obj):
        return None
    return obj


def step_to_dict(step: Step) -> Dict[str, Any]:
    return {
        "id":               step.id,
        "description":      step.description,
        "snapshot":         {
            "data":     to_jsonable(step.snapshot.data),
            "metadata": to_jsonable(step.snapshot.metadata),
        },
        "meta":             to_jsonable(step.meta),
        "active_indices":   step.active_indices,
        "modified_indices": step.modified_indices,
    }


def format_distance(value: float) -> str:
    """Distances print as integers when whole, ∞ when unreachable."""
    if math.isinf(value):
        return "∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
