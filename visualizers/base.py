"""
base.py — Visualizer Contract
==============================
Every structure the app can animate implements `Visualizer`.  The
playback engine, the recorder and the web layer only ever talk to this
interface, so all structures are interchangeable behind it.

A visualizer owns exactly one "current structure".  `get_steps(action)`
runs an operation against it (or against `action.data` when given) and,
for mutating operations, commits the final snapshot as the new current
structure.  Unknown action types fall back to the class's
`DEFAULT_ACTION`; they never raise.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from algorithms.step import Snapshot, Step, StepBuilder
from config import Config
from ui.canvas import CanvasConfig, SvgContext


# ---------------------------------------------------------------------------
# Descriptive records
# ---------------------------------------------------------------------------
@dataclass
class Action:
    type:    str
    data:    Any            = None
    params:  Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class VisualizerConfig:
    id:             str
    name:           str
    category:       str
    description:    str
    default_speed:  Optional[int] = None


@dataclass(frozen=True)
class InputField:
    id:             str
    label:          str
    type:           str                = "number"     # number | text | range
    default_value:  Any                = ""
    min:            Optional[float]    = None
    max:            Optional[float]    = None
    step:           Optional[float]    = None
    placeholder:    Optional[str]      = None


@dataclass(frozen=True)
class ActionButton:
    id:       str
    label:    str
    primary:  bool = False


@dataclass(frozen=True)
class TimeComplexity:
    best:     str
    average:  str
    worst:    str


@dataclass(frozen=True)
class ComplexityInfo:
    time:   TimeComplexity
    space:  str


@dataclass(frozen=True)
class CodeSnippets:
    python:      List[str] = field(default_factory=list)
    typescript:  List[str] = field(default_factory=list)
    java:        List[str] = field(default_factory=list)


def complexity(best: str, average: str, worst: str, space: str) -> ComplexityInfo:
    return ComplexityInfo(TimeComplexity(best, average, worst), space)


# ---------------------------------------------------------------------------
# Lenient parameter coercion
# ---------------------------------------------------------------------------
def param_number(params: Optional[Dict[str, Any]], name: str, default: float) -> float:
    """Numbers arrive as strings from form inputs; anything unusable → default."""
    raw = (params or {}).get(name)
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if value != value or value in (float("inf"), float("-inf")):
        return default
    return int(value) if value.is_integer() else value


def param_int(
    params: Optional[Dict[str, Any]],
    name: str,
    default: int,
    low: Optional[int] = None,
    high: Optional[int] = None,
) -> int:
    value = int(param_number(params, name, default))
    if low is not None:
        value = max(low, value)
    if high is not None:
        value = min(high, value)
    return value


def param_str(params: Optional[Dict[str, Any]], name: str, default: str = "") -> str:
    raw = (params or {}).get(name)
    if raw is None:
        return default
    text = str(raw).strip()
    return text or default


def param_numbers(params: Optional[Dict[str, Any]], name: str) -> Optional[List[float]]:
    """Comma / space separated list of numbers.  None when absent or unusable."""
    raw = (params or {}).get(name)
    if raw is None:
        return None
    items: Sequence = raw if isinstance(raw, (list, tuple)) else str(raw).replace(",", " ").split()
    out = []
    for item in items:
        value = param_number({"v": item}, "v", None)
        if value is not None:
            out.append(value)
    return out or None


# ---------------------------------------------------------------------------
# Visualizer
# ---------------------------------------------------------------------------
class Visualizer(ABC):
    """
    Subclasses set `config`, `DEFAULT_ACTION` and `MUTATING_ACTIONS`, and
    implement `_initial_structure`, `_dispatch` and the metadata accessors.
    """

    config:            VisualizerConfig
    DEFAULT_ACTION:    str       = ""
    MUTATING_ACTIONS:  frozenset = frozenset()

    def __init__(self):
        self.current: Any = self._initial_structure()

    # ---------- structure lifecycle ----------
    @abstractmethod
    def _initial_structure(self) -> Any:
        """Fresh sample structure shown on first display."""

    def get_initial_state(self) -> Any:
        return copy.deepcopy(self.current)

    def set_current(self, data: Any) -> None:
        self.current = copy.deepcopy(data)

    # ---------- dispatch ----------
    def get_steps(self, action: Action) -> List[Step]:
        kind = action.type if action.type in self.action_types() else self.DEFAULT_ACTION
        data = self.current if action.data is None else action.data
        steps = self._dispatch(kind, data, action.params or {})
        if kind in self.MUTATING_ACTIONS and steps:
            self.commit(steps[-1].snapshot.data)
        return steps

    def action_types(self) -> List[str]:
        return [a.id for a in self.get_actions()]

    def commit(self, snapshot_data: Any) -> None:
        """Adopt the final snapshot of a mutating run as the current structure."""
        self.current = copy.deepcopy(snapshot_data)

    def _replace(self, data: Any, description: str) -> List[Step]:
        """Swap in a whole new structure (random / reset / clear) as one step."""
        self.current = copy.deepcopy(data)
        sb = StepBuilder()
        sb.push(description, data, line=0)
        return sb.steps

    @abstractmethod
    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        ...

    # ---------- rendering ----------
    def draw(self, snapshot: Any, ctx) -> None:
        """Paint a Snapshot (or bare structure data) onto an SvgContext."""
        data = snapshot.data if isinstance(snapshot, Snapshot) else snapshot
        self._render(data, ctx)

    @abstractmethod
    def _render(self, data: Any, ctx) -> None:
        ...

    def render_svg(self, snapshot: Any, config: Optional[CanvasConfig] = None) -> str:
        ctx = SvgContext(config or CanvasConfig(Config.canvas_width, Config.canvas_height))
        self.draw(snapshot, ctx)
        return ctx.to_svg()

    # ---------- metadata ----------
    @abstractmethod
    def get_pseudocode(self) -> List[str]:
        ...

    @abstractmethod
    def get_complexity(self) -> ComplexityInfo:
        ...

    def get_inputs(self) -> List[InputField]:
        return []

    @abstractmethod
    def get_actions(self) -> List[ActionButton]:
        ...

    def get_code(self) -> Optional[CodeSnippets]:
        return None

    def dispose(self) -> None:
        self.current = None
