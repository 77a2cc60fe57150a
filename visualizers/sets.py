"""
sets.py — Union-Find Visualizer
================================
Elements are integer ids taken from `params["x"]` / `params["y"]`.
Unknown action types run `find`.
"""

from typing import Any, Dict, List

from algorithms import union_find
from algorithms.step import Step
from ui.canvas import draw_union_find
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, ComplexityInfo,
    complexity, param_int,
)


class UnionFindVisualizer(Visualizer):
    config = VisualizerConfig(
        id="union-find", name="Union-Find", category="sets",
        description="Disjoint sets with path compression and union by rank",
    )
    DEFAULT_ACTION = "find"
    MUTATING_ACTIONS = frozenset({"make-set", "find", "union"})

    def _initial_structure(self):
        return union_find.sample_forest()

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "reset":
            size = param_int(params, "size", 8, low=1, high=16)
            return self._replace(union_find.singletons(size), f"Reset to {size} singleton sets")
        x = param_int(params, "x", 0)
        if kind == "make-set":
            return union_find.generate_make_set_steps(data, x)
        y = param_int(params, "y", 1)
        if kind == "union":
            return union_find.generate_union_steps(data, x, y)
        if kind == "connected":
            return union_find.generate_connected_steps(data, x, y)
        return union_find.generate_find_steps(data, x)

    def _render(self, data, ctx) -> None:
        draw_union_find(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(union_find.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(α(n))", "O(α(n))", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [
            InputField("x", "Element x", default_value=0, min=0, max=99, step=1),
            InputField("y", "Element y", default_value=1, min=0, max=99, step=1),
        ]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("union", "Union", primary=True),
            ActionButton("find", "Find"),
            ActionButton("connected", "Connected?"),
            ActionButton("make-set", "Make set"),
            ActionButton("reset", "Reset"),
        ]
