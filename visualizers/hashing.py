"""
hashing.py — Hash Table Visualizer
===================================
Separate chaining.  The key comes from `params["key"]` (text) and the
stored value from `params["value"]`.  Unknown action types run a lookup.
"""

from typing import Any, Dict, List, Optional

from algorithms import hash_table
from algorithms.step import Step
from config import Config
from ui.canvas import draw_hash_table
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, CodeSnippets, ComplexityInfo,
    complexity, param_number, param_str,
)

DEFAULT_KEY   = "apple"
DEFAULT_VALUE = 1


class HashTableVisualizer(Visualizer):
    config = VisualizerConfig(
        id="hash-table", name="Hash Table", category="hashing",
        description="Separate-chaining hash table with load-factor warning and resize",
    )
    DEFAULT_ACTION = "lookup"
    MUTATING_ACTIONS = frozenset({"insert", "delete", "resize", "clear"})

    def _initial_structure(self):
        return hash_table.build_table(hash_table.SAMPLE_ENTRIES, Config.hash_capacity)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "resize":
            return hash_table.generate_resize_steps(data)
        if kind == "clear":
            return hash_table.generate_clear_steps(data)
        key = param_str(params, "key", DEFAULT_KEY)
        if kind == "insert":
            return hash_table.generate_insert_steps(data, key, param_number(params, "value", DEFAULT_VALUE))
        if kind == "delete":
            return hash_table.generate_delete_steps(data, key)
        return hash_table.generate_lookup_steps(data, key)

    def _render(self, data, ctx) -> None:
        draw_hash_table(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(hash_table.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(1)", "O(n)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [
            InputField("key", "Key", type="text", default_value=DEFAULT_KEY),
            InputField("value", "Value", default_value=DEFAULT_VALUE, step=1),
        ]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("insert", "Insert", primary=True),
            ActionButton("lookup", "Lookup"),
            ActionButton("delete", "Delete"),
            ActionButton("resize", "Resize"),
            ActionButton("clear", "Clear"),
        ]

    def get_code(self) -> Optional[CodeSnippets]:
        return CodeSnippets(python=[
            "def hash_key(key, capacity):",
            "    h = 0",
            "    for ch in key:",
            "        h = (h * 31 + ord(ch)) % capacity",
            "    return abs(h)",
        ])
