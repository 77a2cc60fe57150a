"""
sorting.py — Sorting Visualizers
=================================
One class serves all six sorts; each registry entry binds it to a key in
`algorithms.SORTING_ALGORITHMS`.

Actions:
    sort       – run the sort on the current array (DEFAULT_ACTION)
    randomize  – new random array (params: size, seed)
    custom     – array from params["values"], e.g. "5, 3, 8"

Sorting never changes the current array: the input stays on screen so
the same data can be sorted again or compared against another sort.
"""

from typing import Any, Dict, List, Optional

from algorithms import SORTING_ALGORITHMS
from algorithms.array_ops import make_elements, random_array
from algorithms.step import Step
from config import Config
from ui.canvas import draw_array
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, CodeSnippets, ComplexityInfo,
    complexity, param_int, param_number, param_numbers,
)


COMPLEXITY: Dict[str, ComplexityInfo] = {
    "bubble-sort":    complexity("O(n)",       "O(n²)",      "O(n²)",      "O(1)"),
    "selection-sort": complexity("O(n²)",      "O(n²)",      "O(n²)",      "O(1)"),
    "insertion-sort": complexity("O(n)",       "O(n²)",      "O(n²)",      "O(1)"),
    "merge-sort":     complexity("O(n log n)", "O(n log n)", "O(n log n)", "O(n)"),
    "quick-sort":     complexity("O(n log n)", "O(n log n)", "O(n²)",      "O(log n)"),
    "heap-sort":      complexity("O(n log n)", "O(n log n)", "O(n log n)", "O(1)"),
}

DESCRIPTIONS: Dict[str, str] = {
    "bubble-sort":    "Repeatedly swaps adjacent out-of-order elements",
    "selection-sort": "Selects the minimum of the unsorted part on every pass",
    "insertion-sort": "Inserts each element into the sorted prefix",
    "merge-sort":     "Divide and conquer: split in halves, merge sorted halves",
    "quick-sort":     "Partitions around a pivot (Lomuto), then recurses",
    "heap-sort":      "Builds a max-heap, then extracts the maximum repeatedly",
}

PYTHON_CODE: Dict[str, List[str]] = {
    "bubble-sort": [
        "def bubble_sort(a):",
        "    n = len(a)",
        "    for i in range(n - 1):",
        "        for j in range(n - i - 1):",
        "            if a[j] > a[j + 1]:",
        "                a[j], a[j + 1] = a[j + 1], a[j]",
    ],
    "quick-sort": [
        "def quick_sort(a, low, high):",
        "    if low < high:",
        "        pivot, i = a[high], low - 1",
        "        for j in range(low, high):",
        "            if a[j] < pivot:",
        "                i += 1",
        "                a[i], a[j] = a[j], a[i]",
        "        a[i + 1], a[high] = a[high], a[i + 1]",
        "        quick_sort(a, low, i)",
        "        quick_sort(a, i + 2, high)",
    ],
    "heap-sort": [
        "def heap_sort(a):",
        "    n = len(a)",
        "    for i in range(n // 2 - 1, -1, -1):",
        "        heapify(a, n, i)",
        "    for end in range(n - 1, 0, -1):",
        "        a[0], a[end] = a[end], a[0]",
        "        heapify(a, end, 0)",
    ],
}


class SortingVisualizer(Visualizer):
    DEFAULT_ACTION = "sort"

    def __init__(self, key: str, seed: Optional[int] = None):
        label, self._generate, self._pseudocode = SORTING_ALGORITHMS[key]
        self.key = key
        self.seed = seed
        self.config = VisualizerConfig(
            id=key, name=label, category="sorting",
            description=DESCRIPTIONS[key], default_speed=Config.default_speed_ms,
        )
        super().__init__()

    def _initial_structure(self):
        return random_array(Config.array_size, self.seed, Config.array_min_value,
                            Config.array_max_value)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "randomize":
            size = param_int(params, "size", Config.array_size, low=0, high=100)
            seed = param_number(params, "seed", None)
            arr = random_array(size, seed, Config.array_min_value, Config.array_max_value)
            return self._replace(arr, f"Generated random array of {size} element(s)")
        if kind == "custom":
            values = param_numbers(params, "values")
            if values is None:
                return self._replace(self.current, "No valid numbers given. Array unchanged")
            return self._replace(make_elements(values), f"Loaded array [{', '.join(f'{v:g}' for v in values)}]")
        return self._generate(data)

    def _render(self, data, ctx) -> None:
        draw_array(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(self._pseudocode)

    def get_complexity(self) -> ComplexityInfo:
        return COMPLEXITY[self.key]

    def get_inputs(self) -> List[InputField]:
        return [
            InputField("size", "Array size", type="range", default_value=Config.array_size,
                       min=5, max=50, step=1),
            InputField("values", "Custom values", type="text", placeholder="e.g. 5, 3, 8, 4, 2"),
        ]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("sort", "Sort", primary=True),
            ActionButton("randomize", "Randomize"),
            ActionButton("custom", "Use values"),
        ]

    def get_code(self) -> Optional[CodeSnippets]:
        code = PYTHON_CODE.get(self.key)
        return CodeSnippets(python=list(code)) if code else None


def factory_for(key: str):
    return lambda: SortingVisualizer(key)
