"""
algorithms/
-----------
Pure step generators, one module per structure / algorithm.  Every
generator takes the current structure plus operation arguments and
returns an ordered, non-empty list of Step objects.  Nothing here keeps
state between calls.

    from algorithms import Step, StepBuilder, SORTING_ALGORITHMS
    from algorithms.bst import generate_insert_steps

SORTING_ALGORITHMS maps a short key to (label, generator, pseudocode) so
the sorting visualizers and the recorder's comparison mode share one
table.
"""

from typing import Callable, Dict, List, Tuple

from algorithms.step import Step, StepMeta, Snapshot, StepBuilder, to_jsonable, step_to_dict
from algorithms.array_ops import ArrayElement, ElementState, random_array
from algorithms.graph_run import GraphRun

from algorithms import bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, heap_sort


SortEntry = Tuple[str, Callable[..., List[Step]], List[str]]

SORTING_ALGORITHMS: Dict[str, SortEntry] = {
    "bubble-sort":    ("Bubble Sort",    bubble_sort.generate_bubble_sort_steps,       bubble_sort.PSEUDOCODE),
    "selection-sort": ("Selection Sort", selection_sort.generate_selection_sort_steps, selection_sort.PSEUDOCODE),
    "insertion-sort": ("Insertion Sort", insertion_sort.generate_insertion_sort_steps, insertion_sort.PSEUDOCODE),
    "merge-sort":     ("Merge Sort",     merge_sort.generate_merge_sort_steps,         merge_sort.PSEUDOCODE),
    "quick-sort":     ("Quick Sort",     quick_sort.generate_quick_sort_steps,         quick_sort.PSEUDOCODE),
    "heap-sort":      ("Heap Sort",      heap_sort.generate_heap_sort_steps,           heap_sort.PSEUDOCODE),
}


__all__ = [
    "Step", "StepMeta", "Snapshot", "StepBuilder", "to_jsonable", "step_to_dict",
    "ArrayElement", "ElementState", "random_array",
    "GraphRun",
    "SORTING_ALGORITHMS",
]
