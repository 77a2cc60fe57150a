"""
visualizers/
------------
The Visualizer contract, the registry, and one visualizer per structure.

    from visualizers import registry, register_all, Action

    register_all(registry)
    viz = registry.get("bubble-sort")
    steps = viz.get_steps(Action("sort"))

`register_all` is the only place that populates a registry; calling it
again skips ids that are already registered.
"""

from visualizers.base import (
    Action, ActionButton, CodeSnippets, ComplexityInfo, InputField, TimeComplexity,
    Visualizer, VisualizerConfig,
)
from visualizers.registry import VisualizerRegistry
from visualizers.sorting import SortingVisualizer, factory_for
from visualizers.linear import (
    BinaryHeapVisualizer, LinkedListVisualizer, QueueVisualizer, StackVisualizer,
)
from visualizers.trees import AVLVisualizer, BSTVisualizer, TrieVisualizer
from visualizers.hashing import HashTableVisualizer
from visualizers.sets import UnionFindVisualizer
from visualizers.graphs import GRAPH_VISUALIZERS, GraphVisualizer

from algorithms import SORTING_ALGORITHMS


STRUCTURE_VISUALIZERS = [
    LinkedListVisualizer, StackVisualizer, QueueVisualizer, BinaryHeapVisualizer,
    BSTVisualizer, AVLVisualizer, TrieVisualizer,
    HashTableVisualizer, UnionFindVisualizer,
]


def register_all(target: VisualizerRegistry) -> VisualizerRegistry:
    """Register every built-in visualizer.  Idempotent."""
    for key in SORTING_ALGORITHMS:
        if not target.has(key):
            target.register(SortingVisualizer(key).config, factory_for(key))
    for cls in STRUCTURE_VISUALIZERS + GRAPH_VISUALIZERS:
        if not target.has(cls.config.id):
            target.register(cls.config, cls)
    return target


registry = VisualizerRegistry()


__all__ = [
    "Action", "ActionButton", "CodeSnippets", "ComplexityInfo", "InputField", "TimeComplexity",
    "Visualizer", "VisualizerConfig", "VisualizerRegistry",
    "SortingVisualizer", "LinkedListVisualizer", "StackVisualizer", "QueueVisualizer",
    "BinaryHeapVisualizer", "BSTVisualizer", "AVLVisualizer", "TrieVisualizer",
    "HashTableVisualizer", "UnionFindVisualizer", "GraphVisualizer",
    "GRAPH_VISUALIZERS", "STRUCTURE_VISUALIZERS",
    "registry", "register_all",
]
