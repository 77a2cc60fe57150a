"""
linear.py — Linked List, Stack, Queue and Binary Heap Visualizers
==================================================================
Each operation takes its operand from `params["value"]`; a missing or
non-numeric value falls back to `DEFAULT_VALUE`.

Default actions (used for unknown action types):
    linked-list → search
    stack       → peek
    queue       → peek
    binary-heap → peek
"""

from typing import Any, Dict, List, Optional

from algorithms import binary_heap, fifo_queue, linked_list, stack
from algorithms.step import Step
from config import Config
from ui.canvas import draw_heap, draw_linked_list, draw_queue, draw_stack
from visualizers.base import (
    Visualizer, VisualizerConfig, ActionButton, InputField, CodeSnippets, ComplexityInfo,
    complexity, param_number, param_numbers, param_str,
)

DEFAULT_VALUE = 50


def _value_field(label: str = "Value") -> InputField:
    return InputField("value", label, type="number", default_value=DEFAULT_VALUE,
                      min=-999, max=999, step=1)


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
class LinkedListVisualizer(Visualizer):
    config = VisualizerConfig(
        id="linked-list", name="Linked List", category="linear",
        description="Singly linked list: insert at head or tail, delete and search by value",
    )
    DEFAULT_ACTION = "search"
    MUTATING_ACTIONS = frozenset({"insert-tail", "insert-head", "delete"})

    def _initial_structure(self):
        return linked_list.sample_list()

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "clear":
            return self._replace(linked_list.LinkedListData(), "List cleared")
        value = param_number(params, "value", DEFAULT_VALUE)
        if kind == "insert-tail":
            return linked_list.generate_insert_tail_steps(data, value)
        if kind == "insert-head":
            return linked_list.generate_insert_head_steps(data, value)
        if kind == "delete":
            return linked_list.generate_delete_steps(data, value)
        return linked_list.generate_search_steps(data, value)

    def _render(self, data, ctx) -> None:
        draw_linked_list(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(linked_list.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(n)", "O(n)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [_value_field()]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("insert-tail", "Insert at tail", primary=True),
            ActionButton("insert-head", "Insert at head"),
            ActionButton("delete", "Delete"),
            ActionButton("search", "Search"),
            ActionButton("clear", "Clear"),
        ]

    def get_code(self) -> Optional[CodeSnippets]:
        return CodeSnippets(python=[
            "def insert_at_tail(head, value):",
            "    node = Node(value)",
            "    if head is None:",
            "        return node",
            "    cur = head",
            "    while cur.next is not None:",
            "        cur = cur.next",
            "    cur.next = node",
            "    return head",
        ])


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
class StackVisualizer(Visualizer):
    config = VisualizerConfig(
        id="stack", name="Stack", category="linear",
        description="Bounded LIFO stack with push, pop and peek",
    )
    DEFAULT_ACTION = "peek"
    MUTATING_ACTIONS = frozenset({"push", "pop"})

    def _initial_structure(self):
        return stack.sample_stack(Config.stack_capacity)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "push":
            return stack.generate_push_steps(data, param_number(params, "value", DEFAULT_VALUE))
        if kind == "pop":
            return stack.generate_pop_steps(data)
        if kind == "clear":
            return self._replace(stack.StackData(max_size=data.max_size), "Stack cleared")
        return stack.generate_peek_steps(data)

    def _render(self, data, ctx) -> None:
        draw_stack(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(stack.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(1)", "O(1)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [_value_field()]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("push", "Push", primary=True),
            ActionButton("pop", "Pop"),
            ActionButton("peek", "Peek"),
            ActionButton("clear", "Clear"),
        ]


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
class QueueVisualizer(Visualizer):
    config = VisualizerConfig(
        id="queue", name="Queue", category="linear",
        description="Bounded FIFO queue with enqueue, dequeue and peek",
    )
    DEFAULT_ACTION = "peek"
    MUTATING_ACTIONS = frozenset({"enqueue", "dequeue"})

    def _initial_structure(self):
        return fifo_queue.sample_queue(Config.queue_capacity)

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "enqueue":
            return fifo_queue.generate_enqueue_steps(data, param_number(params, "value", DEFAULT_VALUE))
        if kind == "dequeue":
            return fifo_queue.generate_dequeue_steps(data)
        if kind == "clear":
            return self._replace(fifo_queue.QueueData(max_size=data.max_size), "Queue cleared")
        return fifo_queue.generate_peek_steps(data)

    def _render(self, data, ctx) -> None:
        draw_queue(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(fifo_queue.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(1)", "O(1)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [_value_field()]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("enqueue", "Enqueue", primary=True),
            ActionButton("dequeue", "Dequeue"),
            ActionButton("peek", "Peek"),
            ActionButton("clear", "Clear"),
        ]


# ---------------------------------------------------------------------------
# Binary heap
# ---------------------------------------------------------------------------
class BinaryHeapVisualizer(Visualizer):
    """
    `heapify` builds a fresh heap from `params["values"]` (keeping the
    current heap type, or `params["heap_type"]` when given); `toggle`
    flips between max- and min-heap by re-heapifying the current values.
    """

    config = VisualizerConfig(
        id="binary-heap", name="Binary Heap", category="trees",
        description="Array-backed min/max heap: push, pop, peek and heapify",
    )
    DEFAULT_ACTION = "peek"
    MUTATING_ACTIONS = frozenset({"push", "pop", "heapify", "toggle"})

    def _initial_structure(self):
        return binary_heap.sample_heap("max")

    def _dispatch(self, kind: str, data: Any, params: Dict[str, Any]) -> List[Step]:
        if kind == "push":
            return binary_heap.generate_push_steps(data, param_number(params, "value", DEFAULT_VALUE))
        if kind == "pop":
            return binary_heap.generate_pop_steps(data)
        if kind == "heapify":
            values = param_numbers(params, "values") or [e.value for e in data.elements]
            heap_type = param_str(params, "heap_type", data.heap_type)
            if heap_type not in ("max", "min"):
                heap_type = data.heap_type
            return binary_heap.generate_heapify_steps(values, heap_type)
        if kind == "toggle":
            return binary_heap.generate_toggle_type_steps(data)
        return binary_heap.generate_peek_steps(data)

    def _render(self, data, ctx) -> None:
        draw_heap(ctx, data)

    def get_pseudocode(self) -> List[str]:
        return list(binary_heap.PSEUDOCODE)

    def get_complexity(self) -> ComplexityInfo:
        return complexity("O(1)", "O(log n)", "O(log n)", "O(n)")

    def get_inputs(self) -> List[InputField]:
        return [
            _value_field(),
            InputField("values", "Heapify values", type="text", placeholder="e.g. 4, 10, 3, 5, 1"),
        ]

    def get_actions(self) -> List[ActionButton]:
        return [
            ActionButton("push", "Push", primary=True),
            ActionButton("pop", "Pop"),
            ActionButton("peek", "Peek"),
            ActionButton("heapify", "Heapify"),
            ActionButton("toggle", "Toggle min/max"),
        ]

    def get_code(self) -> Optional[CodeSnippets]:
        return CodeSnippets(python=[
            "def sift_up(a, i):",
            "    while i > 0:",
            "        parent = (i - 1) // 2",
            "        if a[i] <= a[parent]:",
            "            break",
            "        a[i], a[parent] = a[parent], a[i]",
            "        i = parent",
        ])
