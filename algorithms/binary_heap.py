"""
binary_heap.py — Array-backed Binary Heap (min or max)
=======================================================
push (sift-up), pop (sift-down), peek and heapify (bottom-up build).
`heap_type` selects the ordering; every comparison goes through
`_before(a, b)` so the same code serves both.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from algorithms.step import Step, StepBuilder


class HeapNodeState(Enum):
    DEFAULT   = "default"
    CURRENT   = "current"
    COMPARING = "comparing"
    SWAPPING  = "swapping"
    INSERTED  = "inserted"
    REMOVED   = "removed"


@dataclass
class HeapElement:
    value:  float
    state:  HeapNodeState = HeapNodeState.DEFAULT


@dataclass
class HeapData:
    elements:   List[HeapElement] = field(default_factory=list)
    heap_type:  str               = "max"


PSEUDOCODE: List[str] = [
    "push(value):",                                     # 0
    "  A.append(value); i = last",                      # 1
    "  while i > 0 and A[i] beats A[parent(i)]:",       # 2
    "    swap(A[i], A[parent(i)]); i = parent(i)",      # 3
    "pop():",                                           # 4
    "  root = A[0]; A[0] = A.removeLast()",             # 5
    "  siftDown(0): swap with the better child",        # 6
    "heapify(values): siftDown(i) for i = n/2-1 .. 0",  # 7
]

SAMPLE_VALUES = [50, 30, 40, 10, 20, 35, 25]


def sample_heap(heap_type: str = "max") -> HeapData:
    return build_heap(SAMPLE_VALUES, heap_type)


def _before(a: float, b: float, heap_type: str) -> bool:
    return a > b if heap_type == "max" else a < b


def _reset(elements: List[HeapElement]) -> None:
    for e in elements:
        e.state = HeapNodeState.DEFAULT


def _clone(data: HeapData) -> HeapData:
    return HeapData(elements=[HeapElement(e.value) for e in data.elements],
                    heap_type=data.heap_type)


def build_heap(values: Sequence[float], heap_type: str) -> HeapData:
    data = HeapData(elements=[HeapElement(v) for v in values], heap_type=heap_type)
    n = len(data.elements)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down_silent(data.elements, i, n, heap_type)
    return data


def _sift_down_silent(heap: List[HeapElement], i: int, n: int, heap_type: str) -> None:
    while True:
        best = i
        for c in (2 * i + 1, 2 * i + 2):
            if c < n and _before(heap[c].value, heap[best].value, heap_type):
                best = c
        if best == i:
            return
        heap[i], heap[best] = heap[best], heap[i]
        i = best


def _sift_down(work: HeapData, i: int, sb: StepBuilder, line: int) -> None:
    heap, kind = work.elements, work.heap_type
    n = len(heap)
    while True:
        best = i
        for side, c in (("left", 2 * i + 1), ("right", 2 * i + 2)):
            if c >= n:
                continue
            sb.comparisons += 1
            _reset(heap)
            heap[i].state = HeapNodeState.CURRENT
            heap[c].state = HeapNodeState.COMPARING
            sb.push(f"Comparing {heap[i].value} with {side} child {heap[c].value}",
                    work, line=line, active=[i, c])
            if _before(heap[c].value, heap[best].value, kind):
                best = c

        if best == i:
            _reset(heap)
            heap[i].state = HeapNodeState.CURRENT
            sb.push(f"Heap property satisfied. {heap[i].value} is in correct position.",
                    work, line=line, active=[i])
            return

        sb.swaps += 1
        heap[i], heap[best] = heap[best], heap[i]
        _reset(heap)
        heap[i].state = HeapNodeState.SWAPPING
        heap[best].state = HeapNodeState.SWAPPING
        sb.push(f"Swapping {heap[best].value} with {heap[i].value}", work,
                line=line, active=[i, best], modified=[i, best])
        i = best


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def generate_push_steps(data: HeapData, value: float) -> List[Step]:
    work = _clone(data)
    heap, kind = work.elements, work.heap_type
    sb = StepBuilder()

    sb.push(f"Pushing value {value} into {kind}-heap", work, line=0)

    sb.writes += 1
    heap.append(HeapElement(value, HeapNodeState.INSERTED))
    i = len(heap) - 1
    sb.push(f"Added {value} at index {i} (end of array)", work, line=1,
            active=[i], modified=[i])

    while i > 0:
        parent = (i - 1) // 2
        sb.comparisons += 1
        _reset(heap)
        heap[i].state = HeapNodeState.CURRENT
        heap[parent].state = HeapNodeState.COMPARING
        sb.push(f"Comparing {heap[i].value} with parent {heap[parent].value}",
                work, line=2, active=[i, parent])

        if not _before(heap[i].value, heap[parent].value, kind):
            break
        sb.swaps += 1
        word = "greater" if kind == "max" else "smaller"
        moving, other = heap[i].value, heap[parent].value
        heap[i], heap[parent] = heap[parent], heap[i]
        _reset(heap)
        heap[parent].state = HeapNodeState.SWAPPING
        heap[i].state = HeapNodeState.SWAPPING
        sb.push(f"{moving} is {word} than {other}, swapping", work, line=3,
                active=[i, parent], modified=[i, parent])
        i = parent

    _reset(heap)
    sb.push(f"Push complete. {value} is now in the heap.", work, line=2)
    return sb.steps


def generate_pop_steps(data: HeapData) -> List[Step]:
    work = _clone(data)
    heap, kind = work.elements, work.heap_type
    sb = StepBuilder()

    if not heap:
        sb.push("Heap is empty. Nothing to pop.", work, line=4)
        return sb.steps

    root = heap[0].value
    heap[0].state = HeapNodeState.REMOVED
    sb.push(f"Popping root value {root} from {kind}-heap", work, line=4, active=[0])

    sb.writes += 1
    last = heap.pop()
    if not heap:
        sb.push(f"Removed {root}. Heap is now empty.", work, line=5)
        return sb.steps

    heap[0] = HeapElement(last.value, HeapNodeState.CURRENT)
    sb.push(f"Moved last element {last.value} to root position", work, line=5,
            active=[0], modified=[0])

    _sift_down(work, 0, sb, line=6)
    _reset(heap)
    sb.push(f"Pop complete. Removed {root} from the heap.", work, line=6)
    return sb.steps


def generate_peek_steps(data: HeapData) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()

    if not work.elements:
        sb.push("Heap is empty. Nothing to peek.", work, line=4)
        return sb.steps

    sb.reads += 1
    work.elements[0].state = HeapNodeState.CURRENT
    label = "maximum" if work.heap_type == "max" else "minimum"
    sb.push(f"Peeking at root: {work.elements[0].value} ({label} value)", work,
            line=4, active=[0])
    return sb.steps


def generate_heapify_steps(values: Sequence[float], heap_type: str = "max") -> List[Step]:
    work = HeapData(elements=[HeapElement(v) for v in values], heap_type=heap_type)
    sb = StepBuilder()
    shown = ", ".join(str(v) for v in values)

    sb.push(f"Building {heap_type}-heap from array [{shown}]", work, line=7)
    n = len(work.elements)
    for i in range(n // 2 - 1, -1, -1):
        _reset(work.elements)
        work.elements[i].state = HeapNodeState.CURRENT
        sb.push(f"Heapifying subtree at index {i} (value: {work.elements[i].value})",
                work, line=7, active=[i])
        _sift_down(work, i, sb, line=6)

    _reset(work.elements)
    sb.push(f"{'Max' if heap_type == 'max' else 'Min'}-heap built successfully!",
            work, line=7)
    return sb.steps


def generate_toggle_type_steps(data: HeapData) -> List[Step]:
    """Flip max ↔ min by re-heapifying the current values under the other order."""
    flipped = "min" if data.heap_type == "max" else "max"
    return generate_heapify_steps([e.value for e in data.elements], flipped)
