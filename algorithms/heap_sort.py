"""
heap_sort.py — Heap Sort
=========================
Two phases:
  1. Build a max-heap bottom-up (heapify from n//2 - 1 down to 0)
  2. Repeatedly swap the root with the last unsorted element, shrink the
     heap and re-heapify the root

Every heapify call charges two comparisons (left child, right child),
whether or not both children exist inside the current heap.
"""

from typing import List, Sequence, Set

from algorithms.array_ops import ArrayElement, working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure heapSort(A)",                        # 0
    "  for i = n/2 - 1 down to 0: heapify(A, n, i)",  # 1
    "  for end = n - 1 down to 1",                  # 2
    "    swap(A[0], A[end])",                       # 3
    "    heapify(A, end, 0)",                       # 4
    "procedure heapify(A, size, i)",                # 5
    "  largest = max(i, 2i + 1, 2i + 2)",           # 6
    "  if largest != i",                            # 7
    "    swap(A[i], A[largest]); heapify(A, size, largest)",  # 8
]


def generate_heap_sort_steps(data: Sequence) -> List[Step]:
    arr  = working_copy(data)
    n    = len(arr)
    sb   = StepBuilder()
    done: Set[int] = set()

    sb.push("Initial array state", arr, line=0)

    if n > 1:
        sb.push("Building max heap...", arr, line=1)
        for i in range(n // 2 - 1, -1, -1):
            _heapify(arr, n, i, done, sb)
        paint(arr, done)
        sb.push(f"Max heap built. Largest element {arr[0].value} is at the root",
                arr, line=1, active=[0])

        for end in range(n - 1, 0, -1):
            sb.swaps += 1
            root_value = arr[0].value
            arr[0], arr[end] = arr[end], arr[0]
            done.add(end)
            paint(arr, done, swapping=[0])
            sb.push(f"Moving max element {root_value} to sorted position {end}",
                    arr, line=3, active=[0, end], modified=[0, end])
            _heapify(arr, end, 0, done, sb)

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=0)
    return sb.steps


def _heapify(arr: List[ArrayElement], size: int, i: int, done: Set[int], sb: StepBuilder) -> None:
    largest = i
    left, right = 2 * i + 1, 2 * i + 2

    sb.comparisons += 2
    if left < size and arr[left].value > arr[largest].value:
        largest = left
    if right < size and arr[right].value > arr[largest].value:
        largest = right

    children = [c for c in (left, right) if c < size]
    paint(arr, done, pivot=[i], comparing=children)
    sb.push(f"Heapifying at index {i} (value {arr[i].value})", arr, line=6,
            active=[i] + children)

    if largest != i:
        sb.swaps += 1
        arr[i], arr[largest] = arr[largest], arr[i]
        paint(arr, done, swapping=[i, largest])
        sb.push(f"Swapping {arr[largest].value} with larger child {arr[i].value}",
                arr, line=8, active=[i, largest], modified=[i, largest])
        _heapify(arr, size, largest, done, sb)
