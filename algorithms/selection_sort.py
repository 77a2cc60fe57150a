"""
selection_sort.py — Selection Sort
===================================
For each position i, scan the unsorted suffix for the minimum.
The running minimum is shown as PIVOT, the scanned element as
COMPARING.  A swap step is emitted only when the minimum is not
already in place.
"""

from typing import List, Sequence

from algorithms.array_ops import working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure selectionSort(A)",                   # 0
    "  for i = 0 to n - 2",                         # 1
    "    minIdx = i",                               # 2
    "    for j = i + 1 to n - 1",                   # 3
    "      if A[j] < A[minIdx]",                    # 4
    "        minIdx = j",                           # 5
    "    if minIdx != i: swap(A[i], A[minIdx])",    # 6
    "end procedure",                                # 7
]


def generate_selection_sort_steps(data: Sequence) -> List[Step]:
    arr = working_copy(data)
    n   = len(arr)
    sb  = StepBuilder()
    done: List[int] = []

    sb.push("Initial array state", arr, line=0)

    for i in range(n - 1):
        min_idx = i
        paint(arr, done, pivot=[min_idx])
        sb.push(
            f"Finding minimum in unsorted portion starting at index {i}",
            arr, line=2, active=[i],
        )

        for j in range(i + 1, n):
            sb.comparisons += 1
            paint(arr, done, pivot=[min_idx], comparing=[j])
            sb.push(
                f"Comparing {arr[j].value} with current minimum {arr[min_idx].value}",
                arr, line=4, active=[min_idx, j],
            )

            if arr[j].value < arr[min_idx].value:
                min_idx = j
                paint(arr, done, pivot=[min_idx])
                sb.push(
                    f"New minimum found: {arr[min_idx].value} at index {min_idx}",
                    arr, line=5, active=[min_idx],
                )

        if min_idx != i:
            sb.swaps += 1
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            paint(arr, done, swapping=[i, min_idx])
            sb.push(
                f"Swapping {arr[i].value} into position {i}",
                arr, line=6, active=[i, min_idx], modified=[i, min_idx],
            )

        done.append(i)
        paint(arr, done)
        sb.push(
            f"Element {arr[i].value} is now in its sorted position",
            arr, line=6, modified=[i],
        )

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=7)
    return sb.steps
