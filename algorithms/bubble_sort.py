"""
bubble_sort.py — Bubble Sort
=============================
Emits a Step at every meaningful event:
  1. Start of each pass
  2. Each adjacent comparison  →  both elements COMPARING
  3. Each swap                 →  both elements SWAPPING
  4. End of pass               →  largest unsorted element SORTED
"""

from typing import List, Sequence

from algorithms.array_ops import working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure bubbleSort(A)",                      # 0
    "  n = length(A)",                              # 1
    "  for i = 0 to n - 2",                         # 2
    "    for j = 0 to n - i - 2",                   # 3
    "      if A[j] > A[j + 1]",                     # 4
    "        swap(A[j], A[j + 1])",                 # 5
    "    mark A[n - i - 1] as sorted",              # 6
    "end procedure",                                # 7
]


def generate_bubble_sort_steps(data: Sequence) -> List[Step]:
    arr = working_copy(data)
    n   = len(arr)
    sb  = StepBuilder()
    done: List[int] = []

    sb.push("Initial array state", arr, line=0)

    for i in range(n - 1):
        paint(arr, done)
        sb.push(
            f"Pass {i + 1}: Bubble largest unsorted element to position {n - 1 - i}",
            arr, line=2,
        )

        for j in range(n - i - 1):
            sb.comparisons += 1
            paint(arr, done, comparing=[j, j + 1])
            sb.push(
                f"Comparing elements at index {j} ({arr[j].value}) "
                f"and {j + 1} ({arr[j + 1].value})",
                arr, line=4, active=[j, j + 1],
            )

            if arr[j].value > arr[j + 1].value:
                sb.swaps += 1
                big, small = arr[j].value, arr[j + 1].value
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                paint(arr, done, swapping=[j, j + 1])
                sb.push(
                    f"Swapping {big} and {small} ({big} > {small})",
                    arr, line=5, active=[j, j + 1], modified=[j, j + 1],
                )

        done.append(n - 1 - i)
        paint(arr, done)
        sb.push(
            f"Element {arr[n - 1 - i].value} is now in its sorted position",
            arr, line=6, modified=[n - 1 - i],
        )

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=7)
    return sb.steps
