"""
insertion_sort.py — Insertion Sort
===================================
Picks A[i] as the key, shifts larger elements of the sorted prefix one
slot right (each shift counts as a swap) and drops the key into the gap.
"""

from typing import List, Sequence

from algorithms.array_ops import ArrayElement, working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure insertionSort(A)",                   # 0
    "  for i = 1 to n - 1",                         # 1
    "    key = A[i]",                               # 2
    "    j = i - 1",                                # 3
    "    while j >= 0 and A[j] > key",              # 4
    "      A[j + 1] = A[j]",                        # 5
    "      j = j - 1",                              # 6
    "    A[j + 1] = key",                           # 7
    "end procedure",                                # 8
]


def generate_insertion_sort_steps(data: Sequence) -> List[Step]:
    arr = working_copy(data)
    n   = len(arr)
    sb  = StepBuilder()

    sb.push("Initial array state", arr, line=0)
    if n:
        paint(arr, [0])

    for i in range(1, n):
        key = arr[i].value
        prefix = range(i)
        paint(arr, prefix, active=[i])
        sb.push(f"Picking {key} at index {i} to insert into sorted portion", arr,
                line=2, active=[i])

        j = i - 1
        while j >= 0:
            sb.comparisons += 1
            paint(arr, range(j + 2), comparing=[j], active=[j + 1])
            sb.push(f"Comparing {arr[j].value} with {key}", arr, line=4,
                    active=[j, j + 1])
            if arr[j].value <= key:
                break

            sb.swaps += 1
            arr[j + 1] = ArrayElement(value=arr[j].value)
            arr[j] = ArrayElement(value=key)
            paint(arr, range(i + 1), swapping=[j, j + 1])
            sb.push(f"Shifting {arr[j + 1].value} one position right", arr,
                    line=5, active=[j, j + 1], modified=[j + 1])
            j -= 1

        paint(arr, range(i + 1), active=[j + 1])
        sb.push(f"Inserted {key} at index {j + 1}", arr, line=7,
                modified=[j + 1])

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=8)
    return sb.steps
