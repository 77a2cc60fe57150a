"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Emits a divide step per recursive split and one
step per element written back during a merge.  Counters: comparisons
for every head-to-head check, writes for every placement.
"""

from typing import List, Sequence

from algorithms.array_ops import ArrayElement, working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure mergeSort(A, left, right)",          # 0
    "  if left >= right: return",                   # 1
    "  mid = (left + right) / 2",                   # 2
    "  mergeSort(A, left, mid)",                    # 3
    "  mergeSort(A, mid + 1, right)",               # 4
    "  merge(A, left, mid, right)",                 # 5
    "    pick the smaller head, write to A[k]",     # 6
    "    copy any leftovers",                       # 7
    "end procedure",                                # 8
]


def generate_merge_sort_steps(data: Sequence) -> List[Step]:
    arr = working_copy(data)
    sb  = StepBuilder()

    sb.push("Initial array state", arr, line=0)
    if arr:
        _merge_sort(arr, 0, len(arr) - 1, sb)

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=8)
    return sb.steps


def _merge_sort(arr: List[ArrayElement], left: int, right: int, sb: StepBuilder) -> None:
    if left >= right:
        return
    mid = (left + right) // 2

    paint(arr, active=range(left, right + 1))
    sb.push(
        f"Dividing array at indices [{left}..{right}], mid = {mid}",
        arr, line=2, active=list(range(left, right + 1)),
    )

    _merge_sort(arr, left, mid, sb)
    _merge_sort(arr, mid + 1, right, sb)
    _merge(arr, left, mid, right, sb)


def _merge(arr: List[ArrayElement], left: int, mid: int, right: int, sb: StepBuilder) -> None:
    left_vals  = [e.value for e in arr[left:mid + 1]]
    right_vals = [e.value for e in arr[mid + 1:right + 1]]

    paint(arr, comparing=range(left, right + 1))
    sb.push(
        f"Merging subarrays [{left}..{mid}] and [{mid + 1}..{right}]",
        arr, line=5, active=list(range(left, right + 1)),
    )

    i = j = 0
    k = left
    while i < len(left_vals) and j < len(right_vals):
        sb.comparisons += 1
        if left_vals[i] <= right_vals[j]:
            value = left_vals[i]
            i += 1
        else:
            value = right_vals[j]
            j += 1
        sb.writes += 1
        arr[k] = ArrayElement(value=value)
        paint(arr, comparing=range(k + 1, right + 1), swapping=[k])
        sb.push(f"Placing {value} at index {k}", arr, line=6, active=[k], modified=[k])
        k += 1

    for value in left_vals[i:] + right_vals[j:]:
        sb.writes += 1
        arr[k] = ArrayElement(value=value)
        paint(arr, comparing=range(k + 1, right + 1), swapping=[k])
        sb.push(f"Copying remaining {value} to index {k}", arr, line=7,
                active=[k], modified=[k])
        k += 1
