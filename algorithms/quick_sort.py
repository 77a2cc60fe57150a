"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last element of the current subrange.  Elements smaller than
the pivot are swapped left of an advancing boundary; the pivot then
lands on its final index, which is recorded as permanently sorted.
Recursion order is low partition first, then high partition.
"""

from typing import List, Sequence, Set

from algorithms.array_ops import ArrayElement, working_copy, paint, mark_all_sorted
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "procedure quickSort(A, low, high)",            # 0
    "  if low < high",                              # 1
    "    pivot = A[high]",                          # 2
    "    i = low - 1",                              # 3
    "    for j = low to high - 1",                  # 4
    "      if A[j] < pivot",                        # 5
    "        i = i + 1; swap(A[i], A[j])",          # 6
    "    swap(A[i + 1], A[high])",                  # 7
    "    quickSort(A, low, i)",                     # 8
    "    quickSort(A, i + 2, high)",                # 9
    "end procedure",                                # 10
]


def generate_quick_sort_steps(data: Sequence) -> List[Step]:
    arr = working_copy(data)
    sb  = StepBuilder()
    done: Set[int] = set()

    sb.push("Initial array state", arr, line=0)
    _quick_sort(arr, 0, len(arr) - 1, done, sb)

    mark_all_sorted(arr)
    sb.push("Array is now fully sorted!", arr, line=10)
    return sb.steps


def _quick_sort(arr: List[ArrayElement], low: int, high: int, done: Set[int], sb: StepBuilder) -> None:
    if low < high:
        paint(arr, done, active=range(low, high + 1))
        sb.push(f"Sorting subarray [{low}..{high}]", arr, line=1,
                active=list(range(low, high + 1)))

        p = _partition(arr, low, high, done, sb)
        _quick_sort(arr, low, p - 1, done, sb)
        _quick_sort(arr, p + 1, high, done, sb)
    elif low == high:
        done.add(low)
        paint(arr, done)
        sb.push(f"Element {arr[low].value} at index {low} is in its sorted position",
                arr, line=1, modified=[low])


def _partition(arr: List[ArrayElement], low: int, high: int, done: Set[int], sb: StepBuilder) -> int:
    pivot = arr[high].value
    paint(arr, done, pivot=[high])
    sb.push(f"Choosing pivot: {pivot} (last element)", arr, line=2, active=[high])

    i = low - 1
    for j in range(low, high):
        sb.comparisons += 1
        paint(arr, done, pivot=[high], comparing=[j])
        sb.push(f"Comparing {arr[j].value} with pivot {pivot}", arr, line=5,
                active=[j, high])

        if arr[j].value < pivot:
            i += 1
            if i != j:
                sb.swaps += 1
                arr[i], arr[j] = arr[j], arr[i]
                paint(arr, done, pivot=[high], swapping=[i, j])
                sb.push(
                    f"Swapping {arr[i].value} and {arr[j].value} "
                    f"({arr[i].value} < pivot {pivot})",
                    arr, line=6, active=[i, j], modified=[i, j],
                )

    sb.swaps += 1
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    done.add(i + 1)
    paint(arr, done, swapping=[i + 1, high])
    sb.push(f"Placing pivot {pivot} at its final position {i + 1}", arr, line=7,
            active=[i + 1, high], modified=[i + 1, high])
    return i + 1
