import pytest

from algorithms import SORTING_ALGORITHMS
from algorithms.array_ops import ElementState, random_array, values_of
from algorithms.bubble_sort import generate_bubble_sort_steps
from algorithms.heap_sort import generate_heap_sort_steps

SORT_KEYS = sorted(SORTING_ALGORITHMS)


def _final_values(steps):
    return values_of(steps[-1].snapshot.data)


@pytest.mark.parametrize("key", SORT_KEYS)
@pytest.mark.parametrize("data, expected", [
    ([5, 3, 8, 4, 2], [2, 3, 4, 5, 8]),
    ([3, 1, 3, 2, 1], [1, 1, 2, 3, 3]),
    ([1, 2, 3, 4], [1, 2, 3, 4]),
    ([9, 7, 5, 3, 1], [1, 3, 5, 7, 9]),
    ([42], [42]),
    ([], []),
])
def test_every_sort_produces_sorted_output(key, data, expected):
    _, generate, _ = SORTING_ALGORITHMS[key]
    steps = generate(data)

    assert steps, "a run always has at least one step"
    assert _final_values(steps) == expected
    assert all(e.state == ElementState.SORTED for e in steps[-1].snapshot.data)


@pytest.mark.parametrize("key", SORT_KEYS)
def test_input_is_not_mutated_and_counters_never_decrease(key):
    _, generate, _ = SORTING_ALGORITHMS[key]
    data = [5, 3, 8, 4, 2]
    steps = generate(data)

    assert data == [5, 3, 8, 4, 2]
    for prev, cur in zip(steps, steps[1:]):
        assert cur.meta.comparisons >= prev.meta.comparisons
        assert cur.meta.swaps >= prev.meta.swaps
    assert [s.id for s in steps] == list(range(len(steps)))


@pytest.mark.parametrize("key", SORT_KEYS)
def test_pseudocode_lines_are_in_range(key):
    _, generate, pseudocode = SORTING_ALGORITHMS[key]
    for step in generate([4, 1, 3, 2]):
        line = step.meta.highlighted_line
        assert line is None or 0 <= line < len(pseudocode)


def test_bubble_sort_counts():
    steps = generate_bubble_sort_steps([5, 3, 8, 4, 2])
    assert steps[0].description == "Initial array state"
    assert steps[-1].description == "Array is now fully sorted!"
    assert steps[-1].meta.comparisons == 10
    assert steps[-1].meta.swaps == 7


def test_heap_sort_adds_two_comparisons_per_heapify():
    steps = generate_heap_sort_steps([2, 1])
    assert steps[-1].meta.comparisons == 4


def test_random_array_is_deterministic_with_seed():
    a = values_of(random_array(10, seed=7))
    b = values_of(random_array(10, seed=7))
    assert a == b
    assert len(a) == 10
    assert all(5 <= v <= 100 for v in a)
