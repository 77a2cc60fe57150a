"""
array_ops.py — Shared Array Vocabulary for the Sorts
=====================================================
ArrayElement + ElementState are the snapshot shape every sorting
generator emits.  The helpers here build the working copy, reset
transient highlight states and generate demo arrays.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence


# ---------------------------------------------------------------------------
# Element state — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class ElementState(Enum):
    DEFAULT   = "default"
    COMPARING = "comparing"
    SWAPPING  = "swapping"
    SORTED    = "sorted"
    PIVOT     = "pivot"
    ACTIVE    = "active"


@dataclass
class ArrayElement:
    value:  float
    state:  ElementState = ElementState.DEFAULT


# ---------------------------------------------------------------------------
# Demo defaults
# ---------------------------------------------------------------------------
DEFAULT_ARRAY_SIZE = 20
MIN_ARRAY_VALUE    = 5
MAX_ARRAY_VALUE    = 100


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def make_elements(values: Iterable[float]) -> List[ArrayElement]:
    return [ArrayElement(value=v) for v in values]


def working_copy(data: Sequence) -> List[ArrayElement]:
    """Accept raw numbers or ArrayElements; always return fresh defaults."""
    out = []
    for item in data:
        value = item.value if isinstance(item, ArrayElement) else item
        out.append(ArrayElement(value=value))
    return out


def values_of(elements: Sequence[ArrayElement]) -> List[float]:
    return [e.value for e in elements]


def paint(
    elements: List[ArrayElement],
    sorted_indices: Iterable[int] = (),
    **states: Iterable[int],
) -> None:
    """
    Reset every element to DEFAULT (or SORTED when its index is listed
    in `sorted_indices`), then apply per-state index lists, e.g.

        paint(arr, done, comparing=[j, j + 1])
    """
    done = set(sorted_indices)
    for i, el in enumerate(elements):
        el.state = ElementState.SORTED if i in done else ElementState.DEFAULT
    for state_name, indices in states.items():
        state = ElementState[state_name.upper()]
        for i in indices:
            if 0 <= i < len(elements):
                elements[i].state = state


def mark_all_sorted(elements: List[ArrayElement]) -> None:
    for el in elements:
        el.state = ElementState.SORTED


def random_array(
    size: int = DEFAULT_ARRAY_SIZE,
    seed: Optional[int] = None,
    low: int = MIN_ARRAY_VALUE,
    high: int = MAX_ARRAY_VALUE,
) -> List[ArrayElement]:
    """Demo array; deterministic when `seed` is given."""
    rng = random.Random(seed)
    return make_elements(rng.randint(low, high) for _ in range(max(0, size)))
