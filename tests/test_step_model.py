import math

import pytest

from algorithms.array_ops import ArrayElement, ElementState
from algorithms.step import StepBuilder, format_distance, step_to_dict, to_jsonable


def test_push_deep_copies_and_numbers_steps():
    sb = StepBuilder()
    data = [ArrayElement(1), ArrayElement(2)]
    sb.push("first", data, line=0)
    data[0].value = 99
    sb.push("second", data, line=1)

    assert [s.id for s in sb.steps] == [0, 1]
    assert sb.steps[0].snapshot.data[0].value == 1
    assert sb.steps[1].snapshot.data[0].value == 99


def test_counters_are_cumulative():
    sb = StepBuilder()
    sb.comparisons += 1
    sb.push("a", [])
    sb.comparisons += 2
    sb.swaps += 1
    sb.push("b", [])

    assert sb.steps[0].meta.comparisons == 1
    assert sb.steps[1].meta.comparisons == 3
    assert sb.steps[1].meta.swaps == 1


def test_empty_description_rejected():
    with pytest.raises(ValueError):
        StepBuilder().push("", [])


def test_step_is_frozen():
    step = StepBuilder().push("x", [])
    with pytest.raises(Exception):
        step.description = "y"


def test_to_jsonable_handles_enums_dataclasses_and_infinity():
    out = to_jsonable({"a": ArrayElement(3, ElementState.SORTED), "d": math.inf})
    assert out == {"a": {"value": 3, "state": "sorted"}, "d": None}


def test_step_to_dict_shape():
    sb = StepBuilder()
    sb.push("hello", [ArrayElement(1)], line=2, active=[0], metadata={"k": 1})
    d = step_to_dict(sb.steps[0])

    assert d["description"] == "hello"
    assert d["meta"]["highlighted_line"] == 2
    assert d["active_indices"] == [0]
    assert d["snapshot"]["metadata"] == {"k": 1}


def test_format_distance():
    assert format_distance(math.inf) == "∞"
    assert format_distance(4.0) == "4"
    assert format_distance(2.5) == "2.5"
