import json

import pytest

from engine import ComparisonResult, Recorder, RunMetrics, compare
from visualizers import Action


def test_unknown_visualizer_raises(fresh_registry):
    with pytest.raises(ValueError, match="Unknown visualizer"):
        Recorder().start("warp-sort", None, fresh_registry)


def test_run_before_start_raises():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_metrics_come_from_last_step(fresh_registry):
    rec = Recorder()
    rec.start("bubble-sort", Action("sort", data=[5, 3, 8, 4, 2]), fresh_registry)
    metrics = rec.run_to_completion()

    assert metrics.visualizer_name == "Bubble Sort"
    assert metrics.action == "sort"
    assert metrics.comparisons == 10
    assert metrics.swaps == 7
    assert metrics.total_steps == len(rec.steps)
    assert metrics.final_description == "Array is now fully sorted!"
    assert metrics.memory_bytes > 0
    assert rec.engine.is_at_end
    assert rec.get_metrics() is metrics


def test_string_and_missing_actions_resolve(fresh_registry):
    rec = Recorder()
    rec.start("stack", None, fresh_registry)
    assert rec.run_to_completion().action == "peek"

    rec.start("stack", "pop", fresh_registry)
    assert rec.run_to_completion().final_description == "Popped 7. Stack size: 2"


def test_export_is_json_serialisable(fresh_registry):
    rec = Recorder()
    rec.start("dijkstra", Action("run", params={"source": "A"}), fresh_registry)
    rec.run_to_completion()
    exported = rec.export()

    assert exported["visualizer_id"] == "dijkstra"
    assert exported["action"]["params"] == {"source": "A"}
    assert len(exported["steps"]) == exported["metrics"]["total_steps"]
    json.dumps(exported)


def _finished(name, comparisons, swaps, steps):
    rec = Recorder()
    rec.metrics = RunMetrics(visualizer_name=name, comparisons=comparisons, swaps=swaps,
                             total_steps=steps)
    return rec


def test_compare_picks_lower_counts():
    result = compare(_finished("Bubble Sort", 10, 7, 40), _finished("Merge Sort", 8, 7, 50))

    assert isinstance(result, ComparisonResult)
    assert result.winner_comparisons == "Merge Sort"
    assert result.winner_swaps == "tie"
    assert result.winner_steps == "Bubble Sort"


def test_compare_same_input_runs(fresh_registry):
    left, right = Recorder(), Recorder()
    left.start("insertion-sort", Action("sort", data=[1, 2, 3, 4]), fresh_registry)
    right.start("insertion-sort", Action("sort", data=[1, 2, 3, 4]), fresh_registry)
    left.run_to_completion()
    right.run_to_completion()

    result = compare(left, right)
    assert result.winner_comparisons == result.winner_swaps == result.winner_steps == "tie"
