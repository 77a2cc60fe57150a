import logging

import pytest

from algorithms.array_ops import values_of
from graph import Graph, samples
from visualizers import (
    Action, GraphVisualizer, LinkedListVisualizer, SortingVisualizer, StackVisualizer,
    VisualizerRegistry, register_all,
)
from visualizers.base import param_int, param_number, param_numbers, param_str
from visualizers.graphs import AStarVisualizer, BFSVisualizer, DijkstraVisualizer


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_register_all_is_idempotent(fresh_registry, caplog):
    assert fresh_registry.count == 23
    with caplog.at_level(logging.WARNING):
        register_all(fresh_registry)
    assert fresh_registry.count == 23
    assert "Overwriting" not in caplog.text


def test_duplicate_register_warns_and_overwrites(caplog):
    reg = VisualizerRegistry()
    reg.register(LinkedListVisualizer.config, LinkedListVisualizer)
    with caplog.at_level(logging.WARNING):
        reg.register(LinkedListVisualizer.config, StackVisualizer)
    assert 'Visualizer "linked-list" is already registered' in caplog.text
    assert isinstance(reg.get("linked-list"), StackVisualizer)


def test_get_returns_fresh_instances(fresh_registry):
    a = fresh_registry.get("stack")
    b = fresh_registry.get("stack")
    assert a is not b
    a.get_steps(Action("push", params={"value": 1}))
    assert len(b.current.elements) == 3
    assert fresh_registry.get("nope") is None


def test_categories_and_lookup(fresh_registry):
    assert fresh_registry.get_categories() == ["graphs", "hashing", "linear", "sets", "sorting", "trees"]
    assert {c.id for c in fresh_registry.get_by_category("trees")} == {"bst", "avl", "trie", "binary-heap"}
    assert fresh_registry.get_config("merge-sort").name == "Merge Sort"


def test_unregister_and_listeners():
    reg = VisualizerRegistry()
    calls = []
    dispose = reg.subscribe(lambda: calls.append(1))
    reg.register(StackVisualizer.config, StackVisualizer)
    assert reg.unregister("stack") is True
    assert reg.unregister("stack") is False
    dispose()
    reg.clear()
    assert len(calls) == 2


# ---------------------------------------------------------------------------
# Dispatch contract
# ---------------------------------------------------------------------------
def test_mutating_action_commits_final_snapshot():
    viz = LinkedListVisualizer()
    steps = viz.get_steps(Action("insert-tail", params={"value": "55"}))
    assert [n.value for n in viz.current.nodes] == [10, 20, 30, 40, 55]
    assert viz.current is not steps[-1].snapshot.data


def test_non_mutating_action_leaves_structure():
    viz = LinkedListVisualizer()
    viz.get_steps(Action("search", params={"value": 20}))
    assert [n.value for n in viz.current.nodes] == [10, 20, 30, 40]


def test_unknown_action_falls_back_to_default():
    viz = StackVisualizer()
    steps = viz.get_steps(Action("explode"))
    assert steps[-1].description == "Top of stack is 7"
    assert len(viz.current.elements) == 3


def test_sorting_custom_then_sort_keeps_input():
    viz = SortingVisualizer("bubble-sort", seed=1)
    steps = viz.get_steps(Action("custom", params={"values": "5, 3, 8"}))
    assert len(steps) == 1
    assert values_of(viz.current) == [5, 3, 8]

    steps = viz.get_steps(Action("sort"))
    assert values_of(steps[-1].snapshot.data) == [3, 5, 8]
    assert values_of(viz.current) == [5, 3, 8]


def test_sorting_runs_on_inline_data():
    viz = SortingVisualizer("quick-sort", seed=1)
    steps = viz.get_steps(Action("sort", data=[4, 2, 9, 1]))
    assert values_of(steps[-1].snapshot.data) == [1, 2, 4, 9]


def test_graph_visualizer_accepts_serialised_graph():
    viz = BFSVisualizer()
    data = samples.traversal_graph().to_dict()
    steps = viz.get_steps(Action("run", data=data, params={"source": "A", "target": "G"}))
    assert steps[-1].description.startswith("Reached G!")
    assert isinstance(viz.current, Graph)


def test_graph_random_replaces_structure():
    viz = DijkstraVisualizer()
    steps = viz.get_steps(Action("random", params={"nodes": 5, "seed": 4}))
    assert len(steps) == 1
    assert viz.current.node_count == 5


def test_astar_runs_on_inline_grid_and_random_replaces_grid():
    viz = AStarVisualizer()
    steps = viz.get_steps(Action("run", data={"rows": 3, "cols": 3, "walls": [[0, 1], [1, 1]],
                                              "end": [0, 2]}))
    assert steps[-1].description == "Path found! Length: 7 cells, cost: 6"
    assert viz.current.rows == 8

    steps = viz.get_steps(Action("random", params={"rows": 4, "cols": 5, "seed": 2}))
    assert len(steps) == 1
    assert (viz.current.rows, viz.current.cols) == (4, 5)
    assert 'class="grid-cell"' in viz.render_svg(viz.current)


def test_graph_visualizer_subclass_must_implement_run():
    class NoRun(GraphVisualizer):
        config = DijkstraVisualizer.config

    with pytest.raises(TypeError):
        NoRun()


def test_render_svg_for_current_and_snapshot():
    viz = DijkstraVisualizer()
    assert viz.render_svg(viz.get_initial_state()).startswith("<svg")
    steps = viz.get_steps(Action("run"))
    svg = viz.render_svg(steps[-1].snapshot)
    assert "<svg" in svg and "</svg>" in svg


def test_every_registered_visualizer_runs_its_default(fresh_registry):
    for config in fresh_registry.get_all():
        viz = fresh_registry.get(config.id)
        steps = viz.get_steps(Action(viz.DEFAULT_ACTION))
        assert steps, config.id
        assert viz.DEFAULT_ACTION in viz.action_types()
        assert viz.get_pseudocode()
        assert "<svg" in viz.render_svg(steps[-1].snapshot)

        assert [s.id for s in steps] == list(range(len(steps)))
        assert all(s.description for s in steps)
        for prev, cur in zip(steps, steps[1:]):
            for counter in ("comparisons", "swaps", "reads", "writes"):
                assert getattr(cur.meta, counter) >= getattr(prev.meta, counter), config.id


# ---------------------------------------------------------------------------
# Parameter coercion
# ---------------------------------------------------------------------------
def test_param_helpers_are_lenient():
    assert param_number({"v": "12"}, "v", 0) == 12
    assert param_number({"v": "1.5"}, "v", 0) == 1.5
    assert param_number({"v": "abc"}, "v", 7) == 7
    assert param_number({"v": True}, "v", 7) == 7
    assert param_number(None, "v", 3) == 3
    assert param_int({"v": "500"}, "v", 1, high=100) == 100
    assert param_str({"v": "  "}, "v", "x") == "x"
    assert param_numbers({"v": "5, 3  x 8"}, "v") == [5, 3, 8]
    assert param_numbers({"v": "x"}, "v") is None
