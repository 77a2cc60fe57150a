from algorithms import bst, union_find
from algorithms.array_ops import ElementState, make_elements
from algorithms.graph_run import GraphRun
from graph import NodeState, samples
from ui import CanvasConfig, SvgContext, draw_array, draw_binary_tree, draw_graph, draw_union_find, fill_for


def test_fill_for_accepts_enums_and_unknown_states():
    config = CanvasConfig()
    assert fill_for(ElementState.SORTED, config) == config.state_colors["sorted"]
    assert fill_for(NodeState.IN_MST, config) == config.state_colors["inMST"]
    assert fill_for("no-such-state", config) == config.state_colors["default"]


def test_context_size_and_escaping():
    ctx = SvgContext(CanvasConfig(width=320, height=200))
    ctx.text(10, 10, "<a & b>")
    svg = ctx.to_svg()
    assert svg.startswith('<svg width="320" height="200"')
    assert "&lt;a &amp; b&gt;" in svg
    assert svg.endswith("</svg>")


def test_array_bars_one_per_element():
    ctx = SvgContext()
    draw_array(ctx, make_elements([3, 1, 2]))
    assert sum('class="bar"' in p for p in ctx.parts) == 3

    empty = SvgContext()
    draw_array(empty, [])
    assert "Empty array" in empty.to_svg()


def test_tree_draws_every_node():
    ctx = SvgContext()
    draw_binary_tree(ctx, bst.sample_tree().root)
    assert sum('class="tree-node"' in p for p in ctx.parts) == 7


def test_rendering_does_not_touch_the_snapshot():
    run = GraphRun(graph=samples.mst_graph())
    before = run.graph.to_dict()
    ctx = SvgContext()
    draw_graph(ctx, run)
    assert run.graph.to_dict() == before
    assert len(ctx.parts) > run.graph.node_count

    forest = union_find.sample_forest()
    ctx = SvgContext()
    draw_union_find(ctx, forest)
    assert "<circle" in ctx.to_svg()
