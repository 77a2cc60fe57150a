"""
ui/
---
Presentation layer: SVG rendering of step snapshots.

    from ui import SvgContext, CanvasConfig
    ctx = SvgContext()
    visualizer.draw(step.snapshot, ctx)
    svg = ctx.to_svg()
"""

from ui.canvas import (
    CanvasConfig,
    CONFIG,
    SvgContext,
    fill_for,
    draw_array,
    draw_linked_list,
    draw_stack,
    draw_queue,
    draw_binary_tree,
    draw_heap,
    draw_trie,
    draw_hash_table,
    draw_union_find,
    draw_grid,
    draw_graph,
)

__all__ = [
    "CanvasConfig",
    "CONFIG",
    "SvgContext",
    "fill_for",
    "draw_array",
    "draw_linked_list",
    "draw_stack",
    "draw_queue",
    "draw_binary_tree",
    "draw_heap",
    "draw_trie",
    "draw_hash_table",
    "draw_union_find",
    "draw_grid",
    "draw_graph",
]
