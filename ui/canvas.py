"""
canvas.py — SVG Renderer
=========================
Pure rendering functions: snapshot data → SVG fragments.

Every visualizer's `draw(snapshot, ctx)` lands here.  `ctx` is an
SvgContext: it collects fragments and `to_svg()` returns one document.

Design decisions:
  - NO mutation.  Renderers read the snapshot and nothing else, so any
    Step can be painted in isolation (scrubbing, export, tests).
  - State-based colouring is a simple dict lookup: state value → hex.
    All structures share one palette because their state vocabularies
    overlap ("current", "found", "visited", …).
  - Tree layouts are derived from the tree's shape at draw time
    (in-order rank for x, depth for y); positions are never stored on
    the structure.
"""

import html
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from algorithms.step import format_distance


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 800
    height:  int = 450
    padding: int = 40
    bg:      str = "#0d1117"

    # state value → fill
    state_colors: Dict[str, str] = {
        "default":       "#1c2128",
        "comparing":     "#f59e0b",
        "swapping":      "#ef4444",
        "sorted":        "#10b981",
        "pivot":         "#a855f7",
        "active":        "#06b6d4",
        "current":       "#06b6d4",
        "found":         "#10b981",
        "inserting":     "#0ea5e9",
        "inserted":      "#0ea5e9",
        "deleting":      "#ef4444",
        "deleted":       "#ef4444",
        "removed":       "#ef4444",
        "pushing":       "#0ea5e9",
        "popping":       "#ef4444",
        "top":           "#a855f7",
        "enqueuing":     "#0ea5e9",
        "dequeuing":     "#ef4444",
        "front":         "#a855f7",
        "rear":          "#ec4899",
        "visited":       "#334155",
        "path":          "#a855f7",
        "rotatingLeft":  "#f97316",
        "rotatingRight": "#f97316",
        "balanced":      "#10b981",
        "notFound":      "#991b1b",
        "hashing":       "#f59e0b",
        "collision":     "#f97316",
        "root":          "#a855f7",
        "merged":        "#0ea5e9",
        "inMST":         "#10b981",
        "frontier":      "#0ea5e9",
        "wall":          "#374151",
        "start":         "#22c55e",
        "end":           "#ef4444",
    }

    # edge state → stroke
    edge_colors: Dict[str, str] = {
        "default":      "#30363d",
        "considering":  "#f59e0b",
        "inMST":        "#10b981",
        "rejected":     "#ef4444",
        "path":         "#a855f7",
    }

    stroke:          str = "#30363d"
    text_color:      str = "#e6edf3"
    muted_color:     str = "#7d8590"
    font_family:     str = "'DM Sans', sans-serif"
    mono_family:     str = "'JetBrains Mono', monospace"
    font_size:       int = 13

    node_radius:     int = 20
    cell_width:      int = 56
    cell_height:     int = 36

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height


CONFIG = CanvasConfig()


def fill_for(state: Any, config: CanvasConfig = CONFIG) -> str:
    key = getattr(state, "value", state)
    return config.state_colors.get(key, config.state_colors["default"])


# ---------------------------------------------------------------------------
# SvgContext — the `ctx` every draw() receives
# ---------------------------------------------------------------------------
class SvgContext:
    def __init__(self, config: Optional[CanvasConfig] = None):
        self.config:  CanvasConfig = config or CONFIG
        self.parts:   List[str]    = []

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def add(self, fragment: str) -> None:
        self.parts.append(fragment)

    def rect(self, x, y, w, h, fill, stroke=None, rx=4, css_class=None) -> None:
        cls = f' class="{css_class}"' if css_class else ""
        self.add(
            f'<rect{cls} x="{x:.1f}" y="{y:.1f}" width="{w:.1f}" height="{h:.1f}" rx="{rx}" '
            f'fill="{fill}" stroke="{stroke or self.config.stroke}" stroke-width="1"/>'
        )

    def circle(self, cx, cy, r, fill, stroke=None, css_class=None) -> None:
        cls = f' class="{css_class}"' if css_class else ""
        self.add(
            f'<circle{cls} cx="{cx:.1f}" cy="{cy:.1f}" r="{r}" fill="{fill}" '
            f'stroke="{stroke or self.config.stroke}" stroke-width="2"/>'
        )

    def line(self, x1, y1, x2, y2, stroke=None, width=2) -> None:
        self.add(
            f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
            f'stroke="{stroke or self.config.stroke}" stroke-width="{width}"/>'
        )

    def text(self, x, y, content, size=None, fill=None, anchor="middle", mono=False) -> None:
        family = self.config.mono_family if mono else self.config.font_family
        self.add(
            f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{anchor}" '
            f'font-size="{size or self.config.font_size}" font-family="{family}" '
            f'fill="{fill or self.config.text_color}">{html.escape(str(content))}</text>'
        )

    def arrow(self, x1, y1, x2, y2, stroke=None, width=2, head=10) -> None:
        """Line from (x1, y1) to (x2, y2) with an arrowhead at the end."""
        stroke = stroke or self.config.stroke
        self.line(x1, y1, x2, y2, stroke, width)
        dx, dy = x2 - x1, y2 - y1
        dist = math.hypot(dx, dy)
        if dist < 0.001:
            return
        ux, uy = dx / dist, dy / dist
        px, py = -uy, ux
        p1 = (x2 - ux * head + px * head * 0.5, y2 - uy * head + py * head * 0.5)
        p2 = (x2 - ux * head - px * head * 0.5, y2 - uy * head - py * head * 0.5)
        self.add(
            f'<polygon points="{x2:.1f},{y2:.1f} {p1[0]:.1f},{p1[1]:.1f} '
            f'{p2[0]:.1f},{p2[1]:.1f}" fill="{stroke}"/>'
        )

    def caption(self, content: str) -> None:
        self.text(self.width / 2, self.height - 12, content, size=12, fill=self.config.muted_color)

    def to_svg(self) -> str:
        c = self.config
        head = (
            f'<svg width="{c.width}" height="{c.height}" viewBox="0 0 {c.width} {c.height}" '
            f'xmlns="http://www.w3.org/2000/svg">'
        )
        background = f'<rect width="{c.width}" height="{c.height}" fill="{c.bg}"/>'
        return "\n".join([head, background, *self.parts, "</svg>"])


# ---------------------------------------------------------------------------
# Arrays (bars)
# ---------------------------------------------------------------------------
def draw_array(ctx: SvgContext, elements: List[Any]) -> None:
    if not elements:
        ctx.caption("Empty array")
        return
    pad = ctx.config.padding
    usable_w = ctx.width - 2 * pad
    usable_h = ctx.height - 2 * pad - 20
    gap = 4
    bar_w = max((usable_w - gap * (len(elements) - 1)) / len(elements), 2)
    peak = max(max(abs(e.value) for e in elements), 1)
    for i, el in enumerate(elements):
        h = max(abs(el.value) / peak * usable_h, 2)
        x = pad + i * (bar_w + gap)
        y = pad + usable_h - h
        ctx.rect(x, y, bar_w, h, fill_for(el.state, ctx.config), rx=2, css_class="bar")
        if bar_w >= 18:
            ctx.text(x + bar_w / 2, pad + usable_h + 16, f"{el.value:g}", size=11)


# ---------------------------------------------------------------------------
# Linear structures
# ---------------------------------------------------------------------------
def draw_linked_list(ctx: SvgContext, data) -> None:
    nodes = data.nodes
    if not nodes:
        ctx.caption("Empty list (head → null)")
        return
    cw, ch = ctx.config.cell_width, ctx.config.cell_height
    spacing = min(cw + 40, (ctx.width - 2 * ctx.config.padding) / len(nodes))
    y = ctx.height / 2 - ch / 2
    for i, node in enumerate(nodes):
        x = ctx.config.padding + i * spacing
        ctx.rect(x, y, cw, ch, fill_for(node.state, ctx.config), css_class="list-node")
        ctx.text(x + cw / 2, y + ch / 2 + 5, f"{node.value:g}")
        if i < len(nodes) - 1:
            ctx.arrow(x + cw, y + ch / 2, x + spacing, y + ch / 2)
    ctx.text(ctx.config.padding + cw / 2, y - 10, "head", size=11, fill=ctx.config.muted_color)


def draw_stack(ctx: SvgContext, data) -> None:
    cw, ch = ctx.config.cell_width * 2, ctx.config.cell_height
    x = ctx.width / 2 - cw / 2
    bottom = ctx.height - ctx.config.padding
    ctx.line(x - 10, bottom, x + cw + 10, bottom)
    for i, el in enumerate(data.elements):
        y = bottom - (i + 1) * (ch + 4)
        ctx.rect(x, y, cw, ch, fill_for(el.state, ctx.config), css_class="stack-cell")
        ctx.text(x + cw / 2, y + ch / 2 + 5, f"{el.value:g}")
    ctx.caption(f"{len(data.elements)} / {data.max_size}")


def draw_queue(ctx: SvgContext, data) -> None:
    cw, ch = ctx.config.cell_width, ctx.config.cell_height
    y = ctx.height / 2 - ch / 2
    for i, el in enumerate(data.elements):
        x = ctx.config.padding + i * (cw + 6)
        ctx.rect(x, y, cw, ch, fill_for(el.state, ctx.config), css_class="queue-cell")
        ctx.text(x + cw / 2, y + ch / 2 + 5, f"{el.value:g}")
    if data.elements:
        ctx.text(ctx.config.padding + cw / 2, y - 10, "front", size=11, fill=ctx.config.muted_color)
    ctx.caption(f"{len(data.elements)} / {data.max_size}")


# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------
def _tree_positions(
    root: Any,
    children: Callable[[Any], List[Any]],
    width: float,
    height: float,
    pad: float,
) -> Dict[int, Tuple[float, float]]:
    """
    Leaf-order layout: leaves get consecutive slots left to right, parents
    sit over the middle of their children.  Keyed by id(node).
    """
    slots: Dict[int, float] = {}
    depths: Dict[int, int] = {}
    counter = [0]

    def walk(node, depth):
        depths[id(node)] = depth
        kids = [k for k in children(node) if k is not None]
        if not kids:
            slots[id(node)] = counter[0]
            counter[0] += 1
            return
        for k in kids:
            walk(k, depth + 1)
        slots[id(node)] = sum(slots[id(k)] for k in kids) / len(kids)

    walk(root, 0)
    n_slots = max(counter[0], 1)
    max_depth = max(depths.values()) if depths else 0
    step_x = (width - 2 * pad) / n_slots
    step_y = (height - 2 * pad - 20) / max(max_depth, 1)
    return {
        key: (pad + (slot + 0.5) * step_x, pad + depths[key] * min(step_y, 80))
        for key, slot in slots.items()
    }


def _inorder_positions(root, width, height, pad) -> Dict[int, Tuple[float, float]]:
    """Binary trees: x by in-order rank, y by depth."""
    order: List[Tuple[Any, int]] = []

    def walk(node, depth):
        if node is None:
            return
        walk(node.left, depth + 1)
        order.append((node, depth))
        walk(node.right, depth + 1)

    walk(root, 0)
    if not order:
        return {}
    max_depth = max(d for _, d in order)
    step_x = (width - 2 * pad) / len(order)
    step_y = min((height - 2 * pad - 20) / max(max_depth, 1), 80)
    return {id(n): (pad + (i + 0.5) * step_x, pad + d * step_y) for i, (n, d) in enumerate(order)}


def draw_binary_tree(ctx: SvgContext, root, show_balance: bool = False) -> None:
    """BST and AVL.  AVL nodes additionally show height / balance factor."""
    if root is None:
        ctx.caption("Empty tree")
        return
    c = ctx.config
    pos = _inorder_positions(root, ctx.width, ctx.height, c.padding)

    stack = [root]
    nodes = []
    while stack:
        node = stack.pop()
        nodes.append(node)
        for child in (node.right, node.left):
            if child is not None:
                x1, y1 = pos[id(node)]
                x2, y2 = pos[id(child)]
                ctx.line(x1, y1, x2, y2)
                stack.append(child)

    for node in nodes:
        x, y = pos[id(node)]
        ctx.circle(x, y, c.node_radius, fill_for(node.state, c), css_class="tree-node")
        ctx.text(x, y + 5, f"{node.value:g}")
        if show_balance:
            ctx.text(x + c.node_radius + 4, y - c.node_radius + 4,
                     f"h{node.height} bf{node.balance_factor}", size=10,
                     fill=c.muted_color, anchor="start")


def draw_heap(ctx: SvgContext, data) -> None:
    elements = data.elements
    if not elements:
        ctx.caption(f"Empty {data.heap_type}-heap")
        return
    c = ctx.config
    levels = int(math.log2(len(elements))) + 1
    step_y = min((ctx.height - 2 * c.padding - 20) / max(levels - 1, 1), 80)

    def at(i: int) -> Tuple[float, float]:
        depth = int(math.log2(i + 1))
        slot = i - (2 ** depth - 1)
        span = (ctx.width - 2 * c.padding) / (2 ** depth)
        return c.padding + (slot + 0.5) * span, c.padding + depth * step_y

    for i in range(1, len(elements)):
        x1, y1 = at((i - 1) // 2)
        x2, y2 = at(i)
        ctx.line(x1, y1, x2, y2)
    for i, el in enumerate(elements):
        x, y = at(i)
        ctx.circle(x, y, c.node_radius, fill_for(el.state, c), css_class="heap-node")
        ctx.text(x, y + 5, f"{el.value:g}")
    ctx.caption(f"{data.heap_type}-heap, {len(elements)} element(s)")


def draw_trie(ctx: SvgContext, data) -> None:
    c = ctx.config
    pos = _tree_positions(data.root, lambda n: n.children, ctx.width, ctx.height, c.padding)
    stack = [data.root]
    while stack:
        node = stack.pop()
        x1, y1 = pos[id(node)]
        for child in node.children:
            x2, y2 = pos[id(child)]
            ctx.line(x1, y1, x2, y2)
            stack.append(child)
    stack = [data.root]
    while stack:
        node = stack.pop()
        x, y = pos[id(node)]
        stroke = c.state_colors["found"] if node.is_end_of_word else None
        ctx.circle(x, y, c.node_radius - 4, fill_for(node.state, c), stroke=stroke,
                   css_class="trie-node")
        ctx.text(x, y + 5, node.char or "root", size=11 if not node.char else c.font_size)
        stack.extend(node.children)
    ctx.caption(f"{data.word_count} word(s)")


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------
def draw_hash_table(ctx: SvgContext, data) -> None:
    c = ctx.config
    rows = max(len(data.buckets), 1)
    row_h = min((ctx.height - 2 * c.padding - 20) / rows, c.cell_height + 6)
    for i, bucket in enumerate(data.buckets):
        y = c.padding + i * row_h
        ctx.rect(c.padding, y, 40, row_h - 4, fill_for(bucket.state, c), css_class="bucket")
        ctx.text(c.padding + 20, y + row_h / 2 + 2, str(i), size=11, mono=True)
        x = c.padding + 56
        for entry in bucket.entries:
            ctx.arrow(x - 14, y + row_h / 2 - 2, x, y + row_h / 2 - 2)
            ctx.rect(x, y, 110, row_h - 4, fill_for(entry.state, c), css_class="entry")
            ctx.text(x + 55, y + row_h / 2 + 2, f"{entry.key}: {entry.value:g}", size=11, mono=True)
            x += 130
    ctx.caption(f"size {data.size}, capacity {data.capacity}, load {data.load_factor:.2f}")


# ---------------------------------------------------------------------------
# Union-Find forest
# ---------------------------------------------------------------------------
def draw_union_find(ctx: SvgContext, data) -> None:
    c = ctx.config
    if not data.nodes:
        ctx.caption("No elements")
        return
    kids: Dict[int, List[Any]] = {n.id: [] for n in data.nodes}
    by_id = {n.id: n for n in data.nodes}
    roots = []
    for n in data.nodes:
        if n.parent == n.id or n.parent not in by_id:
            roots.append(n)
        else:
            kids[n.parent].append(n)

    # virtual super-root keeps the forest in one layout pass
    virtual = object()
    pos = _tree_positions(
        virtual,
        lambda n: roots if n is virtual else kids[n.id],
        ctx.width, ctx.height + 80, c.padding,
    )
    offset = min(p[1] for k, p in pos.items() if k != id(virtual)) - c.padding

    def at(node) -> Tuple[float, float]:
        x, y = pos[id(node)]
        return x, y - offset

    root_ids = {n.id for n in roots}
    for n in data.nodes:
        if n.id in root_ids:
            continue
        x1, y1 = at(n)
        x2, y2 = at(by_id[n.parent])
        ctx.arrow(x1, y1 - c.node_radius, x2, y2 + c.node_radius)
    for n in data.nodes:
        x, y = at(n)
        ctx.circle(x, y, c.node_radius, fill_for(n.state, c), css_class="uf-node")
        ctx.text(x, y + 5, str(n.id))
        ctx.text(x, y + c.node_radius + 14, f"r{n.rank}", size=10, fill=c.muted_color)


# ---------------------------------------------------------------------------
# Pathfinding grid
# ---------------------------------------------------------------------------
def draw_grid(ctx: SvgContext, data) -> None:
    """`data` is an astar.GridData; cells show their f-score once reached."""
    c = ctx.config
    if not data.rows or not data.cols:
        ctx.caption("Empty grid")
        return
    size = min((ctx.width - 2 * c.padding) / data.cols,
               (ctx.height - 2 * c.padding - 30) / data.rows)
    ox = (ctx.width - size * data.cols) / 2
    oy = (ctx.height - 30 - size * data.rows) / 2

    def centre(row, col) -> Tuple[float, float]:
        return ox + col * size + size / 2, oy + row * size + size / 2

    for row in data.cells:
        for cell in row:
            kind = cell.type.value
            ctx.rect(ox + cell.col * size + 1, oy + cell.row * size + 1, size - 2, size - 2,
                     fill_for(kind, c), rx=2, css_class="grid-cell")
            x, y = centre(cell.row, cell.col)
            if kind in ("start", "end"):
                ctx.text(x, y + 5, "S" if kind == "start" else "E", size=max(12, int(size / 2.5)))
            elif kind != "wall" and not math.isinf(cell.f):
                ctx.text(x, y + 4, f"{cell.f:.0f}", size=max(10, int(size / 4)), mono=True)

    for (r1, c1), (r2, c2) in zip(data.path, data.path[1:]):
        x1, y1 = centre(r1, c1)
        x2, y2 = centre(r2, c2)
        ctx.line(x1, y1, x2, y2, c.state_colors["path"], 3)

    if data.path_found:
        ctx.caption(f"Path of {len(data.path)} cells")
    else:
        ctx.caption(f"open {len(data.open_set)}, closed {len(data.closed_set)}")


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
def _fit(points: Iterable[Tuple[float, float]], ctx: SvgContext):
    """Map graph coordinates into the padded canvas, keeping aspect ratio."""
    pts = list(points)
    pad = ctx.config.padding
    if not pts:
        return lambda x, y: (x, y)
    xs, ys = [p[0] for p in pts], [p[1] for p in pts]
    span_x = max(max(xs) - min(xs), 1e-9)
    span_y = max(max(ys) - min(ys), 1e-9)
    scale = min((ctx.width - 2 * pad) / span_x, (ctx.height - 2 * pad - 30) / span_y)
    ox = pad + ((ctx.width - 2 * pad) - span_x * scale) / 2
    oy = pad + ((ctx.height - 2 * pad - 30) - span_y * scale) / 2
    return lambda x, y: (ox + (x - min(xs)) * scale, oy + (y - min(ys)) * scale)


def draw_graph(ctx: SvgContext, run) -> None:
    """`run` is a GraphRun: graph + side tables (distances, queue, order)."""
    c = ctx.config
    g = run.graph
    to_canvas = _fit(((n.x, n.y) for n in g.nodes.values()), ctx)
    r = c.node_radius

    for edge in g.edges.values():
        a, b = g.get_node(edge.source), g.get_node(edge.target)
        if a is None or b is None:
            continue
        x1, y1 = to_canvas(a.x, a.y)
        x2, y2 = to_canvas(b.x, b.y)
        dist = math.hypot(x2 - x1, y2 - y1)
        if dist < 0.001:
            continue
        ux, uy = (x2 - x1) / dist, (y2 - y1) / dist
        stroke = c.edge_colors.get(edge.state.value, c.edge_colors["default"])
        width = 4 if edge.state.value in ("inMST", "path") else 2
        sx, sy, tx, ty = x1 + ux * r, y1 + uy * r, x2 - ux * r, y2 - uy * r
        if g.directed:
            ctx.arrow(sx, sy, tx, ty, stroke, width)
        else:
            ctx.line(sx, sy, tx, ty, stroke, width)
        mx, my = (x1 + x2) / 2 - uy * 12, (y1 + y2) / 2 + ux * 12
        ctx.text(mx, my + 4, f"{edge.weight:g}", size=11, fill=c.muted_color)

    for node in g.nodes.values():
        x, y = to_canvas(node.x, node.y)
        ctx.circle(x, y, r, fill_for(node.state, c), css_class="graph-node")
        ctx.text(x, y + 5, node.id)
        if node.id in run.distances:
            ctx.text(x, y - r - 6, format_distance(run.distances[node.id]), size=11,
                     fill=c.muted_color)

    if run.message:
        ctx.caption(run.message)
