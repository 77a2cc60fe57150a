"""
astar.py — A* Search on a Grid
===============================
Shortest path between a start and an end cell on a 4-connected grid.
Every move costs 1 and the heuristic is the Manhattan distance, which
is admissible and consistent here, so the first time the end cell is
popped its g-score is optimal.

Emits a Step at:
  1. Start (from / to cells) and start-cell initialisation
  2. Pop of the lowest-f cell                    →  CURRENT
  3. Neighbour opened or improved                →  FRONTIER
  4. End reached: path traced back via parents   →  PATH
  5. Open set exhausted                          →  "No path exists"

Stale heap entries (cell already closed) are skipped without a step.

Counter usage:
    reads       – one per open-set pop
    comparisons – one per tentative-g check
    writes      – one per g-score update
"""

import heapq
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from algorithms.step import Step, StepBuilder


Cell = Tuple[int, int]
INF = float("inf")


class CellType(Enum):
    EMPTY    = "empty"
    WALL     = "wall"
    START    = "start"
    END      = "end"
    FRONTIER = "frontier"
    CURRENT  = "current"
    VISITED  = "visited"
    PATH     = "path"


@dataclass
class GridCell:
    row:     int
    col:     int
    type:    CellType       = CellType.EMPTY
    g:       float          = INF
    h:       float          = 0
    f:       float          = INF
    parent:  Optional[Cell] = None


@dataclass
class GridData:
    cells:       List[List[GridCell]] = field(default_factory=list)
    start:       Cell                 = (0, 0)
    end:         Cell                 = (0, 0)
    open_set:    List[Cell]           = field(default_factory=list)
    closed_set:  List[Cell]           = field(default_factory=list)
    path_found:  bool                 = False
    path:        List[Cell]           = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, pos: Cell) -> GridCell:
        return self.cells[pos[0]][pos[1]]


PSEUDOCODE: List[str] = [
    "function aStar(grid, start, end):",            # 0
    "  g[start] = 0; f[start] = h(start, end)",     # 1
    "  open = [(f[start], start)]; closed = {}",    # 2
    "  while open not empty:",                      # 3
    "    cur = open.popMin()",                      # 4
    "    if cur == end: return path(cur)",          # 5
    "    closed.add(cur)",                          # 6
    "    for nbr in up/down/left/right of cur:",    # 7
    "      if nbr is wall or in closed: continue",  # 8
    "      t = g[cur] + 1",                         # 9
    "      if t < g[nbr]:",                         # 10
    "        parent[nbr] = cur; g[nbr] = t",        # 11
    "        f[nbr] = t + h(nbr, end)",             # 12
    "        open.push((f[nbr], nbr))",             # 13
    "  return NOT FOUND",                           # 14
]

# up, down, left, right
DIRECTIONS: List[Cell] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

SAMPLE_WALLS: List[Cell] = [
    (1, 2), (2, 2), (3, 2), (4, 2), (5, 2),
    (1, 5), (2, 5), (3, 5), (4, 5), (5, 5), (6, 5),
    (3, 7), (4, 7), (5, 7),
]


# ---------------------------------------------------------------------------
# Grid construction
# ---------------------------------------------------------------------------
def make_grid(
    rows: int,
    cols: int,
    walls: Iterable[Cell] = (),
    start: Optional[Cell] = None,
    end: Optional[Cell] = None,
) -> GridData:
    """Empty grid with walls; start defaults to top-left, end to bottom-right."""
    start = start if start is not None else (0, 0)
    end = end if end is not None else (rows - 1, cols - 1)
    cells = [[GridCell(r, c) for c in range(cols)] for r in range(rows)]
    for r, c in walls:
        if 0 <= r < rows and 0 <= c < cols:
            cells[r][c].type = CellType.WALL
    grid = GridData(cells=cells, start=tuple(start), end=tuple(end))
    if rows and cols:
        if _in_bounds(grid, grid.start):
            grid.cell(grid.start).type = CellType.START
        if _in_bounds(grid, grid.end):
            grid.cell(grid.end).type = CellType.END
    return grid


def sample_grid(rows: int = 8, cols: int = 10) -> GridData:
    return make_grid(rows, cols, SAMPLE_WALLS)


def random_grid(rows: int, cols: int, density: float = 0.25,
                seed: Optional[int] = None) -> GridData:
    """Walls scattered with probability `density`; start and end stay open."""
    rng = random.Random(seed)
    keep = {(0, 0), (rows - 1, cols - 1)}
    walls = [(r, c) for r in range(rows) for c in range(cols)
             if (r, c) not in keep and rng.random() < density]
    return make_grid(rows, cols, walls)


def grid_from_dict(data: Dict[str, Any]) -> GridData:
    """{"rows", "cols", "walls": [[r, c], ...], "start": [r, c], "end": [r, c]}"""
    rows, cols = int(data.get("rows", 0)), int(data.get("cols", 0))
    walls = [tuple(w) for w in data.get("walls") or []]
    start, end = data.get("start"), data.get("end")
    return make_grid(rows, cols, walls,
                     tuple(start) if start is not None else None,
                     tuple(end) if end is not None else None)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _in_bounds(grid: GridData, pos: Cell) -> bool:
    return 0 <= pos[0] < grid.rows and 0 <= pos[1] < grid.cols


def _neighbours(grid: GridData, pos: Cell) -> List[Cell]:
    out = []
    for dr, dc in DIRECTIONS:
        nxt = (pos[0] + dr, pos[1] + dc)
        if _in_bounds(grid, nxt):
            out.append(nxt)
    return out


def _fresh(grid: GridData) -> GridData:
    """Working copy with scores and search marks cleared."""
    cells = []
    for row in grid.cells:
        out = []
        for cell in row:
            kind = cell.type if cell.type in (CellType.WALL, CellType.START, CellType.END) \
                else CellType.EMPTY
            out.append(GridCell(cell.row, cell.col, kind))
        cells.append(out)
    return GridData(cells=cells, start=tuple(grid.start), end=tuple(grid.end))


def _mark(grid: GridData, pos: Cell, kind: CellType) -> None:
    cell = grid.cell(pos)
    if cell.type not in (CellType.START, CellType.END):
        cell.type = kind


def _index(grid: GridData, pos: Cell) -> int:
    return pos[0] * grid.cols + pos[1]


def _fmt(pos: Cell) -> str:
    return f"({pos[0]},{pos[1]})"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_astar_steps(grid: GridData) -> List[Step]:
    work = _fresh(grid)
    sb = StepBuilder()

    if work.rows == 0 or work.cols == 0:
        sb.push("Grid is empty. Nothing to search", work, line=0)
        return sb.steps
    start, end = work.start, work.end
    if not _in_bounds(work, start) or not _in_bounds(work, end):
        sb.push("Error: grid must have a start and an end cell inside its bounds", work, line=0)
        return sb.steps

    sb.push(f"A* Search: finding path from {_fmt(start)} to {_fmt(end)}", work, line=0)

    first = work.cell(start)
    first.g, first.h = 0, manhattan(start, end)
    first.f = first.h
    heap: List[Tuple[float, int, Cell]] = [(first.f, 0, start)]
    pushed = 1
    work.open_set = [start]
    sb.push(f"Initialized start cell with g=0, h={first.h} (Manhattan distance)", work,
            line=1, active=[_index(work, start)])

    closed = set()
    while heap:
        f, _, cur = heapq.heappop(heap)
        sb.reads += 1
        if cur in closed:
            continue
        cell = work.cell(cur)
        _mark(work, cur, CellType.CURRENT)
        sb.push(f"Processing {_fmt(cur)} with f={cell.f:g} (g={cell.g:g}, h={cell.h:g})",
                work, line=4, active=[_index(work, cur)])

        if cur == end:
            path = _trace(work, cur)
            for pos in path:
                _mark(work, pos, CellType.PATH)
            work.path, work.path_found = path, True
            sb.push(f"Path found! Length: {len(path)} cells, cost: {cell.g:g}", work, line=5,
                    active=[_index(work, p) for p in path])
            return sb.steps

        closed.add(cur)
        work.open_set.remove(cur)
        work.closed_set.append(cur)
        _mark(work, cur, CellType.VISITED)

        for nbr in _neighbours(work, cur):
            nxt = work.cell(nbr)
            if nxt.type is CellType.WALL or nbr in closed:
                continue
            tentative = cell.g + 1
            sb.comparisons += 1
            if tentative >= nxt.g:
                continue

            opened = nbr not in work.open_set
            nxt.g, nxt.h = tentative, manhattan(nbr, end)
            nxt.f = nxt.g + nxt.h
            nxt.parent = cur
            sb.writes += 1
            heapq.heappush(heap, (nxt.f, pushed, nbr))
            pushed += 1
            if opened:
                work.open_set.append(nbr)
                _mark(work, nbr, CellType.FRONTIER)
                sb.push(f"Added {_fmt(nbr)} to frontier: f={nxt.f:g} (g={nxt.g:g}, h={nxt.h:g})",
                        work, line=13, active=[_index(work, nbr)])
            else:
                sb.push(f"Found a shorter route to {_fmt(nbr)}: g={nxt.g:g}, f={nxt.f:g}",
                        work, line=11, active=[_index(work, nbr)])

    sb.push("No path exists between start and end cells", work, line=14)
    return sb.steps


def _trace(grid: GridData, pos: Cell) -> List[Cell]:
    path: List[Cell] = []
    cur: Optional[Cell] = pos
    while cur is not None:
        path.append(cur)
        cur = grid.cell(cur).parent
    path.reverse()
    return path
