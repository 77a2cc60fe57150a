"""
union_find.py — Disjoint Set Union
===================================
make-set / find (path compression) / union (by rank) / connected.

`parent` is an id reference, not ownership: roots point at themselves
and every chain reaches a root within n hops.  Nodes are looked up
through an id → node dict built once per run.

Counter usage:
    reads  – one per parent-pointer hop
    writes – one per re-pointed node (compression, union, make-set)
    comparisons – one per root-equality / rank check
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from algorithms.step import Step, StepBuilder


class UFNodeState(Enum):
    DEFAULT = "default"
    CURRENT = "current"
    ROOT    = "root"
    PATH    = "path"
    MERGED  = "merged"
    FOUND   = "found"


@dataclass
class UFNode:
    id:      int
    parent:  int
    rank:    int         = 0
    state:   UFNodeState = UFNodeState.DEFAULT


@dataclass
class UnionFindData:
    nodes: List[UFNode] = field(default_factory=list)


PSEUDOCODE: List[str] = [
    "makeSet(x): parent[x] = x; rank[x] = 0",           # 0
    "find(x):",                                         # 1
    "  while parent[x] != x: x = parent[x]",            # 2
    "  compress: point every visited node at root",     # 3
    "union(x, y):",                                     # 4
    "  rx, ry = find(x), find(y)",                      # 5
    "  if rx == ry: return",                            # 6
    "  attach lower rank under higher rank",            # 7
    "  on tie: parent[ry] = rx; rank[rx] += 1",         # 8
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def sample_forest() -> UnionFindData:
    """{0, 1, 2} rooted at 0 (rank 1), {3, 4} rooted at 3 (rank 1), {5}."""
    return UnionFindData(nodes=[
        UFNode(0, 0, 1), UFNode(1, 0, 0), UFNode(2, 0, 0),
        UFNode(3, 3, 1), UFNode(4, 3, 0),
        UFNode(5, 5, 0),
    ])


def singletons(n: int) -> UnionFindData:
    return UnionFindData(nodes=[UFNode(i, i, 0) for i in range(n)])


def _clone(data: UnionFindData) -> Tuple[UnionFindData, Dict[int, UFNode]]:
    work = UnionFindData(nodes=[UFNode(n.id, n.parent, n.rank) for n in data.nodes])
    _paint_roots(work)
    return work, {n.id: n for n in work.nodes}


def _paint_roots(data: UnionFindData) -> None:
    for n in data.nodes:
        n.state = UFNodeState.ROOT if n.parent == n.id else UFNodeState.DEFAULT


def _find(
    x: int,
    index: Dict[int, UFNode],
    work: UnionFindData,
    sb: StepBuilder,
) -> int:
    """Walk to the root, one step per hop, then compress the path."""
    node = index[x]
    node.state = UFNodeState.CURRENT
    sb.push(f"Finding root of {x}", work, line=1, active=[x])

    path: List[UFNode] = []
    while node.parent != node.id:
        sb.reads += 1
        path.append(node)
        node.state = UFNodeState.PATH
        nxt = index[node.parent]
        nxt.state = UFNodeState.CURRENT
        sb.push(f"Following parent pointer: {node.id} → {nxt.id}", work, line=2,
                active=[nxt.id])
        node = nxt

    root = node.id
    node.state = UFNodeState.ROOT
    sb.push(f"Found root of {x}: {root}", work, line=2, active=[root])

    for n in path:
        if n.parent == root:
            continue
        sb.writes += 1
        n.parent = root
        n.state = UFNodeState.PATH
        sb.push(f"Path compression: {n.id} now points directly to root {root}", work,
                line=3, active=[n.id], modified=[n.id])
    return root


def _missing(data: UnionFindData, ids) -> Optional[int]:
    known = {n.id for n in data.nodes}
    for i in ids:
        if i not in known:
            return i
    return None


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def generate_make_set_steps(data: UnionFindData, x: int) -> List[Step]:
    work, index = _clone(data)
    sb = StepBuilder()

    if x in index:
        index[x].state = UFNodeState.FOUND
        sb.push(f"Element {x} already exists. No new set created", work, line=0, active=[x])
        return sb.steps

    sb.push(f"Creating a new set for element {x}", work, line=0)
    sb.writes += 1
    work.nodes.append(UFNode(x, x, 0, UFNodeState.ROOT))
    sb.push(f"Element {x} is now its own root (rank 0)", work, line=0,
            active=[x], modified=[x])
    return sb.steps


def generate_find_steps(data: UnionFindData, x: int) -> List[Step]:
    work, index = _clone(data)
    sb = StepBuilder()

    if x not in index:
        sb.push(f"Element {x} not found", work, line=1)
        return sb.steps

    root = _find(x, index, work, sb)
    _paint_roots(work)
    index[root].state = UFNodeState.FOUND
    sb.push(f"find({x}) = {root}", work, line=1, active=[root])
    return sb.steps


def generate_union_steps(data: UnionFindData, x: int, y: int) -> List[Step]:
    work, index = _clone(data)
    sb = StepBuilder()

    missing = _missing(work, (x, y))
    if missing is not None:
        sb.push(f"Element {missing} not found", work, line=4)
        return sb.steps

    sb.push(f"Union of {x} and {y}", work, line=4, active=[x, y])
    rx = _find(x, index, work, sb)
    _paint_roots(work)
    ry = _find(y, index, work, sb)

    sb.comparisons += 1
    if rx == ry:
        _paint_roots(work)
        index[rx].state = UFNodeState.FOUND
        sb.push(f"{x} and {y} are already in the same set (root {rx}). No union needed",
                work, line=6, active=[rx])
        return sb.steps

    root_x, root_y = index[rx], index[ry]
    _paint_roots(work)
    sb.comparisons += 1
    sb.writes += 1
    if root_x.rank < root_y.rank:
        root_x.parent = ry
        child, parent = root_x, root_y
        desc = f"Rank {root_x.rank} < {root_y.rank}: attaching {rx} under {ry}"
        line = 7
    elif root_x.rank > root_y.rank:
        root_y.parent = rx
        child, parent = root_y, root_x
        desc = f"Rank {root_x.rank} > {root_y.rank}: attaching {ry} under {rx}"
        line = 7
    else:
        root_y.parent = rx
        root_x.rank += 1
        child, parent = root_y, root_x
        desc = (f"Equal ranks: attaching {ry} under {rx} and increasing "
                f"rank of {rx} to {root_x.rank}")
        line = 8

    child.state = UFNodeState.MERGED
    parent.state = UFNodeState.ROOT
    sb.push(desc, work, line=line, active=[child.id, parent.id], modified=[child.id])

    _paint_roots(work)
    sb.push(f"Union complete. {x} and {y} now share root {parent.id}", work, line=4)
    return sb.steps


def generate_connected_steps(data: UnionFindData, x: int, y: int) -> List[Step]:
    work, index = _clone(data)
    sb = StepBuilder()

    missing = _missing(work, (x, y))
    if missing is not None:
        sb.push(f"Element {missing} not found", work, line=1)
        return sb.steps

    sb.push(f"Checking whether {x} and {y} are connected", work, line=1, active=[x, y])
    rx = _find(x, index, work, sb)
    _paint_roots(work)
    ry = _find(y, index, work, sb)

    sb.comparisons += 1
    _paint_roots(work)
    if rx == ry:
        index[rx].state = UFNodeState.FOUND
        sb.push(f"{x} and {y} are connected (common root {rx})", work, line=1)
    else:
        sb.push(f"{x} and {y} are NOT connected (roots {rx} and {ry})", work, line=1)
    return sb.steps


def roots_of(data: UnionFindData) -> Dict[int, int]:
    """Silent root lookup for every element (no compression)."""
    index = {n.id: n for n in data.nodes}
    out = {}
    for n in data.nodes:
        cur = n
        while cur.parent != cur.id:
            cur = index[cur.parent]
        out[n.id] = cur.id
    return out
