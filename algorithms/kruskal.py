"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edges are sorted by weight (stable on ties) and taken cheapest first.
A disjoint-set forest over node ids rejects any edge whose endpoints are
already connected.  Stops once |V|-1 edges are accepted.

Emits a Step at:
  1. Start / sorted edge list
  2. Each edge under consideration   →  edge CONSIDERING, ends CURRENT
  3. Rejection (would form a cycle)  →  edge REJECTED
  4. Acceptance                      →  edge + both ends IN_MST
  5. Final tree with total weight
"""

from typing import Dict, List

from graph import Graph, NodeState, EdgeState
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "function kruskal(G):",                              # 0
    "  sort edges by weight",                            # 1
    "  for v in V: makeSet(v)",                          # 2
    "  for (u, v, w) in sorted edges:",                  # 3
    "    if find(u) == find(v): reject (cycle)",         # 4
    "    else: union(u, v); add edge to MST",            # 5
    "    if |MST| == |V| - 1: break",                    # 6
    "  return MST",                                      # 7
]


def _find(parent: Dict[str, str], x: str) -> str:
    while parent[x] != x:
        parent[x] = parent[parent[x]]
        x = parent[x]
    return x


def _union(parent: Dict[str, str], rank: Dict[str, int], a: str, b: str) -> None:
    ra, rb = _find(parent, a), _find(parent, b)
    if rank[ra] < rank[rb]:
        ra, rb = rb, ra
    parent[rb] = ra
    if rank[ra] == rank[rb]:
        rank[ra] += 1


def generate_kruskal_steps(graph: Graph) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    sb.push("Starting Kruskal's algorithm - finding Minimum Spanning Tree", run, line=0)

    ordered = sorted(g.edges.values(), key=lambda e: e.weight)
    run.queue = [e.id for e in ordered]
    weights = ", ".join(f"{e.weight:g}" for e in ordered)
    sb.push(f"Sorted {len(ordered)} edges by weight: [{weights}]", run, line=1)

    parent = {nid: nid for nid in g.nodes}
    rank   = {nid: 0 for nid in g.nodes}
    needed = max(g.node_count - 1, 0)

    for edge in ordered:
        if len(run.mst_edges) >= needed:
            break
        run.queue = run.queue[1:]

        set_edge(run, edge.id, EdgeState.CONSIDERING)
        for end in (edge.source, edge.target):
            if g.nodes[end].state != NodeState.IN_MST:
                set_node(run, end, NodeState.CURRENT)
        sb.push(f"Considering edge {edge.label} (weight: {edge.weight:g})", run, line=3)

        sb.comparisons += 1
        sb.reads += 2
        if _find(parent, edge.source) == _find(parent, edge.target):
            set_edge(run, edge.id, EdgeState.REJECTED)
            sb.push(
                f"Rejected: {edge.source} and {edge.target} are already connected "
                f"(would create cycle)",
                run, line=4,
            )
        else:
            _union(parent, rank, edge.source, edge.target)
            sb.writes += 1
            run.mst_edges.append(edge.id)
            run.mst_weight += edge.weight
            set_edge(run, edge.id, EdgeState.IN_MST)
            set_node(run, edge.source, NodeState.IN_MST)
            set_node(run, edge.target, NodeState.IN_MST)
            sb.push(
                f"Added: {edge.label} (weight: {edge.weight:g}). MST weight: {run.mst_weight:g}",
                run, line=5,
            )

        for end in (edge.source, edge.target):
            if g.nodes[end].state == NodeState.CURRENT:
                set_node(run, end, NodeState.DEFAULT)

    accepted = set(run.mst_edges)
    for edge in g.edges.values():
        edge.state = EdgeState.IN_MST if edge.id in accepted else EdgeState.DEFAULT
    for node in g.nodes.values():
        node.state = NodeState.IN_MST
    run.queue = []
    run.message = f"MST weight: {run.mst_weight:g}"
    sb.push(
        f"Kruskal's complete! MST has {len(run.mst_edges)} edges with total weight "
        f"{run.mst_weight:g}",
        run, line=7,
    )
    return sb.steps
