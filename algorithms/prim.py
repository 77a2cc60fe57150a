"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows one tree outward from a start node using a min-heap (heapq) of
crossing edges.  An edge popped with both ends already in the tree is
skipped.  Stops once |V|-1 edges are accepted or the heap runs dry.

Heap entries are (weight, push_order, edge_id) so ties pop in the order
they were pushed.
"""

import heapq
from typing import List, Optional, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "function prim(G, start):",                          # 0
    "  inMST = {start}; push edges(start) into PQ",      # 1
    "  while PQ not empty and |MST| < |V| - 1:",         # 2
    "    (w, u, v) = PQ.popMin()",                       # 3
    "    if both u and v in MST: skip",                  # 4
    "    add edge to MST; inMST.add(new node)",          # 5
    "    push edges(new node) to nodes not in MST",      # 6
    "  return MST",                                      # 7
]


def _queue_view(heap: List[Tuple[float, int, str]]) -> List[dict]:
    return [{"edge_id": eid, "weight": w} for w, _, eid in sorted(heap)]


def generate_prim_steps(graph: Graph, start: Optional[str] = None) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    if g.node_count == 0:
        sb.push("Graph is empty. Nothing to span", run, line=0)
        return sb.steps

    if start not in g.nodes:
        start = g.node_ids()[0]

    sb.push(f"Prim's MST starting from node {start}", run, line=0)

    heap: List[Tuple[float, int, str]] = []
    pushed = 0
    in_tree = {start}

    def push_edges(node_id: str) -> int:
        nonlocal pushed
        added = 0
        for nbr, edge in g.neighbours(node_id):
            if nbr in in_tree:
                continue
            if edge.state != EdgeState.IN_MST:
                edge.state = EdgeState.CONSIDERING
            heapq.heappush(heap, (edge.weight, pushed, edge.id))
            pushed += 1
            added += 1
        return added

    set_node(run, start, NodeState.IN_MST)
    run.order.append(start)
    added = push_edges(start)
    run.queue = _queue_view(heap)
    sb.push(f"Added {added} edge(s) from {start} to priority queue", run, line=1)

    needed = g.node_count - 1
    while heap and len(run.mst_edges) < needed:
        weight, _, eid = heapq.heappop(heap)
        edge = g.edges[eid]
        sb.comparisons += 1
        sb.reads += 1
        run.queue = _queue_view(heap)

        if edge.source in in_tree and edge.target in in_tree:
            set_edge(run, eid, EdgeState.REJECTED)
            sb.push(f"Skip edge {edge.label}: both nodes already in MST", run, line=4)
            set_edge(run, eid, EdgeState.DEFAULT)
            continue

        new_node = edge.target if edge.source in in_tree else edge.source
        set_edge(run, eid, EdgeState.CONSIDERING)
        set_node(run, new_node, NodeState.CURRENT)
        sb.push(
            f"Considering edge {edge.label} (weight: {weight:g}) to add node {new_node}",
            run, line=3,
        )

        in_tree.add(new_node)
        run.order.append(new_node)
        run.mst_edges.append(eid)
        run.mst_weight += weight
        sb.writes += 1
        set_edge(run, eid, EdgeState.IN_MST)
        set_node(run, new_node, NodeState.IN_MST)

        added = push_edges(new_node)
        run.queue = _queue_view(heap)
        sb.push(
            f"Added {edge.label} to MST. Node {new_node} added. {added} new edge(s) in queue. "
            f"Total weight: {run.mst_weight:g}",
            run, line=5,
        )

    accepted = set(run.mst_edges)
    for edge in g.edges.values():
        edge.state = EdgeState.IN_MST if edge.id in accepted else EdgeState.DEFAULT
    for node in g.nodes.values():
        node.state = NodeState.IN_MST if node.id in in_tree else NodeState.DEFAULT
    run.queue = []
    run.message = f"MST weight: {run.mst_weight:g}"
    sb.push(
        f"Prim's complete! MST has {len(run.mst_edges)} edges with total weight "
        f"{run.mst_weight:g}",
        run, line=7,
    )
    return sb.steps
