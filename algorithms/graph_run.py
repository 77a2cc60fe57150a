"""
graph_run.py — Graph Algorithm Snapshot
========================================
What one frame of a graph algorithm looks like.  The Graph carries the
node / edge visual states; everything else an algorithm tracks lives in
the side fields below so the renderer can draw tables next to the canvas.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from graph import Graph, NodeState, EdgeState


@dataclass
class GraphRun:
    """
    Attributes:
        graph      : The graph with per-node / per-edge states.
        distances  : node_id → best known distance (shortest-path runs).
        queue      : Frontier snapshot (queue, stack or heap contents).
        order      : Nodes in the order they were finalised / emitted.
        mst_edges  : Edge ids accepted into the spanning tree.
        mst_weight : Sum of accepted edge weights.
        message    : Short status line drawn under the canvas.
    """

    graph:       Graph
    distances:   Dict[str, float] = field(default_factory=dict)
    queue:       List[Any]        = field(default_factory=list)
    order:       List[str]        = field(default_factory=list)
    mst_edges:   List[str]        = field(default_factory=list)
    mst_weight:  float            = 0
    message:     Optional[str]    = None


def start_run(graph: Graph) -> GraphRun:
    """Independent working copy with every visual state reset."""
    work = copy.deepcopy(graph)
    work.reset_states()
    return GraphRun(graph=work)


def set_node(run: GraphRun, node_id: str, state: NodeState) -> None:
    node = run.graph.get_node(node_id)
    if node is not None:
        node.state = state


def set_edge(run: GraphRun, edge_id: str, state: EdgeState) -> None:
    edge = run.graph.get_edge(edge_id)
    if edge is not None:
        edge.state = state

