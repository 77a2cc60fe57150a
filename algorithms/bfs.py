"""
bfs.py — Breadth-First Search
==============================
Level-by-level traversal from a start node.  Emits a Step at every
meaningful event:
  1. Enqueue the start node  →  FRONTIER
  2. Dequeue a node          →  CURRENT
  3. Discover a neighbour    →  edge PATH, neighbour FRONTIER
  4. Target reached (optional)  →  hop-count shortest path highlighted
  5. Final step              →  visit order

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from collections import deque
from typing import Dict, List, Optional

from graph import Graph, NodeState, EdgeState
from algorithms.dijkstra import reconstruct_path
from algorithms.graph_run import GraphRun, start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                  # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        if node == target: return path",   # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not visited:",    # 7
    "                visited.add(neighbour)",   # 8
    "                queue.enqueue(neighbour)", # 9
    "    return visit order",                   # 10
]


def generate_bfs_steps(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    if g.node_count == 0:
        sb.push("Graph is empty. Nothing to traverse", run, line=0)
        return sb.steps
    if source not in g.nodes:
        source = g.node_ids()[0]

    parent: Dict[str, Optional[str]] = {source: None}
    queue = deque([source])
    run.queue = list(queue)
    set_node(run, source, NodeState.FRONTIER)
    sb.push(f"BFS starting from node {source}. Enqueued {source}", run, line=1)

    while queue:
        node = queue.popleft()
        run.queue = list(queue)
        run.order.append(node)
        sb.reads += 1
        set_node(run, node, NodeState.CURRENT)
        sb.push(f"Dequeued {node}. Visit order: [{', '.join(run.order)}]", run, line=4)

        if node == target:
            return _finish_with_path(run, sb, parent, target)

        for nbr, edge in g.neighbours(node):
            sb.comparisons += 1
            if nbr in parent:
                continue
            parent[nbr] = node
            queue.append(nbr)
            run.queue = list(queue)
            sb.writes += 1
            set_edge(run, edge.id, EdgeState.PATH)
            set_node(run, nbr, NodeState.FRONTIER)
            sb.push(f"Discovered {nbr} via {node}. Enqueued {nbr}", run, line=9)

        set_node(run, node, NodeState.VISITED)

    run.message = " → ".join(run.order)
    if target is not None and target in g.nodes:
        sb.push(f"BFS complete. {target} is not reachable from {source}", run, line=10)
    else:
        sb.push(f"BFS complete! Visit order: [{', '.join(run.order)}]", run, line=10)
    return sb.steps


def _finish_with_path(
    run: GraphRun,
    sb: StepBuilder,
    parent: Dict[str, Optional[str]],
    target: str,
) -> List[Step]:
    """Shared by BFS and DFS: highlight the discovered path to target."""
    path = reconstruct_path(parent, target)
    for edge in run.graph.edges.values():
        edge.state = EdgeState.DEFAULT
    for node in run.graph.nodes.values():
        if node.state in (NodeState.CURRENT, NodeState.FRONTIER):
            node.state = NodeState.VISITED
    for a, b in zip(path, path[1:]):
        edge = run.graph.get_edge_between(a, b)
        if edge is not None:
            edge.state = EdgeState.PATH
    for nid in path:
        set_node(run, nid, NodeState.PATH)
    run.queue = []
    run.message = " → ".join(path)
    sb.push(f"Reached {target}! Path: {' → '.join(path)} ({len(path) - 1} edge(s))",
            run, line=5)
    return sb.steps
