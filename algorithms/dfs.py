"""
dfs.py — Depth-First Search
=============================
DFS using an explicit stack (no Python recursion limit issues).

Emits a Step at:
  1. Push source onto stack
  2. Pop a node  →  CURRENT  (already-visited pops are skipped silently)
  3. Push each unseen neighbour  →  FRONTIER
  4. Target reached (optional)  →  path via parent map
  5. Stack empty  →  visit order

Neighbours are pushed in reverse adjacency order so they are popped,
and therefore visited, in adjacency order.  `queue` in the snapshot is
the stack, bottom first.
"""

from typing import Dict, List, Optional

from graph import Graph, NodeState, EdgeState
from algorithms.bfs import _finish_with_path
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def DFS(graph, source):",                  # 0
    "    stack ← [source]",                     # 1
    "    visited ← {}",                         # 2
    "    while stack is not empty:",            # 3
    "        node ← stack.pop()",               # 4
    "        if node in visited: continue",     # 5
    "        visited.add(node)",                # 6
    "        if node == target: return path",   # 7
    "        for neighbour in reversed(adj(node)):",  # 8
    "            if neighbour not visited:",    # 9
    "                parent[neighbour] = node", # 10
    "                stack.push(neighbour)",    # 11
    "    return visit order",                   # 12
]


def generate_dfs_steps(
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
    visited = set()
    stack = [source]
    run.queue = list(stack)
    set_node(run, source, NodeState.FRONTIER)
    sb.push(f"DFS starting from node {source}. Pushed {source} onto the stack", run, line=1)

    while stack:
        node = stack.pop()
        run.queue = list(stack)
        sb.reads += 1
        if node in visited:
            continue

        visited.add(node)
        run.order.append(node)
        set_node(run, node, NodeState.CURRENT)
        tree_edge = g.get_edge_between(parent[node], node) if parent[node] else None
        if tree_edge is not None:
            set_edge(run, tree_edge.id, EdgeState.PATH)
        sb.push(f"Popped {node}. Visit order: [{', '.join(run.order)}]", run, line=6)

        if node == target:
            return _finish_with_path(run, sb, parent, target)

        pushed = []
        for nbr, _ in reversed(g.neighbours(node)):
            sb.comparisons += 1
            if nbr in visited:
                continue
            parent[nbr] = node
            stack.append(nbr)
            pushed.append(nbr)
            sb.writes += 1
            set_node(run, nbr, NodeState.FRONTIER)
        run.queue = list(stack)
        if pushed:
            sb.push(f"Pushed unvisited neighbours of {node}: [{', '.join(reversed(pushed))}]",
                    run, line=11)

        set_node(run, node, NodeState.VISITED)

    run.message = " → ".join(run.order)
    if target is not None and target in g.nodes:
        sb.push(f"DFS complete. {target} is not reachable from {source}", run, line=12)
    else:
        sb.push(f"DFS complete! Visit order: [{', '.join(run.order)}]", run, line=12)
    return sb.steps
