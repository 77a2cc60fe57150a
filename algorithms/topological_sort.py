"""
topological_sort.py — Kahn's Algorithm
=======================================
Repeatedly removes a node with in-degree 0 and decrements its
successors.  If nodes remain when the ready queue empties, the graph
has a cycle and that outcome is reported as the final step.

The ready queue is FIFO and seeded in node insertion order, so the
output order is deterministic.
"""

from collections import deque
from typing import List

from graph import Graph, NodeState, EdgeState
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "function topologicalSort(G):",               # 0
    "  compute inDegree[v] for all v",            # 1
    "  Q = all v with inDegree 0",                # 2
    "  while Q not empty:",                       # 3
    "    u = Q.dequeue(); order.append(u)",       # 4
    "    for v in adj(u):",                       # 5
    "      inDegree[v] -= 1",                     # 6
    "      if inDegree[v] == 0: Q.enqueue(v)",    # 7
    "  if |order| < |V|: cycle detected",         # 8
    "  return order",                             # 9
]


def generate_topological_sort_steps(graph: Graph) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    sb.push("Starting Topological Sort (Kahn's Algorithm)", run, line=0)

    in_degree = g.in_degrees()
    sb.reads += g.edge_count
    listing = ", ".join(f"{nid}:{d}" for nid, d in in_degree.items())
    sb.push(f"Calculated in-degrees: {listing}", run, line=1,
            metadata={"in_degree": dict(in_degree)})

    ready = deque(nid for nid, d in in_degree.items() if d == 0)
    for nid in ready:
        set_node(run, nid, NodeState.FRONTIER)
    run.queue = list(ready)
    sb.push(f"Nodes with in-degree 0 (ready): [{', '.join(ready)}]", run, line=2,
            metadata={"in_degree": dict(in_degree)})

    while ready:
        u = ready.popleft()
        run.queue = list(ready)
        set_node(run, u, NodeState.CURRENT)
        sb.push(f"Processing node {u}", run, line=4, metadata={"in_degree": dict(in_degree)})

        for v, edge in g.neighbours(u):
            in_degree[v] -= 1
            sb.writes += 1
            sb.comparisons += 1
            set_edge(run, edge.id, EdgeState.PATH)
            if in_degree[v] == 0:
                ready.append(v)
                run.queue = list(ready)
                set_node(run, v, NodeState.FRONTIER)
                sb.push(f"Node {v} now has in-degree 0, added to queue", run, line=7,
                        metadata={"in_degree": dict(in_degree)})

        run.order.append(u)
        set_node(run, u, NodeState.VISITED)
        sb.push(f"Added {u} to sorted order. Order so far: [{', '.join(run.order)}]", run,
                line=4, metadata={"in_degree": dict(in_degree)})

    if len(run.order) < g.node_count:
        stuck = [nid for nid in g.nodes if nid not in run.order]
        for nid in stuck:
            set_node(run, nid, NodeState.DEFAULT)
        for edge in g.edges.values():
            if edge.source in stuck and edge.target in stuck:
                edge.state = EdgeState.REJECTED
        run.message = "Cycle detected"
        sb.push("Error: Graph contains a cycle! Topological sort not possible.", run, line=8,
                metadata={"in_degree": dict(in_degree), "has_cycle": True})
        return sb.steps

    for node in g.nodes.values():
        node.state = NodeState.PATH
    run.message = " → ".join(run.order)
    sb.push(f"Topological Sort complete! Order: [{' → '.join(run.order)}]", run, line=9,
            metadata={"in_degree": dict(in_degree), "has_cycle": False})
    return sb.steps
