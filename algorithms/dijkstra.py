"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest distances using a min-heap (heapq).

Emits a Step at:
  1. Start, distance initialisation, source enqueued
  2. Pop minimum-distance node         →  CURRENT
  3. Stale heap entry                   →  skipped
  4. Each neighbour relaxation attempt  →  edge CONSIDERING
  5. Successful relaxation              →  distance updated, neighbour FRONTIER
  6. Final distances (∞ for unreachable nodes)

A graph with negative weights gets a warning step right after the start.

Snapshot side fields:
  • distances  – full current distance map
  • queue      – [{node, distance}] priority queue contents
  • order      – nodes in the order their distance became final
Step metadata carries the predecessor map so paths can be rebuilt.

Correctness note: Dijkstra requires non-negative weights.
Use Bellman-Ford when negative edges exist.
"""

import heapq
from typing import Dict, List, Optional, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder, format_distance


PSEUDOCODE: List[str] = [
    "function dijkstra(G, source):",               # 0
    "  dist[v] = ∞ for all v; dist[source] = 0",   # 1
    "  PQ.push((0, source))",                      # 2
    "  while PQ not empty:",                       # 3
    "    (d, u) = PQ.popMin()",                    # 4
    "    if d > dist[u]: continue",                # 5
    "    for (v, w) in adj(u):",                   # 6
    "      if dist[u] + w < dist[v]:",             # 7
    "        dist[v] = dist[u] + w; prev[v] = u",  # 8
    "        PQ.push((dist[v], v))",               # 9
    "  return dist, prev",                         # 10
]

INF = float("inf")


def distance_summary(dist: Dict[str, float]) -> str:
    return ", ".join(f"{nid}:{format_distance(d)}" for nid, d in dist.items())


def reconstruct_path(prev: Dict[str, Optional[str]], target: str) -> List[str]:
    """Walk predecessor links back from target.  [] when unreachable."""
    if target not in prev:
        return []
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        cur = prev.get(cur)
    path.reverse()
    return path


def generate_dijkstra_steps(graph: Graph, source: Optional[str] = None) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    if g.node_count == 0:
        sb.push("Graph is empty. No distances to compute", run, line=0)
        return sb.steps
    if source not in g.nodes:
        source = g.node_ids()[0]

    prev: Dict[str, Optional[str]] = {source: None}

    def meta() -> dict:
        return {"source": source, "predecessors": dict(prev)}

    sb.push(f"Dijkstra's algorithm starting from node {source}", run, line=0, metadata=meta())
    if g.has_negative_edges():
        sb.push("Warning: graph has negative edge weights. Distances may be wrong; "
                "use Bellman-Ford instead", run, line=0, metadata=meta())

    run.distances = {nid: INF for nid in g.nodes}
    run.distances[source] = 0
    sb.push(f"Initialized distances: {distance_summary(run.distances)}", run, line=1,
            metadata=meta())

    pq: List[Tuple[float, int, str]] = [(0, 0, source)]
    pushed = 1
    run.queue = [{"node": source, "distance": 0}]
    set_node(run, source, NodeState.FRONTIER)
    sb.push(f"Added source {source} to priority queue with distance 0", run, line=2,
            metadata=meta())

    done = set()
    while pq:
        d, _, u = heapq.heappop(pq)
        sb.reads += 1
        run.queue = [{"node": n, "distance": dd} for dd, _, n in sorted(pq)]

        sb.comparisons += 1
        if d > run.distances[u] or u in done:
            sb.push(f"Skipping stale entry for {u} (distance {format_distance(d)})", run,
                    line=5, metadata=meta())
            continue

        done.add(u)
        set_node(run, u, NodeState.CURRENT)
        sb.push(f"Processing node {u} with distance {format_distance(d)}", run, line=4,
                metadata=meta())

        for v, edge in g.neighbours(u):
            if v in done:
                continue
            old = run.distances[v]
            new = run.distances[u] + edge.weight
            sb.comparisons += 1
            set_edge(run, edge.id, EdgeState.CONSIDERING)
            sb.push(
                f"Checking edge {u} → {v} (weight {edge.weight:g}): "
                f"current={format_distance(run.distances[u])}, new={format_distance(new)}, "
                f"old={format_distance(old)}",
                run, line=7, metadata=meta(),
            )

            if new < old:
                run.distances[v] = new
                prev[v] = u
                sb.writes += 1
                heapq.heappush(pq, (new, pushed, v))
                pushed += 1
                run.queue = [{"node": n, "distance": dd} for dd, _, n in sorted(pq)]
                set_node(run, v, NodeState.FRONTIER)
                set_edge(run, edge.id, EdgeState.PATH)
                sb.push(f"Relaxed: dist[{v}] = {format_distance(new)} (via {u})", run,
                        line=8, metadata=meta())
            else:
                set_edge(run, edge.id, EdgeState.DEFAULT)

        set_node(run, u, NodeState.VISITED)
        run.order.append(u)

    _paint_tree(run.graph, prev)
    run.queue = []
    run.message = distance_summary(run.distances)
    sb.push(f"Dijkstra complete. Shortest distances: {distance_summary(run.distances)}",
            run, line=10, metadata=meta())
    return sb.steps


def _paint_tree(g: Graph, prev: Dict[str, Optional[str]]) -> None:
    """Final frame: shortest-path tree edges as PATH, everything else settled."""
    tree = set()
    for v, u in prev.items():
        if u is not None:
            edge = g.get_edge_between(u, v)
            if edge is not None:
                tree.add(edge.id)
    for edge in g.edges.values():
        edge.state = EdgeState.PATH if edge.id in tree else EdgeState.DEFAULT
    for node in g.nodes.values():
        if node.state in (NodeState.CURRENT, NodeState.FRONTIER):
            node.state = NodeState.VISITED
