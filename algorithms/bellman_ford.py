"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that handles NEGATIVE edge
weights (and reports negative cycles instead of looping forever).

Structure:
  • Up to |V|-1 rounds of relaxing every edge; a round with no update
    ends the loop early.
  • One detector pass that flags a negative cycle.

Emits a Step for:
  1. Start and distance initialisation
  2. Start of each round
  3. Each successful relaxation
  4. Early termination (round with no updates)
  5. Negative-cycle check and its outcome
  6. Final distances

Undirected edges are relaxed in both directions.  Step metadata carries
the current round, predecessor map and the `negative_cycle` flag.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph, Edge, NodeState, EdgeState
from algorithms.dijkstra import distance_summary
from algorithms.graph_run import start_run, set_node, set_edge
from algorithms.step import Step, StepBuilder, format_distance


PSEUDOCODE: List[str] = [
    "function bellmanFord(G, source):",           # 0
    "  dist[v] = ∞ for all v; dist[source] = 0",  # 1
    "  for i = 1 to |V| - 1:",                    # 2
    "    for each edge (u, v, w):",               # 3
    "      if dist[u] + w < dist[v]:",            # 4
    "        dist[v] = dist[u] + w; prev[v] = u", # 5
    "    if no update this round: break",         # 6
    "  for each edge (u, v, w):",                 # 7
    "    if dist[u] + w < dist[v]: negative cycle",  # 8
    "  return dist, prev",                        # 9
]

INF = float("inf")


def _directed_edges(g: Graph) -> List[Tuple[str, str, Edge]]:
    out = []
    for edge in g.edges.values():
        out.append((edge.source, edge.target, edge))
        if not g.directed:
            out.append((edge.target, edge.source, edge))
    return out


def generate_bellman_ford_steps(graph: Graph, source: Optional[str] = None) -> List[Step]:
    run = start_run(graph)
    g   = run.graph
    sb  = StepBuilder()

    if g.node_count == 0:
        sb.push("Graph is empty. No distances to compute", run, line=0)
        return sb.steps
    if source not in g.nodes:
        source = g.node_ids()[0]

    prev: Dict[str, Optional[str]] = {source: None}
    state = {"round": 0, "negative_cycle": False}

    def meta() -> dict:
        return {"source": source, "predecessors": dict(prev), **state}

    sb.push(f"Bellman-Ford starting from node {source}", run, line=0, metadata=meta())

    run.distances = {nid: INF for nid in g.nodes}
    run.distances[source] = 0
    set_node(run, source, NodeState.CURRENT)
    sb.push(f"Initialized distances: {distance_summary(run.distances)}", run, line=1,
            metadata=meta())

    edges  = _directed_edges(g)
    rounds = g.node_count - 1
    for i in range(1, rounds + 1):
        state["round"] = i
        sb.push(f"Iteration {i} of {rounds}", run, line=2, metadata=meta())

        updated = False
        for u, v, edge in edges:
            sb.comparisons += 1
            sb.reads += 1
            du = run.distances[u]
            if du == INF or du + edge.weight >= run.distances[v]:
                continue
            old = run.distances[v]
            run.distances[v] = du + edge.weight
            prev[v] = u
            sb.writes += 1
            updated = True
            set_edge(run, edge.id, EdgeState.CONSIDERING)
            set_node(run, v, NodeState.FRONTIER)
            sb.push(
                f"Relaxed edge {u}→{v}: {format_distance(old)} → "
                f"{format_distance(run.distances[v])} (via {u})",
                run, line=5, metadata=meta(),
            )
            set_edge(run, edge.id, EdgeState.PATH)

        if not updated:
            sb.push(f"No updates in iteration {i}. Algorithm can terminate early.", run,
                    line=6, metadata=meta())
            break

    sb.push("Checking for negative cycles...", run, line=7, metadata=meta())
    for u, v, edge in edges:
        sb.comparisons += 1
        du = run.distances[u]
        if du != INF and du + edge.weight < run.distances[v]:
            state["negative_cycle"] = True
            set_edge(run, edge.id, EdgeState.REJECTED)
            set_node(run, u, NodeState.CURRENT)
            set_node(run, v, NodeState.CURRENT)
            run.message = "Negative cycle detected"
            sb.push(f"Negative cycle detected at edge {u}→{v}!", run, line=8, metadata=meta())
            return sb.steps

    for edge in g.edges.values():
        on_tree = prev.get(edge.target) == edge.source or (
            not g.directed and prev.get(edge.source) == edge.target)
        edge.state = EdgeState.PATH if on_tree else EdgeState.DEFAULT
    for nid, node in g.nodes.items():
        node.state = NodeState.VISITED if run.distances[nid] != INF else NodeState.DEFAULT
    run.message = distance_summary(run.distances)
    sb.push(f"Complete! Shortest distances: {distance_summary(run.distances)}", run,
            line=9, metadata=meta())
    return sb.steps
