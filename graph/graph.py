"""
graph.py — Graph Container & Generators
========================================
Single source of truth for the graph inside one snapshot.  Algorithms
and the renderer both talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / get)
  2. Adjacency queries                      (neighbours, get_edge_between, …)
  3. Graph-generation factory methods       (random connected, random DAG)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. Reset helpers                          (wipe visual state, keep structure)

Design decisions:
  - Nodes & edges stored in insertion-ordered dicts keyed by id for O(1)
    lookup and deterministic iteration.
  - A separate adjacency dict  `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally so neighbour queries are O(degree), not O(E).
  - `to_dict()` emits the list form `{nodes, edges, directed}` used on the
    wire; `from_dict()` accepts the same.
"""

import math
import random
from typing import Dict, List, Optional, Tuple

from graph.node import Node, NodeState
from graph.edge import Edge, EdgeState


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : {edge_id: Edge}
        directed   : bool – graph-level directedness
        _adj       : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, directed: bool = False):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}

    # ---------- Nodes ----------
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, x: float = 0.0, y: float = 0.0) -> Node:
        return self.add_node(Node(node_id, x, y))

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ---------- Edges ----------
    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append((edge.target, edge.id))
        if not self.directed:
            self._adj.setdefault(edge.target, []).append((edge.source, edge.id))
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0,
                    edge_id: Optional[str] = None) -> Edge:
        return self.add_edge(Edge(source, target, weight, edge_id=edge_id))

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    # ---------- Adjacency ----------
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """[(neighbour_id, edge), …] in edge-insertion order."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def in_degrees(self) -> Dict[str, int]:
        degrees = {nid: 0 for nid in self.nodes}
        for edge in self.edges.values():
            degrees[edge.target] = degrees.get(edge.target, 0) + 1
        return degrees

    # ---------- Reset ----------
    def reset_states(self) -> None:
        """Wipe visual state on every node and edge, keep structure."""
        for n in self.nodes.values():
            n.reset()
        for e in self.edges.values():
            e.reset()

    # ---------- Serialisation ----------
    def to_dict(self) -> dict:
        return {
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=bool(data.get("directed", False)))
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    @classmethod
    def from_edge_list(
        cls,
        node_ids: List[str],
        edges: List[Tuple[str, str, float]],
        directed: bool = False,
        canvas_w: float = 600,
        canvas_h: float = 400,
    ) -> "Graph":
        """Build a graph from (source, target, weight) triples, circle layout."""
        g = cls(directed=directed)
        for nid, (x, y) in zip(node_ids, circle_layout(len(node_ids), canvas_w, canvas_h)):
            g.create_node(nid, x, y)
        for s, t, w in edges:
            g.create_edge(s, t, w)
        return g

    # ---------- Generators ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 6,
        edge_probability: float = 0.4,
        directed: bool = False,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = 600,
        canvas_h: float = 400,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph with a spanning backbone so it is
        always connected.  Node ids are letters A, B, C, …
        """
        rng = random.Random(seed)
        ids = node_letters(num_nodes)
        g = cls.from_edge_list(ids, [], directed=directed, canvas_w=canvas_w, canvas_h=canvas_h)

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.create_edge(ids[i], ids[j], rng.randint(*weight_range))

        # guarantee connectivity: add a spanning-tree backbone
        shuffled = list(ids)
        rng.shuffle(shuffled)
        for k in range(1, len(shuffled)):
            if not g.get_edge_between(shuffled[k - 1], shuffled[k]) and \
                    not g.get_edge_between(shuffled[k], shuffled[k - 1]):
                g.create_edge(shuffled[k - 1], shuffled[k], rng.randint(*weight_range))
        return g

    @classmethod
    def generate_random_dag(
        cls,
        num_nodes: int = 6,
        edge_probability: float = 0.4,
        seed: Optional[int] = None,
    ) -> "Graph":
        """Edges only go from a lower to a higher letter, so no cycles."""
        rng = random.Random(seed)
        ids = node_letters(num_nodes)
        g = cls.from_edge_list(ids, [], directed=True)
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.create_edge(ids[i], ids[j], 1)
        return g

    # ---------- Info ----------
    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges.values())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.edge_count})"


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------
def node_letters(n: int) -> List[str]:
    """A … Z, then A1, B1, … for larger graphs."""
    out = []
    for i in range(n):
        letter = chr(ord("A") + i % 26)
        out.append(letter if i < 26 else f"{letter}{i // 26}")
    return out


def circle_layout(n: int, canvas_w: float = 600, canvas_h: float = 400) -> List[Tuple[float, float]]:
    if n == 0:
        return []
    cx, cy = canvas_w / 2, canvas_h / 2
    radius = min(canvas_w, canvas_h) * 0.38
    return [
        (round(cx + radius * math.cos(2 * math.pi * i / n - math.pi / 2), 1),
         round(cy + radius * math.sin(2 * math.pi * i / n - math.pi / 2), 1))
        for i in range(n)
    ]


__all__ = ["Graph", "Node", "Edge", "NodeState", "EdgeState", "node_letters", "circle_layout"]
