"""
samples.py — Built-in Demo Graphs
==================================
Fixed graphs each graph visualizer starts from.  Every call builds a
fresh Graph so callers may mutate the result freely.
"""

from graph.graph import Graph


def mst_graph() -> Graph:
    """Undirected, six nodes, nine weighted edges.  MST weight = 14."""
    return Graph.from_edge_list(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 4), ("A", "C", 6), ("A", "D", 2),
            ("B", "C", 3), ("B", "E", 5), ("C", "F", 1),
            ("D", "E", 7), ("D", "F", 8), ("E", "F", 4),
        ],
    )


def shortest_path_graph() -> Graph:
    """Undirected, seven nodes, non-negative weights."""
    return Graph.from_edge_list(
        ["A", "B", "C", "D", "E", "F", "G"],
        [
            ("A", "B", 4), ("A", "C", 2), ("B", "D", 5), ("B", "C", 1),
            ("C", "D", 8), ("C", "E", 10), ("D", "E", 2), ("D", "F", 6),
            ("E", "F", 3), ("F", "G", 1),
        ],
    )


def negative_weight_graph() -> Graph:
    """Directed, negative edges but no negative cycle."""
    return Graph.from_edge_list(
        ["A", "B", "C", "D", "E"],
        [
            ("A", "B", 6), ("A", "C", 7), ("B", "C", 8), ("B", "D", 5),
            ("B", "E", -4), ("C", "D", -3), ("C", "E", 9), ("D", "B", -2),
            ("E", "A", 2), ("E", "D", 7),
        ],
        directed=True,
    )


def dag() -> Graph:
    """Directed acyclic graph used by topological sort."""
    return Graph.from_edge_list(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("B", "E", 1),
            ("C", "E", 1), ("D", "F", 1), ("E", "F", 1),
        ],
        directed=True,
    )


def traversal_graph() -> Graph:
    """Undirected, unweighted tree-like graph with one cycle."""
    return Graph.from_edge_list(
        ["A", "B", "C", "D", "E", "F", "G"],
        [
            ("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("B", "E", 1),
            ("C", "F", 1), ("E", "F", 1), ("F", "G", 1),
        ],
    )
