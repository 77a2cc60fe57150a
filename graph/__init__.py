"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
    from graph import samples
"""

from graph.node  import Node,  NodeState
from graph.edge  import Edge,  EdgeState
from graph.graph import Graph, node_letters, circle_layout
from graph import samples

__all__ = [
    "Node",      "NodeState",
    "Edge",      "EdgeState",
    "Graph",     "node_letters",   "circle_layout",
    "samples",
]
