"""
node.py — Graph Node
=====================
Identity (id), canvas position and a visual state.  Everything an
algorithm learns about a node (distance, parent, in-degree, …) lives in
the algorithm's own snapshot fields, not on the node.
"""

from enum import Enum


# ---------------------------------------------------------------------------
# Node State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    DEFAULT  = "default"    # neutral
    CURRENT  = "current"    # the node being processed RIGHT NOW
    VISITED  = "visited"    # fully processed
    IN_MST   = "inMST"      # part of the spanning tree
    FRONTIER = "frontier"   # discovered, waiting in a queue / heap
    PATH     = "path"       # on a final path / order


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id    : Unique identifier, also the label drawn on the canvas.
        x, y  : Canvas coordinates in pixels.
        state : Current NodeState for visual encoding.
    """

    __slots__ = ("id", "x", "y", "state")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        state: NodeState = NodeState.DEFAULT,
    ):
        self.id:    str       = node_id
        self.x:     float     = x
        self.y:     float     = y
        self.state: NodeState = state

    def reset(self) -> None:
        self.state = NodeState.DEFAULT

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "x":     self.x,
            "y":     self.y,
            "state": self.state.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        state = NodeState(data.get("state", NodeState.DEFAULT.value))
        return cls(str(data["id"]), float(data.get("x", 0)), float(data.get("y", 0)), state)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, state={self.state.value}, pos=({self.x:.0f},{self.y:.0f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.id == other.id
            and self.state == other.state
            and (self.x, self.y) == (other.x, other.y)
        )

    def __hash__(self) -> int:
        return hash(self.id)
