"""
edge.py — Graph Edge
====================
Connects two nodes.  Carries a weight and its own visual state so the
renderer can colour-code edges as Considering / In-MST / Rejected /
Path exactly as the algorithm touches them.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Directedness is a graph-level flag; an undirected edge can be walked
    from either endpoint.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Edge State Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    DEFAULT     = "default"       # thin, neutral grey
    CONSIDERING = "considering"   # the edge under inspection RIGHT NOW
    IN_MST      = "inMST"         # accepted into the spanning tree
    REJECTED    = "rejected"      # explicitly skipped (would form a cycle, …)
    PATH        = "path"          # on a final shortest path / relaxed tree


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id     : Unique identifier (e.g. "A-B").
        source : ID of the tail node.
        target : ID of the head node.
        weight : Numeric cost (default 1).  Can be negative for Bellman-Ford.
        state  : EdgeState for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "state")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
        state: EdgeState = EdgeState.DEFAULT,
    ):
        self.id:     str       = edge_id or f"{source}-{target}"
        self.source: str       = source
        self.target: str       = target
        self.weight: float     = weight
        self.state:  EdgeState = state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.state = EdgeState.DEFAULT

    @property
    def label(self) -> str:
        return f"{self.source}-{self.target}"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "state":  self.state.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=str(data["source"]),
            target=str(data["target"]),
            weight=data.get("weight", 1.0),
            edge_id=data.get("id"),
            state=EdgeState(data.get("state", EdgeState.DEFAULT.value)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source}-{self.target}, w={self.weight}, state={self.state.value})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.id == other.id
            and self.state == other.state
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash(self.id)
