"""
avl.py — AVL Tree
==================
Self-balancing BST.  Insert is an ordinary BST descent followed by an
unwind along the recorded path:

    • each ancestor gets its height / balance factor refreshed
    • |balance factor| > 1 triggers one of the four classic cases,
      chosen by comparing the inserted value with the heavy child:

          bf > +1, value < left.value   →  LL  (rotate right)
          bf > +1, value > left.value   →  LR  (rotate left, then right)
          bf < -1, value > right.value  →  RR  (rotate left)
          bf < -1, value < right.value  →  RL  (rotate right, then left)

Every single rotation emits a pre-rotation step naming the case and a
post-rotation step with the new subtree root marked BALANCED.  The
working tree stays fully linked at every step; rotated subtrees are
re-attached to their parent (or become the root) before the next step.

Rotations are counted in `meta.swaps`.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from algorithms.bst import iter_nodes
from algorithms.step import Step, StepBuilder


class AVLNodeState(Enum):
    DEFAULT        = "default"
    CURRENT        = "current"
    COMPARING      = "comparing"
    ROTATING_LEFT  = "rotatingLeft"
    ROTATING_RIGHT = "rotatingRight"
    BALANCED       = "balanced"
    INSERTED       = "inserted"
    FOUND          = "found"
    NOT_FOUND      = "notFound"


@dataclass
class AVLNode:
    id:              str
    value:           float
    left:            Optional["AVLNode"] = None
    right:           Optional["AVLNode"] = None
    state:           AVLNodeState        = AVLNodeState.DEFAULT
    height:          int                 = 1
    balance_factor:  int                 = 0


@dataclass
class AVLData:
    root: Optional[AVLNode] = None


PSEUDOCODE: List[str] = [
    "insert(node, value):",                                     # 0
    "  standard BST insert",                                    # 1
    "  node.height = 1 + max(h(left), h(right))",               # 2
    "  bf = h(left) - h(right)",                                # 3
    "  if bf > 1 and value < left.value: rotateRight(node)",    # 4
    "  if bf < -1 and value > right.value: rotateLeft(node)",   # 5
    "  if bf > 1 and value > left.value: LR rotation",          # 6
    "  if bf < -1 and value < right.value: RL rotation",        # 7
    "search(value): BST descent",                               # 8
]

SAMPLE_VALUES = [30, 20, 40, 10, 25, 35, 50]

_CASE_NAMES = {
    "LL": "Left-Left",
    "RR": "Right-Right",
    "LR": "Left-Right",
    "RL": "Right-Left",
}


# ---------------------------------------------------------------------------
# Node maths
# ---------------------------------------------------------------------------
def node_id(value: float) -> str:
    return f"avl-{value:g}" if isinstance(value, float) else f"avl-{value}"


def height(node: Optional[AVLNode]) -> int:
    return node.height if node else 0


def refresh(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))
    node.balance_factor = height(node.left) - height(node.right)


def rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    refresh(y)
    refresh(x)
    return x


def rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    refresh(x)
    refresh(y)
    return y


def _reset(root: Optional[AVLNode]) -> None:
    for node in iter_nodes(root):
        node.state = AVLNodeState.DEFAULT


def build_tree(values) -> AVLData:
    """Silent AVL inserts, used for samples and fixtures."""
    data = AVLData()
    for v in values:
        data.root = _insert_silent(data.root, v)
    return data


def _insert_silent(node: Optional[AVLNode], value: float) -> AVLNode:
    if node is None:
        return AVLNode(id=node_id(value), value=value)
    if value == node.value:
        return node
    if value < node.value:
        node.left = _insert_silent(node.left, value)
    else:
        node.right = _insert_silent(node.right, value)
    refresh(node)
    bf = node.balance_factor
    if bf > 1:
        if value > node.left.value:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if bf < -1:
        if value < node.right.value:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def sample_tree() -> AVLData:
    return build_tree(SAMPLE_VALUES)


def is_balanced(node: Optional[AVLNode]) -> bool:
    return all(abs(n.balance_factor) <= 1 for n in iter_nodes(node))


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def generate_insert_steps(data: AVLData, value: float) -> List[Step]:
    work = copy.deepcopy(data)
    _reset(work.root)
    sb = StepBuilder()

    sb.push(f"Inserting value: {value}", work, line=0)

    if work.root is None:
        sb.writes += 1
        work.root = AVLNode(id=node_id(value), value=value, state=AVLNodeState.INSERTED)
        sb.push(f"Created new node with value {value}", work, line=1)
        sb.push("Insertion complete. Tree is balanced.", work, line=0)
        return sb.steps

    # -- BST descent, remembering the path --
    path: List[AVLNode] = []
    node = work.root
    while True:
        sb.comparisons += 1
        _reset(work.root)
        node.state = AVLNodeState.COMPARING
        sb.push(f"Comparing {value} with {node.value}", work, line=1)

        if value == node.value:
            node.state = AVLNodeState.FOUND
            sb.push(f"Value {value} already exists in tree", work, line=1)
            _reset(work.root)
            sb.push(f"Tree unchanged: {value} already exists", work, line=0)
            return sb.steps

        path.append(node)
        side = "left" if value < node.value else "right"
        child = getattr(node, side)
        if child is None:
            sb.writes += 1
            setattr(node, side, AVLNode(id=node_id(value), value=value,
                                        state=AVLNodeState.INSERTED))
            _reset(work.root)
            getattr(node, side).state = AVLNodeState.INSERTED
            sb.push(f"Created new node with value {value} as {side} child of {node.value}",
                    work, line=1)
            break
        node = child

    # -- unwind: heights, balance factors, rotations --
    for depth in range(len(path) - 1, -1, -1):
        node = path[depth]
        refresh(node)
        _reset(work.root)
        node.state = AVLNodeState.CURRENT
        sb.push(
            f"Updated {node.value}: height = {node.height}, "
            f"balance factor = {node.balance_factor}",
            work, line=3,
        )

        bf = node.balance_factor
        if -1 <= bf <= 1:
            continue

        if bf > 1:
            case = "LL" if value < node.left.value else "LR"
        else:
            case = "RR" if value > node.right.value else "RL"

        parent = path[depth - 1] if depth > 0 else None
        new_root = _rebalance(work, parent, node, case, sb)
        path[depth] = new_root

    _reset(work.root)
    inserted = _find(work.root, value)
    if inserted is not None:
        inserted.state = AVLNodeState.INSERTED
    sb.push("Insertion complete. Tree is balanced.", work, line=0)
    return sb.steps


def _relink(work: AVLData, parent: Optional[AVLNode], old: AVLNode, new: AVLNode) -> None:
    if parent is None:
        work.root = new
    elif parent.left is old:
        parent.left = new
    else:
        parent.right = new


def _rotate(
    work: AVLData,
    parent: Optional[AVLNode],
    node: AVLNode,
    direction: str,
    pre: str,
    sb: StepBuilder,
    line: int,
) -> AVLNode:
    _reset(work.root)
    node.state = (AVLNodeState.ROTATING_RIGHT if direction == "right"
                  else AVLNodeState.ROTATING_LEFT)
    sb.push(pre, work, line=line)

    sb.swaps += 1
    new_root = rotate_right(node) if direction == "right" else rotate_left(node)
    _relink(work, parent, node, new_root)

    _reset(work.root)
    new_root.state = AVLNodeState.BALANCED
    sb.push(
        f"{direction.capitalize()} rotation complete. New subtree root: {new_root.value}",
        work, line=line,
    )
    return new_root


def _rebalance(
    work: AVLData,
    parent: Optional[AVLNode],
    node: AVLNode,
    case: str,
    sb: StepBuilder,
) -> AVLNode:
    label = _CASE_NAMES[case]
    if case == "LL":
        return _rotate(work, parent, node, "right",
                       f"{label} case at {node.value}. Performing right rotation.", sb, 4)
    if case == "RR":
        return _rotate(work, parent, node, "left",
                       f"{label} case at {node.value}. Performing left rotation.", sb, 5)
    if case == "LR":
        _rotate(work, node, node.left, "left",
                f"{label} case at {node.value}. First: left rotate at {node.left.value}",
                sb, 6)
        return _rotate(work, parent, node, "right",
                       f"Now: right rotate at {node.value}", sb, 6)
    _rotate(work, node, node.right, "right",
            f"{label} case at {node.value}. First: right rotate at {node.right.value}",
            sb, 7)
    return _rotate(work, parent, node, "left",
                   f"Now: left rotate at {node.value}", sb, 7)


def _find(node: Optional[AVLNode], value: float) -> Optional[AVLNode]:
    while node is not None and node.value != value:
        node = node.left if value < node.value else node.right
    return node


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def generate_search_steps(data: AVLData, value: float) -> List[Step]:
    work = copy.deepcopy(data)
    _reset(work.root)
    sb = StepBuilder()

    sb.push(f"Searching for value: {value}", work, line=8)
    node = work.root
    while node is not None:
        sb.comparisons += 1
        _reset(work.root)
        node.state = AVLNodeState.COMPARING
        sb.push(f"Comparing {value} with {node.value}", work, line=8)

        if value == node.value:
            node.state = AVLNodeState.FOUND
            sb.push(f"Found {value}!", work, line=8)
            return sb.steps

        node.state = AVLNodeState.CURRENT
        if value < node.value:
            sb.push(f"{value} < {node.value}, going left", work, line=8)
            node = node.left
        else:
            sb.push(f"{value} > {node.value}, going right", work, line=8)
            node = node.right

    _reset(work.root)
    sb.push(f"Value {value} not found in tree", work, line=8)
    return sb.steps
