"""
bst.py — Binary Search Tree
============================
insert / search / delete / traversals (in-, pre-, post-order).

Nodes are plain recursive dataclasses, each owned by exactly one parent
link.  Layout (x, y) is never stored; the renderer derives it from the
shape of the tree.  Node ids are `bst-<value>`, which is stable because
the tree rejects duplicates.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from algorithms.step import Step, StepBuilder


class TreeNodeState(Enum):
    DEFAULT   = "default"
    CURRENT   = "current"
    FOUND     = "found"
    VISITED   = "visited"
    INSERTING = "inserting"
    PATH      = "path"


@dataclass
class BSTNode:
    id:     str
    value:  float
    left:   Optional["BSTNode"] = None
    right:  Optional["BSTNode"] = None
    state:  TreeNodeState       = TreeNodeState.DEFAULT


@dataclass
class BSTData:
    root: Optional[BSTNode] = None


PSEUDOCODE: List[str] = [
    "insert(node, value):",                                 # 0
    "  if node == null: return new Node(value)",            # 1
    "  if value < node.value: node.left = insert(node.left, value)",    # 2
    "  else if value > node.value: node.right = insert(node.right, value)",  # 3
    "  else: value already exists",                         # 4
    "search(node, value):",                                 # 5
    "  if node == null or node.value == value: return node",  # 6
    "  go left if value < node.value, else right",          # 7
    "delete(node, value):",                                 # 8
    "  leaf / one child: splice the node out",              # 9
    "  two children: copy in-order successor, delete it",   # 10
    "inorder(node): inorder(left); visit(node); inorder(right)",  # 11
]

SAMPLE_VALUES = [50, 30, 70, 20, 40, 60, 80]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def node_id(value: float) -> str:
    return f"bst-{value:g}" if isinstance(value, float) else f"bst-{value}"


def build_tree(values) -> BSTData:
    """Plain (silent) inserts, used for samples and test fixtures."""
    data = BSTData()
    for v in values:
        if data.root is None:
            data.root = BSTNode(id=node_id(v), value=v)
            continue
        node = data.root
        while True:
            if v == node.value:
                break
            side = "left" if v < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, BSTNode(id=node_id(v), value=v))
                break
            node = child
    return data


def sample_tree() -> BSTData:
    return build_tree(SAMPLE_VALUES)


def iter_nodes(node: Optional[BSTNode]) -> Iterator[BSTNode]:
    """Pre-order walk; works for any node with .left / .right."""
    if node is None:
        return
    yield node
    yield from iter_nodes(node.left)
    yield from iter_nodes(node.right)


def inorder_values(node) -> List[float]:
    if node is None:
        return []
    return inorder_values(node.left) + [node.value] + inorder_values(node.right)


def reset_states(root, default=TreeNodeState.DEFAULT) -> None:
    for node in iter_nodes(root):
        node.state = default


def _start(data: BSTData) -> BSTData:
    work = copy.deepcopy(data)
    reset_states(work.root)
    return work


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def generate_insert_steps(data: BSTData, value: float) -> List[Step]:
    work = _start(data)
    sb = StepBuilder()

    sb.push(f"Inserting {value} into the BST", work, line=0)

    if work.root is None:
        sb.writes += 1
        work.root = BSTNode(id=node_id(value), value=value, state=TreeNodeState.INSERTING)
        sb.push(f"Tree is empty. {value} becomes the root", work, line=1)
        reset_states(work.root)
        sb.push(f"Inserted {value}", work, line=1)
        return sb.steps

    node = work.root
    while True:
        sb.comparisons += 1
        node.state = TreeNodeState.CURRENT
        if value == node.value:
            node.state = TreeNodeState.FOUND
            sb.push(f"{value} already exists in the tree. Nothing to insert.", work, line=4)
            reset_states(work.root)
            sb.push(f"Tree unchanged: {value} already exists", work, line=4)
            return sb.steps

        side = "left" if value < node.value else "right"
        op = "<" if side == "left" else ">"
        sb.push(f"{value} {op} {node.value}, going {side}", work, line=2 if side == "left" else 3)
        node.state = TreeNodeState.PATH

        child = getattr(node, side)
        if child is None:
            sb.writes += 1
            setattr(node, side, BSTNode(id=node_id(value), value=value,
                                        state=TreeNodeState.INSERTING))
            sb.push(f"Inserted {value} as {side} child of {node.value}", work, line=1)
            break
        node = child

    reset_states(work.root)
    sb.push(f"Insertion of {value} complete", work, line=0)
    return sb.steps


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def generate_search_steps(data: BSTData, value: float) -> List[Step]:
    work = _start(data)
    sb = StepBuilder()

    sb.push(f"Searching for {value}", work, line=5)

    node = work.root
    if node is None:
        sb.push(f"Tree is empty. {value} not found", work, line=6)
        return sb.steps

    while node is not None:
        sb.comparisons += 1
        if value == node.value:
            node.state = TreeNodeState.FOUND
            sb.push(f"Found {value}!", work, line=6)
            return sb.steps

        node.state = TreeNodeState.CURRENT
        side = "left" if value < node.value else "right"
        op = "<" if side == "left" else ">"
        sb.push(f"{value} {op} {node.value}, going {side}", work, line=7)
        node.state = TreeNodeState.VISITED
        node = getattr(node, side)

    reset_states(work.root)
    sb.push(f"{value} not found in the tree", work, line=6)
    return sb.steps


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------
def generate_delete_steps(data: BSTData, value: float) -> List[Step]:
    work = _start(data)
    sb = StepBuilder()

    sb.push(f"Deleting {value} from the BST", work, line=8)

    parent: Optional[BSTNode] = None
    node = work.root
    while node is not None:
        sb.comparisons += 1
        if value == node.value:
            break
        node.state = TreeNodeState.CURRENT
        side = "left" if value < node.value else "right"
        op = "<" if side == "left" else ">"
        sb.push(f"{value} {op} {node.value}, going {side}", work, line=7)
        node.state = TreeNodeState.PATH
        parent, node = node, getattr(node, side)

    if node is None:
        reset_states(work.root)
        sb.push(f"{value} not found in the tree. Nothing to delete.", work, line=8)
        return sb.steps

    node.state = TreeNodeState.FOUND
    sb.push(f"Found {value}", work, line=8)

    if node.left is not None and node.right is not None:
        # two children: pull up the in-order successor
        succ_parent, succ = node, node.right
        succ.state = TreeNodeState.CURRENT
        sb.reads += 1
        sb.push(f"{value} has two children. Looking for in-order successor in right subtree",
                work, line=10)
        while succ.left is not None:
            succ.state = TreeNodeState.PATH
            succ_parent, succ = succ, succ.left
            succ.state = TreeNodeState.CURRENT
            sb.reads += 1
            sb.push(f"Moving left to {succ.value}", work, line=10)

        sb.writes += 1
        node.value, node.id = succ.value, succ.id
        node.state = TreeNodeState.INSERTING
        sb.push(f"Replacing {value} with successor {succ.value}", work, line=10)

        sb.writes += 1
        if succ_parent is node:
            succ_parent.right = succ.right
        else:
            succ_parent.left = succ.right
        sb.push("Removed successor's original node", work, line=10)
    else:
        child = node.left if node.left is not None else node.right
        sb.writes += 1
        if parent is None:
            work.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        kind = "leaf" if child is None else "node with one child"
        sb.push(f"Removed {kind} {value}", work, line=9)

    reset_states(work.root)
    sb.push(f"Deletion of {value} complete", work, line=8)
    return sb.steps


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def generate_traversal_steps(data: BSTData, order: str = "inorder") -> List[Step]:
    work = _start(data)
    sb = StepBuilder()
    visited: List[float] = []

    sb.push(f"Starting {order} traversal", work, line=11)
    if work.root is None:
        sb.push("Tree is empty. Nothing to traverse.", work, line=11)
        return sb.steps

    def visit(node: BSTNode) -> None:
        sb.reads += 1
        visited.append(node.value)
        node.state = TreeNodeState.CURRENT
        sb.push(f"Visit {node.value}. Sequence so far: {visited}", work, line=11)
        node.state = TreeNodeState.VISITED

    def walk(node: Optional[BSTNode]) -> None:
        if node is None:
            return
        if order == "preorder":
            visit(node)
        walk(node.left)
        if order == "inorder":
            visit(node)
        walk(node.right)
        if order == "postorder":
            visit(node)

    walk(work.root)
    reset_states(work.root)
    sb.push(f"{order.capitalize()} traversal: {visited}", work, line=11)
    return sb.steps


def generate_inorder_steps(data: BSTData) -> List[Step]:
    return generate_traversal_steps(data, "inorder")
