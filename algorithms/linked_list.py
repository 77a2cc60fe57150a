"""
linked_list.py — Singly Linked List
====================================
Insert (tail / head), delete-by-value and search.

Nodes carry a stable `id` so a renderer can track identity across
snapshots even though positions shift after a delete.  New ids are
`node-<n>` with n one past the largest id already in the list, which
keeps generation deterministic.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from algorithms.step import Step, StepBuilder


class ListNodeState(Enum):
    DEFAULT   = "default"
    CURRENT   = "current"
    FOUND     = "found"
    INSERTING = "inserting"
    DELETING  = "deleting"


@dataclass
class ListNode:
    id:     str
    value:  float
    state:  ListNodeState = ListNodeState.DEFAULT


@dataclass
class LinkedListData:
    nodes: List[ListNode] = field(default_factory=list)


PSEUDOCODE: List[str] = [
    "insertAtTail(value):",                         # 0
    "  node = new Node(value)",                     # 1
    "  if head == null: head = node; return",       # 2
    "  cur = head",                                 # 3
    "  while cur.next != null: cur = cur.next",     # 4
    "  cur.next = node",                            # 5
    "delete(value):",                               # 6
    "  walk until cur.value == value",              # 7
    "  prev.next = cur.next",                       # 8
    "search(value):",                               # 9
    "  for cur in list:",                           # 10
    "    if cur.value == value: return cur",        # 11
    "  return null",                                # 12
]

_ID_RE = re.compile(r"^node-(\d+)$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def sample_list() -> LinkedListData:
    return LinkedListData(nodes=[
        ListNode(id=f"node-{i}", value=v) for i, v in enumerate([10, 20, 30, 40])
    ])


def next_node_id(nodes: List[ListNode]) -> str:
    highest = -1
    for node in nodes:
        m = _ID_RE.match(node.id)
        if m:
            highest = max(highest, int(m.group(1)))
    return f"node-{highest + 1}"


def _clone(data: LinkedListData) -> LinkedListData:
    return LinkedListData(nodes=[ListNode(id=n.id, value=n.value) for n in data.nodes])


def _paint(nodes: List[ListNode], **states: List[int]) -> None:
    for node in nodes:
        node.state = ListNodeState.DEFAULT
    for name, indices in states.items():
        for i in indices:
            nodes[i].state = ListNodeState[name.upper()]


def _fmt(nodes: List[ListNode]) -> str:
    return " → ".join(str(n.value) for n in nodes) or "(empty)"


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def generate_insert_tail_steps(data: LinkedListData, value: float) -> List[Step]:
    work = _clone(data)
    nodes = work.nodes
    sb = StepBuilder()

    sb.push(f"Preparing to insert {value} at the tail", work, line=0)
    new_node = ListNode(id=next_node_id(nodes), value=value, state=ListNodeState.INSERTING)

    if not nodes:
        sb.writes += 1
        nodes.append(new_node)
        sb.push(f"List is empty. Creating new head node with value {value}", work,
                line=2, active=[0], modified=[0])
        _paint(nodes)
        sb.push(f"Successfully inserted {value} as head", work, line=2)
        return sb.steps

    for i, node in enumerate(nodes):
        sb.reads += 1
        _paint(nodes, current=[i])
        if i < len(nodes) - 1:
            desc = f"Traversing: at node {node.value}, moving to next"
        else:
            desc = f"Reached tail node {node.value}"
        sb.push(desc, work, line=4, active=[i])

    sb.writes += 1
    _paint(nodes)
    nodes.append(new_node)
    sb.push(f"Inserting new node with value {value} after tail", work, line=5,
            active=[len(nodes) - 1], modified=[len(nodes) - 1])

    _paint(nodes)
    sb.push(f"Successfully inserted {value}. List length: {len(nodes)}", work, line=5)
    return sb.steps


def generate_insert_head_steps(data: LinkedListData, value: float) -> List[Step]:
    work = _clone(data)
    nodes = work.nodes
    sb = StepBuilder()

    sb.push(f"Preparing to insert {value} at the head", work, line=1)
    sb.writes += 1
    nodes.insert(0, ListNode(id=next_node_id(nodes), value=value,
                             state=ListNodeState.INSERTING))
    sb.push(f"New node {value} now points to the old head", work, line=1,
            active=[0], modified=[0])
    _paint(nodes)
    sb.push(f"Successfully inserted {value} as head. List length: {len(nodes)}",
            work, line=1)
    return sb.steps


def generate_delete_steps(data: LinkedListData, value: float) -> List[Step]:
    work = _clone(data)
    nodes = work.nodes
    sb = StepBuilder()

    sb.push(f"Searching for node with value {value} to delete", work, line=6)
    if not nodes:
        sb.push("List is empty. Nothing to delete.", work, line=6)
        return sb.steps

    target: Optional[int] = None
    for i, node in enumerate(nodes):
        sb.reads += 1
        sb.comparisons += 1
        is_match = node.value == value
        _paint(nodes, **({"found": [i]} if is_match else {"current": [i]}))
        if is_match:
            sb.push(f"Found node with value {value} at position {i}", work,
                    line=7, active=[i])
            target = i
            break
        sb.push(f"Checking node {node.value}: not a match", work, line=7, active=[i])

    if target is None:
        _paint(nodes)
        sb.push(f"Value {value} not found in the list", work, line=7)
        return sb.steps

    sb.writes += 1
    _paint(nodes, deleting=[target])
    sb.push(f"Deleting node with value {value}", work, line=8,
            active=[target], modified=[target])

    del nodes[target]
    _paint(nodes)
    sb.push(f"Successfully deleted {value}. List length: {len(nodes)}", work, line=8)
    return sb.steps


def generate_search_steps(data: LinkedListData, value: float) -> List[Step]:
    work = _clone(data)
    nodes = work.nodes
    sb = StepBuilder()

    sb.push(f"Searching for {value} in list {_fmt(nodes)}", work, line=9)
    for i, node in enumerate(nodes):
        sb.reads += 1
        sb.comparisons += 1
        if node.value == value:
            _paint(nodes, found=[i])
            sb.push(f"Found {value} at position {i}", work, line=11, active=[i])
            return sb.steps
        _paint(nodes, current=[i])
        sb.push(f"Checking node {node.value}: not a match", work, line=10, active=[i])

    _paint(nodes)
    sb.push(f"Value {value} not found in the list", work, line=12)
    return sb.steps
