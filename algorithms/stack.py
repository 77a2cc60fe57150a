"""
stack.py — Bounded LIFO Stack
==============================
push / pop / peek against a fixed `max_size`.  Overflow and underflow
are reported as steps, never raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from algorithms.step import Step, StepBuilder


class StackElementState(Enum):
    DEFAULT = "default"
    PUSHING = "pushing"
    POPPING = "popping"
    TOP     = "top"


@dataclass
class StackElement:
    value:  float
    state:  StackElementState = StackElementState.DEFAULT


@dataclass
class StackData:
    elements:  List[StackElement] = field(default_factory=list)
    max_size:  int                = 8


PSEUDOCODE: List[str] = [
    "push(value):",                                 # 0
    "  if top == maxSize - 1: overflow",            # 1
    "  top = top + 1; A[top] = value",              # 2
    "pop():",                                       # 3
    "  if top == -1: underflow",                    # 4
    "  value = A[top]; top = top - 1",              # 5
    "peek(): return A[top]",                        # 6
]

DEFAULT_MAX_SIZE = 8


def sample_stack(max_size: int = DEFAULT_MAX_SIZE) -> StackData:
    data = StackData(elements=[StackElement(v) for v in (15, 42, 7)], max_size=max_size)
    _mark_top(data.elements)
    return data


def _clone(data: StackData) -> StackData:
    return StackData(elements=[StackElement(e.value) for e in data.elements],
                     max_size=data.max_size)


def _mark_top(elements: List[StackElement]) -> None:
    for e in elements:
        e.state = StackElementState.DEFAULT
    if elements:
        elements[-1].state = StackElementState.TOP


def generate_push_steps(data: StackData, value: float) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()
    _mark_top(work.elements)

    sb.push(f"Preparing to push {value} onto the stack", work, line=0)
    if len(work.elements) >= work.max_size:
        sb.push(f"Stack overflow! Cannot push {value} - stack is full", work, line=1)
        return sb.steps

    sb.writes += 1
    _mark_top(work.elements)
    if work.elements:
        work.elements[-1].state = StackElementState.DEFAULT
    work.elements.append(StackElement(value, StackElementState.PUSHING))
    top = len(work.elements) - 1
    sb.push(f"Pushing {value} onto the stack", work, line=2, active=[top], modified=[top])

    _mark_top(work.elements)
    sb.push(f"Successfully pushed {value}. Stack size: {len(work.elements)}", work, line=2)
    return sb.steps


def generate_pop_steps(data: StackData) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()

    if not work.elements:
        sb.push("Stack underflow! Cannot pop - stack is empty", work, line=4)
        return sb.steps

    _mark_top(work.elements)
    top = len(work.elements) - 1
    popped = work.elements[top].value
    sb.push(f"Preparing to pop from stack (top value: {popped})", work, line=3, active=[top])

    sb.reads += 1
    work.elements[top].state = StackElementState.POPPING
    sb.push(f"Popping {popped} from the stack", work, line=5, active=[top], modified=[top])

    work.elements.pop()
    _mark_top(work.elements)
    sb.push(f"Popped {popped}. Stack size: {len(work.elements)}", work, line=5)
    return sb.steps


def generate_peek_steps(data: StackData) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()
    _mark_top(work.elements)

    if not work.elements:
        sb.push("Stack is empty. Nothing to peek.", work, line=6)
        return sb.steps

    top = len(work.elements) - 1
    sb.push("Looking at the top of the stack", work, line=6)
    sb.reads += 1
    sb.push(f"Top of stack is {work.elements[top].value}", work, line=6, active=[top])
    return sb.steps
