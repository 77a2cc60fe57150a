"""
fifo_queue.py — Bounded FIFO Queue
===================================
enqueue at the rear, dequeue from the front, peek at the front.
A full or empty queue is reported as a step.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from algorithms.step import Step, StepBuilder


class QueueElementState(Enum):
    DEFAULT   = "default"
    ENQUEUING = "enqueuing"
    DEQUEUING = "dequeuing"
    FRONT     = "front"
    REAR      = "rear"


@dataclass
class QueueElement:
    value:  float
    state:  QueueElementState = QueueElementState.DEFAULT


@dataclass
class QueueData:
    elements:  List[QueueElement] = field(default_factory=list)
    max_size:  int                = 8


PSEUDOCODE: List[str] = [
    "enqueue(value):",                              # 0
    "  if size == maxSize: full",                   # 1
    "  A[rear] = value; rear = rear + 1",           # 2
    "dequeue():",                                   # 3
    "  if size == 0: empty",                        # 4
    "  value = A[front]; front = front + 1",        # 5
    "peek(): return A[front]",                      # 6
]

DEFAULT_MAX_SIZE = 8


def sample_queue(max_size: int = DEFAULT_MAX_SIZE) -> QueueData:
    data = QueueData(elements=[QueueElement(v) for v in (3, 14, 27)], max_size=max_size)
    _mark_ends(data.elements)
    return data


def _clone(data: QueueData) -> QueueData:
    return QueueData(elements=[QueueElement(e.value) for e in data.elements],
                     max_size=data.max_size)


def _mark_ends(elements: List[QueueElement]) -> None:
    for e in elements:
        e.state = QueueElementState.DEFAULT
    if elements:
        elements[-1].state = QueueElementState.REAR
        elements[0].state = QueueElementState.FRONT


def generate_enqueue_steps(data: QueueData, value: float) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()
    _mark_ends(work.elements)

    sb.push(f"Preparing to enqueue {value}", work, line=0)
    if len(work.elements) >= work.max_size:
        sb.push(f"Queue is full! Cannot enqueue {value}", work, line=1)
        return sb.steps

    sb.writes += 1
    _mark_ends(work.elements)
    if len(work.elements) > 1:
        work.elements[-1].state = QueueElementState.DEFAULT
    work.elements.append(QueueElement(value, QueueElementState.ENQUEUING))
    rear = len(work.elements) - 1
    sb.push(f"Adding {value} to the rear of the queue", work, line=2,
            active=[rear], modified=[rear])

    _mark_ends(work.elements)
    sb.push(f"Successfully enqueued {value}. Queue size: {len(work.elements)}", work, line=2)
    return sb.steps


def generate_dequeue_steps(data: QueueData) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()

    if not work.elements:
        sb.push("Queue is empty! Cannot dequeue", work, line=4)
        return sb.steps

    _mark_ends(work.elements)
    front = work.elements[0].value
    sb.push(f"Preparing to dequeue (front value: {front})", work, line=3, active=[0])

    sb.reads += 1
    work.elements[0].state = QueueElementState.DEQUEUING
    sb.push(f"Removing {front} from the front of the queue", work, line=5,
            active=[0], modified=[0])

    work.elements.pop(0)
    _mark_ends(work.elements)
    sb.push(f"Dequeued {front}. Queue size: {len(work.elements)}", work, line=5)
    return sb.steps


def generate_peek_steps(data: QueueData) -> List[Step]:
    work = _clone(data)
    sb = StepBuilder()
    _mark_ends(work.elements)

    if not work.elements:
        sb.push("Queue is empty. Nothing to peek.", work, line=6)
        return sb.steps

    sb.push("Looking at the front of the queue", work, line=6)
    sb.reads += 1
    sb.push(f"Front of queue is {work.elements[0].value}", work, line=6, active=[0])
    return sb.steps
