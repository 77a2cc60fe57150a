from algorithms import binary_heap, fifo_queue, linked_list, stack
from algorithms.binary_heap import HeapData, build_heap
from algorithms.fifo_queue import QueueData, QueueElement
from algorithms.linked_list import LinkedListData, ListNode
from algorithms.stack import StackData, StackElement


def _values(nodes):
    return [n.value for n in nodes]


def _is_heap(values, heap_type):
    for i in range(len(values)):
        for c in (2 * i + 1, 2 * i + 2):
            if c < len(values):
                if heap_type == "max" and values[c] > values[i]:
                    return False
                if heap_type == "min" and values[c] < values[i]:
                    return False
    return True


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
def test_insert_tail_appends_with_next_id():
    steps = linked_list.generate_insert_tail_steps(linked_list.sample_list(), 50)
    final = steps[-1].snapshot.data.nodes

    assert _values(final) == [10, 20, 30, 40, 50]
    assert final[-1].id == "node-4"
    assert steps[-1].description == "Successfully inserted 50. List length: 5"


def test_insert_tail_into_empty_list():
    steps = linked_list.generate_insert_tail_steps(LinkedListData(), 7)
    assert _values(steps[-1].snapshot.data.nodes) == [7]
    assert steps[-1].snapshot.data.nodes[0].id == "node-0"


def test_insert_head_prepends():
    steps = linked_list.generate_insert_head_steps(linked_list.sample_list(), 5)
    assert _values(steps[-1].snapshot.data.nodes) == [5, 10, 20, 30, 40]


def test_ids_use_max_plus_one_after_delete():
    data = LinkedListData(nodes=[ListNode("node-0", 1), ListNode("node-7", 2)])
    steps = linked_list.generate_insert_head_steps(data, 3)
    assert steps[-1].snapshot.data.nodes[0].id == "node-8"


def test_delete_and_missing_value():
    steps = linked_list.generate_delete_steps(linked_list.sample_list(), 30)
    assert _values(steps[-1].snapshot.data.nodes) == [10, 20, 40]

    steps = linked_list.generate_delete_steps(linked_list.sample_list(), 99)
    assert steps[-1].description == "Value 99 not found in the list"
    assert _values(steps[-1].snapshot.data.nodes) == [10, 20, 30, 40]

    steps = linked_list.generate_delete_steps(LinkedListData(), 1)
    assert steps[-1].description == "List is empty. Nothing to delete."


def test_search_reports_position():
    steps = linked_list.generate_search_steps(linked_list.sample_list(), 20)
    assert steps[-1].description == "Found 20 at position 1"
    assert steps[-1].meta.comparisons == 2


def test_search_highlights_search_pseudocode():
    code = linked_list.PSEUDOCODE
    found = linked_list.generate_search_steps(linked_list.sample_list(), 20)
    assert code[found[0].meta.highlighted_line] == "search(value):"
    assert code[found[1].meta.highlighted_line] == "  for cur in list:"
    assert code[found[-1].meta.highlighted_line] == "    if cur.value == value: return cur"

    missing = linked_list.generate_search_steps(linked_list.sample_list(), 99)
    assert code[missing[-1].meta.highlighted_line] == "  return null"


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def test_stack_push_pop_peek():
    pushed = stack.generate_push_steps(stack.sample_stack(), 99)[-1].snapshot.data
    assert [e.value for e in pushed.elements] == [15, 42, 7, 99]

    popped = stack.generate_pop_steps(pushed)
    assert popped[-1].description == "Popped 99. Stack size: 3"

    peek = stack.generate_peek_steps(stack.sample_stack())
    assert peek[-1].description == "Top of stack is 7"


def test_stack_overflow_and_underflow_are_steps():
    full = StackData(elements=[StackElement(i) for i in range(2)], max_size=2)
    steps = stack.generate_push_steps(full, 5)
    assert steps[-1].description == "Stack overflow! Cannot push 5 - stack is full"
    assert len(steps[-1].snapshot.data.elements) == 2

    steps = stack.generate_pop_steps(StackData())
    assert steps == steps[:1]
    assert steps[0].description == "Stack underflow! Cannot pop - stack is empty"


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def test_queue_is_fifo():
    data = fifo_queue.generate_enqueue_steps(fifo_queue.sample_queue(), 8)[-1].snapshot.data
    assert [e.value for e in data.elements] == [3, 14, 27, 8]

    steps = fifo_queue.generate_dequeue_steps(data)
    assert steps[-1].description == "Dequeued 3. Queue size: 3"


def test_queue_full_and_empty_are_steps():
    full = QueueData(elements=[QueueElement(1)], max_size=1)
    assert fifo_queue.generate_enqueue_steps(full, 2)[-1].description == "Queue is full! Cannot enqueue 2"
    assert fifo_queue.generate_dequeue_steps(QueueData())[-1].description == "Queue is empty! Cannot dequeue"


# ---------------------------------------------------------------------------
# Binary heap
# ---------------------------------------------------------------------------
def test_heap_push_keeps_heap_property():
    steps = binary_heap.generate_push_steps(binary_heap.sample_heap("max"), 60)
    values = [e.value for e in steps[-1].snapshot.data.elements]
    assert values[0] == 60
    assert _is_heap(values, "max")


def test_heap_pop_removes_root():
    heap = binary_heap.sample_heap("min")
    steps = binary_heap.generate_pop_steps(heap)
    values = [e.value for e in steps[-1].snapshot.data.elements]
    assert 10 not in values
    assert values[0] == 20
    assert _is_heap(values, "min")


def test_heap_pop_empty():
    steps = binary_heap.generate_pop_steps(HeapData())
    assert steps[-1].description == "Heap is empty. Nothing to pop."


def test_heapify_builds_valid_heap():
    steps = binary_heap.generate_heapify_steps([4, 10, 3, 5, 1], "max")
    values = [e.value for e in steps[-1].snapshot.data.elements]
    assert values[0] == 10
    assert _is_heap(values, "max")
    assert steps[-1].description == "Max-heap built successfully!"


def test_toggle_type_flips_order():
    steps = binary_heap.generate_toggle_type_steps(build_heap([5, 2, 8, 1], "max"))
    final = steps[-1].snapshot.data
    assert final.heap_type == "min"
    assert final.elements[0].value == 1
    assert _is_heap([e.value for e in final.elements], "min")
