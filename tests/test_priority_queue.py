import pytest

from algokit.priority_queue import MinHeap, PriorityQueue, QueueOverflow, QueueUnderflow

SAMPLE = [7, 10, 4, 3, 19, 2, 14, 16, 4]


def _is_min_heap(items):
    return all(
        items[(i - 1) // 2] <= items[i] for i in range(1, len(items))
    )


def test_top_is_minimum():
    queue = PriorityQueue(20)
    for value in SAMPLE:
        queue.push(value)
    assert queue.top() == min(SAMPLE)
    assert len(queue) == len(SAMPLE)


def test_popping_everything_yields_sorted_order():
    queue = PriorityQueue(20)
    for value in SAMPLE:
        queue.push(value)
    assert [queue.pop() for _ in SAMPLE] == sorted(SAMPLE)
    assert len(queue) == 0


def test_iteration_preserves_heap_property():
    queue = PriorityQueue(20)
    for value in SAMPLE:
        queue.push(value)
        assert _is_min_heap(list(queue))
    queue.pop()
    queue.pop()
    assert _is_min_heap(list(queue))
    assert sorted(queue) == sorted(SAMPLE)[2:]


def test_default_capacity_is_ten():
    queue = PriorityQueue()
    for value in range(10):
        queue.push(value)
    with pytest.raises(QueueOverflow):
        queue.push(10)
    assert len(queue) == 10


def test_overflow_at_given_capacity():
    queue = PriorityQueue(2)
    queue.push(5)
    queue.push(1)
    with pytest.raises(QueueOverflow):
        queue.push(0)
    assert queue.top() == 1


def test_pop_empty_raises():
    with pytest.raises(QueueUnderflow):
        PriorityQueue().pop()


def test_top_empty_raises():
    with pytest.raises(QueueUnderflow):
        PriorityQueue().top()


def test_single_item_round_trip():
    queue = PriorityQueue(1)
    queue.push("only")
    assert queue.pop() == "only"
    with pytest.raises(QueueUnderflow):
        queue.top()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MinHeap(-3)


def test_min_heap_get_min_and_delete():
    heap = MinHeap(20)
    for value in SAMPLE:
        assert heap.insert(value) is True
    assert heap.get_min() == min(SAMPLE)
    drained = []
    while len(heap):
        drained.append(heap.delete_min())
    assert drained == sorted(SAMPLE)


def test_min_heap_empty_returns_none():
    heap = MinHeap(3)
    assert heap.get_min() is None
    assert heap.delete_min() is None
    assert len(heap) == 0


def test_min_heap_ignores_insert_when_full():
    heap = MinHeap(2)
    heap.insert(4)
    heap.insert(8)
    assert heap.insert(1) is False
    assert len(heap) == 2
    assert heap.get_min() == 4