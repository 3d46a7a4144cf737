import pytest

from dsalab.errors import UnderflowError
from dsalab.stack_queue import StackQueue


def make_queue(*values):
    queue = StackQueue()
    for value in values:
        queue.enqueue(value)
    return queue


def test_new_queue_is_empty():
    queue = StackQueue()
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_enqueue_makes_queue_non_empty():
    queue = make_queue(1)
    assert queue.is_empty() is False
    assert len(queue) == 1


def test_dequeue_is_first_in_first_out():
    queue = make_queue(1, 2, 3)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert queue.is_empty() is True


def test_peek_returns_front_without_removing():
    queue = make_queue(5, 6)
    assert queue.peek() == 5
    assert len(queue) == 2


def test_interleaved_operations_keep_order():
    queue = make_queue(1, 2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    queue.enqueue(4)
    assert queue.peek() == 2
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [2, 3, 4]


def test_dequeue_empty_raises():
    with pytest.raises(UnderflowError):
        StackQueue().dequeue()


def test_peek_empty_raises():
    with pytest.raises(UnderflowError):
        StackQueue().peek()


def test_length_counts_both_stacks():
    queue = make_queue(1, 2, 3)
    queue.peek()
    queue.enqueue(4)
    assert len(queue) == 4