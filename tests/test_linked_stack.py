import pytest

from dsalab.errors import DataStructureError, UnderflowError
from dsalab.linked_stack import LinkedStack


def make_stack(*values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    return stack


def test_new_stack_is_empty():
    stack = LinkedStack()
    assert len(stack) == 0
    assert list(stack) == []


def test_push_places_values_on_top():
    stack = make_stack(1, 2, 3)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_peek_returns_top_without_removing():
    stack = make_stack(10, 20)
    assert stack.peek() == 20
    assert len(stack) == 2


def test_pop_is_last_in_first_out():
    stack = make_stack(1, 2, 3)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_pop_empty_raises_underflow():
    with pytest.raises(UnderflowError):
        LinkedStack().pop()


def test_peek_empty_raises_underflow():
    with pytest.raises(UnderflowError):
        LinkedStack().peek()


def test_underflow_is_a_data_structure_error():
    stack = make_stack(5)
    stack.pop()
    with pytest.raises(DataStructureError):
        stack.pop()


def test_str_shows_chain_ending_in_null():
    assert str(make_stack(1, 2, 3)) == "3 -> 2 -> 1 -> NULL"


def test_str_of_empty_stack():
    assert str(LinkedStack()) == "NULL"


def test_push_after_pop_reuses_stack():
    stack = make_stack(1, 2)
    stack.pop()
    stack.push(7)
    assert list(stack) == [7, 1]