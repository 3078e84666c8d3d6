import pytest

from dsalgo.stack import Stack, StackOverflowError, StackUnderflowError


def source_stack():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    return stack


def test_peek_returns_top():
    stack = source_stack()
    assert stack.peek() == 30
    assert len(stack) == 3


def test_pop_returns_last_pushed():
    stack = source_stack()
    assert stack.pop() == 30
    assert list(stack) == [20, 10]


def test_iteration_top_to_bottom():
    assert list(source_stack()) == [30, 20, 10]


def test_str_after_pop():
    stack = source_stack()
    stack.pop()
    assert str(stack) == "スタック: 20 10"


def test_str_empty():
    assert str(Stack()) == "スタックが空です"


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().peek()


def test_overflow_with_small_capacity():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_default_capacity_is_100():
    stack = Stack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(100)


def test_is_empty_transitions():
    stack = Stack()
    assert stack.is_empty()
    stack.push(1)
    assert not stack.is_empty()
    stack.pop()
    assert stack.is_empty()


def test_lifo_round_trip():
    stack = Stack()
    values = list(range(20))
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]