import pytest

from aockit.stack import Stack


def test_new_stack_is_empty():
    assert Stack().is_empty() is True


def test_push_makes_non_empty():
    stack = Stack()
    stack.push(1)
    assert stack.is_empty() is False
    assert len(stack) == 1


def test_pop_is_lifo():
    stack = Stack()
    for value in ("a", "b", "c"):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert stack.is_empty() is True


def test_peek_does_not_remove():
    stack = Stack([1, 2])
    assert stack.peek() == 2
    assert len(stack) == 2
    assert stack.pop() == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_iteration_from_top():
    stack = Stack([1, 2, 3])
    assert list(stack) == [3, 2, 1]