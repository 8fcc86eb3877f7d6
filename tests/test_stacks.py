import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import (
    MAX_SIZE,
    ArrayStack,
    BoundedStack,
    LinkedStack,
    StackEmptyError,
    StackFullError,
)

SEQUENCE_EXPECTED = [10, 20, 30, 30, 20, 20, 10, 1]


def _run_sequence(stack):
    observed = []
    stack.push(10)
    observed.append(stack.top())
    stack.push(20)
    observed.append(stack.top())
    stack.push(30)
    observed.append(stack.top())
    observed.append(stack.pop())
    observed.append(stack.top())
    observed.append(stack.pop())
    observed.append(stack.top())
    observed.append(len(stack))
    return observed


def _push_all_then_pop_all(stack, values):
    for value in values:
        stack.push(value)
    size_after_push = len(stack)
    popped = [stack.pop() for _ in values]
    return size_after_push, popped, len(stack)


def test_array_stack_push_top_pop_sequence():
    assert _run_sequence(ArrayStack()) == SEQUENCE_EXPECTED


def test_bounded_stack_push_top_pop_sequence():
    assert _run_sequence(BoundedStack()) == SEQUENCE_EXPECTED


def test_linked_stack_push_top_pop_sequence():
    assert _run_sequence(LinkedStack()) == SEQUENCE_EXPECTED


def test_array_stack_empty_errors():
    stack = ArrayStack()
    with pytest.raises(StackEmptyError):
        stack.top()
    with pytest.raises(StackEmptyError):
        stack.pop()
    assert len(stack) == 0


def test_bounded_stack_empty_errors():
    stack = BoundedStack()
    with pytest.raises(StackEmptyError):
        stack.top()
    with pytest.raises(StackEmptyError):
        stack.pop()
    assert len(stack) == 0


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(StackEmptyError):
        stack.top()
    with pytest.raises(StackEmptyError):
        stack.pop()
    assert len(stack) == 0


def test_array_stack_empty_error_is_index_error():
    stack = ArrayStack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.pop()


def test_bounded_stack_empty_error_is_index_error():
    stack = BoundedStack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.pop()


def test_linked_stack_empty_error_is_index_error():
    stack = LinkedStack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(IndexError):
        stack.pop()


@given(values=st.lists(st.integers(), max_size=60))
def test_array_stack_lifo_order(values):
    result = _push_all_then_pop_all(ArrayStack(), values)
    assert result == (len(values), values[::-1], 0)


@given(values=st.lists(st.integers(), max_size=60))
def test_bounded_stack_lifo_order(values):
    result = _push_all_then_pop_all(BoundedStack(), values)
    assert result == (len(values), values[::-1], 0)


@given(values=st.lists(st.integers(), max_size=60))
def test_linked_stack_lifo_order(values):
    result = _push_all_then_pop_all(LinkedStack(), values)
    assert result == (len(values), values[::-1], 0)


def test_array_stack_initial_capacity():
    assert ArrayStack().capacity() == 1


@given(st.lists(st.integers(), max_size=100))
def test_array_stack_capacity_is_power_of_two_and_fits(values):
    stack = ArrayStack()
    for value in values:
        stack.push(value)
        capacity = stack.capacity()
        assert capacity >= len(stack)
        assert capacity & (capacity - 1) == 0
        assert capacity < 2 * len(stack) or capacity == 1


def test_array_stack_capacity_does_not_shrink_on_pop():
    stack = ArrayStack()
    for value in range(5):
        stack.push(value)
    grown = stack.capacity()
    while len(stack):
        stack.pop()
    assert stack.capacity() == grown


def test_bounded_stack_default_limit():
    stack = BoundedStack()
    assert stack.max_size == MAX_SIZE == 500
    for value in range(MAX_SIZE):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(-1)
    assert len(stack) == MAX_SIZE
    assert stack.top() == MAX_SIZE - 1


def test_bounded_stack_small_limit():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(OverflowError):
        stack.push("c")
    assert stack.pop() == "b"
    stack.push("c")
    assert stack.top() == "c"


def test_bounded_stack_negative_size():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_generic_values():
    stack = ArrayStack()
    stack.push("text")
    stack.push((1, 2))
    assert stack.pop() == (1, 2)
    assert stack.top() == "text"