from collections import Counter, deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import (
    Operation,
    Stacks,
    push,
    reverse_rotate,
    rotate,
    swap,
)

int_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=20)


def test_operation_names():
    assert [str(op) for op in Operation] == [
        "sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"
    ]
    assert Operation("rrr") is Operation.RRR


def test_swap_exchanges_top_two():
    stack = deque([2, 1, 3])
    swap(stack)
    assert list(stack) == [1, 2, 3]


@pytest.mark.parametrize("values", [[], [7]])
def test_swap_short_stack_unchanged(values):
    stack = deque(values)
    swap(stack)
    assert list(stack) == values


def test_push_moves_top():
    source, target = deque([1, 2]), deque([3])
    assert push(source, target) is True
    assert list(source) == [2]
    assert list(target) == [1, 3]


def test_push_from_empty_is_noop():
    source, target = deque(), deque([5])
    assert push(source, target) is False
    assert list(target) == [5]


def test_rotate_and_reverse_rotate():
    stack = deque([1, 2, 3])
    rotate(stack)
    assert list(stack) == [2, 3, 1]
    reverse_rotate(stack)
    reverse_rotate(stack)
    assert list(stack) == [3, 1, 2]


def test_rotate_empty():
    stack = deque()
    rotate(stack)
    reverse_rotate(stack)
    assert len(stack) == 0


@given(int_lists)
def test_rotate_then_reverse_is_identity(values):
    stack = deque(values)
    rotate(stack)
    reverse_rotate(stack)
    assert list(stack) == values


@given(int_lists)
def test_swap_twice_is_identity(values):
    stack = deque(values)
    swap(stack)
    swap(stack)
    assert list(stack) == values


@given(int_lists)
def test_full_rotation_cycle(values):
    stack = deque(values)
    for _ in values:
        rotate(stack)
    assert list(stack) == values


def test_stacks_accepts_lists():
    stacks = Stacks(a=[3, 1, 2])
    stacks.apply(Operation.RA)
    assert list(stacks.a) == [1, 2, 3]


def test_apply_records_history():
    stacks = Stacks.of([2, 1, 3])
    stacks.apply("sa")
    stacks.apply(Operation.PB)
    stacks.apply(Operation.RA)
    assert stacks.history == [Operation.SA, Operation.PB, Operation.RA]
    assert list(stacks.a) == [3, 2]
    assert list(stacks.b) == [1]


def test_apply_push_empty_not_recorded():
    stacks = Stacks.of([1, 2])
    assert stacks.apply(Operation.PA) is False
    assert stacks.history == []
    assert list(stacks.a) == [1, 2]


def test_apply_unknown_raises():
    with pytest.raises(ValueError):
        Stacks.of([1]).apply("xx")


def test_double_operations_act_on_both():
    stacks = Stacks(a=[1, 2, 3], b=[4, 5, 6])
    stacks.apply("ss")
    assert list(stacks.a) == [2, 1, 3]
    assert list(stacks.b) == [5, 4, 6]
    stacks.apply("rr")
    assert list(stacks.a) == [1, 3, 2]
    assert list(stacks.b) == [4, 6, 5]
    stacks.apply("rrr")
    assert list(stacks.a) == [2, 1, 3]
    assert list(stacks.b) == [5, 4, 6]


@given(int_lists, st.lists(st.sampled_from(list(Operation)), max_size=30))
def test_apply_preserves_elements(values, ops):
    stacks = Stacks.of(values)
    for op in ops:
        stacks.apply(op)
    assert Counter(stacks.a) + Counter(stacks.b) == Counter(values)
    assert len(stacks.history) <= len(ops)


@given(int_lists)
def test_pb_then_pa_round_trip(values):
    stacks = Stacks.of(values)
    for _ in values:
        stacks.apply(Operation.PB)
    assert list(stacks.b) == values[::-1]
    for _ in values:
        stacks.apply(Operation.PA)
    assert list(stacks.a) == values
    assert not stacks.b


def test_is_sorted():
    assert Stacks.of([1, 2, 3]).is_sorted() is True
    assert Stacks.of([2, 1, 3]).is_sorted() is False
    assert Stacks(a=[1, 2], b=[3]).is_sorted() is False
    assert Stacks.of([]).is_sorted() is True


@given(int_lists)
def test_sorted_values_are_sorted(values):
    assert Stacks.of(sorted(values)).is_sorted() is True
    assert Stacks.of(values).is_sorted() == (values == sorted(values))