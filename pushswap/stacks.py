"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import MutableSequence


class Operation(str, Enum):
    """An instruction acting on stack ``a``, stack ``b`` or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def swap(stack: MutableSequence[int]) -> None:
    """Exchange the two top elements; do nothing with fewer than two."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(source: deque, target: deque) -> bool:
    """Move the top of ``source`` onto ``target``.

    Returns False, leaving both untouched, when ``source`` is empty.
    """
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def rotate(stack: deque) -> None:
    """Shift every element up by one; the top becomes the bottom."""
    stack.rotate(-1)


def reverse_rotate(stack: deque) -> None:
    """Shift every element down by one; the bottom becomes the top."""
    stack.rotate(1)


@dataclass
class Stacks:
    """Stacks ``a`` and ``b`` (top at index 0) and the operations applied."""

    a: deque = field(default_factory=deque)
    b: deque = field(default_factory=deque)
    history: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.a, deque):
            self.a = deque(self.a)
        if not isinstance(self.b, deque):
            self.b = deque(self.b)

    @classmethod
    def of(cls, values: Iterable[int]) -> "Stacks":
        """Stacks with ``values`` in ``a``, first value on top, and ``b`` empty."""
        return cls(a=deque(values))

    def apply(self, op: Operation | str) -> bool:
        """Perform ``op`` and record it in ``history``.

        A push from an empty stack does nothing and is not recorded; the
        return value tells whether the operation was recorded. An unknown
        instruction name raises ValueError.
        """
        op = Operation(op)
        if op is Operation.PA:
            done = push(self.b, self.a)
        elif op is Operation.PB:
            done = push(self.a, self.b)
        else:
            self._ACTIONS[op](self)
            done = True
        if done:
            self.history.append(op)
        return done

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        if self.b:
            return False
        return all(x <= y for x, y in zip(self.a, list(self.a)[1:]))

    def _sa(self) -> None:
        swap(self.a)

    def _sb(self) -> None:
        swap(self.b)

    def _ss(self) -> None:
        swap(self.a)
        swap(self.b)

    def _ra(self) -> None:
        rotate(self.a)

    def _rb(self) -> None:
        rotate(self.b)

    def _rr(self) -> None:
        rotate(self.a)
        rotate(self.b)

    def _rra(self) -> None:
        reverse_rotate(self.a)

    def _rrb(self) -> None:
        reverse_rotate(self.b)

    def _rrr(self) -> None:
        reverse_rotate(self.a)
        reverse_rotate(self.b)

    _ACTIONS = {
        Operation.SA: _sa,
        Operation.SB: _sb,
        Operation.SS: _ss,
        Operation.RA: _ra,
        Operation.RB: _rb,
        Operation.RR: _rr,
        Operation.RRA: _rra,
        Operation.RRB: _rrb,
        Operation.RRR: _rrr,
    }