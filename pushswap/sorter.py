"""Producing a sequence of operations that sorts stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Operation, Stacks


def combine_costs(a: int, b: int) -> int:
    """Number of operations for ``a`` moves on one stack and ``b`` on the other.

    A positive count is a number of rotations and a negative one a number of
    reverse rotations. Moves in the same direction are shared.
    """
    if a >= 0 and b >= 0:
        return max(a, b)
    if a < 0 and b < 0:
        return max(-a, -b)
    return abs(a) + abs(b)


def position_cost(index: int, size: int) -> int:
    """Signed number of rotations that brings position ``index`` to the top.

    Stacks of more than three elements reverse-rotate for positions past
    the middle, which gives a negative count.
    """
    if index > size // 2 and size > 3:
        return index - size
    return index


def find_best_target(stack_b: Iterable[int], value: int) -> int:
    """The value of ``stack_b`` that should sit on top when ``value`` is pushed.

    That is the largest value below ``value``, or the maximum when there is
    none, or -1 for an empty stack.
    """
    best_lower: int | None = None
    maximum: int | None = None
    for candidate in stack_b:
        if maximum is None or candidate > maximum:
            maximum = candidate
        if candidate < value and (best_lower is None or candidate > best_lower):
            best_lower = candidate
    if best_lower is not None:
        return best_lower
    if maximum is not None:
        return maximum
    return -1


def _costs(stack: Sequence[int]) -> list[int]:
    size = len(stack)
    return [position_cost(index, size) for index in range(size)]


def _rotate_by(stacks: Stacks, count: int, forward: Operation, backward: Operation) -> None:
    op = forward if count > 0 else backward
    for _ in range(abs(count)):
        stacks.apply(op)


def sort_two(stacks: Stacks) -> None:
    """Order a two-element stack ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Order the three elements of stack ``a`` in at most two operations."""
    a, b, c = list(stacks.a)[:3]
    if a < b < c:
        return
    if a < c < b:
        plan = (Operation.RRA, Operation.SA)
    elif b < a < c:
        plan = (Operation.SA,)
    elif c < a < b:
        plan = (Operation.RRA,)
    elif b < c < a:
        plan = (Operation.RA,)
    elif c < b < a:
        plan = (Operation.SA, Operation.RRA)
    else:
        plan = ()
    for op in plan:
        stacks.apply(op)


def sort_to_five(stacks: Stacks) -> None:
    """Sort four or five elements by parking the smallest ones on ``b``."""
    while len(stacks.a) > 3:
        smallest = min(stacks.a)
        while stacks.a[0] != smallest:
            if stacks.a.index(smallest) <= len(stacks.a) // 2:
                stacks.apply(Operation.RA)
            else:
                stacks.apply(Operation.RRA)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Operation.PA)


def sort_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most five elements."""
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_to_five(stacks)


def rotate_max_to_top(stacks: Stacks) -> None:
    """Bring the largest value of ``b`` to its top by the shorter way round."""
    b = stacks.b
    if not b:
        return
    max_pos = 0
    max_value = b[0]
    for pos, value in enumerate(b):
        if value > max_value:
            max_value = value
            max_pos = pos
    size = len(b)
    cost = max_pos if max_pos <= size // 2 else max_pos - size
    _rotate_by(stacks, cost, Operation.RB, Operation.RRB)


def _merge_rotation(stacks: Stacks) -> bool:
    a, b = stacks.a, stacks.b
    top = a[0]
    last = a[-1]
    while b and last < b[0] < top:
        stacks.apply(Operation.PA)
    if b:
        stacks.apply(Operation.RRA)
        return True
    return False


def final_merge(stacks: Stacks) -> None:
    """Push ``b``, held in descending order, back into the sorted ``a``."""
    a, b = stacks.a, stacks.b
    rotations = 0
    if b and b[0] > a[-1]:
        stacks.apply(Operation.PA)
    while b and rotations < 3:
        if _merge_rotation(stacks):
            rotations += 1
    while b:
        stacks.apply(Operation.PA)
    while a[0] > a[-1]:
        stacks.apply(Operation.RRA)


def _cheapest_move(stacks: Stacks) -> tuple[int, int]:
    a, b = stacks.a, stacks.b
    b_cost = dict(zip(b, _costs(b)))
    best: tuple[int, int, int] | None = None
    for value, cost_a in zip(a, _costs(a)):
        target = find_best_target(b, value)
        total = combine_costs(cost_a, b_cost.get(target, 0))
        if best is None or total < best[0]:
            best = (total, cost_a, target)
    if best is None:
        return 0, 0
    _, moves_a, target = best
    # A target whose value is 0 is treated as no target at all.
    if not b or target == 0:
        return moves_a, 0
    return moves_a, b_cost.get(target, 0)


def _apply_moves(stacks: Stacks, moves_a: int, moves_b: int) -> None:
    while moves_a or moves_b:
        if moves_a > 0 and moves_b > 0:
            stacks.apply(Operation.RR)
            moves_a -= 1
            moves_b -= 1
        elif moves_a < 0 and moves_b < 0:
            stacks.apply(Operation.RRR)
            moves_a += 1
            moves_b += 1
        elif moves_a:
            _rotate_by(stacks, moves_a, Operation.RA, Operation.RRA)
            moves_a = 0
        else:
            _rotate_by(stacks, moves_b, Operation.RB, Operation.RRB)
            moves_b = 0


def _push_cheapest(stacks: Stacks) -> None:
    moves_a, moves_b = _cheapest_move(stacks)
    _apply_moves(stacks, moves_a, moves_b)
    stacks.apply(Operation.PB)


def sort_long(stacks: Stacks) -> None:
    """Sort a stack ``a`` of more than five elements.

    Elements go to ``b`` one at a time, always the cheapest to place, so
    that ``b`` stays in descending order; three remain in ``a`` and are
    sorted, then ``b`` is merged back.
    """
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    if stacks.b[0] < stacks.b[1]:
        stacks.apply(Operation.SB)
    while len(stacks.a) > 3:
        _push_cheapest(stacks)
    sort_three(stacks)
    rotate_max_to_top(stacks)
    final_merge(stacks)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """The operations that sort ``values``, given top first.

    An empty or already sorted input needs no operation.
    """
    stacks = Stacks.of(values)
    if stacks.is_sorted():
        return []
    if len(stacks.a) <= 5:
        sort_small(stacks)
    else:
        sort_long(stacks)
    return list(stacks.history)