# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed set of
eleven operations. The package also checks whether a given sequence of operations
sorts a list.

## The operations

| Name  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                     |
| `sb`  | swap the top two elements of `b`                     |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of `b` onto `a`                         |
| `pb`  | move the top of `a` onto `b`                         |
| `ra`  | rotate `a` up (the top element goes to the bottom)   |
| `rb`  | rotate `b` up                                        |
| `rr`  | `ra` and `rb` together                               |
| `rra` | rotate `a` down (the bottom element goes to the top) |
| `rrb` | rotate `b` down                                      |
| `rrr` | `rra` and `rrb` together                             |

A swap on a stack with fewer than two elements and a push from an empty stack do
nothing.

## Installation

```
pip install .
```

## Commands

### push-swap

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

This prints operations, one per line, that sort the numbers. The first number is the
top of stack `a`. An argument can hold several numbers separated by spaces. If the
input is already sorted, nothing is printed. With no arguments the command prints
nothing and exits with status 0.

A token that contains anything other than digits, spaces and minus signs, a repeated
value, or a value outside the 32-bit signed range makes the command write `Error` to
standard error and exit with status 1. Each token is read as a leading integer, in the
same way as C `atoi`, so `+5` is rejected but `1-2` is read as `1`. If an argument holds no number
and no number has been read before it, the command exits with status 1 and prints
nothing.

Lists of up to five numbers are sorted with short fixed strategies. Longer lists move
the cheapest element to `b` one at a time, so that `b` stays in descending order. The
last three elements in `a` are sorted, and then `b` is merged back.

### push-swap-checker

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

This reads instructions from standard input, one per line, and applies them to the
numbers given as arguments. It prints `OK` if stack `a` ends up sorted and `b` is empty.
Otherwise it prints `KO`. Each line must be exactly an instruction name followed by a
newline. Any other line, including a last line without a newline, makes the checker
write `Error` to standard error and exit with status 1. The arguments are read and
rejected in the same way as for `push-swap`.

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## Library use

```python
from pushswap.sorter import push_swap
from pushswap.checker import run_checker

ops = push_swap([3, 2, 1])
print([op.value for op in ops])
print(run_checker([3, 2, 1], [op.value + "\n" for op in ops]))
```

- `pushswap.stacks`
  - `Operation` is a string enum of the eleven instructions.
  - `Stacks` holds the deques `a` and `b`, with the top at index 0, and a `history` list.
  - `Stacks.of(values)` fills `a`.
  - `Stacks.apply(op)` performs one operation and records it. A push from an empty stack is not recorded, and `apply` returns `False` for it. An unknown name raises `ValueError`.
  - `Stacks.is_sorted()` tells whether `b` is empty and `a` ascends.
  - The functions `swap`, `push`, `rotate` and `reverse_rotate` act on single stacks.
- `pushswap.parsing`
  - `parse_args(args)` turns command-line words into a list of integers. It raises `ParseError` on bad input, and the error's `reported` attribute tells whether the command line announces the error.
  - `parse_int`, `split_words` and `is_num` are the helpers it uses.
- `pushswap.sorter`
  - `push_swap(values)` returns the list of operations.
  - The steps it uses are also exposed: `sort_two`, `sort_three`, `sort_to_five`, `sort_small`, `sort_long`, `rotate_max_to_top`, `final_merge`, `combine_costs`, `position_cost` and `find_best_target`.
- `pushswap.checker`
  - `parse_instruction(line)` reads one line, and `apply_instructions(stacks, lines)` applies a sequence of lines. Both raise `InvalidInstruction` for a bad line.
  - `run_checker(values, lines)` returns whether the result is sorted.

## Limits

The sorter does not look for the shortest possible sequence of operations. The
checker only accepts instructions from standard input. It does not read them from a
file.

## Running the tests

```
pip install .[test]
pytest
```