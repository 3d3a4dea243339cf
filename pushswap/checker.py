"""Checking that a list of instructions sorts a given stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ParseError, parse_args
from pushswap.stacks import Operation, Stacks


class InvalidInstruction(ValueError):
    """Raised for a line that is not one of the eleven instructions."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid instruction: {line!r}")
        self.line = line


def parse_instruction(line: str) -> Operation:
    """Read one input line, which must be an instruction name and a newline."""
    if not line.endswith("\n"):
        raise InvalidInstruction(line)
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InvalidInstruction(line) from None


def apply_instructions(stacks: Stacks, lines: Iterable[str]) -> None:
    """Perform the instruction on each line, stopping at the first invalid one."""
    for line in lines:
        stacks.apply(parse_instruction(line))


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True when the instructions leave ``a`` sorted and ``b`` empty."""
    stacks = Stacks.of(values)
    apply_instructions(stacks, lines)
    return bool(stacks.a) and stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and report OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError as error:
        if error.reported:
            sys.stderr.write("Error\n")
        return 1
    try:
        sorted_ok = run_checker(values, sys.stdin)
    except InvalidInstruction:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())