"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_args
from pushswap.sorter import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError as error:
        if error.reported:
            sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in push_swap(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())