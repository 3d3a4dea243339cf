"""Reading the initial contents of stack ``a`` from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_NUMBER_CHARS = frozenset(_DIGITS + " -")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack.

    ``reported`` tells whether the failure is one the program announces
    with an error message; an argument list that yields no numbers at all
    before an empty argument fails without one.
    """

    def __init__(self, message: str, *, reported: bool = True) -> None:
        super().__init__(message)
        self.reported = reported


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    reading stops at the first non-digit. Text that does not start with a
    number gives 0. A value outside the 32-bit signed range raises
    ParseError.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    end = 0
    while end < len(rest) and rest[end] in _DIGITS:
        end += 1
    if end == 0:
        return 0
    value = int(rest[:end])
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"number out of range: {text!r}")
    return value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def is_num(token: str) -> bool:
    """True when ``token`` holds only digits, spaces and minus signs."""
    return all(char in _NUMBER_CHARS for char in token)


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn arguments into the values of stack ``a``, top first.

    Each argument may hold several numbers separated by spaces. A token
    with a character other than a digit, a space or a minus sign, or a
    value seen before, raises ParseError. An argument that leaves the
    stack still empty raises ParseError that is not reported.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for token in split_words(arg, " "):
            if not is_num(token):
                raise ParseError(f"not a number: {token!r}")
            value = parse_int(token)
            if value in seen:
                raise ParseError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
        if not values:
            raise ParseError("no values given", reported=False)
    return values