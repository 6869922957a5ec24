"""Reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648


class InputError(ValueError):
    """The arguments are not a list of distinct integers in range."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def has_duplicates(values: Iterable[int]) -> bool:
    values = list(values)
    return len(set(values)) != len(values)


def _is_number(text: str) -> bool:
    digits = text[1:] if text.startswith("-") else text
    if text == "-":
        return False
    return all(ch in "0123456789" for ch in digits)


def parse_number(text: str) -> int:
    """Read an optional minus sign and decimal digits as a 32-bit integer."""
    if not _is_number(text):
        raise InputError()
    if text.startswith(str(INT_MIN)):
        return INT_MIN
    negative = text.startswith("-")
    result = 0
    for ch in text[1:] if negative else text:
        result = result * 10 + int(ch)
        if result > INT_MAX:
            raise InputError()
    return -result if negative else result


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into numbers.

    A single argument is split on spaces. Fewer than two numbers come back
    as they are; more must all be distinct.
    """
    if not args:
        return []
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
    else:
        words = list(args)
    if not all(_is_number(word) for word in words):
        raise InputError()
    values = [parse_number(word) for word in words]
    if len(values) > 1 and has_duplicates(values):
        raise InputError()
    return values