"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Stacks, to_ranks

# Checked in this order; the first prefix a line starts with decides the
# operation. "rra" is matched on its three letters alone, so any line that
# begins with them reverse-rotates stack a.
_PREFIXES: tuple[tuple[str, str], ...] = (
    ("sa\n", "sa"),
    ("sb\n", "sb"),
    ("ss\n", "ss"),
    ("pa\n", "pa"),
    ("pb\n", "pb"),
    ("ra\n", "ra"),
    ("rb\n", "rb"),
    ("rr\n", "rr"),
    ("rra", "rra"),
    ("rrb\n", "rrb"),
    ("rrr\n", "rrr"),
)


class UnknownOperationError(InputError):
    """A line read as an operation names none."""


def _operation(line: str) -> str:
    for prefix, operation in _PREFIXES:
        if line.startswith(prefix):
            return operation
    raise UnknownOperationError()


def apply_lines(stacks: Stacks, lines: Iterable[str]) -> int:
    """Apply each newline-terminated line as an operation, stopping at an empty one.

    Returns the number of operations applied.
    """
    count = 0
    for line in lines:
        if not line:
            break
        stacks.apply(_operation(line))
        count += 1
    return count


def is_finished(stacks: Stacks, count: int) -> bool:
    """Whether stack a holds exactly ``count`` elements in ascending order."""
    items = stacks.stack("a")
    if len(items) != count:
        return False
    return all(x <= y for x, y in zip(items, items[1:]))


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Whether the operations in ``lines`` leave ``values`` sorted on stack a."""
    ranks = to_ranks(values)
    stacks = Stacks(ranks)
    apply_lines(stacks, lines)
    return stacks.size("b") == 0 and is_finished(stacks, len(ranks))


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
        if len(values) <= 1:
            return 0
        result = check(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())