"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import sort_values


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as ``Error`` on stderr."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if len(values) <= 1:
        return 0
    for line in sort_values(values):
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())