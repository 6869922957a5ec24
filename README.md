# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and this
small set of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, of b, or of both |
| `pa`, `pb` | push the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate upward: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate downward: the bottom element goes to the top |

An operation that cannot act (swapping or rotating a stack with fewer than
two elements, pushing from an empty stack) does nothing.

## Installation

```
pip install .
```

## Commands

`push_swap` reads the numbers from its arguments. You can pass them as
separate arguments or as one argument with the numbers separated by spaces.
A number is an optional `-` followed by decimal digits; a leading `+` is not
accepted. The command prints a list of operations, one per line, that sorts
stack `a` in ascending order:

```
push_swap 3 2 1
push_swap "3 2 1"
```

`checker` takes the same arguments. It reads operations from standard input,
one per line, and applies them. It prints `OK` if stack `a` ends up sorted
and `b` is empty, and `KO` otherwise:

```
push_swap 4 67 3 87 23 | checker 4 67 3 87 23
```

Every line given to `checker` must end with a newline. A line that does not
name an operation, including a blank line or a last line without its
newline, is an error. A line that begins with `rra` is read as `rra`
whatever follows.

If an argument is not an integer, is outside the 32-bit signed range, or
appears twice, both commands print `Error` to standard error and exit with
status 1. `checker` does the same when it reads an unknown operation. If you
give no numbers, or only one valid number, both commands exit silently with
status 0; `checker` then reads nothing.

## Library use

```python
from pushswap.sorter import sort_values
from pushswap.checker import check

operations = sort_values([3, 2, 1])
assert check([3, 2, 1], [op + "\n" for op in operations])
```

- `pushswap.sorter.sort_values(values)` returns the operations, without
  newlines, that sort `values`; it returns an empty list for fewer than two
  values. `pushswap.sorter.Sorter` does the work on a `Stacks` object and
  collects what it writes in its `output` list.
- `pushswap.checker.check(values, lines)` applies newline-terminated
  operation lines and says whether the values end up sorted with `b` empty.
  `apply_lines` and `is_finished` are the two steps it is built from; an
  unknown line raises `UnknownOperationError`.
- `pushswap.stacks.Stacks` holds the two stacks and carries out single
  operations through `apply("pb")` and the like, or through `swap`, `push`,
  `rotate`, `reverse_rotate`, `ss`, `rr` and `rrr`. `stack(name)` returns a
  stack's contents top first. `to_ranks` replaces values by their positions
  in sorted order.
- `pushswap.parsing.parse_arguments` checks command-line arguments and turns
  them into integers, raising `InputError` for bad input. `parse_number` and
  `has_duplicates` are the checks it uses.

## Running the tests

```
pip install .[test]
pytest
```