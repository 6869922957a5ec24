"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")

_NAMES = ("a", "b")


def to_ranks(values: Iterable[int]) -> list[int]:
    """Replace every value by its position in the sorted order, keeping the order."""
    values = list(values)
    positions = {value: rank for rank, value in enumerate(sorted(values))}
    return [positions[value] for value in values]


class Stacks:
    """Stacks ``a`` and ``b``; the first element of each is its top."""

    def __init__(self, values: Iterable[int]) -> None:
        self._stacks: dict[str, deque[int]] = {"a": deque(values), "b": deque()}

    def _get(self, name: str) -> deque[int]:
        if name not in _NAMES:
            raise ValueError(f"unknown stack {name!r}")
        return self._stacks[name]

    def swap(self, name: str) -> None:
        """Exchange the two top elements; nothing happens with fewer than two."""
        stack = self._get(name)
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]

    def push(self, name: str) -> None:
        """Move the top of the other stack onto the named one, if there is one."""
        target = self._get(name)
        source = self._stacks["b" if name == "a" else "a"]
        if source:
            target.appendleft(source.popleft())

    def rotate(self, name: str) -> None:
        """Move the top element to the bottom."""
        stack = self._get(name)
        if len(stack) > 1:
            stack.rotate(-1)

    def reverse_rotate(self, name: str) -> None:
        """Move the bottom element to the top."""
        stack = self._get(name)
        if len(stack) > 1:
            stack.rotate(1)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.swap("a")
        self.swap("b")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.rotate("a")
        self.rotate("b")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.reverse_rotate("a")
        self.reverse_rotate("b")

    def apply(self, operation: str) -> None:
        """Perform one operation given by its name, such as ``"pb"`` or ``"rra"``."""
        match operation:
            case "sa" | "sb":
                self.swap(operation[1])
            case "pa" | "pb":
                self.push(operation[1])
            case "ra" | "rb":
                self.rotate(operation[1])
            case "rra" | "rrb":
                self.reverse_rotate(operation[2])
            case "ss":
                self.ss()
            case "rr":
                self.rr()
            case "rrr":
                self.rrr()
            case _:
                raise ValueError(f"unknown operation {operation!r}")

    def stack(self, name: str) -> tuple[int, ...]:
        """The contents of a stack, top first."""
        return tuple(self._get(name))

    def size(self, name: str) -> int:
        """The number of elements on a stack."""
        return len(self._get(name))

    def __repr__(self) -> str:
        return f"Stacks(a={list(self._stacks['a'])}, b={list(self._stacks['b'])})"