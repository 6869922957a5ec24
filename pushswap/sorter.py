"""The recursive three-way partition sort that writes out push_swap operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stacks import Stacks, to_ranks

# For each arrangement of three neighbouring values: the operations used when
# the stack holds exactly three elements, and those used when it holds more.
_THREE_MOVES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "021": (("s", "r"), ("r", "s", "rr")),
    "102": (("s",), ("s",)),
    "120": (("rr",), ("r", "s", "rr", "s")),
    "201": (("r",), ("s", "r", "s", "rr")),
    "210": (("r", "s"), ("s", "r", "s", "rr", "s")),
}

_POSITIONS = ("top", "bottom")


class Sorter:
    """Sorts the stacks it is given and records every line it writes.

    ``output`` holds the operations in the order they were performed, along
    with any diagnostic line produced when a step is asked to do something
    impossible.
    """

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.output: list[str] = []

    def _write(self, operation: str) -> None:
        self.stacks.apply(operation)
        self.output.append(operation)

    def _report(self, message: str) -> None:
        self.output.append(message)

    def _top(self, name: str) -> int:
        return self.stacks.stack(name)[0]

    def _bottom(self, name: str) -> int:
        return self.stacks.stack(name)[-1]

    def is_sorted(self, name: str, index: int, num: int) -> bool:
        """Whether ``num`` elements from position ``index`` are in ascending order."""
        items = self.stacks.stack(name)
        if index + num > len(items) or not items:
            self._report("Invalid input ft_is_sorted")
            return False
        if len(items) == 1:
            return True
        window = items[index:index + num]
        return all(x <= y for x, y in zip(window, window[1:]))

    def order(self, name: str, index: int, num: int) -> str:
        """Describe ``num`` elements from ``index`` as digits relative to their minimum."""
        window = self.stacks.stack(name)[index:index + num]
        lowest = min(window, default=0)
        return "".join(chr(ord("0") + value - lowest) for value in window)

    def _sort_2(self, name: str) -> None:
        if self.stacks.size(name) <= 1:
            self._report("Invalid input ft_sort_2")
            return
        if self.is_sorted(name, 0, 2):
            return
        self._write("s" + name)

    def _sort_3(self, name: str) -> None:
        if self.stacks.size(name) <= 2:
            self._report("Invalid input ft_sort_3")
            return
        moves = _THREE_MOVES.get(self.order(name, 0, 3))
        if moves is None:
            return
        short, long = moves
        for move in short if self.stacks.size(name) == 3 else long:
            self._write(move + name)

    def sort_mini(self, name: str, size: int) -> None:
        """Sort the top one to three elements of a stack in place."""
        if size > 3 or size < 1:
            self._report("Invalid input ft_sort_mini")
            return
        if size == 2:
            self._sort_2(name)
        elif size == 3:
            self._sort_3(name)

    def get_min(self, name: str, position: str, size: int) -> int:
        """The smallest of ``size`` elements at the top or bottom of a stack."""
        if position not in _POSITIONS:
            raise ValueError(f"unknown position {position!r}")
        items = self.stacks.stack(name)
        if not items:
            raise ValueError(f"stack {name!r} is empty")
        if size > len(items):
            self._report("Invalid input ft_get_min")
            return 0
        if position == "top":
            return min(items[:size], default=items[0])
        return min(items[::-1][:size], default=items[-1])

    def bottom_to_top(self, name: str, size: int) -> None:
        """Bring the bottom ``size`` elements to the top by the shorter way round."""
        total = self.stacks.size(name)
        if total > size * 2:
            for _ in range(size):
                self._write("rr" + name)
        else:
            for _ in range(total - size):
                self._write("r" + name)

    def _divide_top_a(self, size: int, border1: int, border2: int) -> None:
        for _ in range(size):
            value = self._top("a")
            if value < border1:
                self._write("pb")
                self._write("rb")
            elif value < border2:
                self._write("pb")
            else:
                self._write("ra")

    def _divide_top_b(self, size: int, border1: int, border2: int) -> None:
        for _ in range(size):
            value = self._top("b")
            if value < border1:
                self._write("rb")
            elif value < border2:
                self._write("pa")
                self._write("ra")
            else:
                self._write("pa")

    def _divide_bottom_a(self, size: int, border1: int, border2: int) -> None:
        for _ in range(size):
            value = self._bottom("a")
            self._write("rra")
            if value < border1:
                self._write("pb")
                self._write("rb")
            elif value < border2:
                self._write("pb")

    def _divide_bottom_b(self, size: int, border1: int, border2: int) -> None:
        for _ in range(size):
            value = self._bottom("b")
            self._write("rrb")
            if value < border1:
                continue
            self._write("pa")
            if value < border2:
                self._write("ra")

    def top_a(self, size: int) -> None:
        """Sort the top ``size`` elements of stack a in place."""
        if self.is_sorted("a", 0, size):
            return
        if size <= 3:
            self.sort_mini("a", size)
            return
        third = size // 3
        border1 = self.get_min("a", "top", size) + third
        border2 = border1 + third
        self._divide_top_a(size, border1, border2)
        self.bottom_a(third + size % 3)
        self.top_b(third)
        self.bottom_b(third)

    def bottom_a(self, size: int) -> None:
        """Sort the bottom ``size`` elements of stack a onto its top."""
        if size <= 3:
            self.bottom_to_top("a", size)
            self.sort_mini("a", size)
            return
        if 2 * size // 3 > self.stacks.size("a") - size:
            self.bottom_to_top("a", size)
            self.top_a(size)
            return
        third = size // 3
        border1 = self.get_min("a", "bottom", size) + third
        border2 = border1 + third
        self._divide_bottom_a(size, border1, border2)
        self.top_a(third + size % 3)
        self.top_b(third)
        self.bottom_b(third)

    def top_b(self, size: int) -> None:
        """Move the top ``size`` elements of stack b onto a, sorted."""
        if size <= 3:
            for _ in range(size):
                self._write("pa")
            self.top_a(size)
            return
        third = size // 3
        border1 = self.get_min("b", "top", size) + third
        border2 = border1 + third
        self._divide_top_b(size, border1, border2)
        self.top_a(third + size % 3)
        self.bottom_a(third)
        self.bottom_b(third)

    def bottom_b(self, size: int) -> None:
        """Move the bottom ``size`` elements of stack b onto a, sorted."""
        if size <= 3:
            self.bottom_to_top("b", size)
            for _ in range(size):
                self._write("pa")
            self.sort_mini("a", size)
            return
        if 2 * size // 3 > self.stacks.size("b") - size:
            self.bottom_to_top("b", size)
            self.top_b(size)
            return
        third = size // 3
        border1 = self.get_min("b", "bottom", size) + third + size % 3
        border2 = border1 + third
        self._divide_bottom_b(size, border1, border2)
        self.top_a(third)
        self.bottom_a(third)
        self.top_b(third + size % 3)


def sort_values(values: Iterable[int]) -> list[str]:
    """The operations that sort ``values`` on stack a; none for fewer than two."""
    ranks = to_ranks(values)
    if len(ranks) < 2:
        return []
    sorter = Sorter(Stacks(ranks))
    sorter.top_a(len(ranks))
    return sorter.output