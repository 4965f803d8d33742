from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import overload

from chartdraw.errors import DivisionIndexError


class Boundaries(Sequence[int]):
    """Evenly spaced division boundaries, computed on access.

    Iterating twice yields the same values; nothing is cached.
    """

    def __init__(self, divide_count: int, size: int) -> None:
        self._divide_count = divide_count
        self._size = size

    def __len__(self) -> int:
        return self._divide_count + 1

    def _value(self, i: int) -> int:
        if self._divide_count == 0:
            return 0
        if i == self._divide_count:
            return self._size
        return int(i * self._size / self._divide_count)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        if isinstance(index, slice):
            return [self._value(i) for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if index < 0 or index >= len(self):
            raise IndexError(f"boundary index out of range: {index}")
        return self._value(index)

    def __iter__(self) -> Iterator[int]:
        for i in range(len(self)):
            yield self._value(i)

    def __repr__(self) -> str:
        return f"Boundaries({list(self)!r})"


class AxisRange:
    def __init__(self, divide_count: int, size: int) -> None:
        self.divide_count = max(0, int(divide_count))
        self.size = int(size)

    def auto_divide(self) -> Boundaries:
        return Boundaries(self.divide_count, self.size)

    def get_range(self, index: int) -> tuple[int, int]:
        if index < 0 or index >= self.divide_count:
            raise DivisionIndexError(f"division {index} out of range [0, {self.divide_count})")
        values = self.auto_divide()
        return values[index], values[index + 1]

    def division_width(self) -> float:
        if self.divide_count == 0:
            return 0.0
        return self.size / self.divide_count

    def __repr__(self) -> str:
        return f"AxisRange(divide_count={self.divide_count}, size={self.size})"
