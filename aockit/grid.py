"""Two-dimensional maps: a dense fixed grid and two sparse coordinate maps."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


def _render(rows: Iterable[Iterable[bool]]) -> str:
    return "".join("".join("#" if filled else "." for filled in row) + "\n" for row in rows)


class Map(Generic[T]):
    """A dense grid of ``width`` columns by ``height`` rows."""

    def __init__(self, width: int, height: int, fill: Optional[T] = None) -> None:
        self.width = width
        self.height = height
        self._columns = [[fill] * height for _ in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} map")

    def tile(self, x: int, y: int) -> Optional[T]:
        """Return the tile at ``(x, y)``; raise IndexError outside the grid."""
        self._check(x, y)
        return self._columns[x][y]

    def __getitem__(self, key: tuple[int, int]) -> Optional[T]:
        return self.tile(*key)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        x, y = key
        self._check(x, y)
        self._columns[x][y] = value


class CoordinateSystem(dict):
    """Sparse map from x to a mapping of y to a value; unset cells read as None."""

    def modify(self, func: Callable[[Any], Any], x: int, y: int) -> None:
        """Replace the cell at ``(x, y)`` by ``func`` of its value, None if unset."""
        column = self.setdefault(x, {})
        column[y] = func(column.get(y))

    def row(self, index: int) -> list:
        width, negative = self.width()
        result: list = [None] * width
        for x, column in self.items():
            if index in column:
                result[x + negative] = column[index]
        return result

    def column(self, index: int) -> list:
        height, negative = self.height()
        result: list = [None] * height
        for y, value in self.get(index, {}).items():
            result[y + negative] = value
        return result

    def width(self) -> tuple[int, int]:
        """Return the total width and the size of the negative part."""
        return _extent(self.keys())

    def height(self) -> tuple[int, int]:
        """Return the total height and the size of the negative part."""
        return _extent(y for column in self.values() for y in column)

    def total_size(self) -> int:
        return sum(len(column) for column in self.values())

    def __str__(self) -> str:
        height, negative = self.height()
        rows = (
            (value is not None for value in self.row(y))
            for y in range(height - negative - 1, -negative - 1, -1)
        )
        return _render(rows)


def _extent(coordinates: Iterable[int]) -> tuple[int, int]:
    negative = 0
    positive = 0
    for coordinate in coordinates:
        if coordinate < negative:
            negative = coordinate
        elif coordinate > positive:
            positive = coordinate
    return 1 + positive - negative, -negative


@dataclass
class MapElem:
    """A set cell of a SingleSliceMap."""

    x: int = 0
    y: int = 0
    data: Any = None


class SingleSliceMap(list):
    """Sparse map holding only its set cells, as a list of MapElem."""

    def _find(self, x: int, y: int) -> Optional[MapElem]:
        return next((elem for elem in self if elem.x == x and elem.y == y), None)

    def modify(self, func: Callable[[Any], Any], x: int, y: int) -> None:
        """Replace the cell at ``(x, y)`` by ``func`` of its value, adding it if unset."""
        elem = self._find(x, y)
        if elem is not None and elem.data is not None:
            elem.data = func(elem.data)
            return
        self.append(MapElem(x, y, func(None)))

    def remove(self, x: int, y: int) -> None:
        """Remove the cell at ``(x, y)``; does nothing when it is unset."""
        elem = self._find(x, y)
        if elem is not None:
            super().remove(elem)

    def get(self, x: int, y: int) -> Any:
        elem = self._find(x, y)
        return None if elem is None else elem.data

    def row(self, index: int) -> list[MapElem]:
        width, negative = self.width()
        result = [MapElem() for _ in range(width)]
        for elem in self:
            if elem.y == index:
                result[elem.x + negative] = replace(elem)
        return result

    def column(self, index: int) -> list[MapElem]:
        height, negative = self.height()
        result = [MapElem() for _ in range(height)]
        for elem in self:
            if elem.x == index:
                result[elem.y + negative] = replace(elem)
        return result

    def width(self) -> tuple[int, int]:
        return _extent(elem.x for elem in self)

    def height(self) -> tuple[int, int]:
        return _extent(elem.y for elem in self)

    def __str__(self) -> str:
        height, negative = self.height()
        rows = (
            (elem.data is not None for elem in self.row(y))
            for y in range(height - negative - 1, -negative - 1, -1)
        )
        return _render(rows)