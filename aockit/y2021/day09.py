"""Smoke Basin: low points and basins of a height map."""

from __future__ import annotations

import heapq
import logging
import math
from typing import Iterator

logger = logging.getLogger(__name__)

_PEAK = 9


class Heightmap:
    """A grid of heights indexed by column ``x`` and row ``y``."""

    def __init__(self, heights: list[list[int]]) -> None:
        self.heights = heights
        self._visited: set[tuple[int, int]] = set()

    @property
    def width(self) -> int:
        return len(self.heights[0]) if self.heights else 0

    @property
    def height(self) -> int:
        return len(self.heights)

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def is_local_minimum(self, x: int, y: int) -> bool:
        """True when every neighbour is strictly higher."""
        middle = self.heights[y][x]
        return all(self.heights[ny][nx] > middle for nx, ny in self._neighbours(x, y))

    def basin_size(self, x: int, y: int) -> int:
        """Size of the basin around ``(x, y)``; cells counted before are skipped."""
        size = 0
        pending = [(x, y)]
        while pending:
            cell = pending.pop()
            if cell in self._visited:
                continue
            self._visited.add(cell)
            cx, cy = cell
            if self.heights[cy][cx] == _PEAK:
                continue
            size += 1
            pending.extend(self._neighbours(cx, cy))
        return size

    def low_points(self) -> Iterator[tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                if self.is_local_minimum(x, y):
                    yield x, y


def parse_heightmap(raw_input: str) -> Heightmap:
    """Parse lines of digits into a rectangular height map."""
    lines = raw_input.strip("\n").split("\n")
    if len({len(line) for line in lines}) != 1 or not lines[0]:
        raise ValueError("height map must be a non-empty rectangle")
    for line in lines:
        if not line.isdigit() or not line.isascii():
            raise ValueError(f"height map line holds non-digits: {line!r}")
    logger.info("length of input file: %d", len(lines))
    return Heightmap([[int(char) for char in line] for line in lines])


def risk_level_sum(heightmap: Heightmap) -> int:
    """Sum of one plus the height of every low point."""
    return sum(1 + heightmap.heights[y][x] for x, y in heightmap.low_points())


def basin_product(heightmap: Heightmap) -> int:
    """Product of the sizes of the three largest basins."""
    heightmap._visited.clear()
    sizes = [heightmap.basin_size(x, y) for x, y in list(heightmap.low_points())]
    largest = heapq.nlargest(3, sizes)
    logger.debug("largest basins: %s", largest)
    return math.prod(largest)