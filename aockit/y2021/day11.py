"""Dumbo Octopus: cascading flashes on an energy grid."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

_MAX_ENERGY = 9


class Octomap:
    """A rectangular grid of octopus energy levels, indexed ``energy[y][x]``."""

    def __init__(self, energy: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in energy]
        if not rows or not rows[0] or len({len(row) for row in rows}) != 1:
            raise ValueError("octopus map must be a non-empty rectangle")
        self.energy = rows
        self._flashed: set[tuple[int, int]] = set()

    @property
    def width(self) -> int:
        return len(self.energy[0])

    @property
    def height(self) -> int:
        return len(self.energy)

    def _around(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for ny in (y - 1, y, y + 1):
            for nx in (x - 1, x, x + 1):
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    yield nx, ny

    def _raise_energy(self, cells: Iterable[tuple[int, int]]) -> int:
        pending = list(cells)
        flashes = 0
        while pending:
            x, y = pending.pop()
            if (x, y) in self._flashed:
                continue
            self.energy[y][x] += 1
            if self.energy[y][x] > _MAX_ENERGY:
                self._flashed.add((x, y))
                self.energy[y][x] = 0
                flashes += 1
                pending.extend(self._around(x, y))
        return flashes

    def flash_at(self, x: int, y: int) -> int:
        """Raise the energy around ``(x, y)``; return how many octopuses flash."""
        return self._raise_energy(self._around(x, y))

    def step(self) -> tuple[int, bool]:
        """Run one step; return the flashes and whether every octopus flashed."""
        flashes = self._raise_energy(
            (x, y) for y in range(self.height) for x in range(self.width)
        )
        self._flashed.clear()
        return flashes, flashes == self.width * self.height


def parse_octomap(raw_input: str) -> Octomap:
    """Parse lines of digits into an octopus map."""
    lines = raw_input.strip("\n").split("\n")
    for line in lines:
        if not line.isascii() or not line.isdigit():
            raise ValueError(f"octopus map line holds non-digits: {line!r}")
    logger.info("length of input file: %d", len(lines))
    return Octomap([int(char) for char in line] for line in lines)


def count_flashes(octomap: Octomap, steps: int) -> int:
    """Total flashes over ``steps`` steps."""
    return sum(octomap.step()[0] for _ in range(steps))


def first_sync_step(octomap: Octomap) -> int:
    """The first step in which every octopus flashes."""
    steps = 1
    while not octomap.step()[1]:
        steps += 1
    return steps