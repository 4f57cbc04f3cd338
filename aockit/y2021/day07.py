"""The Treachery of Whales: aligning crabs with the least fuel."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


def triangle_number(x: int) -> int:
    """Sum of 1 to ``x``."""
    if x < 0:
        raise ValueError("triangle numbers need a non-negative argument")
    return x * (x + 1) // 2


class CrabPositions(list):
    """Horizontal crab positions relative to the current alignment target."""

    def shift_left(self) -> None:
        self[:] = [position - 1 for position in self]

    def total_fuel(self) -> int:
        """Fuel to move every crab to 0 at one unit per step."""
        return sum(abs(position) for position in self)

    def total_fuel_exp(self) -> int:
        """Fuel to move every crab to 0 when each further step costs one more."""
        return sum(triangle_number(abs(position)) for position in self)


def parse_positions(raw_input: str) -> CrabPositions:
    """Parse comma separated positions, sorted ascending."""
    text = raw_input.strip()
    if not text:
        raise ValueError("no crab positions")
    positions = CrabPositions(sorted(int(value.strip()) for value in text.split(",")))
    logger.info("number of crabs: %d", len(positions))
    return positions


def _descend(positions: Iterable[int], cost: Callable[[CrabPositions], int]) -> int:
    crabs = CrabPositions(sorted(positions))
    if not crabs:
        raise ValueError("no crab positions")
    lowest = cost(crabs)
    for _ in range(1, crabs[-1]):
        crabs.shift_left()
        fuel = cost(crabs)
        logger.debug("new fuel: %d | lowest: %d", fuel, lowest)
        if fuel > lowest:
            break
        lowest = fuel
    return lowest


def lowest_fuel(positions: Iterable[int]) -> int:
    """Least fuel to align all crabs at constant cost per step."""
    return _descend(positions, CrabPositions.total_fuel)


def lowest_fuel_exp(positions: Iterable[int]) -> int:
    """Least fuel to align all crabs at increasing cost per step."""
    return _descend(positions, CrabPositions.total_fuel_exp)