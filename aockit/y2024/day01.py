"""Historian Hysteria: distances and similarity between two location lists."""

from __future__ import annotations

import logging
from collections import Counter

logger = logging.getLogger(__name__)

DAY = "01"


def prepare_input(raw_input: str) -> tuple[list[int], list[int]]:
    """Parse lines of two numbers separated by three spaces into two lists."""
    lines = raw_input.removesuffix("\n").split("\n")
    logger.info("length of input file: %d", len(lines))
    logger.debug("plain input: %s", lines)
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        parts = line.split("   ")
        if len(parts) < 2:
            raise ValueError(f"expected two location ids in line {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def part1(prepared: tuple[list[int], list[int]]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    logger.info("day %s part 1: start", DAY)
    left, right = prepared
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(prepared: tuple[list[int], list[int]]) -> int:
    """Sum of each left id times how often it occurs in the right list."""
    logger.info("day %s part 2: start", DAY)
    left, right = prepared
    occurrences = Counter(right)
    return sum(location * occurrences[location] for location in left)


def execute_part(part: int, raw_input: str) -> int:
    """Solve the given part (1 or 2) of the raw puzzle input."""
    prepared = prepare_input(raw_input)
    if part == 1:
        return part1(prepared)
    if part == 2:
        return part2(prepared)
    raise ValueError(f"part {part} does not exist")