"""Red-Nosed Reports: counting safe level reports."""

from __future__ import annotations

import logging
from itertools import pairwise

logger = logging.getLogger(__name__)

DAY = "02"


def prepare_input(raw_input: str) -> list[list[int]]:
    """Parse each line of space separated levels into a report."""
    lines = raw_input.removesuffix("\n").split("\n")
    logger.info("length of input file: %d", len(lines))
    logger.debug("plain input: %s", lines)
    return [[int(level) for level in line.split(" ")] for line in lines]


def _is_monotonic(report: list[int]) -> bool:
    steps = list(pairwise(report))
    return all(a <= b for a, b in steps) or all(a >= b for a, b in steps)


def _is_safe(report: list[int]) -> bool:
    if not _is_monotonic(report):
        return False
    return all(1 <= abs(a - b) <= 3 for a, b in pairwise(report))


def part1(prepared: list[list[int]]) -> int:
    """Count reports that are monotonic with steps between 1 and 3."""
    logger.info("day %s part 1: start", DAY)
    return sum(1 for report in prepared if _is_safe(report))


def part2(prepared: list[list[int]]) -> int:
    """The second part has no solution here; every report scores 0."""
    logger.info("day %s part 2: start", DAY)
    answer = 0
    for report in prepared:
        logger.debug("report %s", report)
    return answer


def execute_part(part: int, raw_input: str) -> int:
    """Solve the given part (1 or 2) of the raw puzzle input."""
    prepared = prepare_input(raw_input)
    if part == 1:
        return part1(prepared)
    if part == 2:
        return part2(prepared)
    raise ValueError(f"part {part} does not exist")