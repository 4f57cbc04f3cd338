"""Hydrothermal Venture: counting points where vent lines overlap."""

from __future__ import annotations

import logging
from typing import Iterator

from aockit.grid import CoordinateSystem
from aockit.sequences import Pair
from aockit.vector import Vector, to_vector

logger = logging.getLogger(__name__)


def parse_lines(raw_input: str) -> list[Pair]:
    """Parse lines of the form ``x1,y1 -> x2,y2`` into pairs of vectors."""
    text = raw_input.removesuffix("\n")
    if not text:
        return []
    segments = []
    for line in text.split("\n"):
        start, sep, end = line.partition(" -> ")
        if not sep:
            raise ValueError(f"malformed vent line: {line!r}")
        segments.append(Pair(to_vector(start), to_vector(end)))
    logger.info("length of input file: %d", len(segments))
    return segments


def _points(start: Vector, end: Vector) -> Iterator[tuple[int, int]]:
    direction = end.sub(start)
    step = direction.normalized()
    if step[0] == 0 or step[1] == 0:
        pass
    elif abs(step[0]) == abs(step[1]):
        step = step.ceil()
    else:
        logger.warning("direction %s cannot be used", direction)
        return
    length = direction.magnitude()
    current = start
    for _ in range(int(length) + 1):
        if current.sub(start).magnitude() > length:
            break
        yield int(current[0]), int(current[1])
        current = current.add(step)


def count_dangerous_areas(lines: list[Pair]) -> int:
    """Count points covered by at least two horizontal, vertical or 45° lines."""
    floor = CoordinateSystem()
    for start, end in lines:
        for x, y in _points(start, end):
            floor.modify(lambda count: 1 if count is None else count + 1, x, y)
    logger.debug("ocean floor:\n%s", floor)
    return sum(1 for column in floor.values() for count in column.values() if count >= 2)