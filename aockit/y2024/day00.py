"""Template day: parses lines and answers 0 for both parts."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DAY = "00"


def prepare_input(raw_input: str) -> list[str]:
    """Split the puzzle input into lines, ignoring one trailing newline."""
    lines = raw_input.removesuffix("\n").split("\n")
    logger.info("length of input file: %d", len(lines))
    logger.debug("plain input: %s", lines)
    return lines


def _template_answer(part: int, prepared: list[str]) -> int:
    """Walk the lines; the template's lines contribute nothing to the answer."""
    logger.info("day %s part %d: start", DAY, part)
    answer = 0
    for number, line in enumerate(prepared, start=1):
        logger.debug("line %d: %r", number, line)
    return answer


def part1(prepared: list[str]) -> int:
    """The template's first part answers 0."""
    return _template_answer(1, prepared)


def part2(prepared: list[str]) -> int:
    """The template's second part answers 0."""
    return _template_answer(2, prepared)


def execute_part(part: int, raw_input: str) -> int:
    """Solve the given part (1 or 2) of the raw puzzle input."""
    prepared = prepare_input(raw_input)
    if part == 1:
        return part1(prepared)
    if part == 2:
        return part2(prepared)
    raise ValueError(f"part {part} does not exist")