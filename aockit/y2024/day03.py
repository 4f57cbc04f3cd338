"""Mull It Over: summing products from corrupted memory."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DAY = "03"

_INSTRUCTION = re.compile(r"mul\([0-9]{1,3},[0-9]{1,3}\)|do\(\)|don't\(\)")
_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")

DO = "do()"
DONT = "don't()"


def prepare_input(raw_input: str) -> list[str]:
    """Extract the mul, do and don't instructions from the joined input lines."""
    lines = raw_input.removesuffix("\n").split("\n")
    logger.info("length of input file: %d", len(lines))
    logger.debug("plain input: %s", lines)
    return _INSTRUCTION.findall("".join(lines))


def run_mul(instruction: str) -> int:
    """Evaluate a ``mul(a,b)`` instruction."""
    match = _MUL.fullmatch(instruction)
    if match is None:
        raise ValueError(f"not a mul instruction: {instruction!r}")
    return int(match.group(1)) * int(match.group(2))


def part1(prepared: list[str]) -> int:
    """Sum every multiplication, ignoring do and don't."""
    logger.info("day %s part 1: start", DAY)
    return sum(run_mul(i) for i in prepared if i not in (DO, DONT))


def part2(prepared: list[str]) -> int:
    """Sum the multiplications that are enabled by the latest do or don't."""
    logger.info("day %s part 2: start", DAY)
    total = 0
    enabled = True
    for instruction in prepared:
        if instruction == DO:
            enabled = True
        elif instruction == DONT:
            enabled = False
        elif enabled:
            total += run_mul(instruction)
    return total


def execute_part(part: int, raw_input: str) -> int:
    """Solve the given part (1 or 2) of the raw puzzle input."""
    prepared = prepare_input(raw_input)
    if part == 1:
        return part1(prepared)
    if part == 2:
        return part2(prepared)
    raise ValueError(f"part {part} does not exist")