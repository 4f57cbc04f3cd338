"""Binary Diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

Bits = tuple[int, ...]


def to_number(bits: Sequence[int]) -> int:
    """Read a sequence of bits, most significant first, as an integer."""
    result = 0
    for bit in bits:
        result = result * 2 + bit
    return result


def parse_report(raw_input: str) -> list[Bits]:
    """Parse lines of binary digits; any character other than '0' is a 1."""
    text = raw_input.strip("\n")
    rows = [tuple(0 if char == "0" else 1 for char in line) for line in text.split("\n")] if text else []
    if len({len(row) for row in rows}) > 1:
        raise ValueError("all report lines must have the same width")
    logger.info("length of input file: %d", len(rows))
    return rows


def _balance(rows: Sequence[Bits], index: int) -> int:
    """Number of ones minus number of zeros at ``index``."""
    return sum(1 if row[index] == 1 else -1 for row in rows)


def power_consumption(rows: Sequence[Bits]) -> int:
    """Gamma rate times epsilon rate; ties in a column count as 0 for gamma."""
    if not rows:
        raise ValueError("empty diagnostic report")
    gamma = [1 if _balance(rows, i) > 0 else 0 for i in range(len(rows[0]))]
    epsilon = [1 - bit for bit in gamma]
    logger.info("gamma rate: %d, epsilon rate: %d", to_number(gamma), to_number(epsilon))
    return to_number(gamma) * to_number(epsilon)


def _rating(rows: Sequence[Bits], keep: Callable[[int, int], bool]) -> int:
    filtered = list(rows)
    width = len(rows[0]) if rows else 0
    for index in range(width):
        selected = 1 if _balance(filtered, index) >= 0 else 0
        filtered = [row for row in filtered if keep(row[index], selected)]
        logger.debug("index %d selected %d: %s", index, selected, filtered)
        if len(filtered) == 1:
            return to_number(filtered[0])
    return 0


def oxygen_generator_rating(rows: Sequence[Bits]) -> int:
    """Keep rows with the most common bit (1 on ties); 0 if no single row remains."""
    return _rating(rows, lambda bit, selected: bit == selected)


def co2_scrubber_rating(rows: Sequence[Bits]) -> int:
    """Keep rows with the least common bit (0 on ties); 0 if no single row remains."""
    return _rating(rows, lambda bit, selected: bit != selected)


def life_support_rating(rows: Sequence[Bits]) -> int:
    return oxygen_generator_rating(rows) * co2_scrubber_rating(rows)