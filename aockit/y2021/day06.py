"""Lanternfish: simulating an exponentially growing school of fish."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_TIMERS = 9
_RESET = 6


@dataclass
class FishSchool:
    """Fish counted by their timer value, 0 to 8."""

    timers: deque = field(default_factory=lambda: deque([0] * _TIMERS))
    size: int = 0

    def add_fish(self, timer: int, amount: int = 1) -> None:
        if not 0 <= timer < _TIMERS:
            raise ValueError(f"fish timer out of range: {timer}")
        self.timers[timer] += amount
        self.size += amount

    def advance_day(self) -> None:
        """Count every timer down; fish at 0 reset to 6 and spawn one at 8."""
        births = self.timers[0]
        self.timers.rotate(-1)
        self.timers[_RESET] += births
        self.size += births
        logger.debug("fish school: %s", list(self.timers))


def parse_school(raw_input: str) -> FishSchool:
    """Parse comma separated timer values."""
    school = FishSchool()
    text = raw_input.strip()
    if not text:
        return school
    for value in text.split(","):
        school.add_fish(int(value.strip()), 1)
    logger.info("initial fish: %d", school.size)
    return school


def simulate(raw_input: str, days: int) -> int:
    """Return the number of fish after ``days`` days."""
    if days < 0:
        raise ValueError("days must not be negative")
    school = parse_school(raw_input)
    for _ in range(days):
        school.advance_day()
    return school.size