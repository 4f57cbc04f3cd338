"""Dive!: steering a submarine with forward, down and up commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Command:
    direction: Direction
    pace: int


def parse_commands(raw_input: str) -> list[Command]:
    """Parse lines of the form ``<direction> <pace>``."""
    text = raw_input.strip("\n")
    if not text:
        return []
    commands = []
    for line in text.split("\n"):
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed command: {line!r}")
        commands.append(Command(Direction(parts[0]), int(parts[1])))
    logger.info("length of input file: %d", len(commands))
    return commands


def navigate(commands: list[Command]) -> tuple[int, int]:
    """Follow the commands using aim; return horizontal position and depth."""
    horizontal = depth = aim = 0
    for command in commands:
        if command.direction is Direction.FORWARD:
            horizontal += command.pace
            depth += aim * command.pace
        elif command.direction is Direction.DOWN:
            aim += command.pace
        else:
            aim -= command.pace
    logger.info("horizontal position: %d, depth: %d", horizontal, depth)
    return horizontal, depth