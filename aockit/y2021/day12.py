"""Passage Pathing: counting routes through a cave system."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

START = "start"
END = "end"


def is_lower(name: str) -> bool:
    """True when no letter of ``name`` is upper case."""
    return all(char.islower() or not char.isalpha() for char in name)


@dataclass(eq=False)
class Node:
    """A cave; small (single use) caves may be visited only once per path."""

    name: str
    single_use: bool = False
    neighbours: list[Node] = field(default_factory=list, repr=False)

    def paths(self, path: Sequence[str] = (), jokers: int = 0) -> list[str]:
        """All routes to the end cave continuing ``path`` through this cave.

        ``jokers`` is how many small caves may still be visited a second time;
        the start cave is never visited twice.
        """
        if self.single_use and self.name in path:
            if self.name == START or jokers == 0:
                return []
            jokers -= 1
        route = (*path, self.name)
        logger.debug("visiting %s", ",".join(route))
        if self.name == END:
            return [",".join(route)]
        return [found for node in self.neighbours for found in node.paths(route, jokers)]


def parse_caves(raw_input: str) -> Node:
    """Parse ``a-b`` connection lines and return the start cave."""
    text = raw_input.strip("\n")
    nodes: dict[str, Node] = {}
    for line in text.split("\n"):
        first, sep, second = line.partition("-")
        if not sep or not first or not second:
            raise ValueError(f"malformed connection: {line!r}")
        for name in (first, second):
            nodes.setdefault(name, Node(name, is_lower(name)))
        nodes[first].neighbours.append(nodes[second])
        nodes[second].neighbours.append(nodes[first])
    if START not in nodes:
        raise ValueError("cave system has no start cave")
    logger.info("number of caves: %d", len(nodes))
    return nodes[START]


def count_paths(start: Node, jokers: int = 0) -> int:
    """Number of distinct routes from ``start`` to the end cave."""
    return len(start.paths((), jokers))