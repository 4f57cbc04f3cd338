"""Syntax Scoring: corrupted and incomplete bracket chunks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

_PAIRS = {"{": "}", "[": "]", "(": ")", "<": ">"}
_MATCHING = {**_PAIRS, **{close: open_ for open_, close in _PAIRS.items()}}

BRACKET_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
AUTOCOMPLETE_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


def matching_bracket(bracket: str) -> str:
    """The bracket that pairs with ``bracket``, or a space for anything else."""
    return _MATCHING.get(bracket, " ")


def brackets_match(a: str, b: str) -> bool:
    return b == matching_bracket(a)


@dataclass
class Chunk:
    """An opening bracket, what closed it (empty if nothing did) and nested chunks."""

    opening: str
    closing: str = ""
    subs: list[Chunk] = field(default_factory=list)

    def verify(self) -> int:
        """Points of the first illegal closing bracket, 0 if there is none."""
        for sub in self.subs:
            points = sub.verify()
            if points > 0:
                return points
        if not brackets_match(self.opening, self.closing):
            return BRACKET_POINTS.get(self.closing, 0)
        return 0

    def complete(self) -> str:
        """Closing brackets that would complete this chunk, innermost first."""
        tail = "".join(sub.complete() for sub in self.subs)
        if not brackets_match(self.opening, self.closing):
            tail += matching_bracket(self.opening)
        return tail


def _parse(text: str, start: int) -> tuple[int, Optional[Chunk]]:
    if start >= len(text) or text[start] not in _PAIRS:
        return 0, None
    chunk = Chunk(text[start])
    position = start + 1
    while position < len(text):
        sub_length, sub = _parse(text, position)
        if sub_length == 0:
            chunk.closing = text[position]
            return position + 1 - start, chunk
        position += sub_length
        chunk.subs.append(sub)
    return position - start, chunk


def parse_chunk(text: str) -> tuple[int, Optional[Chunk]]:
    """Parse the chunk at the start of ``text``; return characters read and the chunk."""
    return _parse(text, 0)


def _parse_line(line: str) -> Chunk:
    _, chunk = parse_chunk(line)
    if chunk is None:
        raise ValueError(f"line does not start with an opening bracket: {line!r}")
    return chunk


def autocomplete_score(text: str) -> int:
    total = 0
    for bracket in text:
        total = total * 5 + AUTOCOMPLETE_POINTS.get(bracket, 0)
    return total


def syntax_error_score(lines: Iterable[str]) -> int:
    """Total points of the first illegal character of every line."""
    return sum(_parse_line(line).verify() for line in lines)


def middle_autocomplete_score(lines: Iterable[str]) -> int:
    """Middle autocomplete score of the lines that are not corrupted."""
    chunks = [_parse_line(line) for line in lines]
    scores = sorted(autocomplete_score(chunk.complete()) for chunk in chunks if chunk.verify() == 0)
    logger.debug("auto complete scores %s", scores)
    if not scores:
        raise ValueError("no incomplete lines to score")
    return scores[len(scores) // 2]