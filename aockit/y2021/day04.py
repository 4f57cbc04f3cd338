"""Giant Squid: playing bingo until every card has won."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from aockit.sequences import Pair

logger = logging.getLogger(__name__)


@dataclass
class BingoCard:
    """A bingo card of numbers kept as text, with the cells marked so far."""

    rows: list[list[str]]
    marked: set[tuple[int, int]] = field(default_factory=set)
    completed: bool = False
    score: int = 0

    def _cells(self):
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                yield (r, c), value

    def mark(self, number: str) -> bool:
        """Mark ``number``; on bingo record the score and return True."""
        for position, value in self._cells():
            if value == number:
                self.marked.add(position)
        if not self.has_bingo():
            return False
        self.completed = True
        unmarked = sum(int(value) for position, value in self._cells() if position not in self.marked)
        self.score = int(number) * unmarked
        return True

    def has_bingo(self) -> bool:
        """True when a whole row or a whole column is marked."""
        width = len(self.rows[0]) if self.rows else 0
        full_row = any(
            all((r, c) in self.marked for c in range(width)) for r in range(len(self.rows))
        )
        full_column = any(
            all((r, c) in self.marked for r in range(len(self.rows))) for c in range(width)
        )
        return full_row or full_column


def parse_card(text: str) -> BingoCard:
    """Parse rows of whitespace separated numbers; blank lines are ignored."""
    rows = [line.split() for line in text.split("\n") if line.strip()]
    if not rows:
        raise ValueError("bingo card has no rows")
    if len({len(row) for row in rows}) != 1:
        raise ValueError("bingo card rows differ in length")
    logger.debug("bingo card: %s", rows)
    return BingoCard(rows)


def parse_game(raw_input: str) -> tuple[list[str], list[BingoCard]]:
    """Split the input into the drawn numbers and the cards."""
    blocks = raw_input.strip("\n").split("\n\n")
    if not blocks[0].strip():
        raise ValueError("no numbers to draw")
    numbers = [number.strip() for number in blocks[0].split(",")]
    cards = [parse_card(block) for block in blocks[1:] if block.strip()]
    return numbers, cards


def play(raw_input: str) -> list[Pair]:
    """Draw numbers until all cards won; return (card index, score) in winning order."""
    numbers, cards = parse_game(raw_input)
    winners: list[Pair] = []
    for number in numbers:
        for index, card in enumerate(cards):
            if card.completed or not card.mark(number):
                continue
            logger.debug("card %d completed with score %d", index, card.score)
            winners.append(Pair(index, card.score))
            if len(winners) == len(cards):
                logger.info("all cards completed")
                return winners
    return winners