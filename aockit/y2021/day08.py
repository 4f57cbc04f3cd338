"""Seven Segment Search: decoding scrambled seven-segment displays."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from aockit.sequences import Pair

logger = logging.getLogger(__name__)

ZERO = "abcefg"
ONE = "cf"
TWO = "acdeg"
THREE = "acdfg"
FOUR = "bcdf"
FIVE = "abdfg"
SIX = "abdefg"
SEVEN = "acf"
EIGHT = "abcdefg"
NINE = "abcdfg"

_DIGITS = {
    ZERO: 0,
    ONE: 1,
    TWO: 2,
    THREE: 3,
    FOUR: 4,
    FIVE: 5,
    SIX: 6,
    SEVEN: 7,
    EIGHT: 8,
    NINE: 9,
}

INVALID_DIGIT = 10
EASY_LENGTHS = frozenset({2, 3, 4, 7})


class DecoderError(ValueError):
    """Training produced a wiring that contradicts the pattern just seen."""


def _canonical(text: str) -> str:
    return "".join(sorted(text))


def to_digit(pattern: str) -> int:
    """Digit shown by a canonical segment pattern, or 10 if it shows none."""
    return _DIGITS.get(pattern, INVALID_DIGIT)


def minus(a: str, b: str) -> str:
    """Remove the first occurrence in ``a`` of every segment in ``b``."""
    for segment in b:
        a = a.replace(segment, "", 1)
    return a


@dataclass
class SegmentDecoder:
    """Learns which scrambled wire drives each canonical segment."""

    mapping: dict[str, str] = field(default_factory=dict)
    _candidates: dict[str, list[str]] = field(default_factory=dict, repr=False)

    def _expect(self, digit: str, pattern: str) -> None:
        encoded = self.encode(digit)
        if encoded != pattern:
            raise DecoderError(f"training {digit!r} unsuccessful: {encoded!r} != {pattern!r}")

    def train(self, pattern: str) -> None:
        """Learn from one canonical signal pattern; patterns come shortest first."""
        length = len(pattern)
        if length == 2:
            self.mapping["c"], self.mapping["f"] = pattern[0], pattern[1]
            self._expect(ONE, pattern)
        elif length == 3:
            remain = minus(pattern, self.encode(ONE))
            if len(remain) != 1:
                logger.warning("not exactly 1 segment remaining after minus: %s", remain)
                return
            self.mapping["a"] = remain
            self._expect(SEVEN, pattern)
        elif length == 4:
            for segment in minus(pattern, self.encode(ONE)):
                self._candidates.setdefault(segment, []).extend("bd")
            logger.debug("decoder candidates: %s", self._candidates)
        elif length == 5:
            self._train_five(pattern)
        elif length == 6:
            if to_digit(self.decode(pattern)) == INVALID_DIGIT:
                self.mapping["c"], self.mapping["f"] = self.mapping.get("f", ""), self.mapping.get("c", "")
        elif length == 7:
            self._expect(EIGHT, pattern)
        else:
            return
        logger.debug("trained decoder: %s", self.mapping)

    def _train_five(self, pattern: str) -> None:
        remain = minus(pattern, self.encode(SEVEN))
        if len(remain) > 2:
            return
        if len(remain) < 2:
            raise DecoderError(f"not exactly 2 segments remaining after minus: {remain!r}")
        for segment in remain:
            if segment in self._candidates:
                self.mapping["d"] = segment
                del self._candidates[segment]
            else:
                self.mapping["g"] = segment
        if len(self._candidates) > 1:
            raise DecoderError("still too many candidates")
        for segment in self._candidates:
            self.mapping["b"] = segment
        self._candidates = {}
        self._expect(THREE, pattern)
        used = set(self.mapping.values())
        missing = next((segment for segment in EIGHT if segment not in used), None)
        if missing is not None:
            self.mapping["e"] = missing

    def encode(self, pattern: str) -> str:
        """Scrambled pattern for a canonical one; unknown segments are dropped."""
        return _canonical(self.mapping.get(segment, "") for segment in pattern)

    def decode(self, pattern: str) -> str:
        """Canonical pattern for a scrambled one."""
        return _canonical(
            canonical
            for wire in pattern
            for canonical, scrambled in self.mapping.items()
            if scrambled == wire
        )


def slice_to_number(digits: Sequence[int]) -> int:
    """Read decimal digits, most significant first, as a number."""
    result = 0
    for digit in digits:
        result = result * 10 + digit
    return result


def parse_entries(raw_input: str) -> list[Pair]:
    """Parse ``signals | outputs`` lines; signals are sorted by length."""
    text = raw_input.strip("\n")
    if not text:
        return []
    entries = []
    for line in text.split("\n"):
        signal_text, sep, output_text = line.partition(" | ")
        if not sep:
            raise ValueError(f"malformed entry: {line!r}")
        signals = sorted((_canonical(s) for s in signal_text.split(" ")), key=len)
        outputs = [_canonical(o) for o in output_text.split(" ")]
        entries.append(Pair(signals, outputs))
    logger.info("length of input file: %d", len(entries))
    return entries


def count_easy_digits(entries: Iterable[Pair]) -> int:
    """Count output patterns of a length that only one digit has."""
    return sum(1 for _, outputs in entries for output in outputs if len(output) in EASY_LENGTHS)


def sum_outputs(entries: Iterable[Pair]) -> int:
    """Decode every entry's output value and add them up."""
    total = 0
    for signals, outputs in entries:
        decoder = SegmentDecoder()
        for signal in signals:
            try:
                decoder.train(signal)
            except DecoderError as error:
                logger.error("%s", error)
        digits = [to_digit(decoder.decode(output)) for output in outputs]
        logger.debug("decoded output: %s", digits)
        total += slice_to_number(digits)
    return total