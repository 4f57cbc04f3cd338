"""Decimal numbers of arbitrary size stored digit by digit."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest

_DIGITS = "0123456789"


@dataclass(frozen=True)
class WorryLevel:
    """A non-negative number kept as decimal digits, least significant first."""

    digits: tuple[int, ...] = ()

    def add(self, b: int) -> WorryLevel:
        """Add a plain integer, whose decimal text is read as digit sequence."""
        if b < 0:
            raise ValueError("cannot add a negative number to a worry level")
        return self.add_level(new_worry_level(str(b)))

    def add_level(self, other: WorryLevel) -> WorryLevel:
        """Return the digit-wise sum of two worry levels with carries applied."""
        summed = [a + b for a, b in zip_longest(self.digits, other.digits, fillvalue=0)]
        result: list[int] = []
        carry = 0
        for digit in summed:
            total = digit + carry
            result.append(total % 10)
            carry = total // 10
        while carry:
            result.append(carry % 10)
            carry //= 10
        return WorryLevel(tuple(result))

    def mul(self, b: int) -> WorryLevel:
        """Double the level ``b - 1`` times; values below 2 leave it unchanged."""
        result = self
        for _ in range(1, b):
            result = result.add_level(result)
        return result

    def divisible_by(self, b: int) -> bool:
        """Check whether the digit sum is a multiple of ``b``."""
        return sum(self.digits) % b == 0

    def __str__(self) -> str:
        return "".join(str(digit) for digit in reversed(self.digits))


def new_worry_level(text: str) -> WorryLevel:
    """Build a worry level whose digits are the characters of ``text`` in order."""
    for char in text:
        if char not in _DIGITS:
            raise ValueError(f"not a decimal digit: {char!r}")
    return WorryLevel(tuple(ord(char) - ord("0") for char in text))