"""Small floating point vectors of any dimension."""

from __future__ import annotations

import math
from typing import Iterable, Iterator


class Vector:
    """An immutable vector of floats."""

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[float] = ()) -> None:
        self._components = tuple(float(c) for c in components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, index):
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"Vector({list(self._components)!r})"

    def ceil(self) -> Vector:
        """Round every component away from zero."""
        return Vector(math.copysign(math.ceil(abs(c)), c) for c in self)

    def add(self, other: Vector) -> Vector:
        """Component-wise sum; vectors of other length leave this one unchanged."""
        if len(self) != len(other):
            return self
        return Vector(a + b for a, b in zip(self, other))

    def sub(self, other: Vector) -> Vector:
        """Component-wise difference; vectors of other length leave this one unchanged."""
        if len(self) != len(other):
            return self
        return Vector(a - b for a, b in zip(self, other))

    def mul(self, factor: float) -> Vector:
        return Vector(c * factor for c in self)

    def magnitude(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def normalized(self) -> Vector:
        """Unit vector in the same direction; a zero vector yields NaN components."""
        mag = self.magnitude()
        if mag == 0:
            return Vector(math.nan for _ in self)
        return Vector(c / mag for c in self)


UP = Vector((0, 1))
DOWN = Vector((0, -1))
LEFT = Vector((-1, 0))
RIGHT = Vector((1, 0))


def _parse_scalar(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid scalar: {text!r}")
    return float(text)


def zero(length: int) -> Vector:
    return Vector(0.0 for _ in range(length))


def to_vector(text: str) -> Vector:
    """Parse comma separated numbers; malformed input gives a zero vector of that length."""
    parts = text.split(",")
    try:
        return Vector(_parse_scalar(part) for part in parts)
    except ValueError:
        return zero(len(parts))