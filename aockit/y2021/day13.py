"""Transparent Origami: folding a sheet of dots."""

from __future__ import annotations

import logging
from typing import Callable

from aockit.grid import CoordinateSystem

logger = logging.getLogger(__name__)

_PREFIX = "fold along "


def _dot(existing: int | None) -> int:
    """Mark a dot, keeping an existing mark as it is."""
    return 0 if existing is None else existing


def _mirror(coordinate: int, pos: int) -> int:
    return pos - (coordinate - pos) if coordinate > pos else coordinate


class FoldableMap(CoordinateSystem):
    """A sparse sheet of dots that can be folded along either axis."""

    def fold_along(self, axis: str, pos: int) -> None:
        """Fold along the line ``axis=pos``; ``axis`` is 'x' or 'y'."""
        if axis == "x":
            self.fold_along_x(pos)
        elif axis == "y":
            self.fold_along_y(pos)
        else:
            raise ValueError(f"cannot fold along unknown axis {axis!r}")

    def _refold(self, move: Callable[[int, int], tuple[int, int]]) -> None:
        folded = CoordinateSystem()
        for x, column in self.items():
            for y in column:
                new_x, new_y = move(x, y)
                folded.modify(_dot, new_x, new_y)
        self.clear()
        self.update(folded)

    def fold_along_x(self, pos: int) -> None:
        """Fold the part right of ``x=pos`` over to the left."""
        self._refold(lambda x, y: (_mirror(x, pos), y))

    def fold_along_y(self, pos: int) -> None:
        """Fold the part beyond ``y=pos`` back over it."""
        self._refold(lambda x, y: (x, _mirror(y, pos)))

    def __len__(self) -> int:
        """Number of columns that hold at least one dot."""
        return super().__len__()


def parse_manual(raw_input: str) -> tuple[FoldableMap, list[tuple[str, int]]]:
    """Parse dot coordinates, a blank line, then ``fold along a=n`` instructions."""
    lines = raw_input.split("\n")
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("missing blank line between dots and fold instructions") from None
    sheet = FoldableMap()
    for line in lines[:blank]:
        x_text, sep, y_text = line.partition(",")
        if not sep:
            raise ValueError(f"malformed dot: {line!r}")
        sheet.modify(_dot, int(x_text), int(y_text))
    folds: list[tuple[str, int]] = []
    for line in lines[blank + 1:]:
        if not line:
            continue
        axis, sep, pos = line.removeprefix(_PREFIX).partition("=")
        if not sep or axis not in ("x", "y"):
            raise ValueError(f"malformed fold instruction: {line!r}")
        folds.append((axis, int(pos)))
    logger.debug("fold instructions: %s", folds)
    return sheet, folds


def first_fold_dots(raw_input: str) -> int:
    """Apply only the first fold and return the size of the folded sheet."""
    sheet, folds = parse_manual(raw_input)
    if not folds:
        raise ValueError("no fold instructions")
    logger.debug("dots before folding: %d", len(sheet))
    sheet.fold_along(*folds[0])
    return len(sheet)


def fold_all(raw_input: str) -> str:
    """Apply every fold and render the resulting sheet."""
    sheet, folds = parse_manual(raw_input)
    for axis, pos in folds:
        sheet.fold_along(axis, pos)
        logger.debug("dots after folding along %s=%d: %d", axis, pos, sheet.total_size())
    return str(sheet)