"""Tetromino shapes and the geometric piece value.

A :class:`Piece` is a small set of occupied cells plus a pivot.  Moving or
rotating a piece never changes it in place; a new piece is returned instead.
The only exception is :meth:`Piece.remove_cell`, which the board uses to
collapse cleared rows out of pieces that have already landed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, FrozenSet, Iterator, NamedTuple, Optional, Protocol, Sequence, Tuple


class Cell(NamedTuple):
    """Board coordinate.  ``x`` is the column and ``y`` the row (downwards)."""

    x: int
    y: int


class Shape(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    J = "J"
    L = "L"
    S = "S"
    Z = "Z"


class ShapeChooser(Protocol):
    def choice(self, seq: Sequence[Shape]) -> Shape: ...


Template = Tuple[Tuple[Cell, ...], Cell]

# Spawn layouts as (cells, pivot).  Rotation happens about the pivot, so the
# pivot does not have to be one of the occupied cells.
_TEMPLATES: Dict[Shape, Template] = {
    Shape.I: ((Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(3, 0)), Cell(1, 0)),
    Shape.O: ((Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)), Cell(0, 0)),
    Shape.T: ((Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(1, 1)), Cell(1, 0)),
    Shape.J: ((Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(-1, 2)), Cell(0, 1)),
    Shape.L: ((Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 2)), Cell(0, 1)),
    Shape.S: ((Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(-1, 1)), Cell(0, 0)),
    Shape.Z: ((Cell(0, 0), Cell(-1, 0), Cell(0, 1), Cell(1, 1)), Cell(0, 0)),
}


def shape_cells(shape: Shape) -> Template:
    """Return the spawn cells and pivot for ``shape``."""

    return _TEMPLATES[shape]


@dataclass
class Piece:
    """A tetromino instance: the occupied cells and the rotation pivot."""

    shape: Shape
    positions: FrozenSet[Cell]
    pivot: Cell

    @classmethod
    def new(cls, shape: Shape) -> "Piece":
        """Return ``shape`` in its spawn layout at the origin."""

        cells, pivot = shape_cells(shape)
        return cls(shape, frozenset(cells), pivot)

    @classmethod
    def random(cls, rng: Optional[ShapeChooser] = None) -> "Piece":
        """Return a piece of a uniformly chosen shape.

        Each call is independent; there is no bag or repeat avoidance.
        ``rng`` may be any object with a ``choice`` method such as
        :class:`random.Random`.
        """

        chooser = rng if rng is not None else random
        return cls.new(chooser.choice(list(Shape)))

    def iter_positions(self) -> Iterator[Cell]:
        return iter(self.positions)

    def translate(self, delta: Tuple[int, int]) -> "Piece":
        """Return a copy moved by ``delta`` (columns, rows)."""

        dx, dy = delta
        return Piece(
            self.shape,
            frozenset(Cell(x + dx, y + dy) for x, y in self.positions),
            Cell(self.pivot.x + dx, self.pivot.y + dy),
        )

    def rotate(self) -> "Piece":
        """Return a copy turned 90 degrees about the pivot.

        With rows growing downwards this is a clockwise turn on screen.  Four
        turns give back the original cells.
        """

        a, b = self.pivot
        rotated = frozenset(Cell(a + b - y, b - a + x) for x, y in self.positions)
        return replace(self, positions=rotated)

    def has_position(self, cell: Tuple[int, int]) -> bool:
        return cell in self.positions

    def collides_with(self, other: "Piece") -> bool:
        """Return ``True`` if the two pieces share any cell."""

        return not self.positions.isdisjoint(other.positions)

    def remove_cell(self, y: int) -> None:
        """Delete row ``y`` from this piece and drop the rows above it by one."""

        self.positions = frozenset(
            Cell(cx, cy + 1) if cy < y else Cell(cx, cy)
            for cx, cy in self.positions
            if cy != y
        )


__all__ = ["Cell", "Shape", "Piece", "shape_cells"]
