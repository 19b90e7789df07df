"""Board representation and game rules for the playfield."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Protocol, Tuple

from .piece import Cell, Piece, Shape, ShapeChooser


LOGGER = logging.getLogger(__name__)

# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

# Mapping from ``Shape`` to the integer used in rendered grids.  The specific
# numeric values are not important as long as ``0`` represents an empty cell.
PIECE_VALUES = {s: i + 1 for i, s in enumerate(Shape)}


class Direction(str, Enum):
    """Horizontal shift direction."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return (-1, 0) if self is Direction.LEFT else (1, 0)


class TetrisGame(Protocol):
    """Command and query surface used by front ends.

    Front ends drive the game with ``tick``/``shift``/``rotate`` and read it
    back one cell at a time through ``get``.
    """

    def tick(self) -> None: ...

    def shift(self, direction: Direction) -> None: ...

    def rotate(self) -> None: ...

    def get(self, cell: Tuple[int, int]) -> Optional[Shape]: ...

    def alive(self) -> bool: ...

    def board_size(self) -> Tuple[int, int]: ...


class Board:
    """Playfield holding the falling piece and everything that has landed.

    Illegal moves are ignored rather than reported.  Once a freshly spawned
    piece overlaps landed cells the board is dead and every command becomes a
    no-op.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        rng: Optional[ShapeChooser] = None,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng
        self.landed_pieces: List[Piece] = []
        self.current_piece: Piece = self._spawn_piece()
        self._alive = True

    @classmethod
    def new_default(cls, *, rng: Optional[ShapeChooser] = None) -> "Board":
        """Return a board with the standard 10x20 dimensions."""

        return cls(WIDTH, HEIGHT, rng=rng)

    # Queries ----------------------------------------------------------
    def alive(self) -> bool:
        return self._alive

    def board_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def get(self, cell: Tuple[int, int]) -> Optional[Shape]:
        """Return the shape occupying ``cell`` or ``None`` if it is empty.

        The falling piece takes precedence over landed pieces, which are
        searched in landing order.
        """

        if self.current_piece.has_position(cell):
            return self.current_piece.shape
        for piece in self.landed_pieces:
            if piece.has_position(cell):
                return piece.shape
        return None

    # Commands ---------------------------------------------------------
    def tick(self) -> None:
        """Advance the falling piece one row, landing it if it cannot move."""

        if not self._alive:
            return

        advanced = self.current_piece.translate((0, 1))
        if not self.is_out_of_bounds(advanced) and not self.is_colliding(advanced):
            self.current_piece = advanced
            return

        landed = self.current_piece
        self.current_piece = self._spawn_piece()
        self.landed_pieces.append(landed)
        LOGGER.debug("Landed %s at %s", landed.shape.value, sorted(landed.positions))

        self.remove_full_lines()

        if self.is_colliding(self.current_piece):
            self._alive = False
            LOGGER.info("Game over: spawn blocked at %s", sorted(self.current_piece.positions))

    def shift(self, direction: Direction) -> None:
        """Move the falling piece one column if the target is free."""

        if not self._alive:
            return
        self._try_commit(self.current_piece.translate(Direction(direction).delta))

    def rotate(self) -> None:
        """Rotate the falling piece about its pivot if the result is free."""

        if not self._alive:
            return
        self._try_commit(self.current_piece.rotate())

    # Rules ------------------------------------------------------------
    def is_out_of_bounds(self, piece: Piece) -> bool:
        return not all(
            0 <= x < self.width and 0 <= y < self.height for x, y in piece.iter_positions()
        )

    def is_colliding(self, piece: Piece) -> bool:
        return any(landed.collides_with(piece) for landed in self.landed_pieces)

    def is_line_full(self, y: int) -> bool:
        """Return ``True`` if every column of row ``y`` holds a landed cell."""

        row = {cell for piece in self.landed_pieces for cell in piece.iter_positions() if cell.y == y}
        return len(row) == self.width

    def remove_line(self, y: int) -> None:
        for piece in self.landed_pieces:
            piece.remove_cell(y)

    def remove_full_lines(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the top down in a single pass.  Clearing a row
        only moves the rows above it, so rows still to be scanned keep their
        index.
        """

        cleared = 0
        for y in range(self.height):
            if self.is_line_full(y):
                self.remove_line(y)
                cleared += 1
        if cleared:
            LOGGER.info("Cleared %d row(s)", cleared)
        return cleared

    # Internal helpers -------------------------------------------------
    def _spawn_piece(self) -> Piece:
        piece = Piece.random(self._rng).translate(((self.width - 1) // 2, 0))
        LOGGER.debug("Spawned %s", piece.shape.value)
        return piece

    def _try_commit(self, candidate: Piece) -> None:
        if not self.is_out_of_bounds(candidate) and not self.is_colliding(candidate):
            self.current_piece = candidate
