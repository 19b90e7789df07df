"""Utility helpers for front ends driving a game."""

from __future__ import annotations

from typing import Set

import numpy as np
from numpy.typing import NDArray

from .board import PIECE_VALUES, TetrisGame
from .piece import Cell


Grid = NDArray[np.uint8]


def render_grid(game: TetrisGame) -> Grid:
    """Return a ``(height, width)`` snapshot of ``game`` for renderers.

    Empty cells are ``0`` and occupied cells hold ``PIECE_VALUES`` for the
    occupying shape.  Only ``board_size`` and ``get`` are used, so any
    :class:`~blockfall.board.TetrisGame` works and the game is not mutated.
    """

    width, height = game.board_size()
    grid = np.zeros((height, width), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            shape = game.get(Cell(x, y))
            if shape is not None:
                grid[y, x] = PIECE_VALUES[shape]
    return grid


def occupied_cells(game: TetrisGame) -> Set[Cell]:
    """Return every cell of ``game`` that currently holds a block."""

    rows, cols = np.nonzero(render_grid(game))
    return {Cell(int(x), int(y)) for y, x in zip(rows, cols)}
