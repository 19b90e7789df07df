"""Falling-block puzzle engine: pieces, board rules and render helpers."""

from .board import Board, Direction, TetrisGame, PIECE_VALUES
from .piece import Cell, Piece, Shape, shape_cells
from .utils import occupied_cells, render_grid

__all__ = [
    "Board",
    "Direction",
    "TetrisGame",
    "PIECE_VALUES",
    "Cell",
    "Piece",
    "Shape",
    "shape_cells",
    "occupied_cells",
    "render_grid",
]
