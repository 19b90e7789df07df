from __future__ import annotations

import random
from typing import Dict, Optional, Tuple

import numpy as np

from blockfall import PIECE_VALUES, Board, Direction, Shape, occupied_cells, render_grid


class ScriptedGame:
    """Stand-in game returning canned occupancy."""

    def __init__(self, size: Tuple[int, int], cells: Dict[Tuple[int, int], Shape]) -> None:
        self.size = size
        self.cells = cells
        self.queries = 0

    def tick(self) -> None:
        pass

    def shift(self, direction: Direction) -> None:
        pass

    def rotate(self) -> None:
        pass

    def get(self, cell: Tuple[int, int]) -> Optional[Shape]:
        self.queries += 1
        return self.cells.get(tuple(cell))

    def alive(self) -> bool:
        return True

    def board_size(self) -> Tuple[int, int]:
        return self.size


def test_render_grid_uses_query_surface() -> None:
    game = ScriptedGame((3, 2), {(0, 0): Shape.I, (2, 1): Shape.L})
    grid = render_grid(game)
    assert grid.dtype == np.uint8
    assert grid.shape == (2, 3)
    assert grid.tolist() == [
        [PIECE_VALUES[Shape.I], 0, 0],
        [0, 0, PIECE_VALUES[Shape.L]],
    ]
    assert game.queries == 6


def test_piece_values_are_nonzero_and_unique() -> None:
    assert sorted(PIECE_VALUES.values()) == list(range(1, 8))


def test_render_grid_matches_board() -> None:
    board = Board(rng=random.Random(0))
    board.tick()
    board.shift(Direction.RIGHT)
    before = board.current_piece
    grid = render_grid(board)
    assert board.current_piece == before
    for y in range(board.height):
        for x in range(board.width):
            shape = board.get((x, y))
            expected = 0 if shape is None else PIECE_VALUES[shape]
            assert grid[y, x] == expected


def test_occupied_cells_of_fresh_board_is_current_piece() -> None:
    board = Board()
    assert occupied_cells(board) == set(board.current_piece.positions)
