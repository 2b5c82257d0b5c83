"""
board.py - Board representation for Connect Four

The Board holds the grid of cells and knows how pieces fall, how to read a
cell and how to look for a winning run. It does not track turns or the game
outcome; GameEngine does.
"""

import numpy as np
from typing import List, Optional

from connect4_engine.debug import debug
from connect4_engine.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, Coord, Player,
                                   DIRECTION_VECTORS, is_valid_position, run_from,
                                   render_board_ascii)


class Board:
    """
    A HEIGHT x WIDTH grid of Player values.

    Row 0 is the top of the board and row ``height - 1`` the floor, so the
    first piece dropped into a column lands in the last row.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        debug.trace(f"Initializing {width}x{height} board", "board")
        self.width = width
        self.height = height
        self.grid = np.full((height, width), Player.EMPTY.value, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        return is_valid_position(row, col, self.height, self.width)

    def get_cell(self, row: int, col: int) -> Player:
        """
        Read one cell.

        Raises:
            IndexError: if (row, col) is outside the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.width}x{self.height} board")
        return Player(int(self.grid[row, col]))

    def is_column_full(self, col: int) -> bool:
        return self.grid[0, col] != Player.EMPTY.value

    def find_spot(self, col: int) -> Optional[int]:
        """Lowest empty row of a column, or None when the column is full."""
        empty_rows = np.flatnonzero(self.grid[:, col] == Player.EMPTY.value)
        if empty_rows.size == 0:
            return None
        return int(empty_rows[-1])

    def place(self, col: int, player: Player) -> int:
        """
        Drop a piece for `player` into `col` and return the row it landed in.

        The caller is expected to have checked the column; dropping into a
        full column raises ValueError.
        """
        row = self.find_spot(col)
        if row is None:
            raise ValueError(f"Column {col} is full")

        debug.trace(f"Placing {player.name} at ({row}, {col})", "board")
        self.grid[row, col] = player.value
        return row

    def valid_columns(self) -> List[int]:
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def piece_count(self) -> int:
        return int(np.count_nonzero(self.grid != Player.EMPTY.value))

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Player.EMPTY.value))

    def find_winning_run(self, player: Player) -> List[Coord]:
        """
        Scan the whole board for four of `player`'s pieces in a line.

        Cells are visited in row-major order (top row first, left to right)
        and, from each cell, runs are tried rightward, downward, down-right
        and down-left. The first run whose four cells are all on the board
        and all belong to `player` is returned.

        Returns:
            The four (row, col) coordinates of the run, or an empty list
        """
        value = player.value
        for row in range(self.height):
            for col in range(self.width):
                if self.grid[row, col] != value:
                    continue
                for direction in DIRECTION_VECTORS:
                    cells = run_from(row, col, direction)
                    if all(self.in_bounds(r, c) and self.grid[r, c] == value
                           for r, c in cells):
                        return cells
        return []

    def has_win(self, player: Player) -> bool:
        return bool(self.find_winning_run(player))

    def copy(self) -> 'Board':
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
