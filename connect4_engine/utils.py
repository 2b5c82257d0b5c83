"""
utils.py - Constants, enumerations and helpers shared by the Connect Four engine

This module defines the board defaults, the tagged cell state, the game
status values and the direction vectors used for win detection.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Board defaults
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win

Coord = Tuple[int, int]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WON = auto()
    PLAYER_TWO_WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the status is terminal."""
        return self != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a game in progress or a tie."""
        if self == GameStatus.PLAYER_ONE_WON:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WON:
            return Player.TWO
        return None

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        """Status for a game won by `player`."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WON
        if player == Player.TWO:
            return cls.PLAYER_TWO_WON
        raise ValueError(f"No win status for {player!r}")


class RejectReason(Enum):
    """Why a drop was refused."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


class Direction(Enum):
    """Directions a run may extend in from its starting cell."""
    HORIZONTAL = auto()   # rightward
    VERTICAL = auto()     # downward
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col), in scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int = DEFAULT_HEIGHT,
                      width: int = DEFAULT_WIDTH) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def run_from(row: int, col: int, direction: Direction,
             length: int = CONNECT_N) -> List[Coord]:
    """Coordinates of the run starting at (row, col) stepping in `direction`."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * step, col + dc * step) for step in range(length)]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of Player values, row 0 at the top

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height):
        cells = [str(Player(int(value))) for value in grid[row]]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so wide boards stay aligned
    result.append("|" + " ".join(str(i % 10) for i in range(width)) + "|")

    return "\n".join(result)
