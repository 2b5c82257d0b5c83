"""
rules.py - Game state management for Connect Four

GameEngine owns one GameState and is the only way to change it. Moves are
attempted with drop_piece(), which reports either where the piece landed or
why the move was refused.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.game.board import Board
from connect4_engine.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, Coord, GameStatus,
                                   Player, RejectReason)


class EngineNotReadyError(RuntimeError):
    """Raised when an engine is used before reset() has created a game."""


@dataclass
class GameState:
    """Everything that describes one game in progress."""
    board: Board
    current_player: Player = Player.ONE
    status: GameStatus = GameStatus.IN_PROGRESS
    last_move: Optional[Tuple[int, int]] = None
    winning_run: List[Coord] = field(default_factory=list)

    @classmethod
    def new(cls, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> 'GameState':
        return cls(board=Board(width, height))


@dataclass(frozen=True)
class MoveResult:
    """A piece that was placed, and the status of the game afterwards."""
    row: int
    column: int
    player: Player
    status: GameStatus

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class MoveRejected:
    """A drop that was refused without changing the game."""
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


DropOutcome = Union[MoveResult, MoveRejected]


class GameEngine:
    """
    Connect Four rules engine.

    Each engine runs a single game at a time. A new engine starts a game
    immediately unless ``auto_reset=False`` is passed, in which case
    reset() must be called before anything else.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 auto_reset: bool = True):
        self._state: Optional[GameState] = None
        if auto_reset:
            self.reset(width, height)

    @property
    def state(self) -> GameState:
        if self._state is None:
            debug.error("Engine used before reset()", "engine")
            raise EngineNotReadyError("reset() must be called before using the engine")
        return self._state

    def reset(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Discard the current game and start a fresh one."""
        debug.debug(f"Starting new {width}x{height} game", "engine")
        self._state = GameState.new(width, height)

    def drop_piece(self, column: int) -> DropOutcome:
        """
        Drop a piece for the current player into `column`.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            MoveResult describing the placement, or MoveRejected when the game
            is over, the column is off the board or the column is full
        """
        state = self.state
        board = state.board

        if state.status.is_game_over():
            return self._reject(RejectReason.GAME_OVER, column)
        if not 0 <= column < board.width:
            return self._reject(RejectReason.INVALID_COLUMN, column)
        if board.is_column_full(column):
            return self._reject(RejectReason.COLUMN_FULL, column)

        player = state.current_player
        row = board.place(column, player)
        state.last_move = (row, column)
        debug.debug(f"{player.name} dropped into column {column}, landed on row {row}", "engine")

        # Win must be checked before tie: a full board with four in a row is a win
        winning_run = board.find_winning_run(player)
        if winning_run:
            state.status = GameStatus.won_by(player)
            state.winning_run = winning_run
            debug.info(f"Player {player.name} wins with {winning_run}", "engine")
        elif board.is_full():
            state.status = GameStatus.TIED
            debug.info("Game ends in a tie", "engine")
        else:
            state.current_player = player.other()

        return MoveResult(row=row, column=column, player=player, status=state.status)

    def _reject(self, reason: RejectReason, column: int) -> MoveRejected:
        debug.debug(f"Rejected drop into column {column}: {reason.name}", "engine")
        return MoveRejected(reason)

    def evaluate_win(self, player: Player) -> bool:
        """True if `player` has four in a row anywhere on the board."""
        return self.state.board.has_win(player)

    def get_cell(self, row: int, column: int) -> Player:
        return self.state.board.get_cell(row, column)

    def get_status(self) -> GameStatus:
        return self.state.status

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def width(self) -> int:
        return self.state.board.width

    @property
    def height(self) -> int:
        return self.state.board.height

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self.state.last_move

    @property
    def winning_run(self) -> List[Coord]:
        return list(self.state.winning_run)

    def is_game_over(self) -> bool:
        return self.state.status.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self.state.status.winner

    def get_valid_moves(self) -> List[int]:
        """Columns that would accept a piece; empty once the game is over."""
        if self.is_game_over():
            return []
        return self.state.board.valid_columns()

    def piece_count(self) -> int:
        return self.state.board.piece_count()

    def get_state(self) -> np.ndarray:
        return self.state.board.get_state()

    def render(self) -> str:
        return self.state.board.render()
