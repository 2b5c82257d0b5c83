"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the board representation and the engine that
manages turns and game outcomes.
"""

from connect4_engine.game.board import Board
from connect4_engine.game.rules import (GameEngine, GameState, MoveResult, MoveRejected,
                                        EngineNotReadyError)

__all__ = ['Board', 'GameEngine', 'GameState', 'MoveResult', 'MoveRejected',
           'EngineNotReadyError']
