"""
env.py - Gymnasium environment for Connect Four

ConnectFourEnv exposes a GameEngine through the Gymnasium interface so that
scripts and agents can drive games with reset()/step(). Both players act
through the same environment; the observation is the board grid.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, Optional, Tuple, Union

from connect4_engine.debug import debug
from connect4_engine.game.rules import GameEngine, MoveRejected
from connect4_engine.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameStatus

CELL_PIXELS = 50

# RGB colour per Player value
PIECE_COLORS = np.array([
    [0, 0, 0],        # empty
    [255, 0, 0],      # player one
    [255, 255, 0],    # player two
], dtype=np.uint8)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rewards are given from Player ONE's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.render_mode = render_mode
        self.engine = GameEngine(width, height)
        self._set_spaces(width, height)

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def _set_spaces(self, width: int, height: int) -> None:
        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Args:
            seed: Random seed for the environment's RNG
            options: May contain "width" and "height" to change the board size

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        options = options or {}

        width = options.get('width', self.engine.width)
        height = options.get('height', self.engine.height)
        if (width, height) != (self.engine.width, self.engine.height):
            self._set_spaces(width, height)

        debug.debug(f"Resetting environment to {width}x{height}", "env")
        self.engine.reset(width, height)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the current player.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        outcome = self.engine.drop_piece(int(action))

        if isinstance(outcome, MoveRejected):
            debug.warning(f"Invalid action {action}: {outcome.reason.name}", "env")
            info = self._get_info()
            info['rejected'] = outcome.reason.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = outcome.status.is_game_over()
        if outcome.status == GameStatus.PLAYER_ONE_WON:
            reward = self.reward_win
        elif outcome.status == GameStatus.PLAYER_TWO_WON:
            reward = self.reward_lose
        elif outcome.status == GameStatus.TIED:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Game over: {outcome.status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        grid = self.engine.get_state()
        height, width = grid.shape

        # Disc mask for one cell, tiled over the board
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS / 2 + 0.5
        radius = CELL_PIXELS * 0.4
        disc = (offsets[:, None] ** 2 + offsets[None, :] ** 2) <= radius ** 2
        mask = np.tile(disc, (height, width))

        cells = np.repeat(np.repeat(grid, CELL_PIXELS, axis=0), CELL_PIXELS, axis=1)
        frame = np.empty((height * CELL_PIXELS, width * CELL_PIXELS, 3), dtype=np.uint8)
        frame[:, :] = [0, 0, 128]  # board background
        frame[mask] = PIECE_COLORS[cells[mask]]
        return frame

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.engine.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player.value,
            'game_result': self.engine.get_status().name,
            'moves_made': self.engine.piece_count(),
            'winning_run': self.engine.winning_run,
            'last_move': self.engine.last_move,
        }

    def close(self):
        pass
