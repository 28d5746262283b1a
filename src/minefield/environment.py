"""
Gymnasium environment wrapper for the minefield game.

Drives a GameController through the standard RL interface so agents
and scripted players can play without a presentation layer.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, Position
from .cell import OBS_EXPLODED, OBS_FLAGGED
from .controller import GameController


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield game.

    Observation:
        2D int8 array of shape (height, width), indexed [y, x]:
        - -2 = flagged cell
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine, 10 = the mine that exploded

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (x=i % width, y=i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.controller = GameController(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_EXPLODED,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0
        self._total_safe_cells = (
            self.config.width * self.config.height - self.config.mine_count
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.controller.generator.seed(seed)
        self.controller.new_game()
        self._steps = 0

        return self.controller.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one reveal.

        Args:
            action: Cell index to reveal (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self.action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)

        observation = self.controller.board.get_observation()
        terminated = self.controller.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.config.width + x

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal (x, y) and score the outcome."""
        if not self.controller.reveal(x, y):
            return -0.1
        if self.controller.is_won:
            return 10.0
        if self.controller.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.controller.board
        revealed = sum(
            1 for cell in board.all_cells()
            if cell.is_revealed and not cell.is_mine
        )
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self._total_safe_cells,
            "status": self.controller.status.name,
            "valid_actions": len(board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.controller.board.render()
        if self.render_mode == "human":
            print(self.controller.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell that can be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.controller.board.hidden_positions():
            mask[self.position_to_action(x, y)] = True
        return mask
