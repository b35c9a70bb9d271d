from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    Command,
    GameConfig,
    Session,
    apply_command,
    format_grid,
    is_game_over,
    session_from_config,
    snapshot,
)


class FallingBlocksEnv(gym.Env):
    """
    One env step is one game command.

    Actions (4 total):
      0: Move Left
      1: Move Right
      2: Rotate
      3: Descend (lands the piece when it cannot fall further)

    Observation is the drawable board as 0/1 occupancy, falling piece included.
    Reward is the number of rows cleared by the step.
    """

    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        rows, cols = self.config.rows, self.config.cols
        self.observation_space = spaces.Box(low=0, high=1, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Command))

        self.session: Optional[Session] = None
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return (snapshot(self.session) != 0).astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        assert self.session is not None
        return {
            "x": self.session.x,
            "y": self.session.y,
            "cleared": self.session.cleared,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Piece selection draws from the env's seeded generator
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.session = session_from_config(self.config, rng=rng)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        assert self.session is not None, "call reset() before step()"
        was_over = is_game_over(self.session)
        self.session = apply_command(self.session, Command(int(action)))
        self._steps += 1

        # A finished game pays nothing further
        reward = 0.0 if was_over else float(self.session.cleared)
        terminated = is_game_over(self.session)
        truncated = self._steps >= self.max_episode_steps and not terminated
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray | str]:
        if self.session is None:
            return None
        grid = snapshot(self.session)
        if self.render_mode == "ansi":
            return format_grid(grid)
        if self.render_mode == "rgb_array":
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = (70, 200, 120) if grid[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass

