"""
Gymnasium adapter for the Minesweeper engine.

Each step reveals one tile, addressed by its flat index. The engine's
immutable ``GameState`` is held by the environment and replaced after
every accepted reveal.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .display import render_text
from .game import GameState, new_game, reveal
from .tile import FLAGGED_OBSERVATION, MINE_OBSERVATION


# ============================================================================
# Rewards
# ============================================================================

SAFE_REWARD = 1.0
WIN_REWARD = 10.0
MINE_REWARD = -10.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Reveal-only Minesweeper environment.

    Observations use ``GameState.get_observation`` codes (-2 flag,
    -1 hidden, 0-8 counts, 9 mine). Action ``i`` reveals tile ``i``.
    A reveal the engine ignores, such as an already exposed tile,
    earns ``INVALID_REWARD`` and leaves the state as it was.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.state: GameState = new_game(self.config)
        self._steps = 0

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.num_tiles)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on the configured level.

        Mine placement draws from ``self.np_random``, so a seed given
        here fixes the board.
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.state = new_game(self.config, random.Random(board_seed))
        self._steps = 0
        return self.state.get_observation(), self._info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """Reveal tile ``action``; the episode ends on a win or a loss."""
        self._steps += 1
        previous = self.state
        self.state = reveal(previous, int(action))

        if self.state is previous:
            reward = INVALID_REWARD
        elif self.state.is_won:
            reward = WIN_REWARD
        elif self.state.is_lost:
            reward = MINE_REWARD
        else:
            reward = SAFE_REWARD

        terminated = not self.state.is_active
        return self.state.get_observation(), reward, terminated, False, self._info()

    def _info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": len(self.state.board.exposed_indices()),
            "total_safe": self.config.num_safe,
            "game_state": self.state.status.name,
            "valid_actions": len(self.state.valid_actions()),
        }

    def render(self) -> Optional[str]:
        text = render_text(self.state)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """Boolean array over actions; True where a reveal is accepted."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for index in self.state.valid_actions():
            mask[index] = True
        return mask
