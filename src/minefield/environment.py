"""
Gymnasium environment wrapper for the minefield engine.

Provides a standard RL interface on top of Engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .engine import BEGINNER, Difficulty, Engine


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield game.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine
        - 10 = exploded mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        the remaining actions toggle a flag on the same cell order.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action the engine ignored
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Optional[Difficulty] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            difficulty: Grid configuration (default: Beginner).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.difficulty = difficulty or BEGINNER
        self.engine = Engine(self.difficulty, rng=random.Random())
        self.render_mode = render_mode

        self._num_cells = self.difficulty.rows * self.difficulty.cols

        self.observation_space = spaces.Box(
            low=-2,
            high=10,
            shape=(self.difficulty.rows, self.difficulty.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)
        self.engine.reset()
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, row, col = self._decode_action(action)
        self._steps += 1

        if is_flag:
            reward = 0.0 if self.engine.toggle_flag(row, col) else -0.1
        else:
            reward = self._reveal_reward(row, col)

        observation = self.engine.get_observation()
        terminated = not self.engine.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        action = int(action)
        if not 0 <= action < 2 * self._num_cells:
            # Maps to a position the engine rejects.
            return False, -1, -1
        is_flag = action >= self._num_cells
        row, col = divmod(action % self._num_cells, self.difficulty.cols)
        return is_flag, row, col

    def _reveal_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        if not self.engine.reveal(row, col):
            return -0.1
        if self.engine.is_won:
            return 10.0
        if self.engine.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.engine.revealed_safe_count,
            "total_safe": self.engine.safe_cells,
            "remaining_flags": self.engine.remaining_flags,
            "game_state": self.engine.status.name,
            "message": self.engine.status_message,
        }

    def render(self) -> Optional[str]:
        """Render the current grid state."""
        if self.render_mode == "ansi":
            return render_text(self.engine.get_observation())
        if self.render_mode == "human":
            print(render_text(self.engine.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of reveal actions the engine would accept.

        Returns:
            Boolean array where True = valid action. Flag actions are
            always masked out.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.engine.get_valid_actions():
            mask[row * self.difficulty.cols + col] = True
        return mask


# ============================================================================
# Text Rendering
# ============================================================================

_SYMBOLS = {-1: ".", -2: "F", 0: " ", 9: "*", 10: "X"}


def render_text(obs: np.ndarray) -> str:
    """Render an observation array as ASCII rows."""
    lines = []
    for row in obs:
        lines.append(" ".join(_SYMBOLS.get(int(val), str(val)) for val in row))
    return "\n".join(lines)


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    difficulty: Optional[Difficulty] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        difficulty: Grid configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinefieldEnv:
        return MinefieldEnv(difficulty=difficulty)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
