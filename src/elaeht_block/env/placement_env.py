from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from elaeht_block.game import GameConfig, GameEngine, GameStatus, InvalidMove
from elaeht_block.game.pieces import MAX_PIECE_EXTENT
from elaeht_block.visualization.palette import color_for_value


CELL_PIXELS = 12


def _compute_action_mask(engine: GameEngine) -> np.ndarray:
    size = engine.board.size
    k = engine.config.pieces_per_set
    mask = np.zeros((k, size, size), dtype=np.bool_)
    for slot, row, col in engine.get_valid_actions():
        if 0 <= slot < k:
            mask[slot, row, col] = True
    return mask


class ElaehtBlockEnv(gym.Env):
    """Placement environment: one action places one held piece.

    Action is (slot, row, col) into the ordered active set. Reward is the
    engine's score delta; an illegal action is penalized and changes nothing.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        invalid_action_penalty: float = -10.0,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.engine = GameEngine(self.config)
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.max_episode_steps = int(max_episode_steps)

        size = self.config.board_size
        k = self.config.pieces_per_set

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                "pieces": spaces.Box(
                    low=0, high=1, shape=(k, MAX_PIECE_EXTENT, MAX_PIECE_EXTENT), dtype=np.int8
                ),
                "pieces_remaining": spaces.Discrete(k + 1),
            }
        )
        self.action_space = spaces.MultiDiscrete((k, size, size))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        k = self.config.pieces_per_set
        grid = (self.engine.board.grid != 0).astype(np.int8)
        pieces = np.zeros((k, MAX_PIECE_EXTENT, MAX_PIECE_EXTENT), dtype=np.int8)
        for i, piece in enumerate(self.engine.pieces[:k]):
            pieces[i, : piece.rows, : piece.cols] = piece.shape
        return {
            "grid": grid,
            "pieces": pieces,
            "pieces_remaining": len(self.engine.pieces),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.engine),
            "valid_actions": self.engine.get_valid_actions(),
            "score": self.engine.score,
            "steps": self._steps,
        }

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[dict] = None
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)
        if self.engine.status is GameStatus.NOT_STARTED:
            self.engine.start()
        else:
            self.engine.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action):
        slot, row, col = map(int, action)
        self._steps += 1

        reward = self.invalid_action_penalty
        lines = 0
        if 0 <= slot < len(self.engine.pieces):
            piece = self.engine.pieces[slot]
            try:
                result = self.engine.place(piece.id, row, col)
            except InvalidMove:
                pass
            else:
                reward = float(result.score_delta)
                lines = len(result.rows) + len(result.cols)

        terminated = self.engine.game_over
        truncated = self._steps >= self.max_episode_steps and not terminated
        info = self._get_info()
        info["lines_cleared"] = lines
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        # One palette color per cell value, scaled up to CELL_PIXELS square blocks.
        lut = np.array([color_for_value(v) for v in range(int(self.engine.board.grid.max()) + 1)], dtype=np.uint8)
        img = lut[self.engine.board.grid.astype(np.intp)]
        return np.kron(img, np.ones((CELL_PIXELS, CELL_PIXELS, 1), dtype=np.uint8))
