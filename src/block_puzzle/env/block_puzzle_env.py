from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from block_puzzle.game import GameConfig, GameEngine, RandomSource, ShapeCatalog


def _compute_action_mask(engine: GameEngine) -> np.ndarray:
    size = engine.board.size
    k = engine.config.queue_size
    mask = np.zeros((k, size, size), dtype=np.bool_)
    for slot, row, col in engine.valid_placements():
        # negative anchors cannot be expressed as actions
        if row >= 0 and col >= 0:
            mask[slot, row, col] = True
    return mask


def _hex_to_rgb(color: str) -> Tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


class BlockPuzzleEnv(gym.Env):
    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 random_source: Optional[RandomSource] = None,
                 invalid_action_penalty: float = -1.0) -> None:
        super().__init__()
        self.engine = GameEngine(config, random_source=random_source)
        self.render_mode = render_mode
        self.invalid_action_penalty = float(invalid_action_penalty)

        size = self.engine.config.grid_size
        k = self.engine.config.queue_size
        n_blocks = len(ShapeCatalog.all())

        # Observation: grid of block ids (0 empty) and the queued block ids
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=n_blocks, shape=(size, size), dtype=np.int8),
                "queue": spaces.Box(low=1, high=n_blocks, shape=(k,), dtype=np.int8),
            }
        )

        # Action: (queue slot, row, col)
        self.action_space = spaces.MultiDiscrete((k, size, size))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.engine.board.grid.astype(np.int8),
            "queue": np.array([b.block_id for b in self.engine.get_queue()], dtype=np.int8),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.engine),
            "score": self.engine.get_score(),
            "lines_cleared": self.engine.scores.lines_cleared,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.engine.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int, int]):
        slot, row, col = map(int, action)

        if self.engine.select(slot):
            result = self.engine.attempt_placement(row, col)
        else:
            result = None

        if result is not None and result.accepted:
            reward = float(result.score_delta)
            cleared = list(result.clear_event.cells)
        else:
            # A rejected attempt keeps the selection; the env always reselects.
            self.engine.queue.clear_selection()
            reward = self.invalid_action_penalty
            cleared = []

        self._steps += 1
        terminated = self.engine.is_game_over()
        truncated = self._steps >= self.engine.config.max_episode_steps

        info = self._get_info()
        info["accepted"] = bool(result is not None and result.accepted)
        info["cleared_cells"] = cleared
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray | str]:
        if self.render_mode == "ansi":
            return self.engine.format_grid()
        if self.render_mode == "rgb_array":
            grid = self.engine.board.grid
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = ShapeCatalog.color_for(int(grid[y, x]))
                    rgb = _hex_to_rgb(color) if color else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = rgb
            return img
        return None

    def close(self) -> None:
        pass
