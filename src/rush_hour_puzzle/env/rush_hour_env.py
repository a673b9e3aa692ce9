from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from rush_hour_puzzle.game import DEFAULT_LEVEL, DragEngine, GameConfig, RushHourGame, parse_level


def _compute_action_mask(game: RushHourGame, max_vehicles: int, max_shift: int) -> np.ndarray:
    """Mask of (vehicle, shift) drags that land exactly `shift` cells away."""
    mask = np.zeros((max_vehicles, 2 * max_shift + 1), dtype=np.bool_)
    board = game.board
    if board is None or game.won:
        return mask
    for idx, vehicle in enumerate(board.vehicles[:max_vehicles]):
        low, high = DragEngine.reachable(board, vehicle)
        for coord in range(low, high + 1):
            shift = coord - vehicle.axis_coord
            if shift != 0 and -max_shift <= shift <= max_shift:
                mask[idx, shift + max_shift] = True
    return mask


class RushHourDragEnv(gym.Env):
    """
    Drag-based Rush Hour environment.

    Action (vehicle_idx, k) drags vehicle `vehicle_idx` by `k - max_shift`
    cells along its axis, exactly as a pointer drag would: the vehicle stops
    at the first blocker. The episode terminates when the player vehicle is
    released on the exit cell.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 4}

    def __init__(
        self,
        level: Optional[Dict[str, Any]] = None,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_vehicles: int = 16,
        max_episode_steps: int = 200,
        win_reward: float = 1.0,
        invalid_action_penalty: float = -0.1,
        step_penalty: float = -0.01,
    ) -> None:
        super().__init__()
        self.game = RushHourGame(config)
        self.level = level or DEFAULT_LEVEL
        self.render_mode = render_mode

        self.max_vehicles = int(max_vehicles)
        self.max_episode_steps = int(max_episode_steps)
        self.win_reward = float(win_reward)
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.step_penalty = float(step_penalty)

        rules = self.game.config.rules
        self.max_shift = int(rules.exit_column)

        self.observation_space = spaces.Box(
            low=0, high=self.max_vehicles + 1, shape=(rules.height, rules.width), dtype=np.int8
        )
        self.action_space = spaces.MultiDiscrete((self.max_vehicles, 2 * self.max_shift + 1))

        self._steps = 0
        self._moves = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.game, self.max_vehicles, self.max_shift),
            "moves": self._moves,
            "steps": self._steps,
            "phase": self.game.phase.value,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        level = (options or {}).get("level", self.level)
        placements = parse_level(level)
        if len(placements) > self.max_vehicles:
            raise ValueError(f"Level has {len(placements)} vehicles, env supports {self.max_vehicles}")
        self.game.load_level(placements)
        self._steps = 0
        self._moves = 0
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int]):
        vehicle_idx, k = map(int, action)
        shift = k - self.max_shift
        vehicles = self.game.board.vehicles

        moved = None
        if 0 <= vehicle_idx < len(vehicles) and shift != 0:
            moved = self.game.slide(vehicles[vehicle_idx].id, shift)

        reward_components: Dict[str, float] = {"step": self.step_penalty}
        if moved is None:
            reward_components["invalid"] = self.invalid_action_penalty
        else:
            self._moves += 1
        terminated = bool(self.game.won)
        if terminated:
            reward_components["win"] = self.win_reward

        self._steps += 1
        truncated = not terminated and self._steps >= self.max_episode_steps

        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), float(sum(reward_components.values())), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(grid[y, x])
                    if v == 0:
                        color = (30, 30, 36)
                    elif v == 1:
                        color = (220, 40, 40)
                    else:
                        color = (70, 200, 120)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
