from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym
import numpy as np

import rush_hour_puzzle.env  # noqa: F401

logger = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    env = gym.make("RushHourDrag-6x6-v0")
    rng = np.random.default_rng(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    wins = 0
    for _ in range(steps):
        # Prefer drags that actually move something
        valid = np.argwhere(info["action_mask"])
        if len(valid) > 0:
            action = valid[rng.integers(len(valid))]
        else:
            action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated:
            wins += 1
        if terminated or truncated:
            obs, info = env.reset()
    env.close()
    logger.info("Random agent total reward: %.2f, wins: %d", total_reward, wins)
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO)
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
