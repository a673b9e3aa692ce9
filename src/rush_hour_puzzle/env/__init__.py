"""Gymnasium environments for the Rush Hour drag engine."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="RushHourDrag-6x6-v0",
    entry_point="rush_hour_puzzle.env.rush_hour_env:RushHourDragEnv",
)

__all__ = ["RushHourDrag-6x6-v0"]
