"""Gymnasium environments for Elaeht Block."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="ElaehtBlock-8x8-v0",
    entry_point="elaeht_block.env.placement_env:ElaehtBlockEnv",
)

__all__ = ["ElaehtBlock-8x8-v0"]
