"""Gymnasium environments for Block Puzzle."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="BlockPuzzle-8x8-v0",
    entry_point="block_puzzle.env.block_puzzle_env:BlockPuzzleEnv",
)

__all__ = ["BlockPuzzle-8x8-v0"]
