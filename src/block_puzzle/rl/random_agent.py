from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

import gymnasium as gym
import numpy as np

import block_puzzle.env  # noqa: F401


logger = logging.getLogger(__name__)


def run_random(episodes: int = 1, seed: Optional[int] = None, max_steps: int = 500) -> List[int]:
    """Play random valid moves and return the final score of each episode."""
    rng = random.Random(seed)
    env = gym.make("BlockPuzzle-8x8-v0", render_mode="ansi")
    scores: List[int] = []
    try:
        for episode in range(episodes):
            obs, info = env.reset(seed=None if seed is None else seed + episode)
            steps = 0
            for steps in range(1, max_steps + 1):
                valid = np.argwhere(info["action_mask"])
                if valid.size == 0:
                    break
                action = valid[rng.randrange(len(valid))]
                obs, reward, terminated, truncated, info = env.step(action)
                if info["cleared_cells"]:
                    logger.debug("Step %d cleared %d cells", steps, len(info["cleared_cells"]))
                if terminated or truncated:
                    break
            scores.append(int(info["score"]))
            logger.info("Episode %d: score %d, lines %d, steps %d", episode, info["score"], info["lines_cleared"], steps)
            logger.debug("Final board:\n%s", env.render())
    finally:
        env.close()
    return scores


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Block Puzzle with a random valid-move agent")
    p.add_argument("--episodes", type=int, default=1)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--max-steps", type=int, default=500)
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    scores = run_random(args.episodes, args.seed, args.max_steps)
    logger.info("Mean score over %d episodes: %.1f", len(scores), sum(scores) / max(1, len(scores)))


if __name__ == "__main__":  # pragma: no cover
    main()
