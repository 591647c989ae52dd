from __future__ import annotations

from block_puzzle.env.block_puzzle_env import BlockPuzzleEnv
from block_puzzle.env.wrappers import FlattenDiscreteActionWrapper
from block_puzzle.game import SequenceRandomSource
from block_puzzle.rl.random_agent import run_random


def test_reset_observation_matches_space() -> None:
    env = BlockPuzzleEnv(random_source=SequenceRandomSource([3]))
    obs, info = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    assert obs["queue"].tolist() == [4, 4, 4]
    assert info["action_mask"].shape == (3, 8, 8)
    assert info["action_mask"].sum() == 3 * 40


def test_step_rewards_score_delta() -> None:
    env = BlockPuzzleEnv(random_source=SequenceRandomSource([3]))
    env.reset()
    _, reward, terminated, truncated, info = env.step((0, 0, 0))
    assert info["accepted"]
    assert reward == 0.0
    _, reward, terminated, truncated, info = env.step((1, 0, 4))
    assert reward == 200.0
    assert info["score"] == 200
    assert len(info["cleared_cells"]) == 8
    assert not terminated and not truncated


def test_invalid_action_is_penalised_and_clears_selection() -> None:
    env = BlockPuzzleEnv(random_source=SequenceRandomSource([0]), invalid_action_penalty=-2.0)
    env.reset()
    _, reward, _, _, info = env.step((0, 7, 7))
    assert reward == -2.0
    assert not info["accepted"]
    assert env.engine.selected_slot is None
    assert env.engine.board.filled_cells() == 0


def test_render_modes() -> None:
    env = BlockPuzzleEnv(render_mode="rgb_array", random_source=SequenceRandomSource([0]))
    env.reset()
    env.step((0, 0, 0))
    img = env.render()
    assert img.shape == (96, 96, 3)
    assert tuple(img[0, 0]) == (0xFF, 0x6B, 0x6B)

    env = BlockPuzzleEnv(render_mode="ansi")
    env.reset()
    assert env.render() == "\n".join(["·" * 8] * 8)


def test_flattened_actions_and_mask() -> None:
    env = FlattenDiscreteActionWrapper(BlockPuzzleEnv(random_source=SequenceRandomSource([0])))
    env.reset()
    mask = env.get_action_mask()
    assert mask.shape == (192,)
    assert env.action(8 * 8 + 8 + 2).tolist() == [1, 1, 2]
    assert not mask[8 * 8 - 1]
    assert mask[0]


def test_random_agent_plays_episodes() -> None:
    scores = run_random(episodes=2, seed=3, max_steps=50)
    assert len(scores) == 2
    assert all(score % 200 == 0 for score in scores)
