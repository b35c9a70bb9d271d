from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

import gymnasium as gym

import falling_blocks.env  # noqa: F401


def run_random(steps: int = 2000, seed: Optional[int] = None) -> float:
    env = gym.make("FallingBlocks-20x10-v0", render_mode="ansi")
    rng = random.Random(seed)
    obs, info = env.reset(seed=seed)
    total_cleared = 0.0
    games = 1
    for _ in range(steps):
        action = rng.randrange(env.action_space.n)
        obs, reward, terminated, truncated, info = env.step(action)
        total_cleared += float(reward)
        if terminated or truncated:
            games += 1
            obs, info = env.reset()
    final_board = env.render()
    env.close()
    print(final_board)
    print(f"Random agent cleared {total_cleared:.0f} rows over {games} game(s)")
    return total_cleared


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
