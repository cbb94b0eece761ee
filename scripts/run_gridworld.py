#!/usr/bin/env python3
# scripts/run_gridworld.py
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from simenv.envs.gridworld import GridWorldConfig, make_gridworld_environment
from simenv.envs.simulated import SimulatedEnvironmentConfig
from simenv.logging_utils import RewardLoggingObserver, TBLogger
from simenv.types import GroundedAction


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run a random agent in the simulated grid world")
    ap.add_argument("--width", type=int, default=5)
    ap.add_argument("--height", type=int, default=5)
    ap.add_argument("--episodes", type=int, default=10)
    ap.add_argument("--max_steps", type=int, default=200)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--logdir", type=str, default=None, help="TensorBoard log directory (disabled if omitted)")
    ap.add_argument("--allow_terminal", action="store_true",
                    help="let actions change the state after a terminal state is reached")
    return ap.parse_args(argv)


def run_episodes(args: argparse.Namespace) -> List[float]:
    cfg = GridWorldConfig(
        width=args.width,
        height=args.height,
        goal=(args.width - 1, args.height - 1),
        env=SimulatedEnvironmentConfig(allow_action_from_terminal_states=args.allow_terminal),
    )
    env = make_gridworld_environment(cfg)
    rng = np.random.default_rng(args.seed)
    names = env.domain.action_names()

    logger = TBLogger(args.logdir) if args.logdir else None
    if logger:
        env.add_observers(RewardLoggingObserver(logger, prefix="gridworld"))

    returns: List[float] = []
    for ep in range(args.episodes):
        env.reset_environment()
        ret = 0.0
        steps = 0
        while steps < args.max_steps and not env.is_in_terminal_state():
            name = names[int(rng.integers(0, len(names)))]
            outcome = env.execute_action(GroundedAction(name))
            ret += outcome.reward
            steps += 1
        returns.append(ret)
        print(f"[{ep+1:03d}] return={ret:.1f} steps={steps} final={env.get_current_observation()}")

    if logger:
        logger.flush()
        logger.close()
        print("Finished. Logs in:", args.logdir)
    return returns


def main() -> None:
    run_episodes(parse_args())


if __name__ == "__main__":
    main()
