"""Expose a SimulatedEnvironment through the gymnasium Env API."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
from gymnasium import spaces

from ..types import GroundedAction
from .simulated import SimulatedEnvironment


class SimulatedGymEnv(gym.Env):
    """Discrete-action gymnasium view of a SimulatedEnvironment.

    Action `i` is the i-th action in the domain catalog, grounded without parameters.
    `obs_fn` maps an environment observation (a state copy) to a gym observation.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        env: SimulatedEnvironment,
        obs_fn: Callable[[Any], Any],
        observation_space: spaces.Space,
    ) -> None:
        super().__init__()
        self.env = env
        self.obs_fn = obs_fn
        self.action_names = env.domain.action_names()
        self.action_space = spaces.Discrete(len(self.action_names))
        self.observation_space = observation_space

    # ------------------------------------------------------------------
    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, Dict[str, Any]]:
        super().reset(seed=seed)
        generator = self.env.state_generator
        if seed is not None and hasattr(generator, "seed"):
            generator.seed(seed)
        self.env.reset_environment()
        return self.obs_fn(self.env.get_current_observation()), {}

    def step(self, action: int) -> Tuple[Any, float, bool, bool, Dict[str, Any]]:
        name = self.action_names[int(action)]
        outcome = self.env.execute_action(GroundedAction(name))
        return (
            self.obs_fn(outcome.resulting_state),
            float(outcome.reward),
            bool(outcome.terminal),
            False,
            {"action": name},
        )


__all__ = ["SimulatedGymEnv"]
