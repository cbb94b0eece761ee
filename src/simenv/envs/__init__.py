"""Environment package exports."""

from .base import Environment, StateSettableEnvironment
from .gym_adapter import SimulatedGymEnv
from .gridworld import GridState, GridWorldConfig, make_gridworld_domain, make_gridworld_environment
from .simulated import SimulatedEnvironment, SimulatedEnvironmentConfig

__all__ = [
    "Environment",
    "GridState",
    "GridWorldConfig",
    "SimulatedEnvironment",
    "SimulatedEnvironmentConfig",
    "SimulatedGymEnv",
    "StateSettableEnvironment",
    "make_gridworld_domain",
    "make_gridworld_environment",
]
