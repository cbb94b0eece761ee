# src/simenv/envs/gridworld.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from ..domain import Action, Domain
from ..functions import GoalBasedRF, GoalBasedTF
from ..types import GroundedAction
from .simulated import SimulatedEnvironment, SimulatedEnvironmentConfig


@dataclass
class GridWorldConfig:
    width: int = 5
    height: int = 5
    goal: Tuple[int, int] = (4, 4)
    walls: Tuple[Tuple[int, int], ...] = ()

    # Rewards
    step_cost: float = -1.0
    goal_reward: float = 0.0

    env: SimulatedEnvironmentConfig = field(default_factory=SimulatedEnvironmentConfig)


class GridState:
    """Agent position on a grid, stored as a numpy int vector [x, y]."""
    def __init__(self, x: int, y: int):
        self.pos = np.array([x, y], dtype=int)

    @property
    def x(self) -> int:
        return int(self.pos[0])

    @property
    def y(self) -> int:
        return int(self.pos[1])

    def copy(self) -> "GridState":
        return GridState(self.x, self.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return bool(np.array_equal(self.pos, other.pos))

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"GridState(x={self.x}, y={self.y})"


# y grows northwards
MOVES = {
    "north": (0, 1),
    "south": (0, -1),
    "east": (1, 0),
    "west": (-1, 0),
}


def _move_effect(cfg: GridWorldConfig, delta: Tuple[int, int]):
    walls = {tuple(w) for w in cfg.walls}

    def effect(s: GridState, ga: GroundedAction) -> GridState:
        nx, ny = s.x + delta[0], s.y + delta[1]
        if 0 <= nx < cfg.width and 0 <= ny < cfg.height and (nx, ny) not in walls:
            s.pos[:] = (nx, ny)
        return s

    return effect


def make_gridworld_domain(cfg: Optional[GridWorldConfig] = None) -> Domain:
    """Domain with north/south/east/west moves; walls and borders block movement."""
    cfg = cfg or GridWorldConfig()
    domain = Domain(name="gridworld")
    for name, delta in MOVES.items():
        domain.add_action(Action(name, _move_effect(cfg, delta)))
    return domain


def at_goal(cfg: GridWorldConfig):
    goal = tuple(cfg.goal)
    return lambda s: s.as_tuple() == goal


def make_gridworld_environment(cfg: Optional[GridWorldConfig] = None,
                               start: Tuple[int, int] = (0, 0)) -> SimulatedEnvironment:
    cfg = cfg or GridWorldConfig()
    tf = GoalBasedTF(at_goal(cfg))
    rf = GoalBasedRF(tf, goal_reward=cfg.goal_reward, default_reward=cfg.step_cost)
    return SimulatedEnvironment(
        make_gridworld_domain(cfg), rf, tf,
        initial_state=GridState(*start),
        config=cfg.env,
    )


__all__ = ["GridWorldConfig", "GridState", "make_gridworld_domain", "make_gridworld_environment"]
