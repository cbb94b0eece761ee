from __future__ import annotations

from typing import Any, Callable, Protocol

from .types import GroundedAction


class RewardFunction(Protocol):
    def __call__(self, state: Any, action: GroundedAction, next_state: Any) -> float:
        ...


class TerminalFunction(Protocol):
    def __call__(self, state: Any) -> bool:
        ...


# ----------------------------- Terminal functions -----------------------------

class NullTermination:
    """No state is ever terminal."""
    def __call__(self, state: Any) -> bool:
        return False


class GoalBasedTF:
    """Terminal exactly in the states where `predicate(state)` holds."""
    def __init__(self, predicate: Callable[[Any], bool]):
        self.predicate = predicate

    def __call__(self, state: Any) -> bool:
        return bool(self.predicate(state))


# ----------------------------- Reward functions -----------------------------

class UniformCostRF:
    """Every transition costs the same (default -1)."""
    def __init__(self, cost: float = -1.0):
        self.cost = float(cost)

    def __call__(self, state: Any, action: GroundedAction, next_state: Any) -> float:
        return self.cost


class GoalBasedRF:
    """`goal_reward` for transitions landing in a goal state, `default_reward` otherwise."""
    def __init__(self, goal_tf: Callable[[Any], bool], goal_reward: float = 0.0, default_reward: float = -1.0):
        self.goal_tf = goal_tf
        self.goal_reward = float(goal_reward)
        self.default_reward = float(default_reward)

    def __call__(self, state: Any, action: GroundedAction, next_state: Any) -> float:
        if self.goal_tf(next_state):
            return self.goal_reward
        return self.default_reward
