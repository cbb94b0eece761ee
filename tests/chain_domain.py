# tests/chain_domain.py
from __future__ import annotations

from simenv.domain import Action, Domain
from simenv.functions import GoalBasedRF, GoalBasedTF


class ChainState:
    """Position on a 0..n chain; `n` is the goal."""
    def __init__(self, index: int, tag=None):
        self.index = index
        self.tag = tag if tag is not None else []

    def copy(self):
        return ChainState(self.index, list(self.tag))

    def __eq__(self, other):
        return isinstance(other, ChainState) and self.index == other.index and self.tag == other.tag

    def __repr__(self):
        return f"ChainState({self.index})"


GOAL = 3


def _move(s, ga):
    step = ga.params[0] if ga.params else 1
    s.index = min(GOAL, s.index + step)
    return s


def make_chain_domain():
    domain = Domain(name="chain")
    domain.add_action(Action("move", _move))
    domain.add_action(Action("stay", lambda s, ga: s))
    return domain


def chain_tf():
    return GoalBasedTF(lambda s: s.index == GOAL)


def chain_rf():
    return GoalBasedRF(chain_tf(), goal_reward=0.0, default_reward=-1.0)


class CountingGenerator:
    def __init__(self, state):
        self.state = state
        self.calls = 0

    def generate(self):
        self.calls += 1
        return self.state.copy()
