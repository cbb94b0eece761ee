# tests/test_collaborators.py
from __future__ import annotations

import pytest

from simenv.domain import Action, Domain
from simenv.functions import GoalBasedRF, GoalBasedTF, NullTermination, UniformCostRF
from simenv.generators import ConstantStateGenerator, SampledStateGenerator
from simenv.types import GroundedAction

from chain_domain import ChainState


def test_constant_generator_returns_fresh_copies():
    src = ChainState(2)
    gen = ConstantStateGenerator(src)
    a, b = gen.generate(), gen.generate()
    assert a == src and b == src
    assert a is not b and a is not src
    a.index = 0
    assert gen.generate() == ChainState(2)


def test_sampled_generator_is_seeded():
    states = [ChainState(i) for i in range(4)]
    g1 = SampledStateGenerator(states, seed=7)
    g2 = SampledStateGenerator(states, seed=7)
    assert [g1.generate().index for _ in range(10)] == [g2.generate().index for _ in range(10)]
    assert SampledStateGenerator(states).generate() in states
    with pytest.raises(ValueError):
        SampledStateGenerator([])


def test_reward_and_terminal_functions():
    ga = GroundedAction("move")
    assert UniformCostRF()(ChainState(0), ga, ChainState(1)) == -1.0
    assert UniformCostRF(cost=-0.5)(ChainState(0), ga, ChainState(1)) == -0.5
    assert NullTermination()(ChainState(3)) is False

    tf = GoalBasedTF(lambda s: s.index == 3)
    rf = GoalBasedRF(tf, goal_reward=1.0, default_reward=-1.0)
    assert tf(ChainState(3)) is True
    assert rf(ChainState(2), ga, ChainState(3)) == 1.0
    assert rf(ChainState(1), ga, ChainState(2)) == -1.0


def test_action_perform_works_on_a_copy():
    def inc(s, ga):
        s.index += 1
        return s

    act = Action("inc", inc)
    s = ChainState(0)
    nxt = act.perform(s, act.ground())
    assert s.index == 0
    assert nxt.index == 1


def test_non_applicable_action_leaves_state_unchanged():
    act = Action("inc", lambda s, ga: ChainState(s.index + 1), applicable=lambda s, ga: s.index < 1)
    assert act.perform(ChainState(0), act.ground()).index == 1
    nxt = act.perform(ChainState(1), act.ground())
    assert nxt == ChainState(1)


def test_domain_rejects_duplicate_names():
    domain = Domain("d")
    domain.add_action(Action("a", lambda s, ga: s))
    with pytest.raises(ValueError):
        domain.add_action(Action("a", lambda s, ga: s))
    assert len(domain) == 1


def test_grounded_action_copy_and_str():
    ga = GroundedAction("push", (1, [2, 3]))
    c = ga.copy()
    c.params[1].append(4)
    assert ga.params == (1, [2, 3])
    assert str(ga) == "push(1, [2, 3])"
    assert str(GroundedAction("noop")) == "noop"
    with pytest.raises(RuntimeError):
        ga.execute_in(ChainState(0))


def test_sampled_generator_reseed_restarts_sequence():
    states = [ChainState(i) for i in range(4)]
    gen = SampledStateGenerator(states, seed=3)
    first = [gen.generate().index for _ in range(8)]
    gen.seed(3)
    assert [gen.generate().index for _ in range(8)] == first


def test_bind_returns_bound_copy():
    act = Action("inc", lambda s, ga: s)
    ga = GroundedAction("inc", ([1],))
    bound = ga.bind(act)
    assert bound.action is act and ga.action is None
    assert bound == ga and bound is not ga
    bound.params[0].append(2)
    assert ga.params == ([1],)
