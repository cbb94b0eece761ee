import inspect

from simenv.envs.base import Environment, StateSettableEnvironment
from simenv.envs.simulated import SimulatedEnvironment


def test_environment_has_expected_members():
    members = [
        "get_current_observation",
        "execute_action",
        "get_last_reward",
        "is_in_terminal_state",
        "reset_environment",
        "get_observers",
    ]

    for name in members:
        assert hasattr(Environment, name), f"Environment missing {name}"
        assert inspect.isfunction(getattr(Environment, name)), f"Environment {name} has unexpected type"
    assert hasattr(StateSettableEnvironment, "set_cur_state_to")
    assert issubclass(SimulatedEnvironment, StateSettableEnvironment)


def test_environment_defaults_implemented():
    class DummyEnv(Environment):
        def get_current_observation(self):  # pragma: no cover - trivial glue
            return "obs"

        def execute_action(self, ga):  # pragma: no cover - trivial glue
            return None

        def get_last_reward(self):  # pragma: no cover - trivial glue
            return 0.0

        def is_in_terminal_state(self):  # pragma: no cover - trivial glue
            return False

        def reset_environment(self):  # pragma: no cover - trivial glue
            pass

    env = DummyEnv()
    assert env.get_observers() == ()
