"""Environment that simulates interactions with a domain's transition dynamics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..domain import Domain
from ..errors import ActionNotFoundError, EnvironmentNotInitializedError, ResetWithoutGeneratorError
from ..functions import RewardFunction, TerminalFunction
from ..generators import ConstantStateGenerator, StateGenerator
from ..observers import EnvironmentObserverLike, ObserverRegistry
from ..types import EnvironmentOutcome, GroundedAction
from .base import StateSettableEnvironment


@dataclass
class SimulatedEnvironmentConfig:
    # If False, actions from a terminal state leave the state unchanged with reward 0
    allow_action_from_terminal_states: bool = False


class SimulatedEnvironment(StateSettableEnvironment):
    """
    Simulates interactions using the actions of `domain`, with rewards from `rf` and
    terminal states from `tf`.

    Initial states come from a state generator. If only an initial state is given, a
    ConstantStateGenerator for it is bound so that reset_environment() restores it.
    With neither, the first state forced through set_cur_state_to() becomes the reset
    target (see `has_implicit_reset_target`).

    Observations are copies of the true internal state. By default, once the
    environment is in a terminal state, execute_action() returns the same state with
    zero reward until reset_environment() or set_cur_state_to() moves it elsewhere.

    Instances are not thread-safe; callers must serialize access.
    """

    def __init__(
        self,
        domain: Domain,
        rf: RewardFunction,
        tf: TerminalFunction,
        initial_state: Optional[Any] = None,
        state_generator: Optional[StateGenerator] = None,
        config: Optional[SimulatedEnvironmentConfig] = None,
    ):
        if initial_state is not None and state_generator is not None:
            raise ValueError("Provide either initial_state or state_generator, not both")
        self.domain = domain
        self.rf = rf
        self.tf = tf
        self.cfg = config or SimulatedEnvironmentConfig()
        self.allow_action_from_terminal_states = bool(self.cfg.allow_action_from_terminal_states)

        self.cur_state: Optional[Any] = None
        self.last_reward = 0.0
        self.observers = ObserverRegistry()
        self._state_generator: Optional[StateGenerator] = None
        self._implicit_reset_target = False

        if initial_state is not None:
            self._state_generator = ConstantStateGenerator(initial_state)
            self.cur_state = initial_state
        elif state_generator is not None:
            self._state_generator = state_generator
            self.cur_state = state_generator.generate()

    # ------------- reset policy -------------

    @property
    def state_generator(self) -> Optional[StateGenerator]:
        return self._state_generator

    @state_generator.setter
    def state_generator(self, generator: Optional[StateGenerator]):
        self._state_generator = generator
        self._implicit_reset_target = False

    @property
    def has_implicit_reset_target(self) -> bool:
        """True when the reset target was bound by set_cur_state_to() rather than explicitly."""
        return self._implicit_reset_target

    def set_cur_state_to(self, state: Any) -> None:
        """Force the current state. Binds `state` as the reset target if no generator is set."""
        if state is None:
            raise ValueError("set_cur_state_to() requires a state, got None")
        if self._state_generator is None:
            self._state_generator = ConstantStateGenerator(state)
            self._implicit_reset_target = True
        self.cur_state = state

    # ------------- observers -------------

    def add_observers(self, *observers: EnvironmentObserverLike) -> None:
        self.observers.add(*observers)

    def remove_observers(self, *observers: EnvironmentObserverLike) -> None:
        self.observers.remove(*observers)

    def clear_all_observers(self) -> None:
        self.observers.clear()

    def get_observers(self) -> Tuple[EnvironmentObserverLike, ...]:
        return self.observers.as_tuple()

    # ------------- terminal gating -------------

    def set_allow_action_from_terminal_states(self, allow: bool) -> None:
        self.allow_action_from_terminal_states = bool(allow)

    # ------------- Environment API -------------

    def _require_state(self) -> Any:
        if self.cur_state is None:
            raise EnvironmentNotInitializedError(
                "SimulatedEnvironment has no current state; call set_cur_state_to() or bind a "
                "state generator and call reset_environment()"
            )
        return self.cur_state

    def get_current_observation(self) -> Any:
        return self._require_state().copy()

    def get_last_reward(self) -> float:
        return self.last_reward

    def is_in_terminal_state(self) -> bool:
        return bool(self.tf(self._require_state()))

    def execute_action(self, ga: GroundedAction) -> EnvironmentOutcome:
        sim_ga = ga.bind(self.domain.get_action(ga.action_name()))
        if sim_ga.action is None:
            raise ActionNotFoundError(ga)
        cur = self._require_state()

        self.observers.notify_initiation(self.get_current_observation, ga)

        if self.allow_action_from_terminal_states or not self.is_in_terminal_state():
            next_state = sim_ga.execute_in(cur)
            self.last_reward = float(self.rf(cur, sim_ga, next_state))
        else:
            next_state = cur
            self.last_reward = 0.0

        outcome = EnvironmentOutcome(
            previous_state=cur.copy(),
            action_taken=sim_ga,
            resulting_state=next_state.copy(),
            reward=self.last_reward,
            terminal=bool(self.tf(next_state)),
        )
        self.cur_state = next_state

        self.observers.notify_interaction(outcome)
        return outcome

    def reset_environment(self) -> None:
        if self._state_generator is None:
            raise ResetWithoutGeneratorError(
                "Cannot reset SimulatedEnvironment: no state generator is bound "
                "(set state_generator or call set_cur_state_to() first)"
            )
        self.last_reward = 0.0
        self.cur_state = self._state_generator.generate()
        self.observers.notify_reset(self)
