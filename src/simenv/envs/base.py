"""Abstract environment API for simenv environments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..types import EnvironmentOutcome, GroundedAction


class Environment(ABC):
    """Common interface for environments an agent interacts with one action at a time."""

    @abstractmethod
    def get_current_observation(self) -> Any:
        """Return a copy of the current environment observation."""

    @abstractmethod
    def execute_action(self, ga: GroundedAction) -> EnvironmentOutcome:
        """Execute `ga` and return the resulting outcome."""

    @abstractmethod
    def get_last_reward(self) -> float:
        """Return the reward produced by the last executed action."""

    @abstractmethod
    def is_in_terminal_state(self) -> bool:
        """Return whether the current state is terminal."""

    @abstractmethod
    def reset_environment(self) -> None:
        """Reset the environment to an initial state."""

    def get_observers(self) -> Tuple[Any, ...]:
        """Return the registered observers, if the environment emits events."""
        return ()


class StateSettableEnvironment(Environment):
    """An environment whose current state may be forced by the caller."""

    @abstractmethod
    def set_cur_state_to(self, state: Any) -> None:
        """Force the current state to `state`."""
