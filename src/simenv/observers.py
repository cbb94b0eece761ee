from __future__ import annotations

from typing import Any, Iterator, List, Protocol, Tuple

from .types import EnvironmentOutcome, GroundedAction


class EnvironmentObserverLike(Protocol):
    def observe_environment_action_initiation(self, state: Any, action: GroundedAction) -> None:
        ...

    def observe_environment_interaction(self, outcome: EnvironmentOutcome) -> None:
        ...

    def observe_environment_reset(self, env: Any) -> None:
        ...


class EnvironmentObserver:
    """Listener for environment events. Override only the hooks you need."""

    def observe_environment_action_initiation(self, state: Any, action: GroundedAction) -> None:
        """Called before an action is executed, with a copy of the pre-action state."""

    def observe_environment_interaction(self, outcome: EnvironmentOutcome) -> None:
        """Called after the transition has been committed."""

    def observe_environment_reset(self, env: Any) -> None:
        """Called after the environment has been reset."""


class ObserverRegistry:
    """
    Ordered list of observers. Notification is synchronous and in registration
    order; an observer that raises stops the remaining notifications for that event.
    """
    def __init__(self):
        self._observers: List[EnvironmentObserverLike] = []

    def add(self, *observers: EnvironmentObserverLike):
        self._observers.extend(observers)

    def remove(self, *observers: EnvironmentObserverLike):
        for o in observers:
            if o in self._observers:
                self._observers.remove(o)

    def clear(self):
        self._observers.clear()

    def as_tuple(self) -> Tuple[EnvironmentObserverLike, ...]:
        return tuple(self._observers)

    def __iter__(self) -> Iterator[EnvironmentObserverLike]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers

    # -------- notification --------

    def notify_initiation(self, observe_fn, action: GroundedAction):
        # observe_fn is called per observer so each gets an independent copy
        for o in self.as_tuple():
            o.observe_environment_action_initiation(observe_fn(), action)

    def notify_interaction(self, outcome: EnvironmentOutcome):
        for o in self.as_tuple():
            o.observe_environment_interaction(outcome)

    def notify_reset(self, env: Any):
        for o in self.as_tuple():
            o.observe_environment_reset(env)
