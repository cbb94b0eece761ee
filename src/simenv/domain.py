from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .types import GroundedAction, State


Effect = Callable[[Any, GroundedAction], Any]
Applicability = Callable[[Any, GroundedAction], bool]


class Action:
    """A named transition in a domain.

    `effect(state, ga)` receives a private copy of the state and returns the next
    state; it may mutate the copy in place and return it. When `applicable`
    rejects the pair, the action leaves the state unchanged.
    """
    def __init__(self, name: str, effect: Effect, applicable: Optional[Applicability] = None):
        self.name = name
        self.effect = effect
        self.applicable = applicable

    def is_applicable(self, state: State, ga: GroundedAction) -> bool:
        if self.applicable is None:
            return True
        return bool(self.applicable(state, ga))

    def perform(self, state: State, ga: GroundedAction) -> State:
        s = state.copy()
        if not self.is_applicable(s, ga):
            return s
        return self.effect(s, ga)

    def ground(self, *params: Any) -> GroundedAction:
        return GroundedAction(self.name, tuple(params), self)

    def __repr__(self) -> str:
        return f"Action({self.name!r})"


class Domain:
    """Ordered catalog of actions; resolves action names for an environment."""
    def __init__(self, name: str = "domain"):
        self.name = name
        self._actions: Dict[str, Action] = {}

    def add_action(self, action: Action) -> Action:
        if action.name in self._actions:
            raise ValueError(f"Domain '{self.name}' already has an action named '{action.name}'")
        self._actions[action.name] = action
        return action

    def get_action(self, name: str) -> Optional[Action]:
        """Return the catalog action called `name`, or None when unknown."""
        return self._actions.get(name)

    @property
    def actions(self) -> List[Action]:
        return list(self._actions.values())

    def action_names(self) -> List[str]:
        return list(self._actions)

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __len__(self) -> int:
        return len(self._actions)
