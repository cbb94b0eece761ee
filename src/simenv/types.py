# simenv types & dataclasses
from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Optional, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from .domain import Action


@runtime_checkable
class State(Protocol):
    """Opaque environment state. Only a deep, independent copy() is required."""

    def copy(self) -> "State":
        ...


@dataclass(frozen=True)
class GroundedAction:
    """An action name plus its parameters, optionally bound to a catalog Action."""
    name: str
    params: Tuple[Any, ...] = ()
    action: Optional["Action"] = field(default=None, compare=False, repr=False)

    def copy(self) -> "GroundedAction":
        return GroundedAction(self.name, tuple(_copy.deepcopy(p) for p in self.params), self.action)

    def action_name(self) -> str:
        return self.name

    def bind(self, action: Optional["Action"]) -> "GroundedAction":
        """Return a copy of this grounded action bound to `action`."""
        return replace(self.copy(), action=action)

    def execute_in(self, state: State) -> State:
        """Apply the bound action to `state` and return the next state."""
        if self.action is None:
            raise RuntimeError(f"GroundedAction {self} is not bound to a domain action")
        return self.action.perform(state, self)

    def __str__(self) -> str:
        if not self.params:
            return self.name
        return f"{self.name}({', '.join(str(p) for p in self.params)})"


@dataclass(frozen=True)
class EnvironmentOutcome:
    """Immutable record of one interaction: (s, a, s', r, terminal)."""
    previous_state: Any
    action_taken: GroundedAction
    resulting_state: Any
    reward: float
    terminal: bool
