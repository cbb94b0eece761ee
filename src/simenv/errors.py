"""Error kinds raised by simulated environments."""

from __future__ import annotations

from typing import Any


class SimEnvError(RuntimeError):
    """Base class for environment errors."""


class ActionNotFoundError(SimEnvError):
    """Raised when a requested action has no match in the domain's action catalog."""

    def __init__(self, requested: Any):
        self.action_name = getattr(requested, "name", str(requested))
        super().__init__(
            f"Cannot execute action {requested} in this SimulatedEnvironment because "
            f"the action is not known in this Environment's domain"
        )


class ResetWithoutGeneratorError(SimEnvError):
    """Raised when reset is requested but no state generator is bound."""


class EnvironmentNotInitializedError(SimEnvError):
    """Raised when the environment is queried before any state has been set."""
