"""Simulated single-agent environments with copy-on-read state and observers."""

from .domain import Action, Domain
from .errors import ActionNotFoundError, EnvironmentNotInitializedError, ResetWithoutGeneratorError, SimEnvError
from .observers import EnvironmentObserver, ObserverRegistry
from .types import EnvironmentOutcome, GroundedAction

__all__ = [
    "Action",
    "ActionNotFoundError",
    "Domain",
    "EnvironmentNotInitializedError",
    "EnvironmentObserver",
    "EnvironmentOutcome",
    "GroundedAction",
    "ObserverRegistry",
    "ResetWithoutGeneratorError",
    "SimEnvError",
]
