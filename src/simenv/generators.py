from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

import numpy as np


class StateGenerator(Protocol):
    def generate(self) -> Any:
        ...


class ConstantStateGenerator:
    """Always generates (a copy of) the same state."""
    def __init__(self, state: Any):
        self.src_state = state.copy()

    def generate(self) -> Any:
        return self.src_state.copy()


class SampledStateGenerator:
    """Generates a uniformly sampled copy of one of the given states."""
    def __init__(self, states: Sequence[Any], seed: Optional[int] = None):
        if len(states) == 0:
            raise ValueError("SampledStateGenerator needs at least one state")
        self.states = [s.copy() for s in states]
        self.seed(seed)

    def seed(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def generate(self) -> Any:
        i = int(self._rng.integers(0, len(self.states)))
        return self.states[i].copy()
