from __future__ import annotations

from typing import Any, Optional
import os

from torch.utils.tensorboard import SummaryWriter

from .observers import EnvironmentObserver
from .types import EnvironmentOutcome


class TBLogger:
    def __init__(self, logdir: str):
        os.makedirs(logdir, exist_ok=True)
        self.logdir = logdir
        self.writer = SummaryWriter(logdir)
        self.step = 0

    def add_scalar(self, tag: str, value: float, step: Optional[int] = None):
        self.step = int(self.step + 1 if step is None else step)
        self.writer.add_scalar(tag, value, self.step)

    def flush(self):
        self.writer.flush()

    def close(self):
        self.writer.close()


class RewardLoggingObserver(EnvironmentObserver):
    """
    Logs per-interaction reward/terminal scalars, and episode return/length when an
    episode reaches a terminal state or the environment is reset mid-episode.
    Interactions after a terminal outcome are ignored until the next reset.
    """
    def __init__(self, logger: TBLogger, prefix: str = "env"):
        self.logger = logger
        self.prefix = prefix
        self.interactions = 0
        self.episodes = 0
        self.episode_return = 0.0
        self.episode_length = 0
        self._done = False

    def observe_environment_interaction(self, outcome: EnvironmentOutcome) -> None:
        if self._done:
            return
        self.interactions += 1
        self.episode_return += float(outcome.reward)
        self.episode_length += 1
        self.logger.add_scalar(f"{self.prefix}/reward", float(outcome.reward), self.interactions)
        self.logger.add_scalar(f"{self.prefix}/terminal", float(outcome.terminal), self.interactions)
        if outcome.terminal:
            self._end_episode()
            self._done = True

    def observe_environment_reset(self, env: Any) -> None:
        if self.episode_length > 0:
            self._end_episode()
        self._done = False

    def _end_episode(self):
        self.episodes += 1
        self.logger.add_scalar(f"{self.prefix}/episode_return", self.episode_return, self.episodes)
        self.logger.add_scalar(f"{self.prefix}/episode_length", float(self.episode_length), self.episodes)
        self.episode_return = 0.0
        self.episode_length = 0
