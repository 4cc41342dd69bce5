"""Model interface and process-wide settings."""

from __future__ import annotations

import abc
import os
import threading
from collections.abc import Sequence


class Model(abc.ABC):
    """Interface for a trainable predictor over vectors of floats."""

    @abc.abstractmethod
    def predict(self, inputs: Sequence[float]) -> list[float]:
        """Return the output vector for one input vector."""

    @abc.abstractmethod
    def train(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[Sequence[float]],
    ) -> None:
        """Fit the model to paired input and output vectors."""

    @abc.abstractmethod
    def save_model(self, filepath: str | os.PathLike[str]) -> None:
        """Store the model; raise OSError on failure."""

    @abc.abstractmethod
    def load_model(self, filepath: str | os.PathLike[str]) -> None:
        """Restore the model; raise OSError on failure."""


class Settings:
    """Thread-safe settings shared by the whole process via ``instance()``."""

    _shared: Settings | None = None
    _shared_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._log_level = "INFO"

    @staticmethod
    def instance() -> Settings:
        """Return the process-wide settings object."""
        with Settings._shared_lock:
            if Settings._shared is None:
                Settings._shared = Settings()
            return Settings._shared

    @property
    def log_level(self) -> str:
        with self._lock:
            return self._log_level

    @log_level.setter
    def log_level(self, level: str) -> None:
        with self._lock:
            self._log_level = level