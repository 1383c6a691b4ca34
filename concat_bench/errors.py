"""Exceptions raised by the concatenation benchmark."""

from __future__ import annotations


class BenchmarkError(Exception):
    """Base class for benchmark failures."""


class InvalidConfiguration(BenchmarkError, ValueError):
    """Raised before any timing starts when the run settings are unusable."""


class StrategyFailure(BenchmarkError, RuntimeError):
    """A concatenation strategy raised or produced the wrong output."""

    def __init__(self, strategy: str, message: str) -> None:
        super().__init__(f"strategy '{strategy}' failed: {message}")
        self.strategy = strategy
