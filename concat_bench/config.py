"""Run settings for a benchmark invocation."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidConfiguration
from .strategies import DEFAULT_REFERENCE, STRATEGY_NAMES

DEFAULT_ITERATIONS = 100_000
DEFAULT_TOKEN = "example"
DEFAULT_REPEAT = 1


@dataclass
class BenchmarkConfig:
    iterations: int = DEFAULT_ITERATIONS
    token: str = DEFAULT_TOKEN
    reference: str = DEFAULT_REFERENCE
    repeat: int = DEFAULT_REPEAT

    def validate(self) -> "BenchmarkConfig":
        """Raise :class:`InvalidConfiguration` on the first unusable setting."""

        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise InvalidConfiguration(
                f"iteration count must be an integer, got {self.iterations!r}"
            )
        if self.iterations < 0:
            raise InvalidConfiguration(
                f"iteration count must be non-negative, got {self.iterations}"
            )
        if not isinstance(self.token, str):
            raise InvalidConfiguration(
                f"token must be a string, got {type(self.token).__name__}"
            )
        if isinstance(self.repeat, bool) or not isinstance(self.repeat, int) or self.repeat < 1:
            raise InvalidConfiguration(f"repeat count must be at least 1, got {self.repeat!r}")
        if self.reference not in STRATEGY_NAMES:
            choices = ", ".join(STRATEGY_NAMES)
            raise InvalidConfiguration(
                f"unknown reference strategy '{self.reference}' (expected one of: {choices})"
            )
        return self
