"""Timing harness: runs each strategy and records elapsed wall-clock time."""

from __future__ import annotations

import statistics
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from .config import BenchmarkConfig
from .dataset import Dataset, generate_dataset
from .errors import InvalidConfiguration, StrategyFailure
from .strategies import STRATEGIES, Strategy

ProgressHook = Callable[[str], None]


@dataclass
class StrategyResult:
    name: str
    label: str
    samples: List[float] = field(default_factory=list)

    @property
    def elapsed(self) -> float:
        """Best (minimum) sample in seconds."""
        return min(self.samples) if self.samples else 0.0

    @property
    def mean(self) -> float:
        return statistics.mean(self.samples) if self.samples else 0.0


@dataclass
class BenchmarkRun:
    config: BenchmarkConfig
    results: List[StrategyResult]

    @property
    def reference(self) -> StrategyResult:
        for result in self.results:
            if result.name == self.config.reference:
                return result
        raise KeyError(self.config.reference)

    def ratios(self) -> List[Tuple[StrategyResult, float]]:
        baseline = self.reference.elapsed
        return [(result, compute_ratio(result.elapsed, baseline)) for result in self.results]


def compute_ratio(duration: float, reference: float) -> float:
    if duration == reference:
        return 1.0
    if reference <= 0:
        return float("inf")
    return duration / reference


def time_strategy(strategy: Strategy, dataset: Dataset) -> Tuple[str, float]:
    """Run ``strategy`` once; the timer covers the concatenation only."""

    try:
        start = time.perf_counter()
        output = strategy(dataset)
        elapsed = time.perf_counter() - start
    except Exception as exc:
        raise StrategyFailure(strategy.name, f"{type(exc).__name__}: {exc}") from exc
    return output, elapsed


def run_strategy(strategy: Strategy, dataset: Dataset, repeat: int = 1) -> Tuple[str, StrategyResult]:
    result = StrategyResult(name=strategy.name, label=strategy.label)
    output = ""
    for _ in range(repeat):
        output, elapsed = time_strategy(strategy, dataset)
        if not isinstance(output, str):
            raise StrategyFailure(strategy.name, f"returned {type(output).__name__}, expected str")
        if len(output) != dataset.text_size:
            raise StrategyFailure(
                strategy.name,
                f"produced {len(output)} characters, expected {dataset.text_size}",
            )
        result.samples.append(elapsed)
    return output, result


def run_benchmark(
    config: BenchmarkConfig,
    strategies: Sequence[Strategy] = STRATEGIES,
    progress: Optional[ProgressHook] = None,
) -> BenchmarkRun:
    """Validate, generate the dataset, and time every strategy in order.

    Any failure aborts the remaining strategies; no partial run is returned.
    """

    config.validate()
    if config.reference not in {strategy.name for strategy in strategies}:
        raise InvalidConfiguration(
            f"reference strategy '{config.reference}' is not part of this run"
        )
    dataset = generate_dataset(config.token, config.iterations)
    expected = dataset.expected()

    results: List[StrategyResult] = []
    for strategy in strategies:
        if progress:
            progress(f"==> Running strategy: {strategy.name} ({config.repeat}x)")
        output, result = run_strategy(strategy, dataset, config.repeat)
        if output != expected:
            raise StrategyFailure(strategy.name, "output differs from the expected result")
        results.append(result)

    return BenchmarkRun(config=config, results=results)


def stderr_progress(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()
