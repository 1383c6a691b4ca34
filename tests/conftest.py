from __future__ import annotations

from typing import Dict

import pytest

from concat_bench.config import BenchmarkConfig
from concat_bench.harness import BenchmarkRun, StrategyResult
from concat_bench.strategies import STRATEGIES


def make_run(timings: Dict[str, float], iterations: int = 100_000, reference: str = "builder") -> BenchmarkRun:
    results = [
        StrategyResult(name=strategy.name, label=strategy.label, samples=[timings[strategy.name]])
        for strategy in STRATEGIES
    ]
    config = BenchmarkConfig(iterations=iterations, reference=reference)
    return BenchmarkRun(config=config, results=results)


@pytest.fixture
def fixed_run() -> BenchmarkRun:
    return make_run(
        {
            "operator": 0.004,
            "builder": 0.002,
            "buffer": 0.001,
            "template": 1.5,
        }
    )


@pytest.fixture
def run_factory():
    return make_run
