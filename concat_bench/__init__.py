"""Microbenchmark comparing four ways to concatenate identical short strings."""

from .config import BenchmarkConfig
from .dataset import Dataset, generate_dataset
from .errors import BenchmarkError, InvalidConfiguration, StrategyFailure
from .harness import BenchmarkRun, StrategyResult, compute_ratio, run_benchmark
from .report import format_duration, ratio_label, render_table
from .strategies import STRATEGIES, Strategy, get_strategy

__all__ = [
    "BenchmarkConfig",
    "BenchmarkError",
    "BenchmarkRun",
    "Dataset",
    "InvalidConfiguration",
    "STRATEGIES",
    "Strategy",
    "StrategyFailure",
    "StrategyResult",
    "compute_ratio",
    "format_duration",
    "generate_dataset",
    "get_strategy",
    "ratio_label",
    "render_table",
    "run_benchmark",
]

__version__ = "0.1.0"
