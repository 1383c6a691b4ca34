"""Render a :class:`BenchmarkRun` as a table, CSV rows, or JSON."""

from __future__ import annotations

import csv
import io
import json
import math
from typing import List

from .harness import BenchmarkRun

TABLE_WIDTH = 60
COLUMN_WIDTH = 20

CSV_HEADER = [
    "method",
    "label",
    "elapsed_seconds",
    "mean_seconds",
    "ratio",
]

FORMATS = ("table", "csv", "json")


def _trim(number: str) -> str:
    return number.rstrip("0").rstrip(".")


def format_duration(seconds: float) -> str:
    """Round to whole microseconds and pick the largest unit that fits."""

    micros = round(seconds * 1_000_000)
    if micros == 0:
        return "0s"
    if micros < 1_000:
        return f"{micros}µs"
    if micros < 1_000_000:
        return _trim(f"{micros / 1_000:.3f}") + "ms"
    return _trim(f"{micros / 1_000_000:.6f}") + "s"


def _magnitude(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:.2f}"


def ratio_label(ratio: float) -> str:
    rounded = round(ratio, 2)
    if rounded > 1.0:
        return f"{_magnitude(ratio)}x slower"
    if rounded < 1.0:
        inverse = 1.0 / ratio if ratio > 0 else float("inf")
        return f"{_magnitude(inverse)}x faster"
    return "1.00x equal"


def render_table(run: BenchmarkRun) -> str:
    lines: List[str] = [
        f"Results comparing string concatenation methods ({run.config.iterations} iterations):",
        "=" * TABLE_WIDTH,
        f"{'Method':<{COLUMN_WIDTH}} | {'Elapsed Time':<{COLUMN_WIDTH}} | Relative to Reference",
        "-" * TABLE_WIDTH,
    ]
    for result, ratio in run.ratios():
        lines.append(
            f"{result.label:<{COLUMN_WIDTH}} | "
            f"{format_duration(result.elapsed):<{COLUMN_WIDTH}} | "
            f"{ratio_label(ratio)}"
        )
    lines.append("=" * TABLE_WIDTH)
    return "\n".join(lines) + "\n"


def render_csv(run: BenchmarkRun) -> str:
    handle = io.StringIO()
    writer = csv.writer(handle, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for result, ratio in run.ratios():
        writer.writerow(
            [
                result.name,
                result.label,
                f"{result.elapsed:.6f}",
                f"{result.mean:.6f}",
                f"{ratio:.3f}",
            ]
        )
    return handle.getvalue()


def render_json(run: BenchmarkRun) -> str:
    summary = {
        "iterations": run.config.iterations,
        "token": run.config.token,
        "repeat": run.config.repeat,
        "reference": run.config.reference,
        "strategies": [
            {
                "name": result.name,
                "label": result.label,
                "elapsed_seconds": result.elapsed,
                "mean_seconds": result.mean,
                "samples": list(result.samples),
                "ratio": ratio if math.isfinite(ratio) else None,
            }
            for result, ratio in run.ratios()
        ],
    }
    return json.dumps(summary, indent=2, allow_nan=False) + "\n"


def render(run: BenchmarkRun, fmt: str = "table") -> str:
    if fmt == "csv":
        return render_csv(run)
    if fmt == "json":
        return render_json(run)
    return render_table(run)
