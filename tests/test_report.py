from __future__ import annotations

import csv
import io
import json

import pytest

from concat_bench.config import BenchmarkConfig
from concat_bench.harness import run_benchmark
from concat_bench.report import format_duration, ratio_label, render, render_csv, render_json, render_table



@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0, "0s"),
        (0.0000004, "0s"),
        (0.000123, "123µs"),
        (0.001, "1ms"),
        (0.012345, "12.345ms"),
        (0.0021, "2.1ms"),
        (2.0, "2s"),
        (1.2345678, "1.234568s"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (2.5, "2.50x slower"),
        (0.5, "2.00x faster"),
        (0.25, "4.00x faster"),
        (1.0, "1.00x equal"),
        (1.004, "1.00x equal"),
        (0.996, "1.00x equal"),
        (float("inf"), "∞x slower"),
        (0.0, "∞x faster"),
    ],
)
def test_ratio_label(ratio: float, expected: str) -> None:
    assert ratio_label(ratio) == expected


def test_ratio_label_never_claims_slower_when_faster() -> None:
    assert "slower" not in ratio_label(0.8)


def test_render_table_layout(fixed_run) -> None:
    lines = render_table(fixed_run).splitlines()

    assert lines[0] == "Results comparing string concatenation methods (100000 iterations):"
    assert lines[1] == "=" * 60
    assert lines[2] == f"{'Method':<20} | {'Elapsed Time':<20} | Relative to Reference"
    assert lines[3] == "-" * 60
    assert lines[-1] == "=" * 60
    assert len(lines) == 9

    rows = lines[4:8]
    assert [row.split(" | ")[0].strip() for row in rows] == [
        "Operator +",
        "io.StringIO",
        "bytearray",
        "%-format",
    ]
    assert rows[0] == f"{'Operator +':<20} | {'4ms':<20} | 2.00x slower"
    assert rows[1] == f"{'io.StringIO':<20} | {'2ms':<20} | 1.00x equal"
    assert rows[2] == f"{'bytearray':<20} | {'1ms':<20} | 2.00x faster"
    assert rows[3] == f"{'%-format':<20} | {'1.5s':<20} | 750.00x slower"


def test_render_table_with_zero_iterations() -> None:
    run = run_benchmark(BenchmarkConfig(iterations=0))
    lines = render_table(run).splitlines()
    assert "(0 iterations)" in lines[0]
    assert len(lines[4:-1]) == 4
    assert sum(1 for line in lines if set(line) == {"="}) == 2
    assert sum(1 for line in lines if set(line) == {"-"}) == 1


def test_render_csv(fixed_run) -> None:
    rows = list(csv.reader(io.StringIO(render_csv(fixed_run))))
    assert rows[0] == ["method", "label", "elapsed_seconds", "mean_seconds", "ratio"]
    assert [row[0] for row in rows[1:]] == ["operator", "builder", "buffer", "template"]
    assert rows[2][4] == "1.000"
    assert rows[3][4] == "0.500"


def test_render_json(fixed_run) -> None:
    payload = json.loads(render_json(fixed_run))
    assert payload["iterations"] == 100_000
    assert payload["reference"] == "builder"
    assert [entry["name"] for entry in payload["strategies"]] == [
        "operator",
        "builder",
        "buffer",
        "template",
    ]
    assert payload["strategies"][1]["ratio"] == 1.0
    assert payload["strategies"][3]["samples"] == [1.5]


def test_render_dispatch(fixed_run) -> None:
    assert render(fixed_run, "table") == render_table(fixed_run)
    assert render(fixed_run, "csv") == render_csv(fixed_run)
    assert render(fixed_run, "json") == render_json(fixed_run)


def test_reference_follows_config(run_factory) -> None:
    run = run_factory(
        {"operator": 0.004, "builder": 0.002, "buffer": 0.001, "template": 1.5},
        reference="buffer",
    )
    rows = render_table(run).splitlines()[4:8]
    assert rows[2].endswith("1.00x equal")
    assert rows[1].endswith("2.00x slower")


def test_render_json_zero_reference_is_valid_json(run_factory) -> None:
    run = run_factory({"operator": 0.004, "builder": 0.0, "buffer": 0.0, "template": 1.5})
    text = render_json(run)

    assert "Infinity" not in text
    payload = json.loads(text)
    ratios = [entry["ratio"] for entry in payload["strategies"]]
    assert ratios == [None, 1.0, 1.0, None]


def test_render_table_zero_reference(run_factory) -> None:
    run = run_factory({"operator": 0.004, "builder": 0.0, "buffer": 0.0, "template": 1.5})
    rows = render_table(run).splitlines()[4:8]
    assert rows[0].endswith("∞x slower")
    assert rows[2].endswith("1.00x equal")
