from __future__ import annotations

import allure
import pytest

from wrapcalc.benchmark import BenchmarkResult, render_benchmark_lines, run_benchmark
from wrapcalc.runners import RunStrategy

pytestmark = [
    allure.epic("Accumulation Engine"),
    allure.feature("Benchmark Harness"),
]


def test_benchmark_times_every_strategy(write_ops) -> None:
    paths = [write_ops("a.txt", ["+ 200", "+ 100"]), write_ops("b.txt", ["* 2", "/ 0"])]

    results = run_benchmark(paths, repeat=3)

    assert [result.strategy for result in results] == [
        RunStrategy.SEQUENTIAL,
        RunStrategy.LOCK,
        RunStrategy.CHANNEL,
    ]
    for result in results:
        assert result.runs == 3
        assert all(seconds >= 0 for seconds in result.timings)
        assert result.best_seconds <= result.mean_seconds
        assert 0 <= result.value <= 255
        assert result.failures == 1
    assert results[0].value == 88


def test_benchmark_respects_strategy_selection(write_ops) -> None:
    path = write_ops("a.txt", ["+ 1"])

    results = run_benchmark([path], strategies=[RunStrategy.CHANNEL], channel_capacity=2)

    assert [result.strategy for result in results] == [RunStrategy.CHANNEL]
    assert results[0].value == 1


def test_benchmark_rejects_zero_repeat(write_ops) -> None:
    with pytest.raises(ValueError, match="repeat"):
        run_benchmark([write_ops("a.txt", ["+ 1"])], repeat=0)


def test_render_benchmark_lines() -> None:
    lines = render_benchmark_lines(
        [
            BenchmarkResult(
                strategy=RunStrategy.LOCK,
                value=7,
                failures=0,
                timings=[0.5, 0.25],
            ),
        ],
    )

    assert lines == [
        "strategy=lock best=0.250000s mean=0.375000s runs=2 value=7 failures=0",
    ]
    assert render_benchmark_lines([]) == ["No strategies benchmarked."]
