"""Wall-clock comparison of the accumulation strategies over one input set."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from wrapcalc.runners import RunStrategy, build_runner

logger = logging.getLogger(__name__)

DEFAULT_STRATEGIES: tuple[RunStrategy, ...] = (
    RunStrategy.SEQUENTIAL,
    RunStrategy.LOCK,
    RunStrategy.CHANNEL,
)


@dataclass(slots=True)
class BenchmarkResult:
    """Timings for one strategy.

    ``value`` and ``failures`` come from the last repetition; final values
    of concurrent strategies may legitimately differ between runs.
    """

    strategy: RunStrategy
    value: int
    failures: int
    timings: list[float] = field(default_factory=list)

    @property
    def runs(self) -> int:
        return len(self.timings)

    @property
    def best_seconds(self) -> float:
        return min(self.timings)

    @property
    def mean_seconds(self) -> float:
        return sum(self.timings) / len(self.timings)


def run_benchmark(
    paths: Sequence[Path | str],
    *,
    strategies: Sequence[RunStrategy] = DEFAULT_STRATEGIES,
    repeat: int = 1,
    channel_capacity: int = 0,
) -> list[BenchmarkResult]:
    """Run every strategy ``repeat`` times over the same paths.

    Failures are counted, not echoed. Values are never compared across
    strategies.
    """

    if repeat < 1:
        raise ValueError("repeat must be >= 1.")

    results: list[BenchmarkResult] = []
    for strategy in strategies:
        runner = build_runner(strategy, channel_capacity=channel_capacity)
        timings: list[float] = []
        value = 0
        failures = 0
        for _ in range(repeat):
            started = time.perf_counter()
            outcome = runner.run(paths)
            timings.append(time.perf_counter() - started)
            value = outcome.value
            failures = len(outcome.failures)
        result = BenchmarkResult(
            strategy=RunStrategy(strategy),
            value=value,
            failures=failures,
            timings=timings,
        )
        logger.info(
            "Benchmark %s: best=%.6fs mean=%.6fs value=%d",
            result.strategy.value,
            result.best_seconds,
            result.mean_seconds,
            result.value,
        )
        results.append(result)
    return results


def render_benchmark_lines(results: Sequence[BenchmarkResult]) -> list[str]:
    if not results:
        return ["No strategies benchmarked."]
    return [
        (
            f"strategy={result.strategy.value} "
            f"best={result.best_seconds:.6f}s "
            f"mean={result.mean_seconds:.6f}s "
            f"runs={result.runs} "
            f"value={result.value} "
            f"failures={result.failures}"
        )
        for result in results
    ]
