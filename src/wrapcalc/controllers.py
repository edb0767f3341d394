"""Controllers for wrapcalc CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from wrapcalc.benchmark import DEFAULT_STRATEGIES, render_benchmark_lines, run_benchmark
from wrapcalc.config import Settings
from wrapcalc.failures import ProcessingFailure
from wrapcalc.runners import RunResult, RunStrategy, build_runner

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalculateCommand:
    """CLI input for a single calculation run."""

    paths: tuple[Path, ...]
    strategy: str | None = None


@dataclass(slots=True)
class BenchmarkCommand:
    """CLI input for the strategy benchmark."""

    paths: tuple[Path, ...]
    strategies: tuple[str, ...] = ()
    repeat: int | None = None


class CalculatorCliController:
    """Thin adapter between click commands and runners."""

    def __init__(self, settings_factory: Callable[[], Settings] = Settings.from_env) -> None:
        self._settings_factory = settings_factory

    def calculate(
        self,
        command: CalculateCommand,
        *,
        on_failure: Callable[[ProcessingFailure], None] | None = None,
    ) -> RunResult:
        settings = self._load_settings(strategy=command.strategy)
        runner = build_runner(settings.run_strategy, channel_capacity=settings.channel_capacity)
        return runner.run(command.paths, on_failure=on_failure)

    def benchmark(self, command: BenchmarkCommand) -> list[str]:
        settings = self._load_settings()
        repeat = command.repeat if command.repeat is not None else settings.benchmark_repeat
        strategies = (
            tuple(RunStrategy(strategy) for strategy in command.strategies) or DEFAULT_STRATEGIES
        )
        results = run_benchmark(
            command.paths,
            strategies=strategies,
            repeat=repeat,
            channel_capacity=settings.channel_capacity,
        )
        return [
            f"Benchmark over {len(command.paths)} file(s), repeat={repeat}",
            *render_benchmark_lines(results),
        ]

    def _load_settings(self, *, strategy: str | None = None) -> Settings:
        settings = self._settings_factory()
        if strategy is not None:
            settings.strategy = strategy.lower()
        settings.validate()
        settings.configure_logging()
        logger.debug("Loaded settings: %s", settings)
        return settings
