"""Runtime configuration for runners, benchmark and logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from wrapcalc.runners import RunStrategy

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True)
class Settings:
    """Application settings loaded from ``WRAPCALC_*`` environment variables."""

    strategy: str = RunStrategy.SEQUENTIAL.value
    channel_capacity: int = 0
    benchmark_repeat: int = 1
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults matching the plain CLI."""

        return cls(
            strategy=os.getenv("WRAPCALC_STRATEGY", RunStrategy.SEQUENTIAL.value).strip().lower(),
            channel_capacity=_env_int("WRAPCALC_CHANNEL_CAPACITY", 0),
            benchmark_repeat=_env_int("WRAPCALC_BENCHMARK_REPEAT", 1),
            log_level=os.getenv("WRAPCALC_LOG_LEVEL", "WARNING").strip().upper(),
        )

    def validate(self) -> None:
        """Raise configuration error for values no runner can honour."""

        supported = {strategy.value for strategy in RunStrategy}
        if self.strategy not in supported:
            raise ValueError(
                f"WRAPCALC_STRATEGY must be one of {', '.join(sorted(supported))}; "
                f"got {self.strategy!r}.",
            )
        if self.channel_capacity < 0:
            raise ValueError("WRAPCALC_CHANNEL_CAPACITY must be >= 0.")
        if self.benchmark_repeat < 1:
            raise ValueError("WRAPCALC_BENCHMARK_REPEAT must be >= 1.")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"WRAPCALC_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}.")

    @property
    def run_strategy(self) -> RunStrategy:
        return RunStrategy(self.strategy)

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s",
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
