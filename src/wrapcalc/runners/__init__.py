"""Accumulation strategies: sequential, lock-synchronized and channel-based."""

from __future__ import annotations

from wrapcalc.runners.base import (
    BaseRunner,
    ParsedOperation,
    Runner,
    RunResult,
    RunStrategy,
)
from wrapcalc.runners.channel import ChannelRunner, OperationChannel
from wrapcalc.runners.locked import LockRunner
from wrapcalc.runners.sequential import SequentialRunner


def build_runner(strategy: RunStrategy | str, *, channel_capacity: int = 0) -> Runner:
    """Return the runner implementing ``strategy``."""

    match RunStrategy(strategy):
        case RunStrategy.SEQUENTIAL:
            return SequentialRunner()
        case RunStrategy.LOCK:
            return LockRunner()
        case RunStrategy.CHANNEL:
            return ChannelRunner(capacity=channel_capacity)
    raise ValueError(f"Unsupported strategy: {strategy}")


__all__ = [
    "BaseRunner",
    "ChannelRunner",
    "LockRunner",
    "OperationChannel",
    "ParsedOperation",
    "RunResult",
    "RunStrategy",
    "Runner",
    "SequentialRunner",
    "build_runner",
]
