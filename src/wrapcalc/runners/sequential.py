"""Single-threaded reference runner."""

from __future__ import annotations

from wrapcalc.accumulator import WrappingAccumulator
from wrapcalc.failures import FailureLog
from wrapcalc.runners.base import BaseRunner, RunStrategy, apply_parsed, iter_file_operations
from wrapcalc.sources import FileTask


class SequentialRunner(BaseRunner):
    """Applies files in argument order, lines in file order, on one thread."""

    strategy = RunStrategy.SEQUENTIAL

    def _execute(
        self,
        tasks: list[FileTask],
        accumulator: WrappingAccumulator,
        failures: FailureLog,
    ) -> int:
        applied = 0
        for task in tasks:
            for parsed in iter_file_operations(task, failures):
                if apply_parsed(accumulator, parsed, failures):
                    applied += 1
        return applied
