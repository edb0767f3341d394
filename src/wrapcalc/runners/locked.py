"""Concurrent runner sharing one lock-guarded accumulator."""

from __future__ import annotations

import logging
import threading

from wrapcalc.accumulator import WrappingAccumulator
from wrapcalc.errors import DivideByZeroError
from wrapcalc.failures import FailureLog
from wrapcalc.runners.base import (
    BaseRunner,
    ParsedOperation,
    RunStrategy,
    iter_file_operations,
    start_worker,
)
from wrapcalc.sources import FileTask

logger = logging.getLogger(__name__)


class LockedAccumulator:
    """Accumulator cell shared by all workers, serialized by a mutex.

    The lock covers exactly one ``apply`` plus its counter update; reading
    and parsing never take it, and failures are reported after release.
    """

    def __init__(self, accumulator: WrappingAccumulator) -> None:
        self._accumulator = accumulator
        self._lock = threading.Lock()
        self.applied = 0

    def apply(self, parsed: ParsedOperation, failures: FailureLog) -> None:
        error: DivideByZeroError | None = None
        with self._lock:
            try:
                self._accumulator.apply(parsed.operation)
            except DivideByZeroError as exc:
                error = exc
            else:
                self.applied += 1
        if error is not None:
            failures.record_error(error, path=parsed.path, line_number=parsed.line_number)

    def locked(self) -> bool:
        return self._lock.locked()


class LockRunner(BaseRunner):
    """One thread per file; every worker mutates the shared cell under the lock."""

    strategy = RunStrategy.LOCK

    def _execute(
        self,
        tasks: list[FileTask],
        accumulator: WrappingAccumulator,
        failures: FailureLog,
    ) -> int:
        cell = LockedAccumulator(accumulator)

        def _work(task: FileTask) -> None:
            for parsed in iter_file_operations(task, failures):
                cell.apply(parsed, failures)

        workers = [
            start_worker(
                f"wrapcalc-lock-{task.position}",
                task,
                failures,
                lambda task=task: _work(task),
            )
            for task in tasks
        ]
        for worker in workers:
            worker.join()
        logger.debug("All %d lock workers joined", len(workers))
        return cell.applied
