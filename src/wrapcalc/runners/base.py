"""Runner abstraction shared by sequential and concurrent strategies."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from wrapcalc.accumulator import WrappingAccumulator
from wrapcalc.errors import CalculatorError, DivideByZeroError, ParseError
from wrapcalc.failures import FailureKind, FailureLog, ProcessingFailure
from wrapcalc.operations import Operation, parse_operation
from wrapcalc.sources import FileTask, build_tasks

logger = logging.getLogger(__name__)


class RunStrategy(str, Enum):
    """How file workers feed the accumulator."""

    SEQUENTIAL = "sequential"
    LOCK = "lock"
    CHANNEL = "channel"


@dataclass(frozen=True, slots=True)
class ParsedOperation:
    """Operation plus the file location it came from, for failure reports."""

    path: Path
    line_number: int
    operation: Operation


@dataclass(slots=True)
class RunResult:
    """Outcome of one runner invocation."""

    strategy: RunStrategy
    value: int
    applied: int
    files: int
    failures: list[ProcessingFailure] = field(default_factory=list)


class Runner(Protocol):
    """Protocol implemented by every accumulation strategy."""

    strategy: RunStrategy

    def run(
        self,
        paths: Sequence[Path | str],
        *,
        on_failure: Callable[[ProcessingFailure], None] | None = None,
    ) -> RunResult:
        """Process every path and return the final accumulator state."""


class BaseRunner(ABC):
    """Template for runners: builds tasks and the failure log, then delegates.

    Subclasses implement :meth:`_execute`, which must return the number of
    operations applied once every worker has finished.
    """

    strategy: RunStrategy

    def run(
        self,
        paths: Sequence[Path | str],
        *,
        on_failure: Callable[[ProcessingFailure], None] | None = None,
    ) -> RunResult:
        tasks = build_tasks(paths)
        failures = FailureLog(on_failure)
        accumulator = WrappingAccumulator()
        applied = self._execute(tasks, accumulator, failures)
        result = RunResult(
            strategy=self.strategy,
            value=accumulator.value(),
            applied=applied,
            files=len(tasks),
            failures=failures.snapshot(),
        )
        logger.info(
            "Run finished: strategy=%s files=%d applied=%d failures=%d value=%d",
            result.strategy.value,
            result.files,
            result.applied,
            len(result.failures),
            result.value,
        )
        return result

    @abstractmethod
    def _execute(
        self,
        tasks: list[FileTask],
        accumulator: WrappingAccumulator,
        failures: FailureLog,
    ) -> int:
        """Run every task to completion and return the applied count."""


def iter_file_operations(task: FileTask, failures: FailureLog) -> Iterator[ParsedOperation]:
    """Yield the parsed operations of one file in line order.

    Unparseable lines are reported and skipped. An open or read error is
    reported and ends the file.
    """

    try:
        for line_number, line in task.iter_lines():
            try:
                operation = parse_operation(line)
            except ParseError as exc:
                failures.record_error(exc, path=task.path, line_number=line_number)
                continue
            yield ParsedOperation(path=task.path, line_number=line_number, operation=operation)
    except CalculatorError as exc:
        failures.record_error(exc, path=task.path)


def apply_parsed(
    accumulator: WrappingAccumulator,
    parsed: ParsedOperation,
    failures: FailureLog,
) -> bool:
    """Apply one operation; a zero divisor is reported and leaves the value as is."""

    try:
        accumulator.apply(parsed.operation)
    except DivideByZeroError as exc:
        failures.record_error(exc, path=parsed.path, line_number=parsed.line_number)
        return False
    return True


def start_worker(
    name: str,
    task: FileTask,
    failures: FailureLog,
    body: Callable[[], None],
) -> threading.Thread:
    """Start a thread running ``body`` for ``task``.

    An unexpected exception ends only that worker; it is logged and
    recorded as a ``worker_crashed`` failure.
    """

    def _target() -> None:
        logger.debug("Worker %s started for %s", name, task.name)
        try:
            body()
        except Exception as exc:
            logger.exception("Worker %s crashed on %s", name, task.name)
            failures.record(
                ProcessingFailure(
                    kind=FailureKind.WORKER_CRASHED,
                    path=task.path,
                    line_number=None,
                    message=f"{type(exc).__name__}: {exc}",
                ),
            )
        else:
            logger.debug("Worker %s done with %s", name, task.name)

    thread = threading.Thread(target=_target, name=name, daemon=True)
    thread.start()
    return thread
