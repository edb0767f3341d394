"""Per-line and per-file failure reports collected across workers."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from wrapcalc.errors import (
    CalculatorError,
    DivideByZeroError,
    FileOpenError,
    LineReadError,
    ParseError,
    ParseErrorKind,
)


class FailureKind(str, Enum):
    """Normalized failure classes reported to the user."""

    FILE_OPEN = "file_open"
    LINE_READ = "line_read"
    WRONG_ARITY = ParseErrorKind.WRONG_ARITY.value
    INVALID_OPERAND = ParseErrorKind.INVALID_OPERAND.value
    UNKNOWN_OPERATOR = ParseErrorKind.UNKNOWN_OPERATOR.value
    DIVIDE_BY_ZERO = "divide_by_zero"
    WORKER_CRASHED = "worker_crashed"


_PREFIX_BY_KIND = {
    FailureKind.FILE_OPEN: "failed to open input file",
    FailureKind.LINE_READ: "failed to read line",
    FailureKind.WRONG_ARITY: "failed to parse line",
    FailureKind.INVALID_OPERAND: "failed to parse line",
    FailureKind.UNKNOWN_OPERATOR: "failed to parse line",
    FailureKind.DIVIDE_BY_ZERO: "skipped operation",
    FailureKind.WORKER_CRASHED: "worker crashed",
}


@dataclass(frozen=True, slots=True)
class ProcessingFailure:
    """A reported, non-fatal failure, normally tied to one file and optionally one line.

    ``path`` is ``None`` only when the channel consumer fails before it has
    received any operation.
    """

    kind: FailureKind
    path: Path | None
    line_number: int | None
    message: str

    @classmethod
    def from_error(
        cls,
        error: CalculatorError,
        *,
        path: Path,
        line_number: int | None = None,
    ) -> ProcessingFailure:
        if isinstance(error, ParseError):
            kind = FailureKind(error.kind.value)
        elif isinstance(error, DivideByZeroError):
            kind = FailureKind.DIVIDE_BY_ZERO
        elif isinstance(error, LineReadError):
            kind = FailureKind.LINE_READ
            line_number = error.line_number
        elif isinstance(error, FileOpenError):
            kind = FailureKind.FILE_OPEN
        else:
            kind = FailureKind.WORKER_CRASHED
        message = error.reason if isinstance(error, FileOpenError | LineReadError) else str(error)
        return cls(kind=kind, path=path, line_number=line_number, message=message)

    def render(self) -> str:
        location = str(self.path) if self.path is not None else "<channel>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{_PREFIX_BY_KIND[self.kind]}: {location}: {self.message}"


class FailureLog:
    """Thread-safe sink shared by all workers of one run.

    The ``on_failure`` callback runs under the log's lock, so reports from
    parallel workers are delivered one at a time.
    """

    def __init__(self, on_failure: Callable[[ProcessingFailure], None] | None = None) -> None:
        self._lock = threading.Lock()
        self._failures: list[ProcessingFailure] = []
        self._on_failure = on_failure or (lambda _failure: None)

    def record(self, failure: ProcessingFailure) -> None:
        with self._lock:
            self._failures.append(failure)
            self._on_failure(failure)

    def record_error(
        self,
        error: CalculatorError,
        *,
        path: Path,
        line_number: int | None = None,
    ) -> ProcessingFailure:
        failure = ProcessingFailure.from_error(error, path=path, line_number=line_number)
        self.record(failure)
        return failure

    def snapshot(self) -> list[ProcessingFailure]:
        with self._lock:
            return list(self._failures)

    def __len__(self) -> int:
        with self._lock:
            return len(self._failures)
