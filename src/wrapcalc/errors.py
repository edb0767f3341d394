"""Error taxonomy for file reading, line parsing and accumulator arithmetic."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CalculatorError(RuntimeError):
    """Base class for every failure a worker can report."""


class FileOpenError(CalculatorError):
    """Input file could not be opened; the whole file is skipped."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to open input file {path}: {reason}")
        self.path = path
        self.reason = reason


class LineReadError(CalculatorError):
    """Reading stopped mid-file; remaining lines of that file are skipped."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"failed to read line {line_number} of {path}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class ParseErrorKind(str, Enum):
    """Why a line could not be turned into an operation."""

    WRONG_ARITY = "wrong_arity"
    INVALID_OPERAND = "invalid_operand"
    UNKNOWN_OPERATOR = "unknown_operator"


class ParseError(CalculatorError):
    """Line is not a valid ``<operator> <operand>`` pair."""

    kind: ParseErrorKind

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class WrongArityError(ParseError):
    kind = ParseErrorKind.WRONG_ARITY


class InvalidOperandError(ParseError):
    kind = ParseErrorKind.INVALID_OPERAND


class UnknownOperatorError(ParseError):
    kind = ParseErrorKind.UNKNOWN_OPERATOR


class DivideByZeroError(CalculatorError):
    """Division by a zero operand; the accumulator is left unchanged."""

    def __init__(self, value: int) -> None:
        super().__init__(f"division by zero (accumulator left at {value})")
        self.value = value
