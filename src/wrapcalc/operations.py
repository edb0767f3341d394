"""Typed byte operations and the line grammar that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wrapcalc.errors import InvalidOperandError, UnknownOperatorError, WrongArityError

OPERAND_MIN = 0
OPERAND_MAX = 255


class Operator(str, Enum):
    """The four supported arithmetic operators, keyed by their line symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True, slots=True)
class Operation:
    """One parsed line: an operator with a single byte operand."""

    operator: Operator
    operand: int

    def __post_init__(self) -> None:
        if not OPERAND_MIN <= self.operand <= OPERAND_MAX:
            raise ValueError(f"operand must be within [0, 255], got {self.operand}")

    def __str__(self) -> str:
        return format_operation(self)


def parse_operation(line: str) -> Operation:
    """Parse ``<operator> <operand>`` separated by arbitrary whitespace.

    Raises :class:`WrongArityError` unless there are exactly two tokens,
    :class:`InvalidOperandError` when the operand is not a decimal integer
    in ``[0, 255]`` and :class:`UnknownOperatorError` for any operator
    other than ``+ - * /``. The operand is checked before the operator.
    """

    tokens = line.split()
    if len(tokens) != 2:  # noqa: PLR2004
        raise WrongArityError(f"expected 2 arguments, got {len(tokens)}", line)
    symbol, raw_operand = tokens

    # int() also accepts "-0", "_" separators, whitespace and non-ASCII digits
    digits = raw_operand.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidOperandError(f"operand is not an u8: {raw_operand!r}", line)
    operand = int(digits)
    if operand > OPERAND_MAX:
        raise InvalidOperandError(f"operand is not an u8: {raw_operand!r}", line)

    try:
        operator = Operator(symbol)
    except ValueError:
        raise UnknownOperatorError(f"unknown operation: {symbol!r}", line) from None
    return Operation(operator=operator, operand=operand)


def format_operation(operation: Operation) -> str:
    return f"{operation.operator.value} {operation.operand}"
