"""Single-byte accumulator with wrapping arithmetic."""

from __future__ import annotations

from wrapcalc.errors import DivideByZeroError
from wrapcalc.operations import Operation, Operator

BYTE_MODULUS = 256


class WrappingAccumulator:
    """Holds one value in ``[0, 256)``; every transition wraps modulo 256.

    Not thread-safe on its own: callers either own it exclusively or guard
    :meth:`apply` with a lock.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = value % BYTE_MODULUS

    def value(self) -> int:
        return self._value

    def apply(self, operation: Operation) -> int:
        """Apply ``operation`` in place and return the new value.

        Division by zero raises :class:`DivideByZeroError` before anything
        is mutated.
        """

        current = self._value
        operand = operation.operand
        match operation.operator:
            case Operator.ADD:
                result = current + operand
            case Operator.SUBTRACT:
                result = current - operand
            case Operator.MULTIPLY:
                result = current * operand
            case Operator.DIVIDE:
                if operand == 0:
                    raise DivideByZeroError(current)
                result = current // operand
        self._value = result % BYTE_MODULUS
        return self._value

    def __repr__(self) -> str:
        return f"WrappingAccumulator(value={self._value})"
