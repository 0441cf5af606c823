"""
Exceptions raised by ahUtils.

All errors are raised synchronously and never retried: the caller decides.

Hierarchy:
- AhUtilsError: base for everything raised on purpose by the library
- InvalidOperandError: a value cannot be interpreted as a number
- InvalidArgumentError: a control parameter (digits, step, path) is malformed
- DivisionByZeroError: division by exact zero
- ResultOverflowError: a result exceeds the exponent range of the decimal context

The concrete classes also derive from the matching builtin
(TypeError / ZeroDivisionError / OverflowError), so callers can catch either.
"""
from typing import Any, Optional


class AhUtilsError(Exception):
    """Base exception for ahUtils errors."""
    pass


class InvalidOperandError(AhUtilsError, TypeError):
    """Raised when a value is not a valid number (wrong kind, non-numeric string, bool, None)."""

    def __init__(self, message: str, argument: str, value: Any = None, index: Optional[int] = None):
        self.message = message
        self.argument = argument
        self.value = value
        self.index = index
        super().__init__(message)


class InvalidArgumentError(AhUtilsError, TypeError):
    """Raised when a control parameter is malformed (e.g. negative or fractional digit count)."""

    def __init__(self, message: str, argument: str, value: Any = None):
        self.message = message
        self.argument = argument
        self.value = value
        super().__init__(message)


class DivisionByZeroError(AhUtilsError, ZeroDivisionError):
    """Raised when dividing by exact zero."""
    pass


class ResultOverflowError(AhUtilsError, OverflowError):
    """Raised when a result is larger than the decimal context can represent."""
    pass
