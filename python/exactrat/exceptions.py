# ExactRat - Exceptions
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""Exception hierarchy for ExactRat."""

from __future__ import annotations
from typing import Optional, Any


class RationalError(Exception):
    """Base class for all ExactRat exceptions."""
    pass


class InvalidArityError(RationalError, TypeError):
    """Raised when a variadic entry point gets an unsupported number of arguments."""

    def __init__(self, operation: str, given: int, accepted: str):
        super().__init__(
            f"Rational: invalid number of arguments for {operation}: "
            f"got {given}, expected {accepted}"
        )
        self.operation = operation
        self.given = given


class InvalidArgumentError(RationalError, TypeError, ValueError):
    """Raised when a value cannot be coerced to an integer."""

    def __init__(self, argument: Any, reason: Optional[str] = None):
        message = f"Rational: invalid argument {argument!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.argument = argument
        self.reason = reason


class UnsupportedTypeError(RationalError, TypeError):
    """Raised for a recognized but disallowed kind of value (big integers)."""

    def __init__(self, argument: Any, reason: str):
        super().__init__(f"Rational: {reason}")
        self.argument = argument


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """Raised when normalization meets a zero denominator."""

    def __init__(self, message: str = "Rational: bad rational, zero denominator"):
        super().__init__(message)


class DivisionByZeroError(RationalError, ZeroDivisionError):
    """Raised when dividing by a value equal to zero."""

    def __init__(self, operation: str = "div"):
        super().__init__(f"Rational: division by zero in {operation}")
        self.operation = operation


class RationalOverflowError(RationalError, OverflowError):
    """Raised when an intermediate result leaves the configured integer width."""

    def __init__(self, operation: str, value: int, lo: int, hi: int):
        super().__init__(
            f"Rational: integer overflow in {operation}: "
            f"{value} is outside [{lo}, {hi}]"
        )
        self.operation = operation
        self.value = value
        self.lo = lo
        self.hi = hi
