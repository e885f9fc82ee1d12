# ExactRat - Integer Helpers
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""
Greatest common divisor and checked fixed-width integer arithmetic.

Python integers never overflow, so every product and sum the rational
engine forms is passed through a FixedWidth, which raises
RationalOverflowError as soon as a value leaves the configured range.

Example:
    >>> w = FixedWidth(-128, 127)
    >>> w.mul(10, 12)
    120
    >>> w.mul(16, 8)
    Traceback (most recent call last):
        ...
    exactrat.exceptions.RationalOverflowError: ...
"""

from __future__ import annotations
import logging

from .exceptions import RationalOverflowError


logger = logging.getLogger(__name__)


def gcd(a: int, b: int) -> int:
    """
    Euclidean greatest common divisor.

    gcd(a, 0) == a and gcd(a, b) == gcd(b, a % b). The sign of the result
    depends on the signs of the inputs; callers take the absolute value.
    """
    while b != 0:
        a, b = b, a % b
    return a


def abs_gcd(a: int, b: int) -> int:
    """Non-negative greatest common divisor."""
    g = gcd(a, b)
    return -g if g < 0 else g


class FixedWidth:
    """
    Checked arithmetic over the closed range [lo, hi].

    Results are computed exactly and then range-checked, so a failed
    operation reports the true value it would have needed.
    """

    __slots__ = ('lo', 'hi')

    def __init__(self, lo: int, hi: int):
        if lo >= 0 or hi <= 0:
            raise ValueError(f"Invalid integer range: [{lo}, {hi}]")
        self.lo = lo
        self.hi = hi

    def fits(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def check(self, value: int, operation: str) -> int:
        """Return value unchanged, or raise RationalOverflowError."""
        if self.lo <= value <= self.hi:
            return value
        logger.debug("Overflow in %s: %d outside [%d, %d]", operation, value, self.lo, self.hi)
        raise RationalOverflowError(operation, value, self.lo, self.hi)

    def add(self, a: int, b: int, operation: str = "add") -> int:
        return self.check(a + b, operation)

    def sub(self, a: int, b: int, operation: str = "sub") -> int:
        return self.check(a - b, operation)

    def mul(self, a: int, b: int, operation: str = "mul") -> int:
        return self.check(a * b, operation)

    def neg(self, a: int, operation: str = "neg") -> int:
        # -lo does not fit in two's complement ranges
        return self.check(-a, operation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedWidth):
            return NotImplemented
        return self.lo == other.lo and self.hi == other.hi

    def __hash__(self) -> int:
        return hash((self.lo, self.hi))

    def __repr__(self) -> str:
        return f"FixedWidth[{self.lo}, {self.hi}]"
