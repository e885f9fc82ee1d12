# ExactRat - Rational Numbers
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""
Exact rational numbers over fixed-width integers.

A Rational is always kept in canonical form: the denominator is positive
and shares no factor with the numerator, and zero is 0/1. Arithmetic
methods (add, sub, mul, div, pow, ...) mutate the receiver and return it,
so calls chain:

    >>> r = Rational(1, 2)
    >>> r.add(Rational(1, 3)).mul(6)
    Rational(5, 1)

The Python operators return new values and leave their operands alone:

    >>> a = Rational(1, 2)
    >>> b = a + 1
    >>> str(a), str(b)
    ('1/2', '3/2')

Intermediate values are cancelled by their common factors before any
multiplication, and every product or sum is checked against the
configured integer width (see Config). Leaving it raises
RationalOverflowError and leaves the receiver unchanged.
"""

from __future__ import annotations
import math
import numbers
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

from .config import Config, get_default_config
from .conversion import float_to_fraction, format_fraction, parse_fraction
from .exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidArityError,
    ZeroDenominatorError,
)
from .integers import FixedWidth, abs_gcd, gcd
from .validation import to_int


# Things accepted where an integer is expected
Scalar = Union[int, float, str, Fraction, np.integer, np.floating]

# Things accepted as the operand of an arithmetic or comparison method
RationalLike = Union['Rational', Scalar]


def normalize(numerator: int, denominator: int, width: FixedWidth) -> Tuple[int, int]:
    """
    Reduce (numerator, denominator) to canonical form.

    Raises:
        ZeroDenominatorError: If denominator is 0.
        RationalOverflowError: If moving the sign to the numerator overflows.
    """
    if denominator == 0:
        raise ZeroDenominatorError()

    if numerator == 0:
        return 0, 1

    g = abs_gcd(numerator, denominator)
    numerator //= g
    denominator //= g

    if denominator < 0:
        numerator = width.neg(numerator, "normalize")
        denominator = width.neg(denominator, "normalize")

    return numerator, denominator


def _is_integer(value: Any) -> bool:
    return (
        isinstance(value, (numbers.Integral, np.integer))
        and not isinstance(value, (bool, np.bool_))
    )


def _less_than(t_num: int, t_den: int, r_num: int, r_den: int) -> bool:
    """
    Order two canonical fractions without a common denominator.

    Both fractions are expanded as continued fractions in lockstep. The
    first differing term decides; every step swaps numerator and
    denominator roles, which flips the direction of the comparison.
    """
    # floor quotient, 0 <= remainder < denominator
    t_q, t_r = divmod(t_num, t_den)
    r_q, r_r = divmod(r_num, r_den)

    reverse = False

    while True:
        if t_q != r_q:
            return t_q > r_q if reverse else t_q < r_q

        reverse = not reverse

        if t_r == 0 or r_r == 0:
            break

        t_num, t_den = t_den, t_r
        t_q, t_r = divmod(t_num, t_den)
        r_num, r_den = r_den, r_r
        r_q, r_r = divmod(r_num, r_den)

    if t_r == r_r:
        return False

    return (t_r != 0) != reverse


class Rational:
    """
    A mutable exact rational number.

    Rational()              0/1
    Rational(n)             n/1
    Rational(n, d)          n/d in lowest terms
    Rational(other)         copy of another Rational

    Scalars may be ints, floats (truncated toward zero) or numeric strings;
    see exactrat.validation.to_int.
    """

    __slots__ = ('_num', '_den', '_config')

    # Mutable value
    __hash__ = None

    def __init__(self, *args: RationalLike, config: Optional[Config] = None):
        if config is None:
            if len(args) == 1 and isinstance(args[0], Rational):
                config = args[0]._config
            else:
                config = get_default_config()
        self._config = config
        self._num = 0
        self._den = 1

        if len(args) > 2:
            raise InvalidArityError("Rational", len(args), "0, 1 or 2")
        if args:
            self._num, self._den = self._initial_pair(args)

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    def _coerce(self, value: Any) -> int:
        return to_int(value, self._config)

    def _initial_pair(self, args: tuple) -> Tuple[int, int]:
        width = self._config.arithmetic

        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, Rational):
                # Already canonical; only the width can differ
                return (
                    width.check(arg._num, "copy"),
                    width.check(arg._den, "copy"),
                )
            return self._coerce(arg), 1

        numerator = self._coerce(args[0])
        denominator = self._coerce(args[1])
        return normalize(numerator, denominator, width)

    def assign(self, *args: RationalLike) -> Rational:
        """
        Re-initialize this value in place.

        Accepts one argument (a Rational or a scalar) or two scalars
        (numerator, denominator). Returns self.

        Raises:
            InvalidArityError: For any other number of arguments.
        """
        if len(args) not in (1, 2):
            raise InvalidArityError("assign", len(args), "1 or 2")
        self._num, self._den = self._initial_pair(args)
        return self

    def copy(self) -> Rational:
        """Independent copy with the same value and configuration."""
        return Rational(self)

    @classmethod
    def parse(cls, text: str, config: Optional[Config] = None) -> Rational:
        """
        Read a value from "[-]N/D" or "[-]N" text.

        Examples:
            >>> Rational.parse("-6/8")
            Rational(-3, 4)
            >>> Rational.parse("5")
            Rational(5, 1)

        Raises:
            InvalidArgumentError: If the text is not in fraction form.
            ZeroDenominatorError: If the denominator is zero.
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(text, "expected text")
        try:
            numerator, denominator = parse_fraction(text)
        except ValueError:
            raise InvalidArgumentError(text, "expected [-]N/D") from None
        return cls(numerator, denominator, config=config)

    @classmethod
    def from_float(cls, x: float, config: Optional[Config] = None) -> Rational:
        """
        Exact value of a float's shortest decimal form.

        0.1 becomes 1/10 rather than its binary expansion. When that decimal
        does not fit the configured width, the closest fraction whose
        denominator fits is used instead.

        Raises:
            InvalidArgumentError: For NaN, infinities and non-numbers.
            RationalOverflowError: If the integer part does not fit.
        """
        if config is None:
            config = get_default_config()
        if _is_integer(x):
            return cls(x, config=config)
        if not isinstance(x, (numbers.Real, np.floating)) or isinstance(x, (bool, np.bool_)):
            raise InvalidArgumentError(x)
        if not math.isfinite(x):
            raise InvalidArgumentError(x, "not a finite number")

        width = config.arithmetic
        frac = float_to_fraction(float(x), max_denom=width.hi)
        result = cls(config=config)
        result._num = width.check(frac.numerator, "from_float")
        result._den = frac.denominator
        return result

    @classmethod
    def from_fraction(cls, value: Fraction, config: Optional[Config] = None) -> Rational:
        """Convert a fractions.Fraction, rejecting terms wider than the width."""
        return cls(value.numerator, value.denominator, config=config)

    def to_fraction(self) -> Fraction:
        """Equivalent fractions.Fraction."""
        return Fraction(self._num, self._den)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @property
    def config(self) -> Config:
        return self._config

    # -------------------------------------------------------------------------
    # Arithmetic (in place, returns self)
    # -------------------------------------------------------------------------

    def _combine(self, other: RationalLike, subtract: bool, operation: str) -> Rational:
        w = self._config.arithmetic
        num, den = self._num, self._den

        if isinstance(other, Rational):
            r_num, r_den = other._num, other._den

            g = gcd(den, r_den)
            den //= g
            left = w.mul(num, r_den // g, operation)
            right = w.mul(r_num, den, operation)
            num = w.sub(left, right, operation) if subtract else w.add(left, right, operation)

            g = abs_gcd(num, g)
            num //= g
            den = w.mul(den, r_den // g, operation)
        else:
            # n/d ± i == (n ± i*d)/d, still in lowest terms
            step = w.mul(self._coerce(other), den, operation)
            num = w.sub(num, step, operation) if subtract else w.add(num, step, operation)

        self._num, self._den = num, den
        return self

    def add(self, other: RationalLike) -> Rational:
        """Add other to this value in place and return self."""
        return self._combine(other, False, "add")

    def sub(self, other: RationalLike) -> Rational:
        """Subtract other from this value in place and return self."""
        return self._combine(other, True, "sub")

    def mul(self, other: RationalLike) -> Rational:
        """
        Multiply this value by other in place and return self.

        Each numerator is cancelled against the opposite denominator first,
        so the products are already in lowest terms.
        """
        w = self._config.arithmetic
        num, den = self._num, self._den

        if isinstance(other, Rational):
            r_num, r_den = other._num, other._den
            gcd1 = abs_gcd(num, r_den)
            gcd2 = abs_gcd(r_num, den)
            num, den = (
                w.mul(num // gcd1, r_num // gcd2, "mul"),
                w.mul(den // gcd2, r_den // gcd1, "mul"),
            )
        else:
            i = self._coerce(other)
            g = abs_gcd(i, den)
            num, den = w.mul(num, i // g, "mul"), den // g

        self._num, self._den = num, den
        return self

    def div(self, other: RationalLike) -> Rational:
        """
        Divide this value by other in place and return self.

        Raises:
            DivisionByZeroError: If other equals zero.
        """
        w = self._config.arithmetic
        num, den = self._num, self._den

        if isinstance(other, Rational):
            r_num, r_den = other._num, other._den
            if r_num == 0:
                raise DivisionByZeroError("div")
            if num == 0:
                return self

            gcd1 = abs_gcd(num, r_num)
            gcd2 = abs_gcd(r_den, den)
            num, den = (
                w.mul(num // gcd1, r_den // gcd2, "div"),
                w.mul(den // gcd2, r_num // gcd1, "div"),
            )
        else:
            i = self._coerce(other)
            if i == 0:
                raise DivisionByZeroError("div")
            if num == 0:
                return self

            g = abs_gcd(num, i)
            num, den = num // g, w.mul(den, i // g, "div")

        if den < 0:
            num, den = w.neg(num, "div"), w.neg(den, "div")

        self._num, self._den = num, den
        return self

    def pow(self, exponent: Scalar) -> Rational:
        """
        Raise this value to an integer power in place and return self.

        pow(0) is 1 for every value, zero included.

        Raises:
            DivisionByZeroError: For zero raised to a negative power.
        """
        n = self._coerce(exponent)
        count = -n if n < 0 else n

        result = Rational(1, config=self._config)
        if self._config.fast_pow:
            base = self.copy()
            while count:
                if count & 1:
                    result.mul(base)
                count >>= 1
                if count:
                    base.mul(base)
        else:
            for _ in range(count):
                result.mul(self)

        if n < 0:
            result = Rational(1, config=self._config).div(result)

        self._num, self._den = result._num, result._den
        return self

    def pre_inc(self) -> Rational:
        """Add one in place and return self."""
        self._num = self._config.arithmetic.add(self._num, self._den, "pre_inc")
        return self

    def pre_dec(self) -> Rational:
        """Subtract one in place and return self."""
        self._num = self._config.arithmetic.sub(self._num, self._den, "pre_dec")
        return self

    def post_inc(self) -> Rational:
        """Add one in place and return a copy of the previous value."""
        previous = self.copy()
        self.pre_inc()
        return previous

    def post_dec(self) -> Rational:
        """Subtract one in place and return a copy of the previous value."""
        previous = self.copy()
        self.pre_dec()
        return previous

    def abs(self) -> Rational:
        """Make this value non-negative in place and return self."""
        if self._num < 0:
            self._num = self._config.arithmetic.neg(self._num, "abs")
        return self

    def neg(self) -> Rational:
        """Flip the sign in place and return self."""
        if self._num != 0:
            self._num = self._config.arithmetic.neg(self._num, "neg")
        return self

    def is_zero(self) -> bool:
        return self._num == 0

    def is_nonzero(self) -> bool:
        return self._num != 0

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def less_than(self, other: RationalLike) -> bool:
        if isinstance(other, Rational):
            return _less_than(self._num, self._den, other._num, other._den)

        # x < i  <=>  floor(x) < i for an integer i
        quotient, _ = divmod(self._num, self._den)
        return quotient < self._coerce(other)

    def equal_to(self, other: RationalLike) -> bool:
        if isinstance(other, Rational):
            return self._num == other._num and self._den == other._den
        return self._den == 1 and self._num == self._coerce(other)

    def not_equal_to(self, other: RationalLike) -> bool:
        return not self.equal_to(other)

    def greater_than(self, other: RationalLike) -> bool:
        return not (self.less_than(other) or self.equal_to(other))

    def less_equal(self, other: RationalLike) -> bool:
        return self.less_than(other) or self.equal_to(other)

    def greater_equal(self, other: RationalLike) -> bool:
        return not self.less_than(other)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def value_of(self) -> float:
        """Nearest float (lossy)."""
        return self._num / self._den

    def to_string(self) -> str:
        """Canonical "[-]N/D" text."""
        return format_fraction(self._num, self._den)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.copy().add(other)

    def __radd__(self, other: Any) -> Rational:
        if not _is_integer(other):
            return NotImplemented
        return self.copy().add(other)

    def __iadd__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.copy().sub(other)

    def __rsub__(self, other: Any) -> Rational:
        if not _is_integer(other):
            return NotImplemented
        return self.copy().neg().add(other)

    def __isub__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.copy().mul(other)

    def __rmul__(self, other: Any) -> Rational:
        if not _is_integer(other):
            return NotImplemented
        return self.copy().mul(other)

    def __imul__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.copy().div(other)

    def __rtruediv__(self, other: Any) -> Rational:
        if not _is_integer(other):
            return NotImplemented
        return Rational(other, config=self._config).div(self)

    def __itruediv__(self, other: Any) -> Rational:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: Any) -> Rational:
        if not _is_integer(exponent):
            return NotImplemented
        return self.copy().pow(exponent)

    def __ipow__(self, exponent: Any) -> Rational:
        if not _is_integer(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Rational:
        return self.copy().neg()

    def __pos__(self) -> Rational:
        return self.copy()

    def __abs__(self) -> Rational:
        return self.copy().abs()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.equal_to(other)
        if _is_integer(other):
            # Integers too wide for the width cannot equal a canonical value
            return self._den == 1 and self._num == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.less_equal(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Rational) and not _is_integer(other):
            return NotImplemented
        return self.greater_equal(other)

    def __bool__(self) -> bool:
        return self.is_nonzero()

    def __float__(self) -> float:
        return self.value_of()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"
