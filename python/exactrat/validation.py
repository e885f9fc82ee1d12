# ExactRat - Argument Validation
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""
Coercion of numeric-like input into bounded signed integers.

Every scalar handed to a Rational (numerator, denominator, operand or
exponent) passes through to_int(). The rules:

    int, numpy integer          taken as-is
    float, numpy floating,      truncated toward zero
    Fraction, Decimal
    str                         parsed as a number, then truncated
    anything else               InvalidArgumentError

Integers that do not fit the configured width are "big integers" and are
rejected with UnsupportedTypeError; a truncated float or string that does
not fit raises RationalOverflowError.

Example:
    >>> to_int(3.9)
    3
    >>> to_int("-2.5")
    -2
    >>> to_int(2**70)
    Traceback (most recent call last):
        ...
    exactrat.exceptions.UnsupportedTypeError: Rational: big integers are not accepted ...
"""

from __future__ import annotations
import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Optional

import numpy as np

from .config import Config, get_default_config
from .exceptions import InvalidArgumentError, UnsupportedTypeError


logger = logging.getLogger(__name__)


def to_int(value: Any, config: Optional[Config] = None) -> int:
    """
    Coerce a scalar to a signed integer inside the configured width.

    Args:
        value: The candidate numerator, denominator or operand.
        config: Width to check against (default configuration if None).

    Returns:
        A plain Python int.

    Raises:
        InvalidArgumentError: If the value is not numeric.
        UnsupportedTypeError: If the value is an integer wider than the width.
        RationalOverflowError: If a truncated non-integer does not fit.
    """
    if config is None:
        config = get_default_config()
    width = config.arithmetic

    # bool is an int subclass but not a number for our purposes
    if isinstance(value, (bool, np.bool_)):
        logger.debug("Rejected boolean argument %r", value)
        raise InvalidArgumentError(value, "booleans are not numbers")

    if isinstance(value, (numbers.Integral, np.integer)):
        result = int(value)
        if not width.fits(result):
            logger.debug("Rejected big integer %d", result)
            raise UnsupportedTypeError(
                value,
                f"big integers are not accepted (outside [{width.lo}, {width.hi}])",
            )
        return result

    if isinstance(value, str):
        return width.check(_parse_numeric_text(value), "to_int")

    if isinstance(value, (numbers.Real, np.floating, Decimal)):
        return width.check(_truncate(value), "to_int")

    logger.debug("Rejected argument of type %s", type(value).__name__)
    raise InvalidArgumentError(value)


def _truncate(value: Any) -> int:
    """Truncate a real number toward zero, rejecting NaN and infinities."""
    if isinstance(value, np.floating):
        value = float(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(value, "not a finite number")
    try:
        return math.trunc(value)
    except (ValueError, OverflowError):
        # Decimal('NaN') and Decimal('Infinity') end up here
        raise InvalidArgumentError(value, "not a finite number") from None


def _parse_numeric_text(text: str) -> int:
    """Parse numeric text ("12", " -3.75 ", "1e3") and truncate toward zero."""
    stripped = text.strip()
    if not stripped:
        raise InvalidArgumentError(text, "empty string")

    # Integer syntax first so long digit strings keep every digit
    try:
        return int(stripped, 10)
    except ValueError:
        pass

    try:
        parsed = float(stripped)
    except ValueError:
        logger.debug("Rejected non-numeric text %r", text)
        raise InvalidArgumentError(text, "not numeric text") from None
    return _truncate(parsed)
