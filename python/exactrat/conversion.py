# ExactRat - Conversion Utilities
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""
Text and float conversion helpers for rational values.

Text form is "[-]N/D": the sign only ever sits on the numerator and the
denominator is positive. Parsing also accepts a bare integer "N" and a
signed denominator ("3/-4"), which normalization moves to the numerator.

Floats are converted in a way that produces "nice" results for common
decimal numbers:

The Problem:
    >>> from fractions import Fraction
    >>> Fraction(0.1)
    Fraction(3602879701896397, 36028797018963968)  # Binary representation!

The Solution:
    >>> from exactrat.conversion import float_to_fraction
    >>> float_to_fraction(0.1)
    Fraction(1, 10)
"""

import logging
import re
from fractions import Fraction
from typing import Tuple


logger = logging.getLogger(__name__)

_FRACTION_TEXT = re.compile(r'^\s*([+-]?\d+)(?:/([+-]?\d+))?\s*$')


def format_fraction(numerator: int, denominator: int) -> str:
    """
    Render a canonical pair as "[-]N/D".

    Examples:
        >>> format_fraction(-3, 4)
        '-3/4'
        >>> format_fraction(0, 1)
        '0/1'
    """
    sign = '-' if numerator < 0 else ''
    return f"{sign}{abs(numerator)}/{denominator}"


def parse_fraction(text: str) -> Tuple[str, str]:
    """
    Split "[-]N/D" or "[-]N" into numerator and denominator digit strings.

    The pieces are returned as text so the caller can run them through its
    own integer validation.

    Raises:
        ValueError: If text is not in fraction form.
    """
    match = _FRACTION_TEXT.match(text)
    if match is None:
        raise ValueError(f"Malformed rational text: {text!r}")
    numerator, denominator = match.groups()
    return numerator, denominator if denominator is not None else '1'


def float_to_fraction(x: float, max_denom: int = 10**12) -> Fraction:
    """
    Convert a float to a human-friendly Fraction.

    Strategy:
    1. Check if it's an exact integer
    2. Try parsing from string representation (catches 0.1 -> "1/10")
    3. Fall back to limit_denominator

    Args:
        x: A finite float.
        max_denom: Maximum denominator of the result.

    Returns:
        A Fraction whose denominator does not exceed max_denom.

    Examples:
        >>> float_to_fraction(0.25)
        Fraction(1, 4)
        >>> float_to_fraction(3.14159)
        Fraction(314159, 100000)
    """
    if x == int(x):
        return Fraction(int(x))

    # str(0.1) == "0.1", which is exactly 1/10
    s = str(float(x))

    # Scientific notation (e.g., 1e-10) has no usable digit string
    if 'e' in s or 'E' in s:
        logger.debug("Approximating %s with denominator <= %d", s, max_denom)
        return Fraction(x).limit_denominator(max_denom)

    sign = -1 if s.startswith('-') else 1
    integer_part, decimal_part = s.lstrip('-').split('.')

    # Build fraction from decimal: 0.125 -> 125/1000
    denom = 10 ** len(decimal_part)
    numer = int(integer_part or '0') * denom + int(decimal_part)
    result = Fraction(sign * numer, denom)

    if result.denominator <= max_denom:
        return result

    logger.debug("Approximating %s with denominator <= %d", s, max_denom)
    return Fraction(x).limit_denominator(max_denom)
