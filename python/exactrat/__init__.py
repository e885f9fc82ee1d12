# ExactRat
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""
ExactRat - Exact Rational Arithmetic.

Rational numbers kept in lowest terms over fixed-width integers, with
cancellation before every multiplication and a comparison that never
forms a common denominator.

Example:
    >>> import exactrat as er
    >>> r = er.Rational(1, 2)
    >>> r.add(er.Rational(1, 3))
    Rational(5, 6)
    >>> r < er.Rational(6, 7)
    True
    >>> str(r ** -2)
    '36/25'

Key Features:
    - Canonical form maintained by every operation
    - Overflow detected against a configurable integer width
    - Chainable in-place methods and non-mutating Python operators
    - Text round-trip through the "[-]N/D" form
"""

import logging

__version__ = "1.0.0"

# Core value type
from .rational import Rational, normalize

# Integer helpers
from .integers import gcd, abs_gcd, FixedWidth

# Scalar coercion
from .validation import to_int

# Conversion utilities
from .conversion import float_to_fraction, format_fraction, parse_fraction

# Configuration
from .config import (
    Config,
    IntWidth,
    MAX_SAFE_INTEGER,
    get_default_config,
    set_default_config,
    default_config,
)

# Exceptions
from .exceptions import (
    RationalError,
    InvalidArityError,
    InvalidArgumentError,
    UnsupportedTypeError,
    ZeroDenominatorError,
    DivisionByZeroError,
    RationalOverflowError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Rational",
    "normalize",
    # Integer helpers
    "gcd",
    "abs_gcd",
    "FixedWidth",
    # Coercion
    "to_int",
    # Conversion
    "float_to_fraction",
    "format_fraction",
    "parse_fraction",
    # Configuration
    "Config",
    "IntWidth",
    "MAX_SAFE_INTEGER",
    "get_default_config",
    "set_default_config",
    "default_config",
    # Exceptions
    "RationalError",
    "InvalidArityError",
    "InvalidArgumentError",
    "UnsupportedTypeError",
    "ZeroDenominatorError",
    "DivisionByZeroError",
    "RationalOverflowError",
]
