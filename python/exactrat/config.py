# ExactRat - Configuration
# Copyright (c) 2024 ExactRat Contributors. All rights reserved.

"""Configuration settings for ExactRat."""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

import numpy as np

from .integers import FixedWidth


# Largest integer an IEEE double represents exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9007199254740991


class IntWidth(Enum):
    """Fixed signed integer width backing numerators and denominators."""
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    SAFE = "safe"  # exact-integer range of a float64


@dataclass(frozen=True)
class Config:
    """
    Configuration for rational values.

    Attributes:
        width: Integer width every numerator, denominator and intermediate
               product must fit in. Leaving it raises RationalOverflowError.
        fast_pow: Build integer powers by repeated squaring. When False,
                  pow multiplies the base |n| times.
    """
    width: IntWidth = IntWidth.INT64
    fast_pow: bool = True
    arithmetic: FixedWidth = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Accept the enum value as a plain string
        if isinstance(self.width, str):
            object.__setattr__(self, 'width', IntWidth(self.width))

        if self.width is IntWidth.SAFE:
            lo, hi = -MAX_SAFE_INTEGER, MAX_SAFE_INTEGER
        else:
            info = np.iinfo(np.dtype(self.width.value))
            lo, hi = int(info.min), int(info.max)

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'arithmetic', FixedWidth(lo, hi))

    @property
    def int_min(self) -> int:
        return self.arithmetic.lo

    @property
    def int_max(self) -> int:
        return self.arithmetic.hi

    @classmethod
    def int32(cls) -> Config:
        """32-bit signed integers."""
        return cls(width=IntWidth.INT32)

    @classmethod
    def int64(cls) -> Config:
        """64-bit signed integers (default)."""
        return cls()

    @classmethod
    def safe_integer(cls) -> Config:
        """Integers a float64 holds exactly, as in JavaScript numbers."""
        return cls(width=IntWidth.SAFE)

    def __repr__(self) -> str:
        return f"Config(width={self.width.value}, fast_pow={self.fast_pow})"


_default = Config()


def get_default_config() -> Config:
    """Configuration used by values created without an explicit one."""
    return _default


def set_default_config(config: Union[Config, str]) -> Config:
    """
    Replace the process-wide default configuration.

    Args:
        config: A Config, or an IntWidth value such as "int32".

    Returns:
        The previous default.
    """
    global _default
    if isinstance(config, str):
        config = Config(width=IntWidth(config))
    if not isinstance(config, Config):
        raise TypeError(f"Expected Config, got {type(config).__name__}")
    previous, _default = _default, config
    return previous


@contextmanager
def default_config(config: Union[Config, str]) -> Iterator[Config]:
    """
    Temporarily replace the default configuration.

    Example:
        >>> with default_config("int32"):
        ...     r = Rational(1, 3)
        >>> r.config.width
        <IntWidth.INT32: 'int32'>
    """
    previous = set_default_config(config)
    try:
        yield get_default_config()
    finally:
        set_default_config(previous)
