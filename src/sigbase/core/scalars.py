"""Conversions of caller-supplied numbers into double precision."""

from __future__ import annotations

import operator

import numpy as np

from ..errors import ScalarConversionError


def as_float(value: object) -> float:
    """
    Convert ``value`` to a Python float.

    Anything with a float conversion is accepted (ints, floats, numpy scalars,
    ``Fraction``/``Decimal``, objects defining ``__float__``). Text, complex
    numbers, sequences, arrays of any shape other than 0-d and values too
    large for a double are rejected.

    Raises
    ------
    ScalarConversionError
        If ``value`` cannot be represented as a double.
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise ScalarConversionError(value)
    # 0-d arrays are scalars; anything with a shape is not
    if isinstance(value, np.ndarray) and value.ndim > 0:
        raise ScalarConversionError(value)
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        raise ScalarConversionError(value) from None


def as_length(value: object, name: str = "length") -> int:
    """Return ``value`` as a non-negative ``int``."""
    try:
        length = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}") from None
    if length < 0:
        raise ValueError(f"{name} must be >= 0, got {length}")
    return length


__all__ = ["as_float", "as_length"]
