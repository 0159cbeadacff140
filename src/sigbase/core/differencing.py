"""First-order differencing and reversal."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

from ..errors import ShortInputError
from .container import SignalBase

S = TypeVar("S", bound=SignalBase)


def diff(signal: S) -> S:
    """
    Return the forward difference ``x[i + 1] - x[i]``.

    The result is one sample shorter than ``signal``.

    Raises
    ------
    ShortInputError
        If ``signal`` has fewer than two samples.
    """
    if len(signal) < 2:
        raise ShortInputError("diff", 2, len(signal))
    with np.errstate(invalid="ignore", over="ignore"):
        return signal._from_array(np.diff(signal._data))


def rev(signal: S) -> S:
    """Return the samples in reverse order."""
    return signal._from_array(signal._data[::-1].copy())


class DifferencingMixin:
    __slots__ = ()

    def diff(self):
        return diff(self)

    def rev(self):
        return rev(self)


__all__ = ["DifferencingMixin", "diff", "rev"]
