"""
Elementwise and scalar-broadcast arithmetic between signals.

Every operator comes in two forms: a pure function returning a new signal
(``add``) and a mutating one that writes into the left operand
(``add_assign``). The right-hand operand is either another signal of the
same length or a scalar convertible to float; scalars are only ever
accepted on the right.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar, Union

import numpy as np

from ..errors import ShapeMismatchError
from .container import SignalBase
from .scalars import as_float

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SignalBase)
Operand = Union[SignalBase, float, int, np.number]
UFunc = Callable[..., np.ndarray]


def _operand_array(lhs: SignalBase, rhs: object) -> np.ndarray | float:
    """Return the raw right-hand operand, validating shape or scalar type."""
    if isinstance(rhs, SignalBase):
        if len(rhs) != len(lhs):
            raise ShapeMismatchError(len(lhs), len(rhs))
        return rhs._data
    return as_float(rhs)


def _note_non_finite(op: UFunc, data: np.ndarray) -> None:
    if logger.isEnabledFor(logging.DEBUG) and data.size and not np.all(np.isfinite(data)):
        logger.debug(
            "%s produced %d non-finite sample(s)",
            getattr(op, "__name__", op),
            int(np.count_nonzero(~np.isfinite(data))),
        )


def combine(lhs: S, rhs: object, op: UFunc) -> S:
    """Apply the numpy ufunc ``op`` and return the result as a new signal."""
    other = _operand_array(lhs, rhs)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        result = op(lhs._data, other)
    _note_non_finite(op, result)
    return lhs._from_array(np.asarray(result, dtype=np.float64))


def combine_inplace(lhs: S, rhs: object, op: UFunc) -> S:
    """Apply ``op`` writing into ``lhs``'s storage; returns ``lhs``."""
    other = _operand_array(lhs, rhs)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        op(lhs._data, other, out=lhs._data)
    _note_non_finite(op, lhs._data)
    return lhs


def add(lhs: S, rhs: Operand) -> S:
    return combine(lhs, rhs, np.add)


def subtract(lhs: S, rhs: Operand) -> S:
    return combine(lhs, rhs, np.subtract)


def multiply(lhs: S, rhs: Operand) -> S:
    return combine(lhs, rhs, np.multiply)


def divide(lhs: S, rhs: Operand) -> S:
    """Divide sample-wise; division by zero yields ``inf``/``nan``, never raises."""
    return combine(lhs, rhs, np.true_divide)


def add_assign(lhs: S, rhs: Operand) -> S:
    return combine_inplace(lhs, rhs, np.add)


def subtract_assign(lhs: S, rhs: Operand) -> S:
    return combine_inplace(lhs, rhs, np.subtract)


def multiply_assign(lhs: S, rhs: Operand) -> S:
    return combine_inplace(lhs, rhs, np.multiply)


def divide_assign(lhs: S, rhs: Operand) -> S:
    return combine_inplace(lhs, rhs, np.true_divide)


class ArithmeticMixin:
    """Operator overloads for :class:`SignalBase` subclasses."""

    __slots__ = ()

    # numpy operands defer to Python's operator protocol; without a reflected
    # method here, ``np.float64(2) * signal`` raises TypeError.
    __array_ufunc__ = None

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return subtract(self, other)

    def __mul__(self, other):
        return multiply(self, other)

    def __truediv__(self, other):
        return divide(self, other)

    def __iadd__(self, other):
        return add_assign(self, other)

    def __isub__(self, other):
        return subtract_assign(self, other)

    def __imul__(self, other):
        return multiply_assign(self, other)

    def __itruediv__(self, other):
        return divide_assign(self, other)

    def __neg__(self):
        return multiply(self, -1.0)


__all__ = [
    "ArithmeticMixin",
    "add",
    "add_assign",
    "combine",
    "combine_inplace",
    "divide",
    "divide_assign",
    "multiply",
    "multiply_assign",
    "subtract",
    "subtract_assign",
]
