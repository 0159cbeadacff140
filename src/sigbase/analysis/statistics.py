"""Descriptive statistics over signal samples."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from ..core.container import SignalBase
from ..errors import EmptyInputError, ShortInputError

SignalLike = Union[SignalBase, ArrayLike]


def _to_1d_array(signal: SignalLike) -> np.ndarray:
    """Return the samples of ``signal`` as a 1-D float64 numpy array."""
    if isinstance(signal, SignalBase):
        return signal.as_array()
    arr = np.asarray(signal, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"signal must be 1-D, got shape {arr.shape}")
    return arr


def _non_empty(signal: SignalLike, operation: str) -> np.ndarray:
    arr = _to_1d_array(signal)
    if arr.size == 0:
        raise EmptyInputError(operation)
    return arr


def total(signal: SignalLike) -> float:
    """Sum of all samples (0.0 for an empty signal)."""
    return float(np.sum(_to_1d_array(signal)))


def mean(signal: SignalLike) -> Optional[float]:
    """Arithmetic mean, or ``None`` when there are no samples."""
    arr = _to_1d_array(signal)
    if arr.size == 0:
        return None
    return float(np.mean(arr))


def minimum(signal: SignalLike) -> float:
    return float(np.min(_non_empty(signal, "min")))


def maximum(signal: SignalLike) -> float:
    return float(np.max(_non_empty(signal, "max")))


def argmin(signal: SignalLike) -> int:
    """Position of the first minimum (of the first NaN, if any)."""
    return int(np.argmin(_non_empty(signal, "argmin")))


def argmax(signal: SignalLike) -> int:
    """Position of the first maximum (of the first NaN, if any)."""
    return int(np.argmax(_non_empty(signal, "argmax")))


def value_range(signal: SignalLike) -> Tuple[float, float]:
    """Return ``(min, max)``."""
    arr = _non_empty(signal, "range")
    return float(np.min(arr)), float(np.max(arr))


def peak_to_peak(signal: SignalLike) -> float:
    """
    Compute peak-to-peak value (max - min) of a 1-D signal.

    Parameters
    ----------
    signal:
        Signal or 1-D array-like of samples.

    Returns
    -------
    float
        Peak-to-peak amplitude.
    """
    arr = _non_empty(signal, "p2p")
    return float(np.max(arr) - np.min(arr))


def var_pop(signal: SignalLike) -> float:
    """Population variance (divides by ``n``)."""
    return float(np.var(_non_empty(signal, "var_pop"), ddof=0))


def var_sample(signal: SignalLike) -> float:
    """Sample variance (divides by ``n - 1``); needs at least two samples."""
    arr = _to_1d_array(signal)
    if arr.size < 2:
        raise ShortInputError("var_sample", 2, int(arr.size))
    return float(np.var(arr, ddof=1))


def std_pop(signal: SignalLike) -> float:
    return float(np.std(_non_empty(signal, "std_pop"), ddof=0))


def std_sample(signal: SignalLike) -> float:
    arr = _to_1d_array(signal)
    if arr.size < 2:
        raise ShortInputError("std_sample", 2, int(arr.size))
    return float(np.std(arr, ddof=1))


def energy(signal: SignalLike) -> float:
    """Sum of squared samples."""
    return float(np.sum(np.square(_to_1d_array(signal))))


def avg_power(signal: SignalLike) -> float:
    """
    Energy divided by the number of samples.

    An empty signal has no defined average power; the result is NaN (the
    IEEE value of ``0 / 0``) rather than an exception.
    """
    arr = _to_1d_array(signal)
    if arr.size == 0:
        return float("nan")
    return float(np.sum(np.square(arr)) / arr.size)


def rms(signal: SignalLike) -> float:
    """
    Compute root-mean-square (RMS) value of a 1-D signal.

    Parameters
    ----------
    signal:
        Signal or 1-D array-like of samples.

    Returns
    -------
    float
        RMS value of the signal; NaN when the signal is empty.
    """
    return float(np.sqrt(avg_power(signal)))


@dataclass(frozen=True)
class SignalSummary:
    """Descriptive statistics of a non-empty signal."""

    length: int
    total: float
    mean: float
    min: float
    argmin: int
    max: float
    argmax: int
    peak_to_peak: float
    var_pop: float
    std_pop: float
    energy: float
    avg_power: float
    rms: float

    def to_mapping(self) -> dict:
        return asdict(self)


def describe(signal: SignalLike) -> SignalSummary:
    """Collect the common statistics of ``signal`` in one pass over the API."""
    arr = _non_empty(signal, "describe")
    lo, hi = value_range(arr)
    return SignalSummary(
        length=int(arr.size),
        total=total(arr),
        mean=float(np.mean(arr)),
        min=lo,
        argmin=argmin(arr),
        max=hi,
        argmax=argmax(arr),
        peak_to_peak=hi - lo,
        var_pop=var_pop(arr),
        std_pop=std_pop(arr),
        energy=energy(arr),
        avg_power=avg_power(arr),
        rms=rms(arr),
    )


class StatisticsMixin:
    """Statistics methods for :class:`SignalBase` subclasses."""

    __slots__ = ()

    def sum(self) -> float:
        return total(self)

    def mean(self) -> Optional[float]:
        return mean(self)

    def min(self) -> float:
        return minimum(self)

    def max(self) -> float:
        return maximum(self)

    def argmin(self) -> int:
        return argmin(self)

    def argmax(self) -> int:
        return argmax(self)

    def range(self) -> Tuple[float, float]:
        return value_range(self)

    def p2p(self) -> float:
        return peak_to_peak(self)

    def var_pop(self) -> float:
        return var_pop(self)

    def var_sample(self) -> float:
        return var_sample(self)

    def std_pop(self) -> float:
        return std_pop(self)

    def std_sample(self) -> float:
        return std_sample(self)

    def energy(self) -> float:
        return energy(self)

    def avg_power(self) -> float:
        return avg_power(self)

    def rms(self) -> float:
        return rms(self)

    def describe(self) -> SignalSummary:
        return describe(self)


__all__ = [
    "SignalSummary",
    "StatisticsMixin",
    "argmax",
    "argmin",
    "avg_power",
    "describe",
    "energy",
    "maximum",
    "mean",
    "minimum",
    "peak_to_peak",
    "rms",
    "std_pop",
    "std_sample",
    "total",
    "value_range",
    "var_pop",
    "var_sample",
]
