"""
Constant and periodic padding.

Periodic ("wrap") padding treats the signal as one period of an infinitely
repeating sequence. For a signal ``x`` of length ``n``, a right pad of width
``w`` holds ``x[n % n], x[(n + 1) % n], ..., x[(n + w - 1) % n]`` and a left
pad holds ``x[-w % n], ..., x[-1 % n]`` in forward order. Widths that are not
a multiple of ``n`` produce a partial tile on the outer edge::

    x = [1, 2, 3], w = 4
    left  -> [3, 1, 2, 3] + x
    right -> x + [1, 2, 3, 1]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar

import numpy as np

from ..config import SignalConfig, resolve_config
from ..errors import EmptyInputError, PadOverflowError
from .container import SignalBase
from .scalars import as_float, as_length

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SignalBase)


class PadSide(Enum):
    """Which end(s) of the signal to extend."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @classmethod
    def coerce(cls, value: PadSide | str) -> PadSide:
        """Accept a :class:`PadSide` or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for side in cls:
            if side.value == key:
                return side
        raise ValueError(f"unknown pad side {value!r}; expected one of left, right, both")

    @property
    def edges(self) -> int:
        return 2 if self is PadSide.BOTH else 1


def _checked_width(
    signal: SignalBase, side: PadSide, pad_width: int, config: SignalConfig | None
) -> int:
    """Validate ``pad_width`` and the resulting length against ``max_length``."""
    width = as_length(pad_width, "pad_width")
    cfg = resolve_config(config)
    result_length = len(signal) + side.edges * width
    if result_length > cfg.max_length:
        raise PadOverflowError(result_length, cfg.max_length)
    return width


def _assemble(signal: S, side: PadSide, left: np.ndarray, right: np.ndarray) -> S:
    parts = []
    if side is not PadSide.RIGHT:
        parts.append(left)
    parts.append(signal._data)
    if side is not PadSide.LEFT:
        parts.append(right)
    padded = np.concatenate(parts)
    logger.debug(
        "padded %s: %d -> %d samples", side.value, len(signal), padded.shape[0]
    )
    return signal._from_array(padded)


def pad_cons(
    signal: S,
    side: PadSide | str,
    constant: object,
    pad_width: int,
    *,
    config: SignalConfig | None = None,
) -> S:
    """
    Extend ``signal`` with ``pad_width`` copies of ``constant``.

    ``PadSide.BOTH`` adds ``pad_width`` samples on each side.

    Raises
    ------
    ScalarConversionError
        If ``constant`` cannot be represented as a float.
    PadOverflowError
        If the padded length would exceed ``config.max_length``.
    """
    pad_side = PadSide.coerce(side)
    value = as_float(constant)
    width = _checked_width(signal, pad_side, pad_width, config)
    block = np.full(width, value, dtype=np.float64)
    return _assemble(signal, pad_side, block, block)


def wrap_block(data: np.ndarray, width: int, side: PadSide) -> np.ndarray:
    """
    Return the ``width`` samples that continue ``data`` periodically.

    ``side`` must be LEFT or RIGHT. The full tiles sit next to the original
    data and the partial tile (if any) on the outer edge, so reading the
    result contiguously never duplicates or skips a sample at a seam.
    """
    n = data.shape[0]
    tiles, remainder = divmod(width, n)
    repeated = np.tile(data, tiles)
    if side is PadSide.RIGHT:
        return np.concatenate([repeated, data[:remainder]])
    if side is PadSide.LEFT:
        return np.concatenate([data[n - remainder :], repeated])
    raise ValueError("wrap_block needs a single side, got BOTH")


def pad_wrap(
    signal: S,
    side: PadSide | str,
    pad_width: int,
    *,
    config: SignalConfig | None = None,
) -> S:
    """
    Extend ``signal`` by continuing it periodically.

    Raises
    ------
    EmptyInputError
        If ``signal`` is empty; there is nothing to repeat.
    PadOverflowError
        If the padded length would exceed ``config.max_length``.
    """
    pad_side = PadSide.coerce(side)
    width = _checked_width(signal, pad_side, pad_width, config)
    if len(signal) == 0:
        raise EmptyInputError("pad_wrap")
    empty = np.empty(0, dtype=np.float64)
    left = empty if pad_side is PadSide.RIGHT else wrap_block(signal._data, width, PadSide.LEFT)
    right = empty if pad_side is PadSide.LEFT else wrap_block(signal._data, width, PadSide.RIGHT)
    return _assemble(signal, pad_side, left, right)


class PaddingMixin:
    """Padding methods for :class:`SignalBase` subclasses."""

    __slots__ = ()

    def pad_cons(self, side, constant, pad_width, *, config=None):
        return pad_cons(self, side, constant, pad_width, config=config)

    def pad_wrap(self, side, pad_width, *, config=None):
        return pad_wrap(self, side, pad_width, config=config)


__all__ = ["PadSide", "PaddingMixin", "pad_cons", "pad_wrap", "wrap_block"]
