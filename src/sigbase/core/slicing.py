"""Sub-range extraction and sliding windows."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from ..errors import SignalIndexError
from .container import SignalBase
from .indexing import resolve_index
from .scalars import as_length

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SignalBase)


def cut_from(signal: S, from_: int) -> S:
    """Return samples from logical index ``from_`` through the end."""
    start = resolve_index(from_, len(signal))
    return signal._from_array(signal._data[start:].copy())


def cut_to(signal: S, to: int) -> S:
    """Return samples from the start through logical index ``to`` (inclusive)."""
    stop = resolve_index(to, len(signal))
    return signal._from_array(signal._data[: stop + 1].copy())


def cut_from_to(signal: S, from_: int, to: int) -> S:
    """
    Return the closed range ``[from_, to]``.

    Both bounds are logical indices and are resolved before comparison, so
    ``cut_from_to(1, -1)`` drops only the first sample.

    Raises
    ------
    SignalIndexError
        If either bound is out of range, or ``from_`` resolves past ``to``.
    """
    n = len(signal)
    start = resolve_index(from_, n)
    stop = resolve_index(to, n)
    if start > stop:
        raise SignalIndexError(
            from_,
            n,
            f"invalid range: from index {from_} (position {start}) is after "
            f"to index {to} (position {stop})",
        )
    return signal._from_array(signal._data[start : stop + 1].copy())


class SignalWindows(Generic[S]):
    """
    Lazy, restartable sequence of overlapping windows over a signal.

    Each iteration starts from the first window again; every window is an
    independent copy of ``size`` consecutive samples advanced by one sample.
    The windows are taken from a snapshot of the source made at creation.
    """

    __slots__ = ("_source", "_size")

    def __init__(self, signal: S, size: int) -> None:
        window_size = as_length(size, "window size")
        if window_size == 0:
            raise ValueError("window size must be > 0")
        self._source = signal.copy()
        self._size = window_size

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return max(0, len(self._source) - self._size + 1)

    def __iter__(self) -> Iterator[S]:
        data = self._source._data
        count = len(self)
        logger.debug("yielding %d window(s) of size %d", count, self._size)
        for start in range(count):
            yield self._source._from_array(data[start : start + self._size].copy())

    def __repr__(self) -> str:
        return f"SignalWindows(size={self._size}, count={len(self)})"


def windows(signal: S, size: int) -> SignalWindows[S]:
    """Return ``len(signal) - size + 1`` windows (none when ``size`` exceeds the length)."""
    return SignalWindows(signal, size)


class SlicingMixin:
    """Slicing methods for :class:`SignalBase` subclasses."""

    __slots__ = ()

    def cut_from(self, from_: int):
        return cut_from(self, from_)

    def cut_to(self, to: int):
        return cut_to(self, to)

    def cut_from_to(self, from_: int, to: int):
        return cut_from_to(self, from_, to)

    def windows(self, size: int):
        return windows(self, size)


__all__ = [
    "SignalWindows",
    "SlicingMixin",
    "cut_from",
    "cut_from_to",
    "cut_to",
    "windows",
]
