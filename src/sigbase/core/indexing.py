"""Logical-to-physical index resolution shared by every signal layer."""

from __future__ import annotations

import operator

from ..errors import SignalIndexError


def as_index(index: object) -> int:
    """Return ``index`` as a plain ``int`` (``TypeError`` for non-integers)."""
    try:
        return operator.index(index)
    except TypeError:
        raise TypeError(
            f"signal indices must be integers, not {type(index).__name__}"
        ) from None


def is_index_valid(index: int, length: int) -> bool:
    """Return ``True`` when ``-length <= index < length``."""
    return -length <= index < length


def resolve_index(index: object, length: int) -> int:
    """
    Map a logical index onto a physical position.

    Non-negative indices are returned unchanged and negative ones count back
    from the end, so ``-1`` is the last sample.

    Raises
    ------
    SignalIndexError
        If ``index`` is outside ``[-length, length)``.
    """
    idx = as_index(index)
    if not is_index_valid(idx, length):
        raise SignalIndexError(idx, length)
    return idx + length if idx < 0 else idx


__all__ = ["as_index", "is_index_valid", "resolve_index"]
