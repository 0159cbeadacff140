"""Core signal container and the layers that operate on it.

:class:`SignalBase` owns the sample storage and constructors; indexing,
arithmetic, slicing, padding and differencing live in their own modules as
plain functions plus thin mixins that :class:`Signal` combines.
"""

from .container import SignalBase
from .indexing import is_index_valid, resolve_index
from .padding import PadSide
from .signal import Signal
from .slicing import SignalWindows

__all__ = [
    "PadSide",
    "Signal",
    "SignalBase",
    "SignalWindows",
    "is_index_valid",
    "resolve_index",
]
