"""The public :class:`Signal` type."""

from __future__ import annotations

from ..analysis.statistics import StatisticsMixin
from .arithmetic import ArithmeticMixin
from .container import SignalBase
from .differencing import DifferencingMixin
from .padding import PaddingMixin
from .slicing import SlicingMixin


class Signal(
    ArithmeticMixin,
    SlicingMixin,
    PaddingMixin,
    DifferencingMixin,
    StatisticsMixin,
    SignalBase,
):
    """
    One-dimensional real-valued signal.

    Supports circular indexing (``s[-1]`` is the last sample), elementwise
    and scalar arithmetic (``s + t``, ``s * 2.0``, ``s /= t``), inclusive
    sub-range cuts, sliding windows, constant and periodic padding,
    differencing and descriptive statistics.

    Operations other than the in-place operators, ``map_inplace`` and item
    assignment return new signals that never share storage with their
    inputs. Scalars are only accepted on the right-hand side of an operator.

    Examples
    --------
    >>> a = Signal.from_list([1, 2, 3])
    >>> (a + Signal.from_list([4, 5, 6])).to_list()
    [5.0, 7.0, 9.0]
    >>> a.pad_wrap("both", 1).to_list()
    [3.0, 1.0, 2.0, 3.0, 1.0]
    >>> a[-1]
    3.0
    """

    __slots__ = ()


__all__ = ["Signal"]
