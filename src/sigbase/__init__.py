"""sigbase: fixed-length real-valued signals backed by numpy.

The :class:`Signal` container supports circular indexing, elementwise and
scalar arithmetic, inclusive cuts, sliding windows, constant and periodic
padding, differencing and descriptive statistics.
"""

from .config import DEFAULT_CONFIG, SignalConfig, config_from_mapping, load_config
from .core import PadSide, Signal, SignalBase, SignalWindows
from .analysis import SignalSummary
from .errors import (
    EmptyInputError,
    PadOverflowError,
    ScalarConversionError,
    ShapeMismatchError,
    ShortInputError,
    SignalError,
    SignalIndexError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "EmptyInputError",
    "PadOverflowError",
    "PadSide",
    "ScalarConversionError",
    "ShapeMismatchError",
    "ShortInputError",
    "Signal",
    "SignalBase",
    "SignalConfig",
    "SignalError",
    "SignalIndexError",
    "SignalSummary",
    "SignalWindows",
    "config_from_mapping",
    "load_config",
]
