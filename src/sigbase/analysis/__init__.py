"""Signal analysis utilities.

:mod:`statistics` holds read-only aggregate measures (sums, extrema,
variance, energy and power). The functions accept a :class:`~sigbase.Signal`
or any 1-D array-like, so they can be reused on plain numpy data as well.
"""

from .statistics import SignalSummary, describe

__all__ = ["SignalSummary", "describe"]
