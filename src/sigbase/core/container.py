"""Storage, construction and indexed access for one-dimensional signals."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import ArrayLike

from ..config import SignalConfig, resolve_config
from .indexing import resolve_index
from .scalars import as_float, as_length

S = TypeVar("S", bound="SignalBase")


class SignalBase:
    """
    Fixed-length sequence of ``float64`` samples.

    Each instance owns its storage exclusively. Indexing accepts logical
    indices in ``[-len, len)`` where negative values count back from the end,
    so ``signal[-1]`` is the last sample.
    """

    __slots__ = ("_data",)

    def __init__(self, values: ArrayLike = ()) -> None:
        if isinstance(values, SignalBase):
            self._data = values._data.copy()
            return
        if isinstance(values, np.ndarray) and values.dtype.kind in "biuf":
            raw = values
        else:
            # Object arrays keep each item intact so as_float can vet it
            raw = np.asarray(values, dtype=object)
        if raw.ndim != 1:
            raise ValueError(f"signal must be 1-D, got shape {raw.shape}")
        if raw.dtype == object:
            self._data = np.fromiter(
                (as_float(v) for v in raw.tolist()), dtype=np.float64, count=raw.shape[0]
            )
        else:
            self._data = np.array(raw, dtype=np.float64)

    @classmethod
    def _from_array(cls: type[S], data: np.ndarray) -> S:
        """Wrap ``data`` without copying; the caller hands over ownership."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # ------------------------------------------------------------ constructors
    @classmethod
    def from_list(cls: type[S], values: Iterable[float]) -> S:
        """Build a signal from a list (or any sized sequence) of numbers."""
        return cls(list(values))

    @classmethod
    def from_iter(cls: type[S], values: Iterable[object]) -> S:
        """Consume ``values``, converting every item to float."""
        return cls._from_array(
            np.fromiter((as_float(v) for v in values), dtype=np.float64)
        )

    @classmethod
    def from_elem(cls: type[S], value: object, length: int) -> S:
        """Return ``length`` copies of ``value``."""
        return cls._from_array(np.full(as_length(length), as_float(value), dtype=np.float64))

    @classmethod
    def from_len_fn(cls: type[S], length: int, fn: Callable[[int], float]) -> S:
        """Return ``fn(i)`` for every ``i`` in ``range(length)``."""
        n = as_length(length)
        return cls._from_array(
            np.fromiter((as_float(fn(i)) for i in range(n)), dtype=np.float64, count=n)
        )

    @classmethod
    def zeros(cls: type[S], length: int) -> S:
        return cls._from_array(np.zeros(as_length(length), dtype=np.float64))

    @classmethod
    def ones(cls: type[S], length: int) -> S:
        return cls._from_array(np.ones(as_length(length), dtype=np.float64))

    @classmethod
    def linspace(cls: type[S], start: float, end: float, length: int) -> S:
        """Return ``length`` evenly spaced samples from ``start`` to ``end`` inclusive."""
        return cls._from_array(
            np.linspace(as_float(start), as_float(end), as_length(length), dtype=np.float64)
        )

    @classmethod
    def arange(cls: type[S], start: float, stop: float, step: float = 1.0) -> S:
        """Return ``start, start + step, ...`` up to but excluding ``stop``."""
        step_f = as_float(step)
        if step_f == 0.0:
            raise ValueError("step must be non-zero")
        return cls._from_array(
            np.arange(as_float(start), as_float(stop), step_f, dtype=np.float64)
        )

    # ---------------------------------------------------------------- access
    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __getitem__(self, index: int) -> float:
        return float(self._data[resolve_index(index, len(self))])

    def __setitem__(self, index: int, value: object) -> None:
        self._data[resolve_index(index, len(self))] = as_float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def as_array(self) -> np.ndarray:
        """Return a read-only view of the samples."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def as_mut_array(self) -> np.ndarray:
        """Return a writable view; writes go straight to this signal."""
        return self._data.view()

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def copy(self: S) -> S:
        return self._from_array(self._data.copy())

    def map(self: S, fn: Callable[[float], float]) -> S:
        """Return a new signal with ``fn`` applied to every sample."""
        return self._from_array(
            np.fromiter(
                (as_float(fn(v)) for v in self._data.tolist()),
                dtype=np.float64,
                count=len(self),
            )
        )

    def map_inplace(self, fn: Callable[[float], float]) -> None:
        """
        Replace every sample ``v`` with ``fn(v)``.

        All results are computed before any sample is written, so an
        exception from ``fn`` leaves the signal unchanged.
        """
        mapped = np.fromiter(
            (as_float(fn(v)) for v in self._data.tolist()),
            dtype=np.float64,
            count=len(self),
        )
        self._data[:] = mapped

    # ------------------------------------------------------------ comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignalBase):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: SignalBase, *, config: SignalConfig | None = None) -> bool:
        """Compare samples within the configured ``rtol``/``atol``."""
        cfg = resolve_config(config)
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._data, other._data, rtol=cfg.rtol, atol=cfg.atol))

    # --------------------------------------------------------------- display
    def format(self, config: SignalConfig | None = None) -> str:
        """
        Render as ``Signal[len = N, [v0, v1, ...]]``.

        Signals longer than ``config.display_threshold`` show only
        ``display_edge_items`` samples at each end.
        """
        cfg = resolve_config(config)
        n = len(self)
        if n > cfg.display_threshold:
            edge = cfg.display_edge_items
            head = ", ".join(repr(v) for v in self._data[:edge].tolist())
            tail = ", ".join(repr(v) for v in self._data[-edge:].tolist())
            body = f"[{head}, ..., {tail}]"
        else:
            body = repr(self._data.tolist())
        return f"{type(self).__name__}[len = {n}, {body}]"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"


__all__ = ["SignalBase"]
