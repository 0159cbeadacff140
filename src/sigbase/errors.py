"""Exception types raised by signal operations.

Every exception derives from :class:`SignalError` and from the builtin that
best describes it, so callers can catch either the library-specific type or
the usual ``IndexError`` / ``ValueError`` / ``TypeError`` family.
"""

from __future__ import annotations


class SignalError(Exception):
    """Base class for all errors raised by :mod:`sigbase`."""


class SignalIndexError(SignalError, IndexError):
    """A logical index fell outside ``[-len, len)``.

    Bad indices are caller bugs; the library raises this and never recovers
    from it internally.
    """

    def __init__(self, index: int, length: int, message: str | None = None) -> None:
        self.index = index
        self.length = length
        if message is None:
            message = f"index {index} out of bounds for signal of length {length}"
        super().__init__(message)


class ShortInputError(SignalError, ValueError):
    """The signal has fewer samples than the operation needs."""

    def __init__(self, operation: str, required: int, actual: int) -> None:
        self.operation = operation
        self.required = required
        self.actual = actual
        super().__init__(
            f"'{operation}' requires a signal length of at least {required}, got {actual}"
        )


class EmptyInputError(SignalError, ValueError):
    """The operation is undefined on an empty signal."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"'{operation}' is undefined for an empty signal")


class PadOverflowError(SignalError, OverflowError):
    """Padding would produce a signal longer than the configured maximum."""

    def __init__(self, result_length: int, max_length: int) -> None:
        self.result_length = result_length
        self.max_length = max_length
        super().__init__(
            f"padded length {result_length} exceeds the maximum of {max_length}"
        )


class ShapeMismatchError(SignalError, ValueError):
    """Elementwise arithmetic between signals of different lengths."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"signal lengths differ: {left} != {right}")


class ScalarConversionError(SignalError, TypeError):
    """A value could not be represented as a double-precision float."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"cannot convert {type(value).__name__} {value!r} to float")


__all__ = [
    "SignalError",
    "SignalIndexError",
    "ShortInputError",
    "EmptyInputError",
    "PadOverflowError",
    "ShapeMismatchError",
    "ScalarConversionError",
]
