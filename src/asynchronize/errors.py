"""Package-specific exceptions. Minimal set: errors raised by user code pass through unmodified."""

from __future__ import annotations

from typing import Any


class AsynchronizeError(Exception):
    """Base exception for all asynchronize errors."""

    pass


class InvalidYieldError(AsynchronizeError, TypeError):
    """Thrown into a computation that yielded something that cannot be awaited.

    Attributes:
        value: The offending yielded value.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Cannot yield a value of type {type(value).__name__!r}. "
            "Yield an awaitable, a generator, a thunk, or a list/dict of those."
        )


class ThunkError(AsynchronizeError):
    """Raised when a thunk reports an error a future cannot carry.

    That is any value that is not an exception, and StopIteration.

    Attributes:
        error: The value the thunk passed as its error argument.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"Thunk reported an error: {error!r}")
