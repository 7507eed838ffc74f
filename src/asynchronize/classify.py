"""Runtime classification of yielded values.

Every value a computation yields falls into exactly one YieldKind. The
categories overlap in shape (a generator function is also callable, a
generator is also iterable), so classify() walks a fixed table and the
first matching predicate wins.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator, Mapping, Sequence
from enum import Enum
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


class YieldKind(Enum):
    """The shape of a yielded value, as seen by the runner."""

    FUTURE = "future"
    FACTORY = "factory"
    HANDLE = "handle"
    THUNK = "thunk"
    SEQUENCE = "sequence"
    RECORD = "record"
    OTHER = "other"


def is_future(value: Any) -> bool:
    """True for anything that can be awaited (futures, tasks, coroutines)."""
    return inspect.isawaitable(value)


def is_stepwise_factory(value: Any) -> bool:
    """True for generator functions, including bound methods and partials of them.

    Callables whose type sets ``_stepwise_factory`` (@asynchronize wrappers)
    count too: called with no arguments they start a run of their own.
    """
    return inspect.isgeneratorfunction(value) or getattr(type(value), "_stepwise_factory", False) is True


def is_stepwise_handle(value: Any) -> bool:
    """True for started computations: generators, or objects exposing advance() and fail()."""
    if isinstance(value, Generator):
        return True
    return callable(getattr(value, "advance", None)) and callable(getattr(value, "fail", None))


def is_thunk(value: Any) -> bool:
    """True for plain callables expecting a single ``callback(error, *results)``.

    Generator functions, ``async def`` functions and classes are callable too,
    but calling them with a callback makes no sense, so they are excluded.
    """
    if not callable(value) or isinstance(value, type):
        return False
    return not (is_stepwise_factory(value) or inspect.iscoroutinefunction(value))


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping) and not is_stepwise_handle(value)


# Order matters: the first matching entry decides the kind.
CLASSIFICATION_ORDER: tuple[tuple[YieldKind, Callable[[Any], bool]], ...] = (
    (YieldKind.FUTURE, is_future),
    (YieldKind.FACTORY, is_stepwise_factory),
    (YieldKind.HANDLE, is_stepwise_handle),
    (YieldKind.THUNK, is_thunk),
    (YieldKind.SEQUENCE, is_sequence),
    (YieldKind.RECORD, is_record),
)


def classify(value: Any) -> YieldKind:
    """Return the kind of ``value``; YieldKind.OTHER when nothing matches."""
    for kind, check in CLASSIFICATION_ORDER:
        if check(value):
            return kind
    return YieldKind.OTHER
