"""Converter registry: ordered (check, convert) pairs consulted by promisify().

The registry is built once at import time and never mutated. Entries are
tried in order and the first matching check wins; generator functions and
generators come first because they also look like plain callables and
iterables.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple

# Circular by nature: nested computations are driven by the runner, and
# containers recurse through promisify(). Both modules are looked up at call time.
from asynchronize import promisifier as _promisifier
from asynchronize import runner as _runner
from asynchronize.classify import (
    is_record,
    is_sequence,
    is_stepwise_factory,
    is_stepwise_handle,
    is_thunk,
)


class Converter(NamedTuple):
    """One registry entry. ``convert`` receives the value and the receiver."""

    check: Callable[[Any], bool]
    convert: Callable[[Any, Any], Any]


def _drive(value: Any, receiver: Any) -> Any:
    return _runner.run(value, receiver=receiver)


def _thunk(value: Any, receiver: Any) -> Any:
    return _promisifier.promisify_thunk(value, receiver=receiver)


def _sequence(value: Any, receiver: Any) -> Any:
    return _promisifier.promisify_sequence(value, receiver=receiver)


def _record(value: Any, receiver: Any) -> Any:
    return _promisifier.promisify_record(value, receiver=receiver)


CONVERTERS: tuple[Converter, ...] = (
    Converter(is_stepwise_factory, _drive),
    Converter(is_stepwise_handle, _drive),
    Converter(is_thunk, _thunk),
    Converter(is_sequence, _sequence),
    Converter(is_record, _record),
)


def convert(value: Any, receiver: Any = None) -> Any:
    """Convert ``value`` with the first matching converter.

    Returns ``value`` unchanged when no converter matches; the runner treats
    that as an invalid yield.
    """
    for converter in CONVERTERS:
        if converter.check(value):
            return converter.convert(value, receiver)
    return value
