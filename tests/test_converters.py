from __future__ import annotations

import pytest

from asynchronize import CONVERTERS, Converter, convert, is_future
from asynchronize.classify import (
    is_record,
    is_sequence,
    is_stepwise_factory,
    is_stepwise_handle,
    is_thunk,
)
from tests.conftest import double, succeed_with


def test_registry_order() -> None:
    assert [c.check for c in CONVERTERS] == [
        is_stepwise_factory,
        is_stepwise_handle,
        is_thunk,
        is_sequence,
        is_record,
    ]


def test_registry_is_immutable() -> None:
    assert isinstance(CONVERTERS, tuple)
    with pytest.raises(AttributeError):
        CONVERTERS[0].check = is_thunk  # type: ignore[misc]


def test_convert_unmatched_returns_value() -> None:
    marker = object()
    assert convert(marker) is marker
    assert convert(1) == 1
    assert convert("text") == "text"


@pytest.mark.asyncio
async def test_convert_first_match_wins() -> None:
    # A generator function is callable too; it must be driven, not called with a callback.
    result = convert(double, None)
    assert is_future(result)
    with pytest.raises(TypeError):
        # double() needs an argument, so driving it without args fails
        await result


@pytest.mark.asyncio
async def test_convert_thunk() -> None:
    result = convert(succeed_with("done"))
    assert is_future(result)
    assert await result == "done"


def test_converter_entry() -> None:
    entry = Converter(is_thunk, lambda value, receiver: value)
    assert entry.check is is_thunk
    assert entry.convert(1, None) == 1
