"""Shared computations and thunks for asynchronize tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from asynchronize import Finished, Suspended


async def resolved(value: Any) -> Any:
    await asyncio.sleep(0)
    return value


async def rejected(error: Exception) -> Any:
    await asyncio.sleep(0)
    raise error


def succeed_with(*results: Any) -> Callable[[Callable[..., None]], None]:
    """A thunk that calls back with ``(None, *results)``."""

    def thunk(callback: Callable[..., None]) -> None:
        callback(None, *results)

    return thunk


def fail_with(error: Any) -> Callable[[Callable[..., None]], None]:
    def thunk(callback: Callable[..., None]) -> None:
        callback(error)

    return thunk


def never_settles(callback: Callable[..., None]) -> None:
    pass


def add(x: int, y: int):  # type: ignore[no-untyped-def]
    a = yield resolved(x)
    b = yield succeed_with(y)
    return a + b


def double(x: int):  # type: ignore[no-untyped-def]
    value = yield resolved(x * 2)
    return value


def yield_number():  # type: ignore[no-untyped-def]
    yield 1
    return "unreachable"


def always_fail():  # type: ignore[no-untyped-def]
    yield resolved(None)
    raise ValueError("intentional failure")


class Countdown:
    """Hand-written computation: yields ``n`` resolved futures, then returns ``n``."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.remaining = n
        self.received: list[Any] = []
        self.errors: list[BaseException] = []

    def advance(self, value: Any) -> Finished | Suspended:
        if value is not None:
            self.received.append(value)
        if self.remaining == 0:
            return Finished(self.n)
        self.remaining -= 1
        return Suspended(resolved(self.remaining))

    def fail(self, error: BaseException) -> Finished | Suspended:
        self.errors.append(error)
        return Finished(-1)


class MockTracer:
    def __init__(self) -> None:
        self.started = False
        self.ended = False
        self.events: list[tuple[str, str]] = []
        self.errors: list[BaseException] = []

    async def on_run_start(self, ctx) -> None:  # type: ignore[no-untyped-def]
        self.started = True

    async def on_run_end(self, ctx) -> None:  # type: ignore[no-untyped-def]
        self.ended = True

    async def on_suspend(self, ctx, kind, value):  # type: ignore[no-untyped-def]
        self.events.append(("suspend", kind))

    async def on_resume(self, ctx, kind, result):  # type: ignore[no-untyped-def]
        self.events.append(("resume", kind))

    async def on_error(self, ctx, kind, error):  # type: ignore[no-untyped-def]
        self.events.append(("error", kind))
        self.errors.append(error)


@pytest.fixture
def tracer() -> MockTracer:
    return MockTracer()
