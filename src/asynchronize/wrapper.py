"""The @asynchronize decorator: turns a generator function into a task-returning callable.

The decorated function can still be called the same way; instead of a
generator it now returns an asyncio.Task for the generator's return value.
Used on a method, the instance becomes the receiver: ``obj.method(x)``
behaves like ``run(method, x, receiver=obj)``.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from typing import Any, overload

from asynchronize.classify import is_stepwise_factory
from asynchronize.runner import Runner


class Asynchronized:
    """A generator function wrapped to be driven by a Runner on every call.

    Attributes:
        factory: The original generator function.
        runner: Runner driving each call. None means a fresh untraced Runner per call.
        receiver: Object the factory is bound to, set when accessed through an instance.
    """

    _stepwise_factory = True

    def __init__(
        self,
        factory: Callable[..., Any],
        *,
        runner: Runner | None = None,
        receiver: Any = None,
    ) -> None:
        if not is_stepwise_factory(factory):
            raise TypeError(
                f"@asynchronize requires a generator function, got {type(factory).__name__}. "
                f"Hint: use 'yield' inside '{getattr(factory, '__name__', factory)}'."
            )
        self.factory = factory
        self.runner = runner
        self.receiver = receiver
        functools.update_wrapper(self, factory)

    def __call__(self, *args: Any, **kwargs: Any) -> asyncio.Task[Any]:
        runner = self.runner or Runner()
        return runner.run(self.factory, *args, receiver=self.receiver, **kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Asynchronized:
        if instance is None:
            return self
        return Asynchronized(self.factory, runner=self.runner, receiver=instance)

    def __repr__(self) -> str:
        return f"Asynchronized({getattr(self.factory, '__qualname__', self.factory)!r})"


def wrap(factory: Callable[..., Any], *, runner: Runner | None = None) -> Asynchronized:
    """Adapt ``factory`` into a callable returning a task for its result.

    ``wrap(factory)(*args)`` is equivalent to ``run(factory, *args)``.
    """
    return Asynchronized(factory, runner=runner)


# --- Decorator ---


@overload
def asynchronize(factory: Callable[..., Any]) -> Asynchronized: ...


@overload
def asynchronize(*, runner: Runner | None = None) -> Callable[[Callable[..., Any]], Asynchronized]: ...


def asynchronize(
    factory: Callable[..., Any] | None = None,
    *,
    runner: Runner | None = None,
) -> Asynchronized | Callable[[Callable[..., Any]], Asynchronized]:
    """Decorator form of wrap().

    Can be used with or without arguments:

        @asynchronize
        def load(path):
            data = yield read_file(path)
            return parse(data)

        @asynchronize(runner=Runner("loader").use(StdoutTracer()))
        def load(path): ...

        config = await load("app.toml")
    """
    if factory is not None:
        return wrap(factory, runner=runner)

    def decorator(f: Callable[..., Any]) -> Asynchronized:
        return wrap(f, runner=runner)

    return decorator
