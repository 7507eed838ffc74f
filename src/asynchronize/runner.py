"""Runner: drives a stepwise computation to completion.

A computation is anything with ``advance(value)`` and ``fail(error)``; plain
generators are adapted over ``send()`` and ``throw()``. Each time the
computation suspends, the yielded value is promisified and awaited, and the
outcome is fed back in: results through ``advance``, errors through ``fail``
so the computation gets a chance to handle them with an ordinary
``try``/``except``. Only an error that escapes the computation fails the run.

The runner never advances a computation twice concurrently; the next
``advance``/``fail`` happens only after the yielded value has settled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from asynchronize._binding import bind_receiver
from asynchronize._types import Yieldable
from asynchronize.classify import classify, is_future, is_stepwise_handle
from asynchronize.context import Context
from asynchronize.errors import InvalidYieldError
from asynchronize.promisifier import promisify
from asynchronize.tracer import NullTracer, Tracer


@dataclass(frozen=True)
class Finished:
    """The computation returned ``result``."""

    result: Any


@dataclass(frozen=True)
class Suspended:
    """The computation yielded ``produced`` and waits to be resumed."""

    produced: Yieldable


Step = Finished | Suspended


@runtime_checkable
class StepwiseComputation(Protocol):
    """A computation the runner can step through."""

    def advance(self, value: Any) -> Step: ...
    def fail(self, error: BaseException) -> Step: ...


class GeneratorComputation:
    """Adapts a generator to StepwiseComputation."""

    def __init__(self, generator: Generator[Any, Any, Any]) -> None:
        self.generator = generator

    def advance(self, value: Any) -> Step:
        try:
            produced = self.generator.send(value)
        except StopIteration as stop:
            return Finished(stop.value)
        return Suspended(produced)

    def fail(self, error: BaseException) -> Step:
        try:
            produced = self.generator.throw(error)
        except StopIteration as stop:
            return Finished(stop.value)
        return Suspended(produced)

    def __repr__(self) -> str:
        return f"GeneratorComputation({self.generator!r})"


def as_computation(value: Any) -> StepwiseComputation | None:
    """Return ``value`` as a StepwiseComputation, or None if it is not one."""
    if isinstance(value, Generator):
        return GeneratorComputation(value)
    if is_stepwise_handle(value):
        return value
    return None


class Runner:
    """Drives computations and reports their suspensions to a tracer.

    Usage:
        def fetch_all(urls):
            pages = yield [fetch(url) for url in urls]
            return len(pages)

        runner = Runner("fetch").use(StdoutTracer())  # tracer is opt-in
        count = await runner.run(fetch_all, urls)
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._tracer: Tracer = NullTracer()
        self._last_context: Context | None = None

    @property
    def last_context(self) -> Context | None:
        """Most recent execution context, if any."""

        return self._last_context

    def use(self, tracer: Tracer) -> Runner:
        """Attach a tracer. Returns self for chaining."""

        self._tracer = tracer
        return self

    def run(
        self,
        computation: Any,
        *args: Any,
        receiver: Any = None,
        **kwargs: Any,
    ) -> asyncio.Task[Any]:
        """Start driving ``computation`` and return a task for its final result.

        Args:
            computation: A generator function (or any callable), a started
                generator, an object with advance()/fail(), or a plain value.
            *args: Positional arguments for a callable ``computation``.
                Ignored otherwise.
            receiver: Object a callable ``computation`` is bound to, as if
                called as its method. Values the computation yields are
                converted unbound.
            **kwargs: Keyword arguments for a callable ``computation``.

        Returns:
            A task resolving with the computation's return value. A
            ``computation`` that is not a computation resolves the task
            directly (awaitables are awaited first).

        Raises:
            RuntimeError: If called without a running event loop.
        """

        loop = asyncio.get_running_loop()
        return loop.create_task(self._drive(computation, args, kwargs, receiver))

    async def _drive(
        self,
        computation: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        receiver: Any,
    ) -> Any:
        ctx = Context(runner_name=self.name)
        self._last_context = ctx

        await self._tracer.on_run_start(ctx)
        try:
            if callable(computation) and not is_stepwise_handle(computation):
                computation = bind_receiver(computation, receiver)(*args, **kwargs)

            handle = as_computation(computation)
            if handle is None:
                if is_future(computation):
                    return await computation
                return computation

            return await self._step_through(ctx, handle)
        finally:
            await self._tracer.on_run_end(ctx)

    async def _step_through(self, ctx: Context, handle: StepwiseComputation) -> Any:
        # Errors raised by advance()/fail() themselves are not offered back; they end the run.
        # Yielded values are converted unbound: a generator already closes over its receiver.
        step = handle.advance(None)

        while isinstance(step, Suspended):
            kind = classify(step.produced).value
            suspension = ctx.suspend(kind)
            await self._tracer.on_suspend(ctx, kind, step.produced)

            converted = promisify(step.produced)
            if not is_future(converted):
                invalid = InvalidYieldError(step.produced)
                suspension.failed(invalid)
                await self._tracer.on_error(ctx, kind, invalid)
                step = handle.fail(invalid)
                continue

            try:
                result = await converted
            except Exception as e:
                suspension.failed(e)
                await self._tracer.on_error(ctx, kind, e)
                step = handle.fail(e)
            else:
                suspension.resumed()
                await self._tracer.on_resume(ctx, kind, result)
                step = handle.advance(result)

        return step.result


def run(computation: Any, *args: Any, receiver: Any = None, **kwargs: Any) -> asyncio.Task[Any]:
    """Drive ``computation`` with an untraced Runner. See Runner.run()."""
    return Runner().run(computation, *args, receiver=receiver, **kwargs)
