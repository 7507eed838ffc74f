"""Conditional conversion of yielded values into awaitables.

promisify() is what the runner applies to every yielded value. Awaitables
come back as-is, containers are converted element by element and joined,
thunks are called with a completion callback, and nested computations are
driven to completion. Anything else comes back unchanged.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from asynchronize import converters
from asynchronize._binding import bind_receiver
from asynchronize.classify import is_future
from asynchronize.errors import ThunkError


def promisify(value: Any, receiver: Any = None) -> Any:
    """Convert ``value`` into an awaitable if it has a convertible shape.

    Args:
        value: Anything a computation may yield.
        receiver: Object that thunks and generator functions are bound to
            before being called. None means call them unbound.

    Returns:
        An awaitable, or ``value`` itself when it is None, already awaitable,
        or of an unrecognized shape.
    """
    if value is None or is_future(value):
        return value
    return converters.convert(value, receiver)


def promisify_thunk(thunk: Any, receiver: Any = None) -> asyncio.Future[Any]:
    """Call ``thunk(callback)`` and return a future settled by the callback.

    The callback follows ``callback(error, *results)``: a non-None error
    rejects, one result resolves with that result, several resolve with a
    list of them. Only the first call counts. The callback is safe to call
    from another thread.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()
    called = False

    def settle(error: Any, results: tuple[Any, ...]) -> None:
        if future.done():
            return
        if error is not None:
            # Futures refuse StopIteration, and only accept exceptions at all.
            if not isinstance(error, BaseException) or isinstance(error, StopIteration):
                error = ThunkError(error)
            future.set_exception(error)
        elif len(results) > 1:
            future.set_result(list(results))
        else:
            future.set_result(results[0] if results else None)

    def callback(error: Any = None, *results: Any) -> None:
        nonlocal called
        if called:
            return
        called = True
        loop.call_soon_threadsafe(settle, error, results)

    try:
        bind_receiver(thunk, receiver)(callback)
    except Exception as exc:
        callback(exc)
    return future


def promisify_sequence(items: Sequence[Any], receiver: Any = None) -> asyncio.Future[list[Any]]:
    """Promisify every element and join them, failing fast on the first error.

    Elements that do not convert are copied into the result unchanged.
    """
    results: list[Any] = []
    pending: dict[int, Awaitable[Any]] = {}
    for index, item in enumerate(items):
        converted = promisify(item, receiver)
        if is_future(converted):
            results.append(None)
            pending[index] = converted
        else:
            results.append(item)
    return asyncio.get_running_loop().create_task(_settle_all(results, pending))


def promisify_record(record: Mapping[Any, Any], receiver: Any = None) -> asyncio.Future[dict[Any, Any]]:
    """Promisify every value of a mapping into a dict with the same keys, in the same order."""
    results: dict[Any, Any] = {}
    pending: dict[Any, Awaitable[Any]] = {}
    for key, item in record.items():
        converted = promisify(item, receiver)
        if is_future(converted):
            results[key] = None
            pending[key] = converted
        else:
            results[key] = item
    return asyncio.get_running_loop().create_task(_settle_all(results, pending))


async def _settle_all(
    results: MutableSequence[Any] | MutableMapping[Any, Any],
    pending: dict[Any, Awaitable[Any]],
) -> Any:
    # gather() propagates the first failure right away and leaves the rest running.
    if pending:
        values = await asyncio.gather(*pending.values())
        for key, value in zip(pending, values):
            results[key] = value
    return results
