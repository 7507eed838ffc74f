"""Callback-style APIs, dicts of results, and error recovery."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable
from typing import Any

from asynchronize import InvalidYieldError, run


def lookup_user(user_id: int) -> Callable[[Callable[..., None]], None]:
    """Wrap a callback API (here: a worker thread) as a thunk."""

    def thunk(callback: Callable[..., None]) -> None:
        def work() -> None:
            if user_id < 0:
                callback(LookupError(f"no user {user_id}"))
            else:
                callback(None, f"user-{user_id}", user_id * 10)

        threading.Thread(target=work).start()

    return thunk


def dashboard(user_id: int):  # type: ignore[no-untyped-def]
    name, score = yield lookup_user(user_id)
    panels: dict[str, Any] = yield {
        "name": name,
        "score": score,
        "badges": asyncio.sleep(0.05, result=["early", "bird"]),
    }

    try:
        yield lookup_user(-1)
    except LookupError as e:
        panels["warning"] = str(e)

    try:
        yield 42
    except InvalidYieldError as e:
        panels["note"] = str(e)

    return panels


async def main() -> None:
    print(await run(dashboard, 7))


if __name__ == "__main__":
    asyncio.run(main())
