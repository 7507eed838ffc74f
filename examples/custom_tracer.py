"""Custom tracer that writes JSON lines to a file."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from asynchronize import Runner, asynchronize


class JSONLTracer:
    """Tracer implementation that appends events to a JSONL file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def _write(self, record: dict[str, Any]) -> None:
        def append() -> None:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record, default=repr) + "\n")

        await asyncio.to_thread(append)

    async def on_run_start(self, ctx) -> None:  # type: ignore[no-untyped-def]
        await self._write({"event": "run_start", "run_id": ctx.run_id})

    async def on_run_end(self, ctx) -> None:  # type: ignore[no-untyped-def]
        await self._write({"event": "run_end", "summary": ctx.summary()})

    async def on_suspend(self, ctx, kind, value):  # type: ignore[no-untyped-def]
        await self._write({"event": "suspend", "kind": kind})

    async def on_resume(self, ctx, kind, result):  # type: ignore[no-untyped-def]
        await self._write({"event": "resume", "kind": kind, "result": result})

    async def on_error(self, ctx, kind, error):  # type: ignore[no-untyped-def]
        await self._write({"event": "error", "kind": kind, "error": str(error)})


runner = Runner("custom").use(JSONLTracer("./trace.jsonl"))


@asynchronize(runner=runner)
def greet(name: str):  # type: ignore[no-untyped-def]
    greeting = yield asyncio.sleep(0.01, result=f"Hello, {name}!")
    return greeting


async def main() -> None:
    print(await greet("asynchronize"))


if __name__ == "__main__":
    asyncio.run(main())
