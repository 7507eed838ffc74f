"""Tracer protocol and built-in StdoutTracer.

Tracers are opt-in. A runner with no tracer attached runs silently.
Custom tracers implement the Tracer protocol; no base class is required.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, runtime_checkable

from asynchronize.context import Context


@runtime_checkable
class Tracer(Protocol):
    """Protocol for run tracers.

    ``kind`` is the YieldKind value of the yielded object ("future", "thunk", ...).
    """

    async def on_run_start(self, ctx: Context) -> None: ...
    async def on_run_end(self, ctx: Context) -> None: ...
    async def on_suspend(self, ctx: Context, kind: str, value: Any) -> None: ...
    async def on_resume(self, ctx: Context, kind: str, result: Any) -> None: ...
    async def on_error(self, ctx: Context, kind: str, error: BaseException) -> None: ...


class NullTracer:
    """Default tracer that does nothing."""

    async def on_run_start(self, ctx: Context) -> None:
        pass

    async def on_run_end(self, ctx: Context) -> None:
        pass

    async def on_suspend(self, ctx: Context, kind: str, value: Any) -> None:
        pass

    async def on_resume(self, ctx: Context, kind: str, result: Any) -> None:
        pass

    async def on_error(self, ctx: Context, kind: str, error: BaseException) -> None:
        pass


class StdoutTracer:
    """Simple tracer that prints to stderr. Useful for development.

    Usage:
        runner = Runner("fetch").use(StdoutTracer())
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    async def on_run_start(self, ctx: Context) -> None:
        print(f"▶ Run '{ctx.runner_name}' started [run={ctx.run_id}]", file=sys.stderr)

    async def on_run_end(self, ctx: Context) -> None:
        summary = ctx.summary()
        status = "✓" if not ctx.failed_suspensions else "✗"
        print(
            f"{status} Run '{ctx.runner_name}' finished "
            f"[{summary['suspended_ms']}ms suspended, {len(ctx.suspensions)} yields]",
            file=sys.stderr,
        )

    async def on_suspend(self, ctx: Context, kind: str, value: Any) -> None:
        print(f"  ⏸ yield {kind}", file=sys.stderr, end="")
        if self.verbose:
            print(f" ({_truncate(value)})", file=sys.stderr, end="")
        print(file=sys.stderr)

    async def on_resume(self, ctx: Context, kind: str, result: Any) -> None:
        current = ctx.current
        ms = f" [{current.duration_ms:.1f}ms]" if current and current.duration_ms else ""
        print(f"  ✓ {kind}{ms}", file=sys.stderr, end="")
        if self.verbose:
            print(f" -> {_truncate(result)}", file=sys.stderr, end="")
        print(file=sys.stderr)

    async def on_error(self, ctx: Context, kind: str, error: BaseException) -> None:
        print(f"  ✗ {kind} FAILED: {error}", file=sys.stderr)


def _truncate(obj: Any, max_len: int = 80) -> str:
    s = repr(obj)
    return s[:max_len] + "..." if len(s) > max_len else s
