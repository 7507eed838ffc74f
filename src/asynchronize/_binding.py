"""Receiver binding: the explicit stand-in for an implicit calling context."""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any


def bind_receiver(fn: Callable[..., Any], receiver: Any) -> Callable[..., Any]:
    """Bind ``fn`` to ``receiver`` as a method would be; no-op when receiver is None."""
    if receiver is None:
        return fn
    return types.MethodType(fn, receiver)
