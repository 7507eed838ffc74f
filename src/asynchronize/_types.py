"""Internal type aliases used across the package."""

from __future__ import annotations

from typing import Any

# Anything a computation may yield. Kept loose on purpose: classification
# happens at runtime, see asynchronize.classify.
Yieldable = Any
