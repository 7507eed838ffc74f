"""asynchronize: sequential-looking asyncio code from plain generators.

Yield awaitables, thunks, nested generators, or lists/dicts of them; get
their results back at the yield.
"""

from asynchronize.classify import (
    YieldKind,
    classify,
    is_future,
    is_record,
    is_sequence,
    is_stepwise_factory,
    is_stepwise_handle,
    is_thunk,
)
from asynchronize.context import Context, Outcome, Suspension
from asynchronize.converters import CONVERTERS, Converter, convert
from asynchronize.errors import AsynchronizeError, InvalidYieldError, ThunkError
from asynchronize.promisifier import promisify, promisify_record, promisify_sequence, promisify_thunk
from asynchronize.runner import (
    Finished,
    GeneratorComputation,
    Runner,
    Step,
    StepwiseComputation,
    Suspended,
    as_computation,
    run,
)
from asynchronize.tracer import NullTracer, StdoutTracer, Tracer
from asynchronize.wrapper import Asynchronized, asynchronize, wrap

__version__ = "0.1.0"

__all__ = [
    "asynchronize",
    "wrap",
    "Asynchronized",
    "run",
    "Runner",
    "StepwiseComputation",
    "GeneratorComputation",
    "Step",
    "Finished",
    "Suspended",
    "as_computation",
    "promisify",
    "promisify_thunk",
    "promisify_sequence",
    "promisify_record",
    "Converter",
    "CONVERTERS",
    "convert",
    "YieldKind",
    "classify",
    "is_future",
    "is_stepwise_factory",
    "is_stepwise_handle",
    "is_thunk",
    "is_sequence",
    "is_record",
    "Context",
    "Suspension",
    "Outcome",
    "Tracer",
    "NullTracer",
    "StdoutTracer",
    "AsynchronizeError",
    "InvalidYieldError",
    "ThunkError",
]
