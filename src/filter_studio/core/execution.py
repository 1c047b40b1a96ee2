"""
Execution - Runs a filter against a buffer.

Dispatches over the two filter variants:
- Copy filters return a new buffer; the input is left untouched.
- In-place filters run on a working copy so the caller's buffer is
  preserved.

Execution is synchronous and runs on the caller's thread. Parameter
errors raised while the filter reads its parameters propagate to the
caller unchanged.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from filter_studio.core.data_types import ImageBuffer
from filter_studio.core.errors import NotAFilterError
from filter_studio.core.filter_types import CopyFilter, Filter, FilterVariant, InPlaceFilter

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Outcome of one filter run."""
    output: ImageBuffer
    filter_name: str
    variant: FilterVariant
    execution_time: float  # Seconds


def run_filter(filter: Filter, buffer: ImageBuffer) -> ExecutionResult:
    """
    Apply a filter and return the processed buffer.

    Args:
        filter: A loaded filter instance
        buffer: The input image; never modified

    Returns:
        ExecutionResult holding a buffer that shares no storage with the input

    Raises:
        NotAFilterError: filter implements neither execution variant
        ParameterError: the filter read an invalid or unset parameter
    """
    started = time.perf_counter()

    if isinstance(filter, CopyFilter):
        output = filter.apply(buffer)
        if output is buffer or output.pixels is buffer.pixels:
            raise RuntimeError(f"Copy filter {filter} returned its input buffer")
    elif isinstance(filter, InPlaceFilter):
        output = buffer.copy()
        filter.apply(output)
    else:
        raise NotAFilterError(type(filter).__name__)

    elapsed = time.perf_counter() - started
    logger.info("Applied %s (%s) in %.3fs", filter, filter.variant.value, elapsed)

    return ExecutionResult(
        output=output,
        filter_name=str(filter),
        variant=filter.variant,
        execution_time=elapsed,
    )
