"""Runtime module for running external commands.

Blocking execution with captured output, fail-fast variants, bounded retry
and async counterparts.
"""

from __future__ import annotations

from .async_runner import run_async, run_until_success_async
from .process_runner import (
    DEFAULT_LOGGER,
    CommandResult,
    ProcessRunner,
    ProcessSpec,
    run,
    run_and_time,
    run_or_abort,
)
from .retry import RetryOutcome, exit_status_of, run_until_success

__all__ = [
    "DEFAULT_LOGGER",
    "CommandResult",
    "ProcessRunner",
    "ProcessSpec",
    "RetryOutcome",
    "exit_status_of",
    "run",
    "run_and_time",
    "run_async",
    "run_or_abort",
    "run_until_success",
    "run_until_success_async",
]
