"""rya - helpers for running external commands, plus a few small utilities.

Environment variables:
    RYA_DEBUG: debug logging (default false)
    RYA_ECHO: echo child output (default true)
    RYA_RETRY_DELAY: seconds between failed attempts (default 0)

Usage:
    from rya import run_and_time
    run_and_time("Saying hello", "echo 'hello world'")
"""

__version__ = "0.1.0"

from .abort import abort_if, abort_if_file_exists, abort_unless, abort_unless_file_exists
from .errors import (
    AbortError,
    AttemptsExhaustedError,
    CommandFailedError,
    InvalidResultShapeError,
    RyaError,
    SpawnError,
)
from .runtime import (
    DEFAULT_LOGGER,
    CommandResult,
    ProcessRunner,
    ProcessSpec,
    RetryOutcome,
    run,
    run_and_time,
    run_async,
    run_or_abort,
    run_until_success,
    run_until_success_async,
)
from .timing import Timer, TimingReport, time_it

__all__ = [
    "__version__",
    "DEFAULT_LOGGER",
    "AbortError",
    "AttemptsExhaustedError",
    "CommandFailedError",
    "CommandResult",
    "InvalidResultShapeError",
    "ProcessRunner",
    "ProcessSpec",
    "RetryOutcome",
    "RyaError",
    "SpawnError",
    "Timer",
    "TimingReport",
    "abort_if",
    "abort_if_file_exists",
    "abort_unless",
    "abort_unless_file_exists",
    "run",
    "run_and_time",
    "run_async",
    "run_or_abort",
    "run_until_success",
    "run_until_success_async",
    "time_it",
]
