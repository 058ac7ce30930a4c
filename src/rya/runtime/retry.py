"""Bounded retry of a unit of work until it reports success.

The unit of work is any zero-argument callable returning something with an
exit status: a CommandResult (``exit_code``) or a
``subprocess.CompletedProcess`` (``returncode``). Attempts follow each other
immediately unless a delay is configured.

Example:
    outcome = run_until_success(5, lambda: runner.run("./flaky-upload.sh"))
    outcome.attempts_used   # 1..5
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..errors import AttemptsExhaustedError, InvalidResultShapeError

__all__ = [
    "RetryOutcome",
    "exit_status_of",
    "run_until_success",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_ATTRIBUTES = ("exit_code", "returncode")


@dataclass(frozen=True)
class RetryOutcome(Generic[T]):
    """Result of a successful retry loop.

    Attributes:
        attempts_used: 1-based number of the attempt that succeeded
        result: The successful unit-of-work value
    """

    attempts_used: int
    result: T


def exit_status_of(value: Any) -> int:
    """Return the integer exit status exposed by ``value``.

    Raises:
        InvalidResultShapeError: If ``value`` has no integer exit status
    """
    for name in _STATUS_ATTRIBUTES:
        status = getattr(value, name, None)
        if isinstance(status, int) and not isinstance(status, bool):
            return status
    raise InvalidResultShapeError(value)


def _check_budget(max_attempts: int) -> None:
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise ValueError(f"max_attempts must be a positive integer, got {max_attempts!r}")


def run_until_success(
    max_attempts: int,
    work: Callable[[], T],
    *,
    delay: float = 0.0,
) -> RetryOutcome[T]:
    """Invoke ``work`` until it reports exit status 0.

    Args:
        max_attempts: Attempt budget (positive)
        work: Zero-argument callable returning an object with an exit status
        delay: Seconds to sleep after a failed attempt (not after the last)

    Returns:
        RetryOutcome with the 1-based attempt number and the result

    Raises:
        InvalidResultShapeError: If ``work`` returns a value without an exit status
        AttemptsExhaustedError: If every attempt failed
    """
    _check_budget(max_attempts)

    for attempt in range(1, max_attempts + 1):
        result = work()
        status = exit_status_of(result)

        if status == 0:
            logger.debug(f"Succeeded on attempt {attempt}/{max_attempts}")
            return RetryOutcome(attempts_used=attempt, result=result)

        logger.debug(f"Attempt {attempt}/{max_attempts} failed with status {status}")
        if delay > 0 and attempt < max_attempts:
            time.sleep(delay)

    raise AttemptsExhaustedError(max_attempts)
