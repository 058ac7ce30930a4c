"""Async counterparts of run() and run_until_success().

Built on ``anyio`` so they work under asyncio and trio alike. Semantics match
the synchronous versions: output is captured in full, echoed once the child
exits, and a spawn failure raises SpawnError.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar

import anyio

from ..errors import AttemptsExhaustedError, SpawnError
from .process_runner import Command, CommandResult, _echo
from .retry import RetryOutcome, _check_budget, exit_status_of

__all__ = [
    "run_async",
    "run_until_success_async",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decode(data: bytes | None) -> str:
    return data.decode(errors="replace") if data else ""


async def run_async(
    command: Command,
    *,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    echo: bool = True,
) -> CommandResult:
    """Run a command to completion without blocking the event loop.

    Args:
        command: Shell command line (str) or argument vector
        cwd: Working directory
        env: Environment overrides on top of the parent's environment
        echo: Echo captured output to this process's streams

    Returns:
        CommandResult for the finished process

    Raises:
        SpawnError: If the process could not be started
    """
    kwargs: dict[str, Any] = {}
    if cwd is not None:
        kwargs["cwd"] = cwd
    if env is not None:
        kwargs["env"] = {**os.environ, **env}

    try:
        completed = await anyio.run_process(
            command if isinstance(command, str) else list(command),
            stdin=subprocess.DEVNULL,
            check=False,
            **kwargs,
        )
    except OSError as e:
        logger.debug(f"Failed to start {command!r}: {e}")
        raise SpawnError(command, e.strerror or str(e)) from e

    logger.debug(
        f"Subprocess completed command={command!r} "
        f"returncode={completed.returncode}"
    )

    result = CommandResult(
        command=command,
        exit_code=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
    )

    if echo:
        _echo(result.stdout, sys.stdout)
        _echo(result.stderr, sys.stderr)

    return result


async def run_until_success_async(
    max_attempts: int,
    work: Callable[[], Awaitable[T]],
    *,
    delay: float = 0.0,
) -> RetryOutcome[T]:
    """Await ``work()`` until it reports exit status 0.

    Raises:
        InvalidResultShapeError: If ``work`` returns a value without an exit status
        AttemptsExhaustedError: If every attempt failed
    """
    _check_budget(max_attempts)

    for attempt in range(1, max_attempts + 1):
        result = await work()
        status = exit_status_of(result)

        if status == 0:
            logger.debug(f"Succeeded on attempt {attempt}/{max_attempts}")
            return RetryOutcome(attempts_used=attempt, result=result)

        logger.debug(f"Attempt {attempt}/{max_attempts} failed with status {status}")
        if delay > 0 and attempt < max_attempts:
            await anyio.sleep(delay)

    raise AttemptsExhaustedError(max_attempts)
