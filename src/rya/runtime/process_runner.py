"""Process runner with captured output and fail-fast variants.

This module provides:
- Synchronous execution of a command with stdout/stderr captured in full
- Echo of captured output to the parent's streams once the child exits
- A fail-fast variant that raises AbortError on unsuccessful exit
- A combined run-and-time operation for pipeline steps

Key design points:
- A string command runs through the shell; a sequence runs as argv directly
- ``env`` entries override the inherited environment, they do not replace it
- Spawn failures raise SpawnError; non-zero exits are plain CommandResults
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..errors import CommandFailedError, SpawnError
from ..timing import time_it

__all__ = [
    "DEFAULT_LOGGER",
    "Command",
    "CommandResult",
    "ProcessRunner",
    "ProcessSpec",
    "run",
    "run_and_time",
    "run_or_abort",
]

logger = logging.getLogger(__name__)

# Process-wide default for run_and_time; always passed in as an argument
DEFAULT_LOGGER = logging.getLogger("rya")

Command = Union[str, Sequence[str]]


@dataclass(frozen=True)
class ProcessSpec:
    """Specification for a subprocess to run.

    Attributes:
        command: Shell command line (str) or argument vector
        cwd: Working directory for the process (None = inherit)
        env: Environment overrides on top of the parent's environment
    """

    command: Command
    cwd: Path | str | None = None
    env: Mapping[str, str] | None = None

    @property
    def shell(self) -> bool:
        return isinstance(self.command, str)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one process that ran to completion.

    Attributes:
        command: The command as it was given
        exit_code: Exit status (negative when killed by a signal)
        stdout: Captured standard output
        stderr: Captured standard error
    """

    command: Command
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def _echo(text: str, stream: Any) -> None:
    if not text:
        return
    stream.write(text if text.endswith("\n") else text + "\n")
    stream.flush()


@dataclass
class ProcessRunner:
    """Blocking process runner.

    Example:
        runner = ProcessRunner()
        result = runner.run("echo hi")      # prints "hi"
        result.succeeded                     # True

        runner.run_or_abort(["false"])       # raises CommandFailedError
    """

    echo: bool = True

    def run(
        self,
        command: Command,
        *,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run a command to completion and capture its output.

        Args:
            command: Shell command line (str) or argument vector
            cwd: Working directory
            env: Environment overrides

        Returns:
            CommandResult for the finished process

        Raises:
            SpawnError: If the process could not be started
        """
        return self.run_spec(ProcessSpec(command=command, cwd=cwd, env=env))

    def run_spec(self, spec: ProcessSpec) -> CommandResult:
        kwargs = self._build_subprocess_kwargs(spec)

        try:
            completed = subprocess.run(
                spec.command if spec.shell else list(spec.command),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                **kwargs,
            )
        except OSError as e:
            logger.debug(f"Failed to start {spec.command!r}: {e}")
            raise SpawnError(spec.command, e.strerror or str(e)) from e

        logger.debug(
            f"Subprocess completed command={spec.command!r} "
            f"returncode={completed.returncode}"
        )

        result = CommandResult(
            command=spec.command,
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

        if self.echo:
            _echo(result.stdout, sys.stdout)
            _echo(result.stderr, sys.stderr)

        return result

    def run_or_abort(
        self,
        command: Command,
        *,
        cwd: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Like run(), but raise CommandFailedError on unsuccessful exit.

        Raises:
            CommandFailedError: If the command exited non-zero
            SpawnError: If the process could not be started
        """
        result = self.run(command, cwd=cwd, env=env)
        if not result.succeeded:
            raise CommandFailedError(result)
        return result

    def _build_subprocess_kwargs(self, spec: ProcessSpec) -> dict[str, Any]:
        """Build kwargs for subprocess.run.

        Args:
            spec: Process specification

        Returns:
            Dict of kwargs for subprocess.run
        """
        kwargs: dict[str, Any] = {"shell": spec.shell}

        if spec.cwd is not None:
            kwargs["cwd"] = spec.cwd

        if spec.env is not None:
            kwargs["env"] = {**os.environ, **spec.env}

        return kwargs


def run(
    command: Command,
    *,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run a command with a default ProcessRunner."""
    return ProcessRunner().run(command, cwd=cwd, env=env)


def run_or_abort(
    command: Command,
    *,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run a command with a default ProcessRunner, aborting on failure."""
    return ProcessRunner().run_or_abort(command, cwd=cwd, env=env)


def run_and_time(
    title: str,
    command: Command,
    logger: logging.Logger = DEFAULT_LOGGER,
    *,
    run: bool = True,
    runner: ProcessRunner | None = None,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Run a command through run_or_abort and log how long it took.

    The ``run`` flag lets a pipeline switch off a stage without restructuring
    the calling code: when False nothing is logged and nothing runs.

    Args:
        title: Label for the timing message
        command: Shell command line (str) or argument vector
        logger: Receives the "Running: ..." trace and the timing message
        run: When False, do nothing
        runner: ProcessRunner to use (default: a new one with echo on)
        cwd: Working directory
        env: Environment overrides

    Raises:
        CommandFailedError: If the command exited non-zero; no timing
            message is logged in that case
        SpawnError: If the process could not be started
    """
    if not run:
        return

    runner = runner or ProcessRunner()
    logger.debug(f"Running: {command}")
    time_it(lambda: runner.run_or_abort(command, cwd=cwd, env=env), title, logger)
