"""rya exception classes.

Spawn failures, malformed retry results and exhausted attempt budgets are
ordinary library errors. ``AbortError`` marks a fail-fast condition that the
top-level entry point turns into process termination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .runtime.process_runner import CommandResult

__all__ = [
    "RyaError",
    "SpawnError",
    "InvalidResultShapeError",
    "AttemptsExhaustedError",
    "AbortError",
    "CommandFailedError",
]


class RyaError(Exception):
    """rya base exception."""
    pass


class SpawnError(RyaError):
    """The child process could not be created at all.

    Attributes:
        command: The command that failed to start
    """

    def __init__(self, command: Any, message: str) -> None:
        self.command = command
        super().__init__(f"Could not start {command!r}: {message}")


class InvalidResultShapeError(RyaError):
    """A retried unit of work returned something without an exit status.

    Attributes:
        value: The offending return value
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            "The unit of work did not return an object with an exit status "
            f"(got {type(value).__name__})"
        )


class AttemptsExhaustedError(RyaError):
    """The retry loop used its whole attempt budget without success.

    Attributes:
        max_attempts: The configured attempt budget
    """

    def __init__(self, max_attempts: int) -> None:
        self.max_attempts = max_attempts
        super().__init__(f"max_attempts exceeded ({max_attempts})")


class AbortError(RyaError):
    """Fail-fast condition; the entry point exits with ``exit_status``.

    Attributes:
        exit_status: Status the program should exit with
    """

    def __init__(self, message: str, exit_status: int = 1) -> None:
        self.exit_status = exit_status
        super().__init__(message)


class CommandFailedError(AbortError):
    """A command run through a fail-fast path exited unsuccessfully.

    Attributes:
        result: The unsuccessful CommandResult
    """

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        super().__init__(
            f"Command failed with status {result.exit_code} "
            f"when running {result.command!r}"
        )
