"""Wall-clock timing of scoped operations.

``Timer`` is an explicit start/stop handle; ``time_it`` wraps a callable,
times it and reports the elapsed seconds to a logger or to stderr.

Example:
    time_it(lambda: build_index(path), "Indexing", logger)
    # INFO: Indexing finished in 1.204518 seconds
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Timer",
    "TimingReport",
    "time_it",
]


@dataclass(frozen=True)
class TimingReport:
    """Elapsed duration of one timed operation.

    Attributes:
        label: Title of the operation (may be empty)
        elapsed_seconds: Wall-clock duration, never negative
    """

    label: str
    elapsed_seconds: float

    @property
    def message(self) -> str:
        if not self.label:
            return f"Finished in {self.elapsed_seconds:.6f} seconds"
        return f"{self.label} finished in {self.elapsed_seconds:.6f} seconds"


class Timer:
    """Start/stop handle around a monotonic clock.

    Usable directly (``start()`` / ``stop()``) or as a context manager;
    the elapsed time is recorded whether the block exits normally or raises.
    """

    def __init__(self, label: str = "", clock: Callable[[], float] = time.perf_counter) -> None:
        self.label = label
        self._clock = clock
        self._started: float | None = None
        self._elapsed: float | None = None

    def start(self) -> Timer:
        self._started = self._clock()
        self._elapsed = None
        return self

    def stop(self) -> TimingReport:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = max(0.0, self._clock() - self._started)
        return self.report()

    @property
    def running(self) -> bool:
        return self._started is not None and self._elapsed is None

    def report(self) -> TimingReport:
        if self._elapsed is None:
            raise RuntimeError("Timer has not been stopped")
        return TimingReport(label=self.label, elapsed_seconds=self._elapsed)

    def __enter__(self) -> Timer:
        return self.start()

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()


def time_it(
    operation: Callable[[], Any],
    title: str = "",
    logger: logging.Logger | None = None,
    *,
    run: bool = True,
) -> None:
    """Run ``operation`` and report how long it took.

    Args:
        operation: Zero-argument callable; its return value is discarded
        title: Label for the report ("" gives "Finished in ...")
        logger: Receives the report at info level; stderr when None
        run: When False, skip the operation and report nothing

    Raises:
        Whatever ``operation`` raises; no report is emitted in that case.
    """
    if not run:
        return

    with Timer(title) as timer:
        operation()

    message = timer.report().message
    if logger is not None:
        logger.info(message)
    else:
        sys.stderr.write(message + "\n")
