#!/usr/bin/env python3
"""Flaky CLI for integration testing.

Exits non-zero a configurable share of the time, or a fixed number of times
before succeeding.

Usage:
    python flaky_cli.py [--pass-chance P] [--fail-times N --state FILE]
                        [--stdout TEXT] [--stderr TEXT] [--exit-code CODE]

Arguments:
    --pass-chance: Probability of exiting 0 (default: 1.0)
    --fail-times: Fail this many runs, then succeed (needs --state)
    --state: File holding the run counter between invocations
    --stdout: Text to write to stdout
    --stderr: Text to write to stderr
    --exit-code: Exit code used on failure (default: 1)
"""

from __future__ import annotations

import argparse
import random
import signal
import sys
from pathlib import Path
from typing import NoReturn


def _bump_counter(state: Path) -> int:
    """Increment and return the number of runs recorded in ``state``."""
    count = int(state.read_text()) if state.exists() else 0
    count += 1
    state.write_text(str(count))
    return count


def main() -> NoReturn:
    """Main entry point."""
    if hasattr(signal, "SIGPIPE"):
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)

    parser = argparse.ArgumentParser(description="Flaky CLI for testing")
    parser.add_argument("--pass-chance", type=float, default=1.0, help="Chance of passing")
    parser.add_argument("--fail-times", type=int, default=None, help="Failures before success")
    parser.add_argument("--state", type=Path, default=None, help="Run counter file")
    parser.add_argument("--stdout", type=str, default="", help="Text for stdout")
    parser.add_argument("--stderr", type=str, default="", help="Text for stderr")
    parser.add_argument("--exit-code", type=int, default=1, help="Exit code on failure")

    args = parser.parse_args()

    if args.stdout:
        print(args.stdout, flush=True)
    if args.stderr:
        print(args.stderr, file=sys.stderr, flush=True)

    if args.fail_times is not None:
        if args.state is None:
            parser.error("--fail-times requires --state")
        passed = _bump_counter(args.state) > args.fail_times
    else:
        passed = random.random() <= args.pass_chance

    sys.exit(0 if passed else args.exit_code)


if __name__ == "__main__":
    main()
