"""Executable lookup on PATH."""

from __future__ import annotations

import os

__all__ = ["command_path"]


def _is_executable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def command_path(cmd: str) -> str | None:
    """Find the executable a command name refers to.

    Args:
        cmd: A command name ("ls") or a path to an executable ("/bin/ls")

    Returns:
        ``cmd`` itself if it is an executable file, otherwise the first
        executable match on PATH (trying each PATHEXT extension on Windows),
        or None if there is none.
    """
    if not cmd:
        return None
    if _is_executable_file(cmd):
        return cmd

    pathext = os.environ.get("PATHEXT")
    exts = pathext.split(";") if pathext else [""]

    for directory in os.environ.get("PATH", "").split(os.pathsep):
        if not directory:
            continue
        for ext in exts:
            candidate = os.path.join(directory, f"{cmd}{ext}")
            if _is_executable_file(candidate):
                return candidate

    return None
