"""Shutting the machine down through the Windows shutdown utility."""

from __future__ import annotations

import subprocess

__all__ = ["shutdown_command", "shutdown"]

_SHUTDOWN_PROGRAM = "C:\\WINDOWS\\System32\\shutdown"


def shutdown_command() -> list[str]:
    """Return the command line that powers the machine off."""
    return [_SHUTDOWN_PROGRAM, "/s"]


def shutdown() -> int:
    """Run the shutdown command and return its exit status."""
    completed = subprocess.run(shutdown_command(), check=False)
    return completed.returncode