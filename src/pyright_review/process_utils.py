# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free wrapper around ``subprocess`` used for analyzer and installer calls."""

from __future__ import annotations

import shutil

# Bandit: commands are passed as argument lists; ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Protocol


class CommandRunner(Protocol):
    """Callable executing an argument list and returning the completed process."""

    def __call__(self, args: Sequence[str], *, capture_output: bool = True) -> CompletedProcess[str]: ...


def _resolve_executable(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable resolved against ``PATH``.

    Args:
        args: Command and arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose head is an absolute executable path.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    if Path(head).is_absolute():
        return [head, *rest]
    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str], *, capture_output: bool = True) -> CompletedProcess[str]:
    """Execute ``args`` synchronously and return the completed process.

    The call blocks until the child exits and never inspects the exit
    status; output is buffered in full and decoded as text. No timeout is
    applied.

    Args:
        args: Command and argument sequence to execute.
        capture_output: Capture stdout and stderr instead of inheriting them.

    Returns:
        CompletedProcess[str]: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    return subprocess.run(  # nosec B603 - argument list, no shell
        _resolve_executable(args),
        check=False,
        capture_output=capture_output,
        text=True,
        errors="replace",
    )


__all__ = ["CommandRunner", "run_command"]
