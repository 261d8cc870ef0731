# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Make sure the Pyright executable is available before it is invoked."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from typing import Final

from .process_utils import CommandRunner, run_command

LOGGER = logging.getLogger(__name__)

Which = Callable[[str], str | None]

PYRIGHT_NPM_PACKAGE: Final[str] = "pyright"


def install_command(package: str = PYRIGHT_NPM_PACKAGE) -> list[str]:
    """Return the npm command installing ``package`` globally."""

    return ["npm", "install", "-g", package]


def pyright_installed(executable: str = "pyright", *, which: Which = shutil.which) -> bool:
    """Return ``True`` when ``executable`` resolves on ``PATH``."""

    resolved = which(executable)
    return bool(resolved and resolved.strip())


def ensure_pyright_installed(
    executable: str = "pyright",
    *,
    which: Which = shutil.which,
    runner: CommandRunner = run_command,
) -> bool:
    """Install Pyright through npm when it is missing from ``PATH``.

    The install is best effort: its result is not verified, so a failed
    install only surfaces later as empty or unparsable analyzer output.

    Args:
        executable: Name of the Pyright executable to look for.
        which: Lookup used to test for the executable.
        runner: Command runner used to invoke npm.

    Returns:
        bool: ``True`` when Pyright was already present, ``False`` when an
        install was attempted.
    """

    if pyright_installed(executable, which=which):
        return True
    command = install_command()
    LOGGER.info("%s not found on PATH; running %s", executable, " ".join(command))
    try:
        completed = runner(command, capture_output=True)
    except OSError as exc:
        LOGGER.warning("could not run npm to install pyright: %s", exc)
        return False
    if completed.returncode != 0:
        LOGGER.warning(
            "npm exited with status %s while installing pyright: %s",
            completed.returncode,
            (completed.stderr or "").strip() or "<no output>",
        )
    return False


__all__ = ["PYRIGHT_NPM_PACKAGE", "Which", "ensure_pyright_installed", "install_command", "pyright_installed"]
