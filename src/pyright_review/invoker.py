# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and execute the Pyright command line."""

from __future__ import annotations

import logging
import shlex

from .config import PluginConfig
from .process_utils import CommandRunner, run_command

LOGGER = logging.getLogger(__name__)

OUTPUT_JSON_FLAG = "--outputjson"
PROJECT_FLAG = "--project"


def build_command(config: PluginConfig) -> list[str]:
    """Return the Pyright argument list for ``config``.

    Args:
        config: Plugin configuration providing the directory and project file.

    Returns:
        list[str]: ``[executable, base_dir, "--outputjson"]`` optionally followed
        by ``["--project", config_file]``.
    """

    command = [config.executable, config.base_dir, OUTPUT_JSON_FLAG]
    if config.config_file:
        command.extend([PROJECT_FLAG, config.config_file])
    return command


def render_command(command: list[str]) -> str:
    """Return ``command`` as a single shell-quoted string for display."""

    return shlex.join(command)


def run_pyright(config: PluginConfig, *, runner: CommandRunner = run_command) -> str:
    """Run Pyright for ``config`` and return its captured standard output.

    The exit status is ignored because Pyright exits non-zero whenever it
    reports errors; only the output content matters.

    Args:
        config: Plugin configuration describing what to analyse.
        runner: Command runner used to spawn the process.

    Returns:
        str: Raw stdout text; empty when the executable cannot be resolved.
    """

    command = build_command(config)
    LOGGER.debug("running command=%s", render_command(command))
    try:
        completed = runner(command, capture_output=True)
    except FileNotFoundError as exc:
        LOGGER.debug("pyright could not be started: %s", exc)
        return ""
    LOGGER.debug("pyright exited returncode=%s", completed.returncode)
    return completed.stdout or ""


__all__ = ["OUTPUT_JSON_FLAG", "PROJECT_FLAG", "build_command", "render_command", "run_pyright"]
