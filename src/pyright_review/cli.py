# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point running the plugin against a console host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import typer

from . import logging as console
from .config import build_config
from .errors import ConfigError
from .hosts import ConsoleHost, detect_provider, github_html_link
from .plugin import PyrightPlugin
from .process_utils import run_command

app = typer.Typer(
    name="pyright-review",
    help="Run Pyright and report its diagnostics for code review.",
    no_args_is_help=True,
    add_completion=False,
)

BASE_DIR_OPTION = Annotated[str, typer.Option("--base-dir", "-d", help="Directory Pyright analyses.")]
CONFIG_FILE_OPTION = Annotated[
    str | None,
    typer.Option("--config-file", "-c", help="Pyright project file passed via --project."),
]
THRESHOLD_OPTION = Annotated[
    int,
    typer.Option("--threshold", "-t", help="Largest issue count tolerated without reporting."),
]
PROVIDER_OPTION = Annotated[
    str | None,
    typer.Option("--provider", help="Source-control provider; detected from GITHUB_ACTIONS when omitted."),
]
REPOSITORY_OPTION = Annotated[
    str | None,
    typer.Option("--repository", envvar="GITHUB_REPOSITORY", help="owner/name slug used for GitHub links."),
]
REF_OPTION = Annotated[
    str,
    typer.Option("--ref", envvar="GITHUB_SHA", help="Commit or branch GitHub links point at."),
]
NO_INSTALL_OPTION = Annotated[bool, typer.Option("--no-install", help="Do not install Pyright when it is missing.")]
NO_EMOJI_OPTION = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in console output.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Emit debug logging.")]


@dataclass(slots=True)
class _SessionOptions:
    base_dir: str
    config_file: str | None
    threshold: int
    provider: str | None
    repository: str | None
    ref: str
    no_install: bool
    no_emoji: bool
    debug: bool


def _build_session(options: _SessionOptions) -> tuple[PyrightPlugin, ConsoleHost]:
    """Return a plugin bound to a console host configured from ``options``.

    Args:
        options: Parsed command-line options.

    Returns:
        tuple[PyrightPlugin, ConsoleHost]: Plugin and the host it reports to.

    Raises:
        typer.Exit: With status 2 when the configuration is invalid.
    """

    console.configure_logging(debug=options.debug)
    try:
        config = build_config(
            base_dir=options.base_dir,
            config_file=options.config_file,
            threshold=options.threshold,
            auto_install=not options.no_install,
        )
    except ConfigError as exc:
        console.fail(f"invalid configuration: {exc}", use_emoji=not options.no_emoji)
        raise typer.Exit(code=2) from exc

    provider = options.provider if options.provider is not None else detect_provider()
    host = ConsoleHost(provider=provider, use_emoji=not options.no_emoji)
    if options.repository:
        host.linker = github_html_link(options.repository, options.ref)
    return PyrightPlugin(host, config, runner=run_command), host


def _finish(host: ConsoleHost, *, use_emoji: bool) -> None:
    if host.status_report.is_empty():
        console.ok("No Pyright issues to report", use_emoji=use_emoji)
    raise typer.Exit(code=1 if host.status_report.failures else 0)


@app.command("lint")
def lint_command(
    base_dir: BASE_DIR_OPTION = ".",
    config_file: CONFIG_FILE_OPTION = None,
    threshold: THRESHOLD_OPTION = 0,
    inline: Annotated[bool, typer.Option("--inline", help="Report one comment per diagnostic.")] = False,
    provider: PROVIDER_OPTION = None,
    repository: REPOSITORY_OPTION = None,
    ref: REF_OPTION = "HEAD",
    no_install: NO_INSTALL_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Report Pyright diagnostics as a table or inline comments."""

    options = _SessionOptions(base_dir, config_file, threshold, provider, repository, ref, no_install, no_emoji, debug)
    plugin, host = _build_session(options)
    plugin.lint(use_inline_comments=inline)
    _finish(host, use_emoji=not no_emoji)


@app.command("count")
def count_command(
    base_dir: BASE_DIR_OPTION = ".",
    config_file: CONFIG_FILE_OPTION = None,
    threshold: THRESHOLD_OPTION = 0,
    fail: Annotated[bool, typer.Option("--fail", help="Fail instead of warning above the threshold.")] = False,
    provider: PROVIDER_OPTION = None,
    repository: REPOSITORY_OPTION = None,
    ref: REF_OPTION = "HEAD",
    no_install: NO_INSTALL_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Warn or fail when the number of Pyright issues exceeds the threshold."""

    options = _SessionOptions(base_dir, config_file, threshold, provider, repository, ref, no_install, no_emoji, debug)
    plugin, host = _build_session(options)
    plugin.count_errors(should_fail=fail)
    _finish(host, use_emoji=not no_emoji)


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
