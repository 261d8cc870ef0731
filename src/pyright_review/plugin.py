# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pyright review plugin: type-check a codebase and report into a review host.

Examples:
    Lint the current directory and publish a Markdown table::

        plugin = PyrightPlugin(host)
        plugin.lint()

    Lint a sub-directory with inline comments::

        plugin.base_dir = "src"
        plugin.lint(use_inline_comments=True)

    Fail the review when more than ten issues are found::

        plugin.threshold = 10
        plugin.count_errors(should_fail=True)
"""

from __future__ import annotations

import logging
import shutil

from .config import PluginConfig
from .hosts import ReviewHost
from .installs import Which, ensure_pyright_installed
from .invoker import run_pyright
from .models import DiagnosticSet
from .parsers import parse_output
from .policy import Outcome, count_outcome, should_report, summary_message
from .process_utils import CommandRunner, run_command
from .reporting.inline import publish_inline_comments
from .reporting.links import LinkResolver, resolve_provider
from .reporting.markdown import publish_markdown_table

LOGGER = logging.getLogger(__name__)


class PyrightPlugin:
    """Find type checking issues in Python files using Pyright.

    Results are reported to ``host`` as a Markdown table, inline comments or
    a warning/failure summarising the issue count.
    """

    def __init__(
        self,
        host: ReviewHost,
        config: PluginConfig | None = None,
        *,
        runner: CommandRunner = run_command,
        which: Which = shutil.which,
    ) -> None:
        """Bind the plugin to a review host.

        Args:
            host: Review host receiving reports.
            config: Initial configuration; defaults are used when omitted.
            runner: Command runner used for Pyright and npm.
            which: Executable lookup used by the availability guard.
        """

        self.host = host
        self.config = config if config is not None else PluginConfig()
        self._runner = runner
        self._which = which

    @property
    def config_file(self) -> str | None:
        """Custom Pyright project file; Pyright discovers one when unset."""

        return self.config.config_file

    @config_file.setter
    def config_file(self, value: str | None) -> None:
        self.config.config_file = value

    @property
    def base_dir(self) -> str:
        """Root directory Pyright analyses. Defaults to ``"."``."""

        return self.config.base_dir

    @base_dir.setter
    def base_dir(self, value: str | None) -> None:
        self.config.base_dir = value  # type: ignore[assignment]

    @property
    def threshold(self) -> int:
        """Largest issue count that is tolerated without reporting."""

        return self.config.threshold

    @threshold.setter
    def threshold(self, value: int | None) -> None:
        self.config.threshold = value  # type: ignore[assignment]

    def lint(self, use_inline_comments: bool = False) -> DiagnosticSet:
        """Report every diagnostic when their number exceeds the threshold.

        Args:
            use_inline_comments: Attach one comment per diagnostic instead of
                publishing a single Markdown table.

        Returns:
            DiagnosticSet: Diagnostics parsed for this run.
        """

        diagnostics = self._collect()
        if not should_report(diagnostics, self.threshold):
            return diagnostics

        if use_inline_comments:
            publish_inline_comments(diagnostics, self.host)
        else:
            resolver = LinkResolver(provider=resolve_provider(self.host))
            publish_markdown_table(diagnostics, self.host, resolver)
        return diagnostics

    def count_errors(self, should_fail: bool = False) -> DiagnosticSet:
        """Warn or fail when the total number of issues exceeds the threshold.

        Args:
            should_fail: Record a failure instead of a warning.

        Returns:
            DiagnosticSet: Diagnostics parsed for this run.
        """

        diagnostics = self._collect()
        outcome = count_outcome(len(diagnostics), self.threshold, should_fail=should_fail)
        if outcome is Outcome.FAIL:
            self.host.fail(summary_message(len(diagnostics)))
        elif outcome is Outcome.WARN:
            self.host.warn(summary_message(len(diagnostics)))
        return diagnostics

    def _collect(self) -> DiagnosticSet:
        if self.config.auto_install:
            ensure_pyright_installed(self.config.executable, which=self._which, runner=self._runner)
        output = run_pyright(self.config, runner=self._runner)
        diagnostics = parse_output(output)
        LOGGER.debug("parsed %d diagnostics", len(diagnostics))
        return diagnostics


__all__ = ["PyrightPlugin"]
