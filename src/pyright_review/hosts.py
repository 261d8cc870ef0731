# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Review-host interfaces and the concrete hosts shipped with the package.

A review host is where reports land: warnings and failures in the build
status, Markdown documents in the review summary, and messages attached to
specific lines. The plugin only talks to hosts through :class:`ReviewHost`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Final, Protocol, runtime_checkable

from . import logging as console
from .models import InlineComment

GITHUB_BASE_URL: Final[str] = "https://github.com"


class Linker(Protocol):
    """Build a provider permalink for ``path#L<line>``."""

    def __call__(self, path_with_line_anchor: str, *, full_path: bool) -> str: ...


@runtime_checkable
class ReviewHost(Protocol):
    """Reporting sinks and provider metadata offered by a review session."""

    def scm_provider(self) -> str:
        """Return the identifier of the source-control hosting provider."""
        ...

    def html_link(self, path_with_line_anchor: str, *, full_path: bool) -> str:
        """Return a provider permalink for ``path_with_line_anchor``."""
        ...

    def warn(self, text: str) -> None:
        """Append ``text`` to the warnings of the session."""
        ...

    def fail(self, text: str) -> None:
        """Append ``text`` to the failures of the session."""
        ...

    def markdown(self, text: str) -> None:
        """Append a Markdown document to the session."""
        ...

    def message(self, text: str, *, file: str | None, line: int | None) -> None:
        """Attach ``text`` to ``file`` at ``line``."""
        ...


def github_html_link(repository: str, ref: str) -> Linker:
    """Return a linker producing GitHub blob permalinks.

    Args:
        repository: ``owner/name`` slug of the repository.
        ref: Commit SHA or branch the links should point at.

    Returns:
        Linker: Callable rendering ``<a href='...'>display</a>`` anchors; the
        display text is the basename unless ``full_path`` is requested.
    """

    def _link(path_with_line_anchor: str, *, full_path: bool) -> str:
        path, _, anchor = path_with_line_anchor.partition("#")
        clean_path = path[2:] if path.startswith("./") else path
        suffix = f"#{anchor}" if anchor else ""
        href = f"{GITHUB_BASE_URL}/{repository}/blob/{ref}/{clean_path}{suffix}"
        display = clean_path if full_path else PurePosixPath(clean_path).name
        return f"<a href='{href}'>{display}{suffix}</a>"

    return _link


def _plain_link(path_with_line_anchor: str, *, full_path: bool) -> str:
    del full_path
    return path_with_line_anchor


@dataclass(slots=True)
class StatusReport:
    """Entries accumulated by a host during one review session."""

    warnings: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    markdowns: list[str] = field(default_factory=list)
    messages: list[InlineComment] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return ``True`` when no sink received any entry."""

        return not (self.warnings or self.failures or self.markdowns or self.messages)


@dataclass(slots=True)
class RecordingHost:
    """In-memory review host appending every entry to a :class:`StatusReport`."""

    provider: str = ""
    linker: Linker = _plain_link
    status_report: StatusReport = field(default_factory=StatusReport)

    def scm_provider(self) -> str:
        """Return the configured provider identifier."""

        return self.provider

    def html_link(self, path_with_line_anchor: str, *, full_path: bool) -> str:
        """Return the link built by the configured linker."""

        return self.linker(path_with_line_anchor, full_path=full_path)

    def warn(self, text: str) -> None:
        """Record a warning."""

        self.status_report.warnings.append(text)

    def fail(self, text: str) -> None:
        """Record a failure."""

        self.status_report.failures.append(text)

    def markdown(self, text: str) -> None:
        """Record a Markdown document."""

        self.status_report.markdowns.append(text)

    def message(self, text: str, *, file: str | None, line: int | None) -> None:
        """Record an inline comment for ``file`` at ``line``."""

        self.status_report.messages.append(InlineComment(text=text, file=file, line=line))


@dataclass(slots=True)
class ConsoleHost(RecordingHost):
    """Host echoing every entry to the terminal while recording it."""

    use_emoji: bool = True
    use_color: bool | None = None

    def warn(self, text: str) -> None:
        """Record and print a warning."""

        RecordingHost.warn(self, text)
        console.warn(text, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, text: str) -> None:
        """Record and print a failure."""

        RecordingHost.fail(self, text)
        console.fail(text, use_emoji=self.use_emoji, use_color=self.use_color)

    def markdown(self, text: str) -> None:
        """Record and render a Markdown document."""

        RecordingHost.markdown(self, text)
        console.markdown(text, use_color=self.use_color)

    def message(self, text: str, *, file: str | None, line: int | None) -> None:
        """Record and print an inline comment with its location."""

        RecordingHost.message(self, text, file=file, line=line)
        location = file or "<workspace>"
        if line is not None:
            location = f"{location}:{line}"
        console.info(f"{location} {text}", use_emoji=self.use_emoji, use_color=self.use_color)


def detect_provider(environ: Mapping[str, str] | None = None) -> str:
    """Return ``"github"`` when running inside GitHub Actions, else ``""``.

    Args:
        environ: Environment mapping to inspect; defaults to ``os.environ``.

    Returns:
        str: Provider identifier understood by the link resolver.
    """

    env = os.environ if environ is None else environ
    return "github" if env.get("GITHUB_ACTIONS", "").lower() == "true" else ""


__all__ = [
    "ConsoleHost",
    "GITHUB_BASE_URL",
    "Linker",
    "RecordingHost",
    "ReviewHost",
    "StatusReport",
    "detect_provider",
    "github_html_link",
]
