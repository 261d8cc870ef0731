# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the File cell of the report into a provider permalink when possible."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..hosts import Linker, ReviewHost

GITHUB_PROVIDER: Final[str] = "github"


@dataclass(frozen=True, slots=True)
class HostedProvider:
    """Provider able to build line-anchored permalinks."""

    linker: Linker


@dataclass(frozen=True, slots=True)
class OtherProvider:
    """Any provider without permalink support, including an unknown one."""


Provider = HostedProvider | OtherProvider


def resolve_provider(host: ReviewHost) -> Provider:
    """Return the provider variant for the active review session.

    Args:
        host: Review host queried once for its source-control provider.

    Returns:
        Provider: :class:`HostedProvider` bound to ``host.html_link`` for GitHub,
        otherwise :class:`OtherProvider`.
    """

    if str(host.scm_provider()) == GITHUB_PROVIDER:
        return HostedProvider(linker=host.html_link)
    return OtherProvider()


@dataclass(frozen=True, slots=True)
class LinkResolver:
    """Produce display strings for the File column."""

    provider: Provider

    def file_cell(self, file: str | None, line: int | None) -> str:
        """Return a permalink for ``file``/``line`` or the bare path.

        Args:
            file: Path emitted by the analyzer.
            line: Line number emitted by the analyzer.

        Returns:
            str: Provider link for ``<file>#L<line>`` with a short path, or
            ``file`` unchanged when the provider cannot link.
        """

        path = file or ""
        if isinstance(self.provider, HostedProvider):
            anchor_line = "" if line is None else line
            return self.provider.linker(f"{path}#L{anchor_line}", full_path=False)
        return path


__all__ = [
    "GITHUB_PROVIDER",
    "HostedProvider",
    "LinkResolver",
    "OtherProvider",
    "Provider",
    "resolve_provider",
]
