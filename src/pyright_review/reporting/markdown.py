# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render diagnostics as a single aggregated Markdown table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from ..hosts import ReviewHost
from ..models import Diagnostic
from .links import LinkResolver, OtherProvider
from .text import format_cell, sanitize_message

REPORT_HEADING: Final[str] = "## DangerPyright found issues"
TABLE_HEADER: Final[str] = "| File | Line | Column | Severity | Reason |"
TABLE_SEPARATOR: Final[str] = "|------|------|--------|----------|--------|"


def format_row(diagnostic: Diagnostic, resolver: LinkResolver) -> str:
    """Return the table row describing ``diagnostic``.

    Args:
        diagnostic: Diagnostic to render.
        resolver: Resolver producing the File cell.

    Returns:
        str: Pipe-delimited Markdown row without a trailing newline.
    """

    cells = (
        resolver.file_cell(diagnostic.file, diagnostic.line),
        format_cell(diagnostic.line),
        format_cell(diagnostic.column),
        diagnostic.severity,
        sanitize_message(diagnostic.message),
    )
    return "| " + " | ".join(cells) + " |"


def render_markdown_table(
    diagnostics: Iterable[Diagnostic],
    resolver: LinkResolver | None = None,
) -> str:
    """Return the Markdown report for ``diagnostics`` in their given order.

    Args:
        diagnostics: Diagnostics to include, one row each.
        resolver: Resolver for the File column; bare paths when omitted.

    Returns:
        str: Heading followed by the issues table, newline terminated.
    """

    active = resolver if resolver is not None else LinkResolver(provider=OtherProvider())
    lines = [REPORT_HEADING, "", TABLE_HEADER, TABLE_SEPARATOR]
    lines.extend(format_row(diagnostic, active) for diagnostic in diagnostics)
    return "\n".join(lines) + "\n"


def publish_markdown_table(
    diagnostics: Iterable[Diagnostic],
    host: ReviewHost,
    resolver: LinkResolver,
) -> str:
    """Render the table and hand it to ``host.markdown``; return the document."""

    report = render_markdown_table(diagnostics, resolver)
    host.markdown(report)
    return report


__all__ = [
    "REPORT_HEADING",
    "TABLE_HEADER",
    "TABLE_SEPARATOR",
    "format_row",
    "publish_markdown_table",
    "render_markdown_table",
]
