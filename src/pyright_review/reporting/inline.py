# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render diagnostics as per-line inline comments."""

from __future__ import annotations

from collections.abc import Iterable

from ..hosts import ReviewHost
from ..models import Diagnostic, InlineComment
from .text import sanitize_message


def comment_text(diagnostic: Diagnostic) -> str:
    """Return ``"<severity>: <message>"`` trimmed and with quotes neutralised."""

    return sanitize_message(f"{diagnostic.severity}: {diagnostic.message}".strip())


def render_inline_comments(diagnostics: Iterable[Diagnostic]) -> list[InlineComment]:
    """Return one inline comment per diagnostic, preserving order.

    Args:
        diagnostics: Diagnostics to annotate.

    Returns:
        list[InlineComment]: Comments anchored at each diagnostic's file and line.
    """

    return [
        InlineComment(text=comment_text(diagnostic), file=diagnostic.file, line=diagnostic.line)
        for diagnostic in diagnostics
    ]


def publish_inline_comments(diagnostics: Iterable[Diagnostic], host: ReviewHost) -> list[InlineComment]:
    """Send every rendered comment to ``host.message`` and return them."""

    comments = render_inline_comments(diagnostics)
    for comment in comments:
        host.message(comment.text, file=comment.file, line=comment.line)
    return comments


__all__ = ["comment_text", "publish_inline_comments", "render_inline_comments"]
