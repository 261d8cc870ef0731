# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report renderers for aggregated tables and inline comments."""

from __future__ import annotations

from .inline import comment_text, publish_inline_comments, render_inline_comments
from .links import GITHUB_PROVIDER, HostedProvider, LinkResolver, OtherProvider, Provider, resolve_provider
from .markdown import REPORT_HEADING, format_row, publish_markdown_table, render_markdown_table
from .text import sanitize_message

__all__ = [
    "GITHUB_PROVIDER",
    "HostedProvider",
    "LinkResolver",
    "OtherProvider",
    "Provider",
    "REPORT_HEADING",
    "comment_text",
    "format_row",
    "publish_inline_comments",
    "publish_markdown_table",
    "render_inline_comments",
    "render_markdown_table",
    "resolve_provider",
    "sanitize_message",
]
