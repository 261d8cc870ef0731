# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Text helpers shared by the report renderers."""

from __future__ import annotations

from typing import Final

_QUOTE_TRANSLATION: Final[dict[int, str]] = str.maketrans({'"': "`", "'": "`"})


def sanitize_message(text: str) -> str:
    """Replace double and single quotes in ``text`` with backticks.

    Quotes break Markdown table cells and inline comment payloads; backticks
    keep the quoted identifiers readable as code spans.
    """

    return text.translate(_QUOTE_TRANSLATION)


def format_cell(value: object) -> str:
    """Return ``value`` as table cell text, rendering ``None`` as empty."""

    return "" if value is None else str(value)


__all__ = ["format_cell", "sanitize_message"]
