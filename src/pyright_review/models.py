# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the pyright-review package."""

from __future__ import annotations

from typing import Final, TypeAlias

from pydantic import BaseModel, ConfigDict

DEFAULT_SEVERITY: Final[str] = "error"


class Diagnostic(BaseModel):
    """One issue reported by Pyright, kept in the analyzer's native terms.

    Positions are passed through exactly as emitted (Pyright reports
    zero-based lines and characters in JSON mode) and ``severity`` is not
    restricted to a closed vocabulary.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    file: str | None = None
    line: int | None = None
    column: int | None = None
    severity: str = DEFAULT_SEVERITY
    message: str


DiagnosticSet: TypeAlias = tuple[Diagnostic, ...]


class InlineComment(BaseModel):
    """Annotation attached to a single file and line of the review."""

    model_config = ConfigDict(frozen=True)

    text: str
    file: str | None = None
    line: int | None = None


__all__ = [
    "DEFAULT_SEVERITY",
    "Diagnostic",
    "DiagnosticSet",
    "InlineComment",
]
