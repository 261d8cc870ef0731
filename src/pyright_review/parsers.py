# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning raw Pyright output into :class:`Diagnostic` records.

Two grammars are supported. The JSON report produced by ``--outputjson`` is
preferred; when it cannot be validated the text is re-read line by line using
Pyright's human-readable format ``<file>:<line>:<col> - <severity>: <message>``.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import MalformedOutputError
from .models import DEFAULT_SEVERITY, Diagnostic, DiagnosticSet

LOGGER = logging.getLogger(__name__)

TEXT_DIAGNOSTIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+):(?P<column>\d+)\s*-\s*(?P<severity>\w+):\s*(?P<message>.+)$",
)


class _Position(BaseModel):
    model_config = ConfigDict(strict=True)

    line: int | None = None
    character: int | None = None


class _Range(BaseModel):
    model_config = ConfigDict(strict=True)

    start: _Position | None = None


class _ReportEntry(BaseModel):
    """Schema of a single entry of ``generalDiagnostics``."""

    model_config = ConfigDict(strict=True)

    file: str | None = None
    severity: str = DEFAULT_SEVERITY
    message: str
    range: _Range | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _default_severity(cls, value: object) -> object:
        return DEFAULT_SEVERITY if value is None else value

    def to_diagnostic(self) -> Diagnostic:
        """Return the normalised diagnostic described by this entry."""

        start = self.range.start if self.range is not None else None
        return Diagnostic(
            file=self.file,
            line=start.line if start is not None else None,
            column=start.character if start is not None else None,
            severity=self.severity,
            message=self.message,
        )


class _Report(BaseModel):
    """Top-level Pyright JSON report; only the diagnostics are consumed."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    general_diagnostics: list[_ReportEntry] = Field(default_factory=list, alias="generalDiagnostics")


def parse_json_output(text: str) -> DiagnosticSet:
    """Parse a Pyright ``--outputjson`` report.

    Any departure from the expected schema counts as malformed, not only
    JSON syntax errors: a non-object payload, a non-list
    ``generalDiagnostics``, non-object entries, mistyped fields or a missing
    ``message`` all raise. A report without ``generalDiagnostics`` yields no
    diagnostics. Missing or null positions pass through as ``None``.

    Args:
        text: Raw stdout captured from Pyright.

    Returns:
        DiagnosticSet: Diagnostics in report order.

    Raises:
        MalformedOutputError: If ``text`` is not a conforming JSON report.
    """

    try:
        report = _Report.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedOutputError(f"pyright output is not a valid JSON report ({exc.error_count()} errors)") from exc
    return tuple(entry.to_diagnostic() for entry in report.general_diagnostics)


def parse_text_output(text: str) -> DiagnosticSet:
    """Parse Pyright's plain-text output one line at a time.

    Lines that do not match :data:`TEXT_DIAGNOSTIC_PATTERN` (summaries,
    banners, blank lines) are skipped.

    Args:
        text: Raw stdout captured from Pyright.

    Returns:
        DiagnosticSet: Diagnostics for every matching line, in order.
    """

    diagnostics: list[Diagnostic] = []
    for raw_line in text.splitlines():
        match = TEXT_DIAGNOSTIC_PATTERN.match(raw_line)
        if match is None:
            continue
        diagnostics.append(
            Diagnostic(
                file=match.group("file").strip(),
                line=int(match.group("line")),
                column=int(match.group("column")),
                severity=match.group("severity").lower(),
                message=match.group("message").strip(),
            ),
        )
    return tuple(diagnostics)


def parse_output(text: str) -> DiagnosticSet:
    """Return diagnostics from ``text``, preferring the JSON grammar.

    Args:
        text: Raw stdout captured from Pyright.

    Returns:
        DiagnosticSet: Parsed diagnostics; empty for blank output.
    """

    if not text.strip():
        return ()
    try:
        return parse_json_output(text)
    except MalformedOutputError as exc:
        LOGGER.debug("falling back to text parser: %s", exc)
        return parse_text_output(text)


__all__ = [
    "TEXT_DIAGNOSTIC_PATTERN",
    "parse_json_output",
    "parse_output",
    "parse_text_output",
]
