# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Threshold policy deciding whether diagnostics warrant any reporting."""

from __future__ import annotations

from collections.abc import Sized
from enum import Enum


class Outcome(str, Enum):
    """Where a count summary is routed."""

    SILENT = "silent"
    WARN = "warn"
    FAIL = "fail"


def exceeds_threshold(count: int, threshold: int) -> bool:
    """Return ``True`` when ``count`` is strictly greater than ``threshold``."""

    return count > threshold


def should_report(diagnostics: Sized, threshold: int) -> bool:
    """Return whether ``diagnostics`` should be rendered at all.

    Args:
        diagnostics: Parsed diagnostic collection.
        threshold: Maximum number of diagnostics tolerated silently.

    Returns:
        bool: ``False`` for an empty collection or one within the threshold.
    """

    count = len(diagnostics)
    return count > 0 and exceeds_threshold(count, threshold)


def count_outcome(count: int, threshold: int, *, should_fail: bool) -> Outcome:
    """Return how a diagnostic count should be reported.

    Args:
        count: Number of diagnostics found.
        threshold: Maximum number of diagnostics tolerated silently.
        should_fail: Escalate to a failure instead of a warning.

    Returns:
        Outcome: ``SILENT`` when within the threshold, otherwise ``FAIL`` or ``WARN``.
    """

    if not exceeds_threshold(count, threshold):
        return Outcome.SILENT
    return Outcome.FAIL if should_fail else Outcome.WARN


def summary_message(count: int) -> str:
    """Return the one-line summary reported by ``count_errors``."""

    return f"{count} Pyright type checking issues found"


__all__ = ["Outcome", "count_outcome", "exceeds_threshold", "should_report", "summary_message"]
