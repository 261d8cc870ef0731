# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the threshold policy."""

from __future__ import annotations

import pytest

from pyright_review.policy import Outcome, count_outcome, exceeds_threshold, should_report, summary_message


@pytest.mark.parametrize(
    ("count", "threshold", "expected"),
    [(0, 0, False), (1, 0, True), (5, 5, False), (6, 5, True), (3, 10, False)],
)
def test_exceeds_threshold_is_strict(count: int, threshold: int, expected: bool) -> None:
    assert exceeds_threshold(count, threshold) is expected


def test_should_report_requires_diagnostics() -> None:
    assert should_report([], 0) is False
    assert should_report([object()], 0) is True
    assert should_report([object()] * 3, 3) is False


@pytest.mark.parametrize(
    ("count", "should_fail", "expected"),
    [(0, False, Outcome.SILENT), (2, False, Outcome.WARN), (2, True, Outcome.FAIL), (1, True, Outcome.SILENT)],
)
def test_count_outcome(count: int, should_fail: bool, expected: Outcome) -> None:
    assert count_outcome(count, 1, should_fail=should_fail) is expected


def test_summary_message() -> None:
    assert summary_message(3) == "3 Pyright type checking issues found"
