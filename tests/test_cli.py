# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the pyright-review command-line interface."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from pyright_review import cli

REPORT = json.dumps(
    {
        "generalDiagnostics": [
            {"file": "pkg/a.py", "severity": "error", "message": "bad 'x'", "range": {"start": {"line": 4, "character": 1}}},
            {"file": "pkg/b.py", "severity": "warning", "message": "meh", "range": {"start": {"line": 8, "character": 0}}},
        ],
    },
)


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch, runner_factory: type):
    runner = runner_factory(stdout=REPORT)
    monkeypatch.setattr(cli, "run_command", runner)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    return runner


def test_lint_prints_table(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["lint", "--no-install", "--no-emoji", "--base-dir", "pkg"])

    assert result.exit_code == 0
    assert fake_runner.calls == [["pyright", "pkg", "--outputjson"]]
    assert "DangerPyright found issues" in result.stdout
    assert "pkg/a.py" in result.stdout


def test_lint_inline(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["lint", "--inline", "--no-install", "--no-emoji"])

    assert result.exit_code == 0
    assert "pkg/a.py:4 error: bad `x`" in result.stdout


def test_count_warns(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["count", "--no-install", "--no-emoji", "--config-file", "cfg.json"])

    assert result.exit_code == 0
    assert fake_runner.calls == [["pyright", ".", "--outputjson", "--project", "cfg.json"]]
    assert "2 Pyright type checking issues found" in result.stdout


def test_count_fail_sets_exit_code(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["count", "--fail", "--no-install", "--no-emoji"])

    assert result.exit_code == 1
    assert "2 Pyright type checking issues found" in result.stdout


def test_threshold_silences_output(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["count", "--fail", "--threshold", "2", "--no-install", "--no-emoji"])

    assert result.exit_code == 0
    assert "No Pyright issues to report" in result.stdout


def test_negative_threshold_is_rejected(fake_runner) -> None:
    result = CliRunner().invoke(cli.app, ["lint", "--threshold", "-1", "--no-install", "--no-emoji"])

    assert result.exit_code == 2
    assert fake_runner.calls == []
