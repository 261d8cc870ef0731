# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the bundled review hosts."""

from __future__ import annotations

from pyright_review import ConsoleHost, RecordingHost, ReviewHost, github_html_link
from pyright_review.hosts import detect_provider


def test_github_html_link_short_path() -> None:
    linker = github_html_link("octo/repo", "abc123")

    link = linker("./src/pkg/mod.py#L42", full_path=False)

    assert link == "<a href='https://github.com/octo/repo/blob/abc123/src/pkg/mod.py#L42'>mod.py#L42</a>"


def test_github_html_link_full_path() -> None:
    linker = github_html_link("octo/repo", "main")

    assert linker("src/mod.py#L1", full_path=True).endswith(">src/mod.py#L1</a>")


def test_detect_provider() -> None:
    assert detect_provider({"GITHUB_ACTIONS": "true"}) == "github"
    assert detect_provider({}) == ""


def test_hosts_satisfy_protocol() -> None:
    assert isinstance(RecordingHost(), ReviewHost)
    assert isinstance(ConsoleHost(), ReviewHost)


def test_recording_host_keeps_entries_without_deduplication() -> None:
    host = RecordingHost()

    host.warn("w")
    host.warn("w")
    host.message("m", file="a.py", line=1)

    assert host.status_report.warnings == ["w", "w"]
    assert host.status_report.messages[0].file == "a.py"


def test_console_host_records_and_prints(capsys) -> None:
    host = ConsoleHost(use_emoji=False, use_color=False)

    host.fail("3 Pyright type checking issues found")
    host.message("error: boom", file="a.py", line=7)

    out = capsys.readouterr().out
    assert "3 Pyright type checking issues found" in out
    assert "a.py:7 error: boom" in out
    assert host.status_report.failures == ["3 Pyright type checking issues found"]
