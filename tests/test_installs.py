# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Pyright availability guard."""

from __future__ import annotations

import logging

import pytest

from pyright_review.installs import ensure_pyright_installed, pyright_installed


def test_installed_pyright_is_left_alone(runner_factory: type) -> None:
    runner = runner_factory()

    present = ensure_pyright_installed(which=lambda name: f"/usr/bin/{name}", runner=runner)

    assert present is True
    assert runner.calls == []


def test_missing_pyright_is_installed_with_npm(runner_factory: type) -> None:
    runner = runner_factory()

    present = ensure_pyright_installed(which=lambda name: None, runner=runner)

    assert present is False
    assert runner.calls == [["npm", "install", "-g", "pyright"]]


def test_failed_install_is_only_logged(runner_factory: type, caplog: pytest.LogCaptureFixture) -> None:
    runner = runner_factory(returncode=1, stderr="EACCES")

    with caplog.at_level(logging.WARNING, logger="pyright_review.installs"):
        ensure_pyright_installed(which=lambda name: None, runner=runner)

    assert "EACCES" in caplog.text


def test_blank_which_result_counts_as_missing() -> None:
    assert pyright_installed(which=lambda name: "  ") is False


def test_missing_npm_is_only_logged(runner_factory: type, caplog: pytest.LogCaptureFixture) -> None:
    runner = runner_factory(missing=frozenset({"npm"}))

    with caplog.at_level(logging.WARNING, logger="pyright_review.installs"):
        present = ensure_pyright_installed(which=lambda name: None, runner=runner)

    assert present is False
    assert runner.calls == [["npm", "install", "-g", "pyright"]]
    assert "could not run npm" in caplog.text
