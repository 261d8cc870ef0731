# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from subprocess import CompletedProcess

import pytest

from pyright_review import PluginConfig, PyrightPlugin, RecordingHost


@dataclass
class FakeRunner:
    """Command runner returning canned stdout and recording every call."""

    stdout: str = ""
    returncode: int = 0
    stderr: str = ""
    missing: frozenset[str] = frozenset()
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, args: Sequence[str], *, capture_output: bool = True) -> CompletedProcess[str]:
        del capture_output
        self.calls.append(list(args))
        if args[0] in self.missing:
            raise FileNotFoundError(f"Executable '{args[0]}' was not found on PATH")
        return CompletedProcess(args=list(args), returncode=self.returncode, stdout=self.stdout, stderr=self.stderr)


def pyright_installed_which(name: str) -> str | None:
    return f"/usr/local/bin/{name}"


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(stdout='{"generalDiagnostics": []}')


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def plugin(host: RecordingHost, runner: FakeRunner) -> PyrightPlugin:
    return PyrightPlugin(host, PluginConfig(), runner=runner, which=pyright_installed_which)


@pytest.fixture
def runner_factory() -> type[FakeRunner]:
    return FakeRunner
