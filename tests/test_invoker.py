# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Pyright command construction and execution."""

from __future__ import annotations

from pyright_review import PluginConfig
from pyright_review.invoker import build_command, render_command, run_pyright


def test_default_command() -> None:
    assert render_command(build_command(PluginConfig())) == "pyright . --outputjson"


def test_custom_base_dir() -> None:
    config = PluginConfig(base_dir="src")

    assert render_command(build_command(config)) == "pyright src --outputjson"


def test_config_file_appends_project() -> None:
    config = PluginConfig(base_dir="src", config_file="cfg.json")

    assert build_command(config) == ["pyright", "src", "--outputjson", "--project", "cfg.json"]
    assert render_command(build_command(config)) == "pyright src --outputjson --project cfg.json"


def test_special_characters_stay_single_arguments() -> None:
    config = PluginConfig(base_dir="my dir; rm -rf /", config_file="$(cfg).json")

    command = build_command(config)

    assert command[1] == "my dir; rm -rf /"
    assert command[-1] == "$(cfg).json"


def test_run_pyright_returns_stdout_regardless_of_exit_code(runner_factory: type) -> None:
    runner = runner_factory(stdout='{"generalDiagnostics": []}', returncode=1)

    output = run_pyright(PluginConfig(), runner=runner)

    assert output == '{"generalDiagnostics": []}'
    assert runner.calls == [["pyright", ".", "--outputjson"]]


def test_run_pyright_unresolvable_executable_yields_empty_output(runner_factory: type) -> None:
    runner = runner_factory(missing=frozenset({"pyright"}))

    assert run_pyright(PluginConfig(), runner=runner) == ""
