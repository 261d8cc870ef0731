# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report Pyright type checking issues into code review."""

from __future__ import annotations

from .config import PluginConfig, build_config
from .errors import ConfigError, MalformedOutputError, PyrightReviewError
from .hosts import ConsoleHost, RecordingHost, ReviewHost, StatusReport, github_html_link
from .models import Diagnostic, DiagnosticSet, InlineComment
from .parsers import parse_json_output, parse_output, parse_text_output
from .plugin import PyrightPlugin

__all__ = [
    "ConfigError",
    "ConsoleHost",
    "Diagnostic",
    "DiagnosticSet",
    "InlineComment",
    "MalformedOutputError",
    "PluginConfig",
    "PyrightPlugin",
    "PyrightReviewError",
    "RecordingHost",
    "ReviewHost",
    "StatusReport",
    "build_config",
    "github_html_link",
    "parse_json_output",
    "parse_output",
    "parse_text_output",
]
