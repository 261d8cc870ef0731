# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across the pyright-review package."""

from __future__ import annotations


class PyrightReviewError(Exception):
    """Base class for errors raised by pyright-review."""


class MalformedOutputError(PyrightReviewError):
    """Raised when Pyright output does not conform to the JSON report schema."""


class ConfigError(PyrightReviewError):
    """Raised when configuration input is invalid."""


__all__ = ["ConfigError", "MalformedOutputError", "PyrightReviewError"]
