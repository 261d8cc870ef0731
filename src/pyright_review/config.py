# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for a pyright-review plugin instance."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_BASE_DIR: Final[str] = "."
DEFAULT_THRESHOLD: Final[int] = 0
DEFAULT_EXECUTABLE: Final[str] = "pyright"


class PluginConfig(BaseModel):
    """Settings consulted by the invoker and the threshold policy.

    Attributes are mutable so callers can tweak them between invocations;
    every assignment is validated. Assigning ``None`` to ``base_dir`` or
    ``threshold`` restores the default value.
    """

    model_config = ConfigDict(validate_assignment=True)

    config_file: str | None = None
    base_dir: str = DEFAULT_BASE_DIR
    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=0)
    executable: str = DEFAULT_EXECUTABLE
    auto_install: bool = True

    @field_validator("base_dir", mode="before")
    @classmethod
    def _default_base_dir(cls, value: object) -> object:
        """Return the default directory when ``value`` is unset.

        Args:
            value: Raw value supplied by the caller.

        Returns:
            object: ``value`` unchanged, or :data:`DEFAULT_BASE_DIR` for ``None``.
        """

        return DEFAULT_BASE_DIR if value is None else value

    @field_validator("threshold", mode="before")
    @classmethod
    def _default_threshold(cls, value: object) -> object:
        return DEFAULT_THRESHOLD if value is None else value

    @field_validator("config_file", mode="before")
    @classmethod
    def _blank_config_file(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def __setattr__(self, name: str, value: object) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise ConfigError(f"invalid value for {name!r}: {exc.errors()[0]['msg']}") from exc


def build_config(**values: object) -> PluginConfig:
    """Construct a :class:`PluginConfig` translating validation failures.

    Args:
        **values: Field values forwarded to :class:`PluginConfig`.

    Returns:
        PluginConfig: Validated configuration instance.

    Raises:
        ConfigError: If any supplied value is invalid.
    """

    try:
        return PluginConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "DEFAULT_BASE_DIR",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_THRESHOLD",
    "PluginConfig",
    "build_config",
]
