# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Largest signed 32-bit integer
DEFAULT_MAX_COMPONENT = 2**31 - 1

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(Exception):
    """Raised when parser configuration is invalid."""


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how version strings are parsed.

    Attributes:
        max_component: Largest value accepted for any numeric component,
            including numeric pre-release and build fields
            (at most DEFAULT_MAX_COMPONENT, the ceiling for every Version)
        strip_whitespace: Trim surrounding whitespace before matching
    """

    max_component: int = DEFAULT_MAX_COMPONENT
    strip_whitespace: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_component, bool) or not isinstance(self.max_component, int):
            raise ConfigError(f"max_component must be an integer, got {self.max_component!r}")
        if self.max_component < 0:
            raise ConfigError(f"max_component must be non-negative, got {self.max_component}")
        if self.max_component > DEFAULT_MAX_COMPONENT:
            raise ConfigError(
                f"max_component cannot exceed {DEFAULT_MAX_COMPONENT}, got {self.max_component}"
            )

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables.

        Reads ``SEMVER_VALUE_MAX_COMPONENT`` and ``SEMVER_VALUE_STRIP_WHITESPACE``.

        Raises:
            ConfigError: If a variable is set to a value that cannot be interpreted
        """
        max_component = DEFAULT_MAX_COMPONENT
        if raw := os.getenv("SEMVER_VALUE_MAX_COMPONENT"):
            try:
                max_component = int(raw)
            except ValueError as e:
                raise ConfigError(f"Invalid SEMVER_VALUE_MAX_COMPONENT: {raw!r}") from e

        raw_strip = os.getenv("SEMVER_VALUE_STRIP_WHITESPACE", "").strip().lower()
        if raw_strip in _TRUE_VALUES:
            strip_whitespace = True
        elif raw_strip in _FALSE_VALUES:
            strip_whitespace = False
        else:
            raise ConfigError(f"Invalid SEMVER_VALUE_STRIP_WHITESPACE: {raw_strip!r}")

        return cls(max_component=max_component, strip_whitespace=strip_whitespace)


DEFAULT_CONFIG = ParserConfig()
