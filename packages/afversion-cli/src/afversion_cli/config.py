# SPDX-License-Identifier: MIT
"""CLI configuration loaded from environment variables.

There is no configuration file. Recognised variables:

- ``AFVERSION_COLOR``: ``auto`` (default), ``always`` or ``never``
- ``NO_COLOR``: any non-empty value disables color unless ``AFVERSION_COLOR``
  is set
- ``AFVERSION_BUILD_DATE`` / ``AFVERSION_GIT_COMMIT``: build metadata shown
  by ``afversion info``

Color only affects stderr messages; KEY=value output is never colored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

COLOR_ENV = "AFVERSION_COLOR"
NO_COLOR_ENV = "NO_COLOR"
BUILD_DATE_ENV = "AFVERSION_BUILD_DATE"
GIT_COMMIT_ENV = "AFVERSION_GIT_COMMIT"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class CLIConfig:
    """CLI configuration.

    Attributes:
        color: Color mode for stderr messages
        build_date: Build date reported by ``info``, empty if unknown
        git_commit: Git commit reported by ``info``, empty if unknown
    """

    color: ColorMode = ColorMode.AUTO
    build_date: str = ""
    git_commit: str = ""

    @property
    def click_color(self) -> Optional[bool]:
        """Return the value for ``click.Context.color``; None means auto-detect."""
        if self.color is ColorMode.ALWAYS:
            return True
        if self.color is ColorMode.NEVER:
            return False
        return None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Create CLIConfig from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If AFVERSION_COLOR has an unknown value
        """
        env = os.environ if environ is None else environ

        raw_color = env.get(COLOR_ENV, "").strip().lower()
        if raw_color:
            try:
                color = ColorMode(raw_color)
            except ValueError:
                valid = ", ".join(mode.value for mode in ColorMode)
                raise ConfigError(
                    f"Invalid {COLOR_ENV} value '{env[COLOR_ENV]}' (expected one of: {valid})"
                ) from None
        elif env.get(NO_COLOR_ENV):
            color = ColorMode.NEVER
        else:
            color = ColorMode.AUTO

        return cls(
            color=color,
            build_date=env.get(BUILD_DATE_ENV, "").strip(),
            git_commit=env.get(GIT_COMMIT_ENV, "").strip(),
        )


def load_config(environ: Optional[Mapping[str, str]] = None) -> CLIConfig:
    """Load CLI configuration from the environment."""
    return CLIConfig.from_env(environ)
