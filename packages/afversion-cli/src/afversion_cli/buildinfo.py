# SPDX-License-Identifier: MIT
"""Build information for the afversion tool itself."""

from __future__ import annotations

import platform
import sys
from dataclasses import asdict, dataclass
from typing import Any

from afversion import is_stable_api, parse_version

from . import __version__
from .config import CLIConfig


@dataclass(frozen=True)
class BuildInfo:
    """Build and runtime details of the running tool."""

    version: str
    build_date: str
    git_commit: str
    python_version: str
    platform: str
    arch: str

    @property
    def is_prerelease(self) -> bool:
        return parse_version(self.version).is_prerelease

    @property
    def is_stable_api(self) -> bool:
        return is_stable_api(self.version)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["prerelease"] = self.is_prerelease
        data["stable_api"] = self.is_stable_api
        return data


def get_build_info(config: CLIConfig) -> BuildInfo:
    """Collect build information for the running interpreter."""
    return BuildInfo(
        version=__version__,
        build_date=config.build_date,
        git_commit=config.git_commit,
        python_version=platform.python_version(),
        platform=sys.platform,
        arch=platform.machine() or "unknown",
    )


def format_build_info(info: BuildInfo) -> str:
    """Format build information as a single line.

    Examples:
        afversion v0.1.0 linux/x86_64
        afversion v0.1.0 (1a2b3c4) built on 2026-01-01 linux/x86_64
    """
    text = f"afversion v{info.version}"

    if info.git_commit:
        text += f" ({info.git_commit[:7]})"

    if info.build_date:
        text += f" built on {info.build_date}"

    return f"{text} {info.platform}/{info.arch}"
