# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from typing import Callable

import pytest
from click.testing import CliRunner

from afversion_cli.config import BUILD_DATE_ENV, COLOR_ENV, GIT_COMMIT_ENV, NO_COLOR_ENV


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without afversion environment overrides."""
    for name in (COLOR_ENV, NO_COLOR_ENV, BUILD_DATE_ENV, GIT_COMMIT_ENV):
        monkeypatch.delenv(name, raising=False)


def _parse_pairs(output: str) -> dict[str, str]:
    results: dict[str, str] = {}
    for line in output.splitlines():
        if "=" in line:
            key, value = line.split("=", 1)
            results[key] = value
    return results


@pytest.fixture
def parse_pairs() -> Callable[[str], dict[str, str]]:
    """Return a parser for KEY=value output lines."""
    return _parse_pairs
