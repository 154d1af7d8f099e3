# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from afversion import InvalidVersionError, compare_versions

from ..main import echo_pairs, echo_version_error


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2.

    Prints COMPARISON=greater, less or equal, describing VERSION1 relative
    to VERSION2. Pre-release suffixes of the same MAJOR.MINOR.PATCH are
    compared as plain strings.

    \b
    Examples:
        afversion compare 1.0.0 1.0.0-rc.1      # COMPARISON=greater
        afversion compare 1.0.0-alpha 1.0.0-beta  # COMPARISON=less
    """
    try:
        result = compare_versions(version1, version2)
    except InvalidVersionError as e:
        echo_version_error(e)
        raise SystemExit(1)

    echo_pairs([("COMPARISON", result.value)])
