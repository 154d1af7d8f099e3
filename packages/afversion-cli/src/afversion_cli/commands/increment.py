# SPDX-License-Identifier: MIT
"""Compute the next version for a major, minor or patch bump."""

from __future__ import annotations

import click

from afversion import InvalidIncrementKindError, InvalidVersionError, increment_version

from ..main import echo_error, echo_hint, echo_pairs, echo_version_error


@click.command()
@click.argument("version")
@click.argument("kind", metavar="{major|minor|patch}")
def increment(version: str, kind: str) -> None:
    """Print the version that follows VERSION for the given bump.

    The next version never carries a pre-release suffix.

    \b
    Examples:
        afversion increment 1.2.3 patch        # NEXT_VERSION=1.2.4
        afversion increment v1.2.3 major       # NEXT_VERSION=2.0.0
        afversion increment 0.1.0-alpha.1 patch  # NEXT_VERSION=0.1.1
    """
    try:
        next_version = increment_version(version, kind)
    except InvalidIncrementKindError as e:
        echo_error(e.message)
        echo_hint(f"Valid types: {', '.join(e.valid_kinds)}")
        raise SystemExit(1)
    except InvalidVersionError as e:
        echo_version_error(e)
        raise SystemExit(1)

    echo_pairs(
        [
            ("NEXT_VERSION", next_version.full_version),
            ("NEXT_TAG_VERSION", next_version.tag_version),
        ]
    )
