# SPDX-License-Identifier: MIT
"""Parse a version and print its components and classification."""

from __future__ import annotations

import click

from afversion import InvalidVersionError, PrereleaseClass, classify, parse_version

from ..main import echo_pairs, echo_version_error


@click.command()
@click.argument("version")
def parse(version: str) -> None:
    """Parse VERSION and print its components as KEY=value lines.

    Prints MAJOR, MINOR, PATCH, PRERELEASE, FULL_VERSION, TAG_VERSION,
    VERSION_TYPE, PRERELEASE_TYPE, STABILITY and API_COMPATIBILITY.
    PRERELEASE and PRERELEASE_TYPE are empty for a release.

    \b
    Examples:
        afversion parse v1.2.3
        afversion parse 0.1.0-alpha.1
    """
    try:
        v = parse_version(version)
    except InvalidVersionError as e:
        echo_version_error(e)
        raise SystemExit(1)

    c = classify(v)
    # Releases print an empty PRERELEASE_TYPE
    prerelease_type = (
        "" if c.prerelease_class is PrereleaseClass.NONE else c.prerelease_class.value
    )

    echo_pairs(
        [
            ("MAJOR", v.major),
            ("MINOR", v.minor),
            ("PATCH", v.patch),
            ("PRERELEASE", v.prerelease or ""),
            ("FULL_VERSION", v.full_version),
            ("TAG_VERSION", v.tag_version),
            ("VERSION_TYPE", c.version_type.value),
            ("PRERELEASE_TYPE", prerelease_type),
            ("STABILITY", c.stability.value),
            ("API_COMPATIBILITY", c.api_compatibility.value),
        ]
    )
