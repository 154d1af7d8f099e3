# SPDX-License-Identifier: MIT
"""Check that a proposed version transition does not go backward."""

from __future__ import annotations

import logging

import click

from afversion import InvalidVersionError, SequenceType, validate_sequence

from ..main import echo_hint, echo_pairs, echo_version_error, echo_warning

logger = logging.getLogger(__name__)


@click.command()
@click.argument("current")
@click.argument("next_version", metavar="NEXT")
def validate(current: str, next_version: str) -> None:
    """Check the transition from CURRENT to NEXT.

    Prints SEQUENCE_VALID=true|false and SEQUENCE_TYPE=forward|backward.
    The sequence is valid when CURRENT compares greater than or equal to
    NEXT. A backward sequence is reported with a warning on stderr; the
    exit status is still 0. A malformed version is reported on stderr and
    treated as a backward sequence, also with exit status 0.

    \b
    Examples:
        afversion validate 1.1.0 1.0.0   # SEQUENCE_VALID=true
        afversion validate 1.0.0 1.1.0   # SEQUENCE_VALID=false
    """
    try:
        result = validate_sequence(current, next_version)
    except InvalidVersionError as e:
        echo_version_error(e)
        valid = False
    else:
        logger.debug(
            "Sequence %s -> %s compared %s", current, next_version, result.comparison.value
        )
        valid = result.valid

    echo_pairs(
        [
            ("SEQUENCE_VALID", "true" if valid else "false"),
            ("SEQUENCE_TYPE", (SequenceType.FORWARD if valid else SequenceType.BACKWARD).value),
        ]
    )

    if not valid:
        echo_warning("Version sequence goes backward")
        echo_hint(f"Current: {current}, Next: {next_version}")
