# SPDX-License-Identifier: MIT
"""Next-version computation for major, minor and patch bumps."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from .semver import Version, coerce_version

logger = logging.getLogger(__name__)


class IncrementKind(str, Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


VALID_INCREMENT_KINDS = tuple(kind.value for kind in IncrementKind)


class InvalidIncrementKindError(ValueError):
    """Raised when an increment kind is not one of major, minor or patch."""

    def __init__(self, kind: object):
        self.kind = kind
        self.valid_kinds = VALID_INCREMENT_KINDS
        self.message = f"Invalid increment type: {kind}"
        super().__init__(self.message)


def _coerce_kind(kind: Union[str, IncrementKind]) -> IncrementKind:
    if isinstance(kind, IncrementKind):
        return kind
    try:
        return IncrementKind(kind)
    except ValueError:
        raise InvalidIncrementKindError(kind) from None


def increment_version(
    version: Union[str, Version], kind: Union[str, IncrementKind]
) -> Version:
    """Return the next version for the requested bump.

    The result never carries a pre-release: bumping ``0.1.0-alpha.1`` by
    patch gives ``0.1.1``.

    Args:
        version: Current version (string or Version object)
        kind: One of "major", "minor" or "patch"

    Returns:
        A new Version

    Raises:
        InvalidVersionError: If a version string is invalid
        InvalidIncrementKindError: If kind is not a known increment

    Examples:
        >>> str(increment_version("1.2.3", "major"))
        '2.0.0'
        >>> str(increment_version("1.2.3", "minor"))
        '1.3.0'
    """
    bump = _coerce_kind(kind)
    v = coerce_version(version)

    if bump is IncrementKind.MAJOR:
        next_version = Version(v.major + 1, 0, 0)
    elif bump is IncrementKind.MINOR:
        next_version = Version(v.major, v.minor + 1, 0)
    else:
        next_version = Version(v.major, v.minor, v.patch + 1)

    logger.debug("Incremented %s by %s to %s", v, bump.value, next_version)
    return next_version
