# SPDX-License-Identifier: MIT
"""Version string parsing for AgentFlow releases.

Accepts MAJOR.MINOR.PATCH with an optional pre-release suffix and an
optional single leading ``v``/``V``:
- Releases: 1.2.3, v1.2.3
- Pre-releases: 0.1.0-alpha.1, v2.0.0-beta.2, 1.0.0-rc.1

Build metadata (``+build``) is not part of the grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Leading zeros are accepted and dropped when the component is read as an int
VERSION_PATTERN = re.compile(
    r"^(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[a-zA-Z0-9.-]+))?$"
)

FORMAT_HINT = "MAJOR.MINOR.PATCH[-PRERELEASE]"
FORMAT_EXAMPLES = ("1.2.3", "0.1.0-alpha.1", "2.0.0-beta.2")
MALFORMED_REASON = "malformed version string"


class InvalidVersionError(Exception):
    """Raised when a version string does not match MAJOR.MINOR.PATCH[-PRERELEASE]."""

    def __init__(self, version: str, message: str = "", reason: str = MALFORMED_REASON):
        self.version = version
        self.reason = reason
        self.expected_format = FORMAT_HINT
        self.message = message or f"Invalid version format: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional raw pre-release string (e.g., "alpha.1", "rc.2")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise ValueError("Version components must be non-negative")
        if self.prerelease == "":
            raise ValueError("Pre-release must be None or a non-empty string")

    def __str__(self) -> str:
        return self.full_version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def prerelease_identifiers(self) -> tuple[Union[int, str], ...]:
        """Return the dot-separated pre-release identifiers.

        All-digit identifiers are returned as ints, everything else verbatim.
        A release has no identifiers.
        """
        if self.prerelease is None:
            return ()
        return tuple(
            int(part) if part.isascii() and part.isdigit() else part
            for part in self.prerelease.split(".")
        )

    @property
    def base_version(self) -> str:
        """Return the version without its pre-release suffix."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def full_version(self) -> str:
        """Return MAJOR.MINOR.PATCH[-PRERELEASE] without a ``v`` prefix."""
        if self.prerelease is None:
            return self.base_version
        return f"{self.base_version}-{self.prerelease}"

    @property
    def tag_version(self) -> str:
        """Return the git tag form of the version, e.g. ``v1.2.3``."""
        return f"v{self.full_version}"


def strip_prefix(version_string: str) -> str:
    """Remove a single leading ``v`` or ``V``.

    Examples:
        >>> strip_prefix("v1.2.3")
        '1.2.3'
        >>> strip_prefix("vv1.2.3")
        'v1.2.3'
    """
    if version_string[:1] in ("v", "V"):
        return version_string[1:]
    return version_string


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH[-PRERELEASE] format,
            optionally prefixed with a single ``v`` or ``V``

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not match the grammar

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None)

        >>> parse_version("0.1.0-alpha.1")
        Version(major=0, minor=1, patch=0, prerelease='alpha.1')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = VERSION_PATTERN.fullmatch(strip_prefix(version_string))
    if not match:
        raise InvalidVersionError(version_string)

    try:
        version = Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=match.group("prerelease"),
        )
    except ValueError as e:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise InvalidVersionError(
            version_string,
            f"Invalid version format: numeric component too long in {version_string[:40]}...",
            reason="numeric component too long",
        ) from e
    logger.debug("Parsed %r as %s", version_string, version)
    return version


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("v1.0.0")
        True
        >>> is_valid_version("1.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def coerce_version(version: Union[str, Version]) -> Version:
    """Return ``version`` as a Version, parsing it if it is a string."""
    return parse_version(version) if isinstance(version, str) else version
