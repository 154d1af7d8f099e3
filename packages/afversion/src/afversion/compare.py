# SPDX-License-Identifier: MIT
"""Version comparison.

Ordering: major, then minor, then patch numerically. For an equal numeric
triple a release outranks any pre-release, and two pre-releases are ordered
by plain codepoint comparison of their raw strings. This is not SemVer 2.0.0
precedence: ``alpha.10`` sorts before ``alpha.2``.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .semver import Version, coerce_version


class ComparisonResult(str, Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1, in the style of a ``cmp`` function."""
        return _SIGNS[self]

    def inverse(self) -> "ComparisonResult":
        """Return the result of the same comparison with operands swapped."""
        return ComparisonResult.from_sign(-self.sign)

    @classmethod
    def from_sign(cls, value: int) -> "ComparisonResult":
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


_SIGNS = {
    ComparisonResult.LESS: -1,
    ComparisonResult.EQUAL: 0,
    ComparisonResult.GREATER: 1,
}


def _compare_prerelease(pre1: str | None, pre2: str | None) -> ComparisonResult:
    """Compare two raw pre-release strings.

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return ComparisonResult.EQUAL
    if pre1 is None:
        return ComparisonResult.GREATER
    if pre2 is None:
        return ComparisonResult.LESS

    if pre1 == pre2:
        return ComparisonResult.EQUAL
    return ComparisonResult.GREATER if pre1 > pre2 else ComparisonResult.LESS


def compare_versions(
    version1: Union[str, Version], version2: Union[str, Version]
) -> ComparisonResult:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        ComparisonResult.LESS, EQUAL or GREATER, describing version1
        relative to version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <ComparisonResult.LESS: 'less'>
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        <ComparisonResult.GREATER: 'greater'>
        >>> compare_versions("1.0.0-alpha", "1.0.0-beta")
        <ComparisonResult.LESS: 'less'>
    """
    v1 = coerce_version(version1)
    v2 = coerce_version(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return ComparisonResult.GREATER if val1 > val2 else ComparisonResult.LESS

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = coerce_version(version)

    # Releases get (1,) so they sort after every pre-release of the same triple
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, v.prerelease)

    return (v.major, v.minor, v.patch, prerelease_key)
