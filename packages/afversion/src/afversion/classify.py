# SPDX-License-Identifier: MIT
"""Derived facts about a parsed version.

Pre-release classes are assigned by a literal, case-sensitive prefix test
against the raw pre-release string: ``alphabet.1`` is an alpha, ``Alpha.1``
is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .semver import Version, coerce_version


class VersionType(str, Enum):
    RELEASE = "release"
    PRERELEASE = "prerelease"


class PrereleaseClass(str, Enum):
    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"
    OTHER = "other"
    NONE = "none"


class Stability(str, Enum):
    STABLE = "stable"
    UNSTABLE = "unstable"


class ApiCompatibility(str, Enum):
    SEMANTIC = "semantic"
    NONE = "none"


# Checked in order; the first matching prefix wins
_PRERELEASE_PREFIXES = (
    ("alpha", PrereleaseClass.ALPHA),
    ("beta", PrereleaseClass.BETA),
    ("rc", PrereleaseClass.RC),
)


@dataclass(frozen=True, slots=True)
class Classification:
    """Classification of a single version.

    Attributes:
        version_type: release or prerelease
        prerelease_class: alpha, beta, rc, other, or none for a release
        stability: unstable when the major version is zero
        api_compatibility: none when unstable, semantic otherwise
    """

    version_type: VersionType
    prerelease_class: PrereleaseClass
    stability: Stability
    api_compatibility: ApiCompatibility


def prerelease_class(version: Union[str, Version]) -> PrereleaseClass:
    """Return the pre-release class of a version.

    Examples:
        >>> prerelease_class("1.0.0-rc.1")
        <PrereleaseClass.RC: 'rc'>
        >>> prerelease_class("1.0.0")
        <PrereleaseClass.NONE: 'none'>
    """
    v = coerce_version(version)
    if v.prerelease is None:
        return PrereleaseClass.NONE

    for prefix, klass in _PRERELEASE_PREFIXES:
        if v.prerelease.startswith(prefix):
            return klass
    return PrereleaseClass.OTHER


def classify(version: Union[str, Version]) -> Classification:
    """Classify a version by release type, pre-release class and stability.

    Args:
        version: Version string or Version object

    Returns:
        A Classification for the version

    Raises:
        InvalidVersionError: If a version string is invalid
    """
    v = coerce_version(version)
    unstable = v.major == 0

    return Classification(
        version_type=VersionType.PRERELEASE if v.is_prerelease else VersionType.RELEASE,
        prerelease_class=prerelease_class(v),
        stability=Stability.UNSTABLE if unstable else Stability.STABLE,
        api_compatibility=ApiCompatibility.NONE if unstable else ApiCompatibility.SEMANTIC,
    )


def is_stable_api(version: Union[str, Version]) -> bool:
    """Return True if the version carries API compatibility guarantees.

    Stricter than the stability tier: a pre-release of a stable major
    version has no stable API either.
    """
    v = coerce_version(version)
    return v.major != 0 and not v.is_prerelease
