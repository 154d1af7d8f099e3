# SPDX-License-Identifier: MIT
"""Version parsing, classification, comparison and bumping for AgentFlow releases.

This package is the single implementation of the release version rules used
by the ``afversion`` command and by release automation.

Example:
    >>> from afversion import classify, compare_versions, increment_version, parse_version
    >>>
    >>> version = parse_version("v0.1.0-alpha.1")
    >>> version.full_version
    '0.1.0-alpha.1'
    >>> classify(version).stability.value
    'unstable'
    >>>
    >>> compare_versions("1.0.0", "1.0.0-rc.1").value
    'greater'
    >>> increment_version("1.2.3", "major").tag_version
    'v2.0.0'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_version,
    strip_prefix,
    InvalidVersionError,
    VERSION_PATTERN,
    FORMAT_HINT,
    FORMAT_EXAMPLES,
)
from .classify import (
    ApiCompatibility,
    Classification,
    PrereleaseClass,
    Stability,
    VersionType,
    classify,
    is_stable_api,
    prerelease_class,
)
from .compare import (
    ComparisonResult,
    compare_versions,
    version_key,
)
from .increment import (
    IncrementKind,
    InvalidIncrementKindError,
    VALID_INCREMENT_KINDS,
    increment_version,
)
from .sequence import (
    SequenceResult,
    SequenceType,
    validate_sequence,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "strip_prefix",
    "InvalidVersionError",
    "VERSION_PATTERN",
    "FORMAT_HINT",
    "FORMAT_EXAMPLES",
    # Classification
    "ApiCompatibility",
    "Classification",
    "PrereleaseClass",
    "Stability",
    "VersionType",
    "classify",
    "is_stable_api",
    "prerelease_class",
    # Version comparison
    "ComparisonResult",
    "compare_versions",
    "version_key",
    # Incrementing
    "IncrementKind",
    "InvalidIncrementKindError",
    "VALID_INCREMENT_KINDS",
    "increment_version",
    # Sequence validation
    "SequenceResult",
    "SequenceType",
    "validate_sequence",
]
