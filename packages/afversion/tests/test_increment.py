# SPDX-License-Identifier: MIT
"""Unit tests for version incrementing."""

import pytest
from hypothesis import given, settings, strategies as st

from afversion import (
    ComparisonResult,
    IncrementKind,
    InvalidIncrementKindError,
    InvalidVersionError,
    Version,
    compare_versions,
    increment_version,
    parse_version,
)


any_version = st.builds(
    Version,
    major=st.integers(min_value=0, max_value=10_000),
    minor=st.integers(min_value=0, max_value=10_000),
    patch=st.integers(min_value=0, max_value=10_000),
    prerelease=st.none() | st.from_regex(r"[a-zA-Z0-9.-]{1,10}", fullmatch=True),
)


class TestIncrementVersion:
    """Tests for increment_version function."""

    @pytest.mark.parametrize(
        "version, kind, expected",
        [
            ("1.2.3", "patch", "1.2.4"),
            ("1.2.3", "minor", "1.3.0"),
            ("1.2.3", "major", "2.0.0"),
            ("0.1.0", "patch", "0.1.1"),
            ("v0.9.9", "minor", "0.10.0"),
            ("0.1.0-alpha.1", "patch", "0.1.1"),
            ("1.0.0-rc.1", "major", "2.0.0"),
            ("1.4.2-beta", "minor", "1.5.0"),
        ],
    )
    def test_bumps(self, version, kind, expected):
        """Test each bump kind, including from pre-releases."""
        assert increment_version(version, kind).full_version == expected

    def test_enum_kind(self):
        """Test passing an IncrementKind member."""
        assert increment_version("1.2.3", IncrementKind.MINOR) == Version(1, 3, 0)

    def test_returns_new_value(self):
        """Test that the input version is untouched."""
        v = parse_version("1.2.3")
        nxt = increment_version(v, "patch")
        assert v == Version(1, 2, 3)
        assert nxt is not v

    def test_tag_version(self):
        """Test the tag rendering of the next version."""
        assert increment_version("1.2.3", "major").tag_version == "v2.0.0"

    @pytest.mark.parametrize("kind", ["build", "MAJOR", "", "prerelease", None])
    def test_invalid_kind(self, kind):
        """Test that unknown kinds are rejected, not ignored."""
        with pytest.raises(InvalidIncrementKindError) as exc_info:
            increment_version("1.2.3", kind)
        assert exc_info.value.kind == kind
        assert exc_info.value.valid_kinds == ("major", "minor", "patch")

    def test_invalid_kind_is_value_error(self):
        """Test that the kind error is a ValueError."""
        with pytest.raises(ValueError):
            increment_version("1.2.3", "huge")

    def test_invalid_version(self):
        """Test that a malformed version raises."""
        with pytest.raises(InvalidVersionError):
            increment_version("1.2", "patch")


class TestIncrementProperties:
    """Property tests for incrementing."""

    @given(v=any_version, kind=st.sampled_from(list(IncrementKind)))
    @settings(max_examples=200)
    def test_monotonic(self, v, kind):
        """Every bump yields a strictly greater release."""
        nxt = increment_version(v, kind)
        assert compare_versions(nxt, v) is ComparisonResult.GREATER
        assert nxt.prerelease is None

    @given(v=any_version)
    @settings(max_examples=100)
    def test_patch_keeps_major_minor(self, v):
        nxt = increment_version(v, "patch")
        assert (nxt.major, nxt.minor, nxt.patch) == (v.major, v.minor, v.patch + 1)
