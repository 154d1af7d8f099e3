# SPDX-License-Identifier: MIT
"""Integration test: release version flow.

Tests the flow a release pipeline runs through the afversion command:
1. Parsing the current tag
2. Computing the next version for a bump
3. Comparing and sequence-checking the proposed tag against the current one
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from afversion import Version, compare_versions, parse_version, validate_sequence
from afversion_cli.main import cli


def _pairs(output: str) -> dict[str, str]:
    return dict(line.split("=", 1) for line in output.splitlines() if "=" in line)


class TestReleaseFlow:
    """Integration tests for the release version flow."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    @pytest.mark.parametrize(
        "current_tag, kind, next_tag",
        [
            ("v0.1.0-alpha.1", "patch", "v0.1.1"),
            ("v0.9.3", "minor", "v0.10.0"),
            ("v1.4.2", "major", "v2.0.0"),
        ],
    )
    def test_bump_flow(self, runner: CliRunner, current_tag: str, kind: str, next_tag: str):
        """Parse, bump, then compare and validate the proposed tag."""
        parsed = runner.invoke(cli, ["parse", current_tag])
        assert parsed.exit_code == 0
        full_version = _pairs(parsed.stdout)["FULL_VERSION"]

        bumped = runner.invoke(cli, ["increment", full_version, kind])
        assert bumped.exit_code == 0
        assert _pairs(bumped.stdout)["NEXT_TAG_VERSION"] == next_tag

        compared = runner.invoke(cli, ["compare", next_tag, current_tag])
        assert _pairs(compared.stdout)["COMPARISON"] == "greater"

        # Sequence check accepts current >= next, so the new tag goes first
        validated = runner.invoke(cli, ["validate", next_tag, current_tag])
        assert validated.exit_code == 0
        assert _pairs(validated.stdout)["SEQUENCE_VALID"] == "true"

    def test_cli_matches_library(self, runner: CliRunner):
        """The command prints exactly what the library computes."""
        versions = ["1.0.0-alpha", "1.0.0-beta", "1.0.0-rc.1", "1.0.0", "1.0.1"]

        for a in versions:
            for b in versions:
                result = runner.invoke(cli, ["compare", a, b])
                assert _pairs(result.stdout)["COMPARISON"] == compare_versions(a, b).value

                result = runner.invoke(cli, ["validate", a, b])
                expected = validate_sequence(a, b)
                assert _pairs(result.stdout)["SEQUENCE_VALID"] == str(expected.valid).lower()

    def test_tag_round_trip(self, runner: CliRunner):
        """TAG_VERSION from parse feeds back into parse unchanged."""
        first = _pairs(runner.invoke(cli, ["parse", "2.0.0-beta.2"]).stdout)
        second = _pairs(runner.invoke(cli, ["parse", first["TAG_VERSION"]]).stdout)

        assert first == second
        assert parse_version(first["TAG_VERSION"]) == Version(2, 0, 0, "beta.2")
