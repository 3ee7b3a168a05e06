# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing and accessors."""

import pytest

from vsemver import (
    ParsedVersion,
    InvalidVersionError,
    parse,
    parse_version,
    is_valid,
    canonical,
    major,
    major_minor,
    prerelease,
    build,
)


class TestParse:
    """Tests for parse function."""

    def test_basic_version(self):
        """Test parsing basic vMAJOR.MINOR.PATCH version."""
        v = parse("v1.2.3")
        assert v == ParsedVersion(major="1", minor="2", patch="3")
        assert v.short == ""
        assert v.prerelease == ""
        assert v.build == ""

    def test_version_with_zeros(self):
        """Test parsing version with zero components."""
        v = parse("v0.0.0")
        assert (v.major, v.minor, v.patch) == ("0", "0", "0")

    def test_huge_numbers_kept_as_digits(self):
        """Test that components beyond machine integer range are preserved."""
        v = parse("v123456789012345678901234567890.0.1")
        assert v.major == "123456789012345678901234567890"

    def test_major_shorthand(self):
        """Test that vMAJOR implies .0.0."""
        v = parse("v1")
        assert (v.major, v.minor, v.patch) == ("1", "0", "0")
        assert v.short == ".0.0"

    def test_major_minor_shorthand(self):
        """Test that vMAJOR.MINOR implies .0."""
        v = parse("v1.2")
        assert (v.major, v.minor, v.patch) == ("1", "2", "0")
        assert v.short == ".0"

    def test_prerelease(self):
        """Test parsing pre-release suffix with its hyphen."""
        v = parse("v1.0.0-alpha.1")
        assert v.prerelease == "-alpha.1"
        assert v.build == ""
        assert v.is_prerelease is True

    def test_build(self):
        """Test parsing build suffix with its plus sign."""
        v = parse("v1.0.0+build.123")
        assert v.build == "+build.123"
        assert v.prerelease == ""
        assert v.is_prerelease is False

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse("v1.0.0-rc.1+build.456")
        assert v.prerelease == "-rc.1"
        assert v.build == "+build.456"

    def test_hyphens_in_identifiers(self):
        """Test that hyphens are valid identifier characters."""
        v = parse("v1.0.0-x-y--z.-1+--")
        assert v.prerelease == "-x-y--z.-1"
        assert v.build == "+--"

    def test_numeric_prerelease_zero(self):
        """Test that a lone 0 is an allowed numeric identifier."""
        assert parse("v1.0.0-0.3.7").prerelease == "-0.3.7"

    def test_alphanumeric_identifier_with_leading_zero(self):
        """Test that leading zeros are fine in non-numeric identifiers."""
        assert parse("v1.0.0-0a.01b").prerelease == "-0a.01b"

    def test_build_allows_leading_zeros(self):
        """Test that numeric build identifiers may have leading zeros."""
        assert parse("v1.0.0+001.0002").build == "+001.0002"

    def test_str_is_canonical(self):
        """Test ParsedVersion string representation."""
        assert str(parse("v1.2.3-alpha.1+build")) == "v1.2.3-alpha.1"
        assert str(parse("v4")) == "v4.0.0"

    def test_base_version(self):
        """Test base_version property."""
        assert parse("v1.2.3-alpha.1+build").base_version == "v1.2.3"

    def test_frozen(self):
        """Test that ParsedVersion is immutable."""
        v = parse("v1.0.0")
        with pytest.raises(AttributeError):
            v.major = "2"  # type: ignore

    def test_hashable(self):
        """Test that parsed versions can be used in sets."""
        assert len({parse("v1.0.0"), parse("v1.0.0")}) == 1


class TestInvalidVersions:
    """Tests for strings rejected by the parser."""

    @pytest.mark.parametrize(
        "version",
        [
            "",
            "v",
            "1.2.3",
            "V1.2.3",
            " v1.2.3",
            "v1.2.3 ",
            "v01.2.3",
            "v1.02.3",
            "v1.2.03",
            "v00",
            "v1.",
            "v1.2.",
            "v1..3",
            "v.1.2",
            "v-1.2.3",
            "v1.2.3.4",
            "v1.2.3-",
            "v1.2.3+",
            "v1.2.3-+meta",
            "v1.2.3-01",
            "v1.2.3-alpha.01",
            "v1.2.3-alpha.",
            "v1.2.3-.alpha",
            "v1.2.3-alpha..1",
            "v1.2.3+build.",
            "v1.2.3+build..1",
            "v1.2.3-alpha_1",
            "v1.2.3+build!",
            "v1.2.3-rc.1+build+again",
            "v1.2.3x",
            "v1x",
            "v1.2x",
            "v1-alpha",
            "v1.2-alpha",
            "v1+meta",
            "v1.2+meta",
            "v1.2.3-é",
            "v².0.0",
            "v1.١.0",
        ],
    )
    def test_invalid(self, version):
        """Test that malformed versions are rejected."""
        assert parse(version) is None
        assert is_valid(version) is False

    def test_non_string_input(self):
        """Test that non-string input is invalid rather than an error."""
        assert parse(123) is None  # type: ignore
        assert parse(None) is None  # type: ignore
        assert is_valid(b"v1.0.0") is False  # type: ignore


class TestParseVersion:
    """Tests for the raising parse_version variant."""

    def test_valid(self):
        """Test that valid input returns the same result as parse."""
        assert parse_version("v1.2.3-rc.1") == parse("v1.2.3-rc.1")

    def test_invalid_raises(self):
        """Test that invalid input raises InvalidVersionError."""
        with pytest.raises(InvalidVersionError) as exc_info:
            parse_version("1.2.3")
        assert exc_info.value.version == "1.2.3"
        assert "Invalid semantic version: 1.2.3" in str(exc_info.value)

    def test_empty_string(self):
        """Test that empty string raises with a specific message."""
        with pytest.raises(InvalidVersionError, match="cannot be empty"):
            parse_version("")

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionError, match="must be a string"):
            parse_version(None)  # type: ignore


class TestIsValid:
    """Tests for is_valid function."""

    @pytest.mark.parametrize(
        "version",
        ["v1.2.3", "v1.2.3-alpha.1", "v1.2.3+build5", "v1", "v1.2", "v0.0.0-0+0"],
    )
    def test_valid(self, version):
        """Test valid versions."""
        assert is_valid(version) is True

    @pytest.mark.parametrize("version", ["1.2.3", "v01.2.3", "v1.2.3-", "v1.2.3-01"])
    def test_invalid(self, version):
        """Test invalid versions."""
        assert is_valid(version) is False


class TestCanonical:
    """Tests for canonical function."""

    def test_major_shorthand(self):
        """Test that vMAJOR is expanded."""
        assert canonical("v1") == "v1.0.0"

    def test_major_minor_shorthand(self):
        """Test that vMAJOR.MINOR is expanded."""
        assert canonical("v1.2") == "v1.2.0"

    def test_build_stripped(self):
        """Test that build metadata is removed."""
        assert canonical("v1.2.3+meta") == "v1.2.3"
        assert canonical("v1.2.3-rc.1+meta.2") == "v1.2.3-rc.1"

    def test_full_version_unchanged(self):
        """Test that a full version without build is returned as is."""
        assert canonical("v1.2.3-beta.2") == "v1.2.3-beta.2"

    def test_invalid(self):
        """Test that invalid input gives None."""
        assert canonical("1.2.3") is None


class TestAccessors:
    """Tests for major, major_minor, prerelease and build."""

    def test_major(self):
        """Test extracting the major prefix."""
        assert major("v2.1.0") == "v2"
        assert major("v2") == "v2"
        assert major("2.1.0") is None

    def test_major_minor(self):
        """Test extracting the major.minor prefix."""
        assert major_minor("v2.1.0") == "v2.1"
        assert major_minor("v2.1") == "v2.1"
        assert major_minor("v2") == "v2.0"
        assert major_minor("v2.1.0-pre+meta") == "v2.1"
        assert major_minor("v2.1.x") is None

    def test_prerelease(self):
        """Test extracting the pre-release suffix."""
        assert prerelease("v2.1.0-pre+meta") == "-pre"
        assert prerelease("v2.1.0+meta") == ""
        assert prerelease("v2.1") == ""
        assert prerelease("v2.1.0-") is None

    def test_build(self):
        """Test extracting the build suffix."""
        assert build("v2.1.0+meta") == "+meta"
        assert build("v2.1.0-pre+meta.1") == "+meta.1"
        assert build("v2.1.0") == ""
        assert build("v2.1.0+") is None
