"""Unit tests for version value object and extraction rules."""

import pytest
from hypothesis import given, strategies as st

from electron_installer.domain.exceptions import InvalidVersionError
from electron_installer.domain.version import (
    ElectronVersion,
    compare_versions,
    extract_version,
    sort_versions_descending,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.ElectronVersion")
class TestElectronVersion:
    """Test ElectronVersion value object."""

    def test_parse_triple(self):
        """Test parsing a plain X.Y.Z version."""
        assert ElectronVersion.from_string("1.6.2").segments == (1, 6, 2)

    def test_parse_strips_leading_v(self):
        """Test that a 'v' prefix is ignored."""
        assert ElectronVersion.from_string("v1.4.15") == ElectronVersion.from_string("1.4.15")

    def test_reject_non_numeric(self):
        """Test that non-numeric versions are rejected."""
        with pytest.raises(InvalidVersionError, match="expected dotted numbers"):
            ElectronVersion.from_string("1.6.x")

    def test_reject_empty(self):
        """Test that an empty string is rejected."""
        with pytest.raises(InvalidVersionError):
            ElectronVersion.from_string("")

    def test_reject_prerelease_suffix(self):
        """Test that prerelease tags are not dotted numeric versions."""
        with pytest.raises(InvalidVersionError):
            ElectronVersion.from_string("2.0.0-beta.1")

    def test_numeric_ordering(self):
        """Test that segments compare numerically, not lexically."""
        assert ElectronVersion.from_string("1.10.0") > ElectronVersion.from_string("1.9.9")

    def test_missing_segments_compare_as_zero(self):
        """Test that 1.4 equals 1.4.0 and hashes the same."""
        short = ElectronVersion.from_string("1.4")
        long = ElectronVersion.from_string("1.4.0")
        assert short == long
        assert hash(short) == hash(long)

    def test_normalized_has_four_segments(self):
        """Test the normalized form used by package descriptors."""
        assert ElectronVersion.from_string("1.6.2").normalized() == "1.6.2.0"

    def test_str(self):
        """Test string representation."""
        assert str(ElectronVersion.from_string("v1.6.2")) == "1.6.2"

    def test_frozen_dataclass(self):
        """Test that ElectronVersion is immutable."""
        version = ElectronVersion.from_string("1.6.2")
        with pytest.raises(AttributeError):
            version.segments = (2,)  # type: ignore

    def test_compare_versions(self):
        """Test the string comparison helper."""
        assert compare_versions("1.4.15", "1.6.2") == -1
        assert compare_versions("1.6.2", "1.6.2") == 0
        assert compare_versions("1.6.2", "1.4.15") == 1


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Policy.VersionExtraction")
class TestExtractVersion:
    """Test extraction of a concrete version from declared versions."""

    def test_plain_triple(self):
        """Test that a plain version is returned unchanged."""
        assert extract_version("1.4.15", None) == "1.4.15"

    def test_constraint_operators_are_ignored(self):
        """Test that the triple is taken out of a constraint string."""
        assert extract_version("^1.4.15", None) == "1.4.15"
        assert extract_version(">=1.6.2", None) == "1.6.2"

    def test_patch_level_suffix(self):
        """Test that a -pNN patch level is dropped."""
        assert extract_version("1.9.8-p02", None) == "1.9.8"

    def test_dev_master_resolves_to_latest(self):
        """Test that dev-master resolves to the latest known version."""
        assert extract_version("dev-master", "1.6.2") == "1.6.2"

    def test_commit_reference(self):
        """Test that an inline alias after a commit reference is used."""
        assert extract_version("dev-master#abc123 as 1.4.13", "1.6.2") == "1.4.13"

    def test_multi_digit_segments(self):
        """Test that multi-digit segments are extracted whole."""
        assert extract_version("10.12.135", None) == "10.12.135"

    def test_no_match(self):
        """Test that strings without a version yield None."""
        assert extract_version("*", "1.6.2") is None
        assert extract_version("", "1.6.2") is None
        assert extract_version(None, "1.6.2") is None


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Policy.VersionLadder")
class TestSortVersionsDescending:
    """Test sorting raw version lists."""

    def test_sorts_highest_first(self):
        """Test numeric descending order."""
        assert sort_versions_descending(["1.4.15", "1.10.0", "1.6.2"]) == [
            "1.10.0",
            "1.6.2",
            "1.4.15",
        ]

    def test_drops_noise(self):
        """Test that empty, None and unparsable entries are dropped."""
        assert sort_versions_descending(["", None, "nightly", "v1.6.2", "2.0.0-beta.1"]) == [
            "1.6.2"
        ]

    def test_deduplicates(self):
        """Test that equal versions appear once."""
        assert sort_versions_descending(["1.6.2", "v1.6.2", "1.6.2"]) == ["1.6.2"]


@pytest.mark.tier(2)
@pytest.mark.tra("Domain.Policy.VersionLadder")
class TestVersionProperties:
    """Property-based tests for version ordering."""

    versions = st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=4).map(
        lambda parts: ".".join(str(p) for p in parts)
    )

    @given(raw=st.lists(versions, max_size=20))
    def test_sorted_output_is_strictly_descending(self, raw):
        """Test that every ladder is strictly descending and duplicate-free."""
        ladder = [ElectronVersion.from_string(v) for v in sort_versions_descending(raw)]
        assert all(a > b for a, b in zip(ladder, ladder[1:]))

    @given(left=versions, right=versions)
    def test_comparison_is_antisymmetric(self, left, right):
        """Test that compare_versions(a, b) == -compare_versions(b, a)."""
        assert compare_versions(left, right) == -compare_versions(right, left)

    @given(major=st.integers(0, 99), minor=st.integers(0, 99), patch=st.integers(0, 999))
    def test_extract_is_identity_on_triples(self, major, minor, patch):
        """Test that extracting from X.Y.Z returns X.Y.Z."""
        version = f"{major}.{minor}.{patch}"
        assert extract_version(version, None) == version
