# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_comparator import (
    Identifier,
    InvalidArgumentError,
    InvalidVersionError,
    compare_identifiers,
    compare_versions,
    eq,
    ge,
    gt,
    le,
    lt,
    ne,
    parse_version,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexical(self):
        """Test that components compare as integers."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.2.3-alpha", "1.2.3") == -1
        assert compare_versions("1.2.3", "1.2.3-alpha") == 1

    def test_main_triple_wins_over_prerelease(self):
        """Test that the main triple decides before pre-release."""
        assert compare_versions("1.2.4-alpha", "1.2.3") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.2.3+build1", "1.2.3+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_loose_strings(self):
        """Test that loose parsing applies to string arguments."""
        assert compare_versions("v1.0.0", "=1.0.0", loose=True) == 0
        with pytest.raises(InvalidVersionError):
            compare_versions("v1.0.0", "1.0.0")

    def test_none_rejected(self):
        """Test that None operands are rejected."""
        with pytest.raises(InvalidArgumentError):
            compare_versions(None, "1.0.0")  # type: ignore


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_semver_spec_chain(self):
        """Test the precedence example from the SemVer 2.0.0 text."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_versions(versions[i], versions[i + 1]) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1  # Numeric comparison

    def test_numeric_before_alphanumeric(self):
        """Test that numeric identifiers sort before alphanumeric ones."""
        assert compare_versions("1.2.3-1", "1.2.3-alpha") == -1
        assert compare_versions("1.2.3-alpha", "1.2.3-1") == 1

    def test_ordinal_string_order(self):
        """Test that alphanumeric identifiers use ordinal comparison."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-10a", "1.0.0-9a") == -1

    def test_shorter_prefix_is_lesser(self):
        """Test that fewer identifiers sort first when the prefix matches."""
        assert compare_versions("1.2.3-alpha", "1.2.3-alpha.1") == -1
        assert compare_versions("1.2.3-alpha.1", "1.2.3-alpha") == 1
        assert compare_versions("1.2.3-alpha.1", "1.2.3-alpha.1") == 0


class TestCompareIdentifiers:
    """Tests for compare_identifiers function."""

    def test_numeric(self):
        assert compare_identifiers(Identifier.of(2), Identifier.of(10)) == -1
        assert compare_identifiers(Identifier.of(3), Identifier.of(3)) == 0

    def test_alpha(self):
        assert compare_identifiers(Identifier.parse("b"), Identifier.parse("a")) == 1

    def test_mixed(self):
        assert compare_identifiers(Identifier.parse("99"), Identifier.parse("a")) == -1
        assert compare_identifiers(Identifier.parse("a"), Identifier.parse("99")) == 1


class TestVersionMethods:
    """Tests for Version comparison methods and operators."""

    def test_named_methods(self):
        """Test lt/le/gt/ge/eq/ne methods."""
        a = parse_version("1.2.3-alpha")
        b = parse_version("1.2.3")
        assert a.lt(b) and a.le(b) and a.ne(b)
        assert b.gt(a) and b.ge(a)
        assert b.eq(parse_version("1.2.3+build"))

    def test_compare_returns_sign(self):
        """Test that compare returns -1, 0 or 1."""
        assert parse_version("1.0.0").compare(parse_version("5.0.0")) == -1
        assert parse_version("5.0.0").compare(parse_version("1.0.0")) == 1
        assert parse_version("1.0.0").compare(parse_version("1.0.0")) == 0

    def test_rich_comparisons(self):
        """Test Python operators between versions."""
        assert parse_version("1.2.3-alpha") < parse_version("1.2.3")
        assert parse_version("2.0.0") > parse_version("1.9.9")
        assert parse_version("1.2.3+a") == parse_version("1.2.3+b")
        assert parse_version("1.2.3") <= parse_version("1.2.3+x")

    def test_no_implicit_string_conversion(self):
        """Test that strings are never compared implicitly."""
        v = parse_version("1.2.3")
        assert (v == "1.2.3") is False
        with pytest.raises(TypeError):
            v < "1.2.4"  # type: ignore

    def test_compare_none_rejected(self):
        """Test that comparing against None raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_version("1.2.3").compare(None)  # type: ignore
        with pytest.raises(InvalidArgumentError):
            parse_version("1.2.3").lt(None)  # type: ignore

    def test_sorting(self):
        """Test that sorted() uses precedence."""
        versions = [parse_version(s) for s in ["1.0.0", "1.0.0-rc.1", "0.9.0"]]
        assert [str(v) for v in sorted(versions)] == ["0.9.0", "1.0.0-rc.1", "1.0.0"]


class TestCompareText:
    """Tests for comparing against a raw string."""

    def test_compare_text(self):
        """Test that the string is parsed and compared."""
        assert parse_version("1.2.3").compare_text("1.2.4") == -1
        assert parse_version("1.2.3").compare_text("1.2.3+build") == 0

    def test_uses_receiver_strictness(self):
        """Test that the receiver's loose flag is used for the operand."""
        assert parse_version("1.2.3", loose=True).compare_text("v1.2.3") == 0
        with pytest.raises(InvalidArgumentError):
            parse_version("1.2.3").compare_text("v1.2.3")

    def test_parse_failure_wrapped(self):
        """Test that parse failures surface as InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_version("1.2.3").compare_text("not-a-version")
        assert isinstance(exc_info.value.__cause__, InvalidVersionError)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_rejected(self, text):
        """Test that empty operands are rejected."""
        with pytest.raises(InvalidArgumentError):
            parse_version("1.2.3").compare_text(text)


class TestRelationalHelpers:
    """Tests for module-level lt/le/gt/ge/eq/ne."""

    def test_helpers(self):
        a = parse_version("1.0.0")
        b = parse_version("1.0.1")
        assert lt(a, b) and le(a, b) and ne(a, b)
        assert gt(b, a) and ge(b, a)
        assert eq(a, parse_version("1.0.0+meta"))

    @pytest.mark.parametrize("helper", [lt, le, gt, ge, eq, ne])
    def test_none_rejected(self, helper):
        """Test that every helper rejects absent operands."""
        v = parse_version("1.0.0")
        with pytest.raises(InvalidArgumentError):
            helper(v, None)
        with pytest.raises(InvalidArgumentError):
            helper(None, v)


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_mixed(self):
        """Test sorting mixed versions."""
        versions = [
            "2.0.0",
            "1.0.0-alpha",
            "1.0.0",
            "1.1.0-beta",
            "1.0.0-1",
            "1.0.0-alpha.1",
        ]
        assert sorted(versions, key=version_key) == [
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0",
            "1.1.0-beta",
            "2.0.0",
        ]

    def test_build_ignored(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")


class TestEqualityAndHashing:
    """Tests for Version equality and hashing."""

    def test_build_does_not_affect_hash(self):
        """Test that versions equal up to build metadata hash alike."""
        v1 = parse_version("1.2.3+build1")
        v2 = parse_version("1.2.3+build2")
        assert v1 == v2
        assert hash(v1) == hash(v2)
        assert len({v1, v2}) == 1

    def test_loose_leading_zero_equal(self):
        """Test that loose leading zeros normalize for equality."""
        assert parse_version("1.2.3-01", loose=True) == parse_version("1.2.3-1")
