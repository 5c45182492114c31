# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from static_version import (
    QUALIFIER_WEIGHTS,
    VERSION_COMPARATOR,
    VersionComparator,
    compare_versions,
    latest_version,
    parse_version,
    sort_versions,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that identical strings compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_equal_copies(self):
        """Test equal content held in different string objects."""
        v = "1.2.3-rc-1"
        copy = "".join(list(v))
        assert compare_versions(v, copy) == 0

    def test_empty_strings(self):
        """Test that the empty string equals itself."""
        assert compare_versions("", "") == 0

    def test_numeric_difference(self):
        """Test numeric segments compare by value, not text."""
        assert compare_versions("1.9", "1.10") == -1
        assert compare_versions("1.10", "1.9") == 1
        assert compare_versions("2.0", "10.0") == -1

    def test_numeric_beats_text(self):
        """Test that a number outranks text at the same position."""
        assert compare_versions("1.2.3", "1.2.a") == 1
        assert compare_versions("1.2.a", "1.2.3") == -1

    def test_numeric_value_equality(self):
        """Test that leading zeros do not change the ordering."""
        assert compare_versions("1.0", "01.0") == 0
        assert compare_versions("1.01", "1.1") == 0

    def test_separator_kind_is_ignored(self):
        """Test that separators only split and are not compared."""
        assert compare_versions("1.0", "1-0") == 0
        assert compare_versions("1.0a", "1.0-a") == 0

    def test_trailing_number_is_newer(self):
        """Test that an extra numeric segment makes a version newer."""
        assert compare_versions("1.2.1", "1.2") == 1
        assert compare_versions("1.2", "1.2.1") == -1
        assert compare_versions("1.0.0", "1.0") == 1

    def test_trailing_qualifier_is_older(self):
        """Test that an extra text segment makes a version older."""
        assert compare_versions("1.2-beta", "1.2") == -1
        assert compare_versions("1.2", "1.2-beta") == 1

    def test_trailing_recognized_qualifier_is_older(self):
        """Test that even post-release qualifiers lose to the bare version."""
        assert compare_versions("1.0-final", "1.0") == -1
        assert compare_versions("1.0-sp", "1.0") == -1

    def test_empty_against_number(self):
        """Test the empty string against a number and a word."""
        assert compare_versions("", "1") == -1
        assert compare_versions("", "a") == 1

    def test_empty_segment(self):
        """Test that an empty segment ranks as text."""
        assert compare_versions("1..2", "1.0.2") == -1
        assert compare_versions("1..2", "1.a.2") == -1

    def test_overflowing_segment_ranks_as_text(self):
        """Test that a segment beyond 64 bits loses to a number."""
        assert compare_versions("1.99999999999999999999", "1.5") == -1
        assert compare_versions("1.9223372036854775807", "1.9223372036854775806") == 1

    def test_implicit_boundaries(self):
        """Test versions split at digit/letter boundaries."""
        assert compare_versions("7.0.12beta5", "7.0.12") == -1
        assert compare_versions("7.0.12beta5", "7.0.12beta4") == 1
        assert compare_versions("1.0-rc1", "1.0-rc2") == -1

    def test_parsed_version_arguments(self):
        """Test comparison with ParsedVersion objects."""
        assert compare_versions(parse_version("1.0"), parse_version("2.0")) == -1
        assert compare_versions(parse_version("1.0"), "1.0") == 0
        assert compare_versions("1.0.1", parse_version("1.0")) == 1

    def test_non_ascii_text(self):
        """Test that non-ASCII text compares by code point."""
        assert compare_versions("1.0-é", "1.0-z") == 1
        assert compare_versions("1.0-é", "1.0-é") == 0


class TestQualifierOrdering:
    """Tests for recognized qualifier weights."""

    def test_weights(self):
        """Test the fixed qualifier table."""
        assert dict(QUALIFIER_WEIGHTS) == {
            "dev": -1,
            "rc": 1,
            "snapshot": 2,
            "final": 3,
            "ga": 4,
            "release": 5,
            "sp": 6,
        }

    def test_table_is_read_only(self):
        """Test that the qualifier table cannot be modified."""
        with pytest.raises(TypeError):
            QUALIFIER_WEIGHTS["beta"] = 0  # type: ignore[index]

    def test_qualifier_chain(self):
        """Test each qualifier ranks below the next."""
        chain = [
            "1.0-dev",
            "1.0-rc",
            "1.0-snapshot",
            "1.0-final",
            "1.0-ga",
            "1.0-release",
            "1.0-sp",
        ]
        for i in range(len(chain) - 1):
            assert (
                compare_versions(chain[i], chain[i + 1]) == -1
            ), f"{chain[i]} should be < {chain[i + 1]}"
            assert compare_versions(chain[i + 1], chain[i]) == 1

    def test_named_pairs(self):
        """Test qualifier pairs from common release trains."""
        assert compare_versions("1.0-dev", "1.0-rc") == -1
        assert compare_versions("1.0-rc", "1.0-final") == -1
        assert compare_versions("1.0-final", "1.0-release") == -1
        assert compare_versions("1.0-ga", "1.0-release") == -1

    def test_dev_below_unknown(self):
        """Test that dev ranks below an unrecognized qualifier."""
        assert compare_versions("1.0-dev", "1.0-whatever") == -1
        assert compare_versions("1.0-whatever", "1.0-dev") == 1

    def test_unknown_below_rc(self):
        """Test that unrecognized qualifiers rank below rc."""
        assert compare_versions("1.0-beta", "1.0-rc") == -1
        assert compare_versions("1.0-rc", "1.0-beta") == 1
        assert compare_versions("1.0-zzz", "1.0-snapshot") == -1

    def test_qualifiers_ignore_case(self):
        """Test that qualifier lookup ignores ASCII case."""
        assert compare_versions("1.0-SNAPSHOT", "1.0-rc") == 1
        assert compare_versions("1.0-Final", "1.0-RC") == 1
        assert compare_versions("1.0-RC", "1.0-rc") == 0

    def test_same_qualifier_weight_stops_comparison(self):
        """Test that equal-weight qualifiers end the comparison as equal."""
        assert compare_versions("1.0-RC.1", "1.0-rc.2") == 0

    def test_unknown_text_is_case_sensitive(self):
        """Test that unrecognized text compares case-sensitively."""
        assert compare_versions("1.0-alpha", "1.0-beta") == -1
        assert compare_versions("1.0-beta", "1.0-alpha") == 1
        assert compare_versions("1.0-Beta", "1.0-alpha") == -1


class TestSorting:
    """Tests for sorting helpers."""

    def test_release_train_ordering(self):
        """Test the ordering of a full release train."""
        versions = ["1.0", "1.0.1", "1.0-rc", "1.0-SNAPSHOT", "1.0-final"]
        assert sorted(versions, key=version_key) == [
            "1.0-rc",
            "1.0-SNAPSHOT",
            "1.0-final",
            "1.0",
            "1.0.1",
        ]

    def test_sort_versions(self):
        """Test sort_versions matches sorting with version_key."""
        versions = ["2.0", "1.0", "1.10", "1.9", "1.0-rc"]
        assert sort_versions(versions) == ["1.0-rc", "1.0", "1.9", "1.10", "2.0"]

    def test_sort_versions_reverse(self):
        """Test sorting newest first."""
        versions = ["1.0", "2.0", "1.0-rc"]
        assert sort_versions(versions, reverse=True) == ["2.0", "1.0", "1.0-rc"]

    def test_sort_is_stable(self):
        """Test that equal-ranked versions keep their input order."""
        assert sort_versions(["01.0", "1.0"]) == ["01.0", "1.0"]
        assert sort_versions(["1.0", "01.0"]) == ["1.0", "01.0"]

    def test_sort_accepts_iterables(self):
        """Test sorting from a generator."""
        assert sort_versions(v for v in ("1.1", "1.0")) == ["1.0", "1.1"]

    def test_latest_version(self):
        """Test picking the newest version."""
        assert latest_version(["1.0-SNAPSHOT", "1.0", "0.9", "1.0-rc"]) == "1.0"

    def test_latest_version_first_of_equals(self):
        """Test that the first of equal-ranked versions wins."""
        assert latest_version(["1.0", "01.0"]) == "1.0"

    def test_latest_version_empty(self):
        """Test that no versions give no latest version."""
        assert latest_version([]) is None


class TestVersionComparator:
    """Tests for the comparator object."""

    def test_callable(self):
        """Test calling the comparator directly."""
        assert VERSION_COMPARATOR("1.0", "1.0.1") == -1
        assert VERSION_COMPARATOR("1.0.1", "1.0") == 1
        assert VERSION_COMPARATOR("1.0", "1.0") == 0

    def test_key(self):
        """Test the comparator's sort key."""
        assert sorted(["1.1", "1.0"], key=VERSION_COMPARATOR.key) == ["1.0", "1.1"]

    def test_max_and_min(self):
        """Test newest and oldest helpers."""
        versions = ["1.0", "1.0-dev", "2.0-rc", "2.0"]
        assert VERSION_COMPARATOR.max(versions) == "2.0"
        assert VERSION_COMPARATOR.min(versions) == "1.0-dev"
        assert VERSION_COMPARATOR.min([]) is None

    def test_new_instances_behave_the_same(self):
        """Test that instances carry no state."""
        comparator = VersionComparator()
        assert comparator.sort(["1.1", "1.0"]) == VERSION_COMPARATOR.sort(["1.1", "1.0"])
        assert repr(comparator) == "VersionComparator()"
