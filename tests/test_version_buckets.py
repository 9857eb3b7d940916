"""Tests for per-range latest version selection."""

import semantic_version

from src.versioning.buckets import parse_lenient, select_latest
from src.versioning.ranges import ANY_VERSION, parse_range


def ranges(*texts):
    return [parse_range(t) for t in texts]


def latest(results):
    return [version for _, version in results]


class TestParseLenient:
    """Lenient parsing of published version strings."""

    def test_full_version(self):
        assert parse_lenient("1.2.3") == semantic_version.Version("1.2.3")

    def test_missing_patch(self):
        assert parse_lenient("1.337") == semantic_version.Version("1.337.0")

    def test_major_only(self):
        assert parse_lenient("7") == semantic_version.Version("7.0.0")

    def test_pre_release(self):
        assert parse_lenient("1.1.0-alpha01") == semantic_version.Version("1.1.0-alpha01")

    def test_numeric_pre_release_with_leading_zero(self):
        assert parse_lenient("1.0.0-rc.01") == semantic_version.Version("1.0.0-rc.1")
        assert parse_lenient("2.1-01+build.007") == semantic_version.Version("2.1.0-1+build.007")

    def test_leading_v_and_whitespace(self):
        assert parse_lenient(" v2.0.1 ") == semantic_version.Version("2.0.1")

    def test_not_a_version(self):
        for text in ("", "   ", "v", "garbage", "latest"):
            assert parse_lenient(text) is None, text


class TestSelectLatest:
    """Exclusive bucketing of versions by ordered ranges."""

    def test_empty_versions(self):
        assert latest(select_latest([ANY_VERSION], [])) == [None]

    def test_single_version(self):
        assert latest(select_latest([ANY_VERSION], ["1.0.0"])) == ["1.0.0"]

    def test_select_latest(self):
        assert latest(select_latest([ANY_VERSION], ["1.0.0", "1.3.37"])) == ["1.3.37"]

    def test_order_of_versions_does_not_matter(self):
        assert latest(select_latest([ANY_VERSION], ["1.3.37", "1.0.0", "1.2.0"])) == ["1.3.37"]

    def test_lenient_version_parsing(self):
        assert latest(select_latest([ANY_VERSION], ["1.0.0", "1.337"])) == ["1.337"]

    def test_lenient_version_compared_with_strict(self):
        assert latest(select_latest([ANY_VERSION], ["1.337", "1.337.1"])) == ["1.337.1"]

    def test_original_text_is_reported(self):
        assert latest(select_latest([ANY_VERSION], ["v2.1", "2.0.0"])) == ["v2.1"]

    def test_group_on_ranges(self):
        results = select_latest(ranges("1.x", "2.x"), ["1.0.0", "1.2.3", "2.0.0", "2.1337.42"])
        assert latest(results) == ["1.2.3", "2.1337.42"]

    def test_skip_unmatched_ranges(self):
        results = select_latest(ranges("1.x", "42.x", "2.x"), ["1.0.0", "2.0.0"])
        assert latest(results) == ["1.0.0", None, "2.0.0"]

    def test_earlier_range_claims_overlapping_versions(self):
        results = select_latest(ranges("^1", "=1.2.3"), ["1.0.42", "1.2.3"])
        assert latest(results) == ["1.2.3", None]

    def test_narrow_range_first(self):
        results = select_latest(ranges("~1.1", "~1.3", "1"), ["1.1.0", "1.1.6", "1.3.5", "1.6.0", "1.0.0"])
        assert latest(results) == ["1.1.6", "1.3.5", "1.6.0"]

    def test_results_pair_ranges_in_order(self):
        given = ranges("2.x", "1.x")
        results = select_latest(given, ["1.0.0"])
        assert [r for r, _ in results] == given
        assert latest(results) == [None, "1.0.0"]

    def test_duplicate_ranges_are_kept(self):
        results = select_latest(ranges("1.x", "1.x"), ["1.0.0"])
        assert latest(results) == ["1.0.0", None]

    def test_unmatched_versions_are_dropped(self):
        assert latest(select_latest(ranges("^3"), ["1.0.0", "2.0.0"])) == [None]

    def test_malformed_versions_are_ignored(self):
        results = select_latest([ANY_VERSION], ["garbage", "", "latest", "1.0.0"])
        assert latest(results) == ["1.0.0"]

    def test_only_malformed_versions(self):
        assert latest(select_latest(ranges("1.x"), ["garbage", "release"])) == [None]


class TestEmptyRanges:
    """An empty range list behaves like a single any-version range."""

    def test_single_row(self):
        results = select_latest([], ["1.0.0", "2.0.0"])
        assert results == [(ANY_VERSION, "2.0.0")]

    def test_same_as_any_version(self):
        versions = ["1.0.0", "1.1.0-alpha01", "0.9"]
        for include in (False, True):
            assert select_latest([], versions, include) == select_latest([ANY_VERSION], versions, include)

    def test_accepts_tuple(self):
        assert latest(select_latest((), ["1.0.0"])) == ["1.0.0"]


class TestPreReleases:
    """Pre-release inclusion policy."""

    def test_skip_pre_release(self):
        results = select_latest(ranges("^1"), ["1.0.0", "1.1.0-alpha01"], include_pre_release=False)
        assert latest(results) == ["1.0.0"]

    def test_include_pre_release(self):
        results = select_latest(ranges("^1"), ["1.0.0", "1.1.0-alpha01"], include_pre_release=True)
        assert latest(results) == ["1.1.0-alpha01"]

    def test_default_is_exclusion(self):
        assert latest(select_latest([ANY_VERSION], ["1.0.0", "2.0.0-rc1"])) == ["1.0.0"]

    def test_release_beats_its_pre_release(self):
        results = select_latest([ANY_VERSION], ["2.0.0-rc1", "2.0.0"], include_pre_release=True)
        assert latest(results) == ["2.0.0"]

    def test_pre_release_matched_by_release_core(self):
        results = select_latest(ranges("~1.3", "^1"), ["1.3.5", "1.4.0-alpha02", "1.3.6-beta1"], True)
        assert latest(results) == ["1.3.6-beta1", "1.4.0-alpha02"]

    def test_zero_padded_pre_release_is_kept(self):
        results = select_latest([ANY_VERSION], ["1.0.0", "1.1.0-rc.01", "1.1.0-rc.02"], True)
        assert latest(results) == ["1.1.0-rc.02"]

    def test_pre_release_only(self):
        versions = ["1.0.0-alpha1", "1.0.0-alpha2"]
        assert latest(select_latest([ANY_VERSION], versions, False)) == [None]
        assert latest(select_latest([ANY_VERSION], versions, True)) == ["1.0.0-alpha2"]
