"""Tests for the Parser facade: VERS URIs and scheme dispatch."""

import pytest

from py_vers_range.errors import (
    ConstraintFormatError,
    FormatError,
    RangeSyntaxError,
    VersionFormatError,
)
from py_vers_range.models import Interval, Scheme, VersionRange
from py_vers_range.services import Parser


class TestParse:
    """Tests for Parser.parse."""

    def test_star_is_unbounded(self, parser):
        assert parser.parse("*").is_unbounded

    def test_bounds_and_exclusion(self, parser):
        version_range = parser.parse("vers:npm/>=1.0.0|!=1.5.0|<2.0.0")
        for version in ["1.4.0", "1.6.0"]:
            assert version_range.contains(version)
        for version in ["1.5.0", "2.0.0"]:
            assert not version_range.contains(version)

    def test_disjoint_exact_versions(self, parser):
        version_range = parser.parse("vers:pypi/=1.0.0|=2.0.0")
        assert len(version_range) == 2

    def test_implicit_equals(self, parser):
        assert parser.parse("vers:gem/1.2.3") == VersionRange.exact("1.2.3")

    def test_only_exclusions(self, parser):
        version_range = parser.parse("vers:npm/!=1.5.0")
        assert version_range.contains("1.0.0")
        assert not version_range.contains("1.5.0")

    def test_empty_body_is_empty_range(self, parser):
        assert parser.parse("vers:npm/").is_empty

    def test_star_body_is_unbounded(self, parser):
        assert parser.parse("vers:npm/*").is_unbounded

    def test_scheme_is_not_interpreted(self, parser):
        assert parser.parse("vers:anything/>=1.0") == parser.parse("vers:npm/>=1.0")

    @pytest.mark.parametrize("text", ["npm/>=1.0", "vers:npm", "vers:/>=1.0", "", ">=1.0"])
    def test_not_a_uri(self, parser, text):
        with pytest.raises(RangeSyntaxError):
            parser.parse(text)

    def test_bad_constraint(self, parser):
        with pytest.raises(ConstraintFormatError):
            parser.parse("vers:npm/>=")

    def test_bad_version(self, parser):
        with pytest.raises(VersionFormatError):
            parser.parse("vers:npm/>=abc")

    def test_errors_share_a_base(self, parser):
        with pytest.raises(FormatError):
            parser.parse("vers:npm/>=abc")


class TestParseNative:
    """Tests for scheme dispatch in Parser.parse_native."""

    def test_accepts_scheme_enum(self, parser):
        assert parser.parse_native("^1.2.3", Scheme.NPM) == parser.parse_native("^1.2.3", "npm")

    def test_scheme_name_is_case_insensitive(self, parser):
        assert parser.parse_native("[1.0,2.0)", "Maven") == parser.parse_native("[1.0,2.0)", "maven")

    def test_constraint_errors_become_range_syntax_errors(self, parser):
        with pytest.raises(RangeSyntaxError) as excinfo:
            parser.parse_native(">=1.0||<2.0", "cargo")
        assert isinstance(excinfo.value.__cause__, ConstraintFormatError)


class TestToVersString:
    """Tests for Parser.to_vers_string."""

    def test_bounded(self, parser):
        version_range = VersionRange([Interval(min="1.2.3", max="2.0.0", max_inclusive=False)])
        assert parser.to_vers_string(version_range, "npm") == "vers:npm/>=1.2.3|<2.0.0"

    def test_exact(self, parser):
        assert parser.to_vers_string(VersionRange.exact("1.2.3"), "gem") == "vers:gem/=1.2.3"

    def test_unbounded(self, parser):
        assert parser.to_vers_string(VersionRange.unbounded(), "pypi") == "*"

    def test_empty(self, parser):
        assert parser.to_vers_string(VersionRange.empty(), "npm") == "vers:npm/"

    def test_exclusive_lower_and_inclusive_upper(self, parser):
        version_range = VersionRange([Interval(min="1.0", max="2.0", min_inclusive=False)])
        assert parser.to_vers_string(version_range, "maven") == "vers:maven/>1.0|<=2.0"

    def test_rays(self, parser):
        assert parser.to_vers_string(VersionRange.less_than("2.0.0"), "npm") == "vers:npm/<2.0.0"
        assert (
            parser.to_vers_string(VersionRange.greater_than("1.0.0", inclusive=True), "npm")
            == "vers:npm/>=1.0.0"
        )

    def test_scheme_enum_uses_its_value(self, parser):
        assert parser.to_vers_string(VersionRange.exact("1.0"), Scheme.DEBIAN) == "vers:deb/=1.0"

    def test_multiple_exact_versions(self, parser):
        version_range = VersionRange([Interval.exact("1.0.0"), Interval.exact("2.0.0")])
        assert parser.to_vers_string(version_range, "npm") == "vers:npm/=1.0.0|=2.0.0"


class TestParserCache:
    """Parsing through a VersionCache gives the same ranges."""

    @pytest.mark.parametrize(
        "text, scheme",
        [("^1.2.3", "npm"), ("~> 1.2", "gem"), ("[1.0,2.0)", "maven"), (">=1.0,!=1.5", "pypi")],
    )
    def test_same_result_with_cache(self, parser, cached_parser, text, scheme):
        assert cached_parser.parse_native(text, scheme) == parser.parse_native(text, scheme)

    def test_cache_is_used(self, cached_parser, version_cache):
        cached_parser.parse("vers:npm/>=1.0.0|<2.0.0")
        cached_parser.parse("vers:npm/>=1.0.0|<2.0.0")
        assert version_cache.misses == 2
        assert version_cache.hits == 2

    def test_parser_without_cache(self):
        assert Parser().cache is None


class TestCollapsedRanges:
    """URIs whose bounds collapse render as the empty range."""

    def test_touching_bounds(self, parser):
        version_range = parser.parse("vers:npm/<1.0.0|>=1.0.0")
        assert version_range.is_empty
        assert parser.to_vers_string(version_range, "npm") == "vers:npm/"
