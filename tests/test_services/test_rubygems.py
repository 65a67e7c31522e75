"""Tests for the RubyGems requirement grammar."""

import pytest

from py_vers_range.errors import RangeSyntaxError


class TestRubyGemsRangeParser:
    """Tests for ~> and comma-separated gem requirements."""

    def test_pessimistic_two_components(self, parser):
        version_range = parser.parse_native("~> 1.2", "gem")
        for version in ["1.2.0", "1.9.9"]:
            assert version_range.contains(version)
        for version in ["1.1.9", "2.0.0"]:
            assert not version_range.contains(version)

    def test_pessimistic_three_components(self, parser):
        version_range = parser.parse_native("~> 1.2.3", "gem")
        assert str(version_range) == "[1.2.3,1.3.0)"

    def test_pessimistic_major_only(self, parser):
        assert str(parser.parse_native("~>1", "gem")) == "[1,2.0.0)"

    def test_comma_list(self, parser):
        version_range = parser.parse_native(">= 1.0, < 2.0", "gem")
        assert version_range.contains("1.5")
        assert not version_range.contains("2.0")

    def test_pessimistic_with_extra_bound(self, parser):
        version_range = parser.parse_native("~> 1.2, >= 1.2.5", "gem")
        assert str(version_range) == "[1.2.5,2.0.0)"

    def test_exact_and_exclusion(self, parser):
        assert parser.parse_native("= 1.0.0", "gem") == parser.parse_native("1.0.0", "gem")
        assert not parser.parse_native("!= 1.5", "gem").contains("1.5.0")

    def test_blank_requirement_matches_everything(self, parser):
        assert parser.parse_native("", "gem").is_unbounded

    def test_rubygems_alias(self, parser):
        assert parser.parse_native("~> 1.2", "rubygems") == parser.parse_native("~> 1.2", "gem")

    @pytest.mark.parametrize("text", ["~>", "~> abc", "1.0, ", ">= 1.0,,< 2.0"])
    def test_rejected(self, parser, text):
        with pytest.raises(RangeSyntaxError):
            parser.parse_native(text, "gem")
