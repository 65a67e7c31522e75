"""Tests for the Interval model."""

import pytest

from py_vers_range.errors import VersionFormatError
from py_vers_range.models import Interval, Version


class TestIntervalBasics:
    """Tests for construction, emptiness and containment."""

    def test_string_bounds_are_parsed(self):
        interval = Interval(min="1.0", max="2.0")
        assert interval.min == Version.parse("1.0.0")
        assert isinstance(interval.max, Version)

    def test_invalid_bound_raises(self):
        with pytest.raises(VersionFormatError):
            Interval(min="garbage")

    def test_empty_conditions(self):
        assert Interval.empty().is_empty
        assert Interval(min="2.0.0", max="1.0.0").is_empty
        assert Interval(min="1.0.0", max="1.0.0", min_inclusive=False).is_empty
        assert not Interval.exact("1.0.0").is_empty
        assert not Interval.greater_than("1.0.0").is_empty

    def test_unbounded(self):
        assert Interval.unbounded().is_unbounded
        assert not Interval.less_than("1.0.0").is_unbounded

    def test_is_point(self):
        assert Interval.exact("1.2.3").is_point
        assert not Interval(min="1.2.3", max="1.2.4").is_point

    def test_contains_respects_inclusivity(self):
        interval = Interval(min="1.0.0", max="2.0.0", max_inclusive=False)
        assert interval.contains("1.0.0")
        assert "1.5.0" in interval
        assert not interval.contains("2.0.0")
        assert not interval.contains("0.9.9")

    def test_exclusive_min(self):
        interval = Interval.greater_than("1.0.0")
        assert not interval.contains("1.0.0")
        assert interval.contains("1.0.1")

    def test_empty_contains_nothing(self):
        assert not Interval.empty().contains("0.5.0")

    def test_unbounded_contains_everything(self):
        assert Interval.unbounded().contains("0.0.0-alpha")
        assert Interval.unbounded().contains("999.0.0")


class TestIntervalAlgebra:
    """Tests for intersect, union, overlaps and adjacency."""

    def test_intersect_overlapping(self):
        result = Interval(min="1.0.0", max="3.0.0").intersect(Interval(min="2.0.0", max="4.0.0"))
        assert result == Interval(min="2.0.0", max="3.0.0")

    def test_intersect_ties_and_inclusivity(self):
        result = Interval(min="1.0.0", max="2.0.0", max_inclusive=False).intersect(
            Interval(min="1.0.0", max="2.0.0")
        )
        assert result.max_inclusive is False
        assert result.min_inclusive is True

    def test_intersect_with_ray(self):
        result = Interval.greater_than("1.0.0", inclusive=True).intersect(Interval.less_than("2.0.0"))
        assert str(result) == "[1.0.0,2.0.0)"

    def test_intersect_disjoint_is_empty(self):
        assert Interval(min="1.0.0", max="2.0.0").intersect(Interval(min="3.0.0", max="4.0.0")).is_empty

    def test_union_overlapping(self):
        result = Interval(min="1.0.0", max="2.0.0").union(Interval(min="1.5.0", max="3.0.0"))
        assert result == Interval(min="1.0.0", max="3.0.0")

    def test_union_adjacent(self):
        left = Interval(min="1.0.0", max="2.0.0", max_inclusive=False)
        right = Interval(min="2.0.0", max="3.0.0")
        assert left.is_adjacent(right)
        assert left.union(right) == Interval(min="1.0.0", max="3.0.0")

    def test_union_touching_exclusive_ends_is_none(self):
        left = Interval(min="1.0.0", max="2.0.0", max_inclusive=False)
        right = Interval(min="2.0.0", max="3.0.0", min_inclusive=False)
        assert not left.is_adjacent(right)
        assert left.union(right) is None

    def test_union_disjoint_is_none(self):
        assert Interval(min="1.0.0", max="2.0.0").union(Interval(min="3.0.0", max="4.0.0")) is None

    def test_union_of_rays_takes_bounded_sides(self):
        lower = Interval.greater_than("1.2.3", inclusive=True)
        upper = Interval.less_than("2.0.0")
        result = lower.union(upper)
        assert result == Interval(min="1.2.3", max="2.0.0", max_inclusive=False)
        assert upper.union(lower) == result

    def test_union_with_empty(self):
        interval = Interval.exact("1.0.0")
        assert Interval.empty().union(interval) is interval
        assert interval.union(Interval.empty()) is interval

    def test_union_ties_or_inclusivity(self):
        left = Interval(min="1.0.0", max="2.0.0", min_inclusive=False)
        right = Interval(min="1.0.0", max="1.5.0")
        assert left.union(right).min_inclusive is True

    def test_overlaps(self):
        assert Interval(min="1.0.0", max="2.0.0").overlaps(Interval(min="2.0.0", max="3.0.0"))
        assert not Interval(min="1.0.0", max="2.0.0").overlaps(Interval.empty())


class TestIntervalText:
    """Tests for the canonical text form."""

    @pytest.mark.parametrize(
        "interval, expected",
        [
            (Interval.empty(), "∅"),
            (Interval.unbounded(), "(-∞,+∞)"),
            (Interval(min="1.0.0", max="2.0.0", max_inclusive=False), "[1.0.0,2.0.0)"),
            (Interval.greater_than("1.0.0", inclusive=True), "[1.0.0,+∞)"),
            (Interval.less_than("2.0.0", inclusive=True), "(-∞,2.0.0]"),
            (Interval.exact("1.2.3"), "[1.2.3,1.2.3]"),
        ],
    )
    def test_str(self, interval, expected):
        assert str(interval) == expected
