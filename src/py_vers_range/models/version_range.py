"""VersionRange model: a normalized union of disjoint intervals."""

from functools import cmp_to_key
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from py_vers_range.models.interval import Interval
from py_vers_range.models.version import Version

VersionLike = Union[Version, str]


class VersionRange:
    """An ordered tuple of non-empty, non-overlapping, non-adjacent intervals.

    Every constructor call re-normalizes its input: empty intervals are
    dropped, the rest are sorted by lower then upper bound in version order
    and folded left to right with :meth:`Interval.union`.
    """

    __slots__ = ("_intervals",)

    def __init__(self, intervals: Iterable[Optional[Interval]] = ()):
        self._intervals: Tuple[Interval, ...] = _normalize(intervals)

    @classmethod
    def empty(cls) -> "VersionRange":
        return cls()

    @classmethod
    def unbounded(cls) -> "VersionRange":
        return cls([Interval.unbounded()])

    @classmethod
    def exact(cls, version: VersionLike) -> "VersionRange":
        return cls([Interval.exact(version)])

    @classmethod
    def greater_than(cls, version: VersionLike, inclusive: bool = False) -> "VersionRange":
        return cls([Interval.greater_than(version, inclusive=inclusive)])

    @classmethod
    def less_than(cls, version: VersionLike, inclusive: bool = False) -> "VersionRange":
        return cls([Interval.less_than(version, inclusive=inclusive)])

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return self._intervals

    @property
    def is_empty(self) -> bool:
        return not self._intervals

    @property
    def is_unbounded(self) -> bool:
        return len(self._intervals) == 1 and self._intervals[0].is_unbounded

    def contains(self, version: VersionLike) -> bool:
        version = Version.coerce(version)
        return any(interval.contains(version) for interval in self._intervals)

    def intersect(self, other: "VersionRange") -> "VersionRange":
        overlaps = []
        for mine in self._intervals:
            for theirs in other.intervals:
                overlap = mine.intersect(theirs)
                if not overlap.is_empty:
                    overlaps.append(overlap)
        return VersionRange(overlaps)

    def union(self, other: "VersionRange") -> "VersionRange":
        return VersionRange(self._intervals + other.intervals)

    def complement(self) -> "VersionRange":
        """Every version not covered by this range."""
        if self.is_empty:
            return VersionRange.unbounded()
        if self.is_unbounded:
            return VersionRange.empty()

        gaps: List[Interval] = []
        first = self._intervals[0]
        if first.min is not None:
            gaps.append(Interval(max=first.min, max_inclusive=not first.min_inclusive))

        for current, following in zip(self._intervals, self._intervals[1:]):
            if current.max is None or following.min is None:
                continue
            if current.max < following.min or (
                current.max == following.min
                and not (current.max_inclusive and following.min_inclusive)
            ):
                gaps.append(
                    Interval(
                        min=current.max,
                        max=following.min,
                        min_inclusive=not current.max_inclusive,
                        max_inclusive=not following.min_inclusive,
                    )
                )

        last = self._intervals[-1]
        if last.max is not None:
            gaps.append(Interval(min=last.max, min_inclusive=not last.max_inclusive))

        return VersionRange(gaps)

    def exclude(self, version: VersionLike) -> "VersionRange":
        """Remove a single version, splitting whichever interval holds it."""
        version = Version.coerce(version)
        if not self.contains(version):
            return self

        pieces: List[Interval] = []
        for interval in self._intervals:
            if not interval.contains(version):
                pieces.append(interval)
                continue
            if interval.min is None or interval.min < version:
                pieces.append(
                    Interval(
                        min=interval.min,
                        max=version,
                        min_inclusive=interval.min_inclusive,
                        max_inclusive=False,
                    )
                )
            if interval.max is None or version < interval.max:
                pieces.append(
                    Interval(
                        min=version,
                        max=interval.max,
                        min_inclusive=False,
                        max_inclusive=interval.max_inclusive,
                    )
                )
        return VersionRange(pieces)

    def __contains__(self, version: VersionLike) -> bool:
        return self.contains(version)

    def __or__(self, other: "VersionRange") -> "VersionRange":
        return self.union(other)

    def __and__(self, other: "VersionRange") -> "VersionRange":
        return self.intersect(other)

    def __invert__(self) -> "VersionRange":
        return self.complement()

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return NotImplemented
        return self._intervals == other.intervals

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __str__(self) -> str:
        if self.is_empty:
            return "∅"
        return " ∪ ".join(str(interval) for interval in self._intervals)

    def __repr__(self) -> str:
        return f"VersionRange({str(self)!r})"


def _compare_intervals(left: Interval, right: Interval) -> int:
    return Version.compare(left.min, right.min) or Version.compare(left.max, right.max)


def _normalize(intervals: Iterable[Optional[Interval]]) -> Tuple[Interval, ...]:
    remaining = sorted(
        (interval for interval in intervals if interval is not None and not interval.is_empty),
        key=cmp_to_key(_compare_intervals),
    )
    if len(remaining) <= 1:
        return tuple(remaining)

    # Merging an open side with the other operand's bound can produce an
    # empty interval; it is dropped and folding restarts at the next one.
    merged: List[Interval] = []
    current: Optional[Interval] = None
    for interval in remaining:
        if current is None:
            current = interval
            continue
        combined = current.union(interval)
        if combined is None:
            merged.append(current)
            current = interval
        elif combined.is_empty:
            current = None
        else:
            current = combined
    if current is not None:
        merged.append(current)
    return tuple(interval for interval in merged if not interval.is_empty)
