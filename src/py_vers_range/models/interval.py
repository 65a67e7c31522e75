"""Interval model: one contiguous stretch of the Version order."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from py_vers_range.models.version import Version

VersionLike = Union[Version, str]


@dataclass(frozen=True)
class Interval:
    """A bounded, half-bounded or unbounded range of versions.

    A ``None`` bound leaves that side unconstrained. Bounds given as strings
    are parsed into :class:`Version` on construction.
    """

    min: Optional[Version] = None
    max: Optional[Version] = None
    min_inclusive: bool = True
    max_inclusive: bool = True

    def __post_init__(self) -> None:
        if self.min is not None and not isinstance(self.min, Version):
            object.__setattr__(self, "min", Version.parse(self.min))
        if self.max is not None and not isinstance(self.max, Version):
            object.__setattr__(self, "max", Version.parse(self.max))

    @classmethod
    def empty(cls) -> "Interval":
        return cls(min="1", max="0")

    @classmethod
    def unbounded(cls) -> "Interval":
        return cls()

    @classmethod
    def exact(cls, version: VersionLike) -> "Interval":
        return cls(min=version, max=version)

    @classmethod
    def greater_than(cls, version: VersionLike, inclusive: bool = False) -> "Interval":
        return cls(min=version, min_inclusive=inclusive)

    @classmethod
    def less_than(cls, version: VersionLike, inclusive: bool = False) -> "Interval":
        return cls(max=version, max_inclusive=inclusive)

    @property
    def is_empty(self) -> bool:
        if self.min is None or self.max is None:
            return False
        if self.min > self.max:
            return True
        return self.min == self.max and not (self.min_inclusive and self.max_inclusive)

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    @property
    def is_point(self) -> bool:
        """True for a single version ``[v,v]``."""
        return (
            self.min is not None
            and self.max is not None
            and self.min == self.max
            and self.min_inclusive
            and self.max_inclusive
        )

    def contains(self, version: VersionLike) -> bool:
        if self.is_empty:
            return False
        if self.is_unbounded:
            return True

        version = Version.coerce(version)
        if self.min is not None:
            if self.min_inclusive and version < self.min:
                return False
            if not self.min_inclusive and version <= self.min:
                return False
        if self.max is not None:
            if self.max_inclusive and version > self.max:
                return False
            if not self.max_inclusive and version >= self.max:
                return False
        return True

    def __contains__(self, version: VersionLike) -> bool:
        return self.contains(version)

    def intersect(self, other: "Interval") -> "Interval":
        """Return the overlap of two intervals (possibly empty)."""
        if self.is_empty or other.is_empty:
            return Interval.empty()

        new_min, new_min_inclusive = self.min, self.min_inclusive
        if self.min is not None and other.min is not None:
            if other.min > self.min:
                new_min, new_min_inclusive = other.min, other.min_inclusive
            elif other.min == self.min:
                new_min_inclusive = self.min_inclusive and other.min_inclusive
        elif other.min is not None:
            new_min, new_min_inclusive = other.min, other.min_inclusive

        new_max, new_max_inclusive = self.max, self.max_inclusive
        if self.max is not None and other.max is not None:
            if other.max < self.max:
                new_max, new_max_inclusive = other.max, other.max_inclusive
            elif other.max == self.max:
                new_max_inclusive = self.max_inclusive and other.max_inclusive
        elif other.max is not None:
            new_max, new_max_inclusive = other.max, other.max_inclusive

        return Interval(
            min=new_min,
            max=new_max,
            min_inclusive=new_min_inclusive,
            max_inclusive=new_max_inclusive,
        )

    def union(self, other: "Interval") -> Optional["Interval"]:
        """Merge two intervals that overlap or touch; ``None`` if they cannot merge.

        When only one of the two has a lower bound, the merged interval keeps
        that bound (likewise for upper bounds). Two complementary rays such as
        ``[1.2.3,+∞)`` and ``(-∞,2.0.0)`` therefore merge into
        ``[1.2.3,2.0.0)``, which is how a list of constraints narrows into a
        single bounded interval.
        """
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        if not (self.overlaps(other) or self.is_adjacent(other)):
            return None

        new_min, new_min_inclusive = self._looser_bound(
            (self.min, self.min_inclusive), (other.min, other.min_inclusive), lower=True
        )
        new_max, new_max_inclusive = self._looser_bound(
            (self.max, self.max_inclusive), (other.max, other.max_inclusive), lower=False
        )
        return Interval(
            min=new_min,
            max=new_max,
            min_inclusive=new_min_inclusive,
            max_inclusive=new_max_inclusive,
        )

    @staticmethod
    def _looser_bound(
        mine: Tuple[Optional[Version], bool],
        theirs: Tuple[Optional[Version], bool],
        lower: bool,
    ) -> Tuple[Optional[Version], bool]:
        version, inclusive = mine
        other_version, other_inclusive = theirs
        if version is None:
            return theirs
        if other_version is None:
            return mine
        if version == other_version:
            return version, inclusive or other_inclusive
        if (other_version < version) == lower:
            return theirs
        return mine

    def overlaps(self, other: "Interval") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return not self.intersect(other).is_empty

    def is_adjacent(self, other: "Interval") -> bool:
        """True when the two share one boundary version, inclusive on exactly one side."""
        if self.is_empty or other.is_empty:
            return False
        if self.max is not None and other.min is not None and self.max == other.min:
            return self.max_inclusive != other.min_inclusive
        if self.min is not None and other.max is not None and self.min == other.max:
            return self.min_inclusive != other.max_inclusive
        return False

    def __str__(self) -> str:
        if self.is_empty:
            return "∅"
        if self.is_unbounded:
            return "(-∞,+∞)"

        open_bracket = "[" if self.min is not None and self.min_inclusive else "("
        close_bracket = "]" if self.max is not None and self.max_inclusive else ")"
        lower = str(self.min) if self.min is not None else "-∞"
        upper = str(self.max) if self.max is not None else "+∞"
        return f"{open_bracket}{lower},{upper}{close_bracket}"
