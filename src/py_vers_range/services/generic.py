"""Pipe-delimited constraint lists: the VERS URI body and the fallback grammar."""

import logging
from typing import Callable, Iterable, List

from py_vers_range.errors import ConstraintFormatError
from py_vers_range.models import Constraint, Interval, Version, VersionRange

logger = logging.getLogger(__name__)

ParseVersion = Callable[[str], Version]


class GenericRangeParser:
    """Builds a VersionRange from ``<operator><version>`` constraints.

    Positive constraints become intervals that are handed to
    :class:`VersionRange` together, so a lower and an upper bound merge into
    one bounded interval while disjoint constraints stay separate. ``!=``
    constraints are applied afterwards as point exclusions.
    """

    scheme = "generic"

    def __init__(self, parse_version: ParseVersion = Version.parse):
        self.parse_version = parse_version

    def parse(self, text: str) -> VersionRange:
        """Parse ``|``-separated constraints."""
        return self.parse_constraints(text.split("|"))

    def parse_constraints(self, constraint_strings: Iterable[str]) -> VersionRange:
        constraints: List[Constraint] = []
        for raw in constraint_strings:
            constraint_string = raw.strip()
            if not constraint_string:
                raise ConstraintFormatError("Empty constraint in constraint list")
            constraints.append(Constraint.parse(constraint_string))
        return self.build(constraints)

    def build(self, constraints: Iterable[Constraint]) -> VersionRange:
        """Combine parsed constraints into one range.

        With no positive constraint at all, exclusions are taken out of the
        unbounded range.
        """
        intervals: List[Interval] = []
        exclusions: List[Version] = []
        for constraint in constraints:
            version = self.parse_version(constraint.version)
            if constraint.is_exclusion:
                exclusions.append(version)
            else:
                intervals.append(constraint.to_interval(version))

        if intervals:
            version_range = VersionRange(intervals)
        elif exclusions:
            version_range = VersionRange.unbounded()
        else:
            version_range = VersionRange.empty()

        for version in exclusions:
            version_range = version_range.exclude(version)
        logger.debug(
            "Built %s from %d interval(s) and %d exclusion(s)",
            version_range,
            len(intervals),
            len(exclusions),
        )
        return version_range
