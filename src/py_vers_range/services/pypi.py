"""PyPI grammar: comma-separated PEP 440 version specifiers."""

import logging
from typing import List

from packaging.specifiers import InvalidSpecifier, Specifier

from py_vers_range.errors import RangeSyntaxError
from py_vers_range.models import Constraint, Interval, Operator, VersionRange
from py_vers_range.services.generic import GenericRangeParser

logger = logging.getLogger(__name__)

_EXACT_OPERATORS = {"==", "==="}


class PypiRangeParser:
    """Parses specifier sets like ``>=1.0,!=1.5.0,<2.0`` or ``~=2.2``.

    Plain comparisons go through the generic constraint builder. Compatible
    release (``~=``) and prefix matches (``==1.2.*``, ``!=1.2.*``) are
    intersected onto its result.
    """

    scheme = "pypi"

    def __init__(self, generic: GenericRangeParser):
        self._generic = generic

    def parse(self, text: str) -> VersionRange:
        if not text.strip():
            return VersionRange.unbounded()

        constraints: List[Constraint] = []
        narrowing: List[VersionRange] = []
        for clause in text.split(","):
            specifier = self._specifier(clause.strip(), text)
            operator = specifier.operator
            version = _strip_v(specifier.version)

            if operator == "~=":
                narrowing.append(self._compatible_release(version))
            elif operator in ("==", "!=") and version.endswith(".*"):
                prefix = self._prefix_match(version[:-2])
                narrowing.append(prefix if operator == "==" else prefix.complement())
            elif operator in _EXACT_OPERATORS:
                constraints.append(Constraint(operator=Operator.EQUAL, version=version))
            else:
                constraints.append(Constraint(operator=Operator(operator), version=version))

        result = self._generic.build(constraints) if constraints else VersionRange.unbounded()
        for version_range in narrowing:
            result = result.intersect(version_range)
        return result

    @staticmethod
    def _specifier(clause: str, text: str) -> Specifier:
        if clause[:1].isdigit() or (clause[:1] in ("v", "V") and clause[1:2].isdigit()):
            clause = "==" + clause
        try:
            return Specifier(clause)
        except InvalidSpecifier as e:
            raise RangeSyntaxError(f"Invalid PEP 440 specifier {clause!r} in {text!r}") from e

    def _compatible_release(self, version_text: str) -> VersionRange:
        """``~=2.2`` means >=2.2,<3 and ``~=1.4.5`` means >=1.4.5,<1.5."""
        lower = self._generic.parse_version(version_text)
        if lower.patch is not None:
            upper = lower.increment("minor")
        else:
            upper = lower.increment("major")
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])

    def _prefix_match(self, prefix_text: str) -> VersionRange:
        """All releases starting with ``prefix_text`` (``1.2`` covers [1.2, 1.3))."""
        lower = self._generic.parse_version(prefix_text)
        if lower.patch is not None:
            upper = lower.increment("patch")
        elif lower.minor is not None:
            upper = lower.increment("minor")
        else:
            upper = lower.increment("major")
        logger.debug("Prefix match %s.* expands to [%s, %s)", prefix_text, lower, upper)
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])


def _strip_v(version: str) -> str:
    if version[:1] in ("v", "V"):
        return version[1:]
    return version
