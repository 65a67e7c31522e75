"""RubyGems requirement grammar: ``~>`` plus comma-separated operators."""

import logging

from py_vers_range.errors import RangeSyntaxError
from py_vers_range.models import Interval, VersionRange
from py_vers_range.services.generic import GenericRangeParser

logger = logging.getLogger(__name__)

_PESSIMISTIC = "~>"


class RubyGemsRangeParser:
    """Parses gem requirements such as ``~> 1.2`` or ``>= 1.0, < 2.0``."""

    scheme = "gem"

    def __init__(self, generic: GenericRangeParser):
        self._generic = generic

    def parse(self, text: str) -> VersionRange:
        # An empty requirement is RubyGems' default ">= 0"
        if not text.strip():
            return VersionRange.unbounded()

        requirements = [part.strip() for part in text.split(",")]
        if not all(requirements):
            raise RangeSyntaxError(f"Empty requirement in gem range: {text!r}")

        pessimistic = [part for part in requirements if part.startswith(_PESSIMISTIC)]
        plain = [part for part in requirements if not part.startswith(_PESSIMISTIC)]
        if not pessimistic:
            return self._generic.parse_constraints(plain)

        result = self._generic.parse_constraints(plain) if plain else VersionRange.unbounded()
        for requirement in pessimistic:
            result = result.intersect(self._pessimistic(requirement[len(_PESSIMISTIC):].strip()))
        return result

    def _pessimistic(self, version_text: str) -> VersionRange:
        """``~> 1.2.3`` allows < 1.3.0; ``~> 1.2`` and ``~> 1`` allow < 2.0.0."""
        if not version_text:
            raise RangeSyntaxError("Pessimistic operator without a version")
        lower = self._generic.parse_version(version_text)
        if lower.patch is not None:
            upper = lower.increment("minor")
        else:
            upper = lower.increment("major")
        logger.debug("Pessimistic ~> %s expands to [%s, %s)", version_text, lower, upper)
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])
