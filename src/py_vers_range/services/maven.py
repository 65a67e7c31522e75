"""Maven and NuGet bracket-notation range grammars."""

import logging
import string
from typing import List

from py_vers_range.errors import RangeSyntaxError
from py_vers_range.models import Interval, VersionRange
from py_vers_range.services.generic import GenericRangeParser

logger = logging.getLogger(__name__)

_OPENERS = "[("
_CLOSERS = "])"
_QUALIFIER_CHARS = set(string.ascii_letters + string.digits + ".-")


class MavenRangeParser:
    """Parses ``[1.0,2.0)``, ``(,1.0]``, ``[1.0]`` and comma-joined unions.

    A bare version is a minimum (``1.0`` means ``[1.0,)``). Text that is
    neither bracket notation nor a bare version falls back to generic
    constraints.
    """

    scheme = "maven"

    def __init__(self, generic: GenericRangeParser):
        self._generic = generic

    def parse(self, text: str) -> VersionRange:
        text = text.strip()
        if not text:
            raise RangeSyntaxError(f"Empty {self.scheme} range")

        if text[0] in _OPENERS:
            groups = _split_groups(text)
            if len(groups) == 1:
                return self._parse_group(groups[0])
            logger.debug("Splitting %s union %r into %d ranges", self.scheme, text, len(groups))
            result = VersionRange.empty()
            for group in groups:
                result = result.union(self._parse_group(group))
            return result

        return self._parse_bare(text)

    def _parse_bare(self, text: str) -> VersionRange:
        if _is_plain_version(text):
            return VersionRange.greater_than(self._generic.parse_version(text), inclusive=True)
        return self._generic.parse(text)

    def _parse_group(self, group: str) -> VersionRange:
        opener, inner, closer = group[0], group[1:-1], group[-1]

        if "," not in inner:
            version_text = inner.strip()
            if opener == "[" and closer == "]" and version_text:
                return VersionRange.exact(self._generic.parse_version(version_text))
            raise RangeSyntaxError(
                f"Malformed {self.scheme} range: mismatched brackets in {group!r}"
            )

        lower_text, _, upper_text = inner.partition(",")
        lower_text, upper_text = lower_text.strip(), upper_text.strip()
        if "," in upper_text:
            raise RangeSyntaxError(f"Too many bounds in {self.scheme} range {group!r}")
        if not lower_text and not upper_text:
            raise RangeSyntaxError(f"{self.scheme} range {group!r} has no bounds")
        if (not lower_text and opener != "(") or (not upper_text and closer != ")"):
            raise RangeSyntaxError(
                f"Malformed {self.scheme} range: an open side needs an exclusive bracket in {group!r}"
            )

        interval = Interval(
            min=self._generic.parse_version(lower_text) if lower_text else None,
            max=self._generic.parse_version(upper_text) if upper_text else None,
            min_inclusive=opener == "[",
            max_inclusive=closer == "]",
        )
        if interval.is_empty:
            raise RangeSyntaxError(f"{self.scheme} range {group!r} matches no version")
        return VersionRange([interval])


class NugetRangeParser(MavenRangeParser):
    """NuGet shares Maven's bracket notation; a bare version is a minimum.

    NuGet has no operator syntax, so text that is neither bracket notation
    nor a plain version is rejected.
    """

    scheme = "nuget"

    def _parse_bare(self, text: str) -> VersionRange:
        if _is_plain_version(text):
            return VersionRange.greater_than(self._generic.parse_version(text), inclusive=True)
        raise RangeSyntaxError(f"Invalid {self.scheme} range: {text!r}")


def _split_groups(text: str) -> List[str]:
    """Split ``[a,b],(c,d]`` into bracket groups; commas between groups are required."""
    groups: List[str] = []
    position = 0
    while position < len(text):
        if text[position] not in _OPENERS:
            raise RangeSyntaxError(f"Expected '[' or '(' at offset {position} in {text!r}")
        end = position + 1
        while end < len(text) and text[end] not in _CLOSERS:
            if text[end] in _OPENERS:
                raise RangeSyntaxError(f"Nested bracket at offset {end} in {text!r}")
            end += 1
        if end == len(text):
            raise RangeSyntaxError(f"Unclosed bracket in {text!r}")
        groups.append(text[position:end + 1])

        position = _skip_spaces(text, end + 1)
        if position < len(text):
            if text[position] != ",":
                raise RangeSyntaxError(f"Expected ',' at offset {position} in {text!r}")
            position = _skip_spaces(text, position + 1)
            if position == len(text):
                raise RangeSyntaxError(f"Trailing ',' in {text!r}")
    return groups


def _skip_spaces(text: str, position: int) -> int:
    while position < len(text) and text[position].isspace():
        position += 1
    return position


def _is_plain_version(text: str) -> bool:
    """Digits separated by dots, optionally followed by ``-qualifier``."""
    release, dash, qualifier = text.partition("-")
    if not all(part.isascii() and part.isdigit() for part in release.split(".")):
        return False
    if dash:
        return bool(qualifier) and all(char in _QUALIFIER_CHARS for char in qualifier)
    return True
