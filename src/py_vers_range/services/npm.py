"""npm range grammar.

Supported expressions:
- caret ranges ^x.y.z and tilde ranges ~x.y.z (also written ~>x.y.z)
- hyphen ranges "a - b", inclusive on both ends
- x-ranges: *, x, X, 1.x, 1.2.x, 1.*
- comparator sets split by whitespace (AND), alternatives split by || (OR)
- an empty string, which matches everything
"""

import logging
from typing import List, Optional

from py_vers_range.errors import RangeSyntaxError
from py_vers_range.models import Constraint, Interval, Version, VersionRange
from py_vers_range.services.generic import GenericRangeParser

logger = logging.getLogger(__name__)

_WILDCARDS = {"*", "x", "X"}
_REJECTED_PREFIXES = ("git+", "git://", "http://", "https://", "file:")
_BARE_OPERATORS = {"<", "<=", ">", ">=", "=", "!=", "^", "~", "~>"}


class NpmRangeParser:
    """Parses node-semver range syntax."""

    scheme = "npm"

    def __init__(self, generic: GenericRangeParser):
        self._parse_version = generic.parse_version

    def parse(self, text: str) -> VersionRange:
        text = text.strip()
        if not text:
            return VersionRange.unbounded()

        if "||" not in text:
            return self._parse_comparator_set(text)

        result = VersionRange.empty()
        for branch in text.split("||"):
            result = result.union(self._parse_comparator_set(branch.strip()))
        return result

    def _parse_comparator_set(self, text: str) -> VersionRange:
        if not text:
            return VersionRange.unbounded()

        tokens = text.split()
        if "-" in tokens:
            return self._parse_hyphen(tokens, text)

        result: Optional[VersionRange] = None
        for token in _attach_operators(tokens, text):
            token_range = self._parse_token(token)
            result = token_range if result is None else result.intersect(token_range)
        return result if result is not None else VersionRange.unbounded()

    def _parse_hyphen(self, tokens: List[str], text: str) -> VersionRange:
        if len(tokens) != 3 or tokens[1] != "-":
            raise RangeSyntaxError(f"Invalid npm hyphen range: {text!r}")
        lower = self._version(tokens[0])
        upper = self._version(tokens[2])
        return VersionRange([Interval(min=lower, max=upper)])

    def _parse_token(self, token: str) -> VersionRange:
        if token.startswith(_REJECTED_PREFIXES):
            raise RangeSyntaxError(f"Invalid npm range format: {token!r}")
        if token.startswith("^"):
            return self._caret(token[1:])
        if token.startswith("~"):
            return self._tilde(token[1:].lstrip(">"))
        if token in _WILDCARDS:
            return VersionRange.unbounded()

        x_range = self._x_range(token)
        if x_range is not None:
            return x_range

        constraint = Constraint.parse(token)
        version = self._version(constraint.version)
        if constraint.is_exclusion:
            return VersionRange.unbounded().exclude(version)
        return VersionRange([constraint.to_interval(version)])

    def _caret(self, version_text: str) -> VersionRange:
        lower = self._version(version_text)
        if lower.major > 0:
            upper = lower.increment("major")
        elif (lower.minor or 0) > 0:
            upper = lower.increment("minor")
        else:
            upper = lower.increment("patch")
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])

    def _tilde(self, version_text: str) -> VersionRange:
        lower = self._version(version_text)
        if lower.minor is not None:
            upper = lower.increment("minor")
        else:
            upper = lower.increment("major")
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])

    def _x_range(self, token: str) -> Optional[VersionRange]:
        """Handle 1.x, 1.2.x, 1.*, x.x and friends; ``None`` if ``token`` is not one."""
        parts = token.split(".")
        if len(parts) > 3:
            return None
        wildcard_at = next((i for i, part in enumerate(parts) if part in _WILDCARDS), None)
        if wildcard_at is None:
            return None
        fixed = parts[:wildcard_at]
        if not all(part.isascii() and part.isdigit() for part in fixed):
            return None

        if not fixed:
            return VersionRange.unbounded()
        major = int(fixed[0])
        if len(fixed) == 1:
            lower = Version(major=major, minor=0, patch=0)
            upper = Version(major=major + 1, minor=0, patch=0)
        else:
            minor = int(fixed[1])
            lower = Version(major=major, minor=minor, patch=0)
            upper = Version(major=major, minor=minor + 1, patch=0)
        return VersionRange([Interval(min=lower, max=upper, max_inclusive=False)])

    def _version(self, text: str) -> Version:
        # npm tolerates a leading "v" or "=" on plain versions
        if text[:1] in ("v", "V", "=") and text[1:2].isdigit():
            text = text[1:]
        return self._parse_version(text)


def _attach_operators(tokens: List[str], text: str) -> List[str]:
    """Join operators written apart from their version (">= 1.2.3")."""
    joined: List[str] = []
    pending = ""
    for token in tokens:
        if token in _BARE_OPERATORS:
            if pending:
                raise RangeSyntaxError(f"Invalid npm range format: {text!r}")
            pending = token
            continue
        joined.append(pending + token)
        pending = ""
    if pending:
        raise RangeSyntaxError(f"Operator without a version in npm range: {text!r}")
    return joined
