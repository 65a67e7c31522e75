"""Module-level convenience functions backed by a shared default Parser."""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from py_vers_range.config import DEFAULT_PROBE_VERSIONS
from py_vers_range.errors import FormatError, VersionFormatError
from py_vers_range.models import Scheme, Version, VersionRange
from py_vers_range.services import Parser

VersionLike = Union[Version, str]

_default_parser = Parser()


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse that reports failure instead of raising."""

    range: Optional[VersionRange] = None
    error: Optional[FormatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(vers_string: str) -> VersionRange:
    return _default_parser.parse(vers_string)


def parse_native(range_string: str, scheme: Union[Scheme, str]) -> VersionRange:
    return _default_parser.parse_native(range_string, scheme)


def to_vers_string(version_range: VersionRange, scheme: Union[Scheme, str]) -> str:
    return _default_parser.to_vers_string(version_range, scheme)


def try_parse(vers_string: str) -> ParseResult:
    try:
        return ParseResult(range=parse(vers_string))
    except FormatError as e:
        return ParseResult(error=e)


def try_parse_native(range_string: str, scheme: Union[Scheme, str]) -> ParseResult:
    try:
        return ParseResult(range=parse_native(range_string, scheme))
    except FormatError as e:
        return ParseResult(error=e)


def satisfies(
    version: VersionLike,
    constraint: str,
    scheme: Optional[Union[Scheme, str]] = None,
) -> bool:
    """Check ``version`` against a VERS URI, or a native range when ``scheme`` is given."""
    if scheme is None:
        version_range = parse(constraint)
    else:
        version_range = parse_native(constraint, scheme)
    return version_range.contains(version)


def compare(a: VersionLike, b: VersionLike) -> int:
    return Version.compare(a, b)


def normalize(version: VersionLike) -> str:
    return Version.coerce(version).normalize()


def valid(version_string: str) -> bool:
    try:
        Version.parse(version_string)
    except VersionFormatError:
        return False
    return True


def exact(version: VersionLike) -> VersionRange:
    return VersionRange.exact(version)


def greater_than(version: VersionLike, inclusive: bool = False) -> VersionRange:
    return VersionRange.greater_than(version, inclusive=inclusive)


def less_than(version: VersionLike, inclusive: bool = False) -> VersionRange:
    return VersionRange.less_than(version, inclusive=inclusive)


def unbounded() -> VersionRange:
    return VersionRange.unbounded()


def empty() -> VersionRange:
    return VersionRange.empty()


def same_containment(
    first: VersionRange,
    second: VersionRange,
    probes: Optional[Iterable[VersionLike]] = None,
) -> bool:
    """True when both ranges agree on every probe version."""
    probe_versions = DEFAULT_PROBE_VERSIONS if probes is None else probes
    return all(first.contains(probe) == second.contains(probe) for probe in probe_versions)
