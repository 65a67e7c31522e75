"""Parser facade: VERS URIs in and out, native ranges dispatched by scheme."""

import logging
from typing import Dict, List, Optional, Union

from py_vers_range.errors import FormatError, RangeSyntaxError
from py_vers_range.models import Scheme, Version, VersionRange
from py_vers_range.services.cache import VersionCache
from py_vers_range.services.distro import DebianRangeParser, RpmRangeParser
from py_vers_range.services.generic import GenericRangeParser
from py_vers_range.services.maven import MavenRangeParser, NugetRangeParser
from py_vers_range.services.npm import NpmRangeParser
from py_vers_range.services.pypi import PypiRangeParser
from py_vers_range.services.rubygems import RubyGemsRangeParser

logger = logging.getLogger(__name__)

URI_PREFIX = "vers:"
MATCH_ALL = "*"


class Parser:
    """Turns VERS URIs and native range expressions into VersionRange values.

    Pass a :class:`VersionCache` to share parsed versions between calls;
    results are identical with or without one.
    """

    def __init__(self, cache: Optional[VersionCache] = None):
        self.cache = cache
        parse_version = cache.get if cache is not None else Version.parse
        self._generic = GenericRangeParser(parse_version=parse_version)
        self._grammars: Dict[Scheme, object] = {
            Scheme.NPM: NpmRangeParser(self._generic),
            Scheme.GEM: RubyGemsRangeParser(self._generic),
            Scheme.PYPI: PypiRangeParser(self._generic),
            Scheme.MAVEN: MavenRangeParser(self._generic),
            Scheme.NUGET: NugetRangeParser(self._generic),
            Scheme.DEBIAN: DebianRangeParser(self._generic),
            Scheme.RPM: RpmRangeParser(self._generic),
        }

    def parse(self, vers_string: str) -> VersionRange:
        """Parse ``*`` or ``vers:<scheme>/<constraint>[|<constraint>...]``.

        Raises:
            RangeSyntaxError: if the text is not a VERS URI.
            FormatError: if a constraint or version inside it is malformed.
        """
        if vers_string == MATCH_ALL:
            return VersionRange.unbounded()
        if not isinstance(vers_string, str) or not vers_string.startswith(URI_PREFIX):
            raise RangeSyntaxError(f"Invalid vers URI format: {vers_string!r}")

        scheme, slash, body = vers_string[len(URI_PREFIX):].partition("/")
        if not scheme or not slash:
            raise RangeSyntaxError(f"Invalid vers URI format: {vers_string!r}")

        if not body:
            return VersionRange.empty()
        if body == MATCH_ALL:
            return VersionRange.unbounded()
        logger.debug("Parsing vers URI constraints for scheme %r", scheme)
        return self._generic.parse(body)

    def parse_native(self, range_string: str, scheme: Union[Scheme, str]) -> VersionRange:
        """Parse ``range_string`` with the grammar registered for ``scheme``.

        Unknown schemes use the generic pipe-delimited constraint grammar.

        Raises:
            RangeSyntaxError: for any malformed input, chained to the
                underlying version or constraint error where there is one.
        """
        grammar = self._grammar_for(scheme)
        try:
            return grammar.parse(range_string)
        except RangeSyntaxError:
            raise
        except FormatError as e:
            raise RangeSyntaxError(
                f"Invalid {_scheme_name(scheme)} range {range_string!r}: {e}"
            ) from e

    def to_vers_string(self, version_range: VersionRange, scheme: Union[Scheme, str]) -> str:
        """Render ``version_range`` as a VERS URI."""
        if version_range.is_unbounded:
            return MATCH_ALL
        name = _scheme_name(scheme)
        if version_range.is_empty:
            return f"{URI_PREFIX}{name}/"

        constraints: List[str] = []
        for interval in version_range:
            if interval.is_point:
                constraints.append(f"={interval.min}")
                continue
            if interval.min is not None:
                constraints.append(f"{'>=' if interval.min_inclusive else '>'}{interval.min}")
            if interval.max is not None:
                constraints.append(f"{'<=' if interval.max_inclusive else '<'}{interval.max}")
        return f"{URI_PREFIX}{name}/{'|'.join(constraints)}"

    def _grammar_for(self, scheme: Union[Scheme, str]):
        resolved = scheme if isinstance(scheme, Scheme) else Scheme.from_name(scheme)
        if resolved is None:
            logger.debug("No native grammar for scheme %r, using generic constraints", scheme)
            return self._generic
        logger.debug("Dispatching native range to the %s grammar", resolved.value)
        return self._grammars[resolved]


def _scheme_name(scheme: Union[Scheme, str]) -> str:
    return scheme.value if isinstance(scheme, Scheme) else scheme
