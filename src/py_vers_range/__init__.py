"""VERS version ranges: parse, combine and render package version constraints."""

from py_vers_range.api import (
    ParseResult,
    compare,
    empty,
    exact,
    greater_than,
    less_than,
    normalize,
    parse,
    parse_native,
    same_containment,
    satisfies,
    to_vers_string,
    try_parse,
    try_parse_native,
    unbounded,
    valid,
)
from py_vers_range.errors import (
    ConstraintFormatError,
    FormatError,
    InvalidComponentError,
    RangeSyntaxError,
    VersError,
    VersionFormatError,
)
from py_vers_range.models import Constraint, Interval, Operator, Scheme, Version, VersionRange
from py_vers_range.services import Parser, VersionCache

__version__ = "0.1.0"

__all__ = [
    "Constraint",
    "ConstraintFormatError",
    "FormatError",
    "Interval",
    "InvalidComponentError",
    "Operator",
    "ParseResult",
    "Parser",
    "RangeSyntaxError",
    "Scheme",
    "VersError",
    "Version",
    "VersionCache",
    "VersionFormatError",
    "VersionRange",
    "compare",
    "empty",
    "exact",
    "greater_than",
    "less_than",
    "normalize",
    "parse",
    "parse_native",
    "same_containment",
    "satisfies",
    "to_vers_string",
    "try_parse",
    "try_parse_native",
    "unbounded",
    "valid",
]
