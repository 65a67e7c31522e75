"""Value types for py_vers_range."""

from py_vers_range.models.constraint import Constraint, Operator
from py_vers_range.models.interval import Interval
from py_vers_range.models.scheme import Scheme
from py_vers_range.models.version import Version
from py_vers_range.models.version_range import VersionRange

__all__ = [
    "Constraint",
    "Interval",
    "Operator",
    "Scheme",
    "Version",
    "VersionRange",
]
