"""Exception hierarchy for py_vers_range."""


class VersError(ValueError):
    """Base class for every error raised by py_vers_range."""


class FormatError(VersError):
    """Text could not be parsed."""


class VersionFormatError(FormatError):
    """A version string has no resolvable integer major component."""


class ConstraintFormatError(FormatError):
    """A constraint has an unknown operator or no version after its operator."""


class RangeSyntaxError(FormatError):
    """A VERS URI or a native range expression is malformed."""


class InvalidComponentError(VersError):
    """Version.increment was asked for something other than major, minor or patch."""
