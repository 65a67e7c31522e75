"""Range grammars, the Parser facade and the version cache."""

from py_vers_range.services.cache import VersionCache
from py_vers_range.services.parser import Parser

__all__ = ["Parser", "VersionCache"]
