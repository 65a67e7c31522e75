"""Scheme enum: the package ecosystems with a dedicated native grammar."""

from enum import Enum
from typing import Dict, Optional


class Scheme(Enum):
    """Ecosystems whose native range syntax has its own grammar."""

    NPM = "npm"
    GEM = "gem"
    PYPI = "pypi"
    MAVEN = "maven"
    NUGET = "nuget"
    DEBIAN = "deb"
    RPM = "rpm"

    @classmethod
    def from_name(cls, name: str) -> Optional["Scheme"]:
        """Look up a scheme identifier; ``None`` means use the generic grammar."""
        return _ALIASES.get(name.strip().lower())


_ALIASES: Dict[str, Scheme] = {scheme.value: scheme for scheme in Scheme}
_ALIASES.update({"rubygems": Scheme.GEM, "debian": Scheme.DEBIAN})
