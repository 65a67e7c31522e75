"""Debian and RPM dependency operator grammars."""

from py_vers_range.models import VersionRange
from py_vers_range.services.generic import GenericRangeParser


class DebianRangeParser:
    """Debian relations: ``>>`` and ``<<`` are strict, the rest are generic."""

    scheme = "deb"

    def __init__(self, generic: GenericRangeParser):
        self._generic = generic

    def parse(self, text: str) -> VersionRange:
        return self._generic.parse(text.replace(">>", ">").replace("<<", "<"))


class RpmRangeParser:
    """RPM uses the generic operators unchanged."""

    scheme = "rpm"

    def __init__(self, generic: GenericRangeParser):
        self._generic = generic

    def parse(self, text: str) -> VersionRange:
        return self._generic.parse(text)
