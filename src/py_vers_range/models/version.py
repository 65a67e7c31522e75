"""Version model: parsing and the total order every range operation relies on."""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple, Union

from py_vers_range.errors import InvalidComponentError, VersionFormatError

_SEMANTIC_VERSION = re.compile(r"(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:-([^+]+))?(?:\+(.+))?")
_DIGITS = re.compile(r"[0-9]+")

_COMPONENTS = ("major", "minor", "patch")


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A parsed version string.

    ``minor`` and ``patch`` stay ``None`` when the input left them out; they
    compare as ``0``. ``build`` metadata never affects ordering or equality.
    ``str(version)`` gives back the text the version was parsed from.
    """

    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Optional[str] = None
    build: Optional[str] = None
    text: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not self.text:
            object.__setattr__(self, "text", self._render())

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse ``version_string``.

        Tries, in order: all digits (major only), the semantic shape
        ``major[.minor][.patch][-prerelease][+build]``, then a loose split on
        ``.`` and ``-``.

        Raises:
            VersionFormatError: if no integer major component can be found.
        """
        if version_string is None:
            raise VersionFormatError("Invalid version format: None")
        text = str(version_string)
        if any(char.isspace() for char in text):
            raise VersionFormatError(f"Invalid version format: {text!r}")

        if _DIGITS.fullmatch(text):
            return cls(major=int(text), text=text)

        match = _SEMANTIC_VERSION.fullmatch(text)
        if match:
            major, minor, patch, prerelease, build = match.groups()
            return cls(
                major=int(major),
                minor=_optional_int(minor),
                patch=_optional_int(patch),
                prerelease=prerelease,
                build=build,
                text=text,
            )

        return cls._parse_loose(text)

    @classmethod
    def _parse_loose(cls, text: str) -> "Version":
        minor: Optional[int] = None
        patch: Optional[int] = None
        prerelease: Optional[str] = None

        if "." in text:
            parts = text.split(".")
            major = _leading_int(parts[0], text)
            if len(parts) > 1 and "-" not in parts[1]:
                minor = _lenient_int(parts[1])
            if len(parts) > 2:
                if "-" in parts[2]:
                    patch_text, _, prerelease = parts[2].partition("-")
                    patch = _lenient_int(patch_text)
                else:
                    patch = _lenient_int(parts[2])
            if len(parts) > 3 and not prerelease:
                prerelease = ".".join(parts[3:])
        elif "-" in text:
            major_text, _, prerelease = text.partition("-")
            major = _leading_int(major_text, text)
        else:
            raise VersionFormatError(f"Invalid version format: {text!r}")

        return cls(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=prerelease or None,
            text=text,
        )

    @classmethod
    def coerce(cls, value: Union["Version", str]) -> "Version":
        """Return ``value`` unchanged if it is a Version, else parse it."""
        if isinstance(value, Version):
            return value
        return cls.parse(value)

    @classmethod
    def compare(
        cls,
        a: Optional[Union["Version", str]],
        b: Optional[Union["Version", str]],
    ) -> int:
        """Compare two versions (or version strings); ``None`` sorts lowest."""
        if a is None and b is None:
            return 0
        if a is None:
            return -1
        if b is None:
            return 1
        return cls.coerce(a)._compare(cls.coerce(b))

    def _compare(self, other: "Version") -> int:
        left = self._release()
        right = other._release()
        if left != right:
            return -1 if left < right else 1

        if self.prerelease is None and other.prerelease is None:
            return 0
        if self.prerelease is None:
            return 1
        if other.prerelease is None:
            return -1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def _release(self) -> Tuple[int, int, int]:
        return (self.major, self.minor or 0, self.patch or 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        prerelease_key: Tuple[Any, ...] = ()
        if self.prerelease is not None:
            prerelease_key = tuple(
                int(part) if _DIGITS.fullmatch(part) else part
                for part in self.prerelease.split(".")
            )
        return hash((self._release(), self.prerelease is None, prerelease_key))

    def __str__(self) -> str:
        return self.text

    def _render(self) -> str:
        rendered = str(self.major)
        if self.minor is not None:
            rendered += f".{self.minor}"
        if self.patch is not None:
            rendered += f".{self.patch}"
        if self.prerelease is not None:
            rendered += f"-{self.prerelease}"
        if self.build is not None:
            rendered += f"+{self.build}"
        return rendered

    def normalize(self) -> str:
        """Return ``major.minor.patch[-prerelease]`` with missing parts as 0."""
        normalized = f"{self.major}.{self.minor or 0}.{self.patch or 0}"
        if self.prerelease is not None:
            normalized += f"-{self.prerelease}"
        return normalized

    @property
    def is_stable(self) -> bool:
        return self.prerelease is None

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "build": self.build,
        }

    def base(self) -> "Version":
        """Same major.minor with the patch reset to 0."""
        return Version(major=self.major, minor=self.minor or 0, patch=0)

    def increment(self, component: str) -> "Version":
        """Bump ``component`` ("major", "minor" or "patch"), zeroing lower parts."""
        if component == "major":
            return Version(major=self.major + 1, minor=0, patch=0)
        if component == "minor":
            return Version(major=self.major, minor=(self.minor or 0) + 1, patch=0)
        if component == "patch":
            return Version(major=self.major, minor=self.minor or 0, patch=(self.patch or 0) + 1)
        raise InvalidComponentError(
            f"Invalid component: {component!r}. Must be one of {', '.join(_COMPONENTS)}"
        )

    def increment_major(self) -> "Version":
        return self.increment("major")

    def increment_minor(self) -> "Version":
        return self.increment("minor")

    def increment_patch(self) -> "Version":
        return self.increment("patch")

    def satisfies_pessimistic(self, base: Union["Version", str]) -> bool:
        """Check this version against ``~> base``.

        ``~> 1.2`` and ``~> 1.2.3`` both stop below ``1.3.0``; ``~> 1`` stops
        below ``2.0.0``. The ``~>`` prefix on ``base`` is optional.
        """
        if not isinstance(base, Version):
            base_text = base.strip()
            if base_text.startswith("~>"):
                base_text = base_text[2:].strip()
            base = Version.parse(base_text)

        if self < base:
            return False

        if base.minor is not None or base.patch is not None:
            upper = Version(major=base.major, minor=(base.minor or 0) + 1, patch=0)
        else:
            upper = Version(major=base.major + 1, minor=0, patch=0)
        return self < upper


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value is not None else None


def _leading_int(segment: str, text: str) -> int:
    match = _DIGITS.match(segment)
    if not match:
        raise VersionFormatError(f"Invalid version format: {text!r}")
    return int(match.group(0))


def _lenient_int(segment: str) -> int:
    match = _DIGITS.match(segment)
    return int(match.group(0)) if match else 0


def _compare_prerelease(left: str, right: str) -> int:
    left_parts = left.split(".")
    right_parts = right.split(".")
    for left_part, right_part in zip(left_parts, right_parts):
        if _DIGITS.fullmatch(left_part) and _DIGITS.fullmatch(right_part):
            left_number, right_number = int(left_part), int(right_part)
            if left_number != right_number:
                return -1 if left_number < right_number else 1
        elif left_part != right_part:
            return -1 if left_part < right_part else 1

    if len(left_parts) == len(right_parts):
        return 0
    return -1 if len(left_parts) < len(right_parts) else 1
