"""Operator enum and the single ``<operator><version>`` Constraint model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from py_vers_range.errors import ConstraintFormatError
from py_vers_range.models.interval import Interval
from py_vers_range.models.version import Version


class Operator(Enum):
    """Comparison operators allowed in a VERS constraint."""

    EQUAL = "="
    NOT_EQUAL = "!="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="


# Two-character operators first so ">=" is never read as ">"
_PREFIX_ORDER = (
    Operator.NOT_EQUAL,
    Operator.GREATER_EQUAL,
    Operator.LESS_EQUAL,
    Operator.LESS,
    Operator.GREATER,
    Operator.EQUAL,
)


@dataclass(frozen=True)
class Constraint:
    """One operator applied to one version string."""

    operator: Operator
    version: str

    def __post_init__(self) -> None:
        if not isinstance(self.operator, Operator):
            try:
                object.__setattr__(self, "operator", Operator(self.operator))
            except ValueError:
                raise ConstraintFormatError(f"Invalid operator: {self.operator!r}") from None

    @classmethod
    def parse(cls, constraint_string: str) -> "Constraint":
        """Split ``constraint_string`` into operator and version.

        Text without a leading operator is an exact match on the whole string.

        Raises:
            ConstraintFormatError: if nothing follows the operator.
        """
        for operator in _PREFIX_ORDER:
            if constraint_string.startswith(operator.value):
                version = constraint_string[len(operator.value):].strip()
                if not version:
                    raise ConstraintFormatError(
                        f"Invalid constraint format: {constraint_string!r}"
                    )
                return cls(operator=operator, version=version)
        return cls(operator=Operator.EQUAL, version=constraint_string)

    @property
    def is_exclusion(self) -> bool:
        return self.operator is Operator.NOT_EQUAL

    def to_interval(self, version: Optional[Version] = None) -> Optional[Interval]:
        """Interval matched by this constraint; ``None`` for ``!=``.

        ``version`` may carry an already parsed form of ``self.version``.
        """
        bound: Union[Version, str] = version if version is not None else self.version
        if self.operator is Operator.EQUAL:
            return Interval.exact(bound)
        if self.operator is Operator.GREATER:
            return Interval.greater_than(bound, inclusive=False)
        if self.operator is Operator.GREATER_EQUAL:
            return Interval.greater_than(bound, inclusive=True)
        if self.operator is Operator.LESS:
            return Interval.less_than(bound, inclusive=False)
        if self.operator is Operator.LESS_EQUAL:
            return Interval.less_than(bound, inclusive=True)
        return None

    def satisfies(self, version: Union[Version, str]) -> bool:
        comparison = Version.compare(version, self.version)
        if self.operator is Operator.EQUAL:
            return comparison == 0
        if self.operator is Operator.NOT_EQUAL:
            return comparison != 0
        if self.operator is Operator.GREATER:
            return comparison > 0
        if self.operator is Operator.GREATER_EQUAL:
            return comparison >= 0
        if self.operator is Operator.LESS:
            return comparison < 0
        return comparison <= 0

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"
