"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from prodorders.domain.exceptions import ValidationError


def _require_positive_int(value: object, label: str) -> None:
    # bool is an int subclass but never a meaningful dimension or count
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise ValidationError(f"{label} must be positive")


@dataclass(frozen=True)
class Millimeters:
    """A positive whole-millimeter dimension (width or height of a unit)."""

    value: int

    def __post_init__(self) -> None:
        _require_positive_int(self.value, "Dimension")

    def __str__(self) -> str:
        return f"{self.value}mm"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative units.
    """

    value: int

    def __post_init__(self) -> None:
        _require_positive_int(self.value, "Quantity")

    def __str__(self) -> str:
        return str(self.value)
