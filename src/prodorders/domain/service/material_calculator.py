"""Domain service: material requirements for framed window/door units.

Pure functions only.  All arithmetic is done in Decimal and rounded with
an explicit half-up mode so summaries are reproducible bit-for-bit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

FIGURE_PLACES = 3

_MM_PER_M = Decimal(1000)
_MM2_PER_M2 = Decimal(1_000_000)


def round_half_up(value: Decimal, places: int = FIGURE_PLACES) -> Decimal:
    """Round *value* to *places* decimals, ties away from zero."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class MaterialFigures:
    """Derived quantities for one line item (or a sum of them)."""

    profile_meters: Decimal
    glass_square_meters: Decimal
    hardware_units: int

    def rounded(self, places: int = FIGURE_PLACES) -> MaterialFigures:
        return MaterialFigures(
            profile_meters=round_half_up(self.profile_meters, places),
            glass_square_meters=round_half_up(self.glass_square_meters, places),
            hardware_units=self.hardware_units,
        )

    def __add__(self, other: MaterialFigures) -> MaterialFigures:
        return MaterialFigures(
            profile_meters=self.profile_meters + other.profile_meters,
            glass_square_meters=self.glass_square_meters + other.glass_square_meters,
            hardware_units=self.hardware_units + other.hardware_units,
        )


ZERO_FIGURES = MaterialFigures(Decimal(0), Decimal(0), 0)


def calculate_materials(width_mm: int, height_mm: int, quantity: int) -> MaterialFigures:
    """Compute unrounded material figures for *quantity* identical units.

    - profile: frame perimeter in meters, times quantity
    - glass: pane area in square meters, times quantity
    - hardware: one set per unit

    The product type is deliberately not an input; every category uses the
    same formulas.
    """
    perimeter_mm = 2 * (width_mm + height_mm)
    area_mm2 = width_mm * height_mm
    return MaterialFigures(
        profile_meters=Decimal(perimeter_mm) / _MM_PER_M * quantity,
        glass_square_meters=Decimal(area_mm2) / _MM2_PER_M2 * quantity,
        hardware_units=quantity,
    )


def total_figures(figures: list[MaterialFigures]) -> MaterialFigures:
    """Sum per-item figures and round the totals."""
    total = ZERO_FIGURES
    for f in figures:
        total = total + f
    return total.rounded()
