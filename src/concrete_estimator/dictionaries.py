from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .models.line_items import Category
from .models.rates import RateProfile


@dataclass(frozen=True)
class CuttingCoefficients:
    label: str
    labor_hours_per_unit: float
    wear_cost_per_unit: float


INCHES_PER_FOOT = 12.0
SQUARE_INCHES_PER_SQUARE_FOOT = 144.0


CUTTING_COEFFICIENTS: Mapping[Category, CuttingCoefficients] = {
    # per foot of drilled depth; wear is diamond bit wear
    Category.core_drilling: CuttingCoefficients(
        label="Core Drilling",
        labor_hours_per_unit=0.15,
        wear_cost_per_unit=2.5,
    ),
    # hours per sq ft of wall face; wear per linear foot of cut
    Category.wall_sawing: CuttingCoefficients(
        label="Wall Sawing",
        labor_hours_per_unit=0.25,
        wear_cost_per_unit=3.5,
    ),
    Category.hand_held_chain_saw: CuttingCoefficients(
        label="Chain Saw",
        labor_hours_per_unit=0.2,
        wear_cost_per_unit=4.0,
    ),
    Category.hand_saw: CuttingCoefficients(
        label="Hand Saw",
        labor_hours_per_unit=0.18,
        wear_cost_per_unit=3.0,
    ),
    Category.slab_sawing: CuttingCoefficients(
        label="Slab Sawing",
        labor_hours_per_unit=0.12,
        wear_cost_per_unit=2.0,
    ),
}


CATEGORY_LABELS: Mapping[Category, str] = {
    **{category: coeff.label for category, coeff in CUTTING_COEFFICIENTS.items()},
    Category.standalone_labor: "Labor",
}


SHOP_FEE_RATE = 0.15
EQUIPMENT_RATE_PER_MAN_NIGHT = 150.0
ROUND_TRIP_FACTOR = 2.0


DEFAULT_RATES = RateProfile(
    technician_rate=29.0,
    laborer_rate=22.0,
    mileage_rate=0.80,
)


__all__ = [
    "CuttingCoefficients",
    "CUTTING_COEFFICIENTS",
    "CATEGORY_LABELS",
    "INCHES_PER_FOOT",
    "SQUARE_INCHES_PER_SQUARE_FOOT",
    "SHOP_FEE_RATE",
    "EQUIPMENT_RATE_PER_MAN_NIGHT",
    "ROUND_TRIP_FACTOR",
    "DEFAULT_RATES",
]
