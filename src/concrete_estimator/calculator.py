from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from .dictionaries import CUTTING_COEFFICIENTS, INCHES_PER_FOOT, SQUARE_INCHES_PER_SQUARE_FOOT
from .models.estimate import ItemCostBreakdown
from .models.line_items import (
    Category,
    CoreDrillingItem,
    HandHeldChainSawItem,
    HandSawItem,
    LineItem,
    SlabSawingItem,
    StandaloneLaborItem,
    WallSawingItem,
)
from .models.rates import RateProfile


@dataclass(frozen=True)
class _BaseCost:
    derived_quantity: float
    labor_hours: float
    labor_cost: float
    wear_cost: float

    @property
    def total(self) -> float:
        return self.labor_cost + self.wear_cost


def apply_complexity(base_cost: float, complexity_pct: float) -> float:
    """Scale a base cost by the item's complexity surcharge (0-100%, not clamped)."""
    return base_cost * (1 + complexity_pct / 100)


def _technician_cut(category: Category, units: float, wear_units: float, rates: RateProfile) -> _BaseCost:
    coeff = CUTTING_COEFFICIENTS[category]
    labor_hours = units * coeff.labor_hours_per_unit
    return _BaseCost(
        derived_quantity=units,
        labor_hours=labor_hours,
        labor_cost=labor_hours * rates.technician_rate,
        wear_cost=wear_units * coeff.wear_cost_per_unit,
    )


def _core_drilling(item: CoreDrillingItem, rates: RateProfile) -> _BaseCost:
    footage = item.quantity * (item.depth_inches / INCHES_PER_FOOT)
    return _technician_cut(Category.core_drilling, footage, footage, rates)


def _wall_sawing(item: WallSawingItem, rates: RateProfile) -> _BaseCost:
    area = item.quantity * item.length_feet * item.depth_inches / SQUARE_INCHES_PER_SQUARE_FOOT
    return _technician_cut(Category.wall_sawing, area, item.length_feet * item.quantity, rates)


def _linear_cut(item: HandHeldChainSawItem | HandSawItem | SlabSawingItem, rates: RateProfile) -> _BaseCost:
    linear_feet = item.quantity * item.length_feet
    return _technician_cut(item.category, linear_feet, linear_feet, rates)


def _standalone_labor(item: StandaloneLaborItem, rates: RateProfile) -> _BaseCost:
    return _BaseCost(
        derived_quantity=item.hours,
        labor_hours=item.hours,
        labor_cost=item.hours * rates.laborer_rate,
        wear_cost=0.0,
    )


_CALCULATORS: Mapping[type, Callable[..., _BaseCost]] = {
    CoreDrillingItem: _core_drilling,
    WallSawingItem: _wall_sawing,
    HandHeldChainSawItem: _linear_cut,
    HandSawItem: _linear_cut,
    SlabSawingItem: _linear_cut,
    StandaloneLaborItem: _standalone_labor,
}


def compute_breakdown(item: LineItem, rates: RateProfile) -> ItemCostBreakdown:
    calculator = _CALCULATORS.get(type(item))
    if calculator is None:
        raise TypeError(f"No cost formula registered for {type(item).__name__}")
    base = calculator(item, rates)
    base_cost = base.total
    return ItemCostBreakdown(
        item_id=item.id,
        category=item.category,
        description=item.description,
        derived_quantity=base.derived_quantity,
        labor_hours=base.labor_hours,
        labor_cost=base.labor_cost,
        wear_cost=base.wear_cost,
        base_cost=base_cost,
        complexity_pct=item.complexity_pct,
        final_cost=apply_complexity(base_cost, item.complexity_pct),
    )


def compute_cost(item: LineItem, rates: RateProfile) -> float:
    """Final price of a single line item, complexity surcharge included."""
    return compute_breakdown(item, rates).final_cost


__all__ = ["apply_complexity", "compute_breakdown", "compute_cost"]
