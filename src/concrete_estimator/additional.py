from __future__ import annotations

import math

from .dictionaries import EQUIPMENT_RATE_PER_MAN_NIGHT, ROUND_TRIP_FACTOR, SHOP_FEE_RATE
from .models.additional_costs import AdditionalCosts
from .models.estimate import AdditionalCostBreakdown
from .models.rates import RateProfile


def shop_fee(services_subtotal: float) -> float:
    return services_subtotal * SHOP_FEE_RATE


def mileage_cost(costs: AdditionalCosts, rates: RateProfile) -> float:
    return costs.mileage_distance * costs.mileage_trips * rates.mileage_rate * ROUND_TRIP_FACTOR


def travel_cost(costs: AdditionalCosts, rates: RateProfile) -> float:
    return (
        costs.tech_travel_hours * rates.technician_rate
        + costs.trainee_travel_hours * rates.laborer_rate
    )


def equipment_cost(costs: AdditionalCosts) -> float:
    return costs.equipment_man_nights * EQUIPMENT_RATE_PER_MAN_NIGHT


def outside_labor_cost(costs: AdditionalCosts) -> float:
    return costs.outside_laborer_hours * costs.outside_laborer_rate


def manual_entries_total(costs: AdditionalCosts) -> float:
    """Sum of the amounts entered by hand.

    ``overtime_premium`` is recorded on the estimate but not billed here.
    ``adjustments`` is added as entered, including negative corrections.
    """
    return math.fsum(
        (
            costs.per_diems,
            costs.slurry_disposal,
            costs.avetta_fee,
            costs.isn_fee,
            costs.materials,
            costs.equipment_rentals,
            costs.trucking,
            costs.dump_fees,
            costs.adjustments,
        )
    )


def compute_additional_costs(
    costs: AdditionalCosts,
    rates: RateProfile,
    services_subtotal: float,
) -> AdditionalCostBreakdown:
    fee = shop_fee(services_subtotal)
    mileage = mileage_cost(costs, rates)
    travel = travel_cost(costs, rates)
    equipment = equipment_cost(costs)
    outside_labor = outside_labor_cost(costs)
    manual = manual_entries_total(costs)
    return AdditionalCostBreakdown(
        shop_fee=fee,
        mileage_cost=mileage,
        travel_cost=travel,
        equipment_cost=equipment,
        outside_labor_cost=outside_labor,
        manual_entries=manual,
        total=math.fsum((fee, mileage, travel, equipment, outside_labor, manual)),
    )


__all__ = [
    "shop_fee",
    "mileage_cost",
    "travel_cost",
    "equipment_cost",
    "outside_labor_cost",
    "manual_entries_total",
    "compute_additional_costs",
]
