from __future__ import annotations

import logging

from .additional import compute_additional_costs
from .aggregator import services_subtotal, totals_from_breakdowns
from .calculator import compute_breakdown
from .models.estimate import EstimateRequest, EstimateTotals

logger = logging.getLogger(__name__)


class EstimateEngine:
    """Prices a full estimate snapshot.

    Every call recomputes from scratch; nothing is cached between calls and the
    request is never modified.
    """

    def estimate(self, request: EstimateRequest) -> EstimateTotals:
        rates = request.rates
        line_items = [compute_breakdown(item, rates) for item in request.items()]
        totals = totals_from_breakdowns(line_items)
        subtotal = services_subtotal(totals)
        additional = compute_additional_costs(request.additional_costs, rates, subtotal)
        grand_total = subtotal + additional.total

        result = EstimateTotals(
            category_totals=totals,
            services_subtotal=subtotal,
            shop_fee=additional.shop_fee,
            mileage_cost=additional.mileage_cost,
            travel_cost=additional.travel_cost,
            equipment_cost=additional.equipment_cost,
            outside_labor_cost=additional.outside_labor_cost,
            additional_costs_total=additional.total,
            grand_total=grand_total,
            line_items=line_items,
        )
        logger.debug(
            "Computed estimate",
            extra={
                "job_name": request.project.job_name,
                "line_items_count": request.item_count,
                "grand_total": grand_total,
            },
        )
        return result


_default_engine = EstimateEngine()


def compute_estimate(request: EstimateRequest) -> EstimateTotals:
    return _default_engine.estimate(request)


__all__ = ["EstimateEngine", "compute_estimate"]
