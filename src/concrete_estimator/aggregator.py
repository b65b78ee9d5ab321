from __future__ import annotations

import math
from typing import Iterable, Mapping, Sequence

from .calculator import compute_cost
from .models.estimate import ItemCostBreakdown
from .models.line_items import Category, LineItem
from .models.rates import RateProfile


def category_total(items: Iterable[LineItem], rates: RateProfile) -> float:
    # fsum is exactly rounded, so the total does not depend on item order
    return math.fsum(compute_cost(item, rates) for item in items)


def category_totals(
    items_by_category: Mapping[Category, Sequence[LineItem]],
    rates: RateProfile,
) -> dict[Category, float]:
    return {
        category: category_total(items_by_category.get(category, ()), rates)
        for category in Category
    }


def totals_from_breakdowns(breakdowns: Iterable[ItemCostBreakdown]) -> dict[Category, float]:
    """Category totals from already priced lines."""
    costs: dict[Category, list[float]] = {category: [] for category in Category}
    for line in breakdowns:
        costs[line.category].append(line.final_cost)
    return {category: math.fsum(values) for category, values in costs.items()}


def services_subtotal(totals: Mapping[Category, float]) -> float:
    return math.fsum(totals.values())


__all__ = ["category_total", "category_totals", "totals_from_breakdowns", "services_subtotal"]
