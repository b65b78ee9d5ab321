import itertools

import pytest

from concrete_estimator.aggregator import category_total, category_totals, services_subtotal, totals_from_breakdowns
from concrete_estimator.calculator import compute_breakdown, compute_cost
from concrete_estimator.models.line_items import (
    Category,
    CoreDrillingItem,
    HandSawItem,
    StandaloneLaborItem,
)
from concrete_estimator.models.rates import RateProfile

RATES = RateProfile(technician_rate=29, laborer_rate=22, mileage_rate=0.8)


def test_empty_category_is_zero():
    assert category_total([], RATES) == 0.0


def test_category_total_sums_item_costs():
    items = [
        CoreDrillingItem(quantity=6, depth_inches=20),
        CoreDrillingItem(quantity=3, depth_inches=7, complexity_pct=15),
    ]
    assert category_total(items, RATES) == pytest.approx(sum(compute_cost(item, RATES) for item in items))


def test_permuting_items_does_not_change_total():
    items = [
        HandSawItem(quantity=1.1, length_feet=3.3, complexity_pct=7),
        HandSawItem(quantity=0.1, length_feet=0.7, complexity_pct=33),
        HandSawItem(quantity=12, length_feet=19.9, complexity_pct=0),
        HandSawItem(quantity=-2, length_feet=5, complexity_pct=100),
    ]
    totals = {category_total(list(order), RATES) for order in itertools.permutations(items)}
    assert len(totals) == 1


def test_category_totals_always_has_every_category():
    totals = category_totals({Category.standalone_labor: [StandaloneLaborItem(hours=2)]}, RATES)

    assert set(totals) == set(Category)
    assert totals[Category.standalone_labor] == pytest.approx(44.0)
    assert totals[Category.core_drilling] == 0.0


def test_services_subtotal_adds_all_categories():
    totals = {category: 10.0 for category in Category}
    assert services_subtotal(totals) == pytest.approx(60.0)
    assert services_subtotal({}) == 0.0


def test_totals_from_breakdowns_match_category_totals():
    items = {
        Category.core_drilling: [CoreDrillingItem(quantity=6, depth_inches=20), CoreDrillingItem(quantity=2, depth_inches=9)],
        Category.hand_saw: [HandSawItem(quantity=1, length_feet=12, complexity_pct=30)],
    }
    breakdowns = [compute_breakdown(item, RATES) for group in items.values() for item in group]

    assert totals_from_breakdowns(breakdowns) == category_totals(items, RATES)
    assert totals_from_breakdowns([]) == {category: 0.0 for category in Category}
