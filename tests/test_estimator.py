from pathlib import Path

import pytest

from concrete_estimator.calculator import compute_breakdown
from concrete_estimator.estimator import EstimateEngine, compute_estimate
from concrete_estimator.models.estimate import EstimateRequest
from concrete_estimator.models.line_items import Category, HandSawItem, StandaloneLaborItem
from concrete_estimator.models.rates import RateProfile

FIXTURES = Path(__file__).resolve().parents[1] / "data" / "estimates"
RATES = RateProfile(technician_rate=29, laborer_rate=22, mileage_rate=0.8)


def load_fixture(name: str) -> EstimateRequest:
    fixture_path = FIXTURES / f"{name}.json"
    return EstimateRequest.model_validate_json(fixture_path.read_text(encoding="utf-8"))


def test_empty_estimate_is_zero():
    totals = compute_estimate(EstimateRequest(rates=RATES))

    assert totals.services_subtotal == 0
    assert totals.shop_fee == 0
    assert totals.mileage_cost == 0
    assert totals.additional_costs_total == 0
    assert totals.grand_total == 0
    assert all(value == 0 for value in totals.category_totals.values())
    assert totals.line_items == []


def test_fixture_estimate_totals():
    request = load_fixture("EST-2025-001")
    totals = EstimateEngine().estimate(request)

    assert totals.core_drilling_total == pytest.approx(68.5)
    assert totals.wall_sawing_total == pytest.approx(18.7333, abs=1e-4)
    assert totals.hand_held_chain_saw_total == 0
    assert totals.hand_saw_total == pytest.approx(246.6)
    assert totals.slab_sawing_total == 0
    assert totals.standalone_labor_total == pytest.approx(176.0)
    assert totals.services_subtotal == pytest.approx(509.8333, abs=1e-4)

    assert totals.shop_fee == pytest.approx(76.475, abs=1e-4)
    assert totals.mileage_cost == pytest.approx(80.0)
    assert totals.travel_cost == pytest.approx(102.0)
    assert totals.equipment_cost == pytest.approx(150.0)
    assert totals.outside_labor_cost == 0
    # overtime premium in the fixture is not billed
    assert totals.additional_costs_total == pytest.approx(483.475, abs=1e-4)
    assert totals.grand_total == pytest.approx(993.3083, abs=1e-4)


def test_grand_total_is_exact_sum():
    request = load_fixture("EST-2025-001")
    totals = compute_estimate(request)

    assert totals.grand_total == totals.services_subtotal + totals.additional_costs_total


def test_line_item_breakdowns_follow_request_order():
    request = load_fixture("EST-2025-001")
    totals = compute_estimate(request)

    assert [line.item_id for line in totals.line_items] == ["cd-1", "ws-1", "hs-1", "lb-1"]
    assert totals.line_items[0].description == "4in cores through deck"
    assert sum(line.final_cost for line in totals.line_items) == pytest.approx(totals.services_subtotal)


def test_request_is_not_mutated():
    request = EstimateRequest(
        rates=RATES,
        hand_saw=[HandSawItem(id="a", quantity=2, length_feet=5, complexity_pct=10)],
        standalone_labor=[StandaloneLaborItem(id="b", hours=3)],
    )
    before = request.model_dump()

    compute_estimate(request)
    compute_estimate(request)

    assert request.model_dump() == before


def test_category_order_does_not_matter():
    labor = [StandaloneLaborItem(hours=1.7, complexity_pct=13), StandaloneLaborItem(hours=0.3)]
    saws = [HandSawItem(quantity=3, length_feet=2.2, complexity_pct=40)]

    first = compute_estimate(EstimateRequest(rates=RATES, hand_saw=saws, standalone_labor=labor))
    second = compute_estimate(
        EstimateRequest(rates=RATES, hand_saw=list(reversed(saws)), standalone_labor=list(reversed(labor)))
    )

    assert first.grand_total == second.grand_total
    assert first.category_totals[Category.standalone_labor] == second.category_totals[Category.standalone_labor]


def test_each_item_is_priced_once(monkeypatch):
    from concrete_estimator import estimator

    calls = []

    def counting_breakdown(item, rates):
        calls.append(item.id)
        return compute_breakdown(item, rates)

    monkeypatch.setattr(estimator, "compute_breakdown", counting_breakdown)
    request = load_fixture("EST-2025-001")
    totals = estimator.compute_estimate(request)

    assert calls == ["cd-1", "ws-1", "hs-1", "lb-1"]
    assert totals.core_drilling_total == pytest.approx(68.5)
