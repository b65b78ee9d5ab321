from datetime import date

import pytest

from concrete_estimator.estimator import compute_estimate
from concrete_estimator.models.additional_costs import AdditionalCosts
from concrete_estimator.models.estimate import EstimateRequest
from concrete_estimator.models.line_items import CoreDrillingItem, StandaloneLaborItem
from concrete_estimator.models.project import ProjectInfo
from concrete_estimator.models.rates import RateProfile
from concrete_estimator.summary import build_summary, completion_percentage, cost_shares, format_money

RATES = RateProfile(technician_rate=29, laborer_rate=22, mileage_rate=0.8)


def _request(**kwargs) -> EstimateRequest:
    return EstimateRequest(
        project=ProjectInfo(
            estimate_date=date(2025, 1, 9),
            contractor="Harbor Civil",
            job_name="Pump room",
        ),
        rates=RATES,
        **kwargs,
    )


def test_format_money():
    assert format_money(0) == "$0.00"
    assert format_money(1234.5) == "$1,234.50"
    assert format_money(-25) == "-$25.00"


def test_summary_lists_only_nonzero_services():
    # 20 ft of drilling at $30/h: 3 h labor ($90) + $50 wear
    request = _request(core_drilling=[CoreDrillingItem(quantity=12, depth_inches=20)])
    request = request.model_copy(update={"rates": RateProfile(technician_rate=30, laborer_rate=22, mileage_rate=0.8)})
    summary = build_summary(request, compute_estimate(request))

    assert "## Estimate Summary" in summary
    assert "- Job: Pump room" in summary
    assert "- Date: 2025-01-09" in summary
    assert "- Core Drilling: $140.00" in summary
    assert "Wall Sawing" not in summary
    assert "- Shop Fees (15%): $21.00" in summary
    assert "Mileage" not in summary
    assert "## Grand Total: $161.00" in summary


def test_summary_without_services():
    request = EstimateRequest(rates=RATES)
    summary = build_summary(request, compute_estimate(request))

    assert "- Job: Untitled job" in summary
    assert "## Services\n- None" in summary
    assert "## Grand Total: $0.00" in summary


def test_cost_shares_skip_zero_buckets():
    request = _request(
        standalone_labor=[StandaloneLaborItem(hours=10)],
        additional_costs=AdditionalCosts(mileage_distance=10),
    )
    shares = {share.label: share for share in cost_shares(compute_estimate(request))}

    # labor 220, shop fee 33, mileage 16
    assert set(shares) == {"Labor", "Shop Fees", "Mileage"}
    assert shares["Labor"].percentage == pytest.approx(81.8)
    assert shares["Mileage"].amount == pytest.approx(16.0)


def test_cost_shares_empty():
    assert cost_shares(compute_estimate(EstimateRequest(rates=RATES))) == []


def test_completion_percentage():
    empty = EstimateRequest(rates=RATES)
    assert completion_percentage(empty, compute_estimate(empty)) == 0

    started = _request()
    assert completion_percentage(started, compute_estimate(started)) == 25

    priced = _request(standalone_labor=[StandaloneLaborItem(hours=1)])
    assert completion_percentage(priced, compute_estimate(priced)) == 100
