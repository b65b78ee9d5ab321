from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .dictionaries import CATEGORY_LABELS, SHOP_FEE_RATE
from .models.estimate import EstimateRequest, EstimateTotals
from .models.line_items import Category


@dataclass(frozen=True)
class CostShare:
    label: str
    amount: float
    percentage: float


def format_money(amount: float) -> str:
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def cost_shares(totals: EstimateTotals) -> list[CostShare]:
    """Share of each positive cost bucket, for the breakdown chart."""
    buckets = [(CATEGORY_LABELS[category], totals.category_totals[category]) for category in Category]
    buckets.extend(
        [
            ("Shop Fees", totals.shop_fee),
            ("Mileage", totals.mileage_cost),
            ("Travel", totals.travel_cost),
            ("Equipment", totals.equipment_cost),
            ("Outside Labor", totals.outside_labor_cost),
        ]
    )
    positive = [(label, amount) for label, amount in buckets if amount > 0]
    total = math.fsum(amount for _, amount in positive)
    return [
        CostShare(label=label, amount=amount, percentage=round(amount / total * 100, 1))
        for label, amount in positive
    ]


def completion_percentage(request: EstimateRequest, totals: EstimateTotals) -> int:
    score = 0
    if request.project.contractor and request.project.job_name:
        score += 25
    if request.item_count > 0:
        score += 50
    if totals.grand_total > 0:
        score += 25
    return score


def _rows(rows: Sequence[tuple[str, float]]) -> list[str]:
    return [f"- {label}: {format_money(amount)}" for label, amount in rows]


def build_summary(request: EstimateRequest, totals: EstimateTotals) -> str:
    project = request.project
    services = [
        (CATEGORY_LABELS[category], totals.category_totals[category])
        for category in Category
        if totals.category_totals[category] > 0
    ]
    additional = [(f"Shop Fees ({SHOP_FEE_RATE:.0%})", totals.shop_fee)]
    additional.extend(
        (label, amount)
        for label, amount in (
            ("Mileage", totals.mileage_cost),
            ("Travel", totals.travel_cost),
            ("Equipment", totals.equipment_cost),
            ("Outside Labor", totals.outside_labor_cost),
        )
        if amount > 0
    )

    summary_lines = [
        "## Estimate Summary",
        f"- Job: {project.job_name or 'Untitled job'}",
        f"- Contractor: {project.contractor or 'Not set'}",
        f"- Date: {project.estimate_date.isoformat()}",
        f"- Line items: {request.item_count}",
        "",
        "## Services",
        "\n".join(_rows(services)) if services else "- None",
        f"- Services subtotal: {format_money(totals.services_subtotal)}",
        "",
        "## Additional Costs",
        "\n".join(_rows(additional)),
        f"- Additional costs total: {format_money(totals.additional_costs_total)}",
        "",
        f"## Grand Total: {format_money(totals.grand_total)}",
    ]
    return "\n".join(summary_lines)


__all__ = ["CostShare", "format_money", "cost_shares", "completion_percentage", "build_summary"]
